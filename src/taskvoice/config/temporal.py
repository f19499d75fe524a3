# taskvoice/config/temporal.py
import re
from enum import Enum

# ----------------------------
# Relative day phrases → offset (days)
# ----------------------------
# Longest phrase first: "day after tomorrow" must not be read as "tomorrow".
RELATIVE_DAY_OFFSETS = {
    "day after tomorrow": 2,
    "tomorrow": 1,
    "today": 0,
}

# "next week" / "in a week"
WEEK_OFFSET_DAYS = 7

# ----------------------------
# Weekdays (Monday = 0, matching datetime.weekday())
# ----------------------------
WEEKDAY_TO_NUMBER = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tue": 1, "tues": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thu": 3, "thur": 3, "thurs": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

# RFC 5545 BYDAY codes, same indexing as WEEKDAY_TO_NUMBER
WEEKDAY_RRULE_CODES = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")

# ----------------------------
# Months (January = 1)
# ----------------------------
MONTH_TO_NUMBER = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}


# ----------------------------
# Weekday qualifiers
# ----------------------------
class WeekdayQualifier(str, Enum):
    BARE = "bare"
    THIS = "this"
    NEXT = "next"


# ----------------------------
# Time-of-day bounds
# ----------------------------
MAX_HOUR = 23
MAX_MINUTE = 59


def alternation(words) -> str:
    """Regex alternation of words, longest first so prefixes never shadow."""
    return "|".join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))
