"""
Time-of-day extraction.

"3pm", "3:30 pm", "at 15:30", "at 9" → (hour, minute). A bare hour without
am/pm is read as a 24-hour value. Numbers followed by a duration unit
("45m", "2 hours") are durations, not times, and are skipped.
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from taskvoice.config.temporal import MAX_HOUR, MAX_MINUTE, alternation
from taskvoice.config.vocabulary import get_duration_units

# Day/week counts are never times either ("3 days").
_EXTRA_UNITS = ("d", "day", "days", "wk", "week", "weeks")


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minute: int

    def __post_init__(self):
        if not (0 <= self.hour <= MAX_HOUR and 0 <= self.minute <= MAX_MINUTE):
            raise ValueError(f"Invalid time of day {self.hour}:{self.minute:02d}")

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def parse_time_token(
    hour_str: str,
    minute_str: Optional[str],
    meridiem: Optional[str]
) -> Optional[TimeOfDay]:
    """Convert a time token to a 24h TimeOfDay, or None if out of range."""
    try:
        hour = int(hour_str)
        minute = int(minute_str) if minute_str is not None else 0
    except ValueError:
        return None
    if meridiem:
        mer = meridiem.lower()
        if hour > 12:
            return None
        if mer == "pm" and hour != 12:
            hour += 12
        if mer == "am" and hour == 12:
            hour = 0
    if not (0 <= hour <= MAX_HOUR and 0 <= minute <= MAX_MINUTE):
        return None
    return TimeOfDay(hour, minute)


@lru_cache(maxsize=8)
def _compile_time_pattern(units: Tuple[str, ...]) -> re.Pattern:
    return re.compile(
        r"(?:\bat\s+)?"
        r"(?<![\w.:/\-])(?P<hour>\d{1,2})"
        r"(?::(?P<minute>\d{2}))?"
        r"(?:\s*(?P<meridiem>am|pm)\b)?"
        rf"(?!\w|[.:/\-]\d|\s*(?:{alternation(units)})\b)",
        re.IGNORECASE,
    )


def get_time_pattern() -> re.Pattern:
    """Time pattern with the configured duration units excluded."""
    units = get_duration_units()
    words = tuple(sorted(set(units["minutes"] + units["hours"] + list(_EXTRA_UNITS))))
    return _compile_time_pattern(words)


def find_time(text: str) -> Optional[Tuple[TimeOfDay, re.Match]]:
    """
    Find the first valid time of day in text.

    Candidates that fail range validation ("25:00", "13pm") are skipped
    and stay in the text.
    """
    for match in get_time_pattern().finditer(text):
        time_of_day = parse_time_token(
            match.group("hour"), match.group("minute"), match.group("meridiem"))
        if time_of_day is not None:
            return time_of_day, match
    return None
