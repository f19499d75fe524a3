"""
Date phrase rules.

Each rule is a compiled pattern plus a function that turns the match into a
calendar date relative to the reference day. Rules are tried in DATE_RULES
order; the first rule whose pattern matches AND yields a valid date wins and
its span is consumed.
"""
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, List, Optional, Tuple

from taskvoice.config.temporal import (
    RELATIVE_DAY_OFFSETS,
    WEEK_OFFSET_DAYS,
    WEEKDAY_TO_NUMBER,
    MONTH_TO_NUMBER,
    WeekdayQualifier,
    alternation,
)

_WEEKDAYS = alternation(WEEKDAY_TO_NUMBER)
_MONTHS = alternation(MONTH_TO_NUMBER)


@dataclass(frozen=True)
class DateRule:
    """One date phrase pattern and how to turn its match into a date."""
    name: str
    pattern: re.Pattern
    resolve: Callable[[re.Match, date], Optional[date]]


# -------------------------------------------------------------------
# Weekday arithmetic
# -------------------------------------------------------------------

def resolve_weekday(today: date, target: int, qualifier: WeekdayQualifier) -> date:
    """
    Resolve a weekday number (Monday=0) relative to today.

    - BARE: next occurrence on or after today (today counts)
    - THIS: this week's occurrence if not yet passed, else next week's;
      today counts as not passed, so this matches BARE
    - NEXT: the occurrence in the following week (weeks start on Monday),
      never today and never later this week
    """
    current = today.weekday()
    if qualifier is WeekdayQualifier.NEXT:
        days_ahead = (7 - current) + target
    else:
        days_ahead = (target - current) % 7
    return today + timedelta(days=days_ahead)


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def resolve_month_day(today: date, month: int, day: int) -> Optional[date]:
    """
    Resolve month/day to this year's date, or next year's if already passed.

    Returns None for dates that do not exist (February 30, or February 29
    when neither this nor next year's rollover target is valid).
    """
    candidate = _safe_date(today.year, month, day)
    if candidate is not None and candidate >= today:
        return candidate
    rolled = _safe_date(today.year + 1, month, day)
    if rolled is not None:
        return rolled
    return None


# -------------------------------------------------------------------
# Rule resolvers
# -------------------------------------------------------------------

def _relative_day(match: re.Match, today: date) -> Optional[date]:
    phrase = re.sub(r"\s+", " ", match.group(1).lower())
    return today + timedelta(days=RELATIVE_DAY_OFFSETS[phrase])


def _in_n_days(match: re.Match, today: date) -> Optional[date]:
    return today + timedelta(days=int(match.group(1)))


def _next_week(match: re.Match, today: date) -> Optional[date]:
    return today + timedelta(days=WEEK_OFFSET_DAYS)


def _weekday(qualifier: WeekdayQualifier) -> Callable[[re.Match, date], Optional[date]]:
    def _resolve(match: re.Match, today: date) -> Optional[date]:
        target = WEEKDAY_TO_NUMBER[match.group("weekday").lower()]
        return resolve_weekday(today, target, qualifier)
    return _resolve


def _month_name_day(match: re.Match, today: date) -> Optional[date]:
    month = MONTH_TO_NUMBER[match.group("month").lower()]
    return resolve_month_day(today, month, int(match.group("day")))


def _numeric_month_day(match: re.Match, today: date) -> Optional[date]:
    month, day = int(match.group("month")), int(match.group("day"))
    if not 1 <= month <= 12:
        return None
    return resolve_month_day(today, month, day)


_RELATIVE = alternation(RELATIVE_DAY_OFFSETS).replace(r"\ ", r"\s+")

DATE_RULES: List[DateRule] = [
    DateRule(
        name="relative_day",
        pattern=re.compile(rf"\b({_RELATIVE})\b", re.IGNORECASE),
        resolve=_relative_day,
    ),
    DateRule(
        name="in_n_days",
        pattern=re.compile(r"\bin\s+(\d{1,4})\s+days?\b", re.IGNORECASE),
        resolve=_in_n_days,
    ),
    DateRule(
        name="next_week",
        pattern=re.compile(r"\b(?:next\s+week|in\s+a\s+week)\b", re.IGNORECASE),
        resolve=_next_week,
    ),
    DateRule(
        name="next_weekday",
        pattern=re.compile(rf"\bnext\s+(?P<weekday>{_WEEKDAYS})\b", re.IGNORECASE),
        resolve=_weekday(WeekdayQualifier.NEXT),
    ),
    DateRule(
        name="this_weekday",
        pattern=re.compile(rf"\bthis\s+(?P<weekday>{_WEEKDAYS})\b", re.IGNORECASE),
        resolve=_weekday(WeekdayQualifier.THIS),
    ),
    DateRule(
        name="weekday",
        pattern=re.compile(rf"\b(?P<weekday>{_WEEKDAYS})\b", re.IGNORECASE),
        resolve=_weekday(WeekdayQualifier.BARE),
    ),
    DateRule(
        name="month_day",
        pattern=re.compile(
            rf"\b(?P<month>{_MONTHS})\.?\s+(?P<day>\d{{1,2}})(?:st|nd|rd|th)?\b",
            re.IGNORECASE,
        ),
        resolve=_month_name_day,
    ),
    DateRule(
        name="numeric_month_day",
        pattern=re.compile(r"\b(?P<month>\d{1,2})[/\-](?P<day>\d{1,2})\b"),
        resolve=_numeric_month_day,
    ),
]


def find_date(text: str, today: date) -> Optional[Tuple[date, re.Match, DateRule]]:
    """
    Find the first date phrase in text.

    Returns:
        (resolved date, match, rule) or None if no rule produced a valid date
    """
    for rule in DATE_RULES:
        match = rule.pattern.search(text)
        if match is None:
            continue
        resolved = rule.resolve(match, today)
        if resolved is not None:
            return resolved, match, rule
    return None
