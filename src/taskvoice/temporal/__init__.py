"""
Temporal package.

Date phrase rules, time-of-day extraction and timezone handling behind a
single resolve_datetime() entry point.
"""

from .resolver import resolve_datetime
from .dates import DATE_RULES, DateRule, find_date, resolve_weekday, resolve_month_day
from .times import TimeOfDay, find_time, parse_time_token
from .timezones import get_timezone, localize_datetime, split_reference

__all__ = [
    "resolve_datetime",
    "DATE_RULES",
    "DateRule",
    "find_date",
    "resolve_weekday",
    "resolve_month_day",
    "TimeOfDay",
    "find_time",
    "parse_time_token",
    "get_timezone",
    "localize_datetime",
    "split_reference",
]
