"""
Date/Time Expression Resolver

Extracts one calendar instant from free text relative to a reference "now".

Strategy:
1. Try the date rules in order; the first valid match wins and its span is removed
2. Scan the remaining text once for a time of day; its span (with a leading "at") is removed
3. Combine: date only → 00:00, time only → reference day, neither → no instant
4. Localize the result in the requested timezone (pytz)
"""
from datetime import datetime, time
from typing import Optional
import logging

from taskvoice.data_types import ResolvedDateTime
from taskvoice.extraction.normalization import collapse_whitespace, remove_span
from taskvoice.temporal.dates import find_date
from taskvoice.temporal.times import find_time
from taskvoice.temporal.timezones import TimezoneLike, localize_datetime, split_reference

logger = logging.getLogger(__name__)


def resolve_datetime(
    text: str,
    reference: datetime,
    timezone: TimezoneLike = None
) -> ResolvedDateTime:
    """
    Resolve the date/time expression in text.

    Args:
        text: Utterance (any casing; the remainder keeps the caller's casing)
        reference: The "now" that relative phrases are measured from
        timezone: Optional IANA name or tzinfo. Without it the reference's own
            tzinfo (possibly none) is used.

    Returns:
        ResolvedDateTime with the instant (or None) and the remaining text

    Example:
        >>> resolve_datetime("call mom tomorrow 3pm", datetime(2024, 1, 3, 10, 0))
        ResolvedDateTime(instant=datetime(2024, 1, 4, 15, 0), remaining_text='call mom', ...)
    """
    remaining = collapse_whitespace(text or "")
    if not remaining:
        return ResolvedDateTime(instant=None, remaining_text="")

    wall_clock, tz = split_reference(reference, timezone)
    today = wall_clock.date()

    resolved_date = None
    date_phrase = None
    date_hit = find_date(remaining, today)
    if date_hit is not None:
        resolved_date, match, rule = date_hit
        date_phrase = match.group(0)
        remaining = remove_span(remaining, match.start(), match.end())
        logger.debug(
            f"Date rule '{rule.name}' matched '{date_phrase}'",
            extra={"stage": "temporal", "rule": rule.name, "date": resolved_date.isoformat()},
        )

    resolved_time = None
    time_phrase = None
    time_hit = find_time(remaining)
    if time_hit is not None:
        resolved_time, match = time_hit
        time_phrase = match.group(0)
        remaining = remove_span(remaining, match.start(), match.end())

    if resolved_date is None and resolved_time is None:
        return ResolvedDateTime(instant=None, remaining_text=remaining)

    day = resolved_date if resolved_date is not None else today
    clock = time(resolved_time.hour, resolved_time.minute) if resolved_time else time(0, 0)
    instant = localize_datetime(datetime.combine(day, clock), tz)

    return ResolvedDateTime(
        instant=instant,
        remaining_text=remaining,
        date_phrase=date_phrase,
        time_phrase=time_phrase,
    )
