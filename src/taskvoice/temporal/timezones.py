"""
Timezone helpers for the temporal resolver and the slot scheduler.

Date arithmetic is done on naive wall-clock values; results are attached to
the caller's zone afterwards so pytz zones stay DST-correct.
"""
from datetime import datetime, tzinfo
from typing import Optional, Tuple, Union
import logging

import pytz

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, tzinfo, None]


def get_timezone(timezone_str: str) -> tzinfo:
    """
    Get timezone object for an IANA name.

    Unknown names are logged and fall back to UTC.
    """
    try:
        return pytz.timezone(timezone_str)
    except pytz.UnknownTimeZoneError:
        logger.warning(
            f"Unknown timezone '{timezone_str}', falling back to UTC",
            extra={"timezone": timezone_str},
        )
        return pytz.UTC


def _coerce_timezone(timezone: TimezoneLike) -> Optional[tzinfo]:
    if timezone is None:
        return None
    if isinstance(timezone, str):
        return get_timezone(timezone)
    return timezone


def localize_datetime(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    """Attach tz to a naive wall-clock datetime (no-op when tz is None)."""
    if tz is None:
        return dt
    if dt.tzinfo is not None:
        return dt.astimezone(tz)
    # Handle pytz vs zoneinfo
    if hasattr(tz, "localize"):
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)


def split_reference(
    reference: datetime,
    timezone: TimezoneLike = None
) -> Tuple[datetime, Optional[tzinfo]]:
    """
    Split a reference instant into (naive wall clock, zone).

    With a timezone, an aware reference is converted into it and a naive one
    is taken as already expressed in it. Without one, the reference keeps its
    own tzinfo (possibly None).
    """
    tz = _coerce_timezone(timezone)
    if tz is not None:
        if reference.tzinfo is not None:
            reference = reference.astimezone(tz)
        return reference.replace(tzinfo=None), tz

    own_tz = reference.tzinfo
    if own_tz is not None and getattr(own_tz, "zone", None):
        # pytz tzinfo carries a fixed offset; re-resolve by name so that
        # later localize() calls pick the right DST offset.
        own_tz = pytz.timezone(own_tz.zone)
    return reference.replace(tzinfo=None), own_tz
