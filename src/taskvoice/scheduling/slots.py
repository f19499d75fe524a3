"""
Slot Scheduler

Finds the earliest start time for a task of a given duration that fits
inside the daily working window and overlaps no existing commitment.

Search:
- Day 0 starts at max(reference, window start), reference truncated to the
  minute; later days at window start
- Candidates step by window.granularity_minutes
- A candidate is accepted iff it ends by window end and overlaps nothing
- After horizon_days days (today included) the search gives up with None
"""
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence
import logging

from taskvoice.config import config
from taskvoice.data_types import Commitment, TaskRef, WorkWindow
from taskvoice.temporal.timezones import localize_datetime, split_reference

logger = logging.getLogger(__name__)


def commitments_from_tasks(tasks: Iterable[TaskRef]) -> List[Commitment]:
    """Derive commitments from scheduled tasks; tasks without start or duration are skipped."""
    commitments = []
    for task in tasks:
        commitment = Commitment.from_task(task)
        if commitment is not None:
            commitments.append(commitment)
    return commitments


def _is_free(commitments: Sequence[Commitment], start: datetime, end: datetime) -> bool:
    return not any(c.overlaps(start, end) for c in commitments)


def find_next_slot(
    commitments: Sequence[Commitment],
    duration_minutes: int,
    reference: datetime,
    window: Optional[WorkWindow] = None,
    horizon_days: Optional[int] = None
) -> Optional[datetime]:
    """
    Find the earliest free slot.

    Args:
        commitments: Occupied intervals (half-open)
        duration_minutes: Length of the task to place; must be positive
        reference: Earliest acceptable start ("now")
        window: Daily working window (defaults to config.work_window())
        horizon_days: Days to search, today included
            (defaults to config.SCHEDULING_HORIZON_DAYS)

    Returns:
        Start of the first free slot, in the reference's timezone, or None

    Raises:
        ValueError: If duration_minutes is not positive

    Example:
        >>> find_next_slot([], 30, datetime(2024, 1, 3, 10, 10))
        datetime(2024, 1, 3, 10, 10)
    """
    if duration_minutes is None or duration_minutes <= 0:
        raise ValueError(f"duration_minutes must be positive, got {duration_minutes}")

    window = window or config.work_window()
    if horizon_days is None:
        horizon_days = config.SCHEDULING_HORIZON_DAYS

    wall_clock, tz = split_reference(reference)
    wall_clock = wall_clock.replace(second=0, microsecond=0)
    duration = timedelta(minutes=duration_minutes)
    step = timedelta(minutes=window.granularity_minutes)
    first_day = wall_clock.replace(hour=0, minute=0, second=0, microsecond=0)

    for day_offset in range(horizon_days):
        midnight = first_day + timedelta(days=day_offset)
        window_start = midnight + timedelta(hours=window.start_hour)
        window_end = midnight + timedelta(hours=window.end_hour)

        candidate = max(wall_clock, window_start) if day_offset == 0 else window_start
        while candidate + duration <= window_end:
            start = localize_datetime(candidate, tz)
            end = localize_datetime(candidate + duration, tz)
            if _is_free(commitments, start, end):
                logger.debug(
                    "Found free slot",
                    extra={"stage": "scheduling", "output": start.isoformat(), "day_offset": day_offset},
                )
                return start
            candidate += step

    logger.debug(
        f"No free slot within {horizon_days} days",
        extra={"stage": "scheduling", "duration_minutes": duration_minutes},
    )
    return None
