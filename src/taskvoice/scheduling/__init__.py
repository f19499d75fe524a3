"""Slot finding, agenda grouping and default reminders."""

from .slots import find_next_slot, commitments_from_tasks
from .agenda import Agenda, group_tasks_by_day
from .reminders import suggest_default_reminders

__all__ = [
    "find_next_slot",
    "commitments_from_tasks",
    "Agenda",
    "group_tasks_by_day",
    "suggest_default_reminders",
]
