"""
Default reminder suggestions.

Events get a heads-up before they start (earlier when there is somewhere
to travel to); dated tasks get one before they are due, earlier for high
priority. Nothing is scheduled or delivered here.
"""
from typing import List

from taskvoice.data_types import ItemType, ParsedAttributes, Priority, ReminderSuggestion

EVENT_LEAD_MINUTES = 15
TRAVEL_LEAD_MINUTES = 30
TASK_LEAD_MINUTES = 30
URGENT_TASK_LEAD_MINUTES = 60


def suggest_default_reminders(item: ParsedAttributes) -> List[ReminderSuggestion]:
    """
    Suggest reminders for a parsed item.

    Returns:
        Zero or one ReminderSuggestion; empty when the item has no start
    """
    if item.start is None:
        return []

    if item.item_type is ItemType.EVENT:
        if item.location:
            return [ReminderSuggestion(
                TRAVEL_LEAD_MINUTES,
                f"Leave for {item.location} in {TRAVEL_LEAD_MINUTES} minutes")]
        return [ReminderSuggestion(
            EVENT_LEAD_MINUTES,
            f"{item.title} starts in {EVENT_LEAD_MINUTES} minutes")]

    offset = URGENT_TASK_LEAD_MINUTES if item.priority is Priority.HIGH else TASK_LEAD_MINUTES
    return [ReminderSuggestion(offset, f'Task "{item.title}" is due soon')]
