"""
taskvoice - natural-language task capture

Turns free-form utterances into structured task attributes or task
commands, matches spoken task references, and finds free time slots.

Public API:
    parse_task, classify_command, resolve_datetime, extract_attributes,
    match_tasks, find_next_slot
"""

__version__ = "1.0.0"

from taskvoice.data_types import (
    Priority,
    CommandType,
    ItemType,
    ParsedAttributes,
    AttributeUpdates,
    ResolvedDateTime,
    ExtractedAttributes,
    Command,
    CreateCommand,
    EditCommand,
    DeleteCommand,
    CompleteCommand,
    MoveCommand,
    SearchCommand,
    TaskRef,
    Commitment,
    WorkWindow,
    ReminderSuggestion,
)
from taskvoice.temporal import resolve_datetime
from taskvoice.extraction import extract_attributes, extract_recurrence
from taskvoice.pipeline import TaskParsePipeline, parse_task, parse_updates
from taskvoice.commands import classify_command, COMMAND_RULES
from taskvoice.matching import match_tasks, rank_tasks, generate_suggestions
from taskvoice.scheduling import (
    find_next_slot,
    commitments_from_tasks,
    group_tasks_by_day,
    suggest_default_reminders,
)

__all__ = [
    "__version__",
    "Priority",
    "CommandType",
    "ItemType",
    "ParsedAttributes",
    "AttributeUpdates",
    "ResolvedDateTime",
    "ExtractedAttributes",
    "Command",
    "CreateCommand",
    "EditCommand",
    "DeleteCommand",
    "CompleteCommand",
    "MoveCommand",
    "SearchCommand",
    "TaskRef",
    "Commitment",
    "WorkWindow",
    "ReminderSuggestion",
    "resolve_datetime",
    "extract_attributes",
    "extract_recurrence",
    "TaskParsePipeline",
    "parse_task",
    "parse_updates",
    "classify_command",
    "COMMAND_RULES",
    "match_tasks",
    "rank_tasks",
    "generate_suggestions",
    "find_next_slot",
    "commitments_from_tasks",
    "group_tasks_by_day",
    "suggest_default_reminders",
]
