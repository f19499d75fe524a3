"""
Data structures for the task parsing and scheduling core.

This module defines the contracts between stages using dataclasses
for type safety, validation, and better IDE support. Every value here is
transient: created per call and owned by the caller.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import ClassVar, List, Optional, Dict, Any, Union
from enum import Enum


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class Priority(Enum):
    """Task priority levels."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class CommandType(str, Enum):
    """Discriminator for Command variants."""
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    COMPLETE = "complete"
    MOVE = "move"
    SEARCH = "search"


class ItemType(str, Enum):
    """Whether a parsed utterance is a to-do or a calendar event."""
    TASK = "task"
    EVENT = "event"


# ============================================================================
# Stage results
# ============================================================================

@dataclass
class ResolvedDateTime:
    """
    Date/time resolver output.

    Attributes:
        instant: Resolved calendar instant, or None if nothing matched
        remaining_text: Input with the matched date and time spans removed
        date_phrase: The date span as written (None if no date matched)
        time_phrase: The time span as written (None if no time matched)
    """
    instant: Optional[datetime]
    remaining_text: str
    date_phrase: Optional[str] = None
    time_phrase: Optional[str] = None

    @property
    def has_date(self) -> bool:
        return self.date_phrase is not None

    @property
    def has_time(self) -> bool:
        return self.time_phrase is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "instant": _iso(self.instant),
            "remaining_text": self.remaining_text,
            "date_phrase": self.date_phrase,
            "time_phrase": self.time_phrase,
        }


@dataclass
class ExtractedAttributes:
    """Attribute extractor output (Stage 2)."""
    priority: Optional[Priority] = None
    duration_minutes: Optional[int] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    remaining_text: str = ""

    def __post_init__(self):
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValueError(
                f"duration_minutes must be positive, got {self.duration_minutes}")


# ============================================================================
# Parsed task attributes
# ============================================================================

@dataclass
class ParsedAttributes:
    """
    Structured attributes of a task described in natural language.

    Attributes:
        title: What remains of the utterance after extraction (never empty)
        priority: Task priority (Medium when none was spoken)
        start: Scheduled start instant
        duration_minutes: Positive duration in minutes
        category: Taxonomy category name
        notes: Free text split off after "notes:"
        tags: #hashtags and @mentions, without the sigil
        recurrence: RFC 5545 RRULE fragment such as "FREQ=WEEKLY;BYDAY=MO"
        item_type: TASK, or EVENT when a time of day or an event word was spoken
        all_day: EVENT on a date without a time of day
        location: Place named after "at" ("at Cafe Roma", "at the gym")
        raw_text: The utterance as received
    """
    title: str
    priority: Priority = Priority.MEDIUM
    start: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    category: Optional[str] = None
    notes: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    recurrence: Optional[str] = None
    item_type: ItemType = ItemType.TASK
    all_day: bool = False
    location: Optional[str] = None
    raw_text: str = ""

    def __post_init__(self):
        """Validate attribute invariants."""
        if not isinstance(self.title, str):
            raise TypeError(f"title must be str, got {type(self.title)}")
        if not self.title.strip() and self.raw_text.strip():
            raise ValueError("title cannot be empty for non-empty input")
        if not isinstance(self.priority, Priority):
            raise TypeError(f"priority must be Priority, got {type(self.priority)}")
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValueError(
                f"duration_minutes must be positive, got {self.duration_minutes}")
        if not isinstance(self.item_type, ItemType):
            raise TypeError(f"item_type must be ItemType, got {type(self.item_type)}")
        if self.all_day and self.item_type is not ItemType.EVENT:
            raise ValueError("all_day is only valid for events")

    @property
    def end(self) -> Optional[datetime]:
        """Start plus duration, when both are known."""
        if self.start is None or self.duration_minutes is None:
            return None
        return self.start + timedelta(minutes=self.duration_minutes)

    @property
    def due(self) -> Optional[datetime]:
        """Due instant of a dated task; events have a start, not a due date."""
        if self.item_type is ItemType.TASK:
            return self.start
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "title": self.title,
            "type": self.item_type.value,
            "priority": self.priority.value,
            "start": _iso(self.start),
            "due": _iso(self.due),
            "all_day": self.all_day,
            "duration_minutes": self.duration_minutes,
            "category": self.category,
            "location": self.location,
            "notes": self.notes,
            "tags": list(self.tags),
            "recurrence": self.recurrence,
            "raw_text": self.raw_text,
        }


@dataclass
class AttributeUpdates:
    """
    Partial ParsedAttributes carried by an edit command.

    Only the fields found in the update text are set.
    """
    title: Optional[str] = None
    priority: Optional[Priority] = None
    start: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    category: Optional[str] = None
    notes: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    recurrence: Optional[str] = None
    location: Optional[str] = None

    def __post_init__(self):
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValueError(
                f"duration_minutes must be positive, got {self.duration_minutes}")

    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        """Only the fields that are present."""
        result: Dict[str, Any] = {}
        if self.title:
            result["title"] = self.title
        if self.priority is not None:
            result["priority"] = self.priority.value
        if self.start is not None:
            result["start"] = self.start.isoformat()
        if self.duration_minutes is not None:
            result["duration_minutes"] = self.duration_minutes
        if self.category:
            result["category"] = self.category
        if self.notes:
            result["notes"] = self.notes
        if self.tags:
            result["tags"] = list(self.tags)
        if self.recurrence:
            result["recurrence"] = self.recurrence
        if self.location:
            result["location"] = self.location
        return result


# ============================================================================
# Commands (tagged variant)
# ============================================================================

@dataclass
class Command:
    """Base class for classified utterances."""
    command_type: ClassVar[CommandType]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.command_type.value}


def _require_target(target: str) -> None:
    if not isinstance(target, str) or not target.strip():
        raise ValueError("Command target cannot be empty")


@dataclass
class CreateCommand(Command):
    """Create a new task from the whole utterance."""
    attributes: ParsedAttributes
    command_type: ClassVar[CommandType] = CommandType.CREATE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.command_type.value, "attributes": self.attributes.to_dict()}


@dataclass
class EditCommand(Command):
    """Apply partial updates to the task referenced by target."""
    target: str
    updates: AttributeUpdates = field(default_factory=AttributeUpdates)
    command_type: ClassVar[CommandType] = CommandType.EDIT

    def __post_init__(self):
        _require_target(self.target)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.command_type.value,
            "target": self.target,
            "updates": self.updates.to_dict(),
        }


@dataclass
class DeleteCommand(Command):
    """Delete the task referenced by target."""
    target: str
    command_type: ClassVar[CommandType] = CommandType.DELETE

    def __post_init__(self):
        _require_target(self.target)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.command_type.value, "target": self.target}


@dataclass
class CompleteCommand(Command):
    """Mark the task referenced by target as done."""
    target: str
    command_type: ClassVar[CommandType] = CommandType.COMPLETE

    def __post_init__(self):
        _require_target(self.target)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.command_type.value, "target": self.target}


@dataclass
class MoveCommand(Command):
    """
    Reschedule the task referenced by target.

    new_date is None when the date text could not be resolved; the raw
    phrase is kept in date_text so the caller can ask again.
    """
    target: str
    new_date: Optional[datetime] = None
    date_text: str = ""
    command_type: ClassVar[CommandType] = CommandType.MOVE

    def __post_init__(self):
        _require_target(self.target)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.command_type.value,
            "target": self.target,
            "new_date": _iso(self.new_date),
            "date_text": self.date_text,
        }


@dataclass
class SearchCommand(Command):
    """List tasks for a resolved date, or for a raw query string."""
    query: Union[datetime, str]
    command_type: ClassVar[CommandType] = CommandType.SEARCH

    @property
    def is_date_query(self) -> bool:
        return isinstance(self.query, datetime)

    def to_dict(self) -> Dict[str, Any]:
        query = self.query.isoformat() if isinstance(self.query, datetime) else self.query
        return {"type": self.command_type.value, "query": query}


# ============================================================================
# Task snapshot & scheduling
# ============================================================================

@dataclass(frozen=True)
class TaskRef:
    """
    Minimal read-only view of a stored task.

    start and duration_minutes are only needed by the scheduler.
    """
    id: Any
    title: str
    start: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    category: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.title, str):
            raise TypeError(f"TaskRef title must be str, got {type(self.title)}")
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValueError(
                f"duration_minutes must be positive, got {self.duration_minutes}")

    @property
    def is_scheduled(self) -> bool:
        return self.start is not None


@dataclass(frozen=True)
class Commitment:
    """An occupied half-open time interval [start, end)."""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(
                f"Commitment end {self.end.isoformat()} is before start {self.start.isoformat()}")

    @classmethod
    def from_task(cls, task: TaskRef) -> Optional["Commitment"]:
        """Derive a commitment from a scheduled task; None if start or duration is missing."""
        if task.start is None or not task.duration_minutes:
            return None
        return cls(start=task.start, end=task.start + timedelta(minutes=task.duration_minutes))

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """True if [start, end) intersects this commitment."""
        return start < self.end and end > self.start


@dataclass(frozen=True)
class WorkWindow:
    """Daily working window searched by the slot scheduler."""
    start_hour: int = 9
    end_hour: int = 17
    granularity_minutes: int = 30

    def __post_init__(self):
        if not 0 <= self.start_hour <= 23:
            raise ValueError(f"start_hour must be 0-23, got {self.start_hour}")
        if not 1 <= self.end_hour <= 24:
            raise ValueError(f"end_hour must be 1-24, got {self.end_hour}")
        if self.start_hour >= self.end_hour:
            raise ValueError(
                f"start_hour ({self.start_hour}) must be before end_hour ({self.end_hour})")
        if self.granularity_minutes <= 0:
            raise ValueError(
                f"granularity_minutes must be positive, got {self.granularity_minutes}")

    @property
    def length_minutes(self) -> int:
        return (self.end_hour - self.start_hour) * 60


@dataclass(frozen=True)
class ReminderSuggestion:
    """A default reminder offered for a parsed item; delivery is the caller's job."""
    offset_minutes: int
    message: str

    def __post_init__(self):
        if self.offset_minutes <= 0:
            raise ValueError(
                f"offset_minutes must be positive, got {self.offset_minutes}")

    def to_dict(self) -> Dict[str, Any]:
        return {"offset_minutes": self.offset_minutes, "message": self.message}
