"""
Unit tests for taskvoice.data_types module.

Tests dataclass validation, derived properties and serialization.
"""
from datetime import datetime

import pytest

from taskvoice.data_types import (
    Priority,
    CommandType,
    ItemType,
    ParsedAttributes,
    AttributeUpdates,
    ExtractedAttributes,
    ResolvedDateTime,
    CreateCommand,
    EditCommand,
    DeleteCommand,
    CompleteCommand,
    MoveCommand,
    SearchCommand,
    TaskRef,
    Commitment,
    WorkWindow,
)


class TestPriority:
    """Tests for Priority enum."""

    def test_values(self):
        assert Priority.LOW.value == "Low"
        assert Priority.MEDIUM.value == "Medium"
        assert Priority.HIGH.value == "High"


class TestParsedAttributes:
    """Tests for ParsedAttributes dataclass."""

    def test_defaults(self):
        attrs = ParsedAttributes(title="Buy milk", raw_text="buy milk")
        assert attrs.priority == Priority.MEDIUM
        assert attrs.start is None
        assert attrs.tags == []
        assert attrs.end is None

    def test_empty_title_rejected_for_non_empty_input(self):
        with pytest.raises(ValueError, match="title cannot be empty"):
            ParsedAttributes(title="  ", raw_text="something")

    def test_empty_title_allowed_for_empty_input(self):
        attrs = ParsedAttributes(title="", raw_text="")
        assert attrs.title == ""

    def test_title_type(self):
        with pytest.raises(TypeError, match="title must be str"):
            ParsedAttributes(title=None)

    def test_priority_type(self):
        with pytest.raises(TypeError, match="priority must be Priority"):
            ParsedAttributes(title="x", priority="High")

    @pytest.mark.parametrize("duration", [0, -15])
    def test_duration_must_be_positive(self, duration):
        with pytest.raises(ValueError, match="duration_minutes must be positive"):
            ParsedAttributes(title="x", duration_minutes=duration)

    def test_end(self):
        attrs = ParsedAttributes(title="x", start=datetime(2024, 1, 3, 9, 0), duration_minutes=90)
        assert attrs.end == datetime(2024, 1, 3, 10, 30)

    def test_to_dict(self):
        attrs = ParsedAttributes(
            title="Standup",
            priority=Priority.HIGH,
            start=datetime(2024, 1, 8, 15, 0),
            duration_minutes=15,
            category="work",
            tags=["team"],
        )
        data = attrs.to_dict()
        assert data["priority"] == "High"
        assert data["start"] == "2024-01-08T15:00:00"
        assert data["tags"] == ["team"]
        assert data["notes"] is None
        assert data["type"] == "task"
        assert data["due"] == "2024-01-08T15:00:00"
        assert data["all_day"] is False
        assert data["location"] is None

    def test_all_day_requires_event(self):
        with pytest.raises(ValueError, match="all_day is only valid for events"):
            ParsedAttributes(title="x", all_day=True)

    def test_item_type_checked(self):
        with pytest.raises(TypeError, match="item_type must be ItemType"):
            ParsedAttributes(title="x", item_type="event")

    def test_event_has_no_due(self):
        attrs = ParsedAttributes(
            title="x", item_type=ItemType.EVENT, start=datetime(2024, 1, 8, 15, 0))
        assert attrs.due is None


class TestAttributeUpdates:
    """Tests for AttributeUpdates (partial attributes)."""

    def test_empty(self):
        updates = AttributeUpdates()
        assert updates.is_empty()
        assert updates.to_dict() == {}

    def test_only_present_fields_serialized(self):
        updates = AttributeUpdates(priority=Priority.LOW, duration_minutes=30)
        assert updates.to_dict() == {"priority": "Low", "duration_minutes": 30}
        assert not updates.is_empty()

    def test_duration_validation(self):
        with pytest.raises(ValueError):
            AttributeUpdates(duration_minutes=0)


class TestStageResults:
    """Tests for resolver and extractor outputs."""

    def test_resolved_flags(self):
        resolved = ResolvedDateTime(
            instant=datetime(2024, 1, 4, 0, 0), remaining_text="call mom", date_phrase="tomorrow")
        assert resolved.has_date
        assert not resolved.has_time
        assert resolved.to_dict()["instant"] == "2024-01-04T00:00:00"

    def test_extracted_duration_validation(self):
        with pytest.raises(ValueError):
            ExtractedAttributes(duration_minutes=-1)


class TestCommands:
    """Tests for Command variants."""

    def test_discriminators(self):
        assert CreateCommand(ParsedAttributes(title="x")).command_type == CommandType.CREATE
        assert EditCommand("x").command_type == CommandType.EDIT
        assert DeleteCommand("x").command_type == CommandType.DELETE
        assert CompleteCommand("x").command_type == CommandType.COMPLETE
        assert MoveCommand("x").command_type == CommandType.MOVE
        assert SearchCommand("friday").command_type == CommandType.SEARCH

    @pytest.mark.parametrize("cls", [EditCommand, DeleteCommand, CompleteCommand, MoveCommand])
    def test_target_required(self, cls):
        with pytest.raises(ValueError, match="target cannot be empty"):
            cls("   ")

    def test_delete_to_dict(self):
        assert DeleteCommand("dentist").to_dict() == {"type": "delete", "target": "dentist"}

    def test_move_without_date(self):
        data = MoveCommand("report", date_text="someday").to_dict()
        assert data["new_date"] is None
        assert data["date_text"] == "someday"

    def test_search_query_kinds(self):
        by_date = SearchCommand(datetime(2024, 1, 5))
        by_text = SearchCommand("groceries")
        assert by_date.is_date_query
        assert not by_text.is_date_query
        assert by_date.to_dict()["query"] == "2024-01-05T00:00:00"
        assert by_text.to_dict()["query"] == "groceries"


class TestTaskRef:
    """Tests for TaskRef."""

    def test_minimal(self):
        task = TaskRef(id=1, title="Dentist")
        assert not task.is_scheduled

    def test_frozen(self):
        task = TaskRef(id=1, title="Dentist")
        with pytest.raises(Exception):
            task.title = "Other"

    def test_title_type(self):
        with pytest.raises(TypeError):
            TaskRef(id=1, title=42)


class TestCommitment:
    """Tests for Commitment intervals."""

    def test_from_task(self):
        task = TaskRef(id=1, title="x", start=datetime(2024, 1, 3, 9, 0), duration_minutes=60)
        commitment = Commitment.from_task(task)
        assert commitment.end == datetime(2024, 1, 3, 10, 0)

    def test_from_unscheduled_task(self):
        assert Commitment.from_task(TaskRef(id=1, title="x")) is None
        assert Commitment.from_task(TaskRef(id=1, title="x", start=datetime(2024, 1, 3))) is None

    def test_end_before_start(self):
        with pytest.raises(ValueError):
            Commitment(start=datetime(2024, 1, 3, 10), end=datetime(2024, 1, 3, 9))

    def test_half_open_overlap(self):
        commitment = Commitment(start=datetime(2024, 1, 3, 9), end=datetime(2024, 1, 3, 10))
        assert commitment.overlaps(datetime(2024, 1, 3, 9, 30), datetime(2024, 1, 3, 10, 30))
        # Touching intervals do not overlap
        assert not commitment.overlaps(datetime(2024, 1, 3, 10), datetime(2024, 1, 3, 11))
        assert not commitment.overlaps(datetime(2024, 1, 3, 8), datetime(2024, 1, 3, 9))


class TestWorkWindow:
    """Tests for WorkWindow validation."""

    def test_defaults(self):
        window = WorkWindow()
        assert (window.start_hour, window.end_hour, window.granularity_minutes) == (9, 17, 30)
        assert window.length_minutes == 480

    def test_start_after_end(self):
        with pytest.raises(ValueError, match="must be before"):
            WorkWindow(start_hour=17, end_hour=9)

    def test_granularity(self):
        with pytest.raises(ValueError, match="granularity_minutes"):
            WorkWindow(granularity_minutes=0)
