"""
End-to-end tests for the task parse pipeline.

Reference is Wednesday 2024-01-03 10:00.
"""
from datetime import datetime

import pytest

from taskvoice.config import config
from taskvoice.data_types import ItemType, Priority
from taskvoice.pipeline import TaskParsePipeline, parse_task, parse_updates, split_notes


class TestEndToEnd:
    def test_team_meeting_example(self, wednesday):
        attrs = parse_task("Team meeting next Monday 3pm high 90m", wednesday)
        assert attrs.title == "Team meeting"
        assert attrs.priority == Priority.HIGH
        assert attrs.start == datetime(2024, 1, 8, 15, 0)
        assert attrs.duration_minutes == 90
        assert attrs.category == "work"
        assert attrs.end == datetime(2024, 1, 8, 16, 30)

    def test_call_mom(self, wednesday):
        attrs = parse_task("call mom tomorrow at 3pm", wednesday)
        assert attrs.title == "call mom"
        assert attrs.start == datetime(2024, 1, 4, 15, 0)
        assert attrs.priority == Priority.MEDIUM

    def test_dangling_connector_removed(self, wednesday):
        attrs = parse_task("dentist appointment on friday", wednesday)
        assert attrs.title == "dentist appointment"
        assert attrs.category == "health"
        assert attrs.start == datetime(2024, 1, 5)

    def test_recurrence_anchor(self, wednesday):
        attrs = parse_task("standup every monday 9am 15m", wednesday)
        assert attrs.title == "standup"
        assert attrs.recurrence == "FREQ=WEEKLY;BYDAY=MO"
        assert attrs.start == datetime(2024, 1, 8, 9, 0)
        assert attrs.duration_minutes == 15

    def test_notes_and_tags(self, wednesday):
        attrs = parse_task("buy milk #errands notes: the skimmed one, 2 litres", wednesday)
        assert attrs.title == "buy milk"
        assert attrs.tags == ["errands"]
        assert attrs.notes == "the skimmed one, 2 litres"
        assert attrs.start is None

    def test_low_priority_word(self, wednesday):
        attrs = parse_task("clean garage eventually", wednesday)
        assert attrs.title == "clean garage"
        assert attrs.priority == Priority.LOW

    @pytest.mark.parametrize("text,title", [
        ("meeting on monday", "meeting"),
        ("gym session on", "gym session"),
    ])
    def test_on_connector_trimmed(self, wednesday, text, title):
        assert parse_task(text, wednesday).title == title

    def test_emergency_is_high_priority(self, wednesday):
        attrs = parse_task("emergency plumber tomorrow", wednesday)
        assert attrs.priority == Priority.HIGH
        assert attrs.title == "plumber"

    def test_recurrence_adjective_kept_in_title(self, wednesday):
        attrs = parse_task("weekly report friday", wednesday)
        assert attrs.title == "weekly report"
        assert attrs.recurrence == "FREQ=WEEKLY"
        assert attrs.start == datetime(2024, 1, 5)


class TestItemType:
    def test_timed_utterance_is_event(self, wednesday):
        attrs = parse_task("call mom tomorrow at 3pm", wednesday)
        assert attrs.item_type == ItemType.EVENT
        assert attrs.all_day is False
        assert attrs.due is None

    def test_dated_task_has_due(self, wednesday):
        attrs = parse_task("file taxes friday", wednesday)
        assert attrs.item_type == ItemType.TASK
        assert attrs.due == datetime(2024, 1, 5)
        assert attrs.to_dict()["due"] == "2024-01-05T00:00:00"

    def test_event_word_on_date_is_all_day(self, wednesday):
        attrs = parse_task("dentist appointment on friday", wednesday)
        assert attrs.item_type == ItemType.EVENT
        assert attrs.all_day is True

    def test_event_word_without_date(self, wednesday):
        attrs = parse_task("team meeting", wednesday)
        assert attrs.item_type == ItemType.EVENT
        assert attrs.all_day is False
        assert attrs.start is None

    def test_undated_task(self, wednesday):
        attrs = parse_task("buy milk", wednesday)
        assert attrs.item_type == ItemType.TASK
        assert attrs.due is None

    def test_notes_do_not_make_an_event(self, wednesday):
        assert parse_task("buy milk notes: after the meeting", wednesday).item_type == ItemType.TASK


class TestLocation:
    def test_named_place(self, wednesday):
        attrs = parse_task("lunch with Sam at Cafe Roma tomorrow 1pm", wednesday)
        assert attrs.location == "Cafe Roma"
        assert attrs.title == "lunch with Sam"
        assert attrs.start == datetime(2024, 1, 4, 13, 0)

    def test_known_place(self, wednesday):
        attrs = parse_task("workout at the gym 45m", wednesday)
        assert attrs.location == "the gym"
        assert attrs.title == "workout"
        assert attrs.category == "health"

    def test_time_is_not_a_place(self, wednesday):
        assert parse_task("call mom at 3pm", wednesday).location is None

    def test_updates_carry_location(self, wednesday):
        updates = parse_updates("at Home Depot", wednesday)
        assert updates.location == "Home Depot"
        assert updates.title is None


class TestTitleFallback:
    @pytest.mark.parametrize("text", [
        "tomorrow",
        "urgent",
        "3pm",
        "next monday 3pm high 90m",
        "at",
    ])
    def test_title_never_empty(self, wednesday, text):
        attrs = parse_task(text, wednesday)
        assert attrs.title.strip()
        assert attrs.title == text.strip()

    def test_whitespace_only(self, wednesday):
        attrs = parse_task("   ", wednesday)
        assert attrs.title == ""

    def test_raw_text_kept(self, wednesday):
        assert parse_task("  Pay rent  ", wednesday).raw_text == "  Pay rent  "


class TestParseUpdates:
    def test_only_mentioned_fields(self, wednesday):
        updates = parse_updates("tomorrow 2h", wednesday)
        assert updates.start == datetime(2024, 1, 4)
        assert updates.duration_minutes == 120
        assert updates.priority is None
        assert updates.title is None
        assert set(updates.to_dict()) == {"start", "duration_minutes"}

    def test_empty(self, wednesday):
        assert parse_updates("", wednesday).is_empty()


class TestTrace:
    def test_stage_timings_recorded(self, wednesday, monkeypatch):
        monkeypatch.setattr(config, "LOG_PERFORMANCE_METRICS", True)
        trace = {}
        TaskParsePipeline().parse("call mom tomorrow 3pm", wednesday, trace=trace)
        assert set(trace["timings"]) == {
            "notes", "recurrence", "temporal", "attributes", "location", "item_type", "title"}
        assert trace["temporal"]["date_phrase"] == "tomorrow"
        assert trace["remaining_text"] == "call mom"

    def test_timings_disabled(self, wednesday, monkeypatch):
        monkeypatch.setattr(config, "LOG_PERFORMANCE_METRICS", False)
        trace = {}
        TaskParsePipeline().parse("call mom", wednesday, trace=trace)
        assert "timings" not in trace

    def test_custom_connectors(self, wednesday):
        pipeline = TaskParsePipeline(connectors=["with"])
        assert pipeline.parse("lunch with", wednesday).title == "lunch"


class TestSplitNotes:
    def test_split(self):
        assert split_notes("fix bike note: chain") == ("fix bike", "chain")

    def test_no_marker(self):
        assert split_notes("fix bike") == ("fix bike", None)

    def test_empty_notes(self):
        assert split_notes("fix bike notes:") == ("fix bike", None)
