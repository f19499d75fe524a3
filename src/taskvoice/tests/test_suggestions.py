"""Unit tests for voice input suggestions."""
from datetime import datetime

from taskvoice.data_types import TaskRef
from taskvoice.matching import generate_suggestions


MORNING = datetime(2024, 1, 3, 7, 0)
AFTERNOON = datetime(2024, 1, 3, 15, 0)


class TestGenerateSuggestions:
    def test_empty_input(self):
        assert generate_suggestions([], "   ", MORNING) == []

    def test_similar_task(self):
        tasks = [TaskRef(id=1, title="Call mom"), TaskRef(id=2, title="Pay rent")]
        suggestions = generate_suggestions(tasks, "call mo", AFTERNOON)
        task_hints = [s for s in suggestions if s.kind == "task"]
        assert [s.suggestion for s in task_hints] == ['Continue with "Call mom"']
        assert task_hints[0].confidence == 0.8

    def test_threshold_filters_dissimilar(self):
        tasks = [TaskRef(id=1, title="Pay rent")]
        suggestions = generate_suggestions(tasks, "walk dog", AFTERNOON, threshold=90)
        assert all(s.kind != "task" for s in suggestions)

    def test_meeting_time_depends_on_hour(self):
        morning = generate_suggestions([], "client meeting", MORNING)
        afternoon = generate_suggestions([], "client meeting", AFTERNOON)
        assert any(s.suggestion == "Schedule for 10:00 AM" for s in morning)
        assert any(s.suggestion == "Schedule for 2:00 PM" for s in afternoon)

    def test_exercise_time(self):
        early = generate_suggestions([], "workout", datetime(2024, 1, 3, 6, 0))
        late = generate_suggestions([], "workout", AFTERNOON)
        assert any(s.suggestion == "Schedule for 7:00 AM" for s in early)
        assert any(s.suggestion == "Schedule for 6:00 PM" for s in late)

    def test_priority_suggestions(self):
        urgent = generate_suggestions([], "urgent email", AFTERNOON)
        relaxed = generate_suggestions([], "sometime fix bike", AFTERNOON)
        assert urgent[0].suggestion == "Set as High priority"
        assert urgent[0].confidence == 0.9
        assert any(s.suggestion == "Set as Low priority" for s in relaxed)

    def test_category_suggestion(self):
        suggestions = generate_suggestions([], "dentist", AFTERNOON)
        assert suggestions[0].kind == "category"
        assert suggestions[0].suggestion == "Categorize as Health"

    def test_at_most_three_sorted_by_confidence(self):
        tasks = [TaskRef(id=i, title=f"urgent gym workout {i}") for i in range(5)]
        suggestions = generate_suggestions(tasks, "urgent gym workout", AFTERNOON)
        assert len(suggestions) == 3
        confidences = [s.confidence for s in suggestions]
        assert confidences == sorted(confidences, reverse=True)

    def test_to_dict(self):
        data = generate_suggestions([], "urgent", AFTERNOON)[0].to_dict()
        assert data["type"] == "priority"
        assert set(data) == {"type", "suggestion", "confidence", "reasoning"}
