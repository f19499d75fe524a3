"""
Unit tests for the attribute extractor.

Priority synonyms, duration units, category taxonomy and tags.
"""
import pytest

from taskvoice.data_types import Priority
from taskvoice.extraction import (
    extract_attributes,
    extract_priority,
    extract_duration,
    detect_category,
    extract_tags,
)


class TestPriority:
    @pytest.mark.parametrize("word,expected", [
        ("urgent", Priority.HIGH),
        ("high", Priority.HIGH),
        ("important", Priority.HIGH),
        ("ASAP", Priority.HIGH),
        ("critical", Priority.HIGH),
        ("normal", Priority.MEDIUM),
        ("medium", Priority.MEDIUM),
        ("low", Priority.LOW),
        ("later", Priority.LOW),
        ("eventually", Priority.LOW),
        ("someday", Priority.LOW),
    ])
    def test_synonyms(self, word, expected):
        priority, remaining = extract_priority(f"file report {word}")
        assert priority == expected
        assert remaining == "file report"

    def test_priority_word_consumed(self):
        priority, remaining = extract_priority("file report high priority")
        assert priority == Priority.HIGH
        assert remaining == "file report"

    def test_leftmost_wins(self):
        priority, remaining = extract_priority("low key but urgent")
        assert priority == Priority.LOW
        assert remaining == "key but urgent"

    def test_whole_words_only(self):
        priority, remaining = extract_priority("highlight the lowdown")
        assert priority is None
        assert remaining == "highlight the lowdown"


class TestDuration:
    @pytest.mark.parametrize("phrase,minutes", [
        ("2h", 120),
        ("45m", 45),
        ("90 minutes", 90),
        ("1 hour", 60),
        ("3 hrs", 180),
        ("30 min", 30),
        ("15 mins", 15),
        ("1.5 hours", 90),
        ("2H", 120),
    ])
    def test_units(self, phrase, minutes):
        duration, remaining = extract_duration(f"deep work {phrase}")
        assert duration == minutes
        assert remaining == "deep work"

    def test_zero_rejected(self):
        duration, remaining = extract_duration("break 0m")
        assert duration is None
        assert remaining == "break 0m"

    def test_plain_number_is_not_duration(self):
        duration, remaining = extract_duration("buy 3 apples")
        assert duration is None
        assert remaining == "buy 3 apples"


class TestCategory:
    @pytest.mark.parametrize("text,category", [
        ("Team meeting", "work"),
        ("dentist appointment", "health"),
        ("buy groceries", "shopping"),
        ("pay insurance bill", "finance"),
        ("book flight", "travel"),
        ("study for exam", "learning"),
        ("dinner with friends", "social"),
        ("clean the garage", "personal"),
    ])
    def test_taxonomy(self, text, category):
        assert detect_category(text) == category

    def test_declared_order_breaks_ties(self):
        # "call" (work) and "doctor" (health): work is declared first
        assert detect_category("call the doctor") == "work"

    def test_no_category(self):
        assert detect_category("water plants") is None

    def test_words_not_substrings(self):
        assert detect_category("recall names") is None


class TestTags:
    def test_hashtags_and_mentions(self):
        tags, remaining = extract_tags("ship release #launch with @sam #launch")
        assert tags == ["launch", "sam"]
        assert remaining == "ship release with"

    def test_email_is_not_a_mention(self):
        tags, remaining = extract_tags("email bob@example.com")
        assert tags == []
        assert remaining == "email bob@example.com"


class TestExtractAttributes:
    def test_combined(self):
        result = extract_attributes("Team meeting high 90m #q1")
        assert result.priority == Priority.HIGH
        assert result.duration_minutes == 90
        assert result.category == "work"
        assert result.tags == ["q1"]
        assert result.remaining_text == "Team meeting"

    def test_category_does_not_consume(self):
        result = extract_attributes("dentist appointment")
        assert result.category == "health"
        assert result.remaining_text == "dentist appointment"

    def test_nothing_found(self):
        result = extract_attributes("water plants")
        assert result.priority is None
        assert result.duration_minutes is None
        assert result.category is None
        assert result.remaining_text == "water plants"
