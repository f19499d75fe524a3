"""Unit tests for time token parsing."""
import pytest

from taskvoice.temporal.times import TimeOfDay, find_time, parse_time_token


class TestParseTimeToken:
    @pytest.mark.parametrize("hour,minute,meridiem,expected", [
        ("3", None, "pm", (15, 0)),
        ("3", "30", "PM", (15, 30)),
        ("12", None, "am", (0, 0)),
        ("12", None, "pm", (12, 0)),
        ("0", "05", None, (0, 5)),
        ("23", "59", None, (23, 59)),
    ])
    def test_valid(self, hour, minute, meridiem, expected):
        parsed = parse_time_token(hour, minute, meridiem)
        assert (parsed.hour, parsed.minute) == expected

    @pytest.mark.parametrize("hour,minute,meridiem", [
        ("24", None, None),
        ("9", "60", None),
        ("13", None, "pm"),
        ("x", None, None),
    ])
    def test_invalid(self, hour, minute, meridiem):
        assert parse_time_token(hour, minute, meridiem) is None


class TestFindTime:
    def test_skips_invalid_candidate(self):
        time_of_day, match = find_time("25 then 7pm")
        assert str(time_of_day) == "19:00"
        assert match.group(0) == "7pm"

    def test_leading_at_consumed(self):
        _, match = find_time("lunch at 12:30")
        assert match.group(0) == "at 12:30"

    def test_no_time(self):
        assert find_time("write 3 days of notes") is None

    def test_time_of_day_validation(self):
        with pytest.raises(ValueError):
            TimeOfDay(24, 0)
