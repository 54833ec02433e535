"""Unit tests for calendar-day keys.

Run with: pytest tests/test_dates.py -v
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from planning.domain.dates import to_date_key, to_display_date


class TestToDateKey:
    """Tests for to_date_key."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2025-06-18T10:00:00Z", "2025-06-18"),
            ("2025-06-18T23:59:59+05:00", "2025-06-18"),
            ("2025-06-18", "2025-06-18"),
            ("2025-06-18 10:00:00", "2025-06-18"),
        ],
    )
    def test_takes_lexical_day_prefix(self, value, expected):
        """The day is read from the text before the T separator."""
        assert to_date_key(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_values_have_no_key(self, value):
        assert to_date_key(value) is None

    def test_aware_datetime_keeps_its_own_day(self):
        """No conversion to UTC or local time happens."""
        late_evening = datetime(2025, 6, 18, 23, 30, tzinfo=timezone(timedelta(hours=-7)))
        assert to_date_key(late_evening) == "2025-06-18"

    def test_date_value(self):
        assert to_date_key(date(2025, 1, 2)) == "2025-01-02"

    @pytest.mark.parametrize("value", ["2025-06-18T10:00:00Z", "2024-02-29", datetime(2025, 12, 31, 8)])
    def test_is_idempotent(self, value):
        key = to_date_key(value)
        assert to_date_key(f"{key}T00:00:00") == key


class TestToDisplayDate:
    """Tests for to_display_date."""

    def test_builds_calendar_date_from_key(self):
        assert to_display_date("2025-06-18T00:00:00Z") == date(2025, 6, 18)

    def test_late_utc_offset_does_not_drift(self):
        assert to_display_date("2025-06-18T23:00:00-08:00") == date(2025, 6, 18)

    @pytest.mark.parametrize("value", [None, "", "not-a-date", "2025-13-40"])
    def test_unusable_values_return_none(self, value):
        assert to_display_date(value) is None
