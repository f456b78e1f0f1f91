"""Tests for core.time_utils."""

from datetime import date, datetime, timedelta

import pytz

from core.time_utils import days_since, format_hhmm, relative_label


class TestDaysSince:
    def test_same_day_is_zero(self, fixed_now):
        assert days_since(date(2024, 1, 15), fixed_now) == 0

    def test_iso_string_accepted(self, fixed_now):
        assert days_since("2024-01-01", fixed_now) == 14

    def test_whole_days_are_floored(self):
        now = datetime(2024, 1, 15, 23, 59)
        assert days_since(date(2024, 1, 14), now) == 1

    def test_future_start_is_negative(self, fixed_now):
        assert days_since(date(2024, 1, 16), fixed_now) == -1
        assert days_since(date(2024, 1, 25), fixed_now) == -10

    def test_dates_only(self):
        assert days_since(date(2024, 1, 1), date(2024, 3, 1)) == 60

    def test_localized_timezone(self):
        ist = pytz.timezone("Asia/Kolkata")
        now = ist.localize(datetime(2024, 1, 15, 0, 30))
        assert days_since(date(2024, 1, 15), now) == 0
        assert days_since(date(2023, 1, 15), now) == 365


class TestFormatting:
    def test_format_hhmm(self):
        assert format_hhmm(datetime(2024, 1, 15, 9, 5)) == "09:05"

    def test_relative_label(self, fixed_now):
        assert relative_label(fixed_now - timedelta(seconds=10), fixed_now) == "just now"
        assert relative_label(fixed_now - timedelta(minutes=5), fixed_now) == "5m ago"
        assert relative_label(fixed_now - timedelta(hours=3), fixed_now) == "3h ago"
        assert relative_label(fixed_now - timedelta(hours=26), fixed_now) == "Yesterday"
        assert relative_label(fixed_now - timedelta(days=3), fixed_now) == "3d ago"
        assert relative_label(fixed_now - timedelta(days=30), fixed_now) == "Dec 16"
