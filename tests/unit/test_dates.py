"""Tests for expatos/analysis/dates.py — whole-day date arithmetic."""

from datetime import date, datetime, timedelta, timezone

from expatos.analysis.dates import (
    add_months, days_between, days_until_expiry, format_date, is_expired, to_date,
)


class TestDaysBetween:

    def test_exact_days(self):
        assert days_between(date(2025, 1, 1), date(2025, 1, 31)) == 30

    def test_negative_when_end_is_earlier(self):
        assert days_between(date(2025, 1, 31), date(2025, 1, 1)) == -30

    def test_same_day(self):
        assert days_between(date(2025, 1, 1), date(2025, 1, 1)) == 0

    def test_partial_day_rounds_up(self):
        start = datetime(2025, 1, 15, 21, 36, tzinfo=timezone.utc)  # 0.1 days before midnight
        assert days_between(start, date(2025, 1, 16)) == 1

    def test_naive_datetime_treated_as_utc(self):
        naive = datetime(2025, 1, 15, 12, 0)
        aware = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert days_between(naive, date(2025, 2, 1)) == days_between(aware, date(2025, 2, 1))


class TestDaysUntilExpiry:

    def test_future(self):
        assert days_until_expiry(date(2025, 1, 25), date(2025, 1, 15)) == 10

    def test_later_today_counts_as_zero(self):
        now = datetime(2025, 1, 15, 2, 24, tzinfo=timezone.utc)
        assert days_until_expiry(date(2025, 1, 15), now) == 0

    def test_tomorrow_with_time_of_day(self):
        now = datetime(2025, 1, 15, 23, 0, tzinfo=timezone.utc)
        assert days_until_expiry(date(2025, 1, 16), now) == 1


class TestIsExpired:

    def test_expiry_today_is_expired(self):
        assert is_expired(date(2025, 1, 15), date(2025, 1, 15)) is True

    def test_yesterday_is_expired(self):
        assert is_expired(date(2025, 1, 14), date(2025, 1, 15)) is True

    def test_tomorrow_is_not_expired(self):
        assert is_expired(date(2025, 1, 16), date(2025, 1, 15)) is False


class TestAddMonths:

    def test_simple(self):
        assert add_months(date(2025, 11, 15), 3) == date(2026, 2, 15)

    def test_clamps_to_month_end(self):
        assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)

    def test_leap_year(self):
        assert add_months(date(2023, 8, 31), 6) == date(2024, 2, 29)

    def test_year_rollover(self):
        assert add_months(date(2025, 12, 1), 6) == date(2026, 6, 1)


class TestFormatting:

    def test_format_date(self):
        assert format_date(date(2025, 3, 15)) == "March 15, 2025"

    def test_format_date_single_digit_day(self):
        assert format_date(date(2025, 12, 5)) == "December 5, 2025"

    def test_to_date_from_aware_datetime(self):
        dt = datetime(2025, 1, 15, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert to_date(dt) == date(2025, 1, 16)

    def test_to_date_passthrough(self):
        assert to_date(date(2025, 1, 15)) == date(2025, 1, 15)
