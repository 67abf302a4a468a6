"""Tests for tripcal.domain.validation pure functions."""

from datetime import date, datetime

from tripcal.domain.models import DateRange
from tripcal.domain.validation import validate_date_range

TODAY = date(2024, 3, 1)


class TestValidateDateRange:
    """Tests for validate_date_range."""

    def test_valid_future_range(self) -> None:
        """Should accept an ordered future range."""
        result = validate_date_range(DateRange(date(2024, 3, 10), date(2024, 3, 20)), today=TODAY)

        assert result.is_valid
        assert result.errors == []

    def test_empty_range_is_valid(self) -> None:
        """Should accept an empty range."""
        assert validate_date_range(DateRange(), today=TODAY).is_valid

    def test_partial_range_is_valid(self) -> None:
        """Should accept a future start without an end."""
        assert validate_date_range(DateRange(start_date=date(2024, 3, 10)), today=TODAY).is_valid

    def test_inverted_range(self) -> None:
        """Should reject an end before the start."""
        result = validate_date_range(DateRange(date(2024, 3, 20), date(2024, 3, 10)), today=TODAY)

        assert not result.is_valid
        assert result.errors == ["End date cannot be before start date"]

    def test_past_start(self) -> None:
        """Should reject a start before today."""
        result = validate_date_range(DateRange(start_date=date(2024, 2, 28)), today=TODAY)

        assert result.errors == ["Start date cannot be in the past"]

    def test_start_today_allowed(self) -> None:
        """Should accept a start on today, whatever the time."""
        result = validate_date_range(DateRange(start_date=datetime(2024, 3, 1, 0, 0)), today=TODAY)

        assert result.is_valid

    def test_allow_past_dates(self) -> None:
        """Should accept a past start when allowed."""
        date_range = DateRange(date(2024, 2, 1), date(2024, 2, 5))

        assert validate_date_range(date_range, allow_past_dates=True, today=TODAY).is_valid

    def test_same_day_rejected_by_default(self) -> None:
        """Should reject same-day ranges by default."""
        result = validate_date_range(DateRange(date(2024, 3, 10), datetime(2024, 3, 10, 18, 0)), today=TODAY)

        assert result.errors == ["Start and end dates cannot be the same"]

    def test_same_day_allowed(self) -> None:
        """Should accept same-day ranges when allowed."""
        date_range = DateRange(date(2024, 3, 10), date(2024, 3, 10))

        assert validate_date_range(date_range, allow_same_date=True, today=TODAY).is_valid

    def test_min_date_violations(self) -> None:
        """Should report both endpoints before min_date."""
        date_range = DateRange(date(2024, 3, 5), date(2024, 3, 8))
        result = validate_date_range(date_range, min_date=date(2024, 3, 10), today=TODAY)

        assert result.errors == [
            "Start date cannot be before the minimum allowed date",
            "End date cannot be before the minimum allowed date",
        ]

    def test_max_date_violations(self) -> None:
        """Should report both endpoints after max_date."""
        date_range = DateRange(date(2024, 4, 5), date(2024, 4, 8))
        result = validate_date_range(date_range, max_date=date(2024, 3, 31), today=TODAY)

        assert result.errors == [
            "Start date cannot be after the maximum allowed date",
            "End date cannot be after the maximum allowed date",
        ]

    def test_bounds_are_inclusive(self) -> None:
        """Should accept endpoints on min_date and max_date."""
        date_range = DateRange(date(2024, 3, 10), date(2024, 3, 20))
        result = validate_date_range(date_range, min_date=date(2024, 3, 10), max_date=date(2024, 3, 20), today=TODAY)

        assert result.is_valid

    def test_end_only_checks_bounds(self) -> None:
        """Should check an end date against bounds even without a start."""
        result = validate_date_range(DateRange(end_date=date(2024, 5, 1)), max_date=date(2024, 4, 30), today=TODAY)

        assert result.errors == ["End date cannot be after the maximum allowed date"]

    def test_reports_every_error(self) -> None:
        """Should collect past-start and inverted-order errors together."""
        result = validate_date_range(DateRange(date(2024, 2, 20), date(2024, 2, 10)), today=TODAY)

        assert not result.is_valid
        assert result.errors == [
            "Start date cannot be in the past",
            "End date cannot be before start date",
        ]

    def test_error_order(self) -> None:
        """Should list errors in rule order."""
        date_range = DateRange(date(2024, 2, 20), date(2024, 2, 20))
        result = validate_date_range(
            date_range,
            min_date=date(2024, 2, 25),
            max_date=date(2024, 2, 10),
            today=TODAY,
        )

        assert result.errors == [
            "Start date cannot be in the past",
            "Start date cannot be before the minimum allowed date",
            "Start date cannot be after the maximum allowed date",
            "Start and end dates cannot be the same",
            "End date cannot be before the minimum allowed date",
            "End date cannot be after the maximum allowed date",
        ]
