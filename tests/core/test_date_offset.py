"""
Test suite for the date offset resolver.

System role: Verification of due date arithmetic
"""

from datetime import date

import pytest

from studio.core.timeline.date_offset import resolve


class TestResolve:
    """Test suite for resolve()."""

    def test_zero_offset_should_return_session_date(self) -> None:
        assert resolve(date(2024, 6, 15), 0) == date(2024, 6, 15)

    def test_negative_offset_should_count_back_across_month(self) -> None:
        assert resolve(date(2024, 6, 15), -30) == date(2024, 5, 16)

    def test_positive_offset_should_count_forward(self) -> None:
        assert resolve(date(2024, 6, 15), 14) == date(2024, 6, 29)

    def test_should_cross_year_boundary(self) -> None:
        assert resolve(date(2024, 12, 20), 14) == date(2025, 1, 3)
        assert resolve(date(2025, 1, 5), -10) == date(2024, 12, 26)

    def test_should_handle_leap_day(self) -> None:
        assert resolve(date(2024, 2, 28), 1) == date(2024, 2, 29)
        assert resolve(date(2023, 2, 28), 1) == date(2023, 3, 1)

    @pytest.mark.parametrize("offset", [-400, -31, -1, 0, 1, 29, 365, 1000])
    @pytest.mark.parametrize("session_date", [date(2024, 1, 31), date(2024, 2, 29), date(2023, 12, 31)])
    def test_opposite_offset_should_restore_date(self, session_date: date, offset: int) -> None:
        assert resolve(resolve(session_date, offset), -offset) == session_date

    def test_should_be_deterministic(self) -> None:
        assert resolve(date(2024, 6, 15), -7) == resolve(date(2024, 6, 15), -7)
