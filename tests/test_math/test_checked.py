"""Tests for 64-bit checked canonical arithmetic."""

from __future__ import annotations

import pytest

from swim_pacing.exceptions import CanonicalOverflowError
from swim_pacing.math.checked import (
    CANONICAL_MAX,
    CANONICAL_MIN,
    check_range,
    checked_add,
    checked_mul,
    checked_sub,
)


class TestChecked:
    def test_in_range_passes_through(self) -> None:
        assert checked_add(2, 3) == 5
        assert checked_sub(2, 3) == -1
        assert checked_mul(9144, 100) == 914_400

    def test_bounds_are_inclusive(self) -> None:
        assert check_range(CANONICAL_MAX) == CANONICAL_MAX
        assert check_range(CANONICAL_MIN) == CANONICAL_MIN

    def test_add_overflow(self) -> None:
        with pytest.raises(CanonicalOverflowError):
            checked_add(CANONICAL_MAX, 1)

    def test_sub_underflow(self) -> None:
        with pytest.raises(CanonicalOverflowError):
            checked_sub(CANONICAL_MIN, 1)

    def test_mul_overflow_is_also_overflow_error(self) -> None:
        with pytest.raises(OverflowError):
            checked_mul(CANONICAL_MAX, 2)
