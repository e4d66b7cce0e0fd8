"""Tests for half-up rounding and send-off step rounding."""

from __future__ import annotations

import pytest

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.math.rounding import round_half_up, round_to_step


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(38.22, 38), (38.5, 39), (39.5, 40), (0.49, 0), (2.5, 3)],
    )
    def test_ties_go_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value: float) -> None:
        with pytest.raises(InvalidArgumentError):
            round_half_up(value)


class TestRoundToStep:
    @pytest.mark.parametrize(
        "raw, expected",
        [(65, 65), (66, 65), (67, 65), (68, 70), (69, 70), (70, 70), (0, 0), (3, 5), (2, 0)],
    )
    def test_five_second_send_offs(self, raw: int, expected: int) -> None:
        assert round_to_step(raw, 5) == expected

    def test_step_of_one_is_identity(self) -> None:
        assert round_to_step(67, 1) == 67

    def test_ten_second_step(self) -> None:
        assert round_to_step(84, 10) == 80
        assert round_to_step(85, 10) == 90

    @pytest.mark.parametrize("step", [0, -5])
    def test_non_positive_step_rejected(self, step: int) -> None:
        with pytest.raises(InvalidArgumentError):
            round_to_step(60, step)
