"""Tests for the piecewise-linear rest-percent curve."""

from __future__ import annotations

import pytest

from swim_pacing.math.rest_curve import distance_ratio, rest_percent
from swim_pacing.models.enums import EFFORT_REST_PERCENT_CURVE, Effort


class TestDistanceRatio:
    def test_floor(self) -> None:
        assert distance_ratio(5.0) == 0.1
        assert distance_ratio(0.0) == 0.1

    def test_hundreds(self) -> None:
        assert distance_ratio(250.0) == pytest.approx(2.5)


class TestRestPercent:
    @pytest.mark.parametrize("effort", list(Effort))
    def test_flat_below_first_breakpoint(self, effort: Effort) -> None:
        short, _ = EFFORT_REST_PERCENT_CURVE[effort]
        assert rest_percent(effort, 0.1) == pytest.approx(short)
        assert rest_percent(effort, 0.5) == pytest.approx(short)
        assert rest_percent(effort, 1.0) == pytest.approx(short)

    @pytest.mark.parametrize("effort", list(Effort))
    def test_flat_above_second_breakpoint(self, effort: Effort) -> None:
        _, long = EFFORT_REST_PERCENT_CURVE[effort]
        assert rest_percent(effort, 4.0) == pytest.approx(long)
        assert rest_percent(effort, 15.0) == pytest.approx(long)

    def test_linear_between_breakpoints(self) -> None:
        # SPRINT: 2.00 at r=1, 0.30 at r=4 -> midpoint r=2.5 gives 1.15
        assert rest_percent(Effort.SPRINT, 2.5) == pytest.approx(1.15)
        assert rest_percent(Effort.EASY, 2.0) == pytest.approx(0.20 - 0.10 / 3)

    @pytest.mark.parametrize("effort", list(Effort))
    def test_tapers_with_distance(self, effort: Effort) -> None:
        assert rest_percent(effort, 1.0) >= rest_percent(effort, 2.0) >= rest_percent(effort, 4.0)

    def test_harder_efforts_rest_more_on_short_reps(self) -> None:
        values = [rest_percent(e, 1.0) for e in Effort]
        assert values == sorted(values)
