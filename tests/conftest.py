"""Shared test fixtures: baselines, swimmers and a set factory."""

from __future__ import annotations

from typing import Callable

import pytest

from swim_pacing.models.baseline_pace import BaselinePace
from swim_pacing.models.enums import Course, Effort, LengthUnit, StrokeType
from swim_pacing.models.length import Length
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.models.swimmer import Swimmer
from swim_pacing.models.time_span import TimeSpan


@pytest.fixture
def yard_free_baseline() -> BaselinePace:
    """Freestyle 1:18.00 per 100 yards."""
    return BaselinePace(Length.of_yards(100), TimeSpan.of_minutes_seconds_millis(1, 18, 0))


@pytest.fixture
def meter_free_baseline() -> BaselinePace:
    """Freestyle 1:30.00 per 100 metres."""
    return BaselinePace(Length.of_meters(100), TimeSpan.of_seconds(90.0))


@pytest.fixture
def yard_swimmer(yard_free_baseline: BaselinePace) -> Swimmer:
    """Age-group swimmer with only a freestyle yard baseline."""
    swimmer = Swimmer(first_name="Katie", last_name="Lane", team_name="Dolphins")
    swimmer.update_baseline(StrokeType.FREESTYLE, yard_free_baseline)
    return swimmer


@pytest.fixture
def meter_swimmer(meter_free_baseline: BaselinePace) -> Swimmer:
    """Masters swimmer with freestyle and backstroke metre baselines."""
    swimmer = Swimmer(first_name="Alex", last_name="Reed")
    swimmer.update_baseline(StrokeType.FREESTYLE, meter_free_baseline)
    swimmer.update_baseline(StrokeType.BACKSTROKE, BaselinePace.per_100(100.0, LengthUnit.METERS))
    return swimmer


@pytest.fixture
def set_factory() -> Callable[..., SwimSet]:
    """Factory fixture for SwimSet with sensible defaults.

    Usage:
        swim_set = set_factory(distance=Length.of_yards(50), effort=Effort.SPRINT)
    """

    def factory(**overrides) -> SwimSet:
        defaults = dict(
            stroke=StrokeType.FREESTYLE,
            reps=1,
            distance=Length.of_yards(100),
            effort=Effort.THRESHOLD,
            course=Course.SCY,
        )
        defaults.update(overrides)
        return SwimSet(**defaults)

    return factory
