"""Tests for the PacingEngine facade and per-set pacing."""

from __future__ import annotations

import logging

import pytest

from swim_pacing.exceptions import MissingBaselineError
from swim_pacing.models.enums import Course, Effort, StrokeType
from swim_pacing.models.length import Length
from swim_pacing.pacing import (
    BaselinePacePolicy,
    DefaultPacePolicy,
    FixedSecondsRest,
    PacingEngine,
    PercentOfGoalRest,
    goal_seconds,
    interval_seconds,
    rest_seconds,
)


class TestEngine:
    def test_default_policy(self) -> None:
        engine = PacingEngine()
        assert isinstance(engine.policy, DefaultPacePolicy)
        assert isinstance(engine.policy.rest_model, PercentOfGoalRest)

    def test_delegates_to_policy(self, yard_swimmer, set_factory) -> None:
        engine = PacingEngine(BaselinePacePolicy())
        swim_set = set_factory(distance=Length.of_yards(50), effort=Effort.RACE_PACE)
        baselines = yard_swimmer.baselines
        assert engine.goal_seconds(Course.SCY, swim_set, baselines) == pytest.approx(38.22)
        assert engine.rest_seconds(Course.SCY, swim_set, baselines) == 30
        assert engine.interval_seconds(Course.SCY, swim_set, baselines) == 68

    def test_module_level_functions_use_default_policy(self, yard_swimmer, set_factory) -> None:
        swim_set = set_factory(distance=Length.of_yards(50), effort=Effort.RACE_PACE)
        baselines = yard_swimmer.baselines
        assert goal_seconds(Course.SCY, swim_set, baselines) == pytest.approx(35.9268)
        assert rest_seconds(Course.SCY, swim_set, baselines) == 27
        assert interval_seconds(Course.SCY, swim_set, baselines) == 65

    def test_pure_between_calls(self, yard_swimmer, set_factory) -> None:
        engine = PacingEngine()
        swim_set = set_factory()
        first = engine.interval_seconds(Course.SCY, swim_set, yard_swimmer.baselines)
        for _ in range(5):
            assert engine.interval_seconds(Course.SCY, swim_set, yard_swimmer.baselines) == first


class TestPaceSet:
    def test_every_rep_paced(self, yard_swimmer, set_factory) -> None:
        engine = PacingEngine(DefaultPacePolicy(rest_model=FixedSecondsRest()))
        swim_set = set_factory(reps=4, distance=Length.of_yards(50), effort=Effort.RACE_PACE)
        pacing = engine.pace_set(Course.SCY, swim_set, yard_swimmer.baselines)

        assert [rep.rep_index for rep in pacing.reps] == [1, 2, 3, 4]
        assert all(rep.interval_seconds == 65 for rep in pacing.reps)
        assert all(rep.rest_seconds == 30 for rep in pacing.reps)
        assert pacing.total_seconds == 260
        assert pacing.total_swim_seconds == pytest.approx(4 * 35.9268)
        assert pacing.total_distance == Length.of_yards(200)
        assert pacing.timing_label == "rest :30"

    def test_missing_baseline_propagates(self, yard_swimmer, set_factory) -> None:
        swim_set = set_factory(stroke=StrokeType.BUTTERFLY, reps=3)
        with pytest.raises(MissingBaselineError):
            PacingEngine().pace_set(Course.SCY, swim_set, yard_swimmer.baselines)

    def test_course_change_repaces(self, meter_swimmer, set_factory) -> None:
        engine = PacingEngine(DefaultPacePolicy(rest_model=FixedSecondsRest()))
        swim_set = set_factory(distance=Length.of_meters(73), course=Course.SCM)
        assert swim_set.distance == Length.of_meters(75)

        swim_set.course = Course.LCM
        pacing = engine.pace_set(Course.LCM, swim_set, meter_swimmer.baselines)
        assert pacing.total_distance == Length.of_meters(100)
        # 90 x 1.00 threshold x 1.00 drift x 1.07 LCM
        assert pacing.reps[0].goal_seconds == pytest.approx(96.3)

    def test_logs_at_debug(self, yard_swimmer, set_factory, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="swim_pacing"):
            PacingEngine().pace_set(Course.SCY, set_factory(), yard_swimmer.baselines)
        assert any("Multiplier chain" in r.message for r in caplog.records)
        assert any("default policy" in r.message for r in caplog.records)
