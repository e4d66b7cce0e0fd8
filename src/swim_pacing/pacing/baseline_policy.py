"""Baseline pace policy: the original, simpler timing rules.

goal = seconds_per_100 x (rep length / 100) x effort multiplier
rest = fixed seconds per effort tier
interval = round(goal) + rest

No distance drift, pool or equipment factors and no send-off rounding. Kept
for side-by-side comparison with DefaultPacePolicy.
"""

from __future__ import annotations

from swim_pacing.math.rounding import round_half_up
from swim_pacing.models.enums import EFFORT_PACE_MULTIPLIERS, Course, Effort
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.pacing.base import BaselineLookup, PacePolicy
from swim_pacing.pacing.rest_models import FixedSecondsRest


class BaselinePacePolicy(PacePolicy):
    """Effort-only scaling with fixed rest."""

    name = "baseline"

    def __init__(self, effort_multipliers: dict[Effort, float] | None = None) -> None:
        self.rest_model = FixedSecondsRest()
        self.effort_multipliers = dict(
            EFFORT_PACE_MULTIPLIERS if effort_multipliers is None else effort_multipliers
        )

    def goal_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> float:
        self.check_inputs(course, swim_set, rep_index)
        baseline = self.baseline_for(swim_set, baselines)
        return self.base_seconds(swim_set, baseline) * self.effort_multipliers[swim_set.effort]

    def rest_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        self.check_inputs(course, swim_set, rep_index)
        return self.rest_model.seconds_for(swim_set.effort)

    def interval_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        goal = self.goal_seconds(course, swim_set, baselines, rep_index)
        return round_half_up(goal) + self.rest_seconds(course, swim_set, baselines, rep_index)
