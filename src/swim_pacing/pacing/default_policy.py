"""Default pace policy: full multiplier chain.

goal = seconds_per_100 x (rep length / 100)
       x effort multiplier
       x distance drift (threshold and above, else 1.0)
       x course multiplier
       x product of equipment multipliers

rest comes from the configured RestModel (percent-of-goal unless told
otherwise); interval = round(goal) + rest, rounded to the send-off step.
"""

from __future__ import annotations

import logging

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.math.factors import (
    course_multiplier,
    distance_drift_multiplier,
    drift_applies,
    equipment_multiplier,
)
from swim_pacing.math.rounding import round_half_up, round_to_step
from swim_pacing.models.enums import (
    EFFORT_PACE_MULTIPLIERS,
    SEND_OFF_STEP_SECONDS,
    Course,
    Effort,
)
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.pacing.base import BaselineLookup, PacePolicy
from swim_pacing.pacing.rest_models import PercentOfGoalRest, RestModel

logger = logging.getLogger(__name__)


class DefaultPacePolicy(PacePolicy):
    """Shipped policy: effort x drift x course x equipment against the baseline."""

    name = "default"

    def __init__(
        self,
        rest_model: RestModel | None = None,
        effort_multipliers: dict[Effort, float] | None = None,
        send_off_step: int = SEND_OFF_STEP_SECONDS,
    ) -> None:
        if isinstance(send_off_step, bool) or not isinstance(send_off_step, int) or send_off_step <= 0:
            raise InvalidArgumentError(
                f"send_off_step must be a positive int, got {send_off_step!r}"
            )
        self.rest_model = rest_model if rest_model is not None else PercentOfGoalRest()
        self.effort_multipliers = dict(
            EFFORT_PACE_MULTIPLIERS if effort_multipliers is None else effort_multipliers
        )
        self.send_off_step = send_off_step

    def multiplier_chain(self, course: Course, swim_set: SwimSet) -> float:
        """Combined multiplier applied to the scaled baseline."""
        effort = self.effort_multipliers[swim_set.effort]
        drift = (
            distance_drift_multiplier(swim_set.distance.to_meters())
            if drift_applies(swim_set.effort)
            else 1.0
        )
        pool = course_multiplier(course)
        gear = equipment_multiplier(swim_set.equipment)
        logger.debug(
            "Multiplier chain for %r: effort=%.3f drift=%.3f course=%.3f equipment=%.3f",
            swim_set, effort, drift, pool, gear,
        )
        return effort * drift * pool * gear

    def goal_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> float:
        self.check_inputs(course, swim_set, rep_index)
        baseline = self.baseline_for(swim_set, baselines)
        return self.base_seconds(swim_set, baseline) * self.multiplier_chain(course, swim_set)

    def rest_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        goal = self.goal_seconds(course, swim_set, baselines, rep_index)
        baseline = self.baseline_for(swim_set, baselines)
        return self.rest_model.rest_seconds(goal, swim_set, baseline)

    def interval_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        goal = self.goal_seconds(course, swim_set, baselines, rep_index)
        rest = self.rest_seconds(course, swim_set, baselines, rep_index)
        return round_to_step(round_half_up(goal) + rest, self.send_off_step)
