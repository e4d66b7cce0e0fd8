"""Pacing engine: entry points for goal, rest and send-off timing.

The engine holds a PacePolicy and nothing else; every call is a pure function
of its arguments. Module-level ``goal_seconds``, ``rest_seconds`` and
``interval_seconds`` use a shared engine with the default policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from swim_pacing.models.enums import Course
from swim_pacing.models.length import Length
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.pacing.base import BaselineLookup, PacePolicy
from swim_pacing.pacing.default_policy import DefaultPacePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepPacing:
    """Timing for one repetition."""

    rep_index: int
    goal_seconds: float
    rest_seconds: int
    interval_seconds: int


@dataclass(frozen=True)
class SetPacing:
    """Timing for every repetition of a set."""

    reps: tuple[RepPacing, ...]
    total_distance: Length
    timing_label: str

    @property
    def total_seconds(self) -> int:
        """Time from the first push-off to the last send-off."""
        return sum(rep.interval_seconds for rep in self.reps)

    @property
    def total_swim_seconds(self) -> float:
        """Sum of goal times, rest excluded."""
        return sum(rep.goal_seconds for rep in self.reps)


class PacingEngine:
    """Computes goal, rest and interval for sets using one PacePolicy."""

    def __init__(self, policy: PacePolicy | None = None) -> None:
        self.policy = policy if policy is not None else DefaultPacePolicy()

    def goal_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> float:
        return self.policy.goal_seconds(course, swim_set, baselines, rep_index)

    def rest_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        return self.policy.rest_seconds(course, swim_set, baselines, rep_index)

    def interval_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        return self.policy.interval_seconds(course, swim_set, baselines, rep_index)

    def pace_set(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
    ) -> SetPacing:
        """Timing for every rep of *swim_set*.

        Raises:
            MissingBaselineError: If the set's stroke has no baseline.
        """
        reps = tuple(
            RepPacing(
                rep_index=i,
                goal_seconds=self.goal_seconds(course, swim_set, baselines, i),
                rest_seconds=self.rest_seconds(course, swim_set, baselines, i),
                interval_seconds=self.interval_seconds(course, swim_set, baselines, i),
            )
            for i in range(1, swim_set.reps + 1)
        )
        result = SetPacing(
            reps=reps,
            total_distance=swim_set.total_distance(),
            timing_label=self.policy.timing_label(course, swim_set),
        )
        logger.debug(
            "Paced %s with %s policy: %d s total", swim_set, self.policy.name, result.total_seconds
        )
        return result


_default_engine = PacingEngine()


def goal_seconds(
    course: Course,
    swim_set: SwimSet,
    baselines: BaselineLookup,
    rep_index: int = 1,
) -> float:
    """Goal time for one rep under the default policy."""
    return _default_engine.goal_seconds(course, swim_set, baselines, rep_index)


def rest_seconds(
    course: Course,
    swim_set: SwimSet,
    baselines: BaselineLookup,
    rep_index: int = 1,
) -> int:
    """Rest after one rep under the default policy."""
    return _default_engine.rest_seconds(course, swim_set, baselines, rep_index)


def interval_seconds(
    course: Course,
    swim_set: SwimSet,
    baselines: BaselineLookup,
    rep_index: int = 1,
) -> int:
    """Send-off interval for one rep under the default policy."""
    return _default_engine.interval_seconds(course, swim_set, baselines, rep_index)
