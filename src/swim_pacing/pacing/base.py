"""Abstract base class for pace policies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from swim_pacing.exceptions import InvalidArgumentError, MissingBaselineError
from swim_pacing.models.baseline_pace import BaselinePace
from swim_pacing.models.enums import Course, StrokeType
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.pacing.rest_models import RestModel

BaselineLookup = Mapping[StrokeType, BaselinePace]


class PacePolicy(ABC):
    """Strategy that turns a set plus a swimmer's baselines into timing.

    Every operation takes the same arguments:
        course: Pool configuration of the workout.
        swim_set: The repetition record being timed.
        baselines: Stroke -> BaselinePace lookup owned by the swimmer.
        rep_index: 1-based repetition number. Accepted for future fatigue
            modelling; current formulas ignore it.

    Implementations are pure: no state between calls, no I/O.
    """

    name: str
    rest_model: RestModel

    @abstractmethod
    def goal_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> float:
        """Predicted swim time for one rep, in seconds."""
        ...

    @abstractmethod
    def rest_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        """Rest after one rep, in whole seconds."""
        ...

    @abstractmethod
    def interval_seconds(
        self,
        course: Course,
        swim_set: SwimSet,
        baselines: BaselineLookup,
        rep_index: int = 1,
    ) -> int:
        """Send-off interval for one rep, in whole seconds."""
        ...

    def timing_label(self, course: Course, swim_set: SwimSet) -> str:
        """Short label for printed workouts, e.g. ``"rest :20"``."""
        return f"rest {self.rest_model.describe(swim_set)}"

    # -- Shared helpers -------------------------------------------------------

    def baseline_for(self, swim_set: SwimSet, baselines: BaselineLookup) -> BaselinePace:
        """Baseline for the set's stroke.

        Raises:
            MissingBaselineError: If no baseline is registered for the stroke.
        """
        baseline = baselines.get(swim_set.stroke) if baselines is not None else None
        if baseline is None:
            raise MissingBaselineError(swim_set.stroke)
        return baseline

    @staticmethod
    def check_inputs(course: Course, swim_set: SwimSet, rep_index: int) -> None:
        if course is None:
            raise InvalidArgumentError("course must not be None")
        if swim_set is None:
            raise InvalidArgumentError("swim_set must not be None")
        if isinstance(rep_index, bool) or not isinstance(rep_index, int) or rep_index < 1:
            raise InvalidArgumentError(f"rep_index must be an int >= 1, got {rep_index!r}")

    @staticmethod
    def base_seconds(swim_set: SwimSet, baseline: BaselinePace) -> float:
        """Baseline pace scaled to the rep length, before any multiplier.

        The rep length is converted into the baseline's own unit, so a yard
        seed and a metre pool combine without a lossy metre round trip.
        """
        distance_scale = swim_set.distance.to(baseline.unit) / 100.0
        return baseline.seconds_per_100 * distance_scale
