"""Rest models: how long a swimmer rests after each rep.

Two models exist and are kept apart on purpose; they give materially
different numbers for the same set:

* ``FixedSecondsRest``: one constant per effort tier, independent of distance.
* ``PercentOfGoalRest``: a fraction of the goal time that depends on the
  effort tier and the rep length relative to the 100-unit baseline.

``PercentOfGoalRest`` is the default for ``DefaultPacePolicy``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.math.rest_curve import distance_ratio, rest_percent
from swim_pacing.math.rounding import round_half_up
from swim_pacing.models.baseline_pace import BaselinePace
from swim_pacing.models.enums import EFFORT_REST_SECONDS, Effort
from swim_pacing.models.swim_set import SwimSet


class RestModel(ABC):
    """Computes rest for one rep given its goal time."""

    name: str

    @abstractmethod
    def rest_seconds(self, goal: float, swim_set: SwimSet, baseline: BaselinePace) -> int:
        ...

    @abstractmethod
    def describe(self, swim_set: SwimSet) -> str:
        """Rest summary without a baseline, for labels."""
        ...


class FixedSecondsRest(RestModel):
    """Constant rest per effort tier."""

    name = "fixed"

    def __init__(self, table: dict[Effort, int] | None = None) -> None:
        self._table = dict(EFFORT_REST_SECONDS if table is None else table)

    def seconds_for(self, effort: Effort) -> int:
        return self._table[effort]

    def rest_seconds(self, goal: float, swim_set: SwimSet, baseline: BaselinePace) -> int:
        return self.seconds_for(swim_set.effort)

    def describe(self, swim_set: SwimSet) -> str:
        return f":{self.seconds_for(swim_set.effort):02d}"


class PercentOfGoalRest(RestModel):
    """Rest = round(goal x rest_percent(effort, r)).

    r is the rep length in hundreds of the baseline unit, floored at 0.1.
    Easy tiers taper toward a small fraction on long reps; sprint-type tiers
    start from a large fraction on short reps.
    """

    name = "percent"

    def rest_seconds(self, goal: float, swim_set: SwimSet, baseline: BaselinePace) -> int:
        ratio = distance_ratio(swim_set.distance.to(baseline.unit))
        return round_half_up(goal * rest_percent(swim_set.effort, ratio))

    def describe(self, swim_set: SwimSet) -> str:
        # No baseline here, so the ratio uses the set's own display unit
        distance = swim_set.distance
        ratio = distance_ratio(distance.to(distance.display))
        return f"{rest_percent(swim_set.effort, ratio):.0%} of goal"


REST_MODELS = {
    FixedSecondsRest.name: FixedSecondsRest,
    PercentOfGoalRest.name: PercentOfGoalRest,
}


def rest_model_by_name(name: str) -> RestModel:
    """Instantiate a rest model from its configuration name."""
    try:
        return REST_MODELS[name.strip().lower()]()
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown rest model {name!r}, expected one of {sorted(REST_MODELS)}"
        ) from None
