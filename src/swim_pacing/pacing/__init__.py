"""Pacing engine: goal, rest and send-off timing for swim sets."""

from swim_pacing.pacing.base import BaselineLookup, PacePolicy
from swim_pacing.pacing.baseline_policy import BaselinePacePolicy
from swim_pacing.pacing.default_policy import DefaultPacePolicy
from swim_pacing.pacing.engine import (
    PacingEngine,
    RepPacing,
    SetPacing,
    goal_seconds,
    interval_seconds,
    rest_seconds,
)
from swim_pacing.pacing.rest_models import (
    FixedSecondsRest,
    PercentOfGoalRest,
    RestModel,
    rest_model_by_name,
)

__all__ = [
    "BaselineLookup",
    "BaselinePacePolicy",
    "DefaultPacePolicy",
    "FixedSecondsRest",
    "PacePolicy",
    "PacingEngine",
    "PercentOfGoalRest",
    "RepPacing",
    "RestModel",
    "SetPacing",
    "goal_seconds",
    "interval_seconds",
    "rest_model_by_name",
    "rest_seconds",
]
