"""Swim workout pacing: goal, rest and send-off times from baseline paces."""

from swim_pacing.models import (
    BaselinePace,
    Course,
    Effort,
    Equipment,
    Length,
    LengthUnit,
    MultipleRounding,
    StrokeType,
    SwimSet,
    Swimmer,
    TimeSpan,
)
from swim_pacing.exceptions import (
    CanonicalOverflowError,
    InvalidArgumentError,
    MissingBaselineError,
    SwimPacingError,
)
from swim_pacing.pacing import (
    BaselinePacePolicy,
    DefaultPacePolicy,
    FixedSecondsRest,
    PacePolicy,
    PacingEngine,
    PercentOfGoalRest,
    goal_seconds,
    interval_seconds,
    rest_seconds,
)

__version__ = "0.3.0"

__all__ = [
    "BaselinePace",
    "BaselinePacePolicy",
    "CanonicalOverflowError",
    "Course",
    "DefaultPacePolicy",
    "Effort",
    "Equipment",
    "FixedSecondsRest",
    "InvalidArgumentError",
    "Length",
    "LengthUnit",
    "MissingBaselineError",
    "MultipleRounding",
    "PacePolicy",
    "PacingEngine",
    "PercentOfGoalRest",
    "StrokeType",
    "SwimPacingError",
    "SwimSet",
    "Swimmer",
    "TimeSpan",
    "goal_seconds",
    "interval_seconds",
    "rest_seconds",
]
