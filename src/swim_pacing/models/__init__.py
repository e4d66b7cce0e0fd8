"""Value types, catalogs and records for the swim pacing core."""

from swim_pacing.models.enums import (
    Course,
    Effort,
    Equipment,
    LengthUnit,
    MultipleRounding,
    StrokeType,
)
from swim_pacing.models.length import Length
from swim_pacing.models.time_span import TimeSpan
from swim_pacing.models.baseline_pace import BaselinePace
from swim_pacing.models.swim_set import SwimSet
from swim_pacing.models.swimmer import Swimmer

__all__ = [
    "BaselinePace",
    "Course",
    "Effort",
    "Equipment",
    "Length",
    "LengthUnit",
    "MultipleRounding",
    "StrokeType",
    "SwimSet",
    "Swimmer",
    "TimeSpan",
]
