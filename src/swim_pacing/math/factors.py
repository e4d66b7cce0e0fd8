"""Pace multipliers: course, equipment and distance drift.

Each factor scales the baseline per-100 pace; the pacing policies multiply
them into one chain.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from swim_pacing.models.enums import (
    COURSE_SPECS,
    DISTANCE_DRIFT_BANDS,
    DISTANCE_DRIFT_OVERFLOW,
    DRIFT_MIN_EFFORT,
    EQUIPMENT_MULTIPLIERS,
    Course,
    Effort,
    Equipment,
)

_DRIFT_EDGES = np.array([edge for edge, _ in DISTANCE_DRIFT_BANDS], dtype=np.float64)
_DRIFT_VALUES = np.array(
    [factor for _, factor in DISTANCE_DRIFT_BANDS] + [DISTANCE_DRIFT_OVERFLOW],
    dtype=np.float64,
)


def course_multiplier(course: Course) -> float:
    """Performance multiplier for a pool configuration."""
    return COURSE_SPECS[course].multiplier


def equipment_multiplier(items: Iterable[Equipment]) -> float:
    """Product of the multipliers of the selected equipment.

    The selection is treated as a set: order and duplicates have no effect,
    and an empty selection yields 1.0.
    """
    return math.prod(EQUIPMENT_MULTIPLIERS[item] for item in set(items))


def drift_applies(effort: Effort) -> bool:
    """Whether distance drift is meaningful for this effort (threshold and above)."""
    return effort >= DRIFT_MIN_EFFORT


def distance_drift_multiplier(meters: float) -> float:
    """Pace drift for a repetition length in metres.

    Bands are inclusive on the upper edge (50 m -> the <=50 band). Short reps
    come out faster than the 100-unit baseline, long reps slower.
    """
    # side="left": first edge >= meters
    index = int(np.searchsorted(_DRIFT_EDGES, meters, side="left"))
    return float(_DRIFT_VALUES[index])
