"""Rest-percent curve for the percent-of-goal rest model.

Each effort tier defines the rest fraction at two distance ratios, r = 1.0
and r = 4.0, where r is the repetition length in hundreds of the baseline
unit. Between the breakpoints the fraction is linear; outside it is flat.
"""

from __future__ import annotations

import numpy as np

from swim_pacing.models.enums import (
    EFFORT_REST_PERCENT_CURVE,
    REST_CURVE_LONG_RATIO,
    REST_CURVE_SHORT_RATIO,
    REST_RATIO_FLOOR,
    Effort,
)

_BREAKPOINTS = np.array([REST_CURVE_SHORT_RATIO, REST_CURVE_LONG_RATIO], dtype=np.float64)


def distance_ratio(length_in_baseline_units: float) -> float:
    """Repetition length in hundreds of the baseline unit, floored at 0.1."""
    return max(REST_RATIO_FLOOR, length_in_baseline_units / 100.0)


def rest_percent(effort: Effort, ratio: float) -> float:
    """Rest as a fraction of goal time for *effort* at distance ratio *ratio*.

    Examples (SPRINT): r <= 1.0 -> 2.00, r = 2.5 -> 1.15, r >= 4.0 -> 0.30.
    """
    short_pct, long_pct = EFFORT_REST_PERCENT_CURVE[effort]
    # np.interp clamps to the end values outside the breakpoints
    return float(np.interp(ratio, _BREAKPOINTS, [short_pct, long_pct]))
