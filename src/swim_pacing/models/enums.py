"""Enumerations and pacing constants for the swim pacing core.

Every closed set (course, effort, equipment, stroke) is an ``IntEnum`` tag with
its per-variant data held in module-level constant tables keyed by that tag.
Multipliers are empirically tuned coaching defaults, not literature values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class LengthUnit(IntEnum):
    """Display unit for a Length. Never used for arithmetic."""

    METERS = auto()
    YARDS = auto()


class StrokeType(IntEnum):
    """Strokes a swimmer can hold a baseline pace for."""

    FREESTYLE = auto()
    BACKSTROKE = auto()
    BREASTSTROKE = auto()
    BUTTERFLY = auto()
    INDIVIDUAL_MEDLEY = auto()
    FREE_KICK = auto()
    DRILL = auto()


class Course(IntEnum):
    """Pool configurations.

    SCY = Short Course Yards (25 yd), SCM = Short Course Meters (25 m),
    LCM = Long Course Meters (50 m).
    """

    SCY = auto()
    SCM = auto()
    LCM = auto()


class Effort(IntEnum):
    """Training intensity tiers ordered from least to most intense."""

    EASY = auto()
    ENDURANCE = auto()
    THRESHOLD = auto()
    RACE_PACE = auto()
    VO2_MAX = auto()
    SPRINT = auto()


class Equipment(IntEnum):
    """Training aids. A set holds a selection of these, never a sequence."""

    FINS = auto()
    PADDLES = auto()
    PULL_BUOY = auto()
    SNORKEL = auto()
    DRAG_SOCKS = auto()
    PARACHUTE = auto()


class MultipleRounding(IntEnum):
    """How a length that is not a pool multiple is snapped."""

    UP = auto()
    DOWN = auto()
    NEAREST = auto()  # ties go up


# ---------------------------------------------------------------------------
# Canonical fixed-point units
# ---------------------------------------------------------------------------
# 1 canonical length unit = 0.1 mm, so a yard (0.9144 m) is an exact integer
CANONICAL_PER_METER = 10_000
CANONICAL_PER_YARD = 9_144

CANONICAL_PER_UNIT = {
    LengthUnit.METERS: CANONICAL_PER_METER,
    LengthUnit.YARDS: CANONICAL_PER_YARD,
}

MILLIS_PER_SECOND = 1_000
MILLIS_PER_MINUTE = 60_000

# ---------------------------------------------------------------------------
# Course catalog
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CourseSpec:
    """Constant data for one pool configuration."""

    label: str
    length: int
    unit: LengthUnit
    multiplier: float  # performance multiplier relative to SCY


# Short course pools have more turns, so more push-offs and underwater work
# per unit of distance. Fewer turns in a long course pool make it slower.
COURSE_SPECS = {
    Course.SCY: CourseSpec("Short Course Yards", 25, LengthUnit.YARDS, 1.00),
    Course.SCM: CourseSpec("Short Course Meters", 25, LengthUnit.METERS, 1.04),
    Course.LCM: CourseSpec("Long Course Meters", 50, LengthUnit.METERS, 1.07),
}

# ---------------------------------------------------------------------------
# Effort catalog
# ---------------------------------------------------------------------------
EFFORT_LABELS = {
    Effort.EASY: ("Easy", "Warmup/cooldown, active recovery"),
    Effort.ENDURANCE: ("Endurance", "Aerobic, steady cruise pace"),
    Effort.THRESHOLD: ("Threshold", "Strong, controlled pace"),
    Effort.RACE_PACE: ("Race Pace", "Target competition pace"),
    Effort.VO2_MAX: ("VO2 Max", "Very intense, near max"),
    Effort.SPRINT: ("Sprint", "All-out, maximal speed"),
}

# Scales the baseline per-100 pace. Canonical table.
EFFORT_PACE_MULTIPLIERS = {
    Effort.EASY: 1.05,
    Effort.ENDURANCE: 1.02,
    Effort.THRESHOLD: 1.00,
    Effort.RACE_PACE: 0.98,
    Effort.VO2_MAX: 0.97,
    Effort.SPRINT: 0.95,
}

# Steeper table from an earlier tuning round, for comparison only
LEGACY_EFFORT_PACE_MULTIPLIERS = {
    Effort.EASY: 1.70,
    Effort.ENDURANCE: 1.35,
    Effort.THRESHOLD: 1.22,
    Effort.RACE_PACE: 1.05,
    Effort.VO2_MAX: 1.00,
    Effort.SPRINT: 0.95,
}

# Rest allowances that went with the steeper table
LEGACY_EFFORT_REST_SECONDS = {
    Effort.EASY: 10,
    Effort.ENDURANCE: 15,
    Effort.THRESHOLD: 20,
    Effort.RACE_PACE: 30,
    Effort.VO2_MAX: 40,
    Effort.SPRINT: 60,
}

# Fixed-seconds rest model: one constant per tier, independent of distance
EFFORT_REST_SECONDS = {
    Effort.EASY: 15,
    Effort.ENDURANCE: 20,
    Effort.THRESHOLD: 25,
    Effort.RACE_PACE: 30,
    Effort.VO2_MAX: 35,
    Effort.SPRINT: 40,
}

# Percent-of-goal rest model: (rest fraction at r <= 1.0, rest fraction at r >= 4.0)
# where r is the rep length in hundreds of the baseline unit.
REST_CURVE_SHORT_RATIO = 1.0
REST_CURVE_LONG_RATIO = 4.0
REST_RATIO_FLOOR = 0.1

EFFORT_REST_PERCENT_CURVE = {
    Effort.EASY: (0.20, 0.10),
    Effort.ENDURANCE: (0.25, 0.10),
    Effort.THRESHOLD: (0.40, 0.15),
    Effort.RACE_PACE: (0.75, 0.20),
    Effort.VO2_MAX: (1.00, 0.25),
    Effort.SPRINT: (2.00, 0.30),
}

# Distance drift only matters from this tier upward
DRIFT_MIN_EFFORT = Effort.THRESHOLD

# ---------------------------------------------------------------------------
# Equipment catalog
# ---------------------------------------------------------------------------
EQUIPMENT_LABELS = {
    Equipment.FINS: "Fins",
    Equipment.PADDLES: "Paddles",
    Equipment.PULL_BUOY: "Pull Buoy",
    Equipment.SNORKEL: "Snorkel",
    Equipment.DRAG_SOCKS: "Drag Socks",
    Equipment.PARACHUTE: "Parachute",
}

EQUIPMENT_MULTIPLIERS = {
    Equipment.FINS: 0.88,        # strong kick propulsion
    Equipment.PADDLES: 0.96,     # more pull power
    Equipment.PULL_BUOY: 1.05,   # no kick drive
    Equipment.SNORKEL: 0.99,
    Equipment.DRAG_SOCKS: 1.15,  # resistance
    Equipment.PARACHUTE: 1.20,   # heavy resistance
}

# ---------------------------------------------------------------------------
# Distance drift: (upper bound in metres, multiplier); anything longer than
# the last bound uses DISTANCE_DRIFT_OVERFLOW.
# ---------------------------------------------------------------------------
DISTANCE_DRIFT_BANDS = (
    (25, 0.92),
    (50, 0.94),
    (75, 0.97),
    (100, 1.00),
    (200, 1.05),
    (400, 1.10),
    (800, 1.15),
)
DISTANCE_DRIFT_OVERFLOW = 1.20

# ---------------------------------------------------------------------------
# Send-off rounding
# ---------------------------------------------------------------------------
SEND_OFF_STEP_SECONDS = 5
