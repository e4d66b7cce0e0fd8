"""Repetition record: one training set such as "8 x 50 FREESTYLE @ ENDURANCE".

The set carries no pacing logic; goal, rest and interval are computed by a
PacePolicy. What it does own is the pool-multiple invariant: the per-rep
distance is always a whole number of pool lengths for the set's course, and
at least one length. The invariant is enforced on construction and re-run by
the ``distance`` and ``course`` setters.

Not thread-safe: concurrent mutation needs external synchronisation.
"""

from __future__ import annotations

import logging
from typing import Iterable

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.math.normalization import snap_to_pool
from swim_pacing.models.enums import (
    EFFORT_LABELS,
    Course,
    Effort,
    Equipment,
    MultipleRounding,
    StrokeType,
)
from swim_pacing.models.length import Length

logger = logging.getLogger(__name__)


def _validate_reps(reps: int) -> int:
    if isinstance(reps, bool) or not isinstance(reps, int):
        raise InvalidArgumentError(f"reps must be an int, got {reps!r}")
    if reps < 1:
        raise InvalidArgumentError(f"reps must be >= 1, got {reps}")
    return reps


def _member(enum_cls: type, value, field_name: str):
    """Coerce *value* to a member of *enum_cls* or raise InvalidArgumentError."""
    if value is None or isinstance(value, (bool, str)):
        raise InvalidArgumentError(f"{field_name} must be a {enum_cls.__name__}, got {value!r}")
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidArgumentError(
            f"{field_name} must be a {enum_cls.__name__}, got {value!r}"
        ) from None


def _validate_course(course: Course | None) -> Course:
    if course is None:
        raise InvalidArgumentError("course must not be None")
    return _member(Course, course, "course")


def _validate_equipment(items: Iterable[Equipment] | None) -> set[Equipment]:
    if items is None:
        return set()
    return {_member(Equipment, item, "equipment") for item in items}


class SwimSet:
    """Mutable repetition record with automatic pool-multiple normalization."""

    def __init__(
        self,
        stroke: StrokeType,
        reps: int,
        distance: Length,
        effort: Effort,
        course: Course,
        notes: str | None = "",
        equipment: Iterable[Equipment] = (),
    ) -> None:
        self._stroke = _member(StrokeType, stroke, "stroke")
        self._reps = _validate_reps(reps)
        self._effort = _member(Effort, effort, "effort")
        self._course = _validate_course(course)
        self._distance = self._normalize(distance)
        self._equipment = _validate_equipment(equipment)
        self.notes = notes

    # -- Normalized fields ---------------------------------------------------

    @property
    def distance(self) -> Length:
        """Per-rep distance, always a legal multiple of the pool length."""
        return self._distance

    @distance.setter
    def distance(self, value: Length) -> None:
        self._distance = self._normalize(value)

    @property
    def course(self) -> Course:
        return self._course

    @course.setter
    def course(self, value: Course) -> None:
        """Change the pool; re-snaps the current distance to the new pool."""
        self._course = _validate_course(value)
        self._distance = self._normalize(self._distance)

    @property
    def stroke(self) -> StrokeType:
        return self._stroke

    @stroke.setter
    def stroke(self, value: StrokeType) -> None:
        self._stroke = _member(StrokeType, value, "stroke")

    @property
    def effort(self) -> Effort:
        return self._effort

    @effort.setter
    def effort(self, value: Effort) -> None:
        self._effort = _member(Effort, value, "effort")

    @property
    def reps(self) -> int:
        return self._reps

    @reps.setter
    def reps(self, value: int) -> None:
        self._reps = _validate_reps(value)

    @property
    def notes(self) -> str:
        return self._notes

    @notes.setter
    def notes(self, value: str | None) -> None:
        self._notes = "" if value is None else value

    # -- Equipment -----------------------------------------------------------

    @property
    def equipment(self) -> frozenset[Equipment]:
        return frozenset(self._equipment)

    @equipment.setter
    def equipment(self, items: Iterable[Equipment] | None) -> None:
        self._equipment = _validate_equipment(items)

    def add_equipment(self, item: Equipment | None) -> None:
        """Add *item*; None is ignored."""
        if item is None:
            return
        self._equipment.add(_member(Equipment, item, "equipment"))

    def remove_equipment(self, item: Equipment) -> None:
        self._equipment.discard(item)

    def has_equipment(self, item: Equipment) -> bool:
        return item in self._equipment

    # -- Derived -------------------------------------------------------------

    def total_distance(self) -> Length:
        """Per-rep distance times reps, exact."""
        return self._distance.times(self._reps)

    def _normalize(self, requested: Length) -> Length:
        if not isinstance(requested, Length):
            raise InvalidArgumentError(f"distance must be a Length, got {requested!r}")
        if requested.canonical <= 0:
            raise InvalidArgumentError(f"distance must be > 0, got {requested}")
        snapped = snap_to_pool(requested, self._course, MultipleRounding.UP)
        if snapped != requested:
            logger.debug(
                "Snapped %s to %s for %s pool", requested, snapped, self._course.name
            )
        return snapped

    def __repr__(self) -> str:
        parts = [
            f"stroke={self._stroke.name}",
            f"reps={self._reps}",
            f"distance={self._distance}",
            f"effort={self._effort.name}",
            f"course={self._course.name}",
        ]
        if self._equipment:
            parts.append("equipment=" + ",".join(sorted(e.name for e in self._equipment)))
        if self._notes.strip():
            parts.append(f"notes={self._notes!r}")
        return "SwimSet(" + ", ".join(parts) + ")"

    def __str__(self) -> str:
        label, _ = EFFORT_LABELS[self.effort]
        return f"{self._reps} x {self._distance} {self.stroke.name} @ {label}"
