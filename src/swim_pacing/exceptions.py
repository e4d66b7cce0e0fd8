"""Custom exception hierarchy for the swim pacing core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swim_pacing.models.enums import StrokeType


class SwimPacingError(Exception):
    """Base exception for all swim_pacing errors."""


class InvalidArgumentError(SwimPacingError, ValueError):
    """A caller supplied a value the core refuses to clamp (reps, length, course...)."""


class MissingBaselineError(SwimPacingError, LookupError):
    """No baseline pace is registered for the set's stroke."""

    def __init__(self, stroke: StrokeType | None) -> None:
        name = stroke.name if stroke is not None else "None"
        super().__init__(f"Missing baseline pace for stroke: {name}")
        self.stroke = stroke


class CanonicalOverflowError(SwimPacingError, OverflowError):
    """Canonical fixed-point arithmetic left the signed 64-bit range."""
