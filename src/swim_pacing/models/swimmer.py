"""Swimmer: owner of the per-stroke baseline paces read by the pacing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from uuid import UUID, uuid4

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.models.baseline_pace import BaselinePace
from swim_pacing.models.enums import StrokeType


@dataclass
class Swimmer:
    """A swimmer with at most one baseline pace per stroke.

    Baselines are created or replaced by the caller; the pacing core never
    computes them. ``baselines`` is a read-only view suitable for passing
    straight to a PacePolicy.
    """

    first_name: str
    last_name: str
    preferred_name: str | None = None
    team_name: str | None = None
    id: UUID = field(default_factory=uuid4)
    _baselines: dict[StrokeType, BaselinePace] = field(default_factory=dict, repr=False)

    @property
    def display_name(self) -> str:
        first = self.preferred_name or self.first_name
        return f"{first} {self.last_name}".strip()

    @property
    def baselines(self) -> Mapping[StrokeType, BaselinePace]:
        return MappingProxyType(self._baselines)

    def baseline_for(self, stroke: StrokeType) -> BaselinePace | None:
        """Baseline for *stroke*, or None if not set."""
        return self._baselines.get(stroke)

    def update_baseline(self, stroke: StrokeType, pace: BaselinePace) -> None:
        """Create or replace the baseline for *stroke*."""
        if stroke is None or pace is None:
            raise InvalidArgumentError("stroke and pace must not be None")
        self._baselines[stroke] = pace

    def has_baseline(self, stroke: StrokeType) -> bool:
        return stroke in self._baselines

    def clear_baseline(self, stroke: StrokeType) -> None:
        self._baselines.pop(stroke, None)
