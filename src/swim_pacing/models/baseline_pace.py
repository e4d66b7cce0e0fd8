"""Baseline pace: a swimmer's reference distance/time for one stroke."""

from __future__ import annotations

from dataclasses import dataclass, field

from swim_pacing.models.enums import LengthUnit
from swim_pacing.models.length import Length
from swim_pacing.models.time_span import TimeSpan


@dataclass(frozen=True)
class BaselinePace:
    """Measured distance and time, with derived canonical speed.

    The original distance and time are kept for provenance. Speed is cached
    at construction in metres per second and is 0.0 when the time is zero.
    Owned by a Swimmer, one per stroke; the pacing core only reads it.
    """

    distance: Length
    time: TimeSpan
    speed_mps: float = field(init=False, compare=False)

    def __post_init__(self) -> None:
        ms = self.time.to_millis()
        speed = 0.0 if ms <= 0 else self.distance.to_meters() / self.time.to_seconds()
        object.__setattr__(self, "speed_mps", speed)

    @classmethod
    def per_100(cls, seconds: float, unit: LengthUnit) -> BaselinePace:
        """Seed built from a time for 100 yards or 100 metres."""
        return cls(Length.of(100, unit), TimeSpan.of_seconds(seconds))

    @property
    def unit(self) -> LengthUnit:
        """Unit the baseline was measured in."""
        return self.distance.display

    @property
    def seconds_per_100(self) -> float:
        """Seconds per 100 of the baseline's own unit (0.0 for a zero distance)."""
        hundreds = self.distance.to(self.unit) / 100.0
        if hundreds <= 0:
            return 0.0
        return self.time.to_seconds() / hundreds

    def __str__(self) -> str:
        return f"{self.distance} in {self.time} ({self.speed_mps:.3f} m/s)"
