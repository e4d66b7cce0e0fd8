"""Exact fixed-point duration stored as integer milliseconds."""

from __future__ import annotations

from dataclasses import dataclass

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.math.checked import check_range, checked_add, checked_mul, checked_sub
from swim_pacing.math.rounding import round_half_up
from swim_pacing.models.enums import MILLIS_PER_MINUTE, MILLIS_PER_SECOND


@dataclass(frozen=True, order=True)
class TimeSpan:
    """Immutable, non-negative time span in milliseconds."""

    millis: int

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise InvalidArgumentError(f"Milliseconds must be an int, got {self.millis!r}")
        check_range(self.millis)
        if self.millis < 0:
            raise InvalidArgumentError(f"Time span cannot be negative, got {self.millis} ms")

    @classmethod
    def of_millis(cls, millis: int) -> TimeSpan:
        return cls(millis)

    @classmethod
    def of_seconds(cls, seconds: float) -> TimeSpan:
        """Round half-up to the nearest millisecond."""
        return cls(round_half_up(seconds * MILLIS_PER_SECOND))

    @classmethod
    def of_minutes_seconds_millis(cls, minutes: int, seconds: int, millis: int = 0) -> TimeSpan:
        """Exact sum of the parts, e.g. ``(1, 18, 0)`` for 1:18.00."""
        total = checked_add(
            checked_add(
                checked_mul(minutes, MILLIS_PER_MINUTE),
                checked_mul(seconds, MILLIS_PER_SECOND),
            ),
            millis,
        )
        return cls(total)

    def to_millis(self) -> int:
        return self.millis

    def to_seconds(self) -> float:
        return self.millis / MILLIS_PER_SECOND

    def __add__(self, other: TimeSpan) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(checked_add(self.millis, other.millis))

    def __sub__(self, other: TimeSpan) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(checked_sub(self.millis, other.millis))

    def times(self, count: int) -> TimeSpan:
        """Exact multiplication by a whole count, e.g. one interval times reps."""
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidArgumentError(f"Count must be an int, got {count!r}")
        return TimeSpan(checked_mul(self.millis, count))

    def scaled(self, factor: float) -> TimeSpan:
        """Multiply by a policy factor, rounding half-up to the nearest ms."""
        return TimeSpan(check_range(round_half_up(self.millis * factor)))

    def __mul__(self, other: int | float) -> TimeSpan:
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            return self.times(other)
        if isinstance(other, float):
            return self.scaled(other)
        return NotImplemented

    __rmul__ = __mul__

    def __str__(self) -> str:
        """Format as ``m:ss.hh``, e.g. ``1:23.45``."""
        minutes, rest = divmod(self.millis, MILLIS_PER_MINUTE)
        seconds, rest = divmod(rest, MILLIS_PER_SECOND)
        hundredths = round_half_up(rest / 10)
        if hundredths == 100:
            hundredths = 0
            seconds += 1
        if seconds == 60:
            seconds = 0
            minutes += 1
        return f"{minutes}:{seconds:02d}.{hundredths:02d}"
