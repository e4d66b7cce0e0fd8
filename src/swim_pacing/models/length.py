"""Exact fixed-point distance.

Canonical unit: 0.1 mm (1e-4 m) stored as an integer. One yard is 0.9144 m,
which is exactly 9,144 canonical units, so conversions between yards and
metres never accumulate floating error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.math.checked import check_range, checked_add, checked_mul, checked_sub
from swim_pacing.math.rounding import decimal_round_half_up, round_half_up
from swim_pacing.models.enums import (
    CANONICAL_PER_METER,
    CANONICAL_PER_UNIT,
    CANONICAL_PER_YARD,
    LengthUnit,
)


def _to_decimal(value: float | int | Decimal | str) -> Decimal:
    # str() of a float is its shortest repr, so 0.1234 stays 0.1234
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value))
        except ArithmeticError as exc:
            raise InvalidArgumentError(f"Not a number: {value!r}") from exc
    raise InvalidArgumentError(f"Expected a number, got {type(value).__name__}")


@dataclass(frozen=True, order=True)
class Length:
    """Immutable distance with exact canonical storage.

    Equality, hashing and ordering use ``canonical`` only. ``display`` is the
    unit the value was entered in (or should be shown in) and never takes part
    in arithmetic.
    """

    canonical: int
    display: LengthUnit = field(default=LengthUnit.METERS, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.canonical, bool) or not isinstance(self.canonical, int):
            raise InvalidArgumentError(
                f"Canonical length must be an int, got {self.canonical!r}"
            )
        check_range(self.canonical)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def of_meters(cls, meters: float | int | Decimal | str) -> Length:
        """Exact for inputs with at most 4 decimals; otherwise half-up to 0.1 mm."""
        units = decimal_round_half_up(_to_decimal(meters) * CANONICAL_PER_METER)
        return cls(units, LengthUnit.METERS)

    @classmethod
    def of_yards(cls, yards: float | int | Decimal | str) -> Length:
        """Exact for whole yards; fractional yards round half-up to 0.1 mm."""
        units = decimal_round_half_up(_to_decimal(yards) * CANONICAL_PER_YARD)
        return cls(units, LengthUnit.YARDS)

    @classmethod
    def of(cls, amount: float | int | Decimal | str, unit: LengthUnit) -> Length:
        """Build from an amount in either unit."""
        if unit == LengthUnit.YARDS:
            return cls.of_yards(amount)
        return cls.of_meters(amount)

    @classmethod
    def of_canonical(cls, units: int, display: LengthUnit = LengthUnit.METERS) -> Length:
        """Exact factory from a raw canonical count."""
        return cls(units, display)

    # -- Conversions (real numbers are for display only) ---------------------

    def to_meters(self) -> float:
        return self.canonical / CANONICAL_PER_METER

    def to_yards(self) -> float:
        return self.canonical / CANONICAL_PER_YARD

    def to(self, unit: LengthUnit) -> float:
        """Value expressed in *unit* as a real number."""
        return self.canonical / CANONICAL_PER_UNIT[unit]

    def meters_decimal(self) -> Decimal:
        """Metres with exactly four decimal places."""
        return Decimal(self.canonical).scaleb(-4)

    def yards_decimal(self, places: int = 2) -> Decimal:
        """Yards rounded half-up to *places* decimals (yards may repeat)."""
        exact = Decimal(self.canonical) / Decimal(CANONICAL_PER_YARD)
        return exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

    def with_display(self, unit: LengthUnit) -> Length:
        """Same distance, different display unit."""
        if unit == self.display:
            return self
        return Length(self.canonical, unit)

    # -- Arithmetic (exact in canonical space) -------------------------------

    def __add__(self, other: Length) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return Length(checked_add(self.canonical, other.canonical), self.display)

    def __sub__(self, other: Length) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return Length(checked_sub(self.canonical, other.canonical), self.display)

    def times(self, count: int) -> Length:
        """Exact multiplication by a whole count."""
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidArgumentError(f"Count must be an int, got {count!r}")
        return Length(checked_mul(self.canonical, count), self.display)

    def scaled(self, factor: float) -> Length:
        """Multiply by a policy factor, rounding half-up to the nearest 0.1 mm."""
        return Length(check_range(round_half_up(self.canonical * factor)), self.display)

    def __mul__(self, other: int | float) -> Length:
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            return self.times(other)
        if isinstance(other, float):
            return self.scaled(other)
        return NotImplemented

    __rmul__ = __mul__

    def __str__(self) -> str:
        if self.display == LengthUnit.YARDS:
            return f"{self.yards_decimal(2)} yd"
        return f"{self.meters_decimal()} m"
