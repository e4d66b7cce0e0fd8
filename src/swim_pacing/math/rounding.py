"""Rounding policies with fixed tie-breaks.

Python's built-in ``round()`` uses banker's rounding; every rounding in the
pacing core goes half-up instead so that 38.5 s becomes 39 s, not 38 s.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from swim_pacing.exceptions import InvalidArgumentError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Raises:
        InvalidArgumentError: If *value* is NaN or infinite.
    """
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Cannot round non-finite value {value!r}")
    return math.floor(value + 0.5)


def decimal_round_half_up(value: Decimal) -> int:
    """Round a Decimal to the nearest integer, ties away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_to_step(seconds: int, step: int) -> int:
    """Round whole seconds to the nearest multiple of *step*.

    A remainder below ``(step + 1) // 2`` rounds down, anything else rounds
    up. With the usual 5-second send-off step: 67 -> 65, 68 -> 70.

    Args:
        seconds: Raw interval in whole seconds.
        step: Send-off granularity in seconds, must be positive.

    Returns:
        The rounded interval in whole seconds.

    Raises:
        InvalidArgumentError: If step is not positive.
    """
    if step <= 0:
        raise InvalidArgumentError(f"Send-off step must be positive, got {step}")
    remainder = seconds % step
    base = seconds - remainder
    if remainder < (step + 1) // 2:
        return base
    return base + step
