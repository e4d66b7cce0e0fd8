"""Checked integer arithmetic for canonical fixed-point values.

Python integers never wrap, so overflow is detected by bounding every result
to the signed 64-bit range used for canonical storage.
"""

from __future__ import annotations

from swim_pacing.exceptions import CanonicalOverflowError

CANONICAL_MIN = -(2**63)
CANONICAL_MAX = 2**63 - 1


def check_range(value: int) -> int:
    """Return *value* unchanged if it fits in a signed 64-bit integer.

    Raises:
        CanonicalOverflowError: If the value is out of range.
    """
    if value < CANONICAL_MIN or value > CANONICAL_MAX:
        raise CanonicalOverflowError(f"Canonical value {value} overflows 64 bits")
    return value


def checked_add(a: int, b: int) -> int:
    return check_range(a + b)


def checked_sub(a: int, b: int) -> int:
    return check_range(a - b)


def checked_mul(a: int, b: int) -> int:
    return check_range(a * b)
