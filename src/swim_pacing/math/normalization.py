"""Pool-multiple normalization.

Every repetition length must be a whole number of pool lengths. All snapping
happens on canonical integers: a 25-yard pool is 228,600 canonical units, a
non-integer number of metres, so metre-based arithmetic would drift.
"""

from __future__ import annotations

from swim_pacing.exceptions import InvalidArgumentError
from swim_pacing.math.checked import checked_mul
from swim_pacing.models.enums import (
    COURSE_SPECS,
    Course,
    CourseSpec,
    MultipleRounding,
)
from swim_pacing.models.length import Length


def course_spec(course: Course) -> CourseSpec:
    """Catalog entry for *course*.

    Raises:
        InvalidArgumentError: If *course* is None.
    """
    if course is None:
        raise InvalidArgumentError("course must not be None")
    return COURSE_SPECS[Course(course)]


def pool_length(course: Course) -> Length:
    """Canonical length of one pool length for *course*, in the course's unit."""
    spec = course_spec(course)
    return Length.of(spec.length, spec.unit)


def snap_canonical(
    requested: int,
    pool: int,
    rounding: MultipleRounding = MultipleRounding.UP,
) -> int:
    """Snap a canonical length to a multiple of a canonical pool length.

    Args:
        requested: Requested length in canonical units.
        pool: Pool length in canonical units, must be positive.
        rounding: UP (smallest multiple >= requested), DOWN (largest multiple
            <= requested) or NEAREST (ties go up).

    Returns:
        A canonical length that is a multiple of *pool* and at least one pool.

    Raises:
        InvalidArgumentError: If the pool length is not positive.
    """
    if pool <= 0:
        raise InvalidArgumentError(f"Pool length must be positive, got {pool}")
    if requested <= pool:
        return pool

    lengths, remainder = divmod(requested, pool)
    if remainder == 0:
        return requested

    round_up = rounding == MultipleRounding.UP or (
        rounding == MultipleRounding.NEAREST and remainder * 2 >= pool
    )
    if round_up:
        lengths += 1
    return checked_mul(lengths, pool)


def snap_to_pool(
    length: Length,
    course: Course,
    rounding: MultipleRounding = MultipleRounding.UP,
) -> Length:
    """Snap *length* to a legal multiple of the pool for *course*.

    The result is shown in the pool's unit. Snapping an already legal length
    returns an equal value.
    """
    pool = pool_length(course)
    snapped = snap_canonical(length.canonical, pool.canonical, rounding)
    return Length.of_canonical(snapped, pool.display)


def pool_lengths(length: Length, course: Course) -> int:
    """Number of whole pool lengths in an already-snapped *length*."""
    return length.canonical // pool_length(course).canonical
