"""Fixed-point scaling between float coordinates and integers."""

from __future__ import annotations

import math

from rolyrine.codec._validation import (
    InvalidCoordinateError,
    InvalidPrecisionError,
    validate_precision,
)
from rolyrine.core.constants import INT64_MAX, INT64_MIN


def scale_factor(precision: object) -> float:
    """Return ``10 ** precision`` as a float.

    Raises:
        InvalidPrecisionError: If *precision* is invalid or its scale
            overflows a float64.
    """
    digits = validate_precision(precision)
    try:
        return 10.0**digits
    except OverflowError as exc:
        msg = f"Precision {digits} overflows the float64 scale factor"
        raise InvalidPrecisionError(msg) from exc


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's ``round()`` and ``numpy.round`` both round ties to even,
    which produces different bytes from other encoders on exact ties
    (``0.5``, ``-2.5`` ...).
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Exact subtraction: magnitude is already integral at or above 2**52.
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def ensure_int64(value: int, *, what: str, index: int) -> int:
    """Return *value* unchanged if it fits a signed 64-bit integer.

    Raises:
        InvalidCoordinateError: If *value* is out of range.
    """
    if not INT64_MIN <= value <= INT64_MAX:
        msg = f"Scaled {what} {value} at coordinate {index} exceeds the signed 64-bit range"
        raise InvalidCoordinateError(msg)
    return value


def scale_component(value: float, scale: float, *, index: int) -> int:
    """Scale one coordinate component and round it to an int64.

    Raises:
        InvalidCoordinateError: If the scaled value is not representable.
    """
    scaled = value * scale
    if not INT64_MIN <= scaled <= INT64_MAX:
        msg = f"Coordinate component {value!r} at index {index} is out of range once scaled"
        raise InvalidCoordinateError(msg)
    return ensure_int64(round_half_away_from_zero(scaled), what="value", index=index)
