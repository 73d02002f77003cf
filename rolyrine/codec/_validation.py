"""Codec exceptions and argument validation.

Responsibilities:
- The ``MalformedInput`` error kind raised by the decoder
- Coordinate and precision errors raised before any output is built
- Precision normalisation (non-negative integer, no booleans)
- Opt-in WGS 84 bounds checking
"""

from __future__ import annotations

import operator

from rolyrine.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from rolyrine.core.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Malformed-input reasons
# ---------------------------------------------------------------------------

TRUNCATED = "truncated"
INVALID_CHARACTER = "invalid_character"
OVERFLOW = "overflow"


# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class MalformedInputError(ValidationError):
    """Raised when an encoded string is structurally invalid.

    Attributes:
        position: Zero-based character index where decoding failed.
        reason: One of ``"truncated"``, ``"invalid_character"`` or
            ``"overflow"``.
    """

    default_stage = "decode"
    default_code = "POLYLINE_MALFORMED"

    def __init__(self, message: str, *, position: int, reason: str, **kwargs: object) -> None:
        self.position = position
        self.reason = reason
        super().__init__(message, **kwargs)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["position"] = self.position
        payload["reason"] = self.reason
        return payload


class InvalidCoordinateError(ValidationError):
    """Raised when a coordinate cannot be encoded.

    Covers non-finite components, values whose scaled integer falls
    outside the signed 64-bit range, malformed coordinate shapes, and
    (when requested) WGS 84 bounds violations.
    """

    default_stage = "encode"
    default_code = "POLYLINE_COORDINATE_INVALID"


class InvalidPrecisionError(ValidationError):
    """Raised when precision is not a usable non-negative integer."""

    default_code = "POLYLINE_PRECISION_INVALID"


# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------


def validate_precision(precision: object) -> int:
    """Return *precision* as a plain ``int``.

    Accepts any integral type (including numpy integers).

    Raises:
        InvalidPrecisionError: If *precision* is a bool, not integral,
            or negative.
    """
    if isinstance(precision, bool):
        msg = f"Precision must be an integer, got bool {precision!r}"
        raise InvalidPrecisionError(msg)
    try:
        value = operator.index(precision)  # type: ignore[arg-type]
    except TypeError as exc:
        msg = f"Precision must be an integer, got {type(precision).__name__}"
        raise InvalidPrecisionError(msg) from exc
    if value < 0:
        msg = f"Precision must be >= 0, got {value}"
        raise InvalidPrecisionError(msg)
    return value


# ---------------------------------------------------------------------------
# Coordinate bounds (opt-in)
# ---------------------------------------------------------------------------


def validate_wgs84(lat: float, lon: float, index: int) -> None:
    """Validate that a wire-order coordinate is within WGS 84 bounds.

    Raises:
        InvalidCoordinateError: If latitude or longitude is out of range.
    """
    if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
        msg = (
            f"Latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}] "
            f"at coordinate {index}"
        )
        raise InvalidCoordinateError(msg)
    if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
        msg = (
            f"Longitude {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}] "
            f"at coordinate {index}"
        )
        raise InvalidCoordinateError(msg)
