"""Encoded Polyline codec — two pure, stateless transforms.

``encode`` turns an ordered coordinate sequence into a compact ASCII
string; ``decode`` reverses it.  Both are parameterised by a precision
``p`` (decimal digits kept, scale factor ``10 ** p``) that is not
carried in the string: callers must use the same precision on both
sides.  Decoding at the wrong precision silently yields coordinates off
by a power of ten.

Pipeline per coordinate:

- **_scaling**: multiply by ``10 ** p``, round half away from zero
- delta against the previous coordinate, latitude axis first
- **_varint**: zig-zag, then 5-bit groups with a continuation flag

Behaviour on non-finite input (NaN, Infinity) is to reject it with
``InvalidCoordinateError``; nothing is ever encoded for it.  Decoding
is atomic: either the whole string decodes or ``MalformedInputError``
is raised.

All functions are reentrant and keep no state between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rolyrine.codec._normalization import coords_to_array, encoded_to_text
from rolyrine.codec._scaling import (
    ensure_int64,
    round_half_away_from_zero,
    scale_component,
    scale_factor,
)
from rolyrine.codec._validation import (
    INVALID_CHARACTER,
    OVERFLOW,
    TRUNCATED,
    InvalidCoordinateError,
    InvalidPrecisionError,
    MalformedInputError,
    validate_precision,
    validate_wgs84,
)
from rolyrine.codec._varint import decode_signed, encode_signed
from rolyrine.core.constants import DEFAULT_PRECISION, INT64_MAX, INT64_MIN
from rolyrine.models.axis import AxisOrder

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("rolyrine.codec")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "INVALID_CHARACTER",
    "OVERFLOW",
    "TRUNCATED",
    "InvalidCoordinateError",
    "InvalidPrecisionError",
    "MalformedInputError",
    "decode",
    "encode",
    "round_half_away_from_zero",
    "scale_factor",
    "validate_precision",
]


def encode(
    coordinates: Iterable[Any] | Any,
    precision: int = DEFAULT_PRECISION,
    *,
    axis_order: AxisOrder | str = AxisOrder.LAT_LON,
    validate_bounds: bool = False,
) -> str:
    """Encode a coordinate sequence as a polyline string.

    Args:
        coordinates: Ordered coordinate pairs: a sequence of 2- or
            3-element sequences, a numpy array of shape ``(n, 2|3)``, or a
            shapely ``LineString``.  May be empty.
        precision: Decimal digits to keep (``>= 0``).
        axis_order: Tuple convention of *coordinates*.  Latitude is
            always emitted first on the wire.
        validate_bounds: Reject coordinates outside WGS 84 bounds.  No
            bounds are enforced by default.

    Returns:
        The encoded ASCII string (``""`` for an empty sequence).

    Raises:
        InvalidPrecisionError: If *precision* is not a non-negative integer.
        InvalidCoordinateError: If a component is NaN/Infinity, scales
            outside the signed 64-bit range, or (when requested) is out
            of WGS 84 bounds.
    """
    scale = scale_factor(precision)
    order = AxisOrder(axis_order)
    array = coords_to_array(coordinates)

    chunks: list[str] = []
    prev_lat = 0
    prev_lon = 0
    for index, (a, b) in enumerate(array.tolist()):
        lat, lon = order.to_wire((a, b))
        if validate_bounds:
            validate_wgs84(lat, lon, index)

        scaled_lat = scale_component(lat, scale, index=index)
        scaled_lon = scale_component(lon, scale, index=index)
        chunks.append(encode_signed(ensure_int64(scaled_lat - prev_lat, what="delta", index=index)))
        chunks.append(encode_signed(ensure_int64(scaled_lon - prev_lon, what="delta", index=index)))
        prev_lat = scaled_lat
        prev_lon = scaled_lon

    encoded = "".join(chunks)
    logger.debug(
        "Encoded polyline | points=%d | precision=%s | chars=%d",
        len(array),
        precision,
        len(encoded),
    )
    return encoded


def decode(
    encoded: str | bytes,
    precision: int = DEFAULT_PRECISION,
    *,
    axis_order: AxisOrder | str = AxisOrder.LAT_LON,
) -> list[tuple[float, float]]:
    """Decode a polyline string into coordinate pairs.

    Args:
        encoded: The encoded string (``str`` or ASCII ``bytes``).
        precision: Decimal digits used when the string was encoded.
        axis_order: Tuple convention for the returned pairs.

    Returns:
        Ordered list of coordinate tuples (empty for ``""``).

    Raises:
        InvalidPrecisionError: If *precision* is not a non-negative integer.
        MalformedInputError: If the string is truncated, contains a
            character outside ASCII 63..126, or encodes a value outside
            the signed 64-bit range.
    """
    scale = scale_factor(precision)
    order = AxisOrder(axis_order)
    text = encoded_to_text(encoded)

    coordinates: list[tuple[float, float]] = []
    length = len(text)
    index = 0
    lat = 0
    lon = 0
    while index < length:
        start = index
        delta_lat, index = decode_signed(text, index)
        if index >= length:
            msg = f"Encoded string ends after a lone latitude value at position {start}"
            raise MalformedInputError(msg, position=index, reason=TRUNCATED)
        delta_lon, index = decode_signed(text, index)

        lat = _accumulate(lat, delta_lat, start)
        lon = _accumulate(lon, delta_lon, start)
        coordinates.append(order.from_wire((lat / scale, lon / scale)))

    logger.debug(
        "Decoded polyline | points=%d | precision=%s | chars=%d",
        len(coordinates),
        precision,
        length,
    )
    return coordinates


def _accumulate(total: int, delta: int, position: int) -> int:
    total += delta
    if not INT64_MIN <= total <= INT64_MAX:
        msg = f"Running coordinate overflows the signed 64-bit range at position {position}"
        raise MalformedInputError(msg, position=position, reason=OVERFLOW)
    return total
