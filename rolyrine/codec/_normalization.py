"""Input normalisation for the codec.

Responsibilities:
- Convert host coordinate containers (sequences, numpy arrays, shapely
  LineStrings) to a float64 ``(n, 2)`` array
- Reject non-finite components up front, with the offending index
- Convert encoded input (``str`` or ASCII ``bytes``) to ``str``
"""

from __future__ import annotations

from typing import Any

import numpy as np

from rolyrine.codec._validation import (
    INVALID_CHARACTER,
    InvalidCoordinateError,
    MalformedInputError,
)


def coords_to_array(raw_coords: Any) -> np.ndarray:
    """Convert coordinates to a float64 array of shape ``(n, 2)``.

    A third (altitude) component is dropped if present.  A shapely
    geometry is accepted only if it is a ``LineString``.

    Raises:
        InvalidCoordinateError: If the input is not a sequence of
            numeric pairs or contains a NaN/Infinity component.
    """
    geom_type = getattr(raw_coords, "geom_type", None)
    if geom_type is not None:
        if geom_type != "LineString":
            msg = f"Unsupported geometry type {geom_type}; only LineString can be encoded"
            raise InvalidCoordinateError(msg)
        raw_coords = list(raw_coords.coords)
    elif not isinstance(raw_coords, np.ndarray):
        try:
            raw_coords = list(raw_coords)
        except TypeError as exc:
            msg = f"Coordinates must be a sequence, got {type(raw_coords).__name__}"
            raise InvalidCoordinateError(msg) from exc

    try:
        array = np.asarray(raw_coords, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        msg = f"Coordinates must be a sequence of numeric pairs: {exc}"
        raise InvalidCoordinateError(msg) from exc

    if array.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if array.ndim != 2 or array.shape[1] < 2:
        msg = f"Coordinates must have shape (n, 2) or (n, 3), got {array.shape}"
        raise InvalidCoordinateError(msg)

    array = array[:, :2]
    finite = np.isfinite(array).all(axis=1)
    if not finite.all():
        idx = int(np.flatnonzero(~finite)[0])
        msg = f"Non-finite coordinate at index {idx}: {tuple(array[idx].tolist())}"
        raise InvalidCoordinateError(msg)
    return array


def encoded_to_text(encoded: str | bytes) -> str:
    """Return *encoded* as ``str``.

    Raises:
        MalformedInputError: If *encoded* is bytes that are not ASCII.
        TypeError: If *encoded* is neither ``str`` nor ``bytes``.
    """
    if isinstance(encoded, str):
        return encoded
    if isinstance(encoded, bytes | bytearray):
        try:
            return bytes(encoded).decode("ascii")
        except UnicodeDecodeError as exc:
            msg = f"Byte {encoded[exc.start]:#04x} at position {exc.start} is not ASCII"
            raise MalformedInputError(msg, position=exc.start, reason=INVALID_CHARACTER) from exc
    msg = f"Encoded polyline must be str or bytes, got {type(encoded).__name__}"
    raise TypeError(msg)
