"""Encoded Polyline codec.

Lossless-within-precision transform between an ordered sequence of
geographic coordinates and the compact ASCII Encoded Polyline format,
with thin host-boundary adapters and an Azure Functions HTTP surface.
"""

from rolyrine.codec import (
    InvalidCoordinateError,
    InvalidPrecisionError,
    MalformedInputError,
    decode,
    encode,
)
from rolyrine.core.exceptions import CodecError
from rolyrine.models import AxisOrder, Polyline

__version__ = "0.1.0"

__all__ = [
    "AxisOrder",
    "CodecError",
    "InvalidCoordinateError",
    "InvalidPrecisionError",
    "MalformedInputError",
    "Polyline",
    "decode",
    "encode",
]
