"""Shared codec constants — single source of truth.

Centralises the alphabet offset, bit-packing widths, and numeric ranges
used by both directions of the codec so that encoder and decoder can
never drift apart.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Alphabet and bit packing
# ---------------------------------------------------------------------------

CHAR_OFFSET: int = 63
"""Added to every 5-bit group to land in printable ASCII."""

CHUNK_BITS: int = 5
"""Payload bits carried by each encoded character."""

CHUNK_MASK: int = 0x1F
"""Mask selecting the payload bits of a group."""

CONTINUATION_BIT: int = 0x20
"""Set on every group of a value except the last."""

MIN_CHAR_CODE: int = CHAR_OFFSET
MAX_CHAR_CODE: int = 126
"""Inclusive bounds of the encoded alphabet (``?`` through ``~``)."""

# ---------------------------------------------------------------------------
# Numeric ranges
# ---------------------------------------------------------------------------

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

MAX_VALUE_BITS: int = 64
"""A zig-zagged int64 never needs more than 64 bits."""

DEFAULT_PRECISION: int = 5
"""Five decimal digits, the precision used by most mapping services."""

# ---------------------------------------------------------------------------
# WGS 84 bounds (opt-in validation only)
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
