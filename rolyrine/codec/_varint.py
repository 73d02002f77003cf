"""Zig-zag and base-32 variable-length packing of single values.

Each signed value is zig-zagged (``v << 1``, inverted when negative) and
emitted as 5-bit groups, least-significant first.  Every group except
the last carries the ``0x20`` continuation bit; each group is offset by
63 to land in printable ASCII.
"""

from __future__ import annotations

from rolyrine.codec._validation import (
    INVALID_CHARACTER,
    OVERFLOW,
    TRUNCATED,
    MalformedInputError,
)
from rolyrine.core.constants import (
    CHAR_OFFSET,
    CHUNK_BITS,
    CHUNK_MASK,
    CONTINUATION_BIT,
    MAX_CHAR_CODE,
    MAX_VALUE_BITS,
    MIN_CHAR_CODE,
)


def zigzag(value: int) -> int:
    """Map a signed integer onto a non-negative one."""
    shifted = value << 1
    return ~shifted if value < 0 else shifted


def unzigzag(value: int) -> int:
    """Inverse of :func:`zigzag`."""
    return ~(value >> 1) if value & 1 else value >> 1


def encode_unsigned(value: int) -> str:
    """Emit a non-negative integer as continuation-flagged 5-bit groups."""
    chars: list[str] = []
    while value >= CONTINUATION_BIT:
        chars.append(chr((CONTINUATION_BIT | (value & CHUNK_MASK)) + CHAR_OFFSET))
        value >>= CHUNK_BITS
    chars.append(chr(value + CHAR_OFFSET))
    return "".join(chars)


def encode_signed(value: int) -> str:
    """Zig-zag a signed delta and emit it."""
    return encode_unsigned(zigzag(value))


def decode_unsigned(text: str, index: int) -> tuple[int, int]:
    """Read one value starting at *index*.

    Returns:
        ``(value, next_index)``.

    Raises:
        MalformedInputError: On an out-of-alphabet character, a value
            cut off by the end of *text*, or a value wider than 64 bits.
    """
    start = index
    length = len(text)
    result = 0
    shift = 0
    while True:
        if index >= length:
            msg = f"Encoded string ends inside the value starting at position {start}"
            raise MalformedInputError(msg, position=index, reason=TRUNCATED)

        code = ord(text[index])
        if not MIN_CHAR_CODE <= code <= MAX_CHAR_CODE:
            msg = f"Character {text[index]!r} at position {index} is outside the polyline alphabet"
            raise MalformedInputError(msg, position=index, reason=INVALID_CHARACTER)

        if shift >= MAX_VALUE_BITS:
            msg = f"Value starting at position {start} exceeds {MAX_VALUE_BITS} bits"
            raise MalformedInputError(msg, position=index, reason=OVERFLOW)

        group = code - CHAR_OFFSET
        result |= (group & CHUNK_MASK) << shift
        index += 1
        if group < CONTINUATION_BIT:
            break
        shift += CHUNK_BITS

    if result.bit_length() > MAX_VALUE_BITS:
        msg = f"Value starting at position {start} exceeds {MAX_VALUE_BITS} bits"
        raise MalformedInputError(msg, position=start, reason=OVERFLOW)
    return result, index


def decode_signed(text: str, index: int) -> tuple[int, int]:
    """Read one zig-zagged delta starting at *index*."""
    value, index = decode_unsigned(text, index)
    return unzigzag(value), index
