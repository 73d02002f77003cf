"""Adapter for plain Python callers: values out, ``CodecError`` raised."""

from __future__ import annotations

from typing import Any

from rolyrine.adapters.base import CodecAdapter
from rolyrine.codec import decode, encode


class RaisingAdapter(CodecAdapter):
    """Return codec results directly and let ``CodecError`` propagate."""

    name = "raising"

    def encode(self, payload: Any, precision: int | None = None) -> str:
        return encode(
            payload,
            self.resolve_precision(precision),
            axis_order=self._config.axis_order,
            validate_bounds=self._config.validate_bounds,
        )

    def decode(self, payload: Any, precision: int | None = None) -> list[tuple[float, float]]:
        return decode(
            payload,
            self.resolve_precision(precision),
            axis_order=self._config.axis_order,
        )
