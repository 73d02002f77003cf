"""Adapter returning tagged result tuples instead of raising.

Success is ``("ok", value)``; failure is ``("error", error_dict)`` where
``error_dict`` is ``CodecError.to_error_dict()``.  This is the
convention of runtimes that signal errors as tagged values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rolyrine.adapters.base import CodecAdapter
from rolyrine.adapters.raising import RaisingAdapter
from rolyrine.core.exceptions import CodecError

if TYPE_CHECKING:
    from rolyrine.core.config import CodecConfig

logger = logging.getLogger("rolyrine.adapters.tagged")

OK = "ok"
ERROR = "error"

TaggedResult = tuple[str, Any]


class TaggedAdapter(CodecAdapter):
    """Wrap every outcome in an ``(tag, value)`` tuple."""

    name = "tagged"

    def __init__(self, config: CodecConfig | None = None) -> None:
        super().__init__(config)
        self._inner = RaisingAdapter(self._config)

    def encode(self, payload: Any, precision: int | None = None) -> TaggedResult:
        try:
            return (OK, self._inner.encode(payload, precision))
        except CodecError as exc:
            return _error(exc)

    def decode(self, payload: Any, precision: int | None = None) -> TaggedResult:
        try:
            return (OK, self._inner.decode(payload, precision))
        except CodecError as exc:
            return _error(exc)


def _error(exc: CodecError) -> TaggedResult:
    logger.warning("Codec call failed | stage=%s | code=%s | %s", exc.stage, exc.code, exc.message)
    return (ERROR, exc.to_error_dict())
