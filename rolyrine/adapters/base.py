"""CodecAdapter abstract base class.

A host boundary (Python callers, a tagged-result convention, a JSON
HTTP surface) talks to the codec exclusively through this two-method
interface.  An adapter's only job is to convert the host's shapes into
codec arguments, call the codec, and convert the result, translating
``CodecError`` into whatever error convention the host uses.
"""

from __future__ import annotations

import abc
from typing import Any

from rolyrine.core.config import CodecConfig


class CodecAdapter(abc.ABC):
    """Abstract base class for host-boundary adapters.

    The constructor receives a ``CodecConfig`` which supplies the
    default precision and axis order for calls that omit them.

    Example usage::

        adapter = get_adapter("tagged")
        adapter.encode([(38.5, -120.2)], 5)   # ("ok", "_p~iF~ps|U")
        adapter.decode("_p~iF", 5)             # ("error", {...})
    """

    #: Registry name of the adapter.
    name: str = ""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        """Return the adapter configuration (read-only)."""
        return self._config

    def resolve_precision(self, precision: int | None) -> int:
        """Return *precision*, or the configured default when ``None``."""
        return self._config.default_precision if precision is None else precision

    # ------------------------------------------------------------------
    # Abstract methods — every adapter must implement these
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def encode(self, payload: Any, precision: int | None = None) -> Any:
        """Encode host-shaped coordinates."""

    @abc.abstractmethod
    def decode(self, payload: Any, precision: int | None = None) -> Any:
        """Decode a host-shaped encoded polyline."""
