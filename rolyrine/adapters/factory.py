"""Adapter factory — selects a host-boundary adapter by name.

The factory maintains a registry of known adapters.  New adapters are
registered with ``register_adapter``.

Usage::

    from rolyrine.adapters.factory import get_adapter

    adapter = get_adapter("tagged")
    adapter.encode([(38.5, -120.2)], 5)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rolyrine.core.exceptions import ContractError

if TYPE_CHECKING:
    from collections.abc import Callable

    from rolyrine.adapters.base import CodecAdapter
    from rolyrine.core.config import CodecConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Adapter name constants
# ---------------------------------------------------------------------------

RAISING = "raising"
TAGGED = "tagged"
JSON = "json"

# ---------------------------------------------------------------------------
# Lazy-import adapter registry
# ---------------------------------------------------------------------------

# Each entry maps an adapter name to a callable returning the adapter
# *class*, so pydantic is only imported when the JSON adapter is used.

_ADAPTER_REGISTRY: dict[str, Callable[[], type[CodecAdapter]]] = {}


def _register_builtin_adapters() -> None:
    """Register the built-in adapters as lazy import thunks."""

    def _raising() -> type[CodecAdapter]:
        from rolyrine.adapters.raising import RaisingAdapter

        return RaisingAdapter

    def _tagged() -> type[CodecAdapter]:
        from rolyrine.adapters.tagged import TaggedAdapter

        return TaggedAdapter

    def _json() -> type[CodecAdapter]:
        from rolyrine.adapters.json_payload import JsonAdapter

        return JsonAdapter

    _ADAPTER_REGISTRY[RAISING] = _raising
    _ADAPTER_REGISTRY[TAGGED] = _tagged
    _ADAPTER_REGISTRY[JSON] = _json


def _ensure_registry() -> None:
    """Initialise the adapter registry once (idempotent)."""
    if not _ADAPTER_REGISTRY:
        _register_builtin_adapters()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_adapter(name: str, loader: Callable[[], type[CodecAdapter]]) -> None:
    """Register a custom adapter.

    Args:
        name: Adapter name (e.g. ``"my_host"``).
        loader: A zero-argument callable that returns the adapter class.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Adapter name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _ADAPTER_REGISTRY[name] = loader
    logger.debug("Registered codec adapter: %s", name)


def get_adapter(name: str, config: CodecConfig | None = None) -> CodecAdapter:
    """Create and return a codec adapter instance.

    Raises:
        ContractError: If the named adapter is not registered.
    """
    _ensure_registry()

    loader = _ADAPTER_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_ADAPTER_REGISTRY))
        msg = f"Unknown codec adapter: {name!r}. Available: {available}"
        raise ContractError(msg, stage="adapter", code="ADAPTER_UNKNOWN")

    adapter_cls = loader()
    logger.debug("Creating codec adapter: %s", name)
    return adapter_cls(config)


def list_adapters() -> list[str]:
    """Return the names of all registered adapters."""
    _ensure_registry()
    return sorted(_ADAPTER_REGISTRY)
