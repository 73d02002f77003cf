"""Host-boundary adapters around the codec.

- base: the two-method ``CodecAdapter`` interface
- raising: values out, exceptions raised
- tagged: ``("ok", value)`` / ``("error", details)`` tuples
- json_payload: pydantic-validated JSON bodies for the HTTP surface
- factory: name-based registry
"""

from rolyrine.adapters.base import CodecAdapter
from rolyrine.adapters.factory import get_adapter, list_adapters, register_adapter

__all__ = [
    "CodecAdapter",
    "get_adapter",
    "list_adapters",
    "register_adapter",
]
