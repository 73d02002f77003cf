"""Thin ingress boundary helpers for the HTTP entrypoints.

Normalises request bodies (raw bytes, JSON string, or already-parsed
dict) into a plain dict so that adapters see one shape regardless of
how the host delivered the payload.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from rolyrine.core.exceptions import ContractError

logger = logging.getLogger("rolyrine.core.ingress")


def deserialize_request_body(raw: str | bytes | dict[str, Any] | object) -> dict[str, Any]:
    """Normalise a request body to a plain dict.

    Args:
        raw: The body as delivered by the host binding.

    Returns:
        Parsed dict payload.

    Raises:
        ContractError: If *raw* is not valid JSON, not a JSON object, or
            of an unexpected type.
    """
    if isinstance(raw, bytes | bytearray):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Request body is not valid UTF-8: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_ENCODING") from exc
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Request body is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc
        if not isinstance(parsed, dict):
            msg = f"Request body JSON must be an object, got {type(parsed).__name__}"
            raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")
        logger.debug("Deserialised request body | keys=%s", sorted(parsed))
        return parsed
    if isinstance(raw, dict):
        return raw
    msg = f"Unexpected request body type: {type(raw).__name__}"
    raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")
