"""Adapter for JSON request/response bodies (used by the HTTP surface).

Request bodies are validated with the pydantic models in
``rolyrine.models.requests``.  Every outcome is a JSON-ready dict:

- success: ``{"ok": True, **EncodeResponse | DecodeResponse}``
- failure: ``{"ok": False, "error": CodecError.to_error_dict()}``

Schema violations in the body are reported as ``ContractError`` with
code ``REQUEST_INVALID``.  Oversize bodies (too many coordinates to
encode, too long a string to decode) are ``ContractError`` with code
``PAYLOAD_TOO_LARGE``.
"""

from __future__ import annotations

import logging
from typing import Any

import pydantic

from rolyrine.adapters.base import CodecAdapter
from rolyrine.codec import decode, encode
from rolyrine.core.exceptions import CodecError, ContractError
from rolyrine.core.ingress import deserialize_request_body
from rolyrine.models.requests import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
)

logger = logging.getLogger("rolyrine.adapters.json_payload")

REQUEST_INVALID = "REQUEST_INVALID"
PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_PAYLOAD_TOO_LARGE = 413


class JsonAdapter(CodecAdapter):
    """Accept raw or parsed JSON bodies and return JSON-ready dicts.

    A ``precision`` argument, when given, overrides the body's value.
    """

    name = "json"

    def encode(self, payload: Any, precision: int | None = None) -> dict[str, Any]:
        correlation_id = ""
        try:
            request = _parse(payload, EncodeRequest, stage="encode")
            correlation_id = request.correlation_id
            if len(request.coordinates) > self._config.max_coordinate_count:
                msg = (
                    f"Request has {len(request.coordinates)} coordinates, "
                    f"limit is {self._config.max_coordinate_count}"
                )
                raise ContractError(msg, stage="encode", code=PAYLOAD_TOO_LARGE)
            digits = self.resolve_precision(_first(precision, request.precision))
            axis_order = request.axis_order or self._config.axis_order
            encoded = encode(
                request.coordinates,
                digits,
                axis_order=axis_order,
                validate_bounds=self._config.validate_bounds,
            )
        except CodecError as exc:
            return _failure(exc, correlation_id)

        response = EncodeResponse(
            encoded=encoded,
            precision=digits,
            axis_order=axis_order,
            point_count=len(request.coordinates),
        )
        return {"ok": True, **response.model_dump(mode="json")}

    def decode(self, payload: Any, precision: int | None = None) -> dict[str, Any]:
        correlation_id = ""
        try:
            request = _parse(payload, DecodeRequest, stage="decode")
            correlation_id = request.correlation_id
            if len(request.encoded) > self._config.max_encoded_length:
                msg = (
                    f"Encoded polyline has {len(request.encoded)} characters, "
                    f"limit is {self._config.max_encoded_length}"
                )
                raise ContractError(msg, stage="decode", code=PAYLOAD_TOO_LARGE)
            digits = self.resolve_precision(_first(precision, request.precision))
            axis_order = request.axis_order or self._config.axis_order
            coordinates = decode(request.encoded, digits, axis_order=axis_order)
        except CodecError as exc:
            return _failure(exc, correlation_id)

        response = DecodeResponse(
            coordinates=coordinates,
            precision=digits,
            axis_order=axis_order,
            point_count=len(coordinates),
        )
        return {"ok": True, **response.model_dump(mode="json")}


def http_status_for(result: dict[str, Any]) -> int:
    """Map a ``JsonAdapter`` result dict to an HTTP status code."""
    if result.get("ok"):
        return HTTP_OK
    error = result.get("error", {})
    if error.get("code") == PAYLOAD_TOO_LARGE:
        return HTTP_PAYLOAD_TOO_LARGE
    return HTTP_BAD_REQUEST


def _first(override: int | None, fallback: int | None) -> int | None:
    return fallback if override is None else override


def _parse(
    payload: Any,
    model: type[EncodeRequest] | type[DecodeRequest],
    *,
    stage: str,
) -> Any:
    body = deserialize_request_body(payload)
    try:
        return model.model_validate(body)
    except pydantic.ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<body>" for err in exc.errors())
        msg = f"{stage}: invalid request field(s): {fields}"
        raise ContractError(msg, stage=stage, code=REQUEST_INVALID) from exc


def _failure(exc: CodecError, correlation_id: str) -> dict[str, Any]:
    if correlation_id and not exc.correlation_id:
        exc.correlation_id = correlation_id
    logger.warning(
        "JSON codec request failed | stage=%s | code=%s | correlation_id=%s | %s",
        exc.stage,
        exc.code,
        exc.correlation_id,
        exc.message,
    )
    return {"ok": False, "error": exc.to_error_dict()}
