"""Tests for the HTTP triggers in function_app.py.

Builds real ``func.HttpRequest`` objects and calls the registered user
functions, so the route wiring, the JSON adapter and the status mapping
are exercised together.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from unittest.mock import patch

import azure.functions as func
import pytest

import function_app

ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
POINTS = [[38.5, -120.2], [40.7, -120.95], [43.252, -126.453]]


def _user_function(trigger: object) -> Callable[[func.HttpRequest], func.HttpResponse]:
    """Unwrap a v2 decorated trigger into the plain Python function."""
    build = getattr(trigger, "build", None)
    if build is None:
        return trigger  # type: ignore[return-value]
    return build().get_user_function()


def _post(route: str, body: bytes) -> func.HttpRequest:
    return func.HttpRequest(method="POST", url=f"/api/{route}", body=body)


def _json_post(route: str, payload: dict[str, object]) -> func.HttpRequest:
    return _post(route, json.dumps(payload).encode("utf-8"))


@pytest.fixture(autouse=True)
def _fresh_config() -> Iterator[None]:
    """Reload configuration from a clean environment for every test."""
    with patch.dict(os.environ, {}, clear=True):
        function_app._config.cache_clear()
        yield
    function_app._config.cache_clear()


class TestPolylineEncodeTrigger:
    """POST /api/polyline/encode."""

    def test_reference_vector(self) -> None:
        encode = _user_function(function_app.polyline_encode)
        resp = encode(_json_post("polyline/encode", {"coordinates": POINTS}))
        assert resp.status_code == 200
        assert resp.mimetype == "application/json"
        body = json.loads(resp.get_body())
        assert body["ok"] is True
        assert body["encoded"] == ENCODED
        assert body["point_count"] == 3

    def test_non_finite_coordinate(self) -> None:
        encode = _user_function(function_app.polyline_encode)
        resp = encode(_post("polyline/encode", b'{"coordinates": [[NaN, 0.0]]}'))
        assert resp.status_code == 400
        body = json.loads(resp.get_body())
        assert body["error"]["code"] == "POLYLINE_COORDINATE_INVALID"

    def test_non_json_body(self) -> None:
        encode = _user_function(function_app.polyline_encode)
        resp = encode(_post("polyline/encode", b"not json"))
        assert resp.status_code == 400
        body = json.loads(resp.get_body())
        assert body["ok"] is False
        assert body["error"]["code"] == "INVALID_JSON"
        assert body["error"]["category"] == "contract"

    def test_too_many_coordinates(self) -> None:
        with patch.dict(os.environ, {"ROLYRINE_MAX_COORDINATE_COUNT": "2"}):
            function_app._config.cache_clear()
            encode = _user_function(function_app.polyline_encode)
            resp = encode(_json_post("polyline/encode", {"coordinates": POINTS}))
        assert resp.status_code == 413
        assert json.loads(resp.get_body())["error"]["code"] == "PAYLOAD_TOO_LARGE"


class TestPolylineDecodeTrigger:
    """POST /api/polyline/decode."""

    def test_reference_vector(self) -> None:
        decode = _user_function(function_app.polyline_decode)
        resp = decode(_json_post("polyline/decode", {"encoded": ENCODED}))
        assert resp.status_code == 200
        body = json.loads(resp.get_body())
        assert body["coordinates"] == POINTS
        assert body["precision"] == 5
        assert body["axis_order"] == "latlon"

    def test_truncated_string(self) -> None:
        decode = _user_function(function_app.polyline_decode)
        resp = decode(_json_post("polyline/decode", {"encoded": "_"}))
        assert resp.status_code == 400
        error = json.loads(resp.get_body())["error"]
        assert error["code"] == "POLYLINE_MALFORMED"
        assert error["reason"] == "truncated"
        assert error["position"] == 1
        assert error["stage"] == "decode"

    def test_oversize_string(self) -> None:
        with patch.dict(os.environ, {"ROLYRINE_MAX_ENCODED_LENGTH": "4"}):
            function_app._config.cache_clear()
            decode = _user_function(function_app.polyline_decode)
            resp = decode(_json_post("polyline/decode", {"encoded": ENCODED}))
        assert resp.status_code == 413
        assert json.loads(resp.get_body())["error"]["code"] == "PAYLOAD_TOO_LARGE"

    def test_non_json_body(self) -> None:
        decode = _user_function(function_app.polyline_decode)
        resp = decode(_post("polyline/decode", b"\xff\xfe"))
        assert resp.status_code == 400
        assert json.loads(resp.get_body())["error"]["stage"] == "ingress"
