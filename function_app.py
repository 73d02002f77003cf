"""Azure Functions entry point — Encoded Polyline codec over HTTP.

This module registers the HTTP triggers using the Python v2 programming
model.  All codec logic lives in the rolyrine package; this file is
purely the wiring layer between Azure Functions bindings and the JSON
adapter.
"""

from __future__ import annotations

import functools
import json
import logging

import azure.functions as func

from rolyrine.adapters.factory import JSON, get_adapter
from rolyrine.adapters.json_payload import http_status_for
from rolyrine.core.config import CodecConfig

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

logger = logging.getLogger("rolyrine.function_app")


@functools.lru_cache(maxsize=1)
def _config() -> CodecConfig:
    """Load configuration once per worker process."""
    return CodecConfig.from_env()


def _to_response(result: dict[str, object]) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(result),
        status_code=http_status_for(result),
        mimetype="application/json",
    )


# ---------------------------------------------------------------------------
# HTTP: encode / decode
# ---------------------------------------------------------------------------


@app.function_name("polyline_encode")
@app.route(route="polyline/encode", methods=["POST"])
def polyline_encode(req: func.HttpRequest) -> func.HttpResponse:
    """Encode a JSON list of coordinates into a polyline string.

    Body: ``{"coordinates": [[lat, lon], ...], "precision": 5}``.
    """
    result = get_adapter(JSON, _config()).encode(req.get_body())
    logger.info(
        "polyline_encode completed | ok=%s | points=%s",
        result["ok"],
        result.get("point_count", 0),
    )
    return _to_response(result)


@app.function_name("polyline_decode")
@app.route(route="polyline/decode", methods=["POST"])
def polyline_decode(req: func.HttpRequest) -> func.HttpResponse:
    """Decode a polyline string into a JSON list of coordinates.

    Body: ``{"encoded": "_p~iF~ps|U", "precision": 5}``.
    """
    result = get_adapter(JSON, _config()).decode(req.get_body())
    logger.info(
        "polyline_decode completed | ok=%s | points=%s",
        result["ok"],
        result.get("point_count", 0),
    )
    return _to_response(result)
