"""Pydantic request/response models for the JSON boundary.

These schemas describe the bodies accepted and returned by the HTTP
surface.  Precision and axis order are optional in requests; when
omitted, the adapter falls back to ``CodecConfig`` defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from rolyrine.models.axis import AxisOrder


class EncodeRequest(BaseModel):
    """Body of an encode request.

    Attributes:
        coordinates: Ordered list of ``[a, b]`` (or ``[a, b, alt]``) pairs.
        precision: Decimal digits to keep.
        axis_order: Tuple convention of ``coordinates``.
        correlation_id: Caller-supplied request identifier.
    """

    coordinates: list[list[float]] = Field(default_factory=list)
    precision: int | None = Field(default=None, ge=0)
    axis_order: AxisOrder | None = None
    correlation_id: str = ""


class DecodeRequest(BaseModel):
    """Body of a decode request."""

    encoded: str
    precision: int | None = Field(default=None, ge=0)
    axis_order: AxisOrder | None = None
    correlation_id: str = ""


class EncodeResponse(BaseModel):
    """Successful encode result."""

    encoded: str
    precision: int
    axis_order: AxisOrder
    point_count: int = 0


class DecodeResponse(BaseModel):
    """Successful decode result."""

    coordinates: list[tuple[float, float]] = Field(default_factory=list)
    precision: int
    axis_order: AxisOrder
    point_count: int = 0
