"""Codec configuration loaded from environment variables.

All configuration values have sensible defaults.  Azure Functions app
settings (or ``local.settings.json`` for local dev) are the source of
truth when running behind the HTTP surface; library callers can build a
``CodecConfig`` directly.

``from_env()`` raises ``ConfigValidationError`` if any value is out of
its valid range, so bad configuration is caught at startup rather than
on the first request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from rolyrine.core.constants import DEFAULT_PRECISION
from rolyrine.core.exceptions import CodecError
from rolyrine.models.axis import AxisOrder

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(CodecError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec configuration.

    Attributes:
        default_precision: Decimal digits used when a request omits precision.
        axis_order: Tuple convention for coordinates (``latlon`` or ``lonlat``).
        validate_bounds: Reject coordinates outside WGS 84 bounds on encode.
        max_encoded_length: Largest encoded string (characters) the HTTP
            surface accepts for decoding.
        max_coordinate_count: Largest number of coordinates the HTTP
            surface accepts for encoding.
    """

    default_precision: int = DEFAULT_PRECISION
    axis_order: AxisOrder = AxisOrder.LAT_LON
    validate_bounds: bool = False
    max_encoded_length: int = 1_000_000
    max_coordinate_count: int = 100_000

    @classmethod
    def from_env(cls) -> CodecConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or cannot
                be interpreted.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``ROLYRINE_DEFAULT_PRECISION=abc``).
        """
        raw_axis = os.getenv("ROLYRINE_AXIS_ORDER", AxisOrder.LAT_LON.value)
        try:
            axis_order = AxisOrder(raw_axis.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(a.value for a in AxisOrder)
            raise ConfigValidationError(
                "ROLYRINE_AXIS_ORDER", raw_axis, f"must be one of: {allowed}"
            ) from exc

        config = cls(
            default_precision=int(os.getenv("ROLYRINE_DEFAULT_PRECISION", str(DEFAULT_PRECISION))),
            axis_order=axis_order,
            validate_bounds=_parse_bool(
                "ROLYRINE_VALIDATE_BOUNDS", os.getenv("ROLYRINE_VALIDATE_BOUNDS", "false")
            ),
            max_encoded_length=int(os.getenv("ROLYRINE_MAX_ENCODED_LENGTH", "1000000")),
            max_coordinate_count=int(os.getenv("ROLYRINE_MAX_COORDINATE_COUNT", "100000")),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false)")


def _validate(config: CodecConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.default_precision < 0:
        raise ConfigValidationError(
            "ROLYRINE_DEFAULT_PRECISION",
            config.default_precision,
            "must be >= 0 (decimal digits)",
        )

    if config.max_encoded_length <= 0:
        raise ConfigValidationError(
            "ROLYRINE_MAX_ENCODED_LENGTH",
            config.max_encoded_length,
            "must be > 0 (characters)",
        )

    if config.max_coordinate_count <= 0:
        raise ConfigValidationError(
            "ROLYRINE_MAX_COORDINATE_COUNT",
            config.max_coordinate_count,
            "must be > 0 (coordinates)",
        )
