"""Tests for codec configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → typed fields)
- Fail-fast validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from rolyrine.core.config import CodecConfig, ConfigValidationError
from rolyrine.models.axis import AxisOrder


class TestCodecConfigDefaults:
    """Verify default configuration values."""

    def test_default_precision(self) -> None:
        assert CodecConfig().default_precision == 5

    def test_default_axis_order(self) -> None:
        assert CodecConfig().axis_order is AxisOrder.LAT_LON

    def test_bounds_not_validated_by_default(self) -> None:
        assert CodecConfig().validate_bounds is False

    def test_default_max_encoded_length(self) -> None:
        assert CodecConfig().max_encoded_length == 1_000_000

    def test_default_max_coordinate_count(self) -> None:
        assert CodecConfig().max_coordinate_count == 100_000


class TestCodecConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "ROLYRINE_DEFAULT_PRECISION": "6",
            "ROLYRINE_AXIS_ORDER": "LonLat",
            "ROLYRINE_VALIDATE_BOUNDS": "yes",
            "ROLYRINE_MAX_ENCODED_LENGTH": "2048",
            "ROLYRINE_MAX_COORDINATE_COUNT": "50",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = CodecConfig.from_env()

        assert cfg.default_precision == 6
        assert cfg.axis_order is AxisOrder.LON_LAT
        assert cfg.validate_bounds is True
        assert cfg.max_encoded_length == 2048
        assert cfg.max_coordinate_count == 50

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = CodecConfig.from_env()
        assert cfg == CodecConfig()

    def test_frozen_immutability(self) -> None:
        cfg = CodecConfig()
        with pytest.raises(AttributeError):
            cfg.default_precision = 6  # type: ignore[misc]


class TestCodecConfigValidation:
    """Fail-fast validation in from_env."""

    def test_negative_precision_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"ROLYRINE_DEFAULT_PRECISION": "-1"}, clear=True),
            pytest.raises(ConfigValidationError, match="ROLYRINE_DEFAULT_PRECISION"),
        ):
            CodecConfig.from_env()

    def test_non_numeric_precision_raises_value_error(self) -> None:
        with (
            patch.dict(os.environ, {"ROLYRINE_DEFAULT_PRECISION": "abc"}, clear=True),
            pytest.raises(ValueError),
        ):
            CodecConfig.from_env()

    def test_unknown_axis_order_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"ROLYRINE_AXIS_ORDER": "xy"}, clear=True),
            pytest.raises(ConfigValidationError, match="latlon, lonlat"),
        ):
            CodecConfig.from_env()

    def test_bad_boolean_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"ROLYRINE_VALIDATE_BOUNDS": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError, match="boolean"),
        ):
            CodecConfig.from_env()

    def test_zero_max_length_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"ROLYRINE_MAX_ENCODED_LENGTH": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be > 0"),
        ):
            CodecConfig.from_env()

    def test_zero_max_coordinate_count_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"ROLYRINE_MAX_COORDINATE_COUNT": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="coordinates"),
        ):
            CodecConfig.from_env()

    def test_error_carries_key_and_value(self) -> None:
        with (
            patch.dict(os.environ, {"ROLYRINE_MAX_ENCODED_LENGTH": "-5"}, clear=True),
            pytest.raises(ConfigValidationError) as ctx,
        ):
            CodecConfig.from_env()
        assert ctx.value.key == "ROLYRINE_MAX_ENCODED_LENGTH"
        assert ctx.value.value == -5
        assert ctx.value.stage == "config"
