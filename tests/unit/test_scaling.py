"""Tests for fixed-point scaling and rounding."""

from __future__ import annotations

import pytest

from rolyrine.codec import InvalidCoordinateError, InvalidPrecisionError
from rolyrine.codec._scaling import (
    ensure_int64,
    round_half_away_from_zero,
    scale_component,
    scale_factor,
)
from rolyrine.core.constants import INT64_MAX, INT64_MIN


class TestRoundHalfAwayFromZero:
    """Ties go away from zero, everything else to nearest."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (-0.5, -1),
            (-2.5, -3),
            (0.49999999999999994, 0),
            (1.4999999999999998, 1),
            (-0.4, 0),
            (3850000.0, 3850000),
            (-12020000.000000002, -12020000),
        ],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_away_from_zero(value) == expected

    def test_large_integral_values_unchanged(self) -> None:
        assert round_half_away_from_zero(2.0**60) == 2**60

    def test_returns_int(self) -> None:
        assert isinstance(round_half_away_from_zero(1.2), int)


class TestScaleFactor:
    """Precision to scale conversion."""

    @pytest.mark.parametrize(("precision", "expected"), [(0, 1.0), (1, 10.0), (5, 1e5), (6, 1e6)])
    def test_powers_of_ten(self, precision: int, expected: float) -> None:
        assert scale_factor(precision) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidPrecisionError, match=">= 0"):
            scale_factor(-1)

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidPrecisionError, match="bool"):
            scale_factor(True)


class TestInt64Guards:
    """Scaled values and deltas must fit a signed 64-bit integer."""

    def test_bounds_accepted(self) -> None:
        assert ensure_int64(INT64_MAX, what="value", index=0) == INT64_MAX
        assert ensure_int64(INT64_MIN, what="value", index=0) == INT64_MIN

    def test_above_max_rejected(self) -> None:
        with pytest.raises(InvalidCoordinateError, match="coordinate 3"):
            ensure_int64(INT64_MAX + 1, what="delta", index=3)

    def test_scale_component(self) -> None:
        assert scale_component(38.5, 1e5, index=0) == 3850000

    def test_scale_component_overflow(self) -> None:
        with pytest.raises(InvalidCoordinateError):
            scale_component(1e15, 1e5, index=0)
