"""Shared pytest fixtures for the rolyrine test suite."""

import pytest

# ---------------------------------------------------------------------------
# Reference vectors (Encoded Polyline Algorithm Format documentation)
# ---------------------------------------------------------------------------

SINGLE_POINT = [(38.5, -120.2)]

THREE_POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
THREE_POINTS_ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


@pytest.fixture()
def single_point() -> list[tuple[float, float]]:
    """One ``(lat, lon)`` coordinate from the reference documentation."""
    return list(SINGLE_POINT)


@pytest.fixture()
def three_points() -> list[tuple[float, float]]:
    """Three ``(lat, lon)`` coordinates from the reference documentation."""
    return list(THREE_POINTS)


@pytest.fixture()
def three_points_encoded() -> str:
    """Reference encoding of ``three_points`` at precision 5."""
    return THREE_POINTS_ENCODED
