"""Axis order convention for coordinate tuples."""

from __future__ import annotations

import enum


class AxisOrder(enum.Enum):
    """How the two components of a coordinate tuple are interpreted.

    The wire format always carries latitude (``y``) first.  The enum
    records which tuple slot holds it.

    Values:
        LAT_LON: Tuples are ``(lat, lon)``; components are emitted in
            tuple order.  Matches the published reference vectors.
        LON_LAT: Tuples are ``(x, y)`` = ``(lon, lat)`` as in GeoJSON and
            shapely; the second component is emitted first.
    """

    LAT_LON = "latlon"
    LON_LAT = "lonlat"

    def to_wire(self, pair: tuple[float, float]) -> tuple[float, float]:
        """Reorder a tuple into wire order (latitude first)."""
        if self is AxisOrder.LON_LAT:
            return (pair[1], pair[0])
        return pair

    def from_wire(self, pair: tuple[float, float]) -> tuple[float, float]:
        """Reorder a wire-order pair back into this tuple convention."""
        # The swap is its own inverse.
        return self.to_wire(pair)
