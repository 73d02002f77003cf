"""Data model for an encoded polyline.

A Polyline bundles an encoded string with the out-of-band parameters
needed to decode it (precision and axis order), so that the two always
travel together through caller code and JSON payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rolyrine.core.constants import DEFAULT_PRECISION
from rolyrine.models.axis import AxisOrder

if TYPE_CHECKING:
    from shapely.geometry import LineString


@dataclass(frozen=True, slots=True)
class Polyline:
    """An encoded coordinate path together with its decoding parameters.

    Attributes:
        encoded: Encoded polyline string.
        precision: Decimal digits used when encoding.
        axis_order: Tuple convention of the coordinates it was built from.
    """

    encoded: str = ""
    precision: int = DEFAULT_PRECISION
    axis_order: AxisOrder = AxisOrder.LAT_LON

    def __post_init__(self) -> None:
        # Accept the wire names ("latlon"/"lonlat") as well as members.
        object.__setattr__(self, "axis_order", AxisOrder(self.axis_order))

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Any,
        precision: int = DEFAULT_PRECISION,
        axis_order: AxisOrder | str = AxisOrder.LAT_LON,
    ) -> Polyline:
        """Encode *coordinates* and wrap the result."""
        from rolyrine.codec import encode

        return cls(
            encoded=encode(coordinates, precision, axis_order=axis_order),
            precision=precision,
            axis_order=AxisOrder(axis_order),
        )

    @classmethod
    def from_linestring(cls, line: LineString, precision: int = DEFAULT_PRECISION) -> Polyline:
        """Encode a shapely ``LineString`` (``x`` = longitude, ``y`` = latitude)."""
        return cls.from_coordinates(line, precision, AxisOrder.LON_LAT)

    @property
    def coordinates(self) -> list[tuple[float, float]]:
        """Decoded coordinates in this polyline's axis order.

        Raises:
            MalformedInputError: If ``encoded`` is not a valid polyline.
        """
        from rolyrine.codec import decode

        return decode(self.encoded, self.precision, axis_order=self.axis_order)

    @property
    def vertex_count(self) -> int:
        """Number of coordinates in the path."""
        return len(self.coordinates)

    def to_linestring(self) -> LineString:
        """Decode into a shapely ``LineString`` with ``(lon, lat)`` vertices.

        Raises:
            InvalidCoordinateError: If the path has exactly one vertex,
                which a ``LineString`` cannot represent.
        """
        from shapely.geometry import LineString

        from rolyrine.codec import InvalidCoordinateError

        coords = self.coordinates
        if len(coords) == 1:
            msg = "A LineString needs 0 or at least 2 coordinates, polyline has 1"
            raise InvalidCoordinateError(msg, stage="to_linestring")
        if self.axis_order is AxisOrder.LAT_LON:
            coords = [(lon, lat) for lat, lon in coords]
        return LineString(coords)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-ready dict."""
        return {
            "encoded": self.encoded,
            "precision": self.precision,
            "axis_order": self.axis_order.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Polyline:
        """Deserialise from a dict payload.

        Missing fields are defaulted rather than raising an error.

        Raises:
            TypeError: If field values have unexpected types.
            ValueError: If ``axis_order`` is not a known convention.
        """
        encoded = data.get("encoded", "")
        if not isinstance(encoded, str):
            msg = f"encoded must be a str, got {type(encoded).__name__}"
            raise TypeError(msg)

        precision = data.get("precision", DEFAULT_PRECISION)
        if isinstance(precision, bool) or not isinstance(precision, int):
            msg = f"precision must be an int, got {type(precision).__name__}"
            raise TypeError(msg)

        return cls(
            encoded=encoded,
            precision=precision,
            axis_order=AxisOrder(str(data.get("axis_order", AxisOrder.LAT_LON.value))),
        )
