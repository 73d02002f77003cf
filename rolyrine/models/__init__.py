"""Data models and schemas.

- AxisOrder: Tuple convention for coordinate pairs
- Polyline: Encoded string bundled with its decoding parameters
- requests: Pydantic request/response bodies for the JSON boundary
"""

from rolyrine.models.axis import AxisOrder
from rolyrine.models.polyline import Polyline

__all__ = [
    "AxisOrder",
    "Polyline",
]
