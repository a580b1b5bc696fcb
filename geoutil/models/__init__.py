"""Value types.

Both are frozen dataclasses; every cell is recomputed from its hash string.
"""

from __future__ import annotations

from geoutil.models.cell import GeohashCell
from geoutil.models.coordinate import Coordinate, distance_km

__all__ = [
    "Coordinate",
    "GeohashCell",
    "distance_km",
]
