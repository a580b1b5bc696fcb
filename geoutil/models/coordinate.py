from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geoutil.utils.dms import DEFAULT_OPTIONS, DmsOptions, to_lat, to_lon

if TYPE_CHECKING:
    from geoutil.models.cell import GeohashCell


# Degrees of arc -> nautical miles -> statute miles -> km.
_KM_PER_DEGREE = 60.0 * 1.1515 * 1.609344


@dataclass(frozen=True)
class Coordinate:
    """WGS84 point in decimal degrees. Range is not validated."""

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"Lat: {self.latitude:.6f} Long: {self.longitude:.6f}"

    def to_dms_string(self, options: DmsOptions = DEFAULT_OPTIONS) -> str:
        lat = to_lat(self.latitude, "dms", options=options)
        lon = to_lon(self.longitude, "dms", options=options)
        return f"Lat: {lat} Long: {lon}"

    def lat_radians(self) -> float:
        return math.radians(self.latitude)

    def lon_radians(self) -> float:
        return math.radians(self.longitude)

    def distance_to(self, other: Coordinate) -> float:
        return distance_km(self, other)

    def geohash(self, precision: int | None = None) -> GeohashCell:
        from geoutil.models.cell import GeohashCell

        return GeohashCell.from_coordinate(self, precision)


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in km (spherical law of cosines)."""

    if a == b:
        return 0.0

    theta = math.radians(a.longitude - b.longitude)
    lat_a = a.lat_radians()
    lat_b = b.lat_radians()
    cos_d = math.sin(lat_a) * math.sin(lat_b) + math.cos(lat_a) * math.cos(
        lat_b
    ) * math.cos(theta)
    # Float error can push the cosine just outside [-1, 1].
    cos_d = max(-1.0, min(1.0, cos_d))
    return math.degrees(math.acos(cos_d)) * _KM_PER_DEGREE
