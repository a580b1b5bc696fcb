from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from geoutil.models.coordinate import Coordinate

if TYPE_CHECKING:
    from geoutil.services.neighbors import Direction


@dataclass(frozen=True)
class GeohashCell:
    """Bounding box of a geohash string.

    ``north_west`` is (lat_max, lon_min) and ``south_east`` is
    (lat_min, lon_max); the other two corners and the centroid derive from
    them.
    """

    geohash: str
    north_west: Coordinate
    south_east: Coordinate
    centroid: Coordinate

    @classmethod
    def from_hash(cls, geohash: str) -> GeohashCell:
        from geoutil.services.codec import decode

        return decode(geohash)

    @classmethod
    def from_coordinate(
        cls, coordinate: Coordinate, precision: int | None = None
    ) -> GeohashCell:
        from geoutil.services.codec import decode, encode

        return decode(encode(coordinate, precision))

    @property
    def precision(self) -> int:
        return len(self.geohash)

    @property
    def north_east(self) -> Coordinate:
        return Coordinate(self.north_west.latitude, self.south_east.longitude)

    @property
    def south_west(self) -> Coordinate:
        return Coordinate(self.south_east.latitude, self.north_west.longitude)

    def points(self) -> list[Coordinate]:
        """Return [north_west, north_east, south_east, south_west, centroid]."""

        return [
            self.north_west,
            self.north_east,
            self.south_east,
            self.south_west,
            self.centroid,
        ]

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.south_east.latitude <= coordinate.latitude <= self.north_west.latitude
            and self.north_west.longitude
            <= coordinate.longitude
            <= self.south_east.longitude
        )

    def neighbor(self, direction: Direction) -> str:
        from geoutil.services.neighbors import neighbor

        return neighbor(self.geohash, direction)

    def all_neighbors(self) -> list[str]:
        from geoutil.services.neighbors import all_neighbors

        return all_neighbors(self.geohash)

    def within_radius(
        self, distance_km: float, min_points: int | None = None
    ) -> set[str]:
        from geoutil.services.radius import cells_within_radius

        return cells_within_radius(self.geohash, distance_km, min_points)
