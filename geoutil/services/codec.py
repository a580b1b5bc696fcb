from __future__ import annotations

from geoutil.core.settings import get_settings
from geoutil.models.cell import GeohashCell
from geoutil.models.coordinate import Coordinate
from geoutil.utils.geohash import decode_bbox
from geoutil.utils.geohash import encode as _encode_latlon


def encode(coordinate: Coordinate, precision: int | None = None) -> str:
    """Geohash of ``coordinate`` with exactly ``precision`` characters.

    ``precision=None`` falls back to ``Settings.default_precision``.
    """

    if precision is None:
        precision = get_settings().default_precision
    return _encode_latlon(
        coordinate.latitude, coordinate.longitude, precision=precision
    )


def decode(geohash: str) -> GeohashCell:
    lat_min, lat_max, lon_min, lon_max = decode_bbox(geohash)
    return GeohashCell(
        geohash=geohash,
        north_west=Coordinate(lat_max, lon_min),
        south_east=Coordinate(lat_min, lon_max),
        centroid=Coordinate((lat_min + lat_max) / 2.0, (lon_min + lon_max) / 2.0),
    )
