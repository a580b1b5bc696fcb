"""Geohash encode/decode, neighbor lookup and radius search."""

from __future__ import annotations

from geoutil.core.errors import (
    EmptyHash,
    GeoUtilError,
    InvalidDirection,
    InvalidDistance,
    InvalidDmsString,
    InvalidHashCharacter,
    InvalidPointThreshold,
    InvalidPrecision,
    make_error_payload,
)
from geoutil.models import Coordinate, GeohashCell, distance_km
from geoutil.services.codec import decode, encode
from geoutil.services.neighbors import (
    ALL_NEIGHBORS_ORDER,
    DIRECTIONS,
    Direction,
    all_neighbors,
    neighbor,
)
from geoutil.services.radius import cells_within_radius
from geoutil.utils import dms

__all__ = [
    "ALL_NEIGHBORS_ORDER",
    "Coordinate",
    "DIRECTIONS",
    "Direction",
    "EmptyHash",
    "GeoUtilError",
    "GeohashCell",
    "InvalidDirection",
    "InvalidDistance",
    "InvalidDmsString",
    "InvalidHashCharacter",
    "InvalidPointThreshold",
    "InvalidPrecision",
    "all_neighbors",
    "cells_within_radius",
    "decode",
    "distance_km",
    "dms",
    "encode",
    "make_error_payload",
    "neighbor",
]
