from __future__ import annotations

"""Bit-level geohash codec on raw latitude/longitude floats.

Bits alternate longitude/latitude, longitude first; every 5 bits become one
character of the base-32 alphabet below (no a, i, l, o).
"""

from geoutil.core.errors import EmptyHash, InvalidHashCharacter, InvalidPrecision


BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
_DECODE_MAP = {c: i for i, c in enumerate(BASE32)}
_BITS = (16, 8, 4, 2, 1)


def refine_interval(interval: list[float], cd: int, mask: int) -> None:
    """Narrow ``interval`` in place to its upper half if ``cd & mask`` else its lower half."""

    mid = (interval[0] + interval[1]) / 2.0
    if cd & mask:
        interval[0] = mid
    else:
        interval[1] = mid


def validate_precision(precision: int) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecision(
            f"precision must be an int, got {type(precision).__name__}",
            details={"precision": precision},
        )
    if precision <= 0:
        raise InvalidPrecision(
            "precision must be > 0", details={"precision": precision}
        )
    return precision


def validate_geohash(geohash: str) -> str:
    if not geohash:
        raise EmptyHash("geohash must be non-empty")

    for pos, c in enumerate(geohash):
        if c not in _DECODE_MAP:
            raise InvalidHashCharacter(
                f"Invalid geohash character: {c!r}",
                details={"geohash": geohash, "position": pos},
            )
    return geohash


def encode(latitude: float, longitude: float, *, precision: int = 8) -> str:
    validate_precision(precision)

    lat_min, lat_max = -90.0, 90.0
    lon_min, lon_max = -180.0, 180.0

    bit = 0
    ch = 0
    even = True
    out: list[str] = []

    while len(out) < precision:
        if even:
            mid = (lon_min + lon_max) / 2.0
            if longitude > mid:
                ch |= _BITS[bit]
                lon_min = mid
            else:
                lon_max = mid
        else:
            mid = (lat_min + lat_max) / 2.0
            if latitude > mid:
                ch |= _BITS[bit]
                lat_min = mid
            else:
                lat_max = mid

        even = not even
        if bit < 4:
            bit += 1
            continue

        out.append(BASE32[ch])
        bit = 0
        ch = 0

    return "".join(out)


def decode_bbox(geohash: str) -> tuple[float, float, float, float]:
    """Return (lat_min, lat_max, lon_min, lon_max) for geohash."""

    validate_geohash(geohash)

    lat = [-90.0, 90.0]
    lon = [-180.0, 180.0]
    even = True

    for c in geohash:
        cd = _DECODE_MAP[c]
        for mask in _BITS:
            refine_interval(lon if even else lat, cd, mask)
            even = not even

    return lat[0], lat[1], lon[0], lon[1]


def decode_center(geohash: str) -> tuple[float, float]:
    lat_min, lat_max, lon_min, lon_max = decode_bbox(geohash)
    return (lat_min + lat_max) / 2.0, (lon_min + lon_max) / 2.0
