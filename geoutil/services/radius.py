from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from geoutil.core.errors import InvalidDistance, InvalidPointThreshold
from geoutil.core.settings import get_settings
from geoutil.models.coordinate import Coordinate, distance_km
from geoutil.services.codec import decode
from geoutil.services.neighbors import Cardinal, neighbor
from geoutil.utils.geohash import validate_geohash


logger = logging.getLogger(__name__)

# 4 corners + centroid.
POINTS_PER_CELL = 5


def points_in_range(geohash: str, origin: Coordinate, radius_km: float) -> int:
    """How many of the cell's 5 representative points lie within radius_km of origin."""

    return sum(
        1 for p in decode(geohash).points() if distance_km(p, origin) <= radius_km
    )


def axis_cells(precision: int, direction: Cardinal) -> int:
    """Number of cells around the globe along ``direction`` at ``precision``."""

    bits = 5 * precision
    # Longitude takes the extra bit of an odd bit count.
    if direction in ("n", "s"):
        return 2 ** (bits // 2)
    return 2 ** ((bits + 1) // 2)


def _probe_extent(
    center: str,
    direction: Cardinal,
    *,
    origin: Coordinate,
    radius_km: float,
    min_points: int,
    max_steps: int,
) -> int:
    # The count includes the first step that falls out of range. Past one
    # full lap of the axis the steps only revisit cells.
    lap = axis_cells(len(center), direction)
    limit = min(max_steps, lap)

    geohash = center
    steps = 0
    in_range = POINTS_PER_CELL
    while in_range >= min_points:
        if steps >= limit:
            if max_steps < lap:
                logger.warning(
                    "Radius probe hit max steps (center=%s direction=%s max_steps=%d)",
                    center,
                    direction,
                    max_steps,
                )
            else:
                logger.debug(
                    "Radius probe covered the whole axis (center=%s direction=%s "
                    "cells=%d)",
                    center,
                    direction,
                    lap,
                )
            break
        steps += 1
        geohash = neighbor(geohash, direction)
        in_range = points_in_range(geohash, origin, radius_km)
    return steps


def _row(start: str, span: int) -> Iterator[str]:
    """Yield start, then `span` cells stepped west and east of it."""

    yield start
    west = east = start
    for _ in range(span):
        west = neighbor(west, "w")
        east = neighbor(east, "e")
        yield west
        yield east


def cells_within_radius(
    geohash: str,
    distance_km: float,
    min_points: int | None = None,
) -> set[str]:
    """Same-precision cells near the centroid of ``geohash``.

    A cell qualifies when at least ``min_points`` (1..5) of its corners and
    centroid lie within ``distance_km`` of the center cell's centroid. The
    search is a brute-force grid: the north, south and west extents are
    probed by stepping outward, east mirrors west, and every cell of the
    resulting rectangle is filtered. The center cell is always included.
    """

    validate_geohash(geohash)
    if not isinstance(distance_km, (int, float)) or isinstance(distance_km, bool):
        raise InvalidDistance(f"distance_km must be a number, got {distance_km!r}")
    if not math.isfinite(distance_km) or distance_km < 0:
        raise InvalidDistance(
            "distance_km must be finite and >= 0",
            details={"distance_km": distance_km},
        )

    settings = get_settings()
    if min_points is None:
        min_points = settings.radius_min_points
    if (
        isinstance(min_points, bool)
        or not isinstance(min_points, int)
        or not 1 <= min_points <= POINTS_PER_CELL
    ):
        raise InvalidPointThreshold(
            f"min_points must be an int in 1..{POINTS_PER_CELL}",
            details={"min_points": min_points},
        )

    origin = decode(geohash).centroid

    def probe(direction: Cardinal) -> int:
        return _probe_extent(
            geohash,
            direction,
            origin=origin,
            radius_km=distance_km,
            min_points=min_points,
            max_steps=settings.radius_max_steps,
        )

    north = probe("n")
    south = probe("s")
    west = probe("w")

    candidates: set[str] = set()
    row = geohash
    for _ in range(north):
        candidates.update(_row(row, west))
        row = neighbor(row, "n")
    row = neighbor(geohash, "s")
    for _ in range(south):
        candidates.update(_row(row, west))
        row = neighbor(row, "s")

    found = {
        h
        for h in candidates
        if points_in_range(h, origin, distance_km) >= min_points
    }
    found.add(geohash)

    logger.debug(
        "Radius search (center=%s distance_km=%s min_points=%d north=%d south=%d "
        "west=%d candidates=%d found=%d)",
        geohash,
        distance_km,
        min_points,
        north,
        south,
        west,
        len(candidates),
        len(found),
    )
    return found
