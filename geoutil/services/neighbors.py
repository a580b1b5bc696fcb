from __future__ import annotations

"""Adjacent cells at the same precision.

Each cardinal direction has, per parity of the hash length, a neighbor
permutation of the alphabet and a border set. A last character in the
border set means the step leaves the parent cell, so the parent is stepped
too. Diagonals are a vertical step followed by a horizontal one.
"""

from typing import Literal, get_args

from geoutil.core.errors import InvalidDirection
from geoutil.utils.geohash import BASE32, validate_geohash


Direction = Literal["n", "s", "e", "w", "ne", "nw", "se", "sw"]
Cardinal = Literal["n", "s", "e", "w"]
Parity = Literal["even", "odd"]

DIRECTIONS: tuple[str, ...] = get_args(Direction)

# Clockwise starting north-west.
ALL_NEIGHBORS_ORDER: tuple[Direction, ...] = ("nw", "n", "ne", "e", "se", "s", "sw", "w")

_NEIGHBORS: dict[Cardinal, dict[Parity, str]] = {
    "n": {
        "even": "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
        "odd": "bc01fg45238967deuvhjyznpkmstqrwx",
    },
    "s": {
        "even": "14365h7k9dcfesgujnmqp0r2twvyx8zb",
        "odd": "238967debc01fg45kmstqrwxuvhjyznp",
    },
    "e": {
        "even": "bc01fg45238967deuvhjyznpkmstqrwx",
        "odd": "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    },
    "w": {
        "even": "238967debc01fg45kmstqrwxuvhjyznp",
        "odd": "14365h7k9dcfesgujnmqp0r2twvyx8zb",
    },
}

_BORDERS: dict[Cardinal, dict[Parity, str]] = {
    "n": {"even": "prxz", "odd": "bcfguvyz"},
    "s": {"even": "028b", "odd": "0145hjnp"},
    "e": {"even": "bcfguvyz", "odd": "prxz"},
    "w": {"even": "0145hjnp", "odd": "028b"},
}

_DIAGONALS: dict[str, tuple[Cardinal, Cardinal]] = {
    "ne": ("n", "e"),
    "nw": ("n", "w"),
    "se": ("s", "e"),
    "sw": ("s", "w"),
}


def _parity(geohash: str) -> Parity:
    return "odd" if len(geohash) % 2 else "even"


def _step(geohash: str, direction: Cardinal) -> str:
    last = geohash[-1]
    parent = geohash[:-1]
    parity = _parity(geohash)

    # An empty parent means the carry falls off the top level; the table
    # lookup alone wraps around the 32-cell grid.
    if parent and last in _BORDERS[direction][parity]:
        parent = _step(parent, direction)

    return parent + BASE32[_NEIGHBORS[direction][parity].index(last)]


def _resolve(geohash: str, direction: Direction) -> str:
    if direction in _DIAGONALS:
        vertical, horizontal = _DIAGONALS[direction]
        return _step(_step(geohash, vertical), horizontal)
    return _step(geohash, direction)  # type: ignore[arg-type]


def neighbor(geohash: str, direction: Direction) -> str:
    """Hash of the cell adjacent in ``direction``, same length as ``geohash``.

    Wraparound across the antimeridian or the poles is not guaranteed.
    """

    if direction not in DIRECTIONS:
        raise InvalidDirection(
            f"Invalid direction: {direction!r}",
            details={"allowed": list(DIRECTIONS)},
        )
    validate_geohash(geohash)
    return _resolve(geohash, direction)


def all_neighbors(geohash: str) -> list[str]:
    """The 8 surrounding hashes: nw, n, ne, e, se, s, sw, w."""

    validate_geohash(geohash)
    return [_resolve(geohash, d) for d in ALL_NEIGHBORS_ORDER]
