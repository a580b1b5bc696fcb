from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass(slots=True, eq=False)
class GeoUtilError(ValueError):
    """Local validation failure; raised before any interval arithmetic."""

    code: ClassVar[str] = "GEOUTIL_ERROR"

    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class InvalidPrecision(GeoUtilError):
    code = "INVALID_PRECISION"


class InvalidHashCharacter(GeoUtilError):
    code = "INVALID_HASH_CHARACTER"


class EmptyHash(GeoUtilError):
    code = "EMPTY_HASH"


class InvalidDirection(GeoUtilError):
    code = "INVALID_DIRECTION"


class InvalidPointThreshold(GeoUtilError):
    code = "INVALID_POINT_THRESHOLD"


class InvalidDistance(GeoUtilError):
    code = "INVALID_DISTANCE"


class InvalidDmsString(GeoUtilError):
    code = "INVALID_DMS"


def make_error_payload(exc: GeoUtilError) -> dict[str, Any]:
    return {
        "code": exc.code,
        "message": exc.message,
        "details": exc.details,
    }
