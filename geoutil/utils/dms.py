from __future__ import annotations

"""Degrees/minutes/seconds parsing and formatting.

Formatting symbols: degree U+00B0, prime U+2032, double prime U+2033. The
separator placed between components (and before the compass letter) is an
explicit option rather than shared state.
"""

import math
import re
from dataclasses import dataclass
from typing import Literal

from geoutil.core.errors import InvalidDmsString


NARROW_NO_BREAK_SPACE = "\u202f"

DmsFormat = Literal["d", "deg", "dm", "deg+min", "dms", "deg+min+sec"]

_DEFAULT_DP = {
    "d": 4,
    "deg": 4,
    "dm": 2,
    "deg+min": 2,
    "dms": 0,
    "deg+min+sec": 0,
}

_CARDINALS = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)

_SPLIT_RE = re.compile(r"[^0-9.,]+")
_LEADING_SIGN_RE = re.compile(r"^-")
_COMPASS_SUFFIX_RE = re.compile(r"[NSEW]$", re.IGNORECASE)
_NEGATIVE_RE = re.compile(r"^-|[WS]$", re.IGNORECASE)


@dataclass(frozen=True)
class DmsOptions:
    separator: str = NARROW_NO_BREAK_SPACE


DEFAULT_OPTIONS = DmsOptions()


def parse(value: str | float) -> float:
    """Parse signed decimal degrees or deg/min/sec text into decimal degrees.

    Accepts e.g. ``-3.62``, ``"3 37 12W"``, ``"3°37′12″W"``. A leading ``-``
    or a trailing ``S``/``W`` makes the result negative.
    """

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isfinite(value):
            return float(value)
        raise InvalidDmsString(f"Non-finite degrees: {value!r}")

    text = str(value).strip()
    try:
        deg = float(text)
    except ValueError:
        pass
    else:
        if math.isfinite(deg):
            return deg

    stripped = _COMPASS_SUFFIX_RE.sub("", _LEADING_SIGN_RE.sub("", text))
    parts = _SPLIT_RE.split(stripped)
    if parts and parts[-1] == "":
        parts.pop()

    try:
        numbers = [float(p) for p in parts]
    except ValueError as e:
        raise InvalidDmsString(f"Invalid DMS value: {text!r}") from e

    if len(numbers) == 3:
        deg = numbers[0] + numbers[1] / 60.0 + numbers[2] / 3600.0
    elif len(numbers) == 2:
        deg = numbers[0] + numbers[1] / 60.0
    elif len(numbers) == 1:
        deg = numbers[0]
    else:
        raise InvalidDmsString(f"Invalid DMS value: {text!r}")

    if _NEGATIVE_RE.search(text):
        deg = -deg
    return deg


def to_dms(
    deg: float,
    fmt: DmsFormat = "d",
    dp: int | None = None,
    options: DmsOptions = DEFAULT_OPTIONS,
) -> str:
    """Format degrees as d, d+m or d+m+s; the sign is discarded.

    Unknown formats fall back to ``"d"``. Default decimals are 4/2/0.
    """

    if not math.isfinite(deg):
        return ""

    if fmt not in _DEFAULT_DP:
        fmt = "d"
    if dp is None:
        dp = _DEFAULT_DP[fmt]

    sep = options.separator
    degrees = abs(deg)

    if fmt in ("d", "deg"):
        return f"{degrees:.{dp}f}°"

    if fmt in ("dm", "deg+min"):
        d = math.floor(degrees)
        m = (degrees * 60.0) % 60.0
        m_txt = f"{m:.{dp}f}"
        if float(m_txt) == 60.0:
            d += 1
            m_txt = f"{0.0:.{dp}f}"
        return f"{d}°{sep}{m_txt}′"

    d = math.floor(degrees)
    m = math.floor(degrees * 3600.0 / 60.0) % 60
    s = (degrees * 3600.0) % 60.0
    s_txt = f"{s:.{dp}f}"
    # Carry rounding up through seconds and minutes.
    if float(s_txt) == 60.0:
        s_txt = f"{0.0:.{dp}f}"
        m += 1
    if m == 60:
        m = 0
        d += 1
    return f"{d}°{sep}{m}′{sep}{s_txt}″"


def to_lat(
    deg: float,
    fmt: DmsFormat = "d",
    dp: int | None = None,
    options: DmsOptions = DEFAULT_OPTIONS,
) -> str:
    text = to_dms(wrap90(deg), fmt, dp, options)
    return f"{text}{options.separator}{'S' if deg < 0 else 'N'}"


def to_lon(
    deg: float,
    fmt: DmsFormat = "d",
    dp: int | None = None,
    options: DmsOptions = DEFAULT_OPTIONS,
) -> str:
    text = to_dms(wrap180(deg), fmt, dp, options)
    return f"{text}{options.separator}{'W' if deg < 0 else 'E'}"


def to_brng(
    deg: float,
    fmt: DmsFormat = "d",
    dp: int | None = None,
    options: DmsOptions = DEFAULT_OPTIONS,
) -> str:
    text = to_dms(wrap360(deg), fmt, dp, options)
    # Rounding can carry a bearing up to 360.
    if text.startswith("360"):
        text = "0" + text[3:]
    return text


def compass_point(bearing: float, precision: int = 3) -> str:
    """Compass point for a bearing: 1 cardinal, 2 intercardinal, 3 secondary-intercardinal."""

    if precision not in (1, 2, 3):
        raise ValueError(f"invalid precision {precision!r}")

    bearing = wrap360(bearing)
    n = 4 * 2 ** (precision - 1)
    idx = math.floor(bearing * n / 360.0 + 0.5) % n
    return _CARDINALS[idx * (16 // n)]


def wrap360(degrees: float) -> float:
    if 0 <= degrees < 360:
        return degrees
    return degrees % 360


def wrap180(degrees: float) -> float:
    if -180 < degrees <= 180:
        return degrees
    return (degrees + 540) % 360 - 180


def wrap90(degrees: float) -> float:
    if -90 <= degrees <= 90:
        return degrees
    # Triangle wave, period 360, amplitude 90.
    return abs((degrees % 360 + 270) % 360 - 180) - 90
