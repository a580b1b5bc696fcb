from __future__ import annotations

import pydantic
import pytest

import geoutil
from geoutil.core.errors import (
    EmptyHash,
    GeoUtilError,
    InvalidHashCharacter,
    InvalidPrecision,
    make_error_payload,
)
from geoutil.core.settings import get_settings


def test_errors_share_a_value_error_base() -> None:
    for cls in (InvalidPrecision, InvalidHashCharacter, EmptyHash):
        assert issubclass(cls, GeoUtilError)
        assert issubclass(cls, ValueError)


def test_error_payload_envelope() -> None:
    with pytest.raises(InvalidHashCharacter) as ei:
        geoutil.decode("dqa")

    payload = make_error_payload(ei.value)
    assert payload == {
        "code": "INVALID_HASH_CHARACTER",
        "message": "Invalid geohash character: 'a'",
        "details": {"geohash": "dqa", "position": 2},
    }
    assert str(ei.value) == "Invalid geohash character: 'a'"


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.default_precision == 8
    assert settings.radius_min_points == 1
    assert settings.radius_max_steps == 4096


def test_settings_env_overrides_are_validated(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("GEOUTIL_DEFAULT_PRECISION", "0")
    with pytest.raises(pydantic.ValidationError):
        get_settings()

    get_settings.cache_clear()
    monkeypatch.setenv("GEOUTIL_DEFAULT_PRECISION", "6")
    monkeypatch.setenv("geoutil_radius_min_points", "2")
    settings = get_settings()
    assert settings.default_precision == 6
    assert settings.radius_min_points == 2


def test_package_exports() -> None:
    c = geoutil.Coordinate(38.897872, -77.036510)
    h = geoutil.encode(c)
    assert h == "dqcjqcps"
    assert geoutil.neighbor(h, "n") == "dqcjqcpt"
    assert len(geoutil.all_neighbors(h)) == 8
    assert h in geoutil.cells_within_radius(h, 0.03)
    assert geoutil.decode(h).contains(c)
    assert geoutil.dms.to_dms(38.897872) == "38.8979°"
