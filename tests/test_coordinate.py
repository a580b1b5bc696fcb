from __future__ import annotations

import pytest

from geoutil.models import Coordinate, distance_km
from geoutil.utils.dms import DmsOptions


PENTAGON = Coordinate(38.871894, -77.056290)
HUB = Coordinate(42.355368, -71.060506)


def test_distance_short_span(white_house: Coordinate) -> None:
    assert white_house.distance_to(PENTAGON) == pytest.approx(3.36, abs=0.005)


def test_distance_medium_span_is_symmetric(white_house: Coordinate) -> None:
    assert distance_km(white_house, HUB) == pytest.approx(633.86, abs=0.005)
    assert distance_km(HUB, white_house) == pytest.approx(633.86, abs=0.005)


def test_distance_to_self_is_zero(white_house: Coordinate) -> None:
    assert distance_km(white_house, Coordinate(38.897872, -77.036510)) == 0.0


def test_distance_antipodes_is_half_circumference() -> None:
    d = distance_km(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
    assert d == pytest.approx(180.0 * 60.0 * 1.1515 * 1.609344)


def test_coordinate_is_an_immutable_value(white_house: Coordinate) -> None:
    assert white_house == Coordinate(38.897872, -77.036510)
    assert len({white_house, Coordinate(38.897872, -77.036510)}) == 1
    with pytest.raises(AttributeError):
        white_house.latitude = 0.0  # type: ignore[misc]


def test_text_output(white_house: Coordinate) -> None:
    assert str(white_house) == "Lat: 38.897872 Long: -77.036510"
    assert (
        white_house.to_dms_string(DmsOptions(separator=" "))
        == "Lat: 38° 53′ 52″ N Long: 77° 2′ 11″ W"
    )
    assert white_house.to_dms_string() == (
        "Lat: 38°\u202f53′\u202f52″\u202fN Long: 77°\u202f2′\u202f11″\u202fW"
    )
