import dataclasses

import pytest

from pylocus.utilities import Location


def test_from_record_coerces_storage_values():
    row = {"id": "7", "latitude": "37.7749", "longitude": -122.4194, "altitude": "12",
           "timestamp": 1700000000, "extra": "ignored"}

    loc = Location.from_record(row)

    assert loc == Location(7, 37.7749, -122.4194, 12.0, 1700000000)
    assert isinstance(loc.altitude, float)


def test_from_record_missing_field():
    with pytest.raises(KeyError):
        Location.from_record({"id": 1, "latitude": 0.0, "longitude": 0.0})


def test_to_dict_round_trips_through_from_record():
    loc = Location(3, -33.8688, 151.2093, -4.5, 1234)

    assert loc.to_dict() == {
        "id": 3, "latitude": -33.8688, "longitude": 151.2093, "altitude": -4.5, "timestamp": 1234,
    }
    assert Location.from_record(loc.to_dict()) == loc


def test_location_is_immutable():
    loc = Location(1, 0.0, 0.0, 0.0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        loc.latitude = 1.0
