import pytest

from core.exceptions import InvalidDefinitionError, UnknownFleetError
from core.models import AirlineDefinition, FlightNumberGeneration
from core.utils import choose, random_index


def test_from_dict_resolves_callsign():
    definition = AirlineDefinition.from_dict({
        "icao": "N",
        "callsign": {"name": "November", "length": 6, "alpha": True},
    })

    assert definition.callsign == "November"
    assert definition.flight_number_generation == FlightNumberGeneration(length=6, alpha_numeric=True)
    assert definition.fleets is None


def test_from_dict_rejects_empty_mapping():
    with pytest.raises(InvalidDefinitionError):
        AirlineDefinition.from_dict({})


def test_random_index_includes_both_bounds(rng):
    seen = {random_index(rng, 0, 2) for _ in range(200)}

    assert seen == {0, 1, 2}


def test_choose(rng):
    assert choose(rng, []) is None
    assert choose(rng, "a") == "a"
    assert choose(rng, "xyz") in "xyz"


def test_unknown_fleet_error_carries_fleet_and_airline():
    error = UnknownFleetError("cargo", "AAL")

    assert error.fleet_name == "cargo"
    assert error.icao == "AAL"
    assert isinstance(error, ValueError)
    assert UnknownFleetError("cargo").icao is None
