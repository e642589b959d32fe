import json
import logging

import pandas as pd
import pytest

from airline.collection import AirlineCollection, AirlineCollectionConfig, load_airline_definitions
from airline.model import AirlineEntity
from core.exceptions import AirlineNotFoundError, InvalidDefinitionError


@pytest.fixture
def definitions(airline_definition):
    return [
        airline_definition,
        {
            "icao": "UAL",
            "name": "United Airlines",
            "callsign": {"name": "United", "length": 4},
            "fleets": {"default": [["A320", 6]]},
        },
    ]


@pytest.fixture
def collection(definitions):
    return AirlineCollection(definitions, config=AirlineCollectionConfig(random_seed=42))


def test_collection_builds_airlines(collection):
    assert len(collection) == 2
    assert all(isinstance(airline, AirlineEntity) for airline in collection)


def test_airlines_share_the_collection_generator(collection):
    assert all(airline.rng is collection.rng for airline in collection)


def test_find_airline_by_icao_is_case_insensitive(collection):
    assert collection.find_airline_by_icao("ual").name == "United Airlines"
    assert collection.find_airline_by_icao("UAL") is collection.find_airline_by_icao("ual")
    assert "aal" in collection
    assert collection.has_airline("AAL")


def test_find_missing_airline_raises(collection):
    with pytest.raises(AirlineNotFoundError):
        collection.find_airline_by_icao("DAL")
    assert "DAL" not in collection


def test_duplicate_icao_replaces_and_warns(definitions, caplog):
    definitions.append({"icao": "aal", "name": "Replacement"})

    with caplog.at_level(logging.WARNING):
        collection = AirlineCollection(definitions)

    assert len(collection) == 2
    assert collection.find_airline_by_icao("AAL").name == "Replacement"
    assert "Duplicate airline" in caplog.text


def test_invalid_definition_in_collection_raises(definitions):
    definitions.append([])

    with pytest.raises(InvalidDefinitionError):
        AirlineCollection(definitions)


def test_reset_clears_every_airline(collection):
    for airline in collection:
        airline.add_flight_number_to_in_use(airline.generate_flight_number())

    collection.reset()

    assert all(airline.flight_numbers == [] for airline in collection)


def test_seeded_collections_repeat(definitions):
    config = AirlineCollectionConfig(random_seed=5)
    first = AirlineCollection(definitions, config=config)
    second = AirlineCollection(definitions, config=config)

    assert [a.generate_flight_number() for a in first] == [a.generate_flight_number() for a in second]


def test_fleet_table(collection):
    table = collection.fleet_table()

    assert isinstance(table, pd.DataFrame)
    assert list(table.columns) == ["icao", "fleet", "aircraft_type", "weight"]
    assert len(table) == 5
    assert set(table[table["icao"] == "UAL"]["aircraft_type"]) == {"a320"}


def test_fleet_table_without_fleets():
    table = AirlineCollection([{"icao": "AAL"}]).fleet_table()

    assert table.empty


def test_load_airline_definitions_from_list(tmp_path, definitions):
    path = tmp_path / "airlines.json"
    path.write_text(json.dumps(definitions), encoding="utf-8")

    assert load_airline_definitions(path) == definitions


def test_from_file_with_airlines_key(tmp_path, definitions):
    path = tmp_path / "airlines.json"
    path.write_text(json.dumps({"airlines": definitions}), encoding="utf-8")

    collection = AirlineCollection.from_file(path)

    assert len(collection) == 2
    assert collection.find_airline_by_icao("AAL").aircraft_type_catalog == ["b738", "a321", "b772"]


def test_load_airline_definitions_rejects_other_shapes(tmp_path):
    path = tmp_path / "airlines.json"
    path.write_text(json.dumps({"icao": "AAL"}), encoding="utf-8")

    with pytest.raises(InvalidDefinitionError):
        load_airline_definitions(path)


def test_logging_to_file(tmp_path, definitions):
    log_file = tmp_path / "logs" / "airlines.log"
    config = AirlineCollectionConfig(configure_logging=True, log_level="DEBUG", log_file=str(log_file))

    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    try:
        AirlineCollection(definitions, config=config)
        for handler in root_logger.handlers:
            handler.flush()
    finally:
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers = saved_handlers
        root_logger.setLevel(saved_level)

    assert "Airline collection initialized with 2 airlines" in log_file.read_text(encoding="utf-8")
