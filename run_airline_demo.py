import sys
import os
import logging

# Add parent directory to path
sys.path.insert(0, os.getcwd())

from airline.collection import AirlineCollection, AirlineCollectionConfig
from core.exceptions import UnknownFleetError

logger = logging.getLogger("run_airline_demo")

MAX_ATTEMPTS = 50


def spawn_flight_number(collection, icao):
    """Generate a flight number not in use by any airline, and reserve it."""
    airline = collection.find_airline_by_icao(icao)
    in_use = {number for a in collection for number in a.flight_numbers}

    for _ in range(MAX_ATTEMPTS):
        flight_number = airline.generate_flight_number()
        if flight_number not in in_use:
            airline.add_flight_number_to_in_use(flight_number)
            return flight_number

    raise RuntimeError(f"No free flight number for {icao} after {MAX_ATTEMPTS} attempts")


def run_demo():
    print("Starting airline demo...")

    config = AirlineCollectionConfig(random_seed=42, log_level="INFO", configure_logging=True)
    collection = AirlineCollection.from_file("data/airlines.json", config=config)

    print(collection.fleet_table().to_string(index=False))
    print()

    for airline in collection:
        for _ in range(3):
            aircraft_type = airline.get_random_aircraft_type()
            flight_number = spawn_flight_number(collection, airline.icao)
            print(f"{airline.callsign} {flight_number} ({airline.icao}{flight_number}) - {aircraft_type}")

    try:
        collection.find_airline_by_icao("AAL").get_random_aircraft_type("cargo")
    except UnknownFleetError as e:
        logger.warning(str(e))

    collection.reset()
    print(f"\nActive flight numbers after reset: {sum(len(a.flight_numbers) for a in collection)}")


if __name__ == "__main__":
    run_demo()
