"""
Airline model for the air-traffic simulation.

An airline owns its identity (ICAO designator, name, radio callsign), the
fleets of aircraft types it may spawn and the rules used to generate flight
numbers. It also tracks which of its flight numbers are currently assigned
to live aircraft.

Uniqueness of flight numbers across airlines is the job of the aircraft
controller: it calls ``generate_flight_number()``, retries on collision and
then records the winner with ``add_flight_number_to_in_use()``.
"""

from typing import Any, List, Mapping, Optional
import numpy as np

from core.exceptions import UnknownFleetError
from core.models import (
    AirlineDefinition, FlightNumberGeneration, Fleets,
    DEFAULT_AIRLINE_NAME, DEFAULT_CALLSIGN
)
from core.utils import choose


DIGITS = '0123456789'
LETTERS = 'abcdefghijklmnopqrstuvwxyz'

# [TYPE, WEIGHT]
TYPE_INDEX = 0


class AirlineEntity:
    """
    An aircraft operating agency.

    Defines the aircraft and fleets used by an airline along with the rules
    for flight number generation.
    """

    def __init__(
        self,
        definition: Mapping[str, Any],
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize airline.

        Args:
            definition: Airline definition record
            rng: Random generator used for aircraft and flight number
                selection (a fresh unseeded generator when omitted)

        Raises:
            InvalidDefinitionError: if ``definition`` is not a non-empty mapping
        """
        self.rng = rng if rng is not None else np.random.default_rng()

        self.icao: Optional[str] = None
        self.name = DEFAULT_AIRLINE_NAME
        self.callsign = DEFAULT_CALLSIGN
        self.flight_number_generation = FlightNumberGeneration(length=3)
        self.fleets: Optional[Fleets] = {'default': []}

        # Flight numbers assigned to live aircraft of this airline
        self.active_flight_numbers: List[str] = []

        self.init(definition)

    def init(self, definition: Mapping[str, Any]) -> None:
        """Apply a definition. Runs once, on instantiation."""
        resolved = AirlineDefinition.from_dict(definition)

        self.icao = resolved.icao if resolved.icao is not None else self.icao
        self.name = resolved.name
        self.callsign = resolved.callsign
        self.flight_number_generation = resolved.flight_number_generation
        # an airline without fleets ends up with none, not the default seed
        self.fleets = resolved.fleets

        self._transform_fleet_names_to_lower_case()

    @property
    def aircraft_type_catalog(self) -> List[str]:
        """Unique aircraft types across all fleets of this airline."""
        catalog: List[str] = []
        for fleet in (self.fleets or {}).values():
            for aircraft in fleet:
                if aircraft[TYPE_INDEX] not in catalog:
                    catalog.append(aircraft[TYPE_INDEX])
        return catalog

    @property
    def flight_numbers(self) -> List[str]:
        """
        Flight numbers in use by this airline.

        This is the live list, not a copy.
        """
        return self.active_flight_numbers

    def get_random_aircraft_type(self, fleet_name: str = '') -> Optional[str]:
        """
        Random aircraft type from one fleet, or from all fleets if no name is given.

        Selection is uniform; fleet weights are not applied.

        Raises:
            UnknownFleetError: if ``fleet_name`` is not a fleet of this airline
        """
        if not fleet_name:
            return self._get_random_aircraft_type_from_all_fleets()

        return self._get_random_aircraft_type_from_fleet(fleet_name)

    def generate_flight_number(self) -> str:
        """
        Create a flight number.

        Should only be called by the aircraft controller, which guarantees
        uniqueness across all airlines. Digit-only numbers are ``length``
        characters long; alpha-numeric numbers are ``length - 1`` characters,
        ending in two letters.
        """
        length = self.flight_number_generation.length or 0

        # never starts with zero
        flight_number = choose(self.rng, DIGITS[1:])

        if not self.flight_number_generation.alpha_numeric:
            for _ in range(1, length):
                flight_number += choose(self.rng, DIGITS)

            return flight_number

        for _ in range(length - 3):
            flight_number += choose(self.rng, DIGITS)

        for _ in range(2):
            flight_number += choose(self.rng, LETTERS)

        return flight_number

    def add_flight_number_to_in_use(self, flight_number: str) -> None:
        """Mark a flight number as in use. No duplicate check is made."""
        self.active_flight_numbers.append(flight_number)

    def remove_flight_number(self, flight_number: str) -> None:
        """
        Release a flight number so it can be reused later.

        Releasing a number that is not in use does nothing.
        """
        if not self.is_active_flight_number(flight_number):
            return

        self.active_flight_numbers.remove(flight_number)

    def is_active_flight_number(self, flight_number: str) -> bool:
        return flight_number in self.active_flight_numbers

    def reset(self) -> None:
        """
        Clear all active flight numbers.

        Used when changing airports and every existing aircraft is removed.
        """
        self.active_flight_numbers.clear()

    def has_fleet(self, fleet_name: str) -> bool:
        return self.fleets is not None and fleet_name in self.fleets

    def _get_random_aircraft_type_from_all_fleets(self) -> Optional[str]:
        return choose(self.rng, self.aircraft_type_catalog)

    # TODO: weight each entry by its fleet weight once the simulation agrees on it
    def _get_random_aircraft_type_from_fleet(self, fleet_name: str) -> Optional[str]:
        if not self.has_fleet(fleet_name):
            raise UnknownFleetError(fleet_name, self.icao)

        aircraft = choose(self.rng, self.fleets[fleet_name])
        if aircraft is None:
            return None
        return aircraft[TYPE_INDEX]

    def _transform_fleet_names_to_lower_case(self) -> None:
        """Lowercase the aircraft type of every fleet entry to ease string matching."""
        for fleet in (self.fleets or {}).values():
            for aircraft in fleet:
                aircraft[TYPE_INDEX] = aircraft[TYPE_INDEX].lower()

    def __repr__(self) -> str:
        return (
            f"AirlineEntity(icao={self.icao}, name={self.name}, "
            f"callsign={self.callsign}, "
            f"active_flight_numbers={len(self.active_flight_numbers)})"
        )
