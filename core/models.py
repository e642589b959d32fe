"""
Core data models for the airline simulation.

This module resolves a raw airline definition record (usually one entry of
an airline JSON file) into explicit configuration structures with documented
defaults. Defaults are applied exactly once, when the definition is parsed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.exceptions import InvalidDefinitionError


DEFAULT_AIRLINE_NAME = "Default airline"
DEFAULT_CALLSIGN = "Default"

# fleets are named lists of ``[aircraft type code, weight]`` pairs
Fleets = Dict[str, List[list]]


def is_valid_definition(definition: Any) -> bool:
    """A definition must be a non-empty mapping (sequences and strings are rejected)."""
    return isinstance(definition, Mapping) and len(definition) > 0


@dataclass
class FlightNumberGeneration:
    """Parameters for flight number generation."""

    # Characters generated for the flight number. ``None`` means the airline
    # file left it out, which callers should treat as a configuration defect.
    length: Optional[int] = None

    # End the number with two letters, North American registration style
    # (``N322WT`` without the ``N``)
    alpha_numeric: bool = False


@dataclass
class AirlineDefinition:
    """Airline definition with every optional field resolved."""

    icao: Optional[str] = None
    name: str = DEFAULT_AIRLINE_NAME
    callsign: str = DEFAULT_CALLSIGN
    flight_number_generation: FlightNumberGeneration = field(
        default_factory=FlightNumberGeneration
    )
    fleets: Optional[Fleets] = None

    @classmethod
    def from_dict(cls, definition: Mapping[str, Any]) -> 'AirlineDefinition':
        """
        Build a definition from a raw record.

        Recognized fields: ``icao``, ``name``, ``callsign.name``,
        ``callsign.length``, ``callsign.alpha`` and ``fleets``.

        Raises:
            InvalidDefinitionError: if the record is not a non-empty mapping,
                or its fleets are not shaped as ``{name: [[type, weight], ...]}``
        """
        if not is_valid_definition(definition):
            raise InvalidDefinitionError(
                f"Invalid airline definition. Expected a non-empty mapping "
                f"but received {type(definition).__name__}"
            )

        callsign = definition.get('callsign')
        if not isinstance(callsign, Mapping):
            callsign = {}

        return cls(
            icao=definition.get('icao'),
            name=definition.get('name', DEFAULT_AIRLINE_NAME),
            callsign=callsign.get('name', DEFAULT_CALLSIGN),
            flight_number_generation=FlightNumberGeneration(
                length=_flight_number_length(callsign.get('length'), definition.get('icao')),
                alpha_numeric=callsign.get('alpha', False),
            ),
            fleets=_copy_fleets(definition.get('fleets'), definition.get('icao')),
        )


def _flight_number_length(length: Any, icao: Optional[str]) -> Optional[int]:
    """Flight number length must be a whole number when given."""
    if length is None:
        return None
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidDefinitionError(
            f"Invalid callsign length {length!r} for airline {icao}. Expected an integer"
        )
    return length


def _copy_fleets(fleets: Any, icao: Optional[str]) -> Optional[Fleets]:
    """Copy fleets into ``{name: [[type, weight], ...]}`` so entries can be rewritten."""
    if fleets is None:
        return None
    if not isinstance(fleets, Mapping):
        raise InvalidDefinitionError(
            f"Invalid fleets for airline {icao}. Expected a mapping "
            f"but received {type(fleets).__name__}"
        )

    copied: Fleets = {}
    for fleet_name, entries in fleets.items():
        if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
            raise InvalidDefinitionError(
                f"Invalid fleet {fleet_name} of airline {icao}. Expected a list of "
                f"[aircraft type, weight] but received {type(entries).__name__}"
            )
        copied[fleet_name] = [_copy_fleet_entry(entry, fleet_name, icao) for entry in entries]
    return copied


def _copy_fleet_entry(entry: Any, fleet_name: str, icao: Optional[str]) -> list:
    if (
        isinstance(entry, (str, bytes))
        or not isinstance(entry, Sequence)
        or len(entry) == 0
        or not isinstance(entry[0], str)
    ):
        raise InvalidDefinitionError(
            f"Invalid entry {entry!r} in fleet {fleet_name} of airline {icao}. "
            f"Expected [aircraft type, weight]"
        )
    return list(entry)
