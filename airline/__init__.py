"""
Airline entities for the air-traffic simulation.

This module provides:
- AirlineEntity: identity, fleets and flight number generation of one airline
- AirlineCollection: every airline of the simulation, keyed by ICAO code
"""

from .model import AirlineEntity
from .collection import AirlineCollection, AirlineCollectionConfig, load_airline_definitions

__all__ = [
    'AirlineEntity',
    'AirlineCollection',
    'AirlineCollectionConfig',
    'load_airline_definitions',
]
