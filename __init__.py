"""PyATC Airlines - airline entities for air-traffic simulation."""

__version__ = "0.1.0"
__author__ = "PyATC Airlines Developers"
__license__ = "MIT"

from airline.model import AirlineEntity
from airline.collection import AirlineCollection, AirlineCollectionConfig
from core.exceptions import InvalidDefinitionError, UnknownFleetError

__all__ = [
    'AirlineEntity',
    'AirlineCollection',
    'AirlineCollectionConfig',
    'InvalidDefinitionError',
    'UnknownFleetError',
]
