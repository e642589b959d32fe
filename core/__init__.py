"""Core data models, errors and helpers."""

from core.exceptions import (
    AirlineError, InvalidDefinitionError, UnknownFleetError, AirlineNotFoundError
)
from core.models import AirlineDefinition, FlightNumberGeneration

__all__ = [
    'AirlineError',
    'InvalidDefinitionError',
    'UnknownFleetError',
    'AirlineNotFoundError',
    'AirlineDefinition',
    'FlightNumberGeneration',
]
