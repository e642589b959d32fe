"""
Exceptions raised by the airline model and collection.

Each error derives from the built-in exception a caller would otherwise
expect, so existing ``except TypeError`` / ``except ValueError`` handlers
keep working.
"""

from typing import Optional


class AirlineError(Exception):
    """Base class for airline errors."""


class InvalidDefinitionError(AirlineError, TypeError):
    """An airline definition (or airline file) has the wrong shape."""


class UnknownFleetError(AirlineError, ValueError):
    """A fleet name is not defined for an airline."""

    def __init__(self, fleet_name: str, icao: Optional[str] = None):
        self.fleet_name = fleet_name
        self.icao = icao
        super().__init__(
            f"Invalid fleet name passed to AirlineEntity. "
            f"{fleet_name} is not a fleet defined in {icao}"
        )


class AirlineNotFoundError(AirlineError, KeyError):
    """No airline with the requested ICAO code exists in a collection."""

    def __str__(self) -> str:
        return f"No airline found for ICAO code {self.args[0]!r}"
