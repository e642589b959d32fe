"""
Collection of every airline available to the simulation.

Airlines are usually loaded from a JSON airline file, either a list of
definition records or an object of the form ``{"airlines": [...]}``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union
import json
import logging

import numpy as np
import pandas as pd

from airline.model import AirlineEntity
from core.exceptions import AirlineNotFoundError, InvalidDefinitionError

logger = logging.getLogger(__name__)


@dataclass
class AirlineCollectionConfig:
    """Configuration for an airline collection."""

    # Seed shared by every airline's random generator
    random_seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    configure_logging: bool = False


def load_airline_definitions(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read airline definitions from a JSON file.

    Args:
        path: JSON file holding a list of definitions or ``{"airlines": [...]}``

    Returns:
        List of raw definition records
    """
    path = Path(path)
    with path.open('r', encoding='utf-8') as fh:
        data = json.load(fh)

    if isinstance(data, Mapping) and 'airlines' in data:
        data = data['airlines']

    if not isinstance(data, list):
        raise InvalidDefinitionError(
            f"Invalid airline file {path}. Expected a list of airlines "
            f"but received {type(data).__name__}"
        )

    logger.info(f"Loaded {len(data)} airline definitions from {path}")
    return data


class AirlineCollection:
    """
    All airlines known to the simulation, keyed by ICAO code.

    Every airline draws from the same random generator, so a seeded
    collection spawns the same aircraft types and flight numbers each run.
    """

    def __init__(
        self,
        definitions: List[Mapping[str, Any]],
        config: Optional[AirlineCollectionConfig] = None
    ):
        """
        Initialize collection.

        Args:
            definitions: Airline definition records
            config: Collection configuration
        """
        self.config = config or AirlineCollectionConfig()

        self.logger = logging.getLogger('AirlineCollection')
        if self.config.configure_logging:
            self._setup_logging()

        self.rng = np.random.default_rng(self.config.random_seed)
        self.airlines: Dict[str, AirlineEntity] = {}

        for definition in definitions:
            self.add_airline(AirlineEntity(definition, rng=self.rng))

        self.logger.info(f"Airline collection initialized with {len(self.airlines)} airlines")

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[AirlineCollectionConfig] = None
    ) -> 'AirlineCollection':
        """Build a collection from a JSON airline file."""
        return cls(load_airline_definitions(path), config=config)

    def _setup_logging(self) -> None:
        """Configure root logging from the collection config."""
        level = getattr(logging, self.config.log_level.upper())
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers = []

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.config.log_file:
            Path(self.config.log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.config.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            self.logger.info(f"Logging to file: {self.config.log_file}")

    def add_airline(self, airline: AirlineEntity) -> None:
        """Add an airline, replacing any airline with the same ICAO code."""
        key = self._key(airline.icao)
        if key in self.airlines:
            self.logger.warning(f"Duplicate airline {airline.icao}, replacing earlier definition")

        self.airlines[key] = airline
        self.logger.debug(f"Added {airline!r}")

    def find_airline_by_icao(self, icao: str) -> AirlineEntity:
        """
        Look up an airline by ICAO code (case-insensitive).

        Raises:
            AirlineNotFoundError: if no airline has that code
        """
        key = self._key(icao)
        if key not in self.airlines:
            raise AirlineNotFoundError(icao)

        return self.airlines[key]

    def has_airline(self, icao: str) -> bool:
        return self._key(icao) in self.airlines

    def reset(self) -> None:
        """Release every active flight number of every airline (e.g. on airport change)."""
        for airline in self.airlines.values():
            airline.reset()

        self.logger.info(f"Reset flight numbers for {len(self.airlines)} airlines")

    def fleet_table(self) -> pd.DataFrame:
        """
        One row per fleet entry across all airlines.

        Columns: icao, fleet, aircraft_type, weight
        """
        rows = []
        for airline in self.airlines.values():
            for fleet_name, fleet in (airline.fleets or {}).items():
                for aircraft in fleet:
                    rows.append({
                        'icao': airline.icao,
                        'fleet': fleet_name,
                        'aircraft_type': aircraft[0],
                        'weight': aircraft[1] if len(aircraft) > 1 else None,
                    })

        return pd.DataFrame(rows, columns=['icao', 'fleet', 'aircraft_type', 'weight'])

    @staticmethod
    def _key(icao: Optional[str]) -> Optional[str]:
        return icao.lower() if isinstance(icao, str) else icao

    def __len__(self) -> int:
        return len(self.airlines)

    def __iter__(self) -> Iterator[AirlineEntity]:
        return iter(self.airlines.values())

    def __contains__(self, icao: object) -> bool:
        return isinstance(icao, str) and self.has_airline(icao)

    def __repr__(self) -> str:
        return f"AirlineCollection(airlines={len(self.airlines)})"
