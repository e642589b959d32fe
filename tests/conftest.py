import numpy as np
import pytest


@pytest.fixture
def airline_definition():
    return {
        "icao": "AAL",
        "name": "American Airlines",
        "callsign": {"name": "American", "length": 3, "alpha": False},
        "fleets": {
            "default": [["B738", 10], ["A321", 8]],
            "long": [["B772", 2], ["b738", 1]],
        },
    }


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
