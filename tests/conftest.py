"""Shared test fixtures: a small solar system built from node subtypes."""

import pytest

from tests.fixtures import HAS_MOON, IS_ORBITED_BY, CentreOfUniverse, Moon, Planet, Star


@pytest.fixture
def universe():
    return CentreOfUniverse("Universe")


@pytest.fixture
def solar_system(universe):
    """Universe -> Sol -> (Venus, Earth -> Luna), plus Universe -> Proxima."""
    sol = Star("Sol")
    proxima = Star("Proxima")
    venus = Planet("Venus")
    earth = Planet("Earth")
    luna = Moon("Luna")

    universe.add_relationship(IS_ORBITED_BY, sol)
    universe.add_relationship(IS_ORBITED_BY, proxima)
    sol.add_relationship(IS_ORBITED_BY, venus)
    sol.add_relationship(IS_ORBITED_BY, earth)
    earth.add_relationship(HAS_MOON, luna)

    return {
        "universe": universe,
        "sol": sol,
        "proxima": proxima,
        "venus": venus,
        "earth": earth,
        "luna": luna,
    }
