from __future__ import annotations

import pytest

from energy_collector import EnergyCollectorAlgorithm, EnergyStation, Map, Position, Robot
from energy_collector.config import AUTHOR


def robot(x: int, y: int, energy: int = 100, owner: str = "") -> Robot:
    return Robot(position=Position(x, y), energy=energy, owner=owner)


def make_map(*cells: tuple[int, int], energy: int = 50) -> Map:
    return Map(stations=[EnergyStation(Position(x, y), energy) for x, y in cells])


def owned_crowd(count: int, y: int = 90) -> list[Robot]:
    """count robots of ours parked along row y, away from any test station."""
    return [robot(i, y, owner=AUTHOR) for i in range(count)]


@pytest.fixture
def algorithm() -> EnergyCollectorAlgorithm:
    return EnergyCollectorAlgorithm()
