"""
World Layer - The host's data model.

Contains:
- State: Position, Robot, EnergyStation, Map
- Commands: what a robot can be told to do this turn
- Geometry and occupancy helpers shared by the strategies
"""

from .state import Position, Robot, EnergyStation, Map
from .commands import (
    RobotCommand,
    CreateNewRobotCommand,
    CollectEnergyCommand,
    MoveCommand,
)
from .geometry import (
    Neighborhood,
    calculate_distance,
    calculate_energy_consumption,
)
from .occupancy import count_owned, is_station_free

__all__ = [
    "Position",
    "Robot",
    "EnergyStation",
    "Map",
    "RobotCommand",
    "CreateNewRobotCommand",
    "CollectEnergyCommand",
    "MoveCommand",
    "Neighborhood",
    "calculate_distance",
    "calculate_energy_consumption",
    "count_owned",
    "is_station_free",
]
