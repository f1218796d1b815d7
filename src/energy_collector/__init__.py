"""
Energy collector strategy for the Robot Challenge simulation.

Layers:
- world: Snapshot types and commands exchanged with the host
- strategies: Swappable targeting / stepping / spawning algorithms
- decision: The per-turn decision the host calls
"""

from .params import Parameters
from .decision import (
    DecisionReason,
    EnergyCollectorAlgorithm,
    NoFreeStationError,
    RobotAlgorithm,
)
from .world import (
    CollectEnergyCommand,
    CreateNewRobotCommand,
    EnergyStation,
    Map,
    MoveCommand,
    Position,
    Robot,
    RobotCommand,
)

__all__ = [
    "Parameters",
    "DecisionReason",
    "EnergyCollectorAlgorithm",
    "NoFreeStationError",
    "RobotAlgorithm",
    "CollectEnergyCommand",
    "CreateNewRobotCommand",
    "EnergyStation",
    "Map",
    "MoveCommand",
    "Position",
    "Robot",
    "RobotCommand",
]
