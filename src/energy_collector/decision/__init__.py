"""
Decision Layer - What to do this turn.

Contains:
- RobotAlgorithm: The interface the simulation host calls
- EnergyCollectorAlgorithm: Spawn / collect / move decision
"""

from .algorithm import (
    DecisionReason,
    EnergyCollectorAlgorithm,
    NoFreeStationError,
    RobotAlgorithm,
)

__all__ = [
    "DecisionReason",
    "EnergyCollectorAlgorithm",
    "NoFreeStationError",
    "RobotAlgorithm",
]
