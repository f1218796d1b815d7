"""
Robot commands returned to the host, one per turn.
"""

from __future__ import annotations

from dataclasses import dataclass

from .state import Position


@dataclass(frozen=True)
class RobotCommand:
    """Base class for everything decide() can return."""


@dataclass(frozen=True)
class CreateNewRobotCommand(RobotCommand):
    """Spend energy to spawn a robot next to the acting one."""


@dataclass(frozen=True)
class CollectEnergyCommand(RobotCommand):
    """Collect from the station the robot stands on."""


@dataclass(frozen=True)
class MoveCommand(RobotCommand):
    """Move to new_position, paying the squared-distance cost."""

    new_position: Position
