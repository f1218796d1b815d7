"""
Grid geometry - movement cost and clamped neighborhoods.

Cost is the squared Euclidean distance. Distance and energy consumption
use the same formula.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import GRID_MAX, GRID_MIN
from .state import Position


def calculate_energy_consumption(a: Position, b: Position) -> int:
    """Energy a robot at a pays to move to b."""
    return (b.x - a.x) ** 2 + (b.y - a.y) ** 2


def calculate_distance(a: Position, b: Position) -> int:
    """Squared distance between a and b (no square root)."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def clamp(value: int, low: int = GRID_MIN, high: int = GRID_MAX) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Neighborhood:
    """Axis-aligned square of cells, bounds inclusive."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def around(cls, center: Position, radius: int) -> Neighborhood:
        """Square of half-width radius around center, clamped to the grid."""
        return cls(
            min_x=clamp(center.x - radius),
            min_y=clamp(center.y - radius),
            max_x=clamp(center.x + radius),
            max_y=clamp(center.y + radius),
        )

    def contains(self, position: Position) -> bool:
        return (
            self.min_x <= position.x <= self.max_x
            and self.min_y <= position.y <= self.max_y
        )
