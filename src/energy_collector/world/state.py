"""
World state - The snapshot the host hands us every turn.

Robots and stations are owned and mutated by the simulation between
turns; the strategy only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """Grid cell. Immutable so a computed step never aliases a station."""

    x: int
    y: int


@dataclass(eq=False)
class Robot:
    """
    One robot on the grid.

    Compared by identity: two robots with equal fields are still
    different roster entries.
    """

    position: Position
    energy: int = 0
    owner: str = ""


@dataclass(eq=False)
class EnergyStation:
    """Fixed cell that refills a robot standing on it."""

    position: Position
    energy: int = 0


@dataclass
class Map:
    """Energy stations in insertion order (drives tie-breaking)."""

    stations: list[EnergyStation] = field(default_factory=list)
