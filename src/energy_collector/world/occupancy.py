"""
Who stands where - station availability and population counts.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .state import EnergyStation, Position, Robot


def is_station_free(
    robot: Optional[Robot], robots: Sequence[Robot], station_position: Position
) -> bool:
    """
    Check that no robot other than `robot` stands on station_position.

    Pass robot=None for a generic query where every robot counts.
    """
    for other in robots:
        if other is robot:
            continue
        if other.position == station_position:
            return False
    return True


def free_station_mask(
    robot: Optional[Robot], robots: Sequence[Robot], stations: Sequence[EnergyStation]
) -> np.ndarray:
    """Boolean array, True where the station at that index is free for robot."""
    occupied = {other.position for other in robots if other is not robot}
    return np.array(
        [station.position not in occupied for station in stations], dtype=bool
    )


def station_coordinates(stations: Sequence[EnergyStation]) -> np.ndarray:
    """(N, 2) integer array of station x, y in map order."""
    if not stations:
        return np.empty((0, 2), dtype=np.int64)
    return np.array(
        [(s.position.x, s.position.y) for s in stations], dtype=np.int64
    )


def count_owned(robots: Sequence[Robot], owner: str) -> int:
    """Number of robots in the roster belonging to owner."""
    return sum(1 for r in robots if r.owner == owner)
