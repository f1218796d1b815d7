"""
Spawn policies - Decide whether creating a robot is worth it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .. import config
from ..world import Map, Neighborhood, Robot, count_owned
from ..world.occupancy import free_station_mask, station_coordinates


class SpawnPolicy(ABC):
    """Base class for robot creation policies."""

    @abstractmethod
    def is_advisable(self, robot: Robot, map: Map, robots: Sequence[Robot]) -> bool:
        """Check if robot should spend its energy on a new robot now."""
        ...


class NeighborhoodSpawnPolicy(SpawnPolicy):
    """
    Spawn only when a free station is close enough for the newcomer.

    The neighborhood is a square of half-width `radius` around the
    robot, clamped to the grid. Above `max_owned` robots we stop
    spawning altogether.
    """

    def __init__(
        self,
        owner: str = config.AUTHOR,
        radius: int = config.SPAWN_NEIGHBORHOOD_RADIUS,
        max_owned: int = config.MAX_OWNED_FOR_SPAWN,
    ):
        self.owner = owner
        self.radius = radius
        self.max_owned = max_owned

    def is_advisable(self, robot: Robot, map: Map, robots: Sequence[Robot]) -> bool:
        if count_owned(robots, self.owner) > self.max_owned:
            return False

        stations = map.stations
        if not stations:
            return False

        area = Neighborhood.around(robot.position, self.radius)
        coords = station_coordinates(stations)
        inside = (
            (coords[:, 0] >= area.min_x)
            & (coords[:, 0] <= area.max_x)
            & (coords[:, 1] >= area.min_y)
            & (coords[:, 1] <= area.max_y)
        )
        return bool((inside & free_station_mask(robot, robots, stations)).any())
