"""
Station targeting strategies.

Takes the acting robot and the map, returns the station it should
head for (or None when every station is taken).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from ..world import EnergyStation, Map, Robot
from ..world.occupancy import free_station_mask, station_coordinates


class StationTargeting(ABC):
    """Base class for station selection algorithms."""

    @abstractmethod
    def select(
        self, robot: Robot, map: Map, robots: Sequence[Robot]
    ) -> Optional[EnergyStation]:
        """
        Pick the station robot should go to.

        Args:
            robot: The acting robot.
            map: Current map.
            robots: Full roster, including robot itself.

        Returns:
            Target station, or None if no station is available.
        """
        ...


class NearestFreeStation(StationTargeting):
    """
    Cheapest station to reach that no other robot is standing on.

    Cost is squared distance. Ties go to the station listed first.
    """

    def select(
        self, robot: Robot, map: Map, robots: Sequence[Robot]
    ) -> Optional[EnergyStation]:
        stations = map.stations
        if not stations:
            return None

        free = free_station_mask(robot, robots, stations)
        if not free.any():
            return None

        coords = station_coordinates(stations)
        origin = np.array([robot.position.x, robot.position.y], dtype=np.int64)
        costs = ((coords - origin) ** 2).sum(axis=1)

        # Occupied stations can never win; argmin keeps the first minimum
        costs = np.where(free, costs, np.iinfo(np.int64).max)
        return stations[int(np.argmin(costs))]
