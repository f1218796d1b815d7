"""
Per-turn decision for the energy collector.

The host calls decide() once per robot turn with the live roster and map.
Each sub-decision delegates to a swappable strategy.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional, Sequence

from ..params import Parameters
from ..strategies import (
    BisectionStep,
    NearestFreeStation,
    NeighborhoodSpawnPolicy,
    SpawnPolicy,
    StationTargeting,
    StepStrategy,
)
from ..world import (
    CollectEnergyCommand,
    CreateNewRobotCommand,
    EnergyStation,
    Map,
    MoveCommand,
    Position,
    Robot,
    RobotCommand,
    calculate_distance,
    calculate_energy_consumption,
    is_station_free,
)

logger = logging.getLogger(__name__)


class NoFreeStationError(RuntimeError):
    """Every station is occupied by another robot (or the map is empty)."""

    def __init__(self, position: Position, station_count: int):
        self.position = position
        self.station_count = station_count
        super().__init__(
            f"No free station for robot at ({position.x}, {position.y}) "
            f"among {station_count} station(s)"
        )


class DecisionReason(Enum):
    """Why the last command was chosen."""

    SPAWN = auto()
    COLLECT_AT_STATION = auto()
    HOLD_POSITION = auto()
    MOVE = auto()


class RobotAlgorithm(ABC):
    """Interface the simulation host expects from a pluggable strategy."""

    @property
    @abstractmethod
    def author(self) -> str:
        """Owner name the host stamps on robots we create."""
        ...

    @abstractmethod
    def decide(
        self, robots: Sequence[Robot], robot_to_move_index: int, map: Map
    ) -> RobotCommand:
        """
        Choose the command for robots[robot_to_move_index].

        Args:
            robots: Live roster. Must not be retained after the call.
            robot_to_move_index: Index of the acting robot.
            map: Live map.

        Returns:
            Exactly one command.
        """
        ...


class EnergyCollectorAlgorithm(RobotAlgorithm):
    """
    Greedy collector: spawn when rich, otherwise head for the nearest
    free station and collect there.

    Priority:
    1. SPAWN: energy >= threshold and a free station is nearby
    2. COLLECT_AT_STATION: already standing on the nearest free station
    3. HOLD_POSITION: the step planner says stay (collect instead)
    4. MOVE: step toward the station

    Usage:
        algorithm = EnergyCollectorAlgorithm()
        command = algorithm.decide(robots, index, map)

        # With custom strategies:
        algorithm = EnergyCollectorAlgorithm(
            params=Parameters.load(path),
            stepping=BisectionStep(max_iterations=20),
        )
    """

    def __init__(
        self,
        params: Optional[Parameters] = None,
        targeting: Optional[StationTargeting] = None,
        stepping: Optional[StepStrategy] = None,
        spawning: Optional[SpawnPolicy] = None,
    ):
        self.params = params or Parameters()

        # Strategies. Params are only pushed into the ones created here
        self._owns_stepping = stepping is None
        self._owns_spawning = spawning is None
        self.targeting = targeting or NearestFreeStation()
        self.stepping = stepping or BisectionStep()
        self.spawning = spawning or NeighborhoodSpawnPolicy()

        self.last_reason: DecisionReason | None = None
        self._sync_params()

    @property
    def author(self) -> str:
        return self.params.author

    def decide(
        self, robots: Sequence[Robot], robot_to_move_index: int, map: Map
    ) -> RobotCommand:
        self._sync_params()
        robot = robots[robot_to_move_index]

        rich = robot.energy >= self.params.spawn_energy_threshold
        if rich and self.is_creation_advisable(robot, map, robots):
            self.last_reason = DecisionReason.SPAWN
            logger.info(
                f"SPAWN robot #{robot_to_move_index} at {_fmt(robot.position)} "
                f"energy={robot.energy}"
            )
            return CreateNewRobotCommand()

        station = self.find_nearest_available_station(robot, map, robots)
        if station is None:
            logger.warning(
                f"No free station for robot #{robot_to_move_index} at "
                f"{_fmt(robot.position)} ({len(map.stations)} stations)"
            )
            raise NoFreeStationError(robot.position, len(map.stations))

        if robot.position == station.position:
            self.last_reason = DecisionReason.COLLECT_AT_STATION
            logger.debug(f"COLLECT robot #{robot_to_move_index} at {_fmt(robot.position)}")
            return CollectEnergyCommand()

        step = self.calculate_optimal_step(robot, robots, station)
        if step == robot.position:
            self.last_reason = DecisionReason.HOLD_POSITION
            logger.debug(
                f"HOLD robot #{robot_to_move_index} at {_fmt(robot.position)}, "
                f"target {_fmt(station.position)}"
            )
            return CollectEnergyCommand()

        self.last_reason = DecisionReason.MOVE
        logger.debug(
            f"MOVE robot #{robot_to_move_index} {_fmt(robot.position)} -> {_fmt(step)} "
            f"(target {_fmt(station.position)}, energy={robot.energy})"
        )
        return MoveCommand(step)

    # Helper operations, exposed for the host's tooling and for tests

    @staticmethod
    def calculate_distance(a: Position, b: Position) -> int:
        return calculate_distance(a, b)

    @staticmethod
    def calculate_energy_consumption(a: Position, b: Position) -> int:
        return calculate_energy_consumption(a, b)

    @staticmethod
    def is_station_free(
        robot: Optional[Robot], robots: Sequence[Robot], station_position: Position
    ) -> bool:
        return is_station_free(robot, robots, station_position)

    def is_creation_advisable(self, robot: Robot, map: Map, robots: Sequence[Robot]) -> bool:
        return self.spawning.is_advisable(robot, map, robots)

    def find_nearest_available_station(
        self, robot: Robot, map: Map, robots: Sequence[Robot]
    ) -> Optional[EnergyStation]:
        return self.targeting.select(robot, map, robots)

    def calculate_optimal_step(
        self, robot: Robot, robots: Sequence[Robot], station: EnergyStation
    ) -> Position:
        return self.stepping.compute(robot, robots, station)

    def _sync_params(self) -> None:
        """Push runtime params into the strategies this algorithm created."""
        p = self.params
        if self._owns_stepping:
            self.stepping.owner = p.author
            self.stepping.congestion_owned_threshold = p.congestion_owned_threshold
            self.stepping.congestion_cost_ratio = p.congestion_cost_ratio
            self.stepping.max_iterations = p.max_bisection_iterations
        if self._owns_spawning:
            self.spawning.owner = p.author
            self.spawning.radius = p.spawn_neighborhood_radius
            self.spawning.max_owned = p.max_owned_for_spawn


def _fmt(position: Position) -> str:
    return f"({position.x}, {position.y})"
