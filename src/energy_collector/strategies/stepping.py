"""
Step strategies - Where to move this turn on the way to a station.

Takes the acting robot and its target, returns the position to move to.
Returning the robot's own position means "stay and collect".
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from .. import config
from ..world import EnergyStation, Position, Robot, count_owned
from ..world.geometry import calculate_energy_consumption

logger = logging.getLogger(__name__)


class StepStrategy(ABC):
    """Base class for step planning algorithms."""

    @abstractmethod
    def compute(
        self, robot: Robot, robots: Sequence[Robot], station: EnergyStation
    ) -> Position:
        """
        Compute the next position toward station.

        Args:
            robot: The acting robot.
            robots: Full roster (used for population checks).
            station: Target station.

        Returns:
            Position to move to; robot.position to stay put.
        """
        ...


class BisectionStep(StepStrategy):
    """
    Farthest affordable point on the way, found by halving the offset.

    Starts with the station itself and halves the remaining offset on
    each axis (truncating toward the robot) until the move costs less
    than the robot's energy. When we own many robots and the direct move
    is far beyond our energy, we wait instead of crawling.
    """

    def __init__(
        self,
        owner: str = config.AUTHOR,
        congestion_owned_threshold: int = config.CONGESTION_OWNED_THRESHOLD,
        congestion_cost_ratio: float = config.CONGESTION_COST_RATIO,
        max_iterations: int = config.MAX_BISECTION_ITERATIONS,
    ):
        self.owner = owner
        self.congestion_owned_threshold = congestion_owned_threshold
        self.congestion_cost_ratio = congestion_cost_ratio
        self.max_iterations = max_iterations

    def compute(
        self, robot: Robot, robots: Sequence[Robot], station: EnergyStation
    ) -> Position:
        start = robot.position
        target = station.position
        energy = robot.energy
        cost = calculate_energy_consumption(start, target)

        if (
            count_owned(robots, self.owner) > self.congestion_owned_threshold
            and cost >= energy * self.congestion_cost_ratio
        ):
            logger.debug(
                f"Congested: move {start} -> {target} costs {cost}, "
                f"energy={energy}, holding position"
            )
            return start

        if cost < energy:
            return target

        step = target
        for _ in range(self.max_iterations):
            step = self._halve(start, step, target)
            if calculate_energy_consumption(start, step) < energy:
                return step

        # Nothing affordable: single diagonal step toward the station
        fallback = Position(
            start.x + 1 if start.x < target.x else start.x - 1,
            start.y + 1 if start.y < target.y else start.y - 1,
        )
        logger.debug(
            f"No affordable step after {self.max_iterations} halvings "
            f"(energy={energy}), stepping {start} -> {fallback}"
        )
        return fallback

    @staticmethod
    def _halve(start: Position, step: Position, target: Position) -> Position:
        """New position halfway between start and step, per axis."""
        if start.x < target.x:
            x = start.x + (step.x - start.x) // 2
        else:
            x = start.x - (start.x - step.x) // 2

        if start.y < target.y:
            y = start.y + (step.y - start.y) // 2
        else:
            y = start.y - (start.y - step.y) // 2

        return Position(x, y)
