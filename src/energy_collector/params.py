"""
Runtime tunable parameters with JSON persistence.

One Parameters instance is shared by the algorithm and its strategies.
Changes take effect on the next decided turn.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)


@dataclass
class Parameters:
    """Runtime tunable parameters."""

    # Owner name used to attribute spawned robots and count our population
    author: str = config.AUTHOR

    # Spawning
    spawn_energy_threshold: int = config.SPAWN_ENERGY_THRESHOLD
    spawn_neighborhood_radius: int = config.SPAWN_NEIGHBORHOOD_RADIUS
    max_owned_for_spawn: int = config.MAX_OWNED_FOR_SPAWN

    # Movement
    congestion_owned_threshold: int = config.CONGESTION_OWNED_THRESHOLD
    congestion_cost_ratio: float = config.CONGESTION_COST_RATIO
    max_bisection_iterations: int = config.MAX_BISECTION_ITERATIONS

    def update(self, **kwargs):
        """
        Set fields from keyword values, coercing each to the field's type.

        Unknown keys are ignored; values that fail to convert are logged
        and leave the field unchanged.
        """
        known = {f.name for f in fields(self)}
        for key, value in kwargs.items():
            if key not in known:
                logger.debug(f"Ignoring unknown parameter {key}")
                continue
            expected_type = type(getattr(self, key))
            try:
                setattr(self, key, expected_type(value))
            except (TypeError, ValueError):
                logger.warning(f"Invalid value for {key}: {value}")

    def save(self, path: Path):
        """Write all fields to path as indented JSON."""
        path = Path(path)
        path.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info(f"Parameters saved to {path}")

    @classmethod
    def load(cls, path: Path) -> Parameters:
        """Read parameters from path. Missing or unreadable files give defaults."""
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            data = json.loads(path.read_text())
            params = cls()
            params.update(**data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Failed to load {path}: {e}, using defaults")
            return cls()

        logger.info(f"Parameters loaded from {path}")
        return params

    def to_dict(self) -> dict:
        """Convert to dict."""
        return asdict(self)
