"""
Swappable strategy implementations (Strategy pattern).

Each strategy type has an ABC and one implementation.
Pass the desired implementation to EnergyCollectorAlgorithm.
"""

from .targeting import (
    StationTargeting,
    NearestFreeStation,
)
from .stepping import (
    StepStrategy,
    BisectionStep,
)
from .spawning import (
    SpawnPolicy,
    NeighborhoodSpawnPolicy,
)
