"""
Configuration constants for the energy collector strategy.

All default thresholds in one place. Runtime-tunable copies live in
params.Parameters.
"""

# =============================================================================
# IDENTITY
# =============================================================================

AUTHOR = "Energy Collector"  # Owner name the host stamps on our robots

# =============================================================================
# GRID (from the challenge rules)
# =============================================================================

GRID_MIN = 0
GRID_MAX = 99  # inclusive

# =============================================================================
# SPAWNING
# =============================================================================

SPAWN_ENERGY_THRESHOLD = 250  # Energy needed before we try to create a robot
SPAWN_NEIGHBORHOOD_RADIUS = 20  # Half-width of the square searched for stations
MAX_OWNED_FOR_SPAWN = 60  # Stop creating robots above this population

# =============================================================================
# MOVEMENT
# =============================================================================

CONGESTION_OWNED_THRESHOLD = 30  # Crowded when we own more robots than this
CONGESTION_COST_RATIO = 1.1  # ...and the direct move costs this × energy
MAX_BISECTION_ITERATIONS = 50
