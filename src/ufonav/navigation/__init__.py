from ufonav.navigation.config import (
    SimulationConfig,
    SimulationState,
    Termination,
    TrajectoryResult,
)
from ufonav.navigation.search import min_precision_for_radius
from ufonav.navigation.simulator import TrajectorySimulator

__all__ = [
    "SimulationConfig",
    "SimulationState",
    "Termination",
    "TrajectoryResult",
    "TrajectorySimulator",
    "min_precision_for_radius",
]
