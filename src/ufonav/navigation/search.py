from __future__ import annotations

import logging

from ufonav.navigation.config import SimulationConfig
from ufonav.navigation.simulator import TrajectorySimulator

logger = logging.getLogger(__name__)


def min_precision_for_radius(radius: float, config: SimulationConfig | None = None) -> int:
    """Smallest number of series terms whose path reaches the target within radius.

    Tries n = 1, 2, ... up to ``config.precision_ceiling`` in order; reachability is
    not assumed to be monotonic in n, so no bisection. If nothing up to the ceiling
    reaches the target, the ceiling itself is returned.
    """
    cfg = SimulationConfig() if config is None else config

    for n in range(1, cfg.precision_ceiling + 1):
        result = TrajectorySimulator(cfg, n).run(radius)
        logger.debug("radius=%s n=%d -> %s after %d steps", radius, n, result.termination, result.steps)
        if result.reached:
            return n

    logger.info("radius=%s not reached up to n=%d, saturating", radius, cfg.precision_ceiling)
    return cfg.precision_ceiling
