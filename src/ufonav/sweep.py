from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

import numpy as np

from ufonav.config import SWEEP_RADIUS_START, SWEEP_RADIUS_STEP, SWEEP_RADIUS_STOP
from ufonav.navigation.config import SimulationConfig
from ufonav.navigation.search import min_precision_for_radius

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RadiusPrecisionRecord:
    radius: float
    min_precision: int


def default_radii() -> list[int]:
    """Acceptance radii 2, 4, ..., 20."""
    radii = np.arange(SWEEP_RADIUS_START, SWEEP_RADIUS_STOP + 1, SWEEP_RADIUS_STEP)
    return [int(r) for r in radii]


def sweep(
        radii: Iterable[float],
        config: SimulationConfig | None = None,
        jobs: int | None = None,
) -> list[RadiusPrecisionRecord]:
    """Minimal precision for every radius, in input order.

    Duplicate radii are searched again. With ``jobs > 1`` the searches run on a
    thread pool; each one is independent so the output order is unaffected.
    """
    cfg = SimulationConfig() if config is None else config
    radii = list(radii)
    search = partial(min_precision_for_radius, config=cfg)

    if jobs is not None and jobs > 1 and len(radii) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as ex:
            precisions = list(ex.map(search, radii))
    else:
        precisions = [search(r) for r in radii]

    records = [RadiusPrecisionRecord(radius=r, min_precision=int(n)) for r, n in zip(radii, precisions)]
    logger.info("sweep over %d radii done", len(records))
    return records
