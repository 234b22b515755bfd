from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import TYPE_CHECKING

import numpy as np

from ufonav.geometry import Point2D, bearing
from ufonav.navigation.config import SimulationConfig, SimulationState, TrajectoryResult
from ufonav.series import SeriesTrig

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ufonav.protocols import Trig

logger = logging.getLogger(__name__)


class TrajectorySimulator:
    """Fixed-bearing stepper toward the configured target.

    The bearing is computed once from ``config.start`` to ``config.end``.
    Every step adds ``step * (cos(bearing), sin(bearing))`` where cos/sin come
    from the supplied trig provider, so at low series precision the path
    drifts away from the straight line.

    Termination:
    - "reached": distance to the acceptance center <= stop radius
    - "overshot": passed ``end.x`` in the direction of travel along x
    - "max_steps": step budget exhausted
    """

    def __init__(self, config: SimulationConfig, trig: Trig | int) -> None:
        """Initialise the simulator; an int ``trig`` means that many series terms."""
        self.cfg = config
        self.trig = SeriesTrig(int(trig)) if isinstance(trig, (int, np.integer)) else trig
        self.bearing = bearing(config.start, config.end)
        self.dx, self.dy = self.step_vector()

    def step_vector(self) -> tuple[float, float]:
        dx = self.cfg.step * self.trig.cos(self.bearing)
        dy = self.cfg.step * self.trig.sin(self.bearing)
        if self.cfg.quantize:
            return float(math.trunc(dx)), float(math.trunc(dy))
        return dx, dy

    def initial_state(self) -> SimulationState:
        return SimulationState(position=self.cfg.start)

    def _passed_target(self, p: Point2D) -> bool:
        end_x = self.cfg.end.x
        if self.dx > 0.0:
            return p.x > end_x
        if self.dx < 0.0:
            return p.x < end_x
        return False

    def advance(self, state: SimulationState, stop_radius: float) -> SimulationState:
        """Take one step and classify the new position."""
        if state.done:
            msg = f"Cannot advance a finished run (termination={state.termination!r})"
            raise ValueError(msg)

        p = state.position.translate(self.dx, self.dy)
        steps = state.steps + 1

        if p.distance_to(self.cfg.target) <= stop_radius:
            return replace(state, position=p, steps=steps, termination="reached")
        if self._passed_target(p):
            return replace(state, position=p, steps=steps, termination="overshot")
        if steps >= self.cfg.step_budget:
            return replace(state, position=p, steps=steps, termination="max_steps")
        return replace(state, position=p, steps=steps)

    def iter_states(self, stop_radius: float) -> Iterator[SimulationState]:
        """Yield the state after every step, one per external tick."""
        state = self.initial_state()
        while not state.done:
            state = self.advance(state, stop_radius)
            yield state

    def run(self, stop_radius: float) -> TrajectoryResult:
        """Run until the target is reached, overshot or the budget runs out."""
        state = self.initial_state()
        points: list[np.ndarray] = [state.position.as_array()]
        for state in self.iter_states(stop_radius):
            points.append(state.position.as_array())

        logger.debug(
            "run finished: termination=%s steps=%d position=(%.3f, %.3f)",
            state.termination, state.steps, state.position.x, state.position.y,
        )
        return TrajectoryResult(final=state, points=np.stack(points))


def run(
        start: Point2D,
        end: Point2D,
        step: float,
        precision: int,
        stop_radius: float,
        step_budget: int,
) -> tuple[Point2D, bool, int]:
    """Flat convenience wrapper returning (final_position, reached, steps_taken).

    Takes the target ``end`` rather than a bearing: the bearing is derived as
    ``atan2(end.y - start.y, end.x - start.x)`` and ``end`` is also the center
    of the acceptance circle and the x limit of the overshoot check.
    """
    cfg = SimulationConfig(start=start, end=end, step=step, step_budget=step_budget)
    result = TrajectorySimulator(cfg, precision).run(stop_radius)
    return result.final_position, result.reached, result.steps
