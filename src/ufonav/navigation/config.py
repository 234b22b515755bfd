from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from ufonav.config import DEFAULT_END, DEFAULT_START, DEFAULT_STEP, PRECISION_CEILING, STEP_BUDGET
from ufonav.geometry import Point2D


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Fixed geometry and limits shared by every run.

    start, end:
        Start point and target. The bearing is derived from these two.
    step:
        Nominal step magnitude multiplied into the (approximate) unit vector.
    precision_ceiling:
        Largest number of series terms tried by the precision search.
    step_budget:
        Maximum number of steps per run.
    stop_center:
        Center of the acceptance circle. Defaults to ``end``.
    quantize:
        Truncate each step component toward zero (integer pixel stepping).
    """

    start: Point2D = DEFAULT_START
    end: Point2D = DEFAULT_END
    step: float = DEFAULT_STEP
    precision_ceiling: int = PRECISION_CEILING
    step_budget: int = STEP_BUDGET
    stop_center: Point2D | None = None
    quantize: bool = False

    def __post_init__(self) -> None:
        if self.precision_ceiling < 1:
            msg = f"precision_ceiling must be >= 1, got {self.precision_ceiling}"
            raise ValueError(msg)
        if self.step_budget < 1:
            msg = f"step_budget must be >= 1, got {self.step_budget}"
            raise ValueError(msg)
        if self.step == 0:
            msg = "step must be non-zero"
            raise ValueError(msg)

    @property
    def target(self) -> Point2D:
        """Center of the acceptance circle."""
        return self.end if self.stop_center is None else self.stop_center


Termination = Literal["reached", "overshot", "max_steps"]


@dataclass(frozen=True, slots=True)
class SimulationState:
    position: Point2D
    steps: int = 0
    termination: Termination | None = None

    @property
    def reached(self) -> bool:
        return self.termination == "reached"

    @property
    def done(self) -> bool:
        return self.termination is not None


@dataclass(frozen=True, slots=True)
class TrajectoryResult:
    final: SimulationState
    points: Any

    @property
    def reached(self) -> bool:
        return self.final.reached

    @property
    def steps(self) -> int:
        return self.final.steps

    @property
    def termination(self) -> Termination | None:
        return self.final.termination

    @property
    def final_position(self) -> Point2D:
        return self.final.position
