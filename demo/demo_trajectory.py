from __future__ import annotations

from ufonav.geometry import Point2D
from ufonav.navigation import SimulationConfig, TrajectorySimulator
from ufonav.series import ExactTrig
from ufonav.viz.plot2d import TrajectoryPlotter

# ============================================================
# TOP-LEVEL PARAMETERS (extract everything tweakable here)
# ============================================================

# Geometry
START = (100, 100)
END = (1500, 800)
STEP = 5

# Run
PRECISIONS = [1, 2, 3]  # one path per number of series terms
TARGET_RADIUS = 20
QUANTIZE = True  # integer pixel stepping
DRAW_EXACT = True  # reference path with numpy trig


def main() -> None:
    cfg = SimulationConfig(
        start=Point2D.from_xy(START),
        end=Point2D.from_xy(END),
        step=float(STEP),
        quantize=QUANTIZE,
    )

    plotter = TrajectoryPlotter()
    plotter.draw_scene(cfg.start, cfg.target, float(TARGET_RADIUS))

    for n in PRECISIONS:
        result = TrajectorySimulator(cfg, n).run(float(TARGET_RADIUS))
        print(f"n={n}: {result.termination} after {result.steps} steps")
        plotter.draw_trajectory(result, label=f"n={n}")

    if DRAW_EXACT:
        exact = TrajectorySimulator(cfg, ExactTrig()).run(float(TARGET_RADIUS))
        plotter.draw_trajectory(exact, label="exact")

    plotter.show()


if __name__ == "__main__":
    main()
