import os
import tempfile
import unittest
from pathlib import Path

os.environ["UFONAV_MPL_BACKEND"] = "Agg"

from ufonav.navigation import SimulationConfig, TrajectorySimulator  # noqa: E402
from ufonav.sweep import RadiusPrecisionRecord  # noqa: E402
from ufonav.viz.plot2d import TrajectoryPlotter  # noqa: E402
from ufonav.viz.sweep_plot import save_sweep_plot  # noqa: E402


class TestPlots(unittest.TestCase):
    def test_trajectory_plot(self) -> None:
        cfg = SimulationConfig()
        plotter = TrajectoryPlotter()
        plotter.draw_scene(cfg.start, cfg.target, 20.0)
        for n in (1, 2):
            plotter.draw_trajectory(TrajectorySimulator(cfg, n).run(20.0), label=f"n={n}")
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "trajectory.png"
            plotter.save(str(path))
            plotter.close()
            self.assertGreater(path.stat().st_size, 0)

    def test_sweep_plot(self) -> None:
        records = [RadiusPrecisionRecord(2, 3), RadiusPrecisionRecord(4, 2), RadiusPrecisionRecord(6, 2)]
        with tempfile.TemporaryDirectory() as tmp:
            path = save_sweep_plot(records, Path(tmp) / "result" / "plot.png")
            self.assertTrue(path.exists())
            self.assertGreater(path.stat().st_size, 0)

    def test_overlaid_trajectories_get_distinct_colors(self) -> None:
        cfg = SimulationConfig()
        plotter = TrajectoryPlotter()
        plotter.draw_scene(cfg.start, cfg.target, 20.0)
        for n in (1, 2, 3):
            plotter.draw_trajectory(TrajectorySimulator(cfg, n).run(20.0), label=f"n={n}")
        plotter.draw_trajectory(TrajectorySimulator(cfg, 4).run(20.0), color="black")

        path_colors = [line.get_color() for line in plotter.ax.lines[-4:]]
        plotter.close()
        self.assertEqual(len(set(path_colors[:3])), 3)
        self.assertEqual(path_colors[-1], "black")
