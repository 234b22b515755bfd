from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

import ufonav.viz._backend  # noqa: F401  (selects the matplotlib backend)
import matplotlib.pyplot as plt  # noqa: E402

if TYPE_CHECKING:
    from ufonav.geometry import Point2D
    from ufonav.navigation.config import TrajectoryResult


class TrajectoryPlotter:
    """Matplotlib plotter for a single simulated flight."""

    def __init__(self) -> None:
        """Initialize the plotter."""
        fig, ax = plt.subplots(figsize=(9, 6))
        self.fig = fig
        self.ax = ax
        ax.set_aspect("equal", "box")
        # Screen coordinates: y grows downward
        ax.invert_yaxis()
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title("UFO movement")

    def draw_scene(self, start: Point2D, target: Point2D, radius: float) -> None:
        """Start marker, target marker, acceptance circle and the ideal straight line."""
        self.ax.plot([start.x, target.x], [start.y, target.y], color="gray", linewidth=1)
        self.ax.scatter([start.x], [start.y], s=120, color="green", label="start")
        self.ax.scatter([target.x], [target.y], s=40, color="red", label="target")

        theta = np.linspace(0.0, 2.0 * np.pi, 400, dtype=np.float64)
        self.ax.plot(
            target.x + radius * np.cos(theta),
            target.y + radius * np.sin(theta),
            color="red",
            linewidth=1,
        )

    def draw_trajectory(
            self,
            result: TrajectoryResult,
            label: str | None = None,
            color: str | None = None,
    ) -> None:
        """Draw one path; without an explicit color the axes color cycle is used."""
        pts = np.asarray(result.points)
        (line,) = self.ax.plot(pts[:, 0], pts[:, 1], color=color, linewidth=1.5, label=label)
        color = line.get_color()

        if pts.shape[0] == 0:
            return

        end = pts[-1]

        # Endpoint markers based on termination reason
        if result.termination == "reached":
            self.ax.scatter([end[0]], [end[1]], marker="o", s=40, color=color)
            return

        if result.termination == "overshot":
            self.ax.scatter([end[0]], [end[1]], marker="x", s=70, color=color)
            return

        self.ax.scatter([end[0]], [end[1]], marker="s", s=25, color=color)

    def show(self) -> None:
        self.ax.legend(loc="best")
        plt.tight_layout()
        plt.show()

    def save(self, path: str, dpi: int = 150) -> None:
        """Save figure to disk (useful if running headless with Agg)."""
        self.ax.legend(loc="best")
        self.fig.tight_layout()
        self.fig.savefig(path, dpi=dpi)

    def close(self) -> None:
        plt.close(self.fig)
