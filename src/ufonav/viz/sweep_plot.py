from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

import ufonav.viz._backend  # noqa: F401  (selects the matplotlib backend)
import matplotlib.pyplot as plt  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ufonav.sweep import RadiusPrecisionRecord


class SweepPlotter:
    """Scatter plot of minimal precision against acceptance radius."""

    def __init__(self, width_px: int = 800, height_px: int = 600, dpi: int = 100) -> None:
        """Initialize the plotter with a figure of the given pixel size."""
        fig, ax = plt.subplots(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
        self.fig = fig
        self.ax = ax
        self.dpi = dpi
        ax.set_title("Required precision vs acceptance radius", fontsize=16)
        ax.set_xlabel("Acceptance radius")
        ax.set_ylabel("Minimal number of series terms (n)")

    def draw(self, records: Sequence[RadiusPrecisionRecord]) -> None:
        radii = np.asarray([r.radius for r in records], dtype=np.float64)
        precisions = np.asarray([r.min_precision for r in records], dtype=np.float64)
        self.ax.plot(radii, precisions, color="blue", linewidth=2, marker="o", markersize=7)
        self.ax.grid(visible=True, alpha=0.3)

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.fig.tight_layout()
        self.fig.savefig(path, dpi=self.dpi)
        return path

    def close(self) -> None:
        plt.close(self.fig)


def save_sweep_plot(records: Sequence[RadiusPrecisionRecord], path: str | Path) -> Path:
    """Render the sweep scatter plot to an image file."""
    plotter = SweepPlotter()
    try:
        plotter.draw(records)
        return plotter.save(path)
    finally:
        plotter.close()
