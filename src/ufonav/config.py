"""Shared defaults for the simulation, the sweep and the exporters."""
from __future__ import annotations

from pathlib import Path

from ufonav.geometry import Point2D

DEFAULT_START = Point2D(100.0, 100.0)
DEFAULT_END = Point2D(1500.0, 800.0)
DEFAULT_STEP = 5.0

PRECISION_CEILING = 20
STEP_BUDGET = 2000

# Radii used by the default sweep: 2, 4, ..., 20
SWEEP_RADIUS_START = 2
SWEEP_RADIUS_STOP = 20
SWEEP_RADIUS_STEP = 2

RESULT_DIR = Path("result")
TABLE_FILENAME = "data.txt"
PLOT_FILENAME = "plot.png"
TABLE_HEADER = "Radius,MinPrecision"
