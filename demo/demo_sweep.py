from __future__ import annotations

from ufonav.config import PLOT_FILENAME, RESULT_DIR, TABLE_FILENAME
from ufonav.io import write_sweep_table
from ufonav.logging_config import setup_logging
from ufonav.navigation import SimulationConfig
from ufonav.sweep import default_radii, sweep
from ufonav.viz.sweep_plot import save_sweep_plot

# ============================================================
# TOP-LEVEL PARAMETERS
# ============================================================

RADII = default_radii()  # 2, 4, ..., 20
PRECISION_CEILING = 20
STEP_BUDGET = 2000
JOBS = 4

OUT_DIR = RESULT_DIR


def main() -> None:
    setup_logging()

    cfg = SimulationConfig(precision_ceiling=PRECISION_CEILING, step_budget=STEP_BUDGET)
    records = sweep(RADII, config=cfg, jobs=JOBS)

    for rec in records:
        print(f"radius={rec.radius:>5}  n={rec.min_precision}")

    write_sweep_table(records, OUT_DIR / TABLE_FILENAME)
    save_sweep_plot(records, OUT_DIR / PLOT_FILENAME)


if __name__ == "__main__":
    main()
