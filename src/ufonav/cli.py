#!/usr/bin/env python3

"""Command line entry point: single flights, radius sweeps, series convergence."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from ufonav.config import (
    DEFAULT_END,
    DEFAULT_START,
    DEFAULT_STEP,
    PLOT_FILENAME,
    PRECISION_CEILING,
    RESULT_DIR,
    STEP_BUDGET,
    TABLE_FILENAME,
)
from ufonav.geometry import Point2D, bearing
from ufonav.io import format_sweep_table, write_sweep_table
from ufonav.logging_config import setup_logging
from ufonav.navigation import SimulationConfig, TrajectorySimulator
from ufonav.series import convergence_profile
from ufonav.sweep import default_radii, sweep

logger = logging.getLogger(__name__)


def _add_geometry_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--start", type=float, nargs=2, default=[DEFAULT_START.x, DEFAULT_START.y], metavar=("X", "Y"))
    ap.add_argument("--end", type=float, nargs=2, default=[DEFAULT_END.x, DEFAULT_END.y], metavar=("X", "Y"))
    ap.add_argument("--step", type=float, default=DEFAULT_STEP, help="Step magnitude")
    ap.add_argument("--step-budget", type=int, default=STEP_BUDGET, help="Maximum steps per run")
    ap.add_argument("--quantize", action="store_true", help="Truncate step components to integers")


def _config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        start=Point2D.from_xy(args.start),
        end=Point2D.from_xy(args.end),
        step=float(args.step),
        precision_ceiling=int(getattr(args, "ceiling", PRECISION_CEILING)),
        step_budget=int(args.step_budget),
        quantize=bool(args.quantize),
    )


def _cmd_trajectory(args: argparse.Namespace) -> int:
    cfg = _config_from_args(args)
    result = TrajectorySimulator(cfg, args.precision).run(args.radius)
    p = result.final_position
    print(
        f"precision={args.precision} radius={args.radius} termination={result.termination} "
        f"steps={result.steps} final=({p.x:.3f}, {p.y:.3f}) "
        f"distance={p.distance_to(cfg.target):.3f}",
    )

    if args.plot is not None or args.show:
        from ufonav.viz.plot2d import TrajectoryPlotter

        plotter = TrajectoryPlotter()
        plotter.draw_scene(cfg.start, cfg.target, args.radius)
        plotter.draw_trajectory(result, label=f"n={args.precision}")
        if args.plot is not None:
            plotter.save(str(args.plot))
        if args.show:
            plotter.show()
        plotter.close()
    return 0


def _cmd_sweep(args: argparse.Namespace) -> int:
    cfg = _config_from_args(args)
    radii = args.radii if args.radii else default_radii()
    records = sweep(radii, config=cfg, jobs=args.jobs)

    out_dir = Path(args.out_dir)
    write_sweep_table(records, out_dir / TABLE_FILENAME)
    if not args.no_plot:
        from ufonav.viz.sweep_plot import save_sweep_plot

        save_sweep_plot(records, out_dir / PLOT_FILENAME)

    sys.stdout.write(format_sweep_table(records))
    return 0


def _cmd_convergence(args: argparse.Namespace) -> int:
    if args.angle is None:
        x = bearing(Point2D.from_xy(args.start), Point2D.from_xy(args.end))
    else:
        x = float(args.angle)
    errors = convergence_profile(x, args.max_terms)

    print(f"angle={x:.12f} rad")
    print("n,cos_error,sin_error")
    for n, (e_cos, e_sin) in enumerate(errors, start=1):
        print(f"{n},{e_cos:.3e},{e_sin:.3e}")
    logger.debug("max error at n=%d: %.3e", args.max_terms, float(np.max(errors[-1])))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ufonav", description="UFO flight with truncated Taylor-series trig")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    sub = ap.add_subparsers(dest="command", required=True)

    tr = sub.add_parser("trajectory", help="Simulate one flight")
    _add_geometry_args(tr)
    tr.add_argument("--precision", type=int, default=10, help="Number of series terms (n)")
    tr.add_argument("--radius", type=float, default=20.0, help="Acceptance radius")
    tr.add_argument("--plot", type=Path, default=None, help="Save a trajectory plot to this path")
    tr.add_argument("--show", action="store_true", help="Open an interactive plot window")
    tr.set_defaults(func=_cmd_trajectory)

    sw = sub.add_parser("sweep", help="Minimal precision per acceptance radius")
    _add_geometry_args(sw)
    sw.add_argument("--radii", type=float, nargs="+", default=None, help="Radii to sweep (default 2 4 ... 20)")
    sw.add_argument("--ceiling", type=int, default=PRECISION_CEILING, help="Largest precision tried")
    sw.add_argument("--jobs", type=int, default=None, help="Search radii on this many threads")
    sw.add_argument("--out-dir", type=Path, default=RESULT_DIR, help="Directory for data.txt and plot.png")
    sw.add_argument("--no-plot", action="store_true", help="Skip the scatter plot")
    sw.set_defaults(func=_cmd_sweep)

    cv = sub.add_parser("convergence", help="Series error against numpy for n = 1..max_terms")
    _add_geometry_args(cv)
    cv.add_argument("--angle", type=float, default=None, help="Angle in radians (default: bearing start->end)")
    cv.add_argument("--max-terms", type=int, default=PRECISION_CEILING)
    cv.set_defaults(func=_cmd_convergence)

    return ap


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
