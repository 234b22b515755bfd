"""Plain-text table export of sweep results.

Format::

    Radius,MinPrecision
    2,3
    4,2
    ...
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ufonav.config import TABLE_HEADER
from ufonav.sweep import RadiusPrecisionRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def format_radius(radius: float) -> str:
    """Integral radii are written without a decimal part."""
    r = float(radius)
    if r.is_integer():
        return str(int(r))
    return repr(r)


def format_sweep_table(records: Iterable[RadiusPrecisionRecord]) -> str:
    lines = [TABLE_HEADER]
    lines.extend(f"{format_radius(rec.radius)},{rec.min_precision}" for rec in records)
    return "\n".join(lines) + "\n"


def write_sweep_table(records: Iterable[RadiusPrecisionRecord], path: str | Path) -> Path:
    """Write the table, creating the parent directory if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_sweep_table(records), encoding="utf-8")
    logger.info("Sweep table written to %s", path)
    return path


def read_sweep_table(path: str | Path) -> list[RadiusPrecisionRecord]:
    path = Path(path)
    columns = TABLE_HEADER.split(",")

    records: list[RadiusPrecisionRecord] = []
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames != columns:
            msg = f"{path}: expected header {TABLE_HEADER!r}"
            raise ValueError(msg)

        for row in reader:
            values = [row[c] for c in columns]
            if None in row or None in values:
                msg = f"{path}:{reader.line_num}: expected {len(columns)} columns"
                raise ValueError(msg)
            try:
                records.append(RadiusPrecisionRecord(radius=float(values[0]), min_precision=int(values[1])))
            except ValueError as exc:
                msg = f"{path}:{reader.line_num}: malformed row {values!r}"
                raise ValueError(msg) from exc
    return records
