import tempfile
import unittest
from pathlib import Path

from ufonav.io import format_radius, read_sweep_table, write_sweep_table
from ufonav.sweep import RadiusPrecisionRecord, default_radii, sweep


class TestSweepTable(unittest.TestCase):
    def test_default_sweep_table(self) -> None:
        records = sweep(default_radii())
        with tempfile.TemporaryDirectory() as tmp:
            path = write_sweep_table(records, Path(tmp) / "result" / "data.txt")
            lines = path.read_text(encoding="utf-8").splitlines()

            self.assertEqual(len(lines), 11)
            self.assertEqual(lines[0], "Radius,MinPrecision")
            self.assertEqual(lines[1], "2,3")
            self.assertEqual(lines[-1], "20,2")

            back = read_sweep_table(path)
            self.assertEqual([r.min_precision for r in back], [r.min_precision for r in records])
            self.assertEqual([r.radius for r in back], [float(r) for r in default_radii()])

    def test_format_radius(self) -> None:
        self.assertEqual(format_radius(4), "4")
        self.assertEqual(format_radius(4.0), "4")
        self.assertEqual(format_radius(2.5), "2.5")

    def test_bad_header(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.txt"
            path.write_text("radius;n\n2;3\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_sweep_table(path)

    def test_malformed_row(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.txt"
            path.write_text("Radius,MinPrecision\n2,three\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_sweep_table(path)

    def test_written_order(self) -> None:
        records = [RadiusPrecisionRecord(10, 2), RadiusPrecisionRecord(2.5, 4)]
        with tempfile.TemporaryDirectory() as tmp:
            path = write_sweep_table(records, Path(tmp) / "data.txt")
            self.assertEqual(
                path.read_text(encoding="utf-8"),
                "Radius,MinPrecision\n10,2\n2.5,4\n",
            )

    def test_extra_column(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.txt"
            path.write_text("Radius,MinPrecision\n2,3,4\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_sweep_table(path)

    def test_missing_column(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.txt"
            path.write_text("Radius,MinPrecision\n2\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_sweep_table(path)
