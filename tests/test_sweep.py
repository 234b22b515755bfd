import unittest

from ufonav.navigation import SimulationConfig
from ufonav.sweep import RadiusPrecisionRecord, default_radii, sweep


class TestSweep(unittest.TestCase):
    def test_default_radii(self) -> None:
        self.assertEqual(default_radii(), [2, 4, 6, 8, 10, 12, 14, 16, 18, 20])

    def test_default_sweep(self) -> None:
        records = sweep(default_radii())
        self.assertEqual(len(records), 10)
        self.assertEqual([r.radius for r in records], default_radii())
        for rec in records:
            self.assertGreaterEqual(rec.min_precision, 1)
            self.assertLessEqual(rec.min_precision, 20)
        self.assertEqual([r.min_precision for r in records], [3, 2, 2, 2, 2, 2, 2, 2, 2, 2])

    def test_non_increasing_in_radius(self) -> None:
        records = sweep(default_radii())
        precisions = [r.min_precision for r in records]
        for smaller, larger in zip(precisions, precisions[1:]):
            self.assertGreaterEqual(smaller, larger)

    def test_order_and_duplicates_kept(self) -> None:
        records = sweep([20, 2, 20])
        self.assertEqual(
            records,
            [
                RadiusPrecisionRecord(20, 2),
                RadiusPrecisionRecord(2, 3),
                RadiusPrecisionRecord(20, 2),
            ],
        )

    def test_threaded_matches_serial(self) -> None:
        radii = [18, 2, 7.5, 4, 2]
        cfg = SimulationConfig(precision_ceiling=10)
        self.assertEqual(sweep(radii, cfg, jobs=4), sweep(radii, cfg))

    def test_empty(self) -> None:
        self.assertEqual(sweep([]), [])
