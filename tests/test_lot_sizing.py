"""Unit tests for risk amount, lot size and lot tiers."""

from __future__ import annotations

import unittest

from sltolot.risk.lot_classifier import LotTier, classify_lot
from sltolot.risk.lot_size import calculate_lot_size
from sltolot.risk.risk_amount import RiskKind, RiskSpec, resolve_risk_amount, risk_input_suffix


class RiskAmountTests(unittest.TestCase):
    def test_percent_of_balance(self) -> None:
        amount = resolve_risk_amount(10_000, RiskSpec(kind=RiskKind.PERCENT, value=1))
        self.assertAlmostEqual(amount, 100.0)

    def test_fixed_amount_ignores_balance(self) -> None:
        amount = resolve_risk_amount(10_000, RiskSpec(kind=RiskKind.FIXED, value=250))
        self.assertEqual(amount, 250)

    def test_no_clamping(self) -> None:
        self.assertAlmostEqual(resolve_risk_amount(1_000, RiskSpec(RiskKind.PERCENT, 150)), 1_500.0)
        self.assertEqual(resolve_risk_amount(1_000, RiskSpec(RiskKind.FIXED, 2_000)), 2_000)

    def test_suffix(self) -> None:
        self.assertEqual(risk_input_suffix(RiskKind.PERCENT, "eur"), "%")
        self.assertEqual(risk_input_suffix(RiskKind.FIXED, " eur "), "EUR")
        self.assertEqual(risk_input_suffix(RiskKind.FIXED, ""), "$")


class LotSizeTests(unittest.TestCase):
    def test_standard_case(self) -> None:
        self.assertAlmostEqual(calculate_lot_size(100.0, 50, 10.0), 0.2, places=12)

    def test_tighter_stop_means_bigger_size(self) -> None:
        wide = calculate_lot_size(100.0, 100, 10.0)
        tight = calculate_lot_size(100.0, 20, 10.0)
        self.assertGreater(tight, wide)

    def test_result_is_not_rounded(self) -> None:
        self.assertAlmostEqual(calculate_lot_size(100.0, 30, 10.0), 1 / 3, places=12)

    def test_invalid_inputs(self) -> None:
        self.assertIsNone(calculate_lot_size(100.0, 0, 10.0))
        self.assertIsNone(calculate_lot_size(100.0, -5, 10.0))
        self.assertIsNone(calculate_lot_size(100.0, 50, 0.0))
        self.assertIsNone(calculate_lot_size(100.0, 50, -1.0))
        self.assertIsNone(calculate_lot_size(100.0, None, 10.0))
        self.assertIsNone(calculate_lot_size(100.0, 50, None))


class LotClassifierTests(unittest.TestCase):
    def test_tier_boundaries(self) -> None:
        self.assertIs(classify_lot(1.0).tier, LotTier.STANDARD)
        self.assertIs(classify_lot(0.9999).tier, LotTier.MINI)
        self.assertIs(classify_lot(0.1).tier, LotTier.MINI)
        self.assertIs(classify_lot(0.0999).tier, LotTier.MICRO)
        self.assertIs(classify_lot(0.01).tier, LotTier.MICRO)
        self.assertIs(classify_lot(0.0099).tier, LotTier.NANO)

    def test_no_upper_bound(self) -> None:
        self.assertIs(classify_lot(1_000_000.0).tier, LotTier.STANDARD)

    def test_display_precision(self) -> None:
        self.assertEqual(classify_lot(0.2).display, "0.20")
        self.assertEqual(classify_lot(2.345678).display, "2.35")
        self.assertEqual(classify_lot(0.05).display, "0.05")
        self.assertEqual(classify_lot(0.0042).display, "0.0042")


if __name__ == "__main__":
    unittest.main()
