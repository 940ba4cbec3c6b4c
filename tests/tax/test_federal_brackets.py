import unittest
import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
from tax.FederalDetails import FederalDetails, progressive_tax, marginal_rate, BRACKETS, STANDARD_DEDUCTION


class TestFederalDetails(unittest.TestCase):
    def setUp(self):
        self.fed = FederalDetails()

    def test_zero_and_negative_income(self):
        for income in (0, -1, -50000):
            result = self.fed.taxBurden(income)
            self.assertEqual(result.totalTax, 0.0)
            self.assertEqual(result.effectiveRate, 0.0)

    def test_income_below_standard_deduction(self):
        result = self.fed.taxBurden(STANDARD_DEDUCTION - 100)
        self.assertEqual(result.totalTax, 0.0)
        self.assertEqual(result.effectiveRate, 0.0)

    def test_first_bracket_boundary(self):
        # Taxable income of exactly 11,600 is taxed entirely at 10%
        income = STANDARD_DEDUCTION + 11600
        result = self.fed.taxBurden(income)
        self.assertAlmostEqual(result.totalTax, 1160.0, places=2)
        self.assertAlmostEqual(result.effectiveRate, 1160.0 / income * 100, places=6)
        self.assertEqual(result.marginalRate, 0.10)

    def test_second_bracket(self):
        # 1,160 + (20,000 - 11,600) * 12%
        result = self.fed.taxBurden(STANDARD_DEDUCTION + 20000)
        self.assertAlmostEqual(result.totalTax, 1160.0 + 8400 * 0.12, places=2)
        self.assertEqual(result.marginalRate, 0.12)

    def test_top_bracket(self):
        taxable = 700000
        expected = (11600 * 0.10 + (47150 - 11600) * 0.12 + (100525 - 47150) * 0.22
                    + (191950 - 100525) * 0.24 + (243725 - 191950) * 0.32
                    + (609350 - 243725) * 0.35 + (taxable - 609350) * 0.37)
        result = self.fed.taxBurden(STANDARD_DEDUCTION + taxable)
        self.assertAlmostEqual(result.totalTax, expected, places=2)
        self.assertEqual(result.marginalRate, 0.37)

    def test_percent_rates_are_normalized(self):
        fed = FederalDetails(0, [{"maxIncome": 1000, "rate": 10}, {"maxIncome": float("inf"), "rate": 20}])
        self.assertAlmostEqual(fed.taxBurden(2000).totalTax, 100 + 200, places=2)


class TestProgressiveTax(unittest.TestCase):
    def test_zero_taxable(self):
        self.assertEqual(progressive_tax(0, BRACKETS), 0.0)

    def test_marginal_rate_at_boundary(self):
        self.assertEqual(marginal_rate(11600, BRACKETS), 0.10)
        self.assertEqual(marginal_rate(11601, BRACKETS), 0.12)


if __name__ == '__main__':
    unittest.main()
