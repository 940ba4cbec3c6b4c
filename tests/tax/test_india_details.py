import unittest
import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
from tax.IndiaDetails import IndiaDetails, REBATE_LIMIT, CESS_RATE


class TestIndiaDetails(unittest.TestCase):
    def setUp(self):
        self.india = IndiaDetails()

    def test_zero_and_negative_income(self):
        for income in (0, -1, -1000000):
            result = self.india.taxBurden(income)
            self.assertEqual(result.totalTax, 0.0)
            self.assertEqual(result.effectiveRate, 0.0)

    def test_rebate_limit_owes_nothing(self):
        result = self.india.taxBurden(REBATE_LIMIT)
        self.assertEqual(result.totalTax, 0.0)
        self.assertEqual(result.effectiveRate, 0.0)

    def test_one_above_rebate_limit_owes_full_slab_tax(self):
        # Taxable 700,001: (700,001 - 400,000) at 5%, plus 4% cess
        result = self.india.taxBurden(775001)
        self.assertAlmostEqual(result.totalTax, 300001 * 0.05 * 1.04, places=4)
        self.assertGreater(result.totalTax, 15000)

    def test_ten_lakh(self):
        # Taxable 925,000: 20,000 (5% slab) + 12,500 (10% slab), plus cess
        result = self.india.taxBurden(1000000)
        self.assertAlmostEqual(result.totalTax, 33800.0, places=2)
        self.assertAlmostEqual(result.effectiveRate, 3.38, places=4)
        self.assertEqual(result.marginalRate, 0.10)

    def test_surcharge_above_fifty_lakh(self):
        # Taxable 5,925,000: 400,000 across the 5-25% slabs, then 30% above 2,400,000
        base = 20000 + 40000 + 60000 + 80000 + 100000 + (5925000 - 2400000) * 0.30
        result = self.india.taxBurden(6000000)
        self.assertAlmostEqual(result.totalTax, base * 1.10 * (1 + CESS_RATE), places=2)
        self.assertEqual(result.marginalRate, 0.30)

    def test_no_surcharge_at_threshold(self):
        taxable = 5000000 - 75000
        base = 20000 + 40000 + 60000 + 80000 + 100000 + (taxable - 2400000) * 0.30
        result = self.india.taxBurden(5000000)
        self.assertAlmostEqual(result.totalTax, base * (1 + CESS_RATE), places=2)


if __name__ == '__main__':
    unittest.main()
