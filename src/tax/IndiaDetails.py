from model.TaxResult import TaxResult
from tax.FederalDetails import progressive_tax, marginal_rate

STANDARD_DEDUCTION = 75000.0

# Rebate applies to gross income up to and including this amount
REBATE_LIMIT = 775000.0

SURCHARGE_THRESHOLD = 5000000.0
SURCHARGE_RATE = 0.10
CESS_RATE = 0.04

BRACKETS = [
    {"maxIncome": 400000.0, "rate": 0.0},
    {"maxIncome": 800000.0, "rate": 0.05},
    {"maxIncome": 1200000.0, "rate": 0.10},
    {"maxIncome": 1600000.0, "rate": 0.15},
    {"maxIncome": 2000000.0, "rate": 0.20},
    {"maxIncome": 2400000.0, "rate": 0.25},
    {"maxIncome": float("inf"), "rate": 0.30},
]


class IndiaDetails:
    """Progressive slab regime with a rebate cliff, surcharge and cess.

    The rebate is a hard cutoff: any gross income at or below REBATE_LIMIT
    owes nothing, and one unit above it owes the full slab tax (plus cess).
    """

    def __init__(self, standard_deduction: float = STANDARD_DEDUCTION):
        self.standard_deduction = standard_deduction
        self.brackets = [dict(b) for b in BRACKETS]

    def taxBurden(self, income: float) -> TaxResult:
        if income <= 0:
            return TaxResult(totalTax=0.0, effectiveRate=0.0)

        taxable = max(0.0, income - self.standard_deduction)
        base_tax = progressive_tax(taxable, self.brackets)

        if income <= REBATE_LIMIT:
            base_tax = 0.0

        surcharge = 0.0
        if income > SURCHARGE_THRESHOLD:
            surcharge = base_tax * SURCHARGE_RATE

        total_tax = (base_tax + surcharge) * (1 + CESS_RATE)
        return TaxResult(
            totalTax=total_tax,
            effectiveRate=(total_tax / income) * 100,
            marginalRate=marginal_rate(taxable, self.brackets),
        )
