from model.TaxResult import TaxResult

FALLBACK_RATE = 0.25


class FlatDetails:
    """Single flat rate on gross income, used for any unrecognized regime."""

    def __init__(self, rate: float = FALLBACK_RATE):
        self.rate = rate

    def taxBurden(self, income: float) -> TaxResult:
        if income <= 0:
            return TaxResult(totalTax=0.0, effectiveRate=0.0)
        return TaxResult(
            totalTax=income * self.rate,
            effectiveRate=self.rate * 100,
            marginalRate=self.rate,
        )
