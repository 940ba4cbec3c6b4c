from typing import Dict

from tax.regimes import TaxRegime, compute_tax


class TakeHomeCalculator:
    """Calculator that computes yearly cash take-home pay and savings.

    Base salary and bonus are taxed together as one cash income stream
    under the configured regime. A fixed share of the net pay is saved;
    the rest is spent.
    """

    def __init__(self, regime: TaxRegime, savings_rate: float):
        """
        Args:
            regime: Tax regime applied to cash pay
            savings_rate: Percentage of net cash pay that is invested (e.g. 60)
        """
        self.regime = regime
        self.savings_fraction = savings_rate / 100

    def calculate(self, base_salary: float, bonus: float) -> Dict:
        gross_cash = base_salary + bonus
        tax = compute_tax(gross_cash, self.regime)
        annual_net_pay = gross_cash - tax.totalTax
        return {
            'gross_cash': gross_cash,
            'cash_tax': tax.totalTax,
            'tax_rate': tax.effectiveRate,
            'marginal_rate': tax.marginalRate,
            'annual_net_pay': annual_net_pay,
            'savings': annual_net_pay * self.savings_fraction,
            'annual_spent': annual_net_pay * (1 - self.savings_fraction),
        }


def calculate_take_home(base_salary: float, bonus: float, currency_code: str, savings_rate: float = 0.0) -> Dict:
    """Take-home breakdown for a single year's cash pay."""
    return TakeHomeCalculator(TaxRegime.from_code(currency_code), savings_rate).calculate(base_salary, bonus)
