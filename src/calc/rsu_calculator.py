from typing import Optional

from model.SimulationConfig import LifeEvent, YearOverride
from tax.regimes import TaxRegime, compute_tax


class RSUCalculator:
    """Calculator for the yearly Restricted Stock Unit (RSU) grant.

    The grant is a flat annual value. A life event can replace it for the
    year it is anchored to and a manual override replaces both; the next
    year reverts to the flat value. The grant is taxed as its own income
    stream, separately from cash pay.
    """

    def __init__(self, annual_grant_value: float = 0.0, regime: TaxRegime = TaxRegime.FLAT):
        """Initialize with the flat grant value.

        Args:
            annual_grant_value: RSU value granted every year unless replaced.
            regime: Tax regime used to compute the post-tax grant value.
        """
        self.annual_grant_value = annual_grant_value
        self.regime = regime

    def grant_value(self, override: Optional[YearOverride] = None,
                    event: Optional[LifeEvent] = None) -> float:
        if override is not None and override.rsu is not None:
            return override.rsu
        if event is not None and event.new_rsu_amount is not None:
            return event.new_rsu_amount
        return self.annual_grant_value

    def post_tax_value(self, grant: float) -> float:
        return grant - compute_tax(grant, self.regime).totalTax
