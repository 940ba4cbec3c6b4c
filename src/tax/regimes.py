"""Tax regime selection and the single tax entry point used by the projection.

A regime is chosen from a currency code. Every member of TaxRegime has
exactly one implementation in REGIME_DETAILS; codes that do not name a
regime map to TaxRegime.FLAT so a projection never fails on an unknown
currency.
"""

from enum import Enum
from typing import Union

from model.TaxResult import TaxResult
from tax.FederalDetails import FederalDetails
from tax.FlatDetails import FlatDetails
from tax.IndiaDetails import IndiaDetails


class TaxRegime(Enum):
    """Closed set of supported tax regimes."""

    INR = "INR"
    USD = "USD"
    FLAT = "FLAT"

    @classmethod
    def from_code(cls, code: Union[str, "TaxRegime", None]) -> "TaxRegime":
        """Map a currency/regime code to a regime, falling back to FLAT."""
        if isinstance(code, TaxRegime):
            return code
        if code in ("INR", "USD"):
            return cls(code)
        return cls.FLAT


REGIME_DETAILS = {
    TaxRegime.INR: IndiaDetails(),
    TaxRegime.USD: FederalDetails(),
    TaxRegime.FLAT: FlatDetails(),
}

_missing = [r.value for r in TaxRegime if r not in REGIME_DETAILS]
if _missing:
    raise RuntimeError(f"No tax implementation registered for regime(s): {_missing}")


def compute_tax(income: float, regime: Union[str, TaxRegime, None]) -> TaxResult:
    """Return the tax owed on a gross income and its effective rate in percent.

    Args:
        income: Gross income for the year
        regime: A TaxRegime or a currency code such as 'INR' or 'USD'

    Returns:
        TaxResult; income <= 0 always yields zero tax and a zero rate
    """
    return REGIME_DETAILS[TaxRegime.from_code(regime)].taxBurden(income)
