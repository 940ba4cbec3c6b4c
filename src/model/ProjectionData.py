"""Unified data model for wealth projection results.

This module contains data classes that hold the ledger produced by a
projection, organized by year. Each renderer and exporter extracts the
specific fields it needs from this unified structure.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from model.SimulationConfig import LifeEvent


@dataclass(frozen=True)
class YearlyData:
    """All projection data for a single year.

    Rows produced by the projection are never modified afterwards. Rows
    restored from an imported history carry is_historical=True and zero
    for the fields the history does not record.
    """
    year: int
    age: int

    # Income
    base_salary: float = 0.0
    bonus: float = 0.0
    rsu_grant: float = 0.0
    gross_income: float = 0.0  # base + bonus + RSU grant

    # Taxes and take home
    annual_net_pay: float = 0.0  # base + bonus - tax on cash pay
    tax_rate: float = 0.0  # effective tax rate on cash pay, in percent
    post_tax_income: float = 0.0  # net cash pay + post-tax RSU

    # Savings
    annual_spent: float = 0.0  # net cash pay not saved
    investable_cash: float = 0.0  # saved cash after life event adjustments
    investable: float = 0.0  # investable cash + post-tax RSU

    # Cumulative wealth per trajectory (end of year)
    wealth_conservative: float = 0.0
    wealth_moderate: float = 0.0
    wealth_aggressive: float = 0.0
    cash_wealth_moderate: float = 0.0
    stock_wealth_moderate: float = 0.0

    event: Optional[LifeEvent] = None
    is_historical: bool = False


@dataclass(frozen=True)
class FinalWealth:
    conservative: float = 0.0
    moderate: float = 0.0
    aggressive: float = 0.0


@dataclass
class ProjectionData:
    """Complete projection across all years.

    Contains yearly data for each year in the horizon plus the final
    wealth of each trajectory.
    """
    first_year: int
    last_year: int

    # Yearly data indexed by year, inserted in ascending order
    yearly_data: Dict[int, YearlyData] = field(default_factory=dict)

    final_wealth: FinalWealth = field(default_factory=FinalWealth)

    def get_year(self, year: int) -> Optional[YearlyData]:
        """Get data for a specific year."""
        return self.yearly_data.get(year)

    def years(self) -> List[YearlyData]:
        """All yearly rows ordered by year."""
        return [self.yearly_data[y] for y in sorted(self.yearly_data)]

    def historical_years(self) -> Dict[int, YearlyData]:
        """Get rows restored from an imported history."""
        return {y: d for y, d in self.yearly_data.items() if d.is_historical}

    def projected_years(self) -> Dict[int, YearlyData]:
        """Get rows computed by the projection."""
        return {y: d for y, d in self.yearly_data.items() if not d.is_historical}

    def event_years(self) -> Dict[int, YearlyData]:
        """Get rows that matched a life event."""
        return {y: d for y, d in self.yearly_data.items() if d.event is not None}
