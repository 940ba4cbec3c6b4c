"""Investment balance calculator.

Tracks the cash and stock balances of the three wealth trajectories,
applying each trajectory's annual return and adding yearly contributions.
"""

from dataclasses import dataclass
from typing import Dict

from model.ProjectionData import FinalWealth


TRAJECTORIES = ('conservative', 'moderate', 'aggressive')


@dataclass
class TrajectoryBalance:
    """Cash and stock balances of one trajectory.

    Contributions arrive through the year rather than all at its start, so
    they earn half a year's return in the year they are made.
    """
    rate: float  # annual return as a fraction
    cash: float = 0.0
    stock: float = 0.0

    def compound(self, investable_cash: float, post_tax_rsu: float) -> None:
        """Apply one year of growth and add the year's contributions."""
        growth = 1 + self.rate
        contribution_growth = 1 + self.rate / 2
        self.cash = self.cash * growth + investable_cash * contribution_growth
        self.stock = self.stock * growth + post_tax_rsu * contribution_growth

    @property
    def total(self) -> float:
        return self.cash + self.stock


class InvestmentCalculator:
    """Calculator for the three parallel wealth trajectories.

    Every trajectory opens with the same asset base held as cash and no
    stock; they differ only by their annual return.
    """

    def __init__(self, initial_assets: float, return_conservative: float,
                 return_moderate: float, return_aggressive: float):
        """Initialize the trajectories.

        Args:
            initial_assets: Opening asset base for every trajectory
            return_conservative: Annual return in percent (e.g. 10 for 10%)
            return_moderate: Annual return in percent
            return_aggressive: Annual return in percent
        """
        self.balances: Dict[str, TrajectoryBalance] = {
            'conservative': TrajectoryBalance(return_conservative / 100, cash=initial_assets),
            'moderate': TrajectoryBalance(return_moderate / 100, cash=initial_assets),
            'aggressive': TrajectoryBalance(return_aggressive / 100, cash=initial_assets),
        }

    def add_year(self, investable_cash: float, post_tax_rsu: float) -> None:
        """Compound every trajectory by one year with the same contributions."""
        for name in TRAJECTORIES:
            self.balances[name].compound(investable_cash, post_tax_rsu)

    def get_balance(self, trajectory: str) -> TrajectoryBalance:
        return self.balances[trajectory]

    def final_wealth(self) -> FinalWealth:
        return FinalWealth(
            conservative=self.balances['conservative'].total,
            moderate=self.balances['moderate'].total,
            aggressive=self.balances['aggressive'].total,
        )
