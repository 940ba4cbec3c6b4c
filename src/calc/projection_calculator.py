"""Projection calculator that builds the year-by-year wealth ledger.

This calculator creates a complete ProjectionData object from a
configuration, sparse per-year overrides and a currency code. For each
year of the horizon it works out:
1. Base salary - hikes compound from the previous year's base
2. Bonus and RSU grant - overrides, then life events, then configured values
3. Taxes and savings - cash pay and RSU grant are taxed separately
4. Wealth - three trajectories compound the same contributions

Each call starts from fresh accumulators, so the same inputs always
produce the same ledger.
"""

from typing import Dict, Optional, Union

from calc.investment_calculator import InvestmentCalculator
from calc.rsu_calculator import RSUCalculator
from calc.take_home import TakeHomeCalculator
from model.ProjectionData import ProjectionData, YearlyData
from model.SimulationConfig import EventType, LifeEvent, SimulationConfig, YearOverride
from tax.regimes import TaxRegime


class ProjectionCalculator:
    """Calculator that projects income, savings and wealth for every year.

    The calculator performs no validation: a configuration with a negative
    duration yields an empty ledger whose final wealth is the opening
    asset base. Validate configurations with SimulationConfig.validate()
    before running them when that matters.
    """

    def __init__(self, regime: TaxRegime):
        self.regime = regime

    def calculate(self, config: SimulationConfig,
                  overrides: Optional[Dict[int, YearOverride]] = None) -> ProjectionData:
        """Calculate the projection for all years.

        Args:
            config: The run configuration
            overrides: Optional manual values keyed by calendar year

        Returns:
            ProjectionData containing a YearlyData row per year and the
            final wealth of each trajectory
        """
        overrides = overrides or {}

        take_home = TakeHomeCalculator(self.regime, config.savings_rate)
        rsu_calculator = RSUCalculator(config.rsu, self.regime)
        investments = InvestmentCalculator(
            config.initial_assets,
            config.return_conservative,
            config.return_moderate,
            config.return_aggressive,
        )

        projection = ProjectionData(first_year=config.start_year, last_year=config.end_year)

        previous_base = config.base_salary
        for i in range(config.duration + 1):
            year = config.start_year + i
            event = config.event_for_year(year)
            override = overrides.get(year)

            base = _resolve_base(config, i, previous_base, override, event)
            if event is not None and event.type == EventType.INCOME_JUMP:
                base += event.amount

            rsu = rsu_calculator.grant_value(override, event)
            if override is not None and override.bonus is not None:
                bonus = override.bonus
            else:
                bonus = base * (config.bonus_percent / 100)

            pay = take_home.calculate(base, bonus)
            post_tax_rsu = rsu_calculator.post_tax_value(rsu)

            investable_cash = pay['savings'] + _event_cash_flow(event, i, config.inflation)

            investments.add_year(investable_cash, post_tax_rsu)
            moderate = investments.get_balance('moderate')

            projection.yearly_data[year] = YearlyData(
                year=year,
                age=config.initial_age + i,
                base_salary=base,
                bonus=bonus,
                rsu_grant=rsu,
                gross_income=base + rsu + bonus,
                annual_net_pay=pay['annual_net_pay'],
                tax_rate=pay['tax_rate'],
                post_tax_income=pay['annual_net_pay'] + post_tax_rsu,
                annual_spent=pay['annual_spent'],
                investable_cash=investable_cash,
                investable=investable_cash + post_tax_rsu,
                wealth_conservative=investments.get_balance('conservative').total,
                wealth_moderate=moderate.total,
                wealth_aggressive=investments.get_balance('aggressive').total,
                cash_wealth_moderate=moderate.cash,
                stock_wealth_moderate=moderate.stock,
                event=event,
            )

            previous_base = base

        projection.final_wealth = investments.final_wealth()
        return projection


def _resolve_base(config: SimulationConfig, index: int, previous_base: float,
                  override: Optional[YearOverride], event: Optional[LifeEvent]) -> float:
    """Base salary for a year before any income jump is added.

    The first year starts from the configured salary and is only hiked by
    an event's one-time hike; later years compound the previous year's
    base by the event hike or the configured annual hike.
    """
    if override is not None and override.base is not None:
        return override.base
    event_hike = event.hike_percentage if event is not None else None
    if index == 0:
        return config.base_salary * (1 + (event_hike or 0) / 100)
    hike = event_hike if event_hike is not None else config.hike_percent
    return previous_base * (1 + hike / 100)


def _event_cash_flow(event: Optional[LifeEvent], index: int, inflation: float) -> float:
    """Change to the year's investable cash caused by a life event.

    Expenses are entered in today's money and inflated to the year they
    fall in; windfalls are taken at face value.
    """
    if event is None:
        return 0.0
    if event.type == EventType.EXPENSE:
        return -(event.amount * (1 + inflation / 100) ** index)
    if event.type == EventType.WINDFALL:
        return event.amount
    return 0.0


def run_projection(config: SimulationConfig,
                   overrides: Optional[Dict[int, YearOverride]] = None,
                   currency_code: Union[str, TaxRegime, None] = None) -> ProjectionData:
    """Project a configuration under the tax regime for a currency code."""
    return ProjectionCalculator(TaxRegime.from_code(currency_code)).calculate(config, overrides)
