"""Historical ledger splicing.

A ledger exported in earlier years can be re-imported so that past years
are shown as they actually happened while the projection continues from
the last recorded year. Historical rows are never recomputed.
"""

import csv
import io
from typing import List, Optional

from model.ProjectionData import FinalWealth, ProjectionData, YearlyData
from model.SimulationConfig import SimulationConfig


def _parse_float(value: Optional[str]) -> float:
    if value is None or value.strip() in ('', '-'):
        return 0.0
    return float(value.replace(',', ''))


def load_history_csv(text: str, current_year: int) -> List[YearlyData]:
    """Parse an exported ledger CSV into historical rows.

    Columns are looked up by header name, so files with or without the
    'Life Event' column are both accepted. Only rows for years before
    current_year are kept. All three wealth trajectories take the recorded
    'Total Wealth'; fields the CSV does not carry are zero.

    Args:
        text: CSV content with a header row
        current_year: First year that is not history

    Returns:
        Historical rows ordered by year

    Raises:
        ValueError: if a required column is missing or a value is not numeric
    """
    reader = csv.DictReader(io.StringIO(text.strip()))
    required = ['Year', 'Age', 'Base Salary', 'Bonus', 'Disposable Income',
                'Investable Cash', 'RSU Grant', 'Total Wealth']
    missing = [c for c in required if c not in (reader.fieldnames or [])]
    if missing:
        raise ValueError(f"History CSV is missing column(s): {', '.join(missing)}")

    history = []
    for row in reader:
        if not (row.get('Year') or '').strip():
            continue
        year = int(row['Year'])
        if year >= current_year:
            continue
        net_pay = _parse_float(row['Disposable Income'])
        investable = _parse_float(row['Investable Cash'])
        wealth = _parse_float(row['Total Wealth'])
        history.append(YearlyData(
            year=year,
            age=int(row['Age']),
            base_salary=_parse_float(row['Base Salary']),
            bonus=_parse_float(row['Bonus']),
            rsu_grant=_parse_float(row['RSU Grant']),
            annual_net_pay=net_pay,
            post_tax_income=net_pay,
            investable_cash=investable,
            investable=investable,
            wealth_conservative=wealth,
            wealth_moderate=wealth,
            wealth_aggressive=wealth,
            is_historical=True,
        ))
    return sorted(history, key=lambda yd: yd.year)


def roll_forward_config(config: SimulationConfig, last_row: YearlyData,
                        original_end_year: Optional[int] = None) -> SimulationConfig:
    """Restart a configuration from the year after the last historical row.

    The new run opens with the recorded moderate wealth, salary and RSU
    grant. When the end year of the original plan is known the duration is
    shortened so the plan still ends there (but never below one year);
    otherwise the duration is kept.
    """
    new_start_year = last_row.year + 1
    duration = config.duration
    if original_end_year is not None:
        duration = max(1, original_end_year - new_start_year)
    return config.with_changes(
        start_year=new_start_year,
        initial_age=last_row.age + 1,
        initial_assets=last_row.wealth_moderate,
        base_salary=last_row.base_salary,
        rsu=last_row.rsu_grant,
        duration=duration,
    )


def splice_history(history: List[YearlyData], live: ProjectionData) -> ProjectionData:
    """Prefix a projection with historical rows.

    Live rows at or before the last historical year are dropped. Final
    wealth is taken from the last row of the combined ledger.
    """
    if not history:
        return live

    last_history_year = history[-1].year
    combined = ProjectionData(first_year=history[0].year, last_year=last_history_year)
    for yd in history:
        combined.yearly_data[yd.year] = yd
    for yd in live.years():
        if yd.year > last_history_year:
            combined.yearly_data[yd.year] = yd
            combined.last_year = yd.year

    final_row = combined.yearly_data[combined.last_year]
    combined.final_wealth = FinalWealth(
        conservative=final_row.wealth_conservative,
        moderate=final_row.wealth_moderate,
        aggressive=final_row.wealth_aggressive,
    )
    return combined
