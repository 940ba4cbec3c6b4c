import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from calc.history import load_history_csv, roll_forward_config, splice_history
from calc.projection_calculator import run_projection
from model.SimulationConfig import SimulationConfig


HISTORY_CSV = """Year,Age,Life Event,Base Salary,Bonus,Disposable Income,Investable Cash,RSU Grant,Total Wealth
2023,29,-,1000000.00,100000.00,900000.00,450000.00,200000.00,"5,500,000.00"
2022,28,Wedding (500000),900000.00,90000.00,800000.00,-100000.00,200000.00,5000000.00
2024,30,-,1100000.00,110000.00,1000000.00,500000.00,250000.00,6200000.00
2026,32,-,1300000.00,130000.00,1100000.00,550000.00,250000.00,8000000.00
"""


@pytest.fixture
def config():
    return SimulationConfig.from_spec({
        "initialAge": 28, "startYear": 2022, "duration": 10,
        "baseSalary": 900000, "rsu": 200000, "initialAssets": 4000000,
    })


class TestLoadHistory:

    def test_rows_before_current_year_in_order(self):
        history = load_history_csv(HISTORY_CSV, 2025)
        assert [yd.year for yd in history] == [2022, 2023, 2024]
        assert all(yd.is_historical for yd in history)

    def test_values(self):
        row = load_history_csv(HISTORY_CSV, 2025)[1]
        assert row.age == 29
        assert row.base_salary == 1000000
        assert row.annual_net_pay == 900000
        assert row.investable_cash == 450000
        assert row.rsu_grant == 200000
        assert row.wealth_conservative == row.wealth_moderate == row.wealth_aggressive == 5500000

    def test_negative_investable_cash(self):
        assert load_history_csv(HISTORY_CSV, 2025)[0].investable_cash == -100000

    def test_without_life_event_column(self):
        text = "Year,Age,Base Salary,Bonus,Disposable Income,Investable Cash,RSU Grant,Total Wealth\n" \
               "2020,25,1,2,3,4,5,6\n"
        assert load_history_csv(text, 2025)[0].wealth_moderate == 6

    def test_missing_column(self):
        with pytest.raises(ValueError, match="Total Wealth"):
            load_history_csv("Year,Age\n2020,25\n", 2025)

    def test_non_numeric_value(self):
        text = "Year,Age,Base Salary,Bonus,Disposable Income,Investable Cash,RSU Grant,Total Wealth\n" \
               "2020,25,lots,2,3,4,5,6\n"
        with pytest.raises(ValueError):
            load_history_csv(text, 2025)


class TestRollForward:

    def test_starts_after_last_row(self, config):
        last = load_history_csv(HISTORY_CSV, 2025)[-1]
        rolled = roll_forward_config(config, last, original_end_year=config.end_year)
        assert rolled.start_year == 2025
        assert rolled.initial_age == 31
        assert rolled.initial_assets == 6200000
        assert rolled.base_salary == 1100000
        assert rolled.rsu == 250000
        assert rolled.end_year == config.end_year

    def test_keeps_duration_without_end_year(self, config):
        last = load_history_csv(HISTORY_CSV, 2025)[-1]
        assert roll_forward_config(config, last).duration == config.duration

    def test_duration_never_below_one(self, config):
        last = load_history_csv(HISTORY_CSV, 2040)[-1]
        assert roll_forward_config(config, last, original_end_year=2026).duration == 1


class TestSplice:

    def test_no_history_returns_live(self, config):
        live = run_projection(config, None, 'INR')
        assert splice_history([], live) is live

    def test_history_prefixes_live_rows(self, config):
        history = load_history_csv(HISTORY_CSV, 2025)
        live = run_projection(roll_forward_config(config, history[-1], config.end_year), None, 'INR')
        combined = splice_history(history, live)

        assert combined.first_year == 2022
        assert combined.last_year == config.end_year
        assert combined.get_year(2024).is_historical
        assert not combined.get_year(2025).is_historical
        assert combined.get_year(2025) == live.get_year(2025)
        assert combined.final_wealth == live.final_wealth

    def test_overlapping_live_rows_are_dropped(self, config):
        history = load_history_csv(HISTORY_CSV, 2025)
        combined = splice_history(history, run_projection(config, None, 'INR'))
        assert combined.get_year(2023).wealth_moderate == 5500000
        assert combined.get_year(2025).is_historical is False
