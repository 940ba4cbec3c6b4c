"""Tests for the wealth trajectory calculator."""

import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from calc.investment_calculator import InvestmentCalculator, TrajectoryBalance, TRAJECTORIES


class TestTrajectoryBalance:
    """Tests for a single trajectory's compounding step."""

    def test_opening_balance_grows_by_full_rate(self):
        balance = TrajectoryBalance(0.12, cash=1000000)
        balance.compound(0, 0)
        assert balance.cash == pytest.approx(1120000)
        assert balance.stock == 0

    def test_contributions_earn_half_a_year(self):
        balance = TrajectoryBalance(0.10)
        balance.compound(100000, 50000)
        assert balance.cash == pytest.approx(105000)
        assert balance.stock == pytest.approx(52500)
        assert balance.total == pytest.approx(157500)

    def test_negative_contribution_reduces_cash(self):
        balance = TrajectoryBalance(0.10, cash=100000)
        balance.compound(-200000, 0)
        assert balance.cash == pytest.approx(110000 - 210000)

    def test_two_years(self):
        balance = TrajectoryBalance(0.08, cash=10000)
        balance.compound(1000, 500)
        balance.compound(1000, 500)
        cash = (10000 * 1.08 + 1000 * 1.04) * 1.08 + 1000 * 1.04
        stock = 500 * 1.04 * 1.08 + 500 * 1.04
        assert balance.cash == pytest.approx(cash)
        assert balance.stock == pytest.approx(stock)


class TestInvestmentCalculator:
    """Tests for the three parallel trajectories."""

    def test_all_trajectories_open_with_initial_assets(self):
        calc = InvestmentCalculator(500000, 10, 12, 15)
        for name in TRAJECTORIES:
            assert calc.get_balance(name).cash == 500000
            assert calc.get_balance(name).stock == 0

    def test_no_years_final_wealth_is_initial_assets(self):
        fw = InvestmentCalculator(500000, 10, 12, 15).final_wealth()
        assert fw.conservative == fw.moderate == fw.aggressive == 500000

    def test_trajectories_differ_only_by_rate(self):
        calc = InvestmentCalculator(1000000, 10, 12, 15)
        calc.add_year(200000, 100000)
        fw = calc.final_wealth()
        assert fw.conservative == pytest.approx(1100000 + 300000 * 1.05)
        assert fw.moderate == pytest.approx(1120000 + 300000 * 1.06)
        assert fw.aggressive == pytest.approx(1150000 + 300000 * 1.075)
        assert fw.conservative < fw.moderate < fw.aggressive

    def test_unknown_trajectory(self):
        with pytest.raises(KeyError):
            InvestmentCalculator(0, 1, 2, 3).get_balance('reckless')
