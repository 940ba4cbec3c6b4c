"""Wealth Projector Tools for MCP Server.

This module provides the tool implementations that wrap the projection
engine and expose its ledger through MCP.
"""

import os
import sys
from typing import Dict, List, Optional

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from calc.program_loader import Program, load_program, list_programs
from model.ProjectionData import ProjectionData, YearlyData
from model.currencies import format_money, get_currency
from tax.regimes import TaxRegime, compute_tax


def _round_fields(yd: YearlyData, names: List[str]) -> dict:
    return {name: round(getattr(yd, name), 2) for name in names}


class WealthProjectorTools:
    """Tools that wrap the projection engine for one program."""

    def __init__(self, base_path: str, program_name: str):
        """Initialize with paths and calculate the projection.

        Args:
            base_path: Path to the project root directory
            program_name: Name of the program folder in input-parameters
        """
        self.base_path = base_path
        self.program_name = program_name
        self.program: Program = load_program(program_name, os.path.join(base_path, 'input-parameters'))
        self.regime = TaxRegime.from_code(self.program.currency)
        self.data: ProjectionData = self.program.calculate()

    @property
    def config(self):
        return self.program.config

    def _missing_year(self, year: int) -> dict:
        return {"error": f"Year {year} is not in the projection ({self.data.first_year}-{self.data.last_year})"}

    def get_program_overview(self) -> dict:
        """Get an overview of the projection configuration."""
        c = self.config
        currency = get_currency(self.program.currency)
        return {
            "program_name": self.program_name,
            "currency": currency.code,
            "currency_symbol": currency.symbol,
            "tax_regime": self.regime.value,
            "projection_horizon": {
                "start_year": c.start_year,
                "end_year": c.end_year,
                "years": c.duration + 1,
                "initial_age": c.initial_age,
            },
            "income": {
                "base_salary": c.base_salary,
                "bonus_percent": c.bonus_percent,
                "hike_percent": c.hike_percent,
                "rsu": c.rsu,
            },
            "savings": {
                "initial_assets": c.initial_assets,
                "savings_rate": c.savings_rate,
                "inflation": c.inflation,
            },
            "returns": {
                "conservative": c.return_conservative,
                "moderate": c.return_moderate,
                "aggressive": c.return_aggressive,
            },
            "life_events": [e.to_spec() for e in sorted(c.life_events, key=lambda e: e.year)],
            "overridden_years": sorted(self.program.overrides),
        }

    def list_available_years(self) -> dict:
        """List all years in the projection."""
        return {
            "first_year": self.data.first_year,
            "last_year": self.data.last_year,
            "historical_years": sorted(self.data.historical_years()),
            "projected_years": sorted(self.data.projected_years()),
            "event_years": sorted(self.data.event_years()),
            "total_years": len(self.data.yearly_data),
        }

    def get_year_summary(self, year: int) -> dict:
        """Get income, tax and savings summary for a specific year."""
        yd = self.data.get_year(year)
        if yd is None:
            return self._missing_year(year)

        result = {
            "year": year,
            "age": yd.age,
            "is_historical": yd.is_historical,
            **_round_fields(yd, ["base_salary", "bonus", "rsu_grant", "gross_income",
                                 "annual_net_pay", "post_tax_income", "annual_spent",
                                 "investable_cash", "investable", "wealth_moderate"]),
            "effective_tax_rate": round(yd.tax_rate, 2),
        }
        if yd.event is not None:
            result["life_event"] = yd.event.to_spec()
        return result

    def get_tax_details(self, year: int) -> dict:
        """Get the tax breakdown for a specific year."""
        yd = self.data.get_year(year)
        if yd is None:
            return self._missing_year(year)
        if yd.is_historical:
            return {
                "year": year,
                "is_historical": True,
                "message": "Imported history records disposable income only; no tax breakdown is available.",
                "annual_net_pay": round(yd.annual_net_pay, 2),
            }

        cash_income = yd.base_salary + yd.bonus
        cash_tax = compute_tax(cash_income, self.regime)
        rsu_tax = compute_tax(yd.rsu_grant, self.regime)
        return {
            "year": year,
            "tax_regime": self.regime.value,
            "cash_pay": {
                "income": round(cash_income, 2),
                "total_tax": round(cash_tax.totalTax, 2),
                "effective_rate": round(cash_tax.effectiveRate, 2),
                "marginal_rate": round(cash_tax.marginalRate * 100, 2),
                "net": round(yd.annual_net_pay, 2),
            },
            "rsu": {
                "grant": round(yd.rsu_grant, 2),
                "total_tax": round(rsu_tax.totalTax, 2),
                "effective_rate": round(rsu_tax.effectiveRate, 2),
                "net": round(yd.rsu_grant - rsu_tax.totalTax, 2),
            },
            "total_tax": round(cash_tax.totalTax + rsu_tax.totalTax, 2),
        }

    def get_wealth_trajectories(self, year: Optional[int] = None) -> dict:
        """Get wealth per trajectory for one year or every year."""
        names = ["wealth_conservative", "wealth_moderate", "wealth_aggressive",
                 "cash_wealth_moderate", "stock_wealth_moderate"]
        if year is not None:
            yd = self.data.get_year(year)
            if yd is None:
                return self._missing_year(year)
            return {"year": year, **_round_fields(yd, names)}

        return {
            "initial_assets": round(self.config.initial_assets, 2),
            "yearly": {yd.year: _round_fields(yd, names) for yd in self.data.years()},
            "final_wealth": self.get_final_wealth()["final_wealth"],
        }

    def compare_years(self, year1: int, year2: int) -> dict:
        """Compare key metrics between two years."""
        yd1 = self.data.get_year(year1)
        if yd1 is None:
            return self._missing_year(year1)
        yd2 = self.data.get_year(year2)
        if yd2 is None:
            return self._missing_year(year2)

        def compare_metric(v1: float, v2: float) -> dict:
            diff = v2 - v1
            pct = (diff / v1 * 100) if v1 != 0 else 0
            return {
                f"year_{year1}": round(v1, 2),
                f"year_{year2}": round(v2, 2),
                "difference": round(diff, 2),
                "percent_change": round(pct, 1)
            }

        return {
            "comparison": f"{year1} vs {year2}",
            "base_salary": compare_metric(yd1.base_salary, yd2.base_salary),
            "gross_income": compare_metric(yd1.gross_income, yd2.gross_income),
            "annual_net_pay": compare_metric(yd1.annual_net_pay, yd2.annual_net_pay),
            "investable": compare_metric(yd1.investable, yd2.investable),
            "wealth_moderate": compare_metric(yd1.wealth_moderate, yd2.wealth_moderate),
        }

    def get_final_wealth(self) -> dict:
        """Get the final wealth of each trajectory and lifetime totals."""
        fw = self.data.final_wealth
        rows = self.data.years()
        return {
            "final_year": self.data.last_year,
            "final_wealth": {
                "conservative": round(fw.conservative, 2),
                "moderate": round(fw.moderate, 2),
                "aggressive": round(fw.aggressive, 2),
            },
            "lifetime_totals": {
                "gross_income": round(sum(r.gross_income for r in rows), 2),
                "annual_net_pay": round(sum(r.annual_net_pay for r in rows), 2),
                "investable": round(sum(r.investable for r in rows), 2),
            },
        }

    def search_financial_data(self, query: str, year: Optional[int] = None) -> dict:
        """Search for specific metrics based on a query."""
        query_lower = query.lower()

        # Map common terms to YearlyData field names
        term_mapping = {
            "salary": ["base_salary"],
            "base": ["base_salary"],
            "bonus": ["bonus"],
            "rsu": ["rsu_grant"],
            "stock": ["rsu_grant", "stock_wealth_moderate"],
            "gross": ["gross_income"],
            "tax": ["tax_rate"],
            "net": ["annual_net_pay"],
            "take home": ["annual_net_pay"],
            "disposable": ["annual_net_pay"],
            "post-tax": ["post_tax_income"],
            "spent": ["annual_spent"],
            "spending": ["annual_spent"],
            "saving": ["investable_cash", "investable"],
            "investable": ["investable_cash", "investable"],
            "wealth": ["wealth_conservative", "wealth_moderate", "wealth_aggressive"],
            "conservative": ["wealth_conservative"],
            "moderate": ["wealth_moderate"],
            "aggressive": ["wealth_aggressive"],
            "cash": ["investable_cash", "cash_wealth_moderate"],
            "age": ["age"],
        }

        matched_keys = []
        for term, keys in term_mapping.items():
            if term in query_lower:
                matched_keys.extend(k for k in keys if k not in matched_keys)

        if not matched_keys:
            return {
                "query": query,
                "message": "No matching metrics found. Try terms like: salary, bonus, RSU, gross, tax, take home, spending, savings, investable, wealth, conservative, moderate, aggressive, etc."
            }

        def extract(yd: YearlyData) -> dict:
            values = {}
            for key in matched_keys:
                value = getattr(yd, key)
                values[key] = round(value, 2) if isinstance(value, float) else value
            return values

        if year is not None:
            yd = self.data.get_year(year)
            if yd is None:
                return self._missing_year(year)
            return {"year": year, "query": query, "results": extract(yd)}

        return {"query": query, "years": {yd.year: extract(yd) for yd in self.data.years()}}


COMPARISON_METRICS = {
    "final_conservative": ("Final Wealth (Conservative)", "final_wealth", "conservative"),
    "final_moderate": ("Final Wealth (Moderate)", "final_wealth", "moderate"),
    "final_aggressive": ("Final Wealth (Aggressive)", "final_wealth", "aggressive"),
    "lifetime_income": ("Lifetime Gross Income", "lifetime_totals", "gross_income"),
    "lifetime_net_pay": ("Lifetime Disposable Income", "lifetime_totals", "annual_net_pay"),
    "lifetime_investable": ("Lifetime Investable", "lifetime_totals", "investable"),
}


class MultiProgramTools:
    """Every program under input-parameters, each wrapped in WealthProjectorTools.

    Queries name a program explicitly or fall back to the default one.
    """

    def __init__(self, base_path: str, default_program: Optional[str] = None):
        self.base_path = base_path
        self.default_program = default_program
        self.programs: Dict[str, WealthProjectorTools] = {}
        self._discover_programs()

    def _discover_programs(self):
        for name in list_programs(os.path.join(self.base_path, 'input-parameters')):
            try:
                self.programs[name] = WealthProjectorTools(self.base_path, name)
            except (OSError, ValueError) as e:
                print(f"Warning: skipping program '{name}': {e}", file=sys.stderr)
        if self.default_program is None and self.programs:
            self.default_program = next(iter(self.programs))

    def _names(self) -> List[str]:
        return list(self.programs)

    def _get_program(self, program: Optional[str] = None, require_explicit: bool = False) -> WealthProjectorTools:
        """Resolve a program name.

        With require_explicit, omitting the name is an error once more than
        one program is loaded.

        Raises:
            ValueError: if the program is ambiguous or unknown
        """
        if program is None and require_explicit and len(self.programs) > 1:
            raise ValueError(f"Multiple programs available: {self._names()}. Name the program to query.")
        name = program or self.default_program
        try:
            return self.programs[name]
        except KeyError:
            raise ValueError(f"Program '{name}' not found. Available programs: {self._names()}") from None

    def list_programs(self) -> dict:
        info = {
            name: {
                "currency": tools.program.currency,
                "start_year": tools.config.start_year,
                "end_year": tools.config.end_year,
                "base_salary": tools.config.base_salary,
            }
            for name, tools in self.programs.items()
        }
        return {"available_programs": self._names(), "default_program": self.default_program,
                "programs_info": info}

    def reload_programs(self) -> dict:
        """Re-read every spec.json and report which programs appeared or vanished."""
        before = set(self.programs)
        self.programs = {}
        self.default_program = None
        self._discover_programs()
        after = set(self.programs)
        return {
            "status": "success",
            "message": f"Reloaded {len(after)} programs",
            "programs_loaded": self._names(),
            "default_program": self.default_program,
            "changes": {
                "added": sorted(after - before),
                "removed": sorted(before - after),
                "reloaded": sorted(before & after),
            },
        }

    def _call(self, program: Optional[str], method: str, *args) -> dict:
        result = getattr(self._get_program(program, require_explicit=True), method)(*args)
        result["program"] = program or self.default_program
        return result

    def get_program_overview(self, program: Optional[str] = None) -> dict:
        return self._call(program, "get_program_overview")

    def list_available_years(self, program: Optional[str] = None) -> dict:
        return self._call(program, "list_available_years")

    def get_year_summary(self, year: int, program: Optional[str] = None) -> dict:
        return self._call(program, "get_year_summary", year)

    def get_tax_details(self, year: int, program: Optional[str] = None) -> dict:
        return self._call(program, "get_tax_details", year)

    def get_wealth_trajectories(self, year: Optional[int] = None, program: Optional[str] = None) -> dict:
        return self._call(program, "get_wealth_trajectories", year)

    def compare_years(self, year1: int, year2: int, program: Optional[str] = None) -> dict:
        return self._call(program, "compare_years", year1, year2)

    def get_final_wealth(self, program: Optional[str] = None) -> dict:
        return self._call(program, "get_final_wealth")

    def search_financial_data(self, query: str, year: Optional[int] = None, program: Optional[str] = None) -> dict:
        return self._call(program, "search_financial_data", query, year)

    def compute_tax(self, income: float, currency: Optional[str] = None, program: Optional[str] = None) -> dict:
        """Tax on an income under the regime of currency, or of the program's currency."""
        if currency is None:
            currency = self._get_program(program).program.currency
        regime = TaxRegime.from_code(currency)
        result = compute_tax(income, regime)
        return {
            "income": income,
            "currency": currency,
            "tax_regime": regime.value,
            "total_tax": round(result.totalTax, 2),
            "effective_rate": round(result.effectiveRate, 2),
            "marginal_rate": round(result.marginalRate * 100, 2),
            "net_income": round(income - result.totalTax, 2),
        }

    def compare_programs(self, program1: str, program2: str, metrics: Optional[List[str]] = None) -> dict:
        """Compare final wealth and lifetime totals of two programs.

        Args:
            program1: First program name
            program2: Second program name
            metrics: Keys of COMPARISON_METRICS to compare; all of them when omitted
        """
        for name in (program1, program2):
            if name not in self.programs:
                return {"error": f"Program '{name}' not found. Available: {self._names()}"}

        selected = {k: v for k, v in COMPARISON_METRICS.items() if not metrics or k in metrics}
        if not selected:
            return {"error": f"No valid metrics specified. Available metrics: {list(COMPARISON_METRICS)}"}

        pair = ((program1, self.programs[program1]), (program2, self.programs[program2]))
        finals = {name: tools.get_final_wealth() for name, tools in pair}
        comparison: dict = {
            "programs": {
                name: {"currency": tools.program.currency,
                       "horizon": f"{tools.data.first_year}-{tools.data.last_year}"}
                for name, tools in pair
            },
            "metrics": {},
        }
        if pair[0][1].program.currency != pair[1][1].program.currency:
            comparison["warning"] = "Programs use different currencies; amounts are compared as-is."

        tally = {program1: 0, program2: 0, "tie": 0}
        for key, (description, section, field_name) in selected.items():
            first = finals[program1][section][field_name]
            second = finals[program2][section][field_name]
            if first > second:
                better = program1
            elif second > first:
                better = program2
            else:
                better = "tie"
            if first:
                pct = (second - first) / abs(first) * 100
            else:
                pct = 0 if not second else (100 if second > 0 else -100)
            comparison["metrics"][key] = {
                "description": description,
                program1: round(first, 2),
                program2: round(second, 2),
                "difference": round(second - first, 2),
                "percent_difference": round(pct, 1),
                "better": better,
            }
            tally[better] += 1

        if tally[program1] == tally[program2]:
            overall = "tie"
        else:
            overall = program1 if tally[program1] > tally[program2] else program2
        comparison["summary"] = {
            "metrics_compared": len(selected),
            "wins": {program1: tally[program1], program2: tally[program2], "tied": tally["tie"]},
            "overall_better": overall,
        }

        if overall == "tie":
            text = f"Neither program comes out ahead; each is better on {tally[program1]} metrics."
        else:
            other = program2 if overall == program1 else program1
            text = (f"'{overall}' is better on {tally[overall]} of {len(selected)} metrics "
                    f"against {tally[other]} for '{other}'.")
            moderate = comparison["metrics"].get("final_moderate")
            if moderate and moderate["better"] != "tie":
                code = self.programs[moderate["better"]].program.currency
                gap = format_money(abs(moderate["difference"]), code, 0)
                text += (f" '{moderate['better']}' finishes with {gap} "
                         f"more on the moderate trajectory.")
        comparison["recommendation"] = text
        return comparison
