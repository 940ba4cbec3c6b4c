"""Renderer classes for displaying wealth projection results.

This module contains renderer classes that handle the presentation logic
for different views of a projection. Each renderer takes the unified
ProjectionData structure and extracts the fields it needs.
"""

from abc import ABC, abstractmethod
from typing import List

from model.ProjectionData import ProjectionData
from model.currencies import DEFAULT_CURRENCY, format_money, get_currency
from model.field_metadata import get_short_name, wrap_header


def format_multiline_headers(columns: List[tuple], year_width: int = 6) -> tuple[List[str], str]:
    """Format column headers with multi-line wrapping support.

    Args:
        columns: List of (header_text, width) tuples for each column
        year_width: Width of the Year column (default 6)

    Returns:
        Tuple of (list of header lines, separator line)
    """
    wrapped_headers = []
    for header, width in columns:
        lines = wrap_header(header, width)
        wrapped_headers.append((lines, width))

    max_lines = max(len(lines) for lines, _ in wrapped_headers) if wrapped_headers else 1

    # Pad all headers to have the same number of lines (pad at top)
    for lines, width in wrapped_headers:
        while len(lines) < max_lines:
            lines.insert(0, "")

    header_lines = []
    for line_idx in range(max_lines):
        if line_idx == max_lines - 1:
            # Last line includes "Year" label
            header_line = f"  {'Year':<{year_width}}"
        else:
            header_line = f"  {'':<{year_width}}"

        for lines, width in wrapped_headers:
            header_line += f" {lines[line_idx]:>{width}}"
        header_lines.append(header_line)

    sep_line = f"  {'-' * year_width}"
    for _, width in wrapped_headers:
        sep_line += f" {'-' * width}"

    return header_lines, sep_line


def parse_year_range(year_range: str, data: ProjectionData) -> tuple:
    """Parse a year range string into start and end years.

    Args:
        year_range: String in format 'startYear-endYear', 'startYear-', or '-endYear'
        data: ProjectionData to get default years from

    Returns:
        Tuple of (start_year, end_year)
    """
    if '-' not in year_range:
        year = int(year_range)
        return (year, year)

    parts = year_range.split('-')
    start_year = int(parts[0]) if parts[0] else data.first_year
    end_year = int(parts[1]) if parts[1] else data.last_year
    return (start_year, end_year)


class BaseRenderer(ABC):
    """Abstract base class for all renderers."""

    currency = DEFAULT_CURRENCY

    def money(self, value: float, width: int = 0, decimals: int = 0) -> str:
        return f"{format_money(value, self.currency, decimals):>{width}}"

    @abstractmethod
    def render(self, data: ProjectionData) -> None:
        """Render the data to output.

        Args:
            data: The ProjectionData containing all yearly calculations
        """
        pass


class YearDetailsRenderer(BaseRenderer):
    """Renderer for the income, tax and savings breakdown of one year."""

    def __init__(self, year: int = None, currency: str = DEFAULT_CURRENCY):
        """Initialize with the year to display.

        Args:
            year: Year to display (defaults to the first projected year)
            currency: Currency code used for display
        """
        self.year = year
        self.currency = currency

    def render(self, data: ProjectionData) -> None:
        year = self.year if self.year is not None else data.first_year
        yd = data.get_year(year)
        if not yd:
            print(f"No data available for year {year}")
            return

        print()
        print("=" * 60)
        print(f"{'YEAR SUMMARY FOR ' + str(year):^60}")
        print("=" * 60)
        print(f"  {'Age:':<40} {yd.age:>15}")
        if yd.is_historical:
            print(f"  {'Source:':<40} {'imported history':>15}")
        if yd.event:
            print(f"  {'Life Event:':<40} {yd.event.description:>15}")

        print()
        print("-" * 60)
        print("INCOME")
        print("-" * 60)
        print(f"  {'Base Salary:':<40} {self.money(yd.base_salary, 15, 2)}")
        print(f"  {'Bonus:':<40} {self.money(yd.bonus, 15, 2)}")
        print(f"  {'RSU Grant:':<40} {self.money(yd.rsu_grant, 15, 2)}")
        print(f"  {'-' * 40}")
        print(f"  {'Gross Income:':<40} {self.money(yd.gross_income, 15, 2)}")

        print()
        print("-" * 60)
        print("TAXES AND TAKE HOME")
        print("-" * 60)
        print(f"  {'Disposable Income (cash, post-tax):':<40} {self.money(yd.annual_net_pay, 15, 2)}")
        print(f"  {'Effective Tax Rate (cash):':<40} {yd.tax_rate:>14.2f}%")
        print(f"  {'Post-Tax RSU:':<40} {self.money(yd.post_tax_income - yd.annual_net_pay, 15, 2)}")
        print(f"  {'-' * 40}")
        print(f"  {'Post-Tax Income:':<40} {self.money(yd.post_tax_income, 15, 2)}")

        print()
        print("-" * 60)
        print("SAVINGS")
        print("-" * 60)
        print(f"  {'Spent:':<40} {self.money(yd.annual_spent, 15, 2)}")
        print(f"  {'Investable Cash:':<40} {self.money(yd.investable_cash, 15, 2)}")
        print(f"  {'Total Investable:':<40} {self.money(yd.investable, 15, 2)}")

        print()
        print("=" * 60)
        print("WEALTH AT YEAR END")
        print("=" * 60)
        print(f"  {'Conservative:':<40} {self.money(yd.wealth_conservative, 15, 2)}")
        print(f"  {'Moderate:':<40} {self.money(yd.wealth_moderate, 15, 2)}")
        print(f"  {'Aggressive:':<40} {self.money(yd.wealth_aggressive, 15, 2)}")
        print("=" * 60)
        print()


class LedgerRenderer(BaseRenderer):
    """Renderer for the yearly income and savings ledger table."""

    def __init__(self, start_year: int = None, end_year: int = None, currency: str = DEFAULT_CURRENCY):
        """Initialize with optional year range.

        Args:
            start_year: First year to display (defaults to the ledger's first year)
            end_year: Last year to display (defaults to the ledger's last year)
            currency: Currency code used for display
        """
        self.start_year = start_year
        self.end_year = end_year
        self.currency = currency

    def render(self, data: ProjectionData) -> None:
        width = 124
        print()
        print("=" * width)
        print(f"{'ANNUAL INCOME AND SAVINGS LEDGER (' + get_currency(self.currency).code + ')':^{width}}")
        print("=" * width)
        print()

        columns = [
            (get_short_name("age"), 4),
            (get_short_name("base_salary"), 15),
            (get_short_name("bonus"), 14),
            (get_short_name("rsu_grant"), 14),
            (get_short_name("tax_rate"), 8),
            (get_short_name("annual_net_pay"), 15),
            (get_short_name("investable_cash"), 15),
            (get_short_name("wealth_moderate"), 17),
            (get_short_name("event"), 12),
        ]

        header_lines, sep_line = format_multiline_headers(columns)
        for line in header_lines:
            print(line)
        print(sep_line)

        start = self.start_year if self.start_year is not None else data.first_year
        end = self.end_year if self.end_year is not None else data.last_year

        total_net = 0.0
        total_investable = 0.0
        for yd in data.years():
            if yd.year < start or yd.year > end:
                continue
            marker = '*' if yd.is_historical else ' '
            event = yd.event.description[:12] if yd.event else '-'
            print(f"  {str(yd.year) + marker:<6} {yd.age:>4} {self.money(yd.base_salary, 15)} "
                  f"{self.money(yd.bonus, 14)} {self.money(yd.rsu_grant, 14)} {yd.tax_rate:>7.1f}% "
                  f"{self.money(yd.annual_net_pay, 15)} {self.money(yd.investable_cash, 15)} "
                  f"{self.money(yd.wealth_moderate, 17)} {event:>12}")
            total_net += yd.annual_net_pay
            total_investable += yd.investable_cash

        print(sep_line)
        print(f"  {'TOTAL':<6} {'':>4} {'':>15} {'':>14} {'':>14} {'':>8} "
              f"{self.money(total_net, 15)} {self.money(total_investable, 15)}")
        if data.historical_years():
            print()
            print("  * imported history")
        print()
        print("=" * width)
        print()


class WealthRenderer(BaseRenderer):
    """Renderer for the three wealth trajectories."""

    def __init__(self, start_year: int = None, end_year: int = None, currency: str = DEFAULT_CURRENCY):
        self.start_year = start_year
        self.end_year = end_year
        self.currency = currency

    def render(self, data: ProjectionData) -> None:
        width = 110
        print()
        print("=" * width)
        print(f"{'WEALTH TRAJECTORIES':^{width}}")
        print("=" * width)
        print()

        columns = [
            (get_short_name("investable"), 16),
            (get_short_name("wealth_conservative"), 18),
            (get_short_name("wealth_moderate"), 18),
            (get_short_name("wealth_aggressive"), 18),
            (get_short_name("cash_wealth_moderate"), 16),
            (get_short_name("stock_wealth_moderate"), 16),
        ]

        header_lines, sep_line = format_multiline_headers(columns)
        for line in header_lines:
            print(line)
        print(sep_line)

        start = self.start_year if self.start_year is not None else data.first_year
        end = self.end_year if self.end_year is not None else data.last_year

        for yd in data.years():
            if yd.year < start or yd.year > end:
                continue
            print(f"  {yd.year:<6} {self.money(yd.investable, 16)} {self.money(yd.wealth_conservative, 18)} "
                  f"{self.money(yd.wealth_moderate, 18)} {self.money(yd.wealth_aggressive, 18)} "
                  f"{self.money(yd.cash_wealth_moderate, 16)} {self.money(yd.stock_wealth_moderate, 16)}")

        fw = data.final_wealth
        print()
        print("=" * width)
        print(f"{'FINAL WEALTH':^{width}}")
        print("=" * width)
        for label, value in (('Conservative', fw.conservative), ('Moderate', fw.moderate),
                             ('Aggressive', fw.aggressive)):
            compact = format_money(value, self.currency, compact=True)
            print(f"  {label + ':':<40} {self.money(value, 20, 2)}  ({compact})")
        print("=" * width)
        print()


class EventsRenderer(BaseRenderer):
    """Renderer listing the years that matched a life event and their effect."""

    def __init__(self, start_year: int = None, end_year: int = None, currency: str = DEFAULT_CURRENCY):
        self.start_year = start_year
        self.end_year = end_year
        self.currency = currency

    def render(self, data: ProjectionData) -> None:
        print()
        print("=" * 80)
        print(f"{'LIFE EVENTS':^80}")
        print("=" * 80)

        start = self.start_year if self.start_year is not None else data.first_year
        end = self.end_year if self.end_year is not None else data.last_year
        rows = [yd for yd in data.years() if yd.event is not None and start <= yd.year <= end]
        if not rows:
            print("  No life events in range.")
        for yd in rows:
            e = yd.event
            details = [e.type.value, format_money(e.amount, self.currency, 0)]
            if e.hike_percentage is not None:
                details.append(f"hike {e.hike_percentage:g}%")
            if e.new_rsu_amount is not None:
                details.append(f"RSU {format_money(e.new_rsu_amount, self.currency, 0)}")
            print(f"  {yd.year:<6} {e.description:<20} {', '.join(details)}")
        print("=" * 80)
        print()


# Registry mapping mode names to renderer classes
RENDERER_REGISTRY = {
    'YearDetails': YearDetailsRenderer,
    'Ledger': LedgerRenderer,
    'Wealth': WealthRenderer,
    'Events': EventsRenderer,
}
