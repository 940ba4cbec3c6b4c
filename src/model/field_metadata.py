"""Labels for YearlyData fields.

The short name is the column header in tables and the name accepted by the
shell's 'get' command; the description is shown by 'fields'.
"""

import textwrap
from dataclasses import dataclass
from typing import Dict


@dataclass
class FieldInfo:
    short_name: str
    description: str


FIELD_METADATA: Dict[str, FieldInfo] = {
    # Year Info
    "year": FieldInfo("Year", "Calendar year"),
    "age": FieldInfo("Age", "Age during the year"),
    "is_historical": FieldInfo("Historical", "True if the row was imported from a past ledger"),
    "event": FieldInfo("Life Event", "Life event matched to the year, if any"),

    # Income
    "base_salary": FieldInfo("Base Salary", "Annual base salary after hikes, jumps and overrides"),
    "bonus": FieldInfo("Bonus", "Annual cash bonus"),
    "rsu_grant": FieldInfo("RSU Grant", "Value of RSUs granted during the year"),
    "gross_income": FieldInfo("Gross Income", "Base salary + bonus + RSU grant"),

    # Taxes and Take Home
    "annual_net_pay": FieldInfo("Disposable Income", "Base salary + bonus after tax"),
    "tax_rate": FieldInfo("Eff Rate", "Effective tax rate on cash pay (percent)"),
    "post_tax_income": FieldInfo("Post-Tax Income", "Net cash pay + post-tax RSU value"),

    # Savings
    "annual_spent": FieldInfo("Spent", "Portion of net cash pay used for living expenses"),
    "investable_cash": FieldInfo("Investable Cash", "Saved cash after life event adjustments"),
    "investable": FieldInfo("Total Investable", "Investable cash + post-tax RSU value"),

    # Wealth
    "wealth_conservative": FieldInfo("Conservative", "Cumulative wealth on the conservative trajectory"),
    "wealth_moderate": FieldInfo("Moderate", "Cumulative wealth on the moderate trajectory"),
    "wealth_aggressive": FieldInfo("Aggressive", "Cumulative wealth on the aggressive trajectory"),
    "cash_wealth_moderate": FieldInfo("Cash (Mod)", "Cash portion of moderate wealth"),
    "stock_wealth_moderate": FieldInfo("Stock (Mod)", "RSU-funded portion of moderate wealth"),
}

# Fields grouped for display by the shell 'fields' command
FIELD_CATEGORIES: Dict[str, list] = {
    "Year Info": ["year", "age", "is_historical", "event"],
    "Income": ["base_salary", "bonus", "rsu_grant", "gross_income"],
    "Taxes": ["annual_net_pay", "tax_rate", "post_tax_income"],
    "Savings": ["annual_spent", "investable_cash", "investable"],
    "Wealth": ["wealth_conservative", "wealth_moderate", "wealth_aggressive",
               "cash_wealth_moderate", "stock_wealth_moderate"],
}


def get_field_info(field_name: str) -> FieldInfo | None:
    return FIELD_METADATA.get(field_name)


def get_short_name(field_name: str) -> str:
    """Column header for a field; unknown fields keep their attribute name."""
    info = get_field_info(field_name)
    return info.short_name if info is not None else field_name


def get_description(field_name: str) -> str:
    info = get_field_info(field_name)
    return info.description if info is not None else ""


def wrap_header(text: str, max_width: int) -> list[str]:
    """Split a header on spaces into lines no wider than max_width.

    A single word longer than max_width stays whole on its own line.
    """
    return textwrap.wrap(text, max_width, break_long_words=False) or [text]
