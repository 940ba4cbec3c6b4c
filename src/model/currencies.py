"""Display currencies and money formatting."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class CurrencyConfig:
    code: str
    symbol: str
    locale: str


CURRENCIES: Dict[str, CurrencyConfig] = {
    'USD': CurrencyConfig('USD', '$', 'en-US'),
    'INR': CurrencyConfig('INR', '₹', 'en-IN'),
    'EUR': CurrencyConfig('EUR', '€', 'de-DE'),
    'GBP': CurrencyConfig('GBP', '£', 'en-GB'),
}

DEFAULT_CURRENCY = 'INR'


def get_currency(code: str) -> CurrencyConfig:
    """Look up a currency, falling back to the default for unknown codes."""
    return CURRENCIES.get((code or '').upper(), CURRENCIES[DEFAULT_CURRENCY])


def group_digits(digits: str, locale: str) -> str:
    """Insert thousands separators; en-IN groups in lakhs and crores (12,34,567)."""
    if locale == 'en-IN' and len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        return ','.join([head] + pairs + [tail])
    return f"{int(digits):,}"


def format_money(value: float, code: str = DEFAULT_CURRENCY, decimals: int = 2, compact: bool = False) -> str:
    """Format a value with its currency symbol and the currency's digit grouping.

    Compact mode abbreviates large values (1.2M, 35K), with lakh/crore
    units for INR.
    """
    currency = get_currency(code)
    sign = '-' if value < 0 else ''
    magnitude = abs(value)
    if compact:
        if currency.code == 'INR':
            units = [(1e7, 'Cr'), (1e5, 'L')]
        else:
            units = [(1e9, 'B'), (1e6, 'M'), (1e3, 'K')]
        for threshold, suffix in units:
            if magnitude >= threshold:
                return f"{sign}{currency.symbol}{magnitude / threshold:,.2f}{suffix}"
        decimals = 0
    whole, _, fraction = f"{magnitude:.{decimals}f}".partition('.')
    number = group_digits(whole, currency.locale) + (f".{fraction}" if fraction else '')
    return f"{sign}{currency.symbol}{number}"
