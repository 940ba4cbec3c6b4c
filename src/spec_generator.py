"""Interactive spec.json generator for wealth projections.

Walks the user through currency, horizon, income, savings and return
assumptions and life events, then writes input-parameters/<name>/spec.json.
Answers left blank keep the value shown in brackets.
"""

import os
import json
from datetime import datetime
from typing import Any, Optional

from calc.program_loader import list_programs, load_spec, spec_path_for
from model.SimulationConfig import DEFAULT_SPEC, EventType
from model.currencies import CURRENCIES, DEFAULT_CURRENCY, get_currency

YES = ('y', 'yes')
NO = ('n', 'no')


def _ask(prompt: str, default_label: str = "") -> str:
    suffix = f" [{default_label}]" if default_label else ""
    return input(f"{prompt}{suffix}: ").strip()


def _read_number(prompt: str, parse, default, default_label: str,
                 low=None, high=None, show=str):
    """Ask until the answer parses and lies within [low, high]."""
    while True:
        raw = _ask(prompt, default_label if default is not None else "")
        if raw == "" and default is not None:
            return default
        try:
            result = parse(raw)
        except ValueError:
            print(f"  '{raw}' is not a valid number")
            continue
        if low is not None and result < low:
            print(f"  Value must be at least {show(low)}")
        elif high is not None and result > high:
            print(f"  Value must be at most {show(high)}")
        else:
            return result


def prompt_int(prompt: str, default: Optional[int] = None, min_val: Optional[int] = None, max_val: Optional[int] = None) -> int:
    return _read_number(prompt, int, default, str(default), min_val, max_val)


def prompt_percent(prompt: str, default: Optional[float] = None, max_val: float = 100.0) -> float:
    """Prompt for a percentage and return it as entered (15 means 15%)."""
    label = f"{default:g}%" if default is not None else ""
    return _read_number(f"{prompt} (%)", lambda s: float(s.rstrip('%')), default, label,
                        0.0, max_val, show=lambda v: f"{v:g}%")


def prompt_amount(prompt: str, default: Optional[float] = None, symbol: str = "$", min_val: float = 0) -> float:
    """Prompt for a money amount; a leading currency symbol and separators are ignored."""
    label = f"{symbol}{default:,.2f}" if default is not None else ""
    return _read_number(f"{prompt} ({symbol})", lambda s: float(s.lstrip(symbol).replace(',', '')),
                        default, label, min_val, show=lambda v: f"{symbol}{v:,.2f}")


def prompt_yes_no(prompt: str, default: bool = False) -> bool:
    while True:
        answer = _ask(prompt, "Y/n" if default else "y/N").lower()
        if not answer:
            return default
        if answer in YES or answer in NO:
            return answer in YES
        print("  Answer y or n")


def prompt_string(prompt: str, default: Optional[str] = None) -> str:
    return _ask(prompt, default or "") or (default or "")


def prompt_choice(prompt: str, choices: list[str], default: Optional[str] = None) -> str:
    """Prompt for one of choices; matching ignores case and returns the listed spelling."""
    by_lower = {c.lower(): c for c in choices}
    while True:
        answer = _ask(f"{prompt} ({'/'.join(choices)})", default or "")
        if not answer and default:
            return default
        if answer.lower() in by_lower:
            return by_lower[answer.lower()]
        print(f"  Choose one of: {', '.join(choices)}")


def print_section(title: str) -> None:
    print(f"\n{'=' * 60}\n  {title}\n{'=' * 60}\n")


def load_existing_spec(program_name: str, base_path: str) -> Optional[dict]:
    """Existing spec for a program, or None when it is missing or unreadable."""
    try:
        return load_spec(spec_path_for(program_name, os.path.join(base_path, 'input-parameters')))
    except (OSError, ValueError):
        return None


def get_nested(d: dict, *keys, default=None):
    """Follow keys through nested dictionaries; default when any step is missing."""
    for key in keys:
        d = d.get(key) if isinstance(d, dict) else None
        if d is None:
            return default
    return d


def prompt_life_event(symbol: str, first_year: int, last_year: int, taken_years: set,
                      existing: Optional[dict] = None) -> dict:
    """Prompt for a single life event."""
    ex = existing or {}
    while True:
        year = prompt_int("  Year of the event", default=ex.get('year', first_year),
                          min_val=first_year, max_val=last_year)
        if year in taken_years:
            print(f"  There is already a life event in {year}")
            continue
        break

    event: dict[str, Any] = {'year': year}
    event['type'] = prompt_choice(
        "  Event type",
        [t.value for t in EventType],
        default=ex.get('type', EventType.EXPENSE.value)
    )
    event['description'] = prompt_string("  Description", default=ex.get('description', event['type']))

    if event['type'] == EventType.EXPENSE.value:
        amount_prompt = "  Cost in today's money"
    elif event['type'] == EventType.INCOME_JUMP.value:
        amount_prompt = "  Permanent increase to base salary"
    else:
        amount_prompt = "  Amount received"
    event['amount'] = prompt_amount(amount_prompt, default=ex.get('amount', 0.0), symbol=symbol)

    if prompt_yes_no("  Does the event come with a one-time salary hike?", default='hikePercentage' in ex):
        event['hikePercentage'] = prompt_percent("  Hike for that year", default=ex.get('hikePercentage'),
                                                 max_val=1000.0)
    if prompt_yes_no("  Does the event change the RSU grant for that year?", default='newRsuAmount' in ex):
        event['newRsuAmount'] = prompt_amount("  RSU grant for that year", default=ex.get('newRsuAmount'),
                                              symbol=symbol)
    event['icon'] = ex.get('icon', '')
    return event


def generate_spec(existing_spec: Optional[dict] = None) -> dict:
    """Interactive wizard to generate a spec.json configuration.

    Args:
        existing_spec: Optional existing spec to use for default values
    """
    current_year = datetime.now().year
    ex = existing_spec or {}
    ex_config = ex.get('config', ex)

    def default(key):
        return ex_config.get(key, DEFAULT_SPEC.get(key))

    config: dict[str, Any] = {}

    print_section("Currency")
    print("  The currency selects the tax regime: INR and USD use their income tax")
    print("  slabs, any other currency uses a flat 25% rate.")
    print()
    currency = prompt_choice(
        "Currency",
        list(CURRENCIES.keys()),
        default=ex.get('currency', DEFAULT_CURRENCY)
    )
    symbol = get_currency(currency).symbol

    print_section("Planning Horizon")

    config['initialAge'] = prompt_int("Your current age", default=default('initialAge'), min_val=0, max_val=120)
    config['startYear'] = prompt_int(
        "First year of the projection",
        default=ex_config.get('startYear', current_year),
        min_val=1900,
        max_val=2200
    )
    config['duration'] = prompt_int("Number of years to project", default=default('duration'), min_val=1, max_val=100)

    print_section("Income")

    config['baseSalary'] = prompt_amount("Annual base salary", default=default('baseSalary'), symbol=symbol)
    config['bonusPercent'] = prompt_percent("Annual bonus as percentage of base salary", default=default('bonusPercent'))
    config['hikePercent'] = prompt_percent(
        "Expected annual salary hike",
        default=ex_config.get('hikePercent', ex_config.get('baseHike', DEFAULT_SPEC['hikePercent']))
    )
    config['rsu'] = prompt_amount("Annual RSU grant value", default=default('rsu'), symbol=symbol)

    print_section("Savings and Returns")

    config['initialAssets'] = prompt_amount("Current invested assets", default=default('initialAssets'), symbol=symbol)
    config['savingsRate'] = prompt_percent("Share of post-tax cash pay you save", default=default('savingsRate'))
    config['inflation'] = prompt_percent("Expected inflation (applied to life event expenses)", default=default('inflation'))
    config['returnConservative'] = prompt_percent("Conservative annual return", default=default('returnConservative'))
    config['returnModerate'] = prompt_percent("Moderate annual return", default=default('returnModerate'))
    config['returnAggressive'] = prompt_percent("Aggressive annual return", default=default('returnAggressive'))

    print_section("Life Events")

    print("  Life events are one-time changes: an expense (inflated to its year),")
    print("  an income jump (permanent addition to base salary) or a windfall.")
    print("  At most one event per year.")
    print()

    last_year = config['startYear'] + config['duration']
    events = []
    taken_years = set()
    for existing in ex_config.get('lifeEvents', []):
        label = f"{existing.get('year')}: {existing.get('description', existing.get('type'))}"
        if prompt_yes_no(f"Keep life event {label}?", default=True):
            event = prompt_life_event(symbol, config['startYear'], last_year, taken_years, existing)
            events.append(event)
            taken_years.add(event['year'])

    while prompt_yes_no("Add a life event?", default=False):
        event = prompt_life_event(symbol, config['startYear'], last_year, taken_years)
        events.append(event)
        taken_years.add(event['year'])

    config['lifeEvents'] = sorted(events, key=lambda e: e['year'])

    spec: dict[str, Any] = {'currency': currency, 'config': config}
    overrides = get_nested(ex, 'overrides')
    if overrides:
        spec['overrides'] = overrides
    return spec


def save_spec(spec: dict, program_name: str, base_path: str) -> str:
    """Write input-parameters/<program_name>/spec.json under base_path.

    Returns:
        Path to the saved file
    """
    spec_path = spec_path_for(program_name, os.path.join(base_path, 'input-parameters'))
    os.makedirs(os.path.dirname(spec_path), exist_ok=True)
    with open(spec_path, 'w') as f:
        json.dump(spec, f, indent=4)
    return spec_path


def list_existing_programs(base_path: str) -> list[str]:
    return list_programs(os.path.join(base_path, 'input-parameters'))


def run_generator() -> Optional[str]:
    """Run the wizard and return the saved program name, or None if cancelled."""
    base_path = os.path.normpath(os.path.join(os.path.dirname(__file__), '..'))
    try:
        print()
        print("+" + "-" * 58 + "+")
        print(f"|{'Wealth Projector - Program Wizard':^58}|")
        print("+" + "-" * 58 + "+")
        print()

        existing_programs = list_existing_programs(base_path)
        if existing_programs:
            print(f"Existing programs: {', '.join(existing_programs)}")
            print("Give an existing name to edit it, or a new name to create one.")
        else:
            print("No programs yet. Choose a name for the first one.")
        print()

        program_name = prompt_string("Program name", default="myplan")
        # Folder-safe name
        program_name = "".join(c if c.isalnum() or c in '-_' else '_' for c in program_name)

        existing_spec = load_existing_spec(program_name, base_path)
        print()
        if existing_spec:
            print(f"Editing '{program_name}'; current values are the defaults.")
        else:
            print(f"Creating '{program_name}'.")

        spec_path = save_spec(generate_spec(existing_spec), program_name, base_path)

        print()
        print(f"Saved {spec_path}")
        print()
        print("Run it with:")
        print(f"    python src/Program.py {program_name}")
        print(f"    python src/Program.py {program_name} --mode Ledger")
        print(f"    python src/shell.py {program_name}")
        print()
        return program_name

    except KeyboardInterrupt:
        print("\n\nCancelled; nothing was saved.")
        return None


if __name__ == "__main__":
    run_generator()
