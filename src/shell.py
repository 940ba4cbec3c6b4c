#!/usr/bin/env python3
"""Interactive command shell for querying and adjusting wealth projections.

This module provides an interactive shell that loads a program at startup
and allows querying any field(s) from the yearly ledger across a
specified date range, overriding individual years, editing life events
and exporting the result.

Usage:
    python src/shell.py [program_name]

Commands:
    get <fields> [year_or_range]       - Query fields from yearly data
    fields                             - List all available fields
    years                              - Show available year range
    summary                            - Show final wealth and totals
    render [program] <mode> [range]    - Render a report
    tax <income> [currency]            - Compute tax on an income
    override <year> <field> <value>    - Override base, bonus or rsu for a year
    event list|add|remove              - Edit life events
    reset [overrides|history|all]      - Discard session changes
    export [path]                      - Write a ZIP export
    load <program_name|file>           - Load a program or import a file
    generate                           - Create or update a program
    help                               - Show help message
    exit/quit                          - Exit the shell

Examples:
    > get wealth_moderate
    > get base_salary, bonus 2028-
    > override 2028 base 1500000
    > event add 2030 windfall 500000 Inheritance
    > load exports/WealthSim_Export_2026-01-09.zip
"""

import sys
import os
import cmd
import readline
from dataclasses import fields as dataclass_fields

# Tab completion; libedit (macOS) and GNU readline bind differently
try:
    if 'libedit' in (readline.__doc__ or ''):
        readline.parse_and_bind("bind ^I rl_complete")
    else:
        readline.parse_and_bind("tab: complete")
except AttributeError:
    pass

sys.path.insert(0, os.path.dirname(__file__))

from calc.program_loader import Program, load_program, list_programs
from model.ProjectionData import ProjectionData, YearlyData
from model.SimulationConfig import (
    EventType,
    LifeEvent,
    DEFAULT_SPEC,
    OVERRIDE_FIELDS,
    SimulationConfig,
    set_override,
)
from model.currencies import DEFAULT_CURRENCY, format_money
from model.field_metadata import FIELD_CATEGORIES, get_field_info, get_short_name, get_description
from tax.regimes import TaxRegime, compute_tax
from render.export_handler import apply_import, export_zip, import_file
from spec_generator import run_generator
from render.renderers import RENDERER_REGISTRY, YearDetailsRenderer, parse_year_range

IMPORT_EXTENSIONS = ('.zip', '.json', '.csv')

# Fields that are not meaningful to add up across years
NON_SUMMABLE_FIELDS = {
    'year', 'age', 'tax_rate', 'event', 'is_historical',
    'wealth_conservative', 'wealth_moderate', 'wealth_aggressive',
    'cash_wealth_moderate', 'stock_wealth_moderate',
}


def yearly_field_names() -> list:
    return [f.name for f in dataclass_fields(YearlyData)]


def format_value(value, currency: str = DEFAULT_CURRENCY) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    elif isinstance(value, LifeEvent):
        return value.description or value.type.value
    elif isinstance(value, float):
        return format_money(value, currency)
    else:
        return str(value)


def format_field(field_name: str, value, currency: str = DEFAULT_CURRENCY) -> str:
    if field_name == 'tax_rate':
        return f"{value:.2f}%"
    return format_value(value, currency)


class WealthShell(cmd.Cmd):
    """Interactive shell for querying wealth projection data."""

    intro = """
Wealth Projection Interactive Shell
===================================
Type 'help' for available commands.
Type 'fields' to see available data fields.
Type 'exit' or 'quit' to exit.
"""
    prompt = '> '

    def __init__(self, program: Program = None, input_dir: str = None):
        super().__init__()
        self.program = program
        self.input_dir = input_dir
        self.data: ProjectionData = program.calculate() if program else None
        self.available_fields = yearly_field_names()
        # Loaded programs by name, for rendering without switching
        self.loaded_programs: dict[str, Program] = {}
        if program:
            self.loaded_programs[program.name] = program
        self._update_intro()

    @property
    def currency(self) -> str:
        return self.program.currency if self.program else DEFAULT_CURRENCY

    def preloop(self):
        try:
            readline.set_completer_delims(" \t\n,")
        except AttributeError:
            pass

    def _update_intro(self):
        """Update the intro message based on current state."""
        if self.program and self.data:
            self.intro = f"""
Wealth Projection Interactive Shell
===================================
Program: {self.program.name}
Currency: {self.program.currency}
Years: {self.data.first_year} - {self.data.last_year}

Type 'help' for available commands.
Type 'fields' to see available data fields.
Type 'exit' or 'quit' to exit.
"""
        else:
            self.intro = """
Wealth Projection Interactive Shell
===================================
No program loaded. Use 'load <program_name>' or 'generate' to get started.

Type 'help' for available commands.
Type 'exit' or 'quit' to exit.
"""

    def _require_program(self) -> bool:
        """Check if a program is loaded. Returns True if loaded, False otherwise."""
        if self.program is None:
            print("No program loaded. Use 'load <program_name>' or 'generate' first.")
            return False
        return True

    def _recalculate(self):
        self.data = self.program.calculate()
        self.loaded_programs[self.program.name] = self.program

    def _split_get_args(self, arg: str):
        """Split 'get' arguments into field names and an optional (first, last) year range."""
        words = arg.split()
        year_range = None
        last = words[-1]
        if any(ch.isdigit() for ch in last) and set(last) <= set('0123456789-'):
            try:
                year_range = parse_year_range(last, self.data)
                words = words[:-1]
            except ValueError:
                pass
        names = [name.strip() for name in ' '.join(words).split(',') if name.strip()]
        return names, year_range

    def do_get(self, arg: str):
        """Query field(s) from yearly data.

        Usage: get <fields> [year_or_range]

        Arguments:
            fields        - Comma-separated list of field names
            year_or_range - Optional: single year (2026) or range (2026-2030)
                            If range end is omitted (2026-), runs to the last year

        Examples:
            get wealth_moderate
            get base_salary, bonus
            get investable_cash 2026-2030
            get base_salary, bonus 2028-
        """
        if not self._require_program():
            return
        if not arg.strip():
            print("Error: Please specify at least one field, e.g. 'get wealth_moderate 2026-2030'")
            return

        names, year_range = self._split_get_args(arg)
        if not names:
            print("Error: No valid field names provided.")
            return
        unknown = [name for name in names if name not in self.available_fields]
        if unknown:
            print(f"Error: Unknown field(s): {', '.join(unknown)}. See 'fields' for the list.")
            return

        first, last = year_range or (self.data.first_year, self.data.last_year)
        if first > last:
            print(f"Error: First year ({first}) cannot be greater than last year ({last})")
            return
        if first < self.data.first_year or last > self.data.last_year:
            print(f"Warning: only {self.data.first_year}-{self.data.last_year} are projected")

        summable = [name for name in names if name not in NON_SUMMABLE_FIELDS]
        totals = dict.fromkeys(summable, 0.0)
        table = [["Year"] + [get_short_name(name) for name in names]]
        for yd in self.data.years():
            if not first <= yd.year <= last:
                continue
            table.append([f"{yd.year}{'*' if yd.is_historical else ''}"]
                         + [format_field(name, getattr(yd, name), self.currency) for name in names])
            for name in summable:
                totals[name] += getattr(yd, name)

        if len(table) == 1:
            print(f"No data available for years {first}-{last}")
            return
        year_count = len(table) - 1
        if year_count > 1:
            table.append(["Total"] + [format_value(totals[name], self.currency) if name in totals else "-"
                                      for name in names])

        widths = [max(6, *(len(row[i]) for row in table)) for i in range(len(table[0]))]
        lines = ["  ".join(cell.rjust(w) for cell, w in zip(row, widths)) for row in table]
        rule = "-" * len(lines[0])
        print()
        print(lines[0])
        print(rule)
        for line in lines[1:1 + year_count]:
            print(line)
        if year_count > 1:
            print(rule)
            print(lines[-1])
        print()

    def do_fields(self, arg: str):
        """List all available fields that can be queried.

        Usage: fields [field_name]

        If a field name is provided, shows detailed info for that field.
        Otherwise, shows all fields grouped by category.
        """
        if arg.strip():
            field_name = arg.strip()
            if field_name not in self.available_fields:
                print(f"Error: Unknown field '{field_name}'")
                print("Use 'fields' without arguments to see all available fields.")
                return

            info = get_field_info(field_name)
            print(f"\n{field_name}:")
            if info:
                print(f"  Short name: {info.short_name}")
                print(f"  Description: {info.description}")
            else:
                print("  No metadata available")
            print()
            return

        print("\nAvailable fields in YearlyData:")
        print("=" * 70)

        for category, fields in FIELD_CATEGORIES.items():
            print(f"\n{category}:")
            for field in fields:
                if field in self.available_fields:
                    short_name = get_short_name(field)
                    description = get_description(field)
                    print(f"  {field:<24} [{short_name:<17}] {description}")
        print()

    def complete_fields(self, text, line, begidx, endidx):
        """Tab completion for the fields command (case-insensitive substring match)."""
        if not text:
            return self.available_fields
        text_lower = text.lower()
        return [f for f in self.available_fields if text_lower in f.lower()]

    def do_years(self, arg: str):
        """Show the available year range."""
        if not self._require_program():
            return

        print(f"\nProjection Year Range:")
        print(f"  First year: {self.data.first_year}")
        print(f"  Last year: {self.data.last_year}")
        history = sorted(self.data.historical_years())
        if history:
            print(f"\nHistorical years (imported):")
            print(f"  {history[0]} - {history[-1]} ({len(history)} years)")
        projected = sorted(self.data.projected_years())
        print(f"\nProjected years:")
        if projected:
            print(f"  {projected[0]} - {projected[-1]} ({len(projected)} years)")
        else:
            print("  None")
        events = sorted(self.data.event_years())
        if events:
            print(f"\nYears with life events: {', '.join(str(y) for y in events)}")
        print()

    def do_summary(self, arg: str):
        """Show final wealth and lifetime totals."""
        if not self._require_program():
            return

        rows = self.data.years()
        fw = self.data.final_wealth
        print(f"\nSummary for '{self.program.name}' ({self.program.currency}):")
        print("=" * 50)
        print(f"Total Gross Income:      {format_value(sum(r.gross_income for r in rows), self.currency)}")
        print(f"Total Disposable Income: {format_value(sum(r.annual_net_pay for r in rows), self.currency)}")
        print(f"Total Investable:        {format_value(sum(r.investable for r in rows), self.currency)}")
        print()
        print("Final Wealth:")
        for label, value in (('Conservative', fw.conservative), ('Moderate', fw.moderate),
                             ('Aggressive', fw.aggressive)):
            compact = format_money(value, self.currency, compact=True)
            print(f"  {label + ':':<22} {format_value(value, self.currency)} ({compact})")
        print()
        if self.program.overrides:
            print(f"Overridden years: {', '.join(str(y) for y in sorted(self.program.overrides))}")
        if self.program.history:
            print(f"History rows: {len(self.program.history)}")
        print()

    def do_render(self, arg: str):
        """Render projection data using different output formats.

        Usage: render [program] <mode> [year_or_range]

        Available modes:
            YearDetails  - Income, tax and savings for one year (requires year)
            Ledger       - Year-by-year income and savings
            Wealth       - Wealth trajectories and final wealth
            Events       - Life events in the projection

        Examples:
            render                      - List available modes
            render Ledger               - Full ledger for the active program
            render myplan Wealth        - Wealth from loaded program 'myplan'
            render Ledger 2026-2030     - Ledger for 2026-2030
            render YearDetails 2028     - Breakdown for 2028
        """
        parts = arg.strip().split()

        target = self.program
        if parts and parts[0] in self.loaded_programs:
            target = self.loaded_programs[parts[0]]
            parts = parts[1:]

        if not parts:
            print("\nAvailable render modes:")
            print("=" * 40)
            for mode in RENDERER_REGISTRY.keys():
                print(f"  - {mode}")
            print("\nUsage: render [program] <mode> [year_or_range]")
            if self.loaded_programs:
                print("\nLoaded programs:")
                for name in self.loaded_programs:
                    active = " (active)" if self.program and name == self.program.name else ""
                    print(f"  - {name}{active}")
            print()
            return

        if target is None:
            print("No program loaded. Use 'load <program_name>' first.")
            return

        matched_mode = next((m for m in RENDERER_REGISTRY if m.lower() == parts[0].lower()), None)
        if matched_mode is None:
            print(f"Error: Unknown render mode '{parts[0]}'")
            print(f"Available modes: {', '.join(RENDERER_REGISTRY.keys())}")
            return

        data = self.data if target is self.program else target.calculate()

        if matched_mode == 'YearDetails':
            if len(parts) < 2:
                print("Error: YearDetails requires a year argument.")
                print(f"Example: render YearDetails {data.first_year}")
                return
            try:
                year = int(parts[1])
            except ValueError:
                print(f"Error: Invalid year '{parts[1]}'")
                return
            if year < data.first_year or year > data.last_year:
                print(f"Error: Year must be between {data.first_year} and {data.last_year}")
                return
            renderer = YearDetailsRenderer(year, currency=target.currency)
        else:
            start_year = end_year = None
            if len(parts) >= 2:
                try:
                    start_year, end_year = parse_year_range(parts[1], data)
                except ValueError:
                    print(f"Error: Invalid year or range '{parts[1]}'")
                    return
                if start_year > end_year:
                    print(f"Error: Start year ({start_year}) cannot be greater than end year ({end_year})")
                    return
                if start_year < data.first_year or end_year > data.last_year:
                    print(f"Warning: Year range extends beyond projection data ({data.first_year}-{data.last_year})")
            renderer = RENDERER_REGISTRY[matched_mode](start_year, end_year, currency=target.currency)

        renderer.render(data)

    def complete_render(self, text, line, begidx, endidx):
        """Tab completion for the render command."""
        completions = list(self.loaded_programs.keys()) + list(RENDERER_REGISTRY.keys())
        if not text:
            return completions
        text_lower = text.lower()
        return [c for c in completions if text_lower in c.lower()]

    def do_tax(self, arg: str):
        """Compute tax on an annual income.

        Usage: tax <income> [currency]

        The currency selects the regime (INR, USD or the flat fallback) and
        defaults to the active program's currency.

        Examples:
            tax 1500000
            tax 120000 USD
        """
        parts = arg.strip().split()
        if not parts:
            print("Usage: tax <income> [currency]")
            return
        try:
            income = float(parts[0].replace(',', ''))
        except ValueError:
            print(f"Error: Invalid income '{parts[0]}'")
            return
        code = parts[1].upper() if len(parts) > 1 else self.currency
        regime = TaxRegime.from_code(code)
        result = compute_tax(income, regime)
        print()
        print(f"  Regime:          {regime.value}")
        print(f"  Income:          {format_money(income, code)}")
        print(f"  Total Tax:       {format_money(result.totalTax, code)}")
        print(f"  Effective Rate:  {result.effectiveRate:.2f}%")
        print(f"  Marginal Rate:   {result.marginalRate * 100:.2f}%")
        print()

    def do_override(self, arg: str):
        """Override base salary, bonus or RSU grant for one year.

        Usage: override <year> <base|bonus|rsu> <value|clear>
               override list

        A base override becomes the starting point for later hikes.

        Examples:
            override 2028 base 1500000
            override 2029 rsu 0
            override 2028 base clear
        """
        if not self._require_program():
            return
        parts = arg.strip().split()
        if not parts or parts[0] == 'list':
            if not self.program.overrides:
                print("No overrides.")
                return
            for year in sorted(self.program.overrides):
                values = ", ".join(f"{k}={format_value(v, self.currency)}"
                                   for k, v in self.program.overrides[year].to_spec().items())
                print(f"  {year}: {values}")
            return
        if len(parts) != 3:
            print("Usage: override <year> <base|bonus|rsu> <value|clear>")
            return

        try:
            year = int(parts[0])
        except ValueError:
            print(f"Error: Invalid year '{parts[0]}'")
            return
        field_name = parts[1].lower()
        if parts[2].lower() == 'clear':
            value = None
        else:
            try:
                value = float(parts[2].replace(',', ''))
            except ValueError:
                print(f"Error: Invalid value '{parts[2]}'")
                return

        if year < self.program.config.start_year or year > self.program.config.end_year:
            print(f"Warning: {year} is outside the projection ({self.program.config.start_year}-{self.program.config.end_year})")

        try:
            overrides = set_override(self.program.overrides, year, field_name, value)
        except ValueError as e:
            print(f"Error: {e}")
            return
        if overrides[year].is_empty():
            del overrides[year]
        self.program.overrides = overrides
        self._recalculate()
        print(f"Final moderate wealth: {format_value(self.data.final_wealth.moderate, self.currency)}")

    def complete_override(self, text, line, begidx, endidx):
        return [f for f in OVERRIDE_FIELDS + ('clear', 'list') if f.startswith(text)]

    def do_event(self, arg: str):
        """List, add or remove life events.

        Usage: event list
               event add <year> <expense|income_jump|windfall> <amount> [description]
               event remove <year>

        Examples:
            event add 2030 expense 2000000 Wedding
            event add 2031 income_jump 300000 Promotion
            event remove 2030
        """
        if not self._require_program():
            return
        parts = arg.strip().split()
        action = parts[0].lower() if parts else 'list'

        if action == 'list':
            events = sorted(self.program.config.life_events, key=lambda e: e.year)
            if not events:
                print("No life events.")
            for e in events:
                print(f"  {e.year}: {e.description or e.type.value} ({e.type.value}, {format_money(e.amount, self.currency, 0)})")
            return

        if action == 'add':
            if len(parts) < 4:
                print("Usage: event add <year> <expense|income_jump|windfall> <amount> [description]")
                return
            try:
                event = LifeEvent(
                    year=int(parts[1]),
                    type=EventType(parts[2].lower()),
                    amount=float(parts[3].replace(',', '')),
                    description=' '.join(parts[4:]) or parts[2].lower(),
                )
            except ValueError as e:
                print(f"Error: {e}")
                return
            config = self.program.config.with_changes(life_events=self.program.config.life_events + [event])
            try:
                config.validate()
            except ValueError as e:
                print(f"Error: {e}")
                return
            self.program.config = config
        elif action == 'remove':
            if len(parts) < 2:
                print("Usage: event remove <year>")
                return
            try:
                year = int(parts[1])
            except ValueError:
                print(f"Error: Invalid year '{parts[1]}'")
                return
            remaining = [e for e in self.program.config.life_events if e.year != year]
            if len(remaining) == len(self.program.config.life_events):
                print(f"No life event in {year}")
                return
            self.program.config = self.program.config.with_changes(life_events=remaining)
        else:
            print(f"Error: Unknown event action '{action}'. Use list, add or remove.")
            return

        self._recalculate()
        print(f"Final moderate wealth: {format_value(self.data.final_wealth.moderate, self.currency)}")

    def complete_event(self, text, line, begidx, endidx):
        words = ['list', 'add', 'remove'] + [t.value for t in EventType]
        return [w for w in words if w.startswith(text)]

    def do_reset(self, arg: str):
        """Discard session changes.

        Usage: reset [overrides|history|all]

        'overrides' clears manual overrides, 'history' drops imported history,
        'all' (default) reloads the program from its spec.json.
        """
        if not self._require_program():
            return
        what = arg.strip().lower() or 'all'
        if what == 'overrides':
            self.program.overrides = {}
        elif what == 'history':
            self.program.history = []
        elif what == 'all':
            try:
                self.program = load_program(self.program.name, self.input_dir)
            except (FileNotFoundError, ValueError) as e:
                print(f"Error: {e}")
                return
        else:
            print("Usage: reset [overrides|history|all]")
            return
        self._recalculate()
        print(f"Reset {what}.")

    def do_export(self, arg: str):
        """Export the ledger and configuration to a ZIP file.

        Usage: export [path]

        Without a path, a dated file is written to the current directory.
        """
        if not self._require_program():
            return
        path = arg.strip() or os.getcwd()
        try:
            written = export_zip(path, self.program.config, self.data, self.program.currency, self.program.overrides)
        except OSError as e:
            print(f"Error: {e}")
            return
        print(f"Exported to {written}")

    def do_generate(self, arg: str):
        """Launch the interactive wizard to create or update a program.

        Usage: generate
        """
        print()
        program_name = run_generator()
        if program_name:
            print()
            reload_choice = input(f"Would you like to load '{program_name}' now? [Y/n]: ").strip().lower()
            if reload_choice in ('', 'y', 'yes'):
                self.do_load(program_name)

    def do_load(self, arg: str):
        """Load a program or import an exported file.

        Usage: load <program_name>
               load <file.zip|file.json|file.csv>

        A program name loads input-parameters/<name>/spec.json. A file is
        imported into the active program: a ZIP or JSON replaces the
        configuration, and ledger rows from past years become history.
        """
        target = arg.strip() or (self.program.name if self.program else '')

        if not target:
            print("Please specify a program name.")
            print("Available programs:")
            for item in list_programs(self.input_dir):
                print(f"  - {item}")
            return

        if target.lower().endswith(IMPORT_EXTENSIONS):
            self._import(target)
            return

        try:
            print(f"Loading program '{target}'...")
            self.program = load_program(target, self.input_dir)
            self._recalculate()
            print("Program loaded successfully!")
            print(f"Years: {self.data.first_year} - {self.data.last_year}")
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}")

    def _import(self, path: str):
        program = self.program or Program('imported', load_default_config())
        try:
            imported = import_file(path)
            result = apply_import(imported, program.config, program.currency, overrides=program.overrides)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}")
            return
        program.config = result.config
        program.currency = result.currency
        program.overrides = result.overrides
        program.history = result.history
        self.program = program
        self._recalculate()
        print(f"Imported {os.path.basename(path)}")
        if result.history:
            print(f"History: {result.history[0].year} - {result.history[-1].year}")
        print(f"Years: {self.data.first_year} - {self.data.last_year}")

    def do_help(self, arg: str):
        """Show help for available commands."""
        if arg:
            super().do_help(arg)
        else:
            print("""
Available Commands:
==================

  get <fields> [year_or_range]
      Query one or more comma-separated fields from yearly data.
      Year specifier: 2026, 2026-2030 or 2026- (to the last year)

  fields [field_name]
      List all fields, or describe one.

  years
      Show the year range, imported history and life event years.

  summary
      Show totals and final wealth.

  render [program] <mode> [year_or_range]
      Render YearDetails, Ledger, Wealth or Events.

  tax <income> [currency]
      Compute tax on an income under a currency's regime.

  override <year> <base|bonus|rsu> <value|clear>
      Override one year's value. 'override list' shows all overrides.

  event list | event add <year> <type> <amount> [description] | event remove <year>
      Edit life events. Types: expense, income_jump, windfall.

  reset [overrides|history|all]
      Discard session changes.

  export [path]
      Write the ledger CSV and config.json to a ZIP file.

  load <program_name|file>
      Load a program, or import a .zip, .json or .csv file.

  generate
      Create or update a program with the interactive wizard.

  exit, quit
      Exit the shell.
""")

    def do_exit(self, arg: str):
        """Exit the shell."""
        print("Goodbye!")
        return True

    def do_quit(self, arg: str):
        """Exit the shell."""
        return self.do_exit(arg)

    def do_EOF(self, arg: str):
        """Handle Ctrl+D to exit."""
        print()  # Print newline for clean exit
        return self.do_exit(arg)

    def emptyline(self):
        """Do nothing on empty line."""
        pass

    def default(self, line: str):
        """Handle unknown commands."""
        print(f"Unknown command: {line}")
        print("Type 'help' for available commands.")

    def complete_get(self, text, line, begidx, endidx):
        """Tab completion for the get command (case-insensitive substring match)."""
        if not text:
            return self.available_fields
        text_lower = text.lower()
        return [f for f in self.available_fields if text_lower in f.lower()]

    def complete_load(self, text, line, begidx, endidx):
        """Tab completion for the load command."""
        return [p for p in list_programs(self.input_dir) if p.startswith(text)]

    def complete_help(self, text, line, begidx, endidx):
        """Tab completion for the help command."""
        commands = ['get', 'fields', 'years', 'summary', 'render', 'tax', 'override', 'event',
                    'reset', 'export', 'load', 'generate', 'exit', 'quit']
        return [c for c in commands if c.startswith(text)]


def load_default_config() -> SimulationConfig:
    return SimulationConfig.from_spec(DEFAULT_SPEC)


def main():
    program_name = sys.argv[1] if len(sys.argv) > 1 else None

    if program_name:
        try:
            print(f"Loading program '{program_name}'...")
            program = load_program(program_name)
            print("Program loaded successfully!")
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}")
            sys.exit(1)
        shell = WealthShell(program)
        shell.cmdloop()
    else:
        # Start shell without a loaded program
        shell = WealthShell()
        shell.cmdloop()


if __name__ == "__main__":
    main()
