import sys
import os
import argparse
from datetime import date
from calc.history import load_history_csv
from calc.program_loader import load_program
from render.renderers import YearDetailsRenderer, RENDERER_REGISTRY
from render.export_handler import export_zip
from model.currencies import CURRENCIES
from spec_generator import run_generator


def main():
    parser = argparse.ArgumentParser(
        description='Wealth projection calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  YearDetails  Print income, tax and savings breakdown for one year (default)
  Ledger       Print the yearly income and savings ledger
  Wealth       Print the three wealth trajectories and final wealth
  Events       Print the life events that fall inside the projection

Examples:
  python src/Program.py myprogram
  python src/Program.py myprogram --mode Ledger
  python src/Program.py myprogram --mode YearDetails --year 2030
  python src/Program.py myprogram --currency USD --mode Wealth
  python src/Program.py myprogram --history old_export.csv --mode Ledger
  python src/Program.py myprogram --export exports/
  python src/Program.py --generate
        """
    )
    parser.add_argument('program_name', nargs='?', help='Name of the program (folder in input-parameters)')
    parser.add_argument('--mode', '-m',
                        choices=list(RENDERER_REGISTRY.keys()),
                        default='YearDetails',
                        help='Output mode: YearDetails (default), Ledger, Wealth or Events')
    parser.add_argument('--currency', '-c',
                        choices=list(CURRENCIES.keys()),
                        help='Currency code; overrides the one in spec.json and selects the tax regime')
    parser.add_argument('--year', '-y', type=int,
                        help='Year for YearDetails mode (defaults to the first year)')
    parser.add_argument('--export', '-e', metavar='PATH',
                        help='Write a ZIP export (ledger CSV and config.json) to PATH')
    parser.add_argument('--history', metavar='CSV',
                        help='Ledger CSV from an earlier export; past years are shown as recorded')
    parser.add_argument('--generate', '-g',
                        action='store_true',
                        help='Launch interactive wizard to create a new spec.json configuration')

    args = parser.parse_args()

    # If --generate flag is set, run the interactive generator
    if args.generate:
        program_name = run_generator()
        if program_name is None:
            sys.exit(0)
        run_plan = input("Would you like to run the projection now? [Y/n]: ").strip().lower()
        if run_plan in ('', 'y', 'yes'):
            args.program_name = program_name
        else:
            sys.exit(0)

    # Require program_name if not generating
    if not args.program_name:
        parser.error("program_name is required (or use --generate to create a new configuration)")

    try:
        program = load_program(args.program_name)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.currency:
        program.currency = args.currency

    if args.history:
        if not os.path.exists(args.history):
            print(f"Error: History file not found: {args.history}")
            sys.exit(1)
        with open(args.history, 'r') as f:
            text = f.read()
        try:
            program.history = load_history_csv(text, date.today().year)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)

    data = program.calculate()

    if args.mode == 'YearDetails':
        renderer = YearDetailsRenderer(args.year, currency=program.currency)
    else:
        renderer = RENDERER_REGISTRY[args.mode](currency=program.currency)
    renderer.render(data)

    if args.export:
        path = export_zip(args.export, program.config, data, program.currency, program.overrides)
        print(f"Exported to {path}")


if __name__ == "__main__":
    main()
