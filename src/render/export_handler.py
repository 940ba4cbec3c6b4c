"""Export and import of projection ledgers and configurations.

Exports are a ZIP with the ledger table (simulation_data.csv) and the
configuration metadata (config.json). Imports accept that ZIP, a bare
config JSON or a ledger CSV; a CSV brings its past years in as history.
"""

import csv
import io
import json
import os
import zipfile
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional

from calc.history import load_history_csv, roll_forward_config
from model.ProjectionData import ProjectionData, YearlyData
from model.SimulationConfig import (
    SimulationConfig,
    YearOverride,
    overrides_to_spec,
    parse_overrides,
)

APP_NAME = 'WealthSim'
EXPORT_VERSION = '1.0'
CSV_FILENAME = 'simulation_data.csv'
CONFIG_FILENAME = 'config.json'

LEDGER_HEADERS = ['Year', 'Age', 'Base Salary', 'Bonus', 'Disposable Income',
                  'Investable Cash', 'RSU Grant', 'Total Wealth']


def _plain_amount(amount: float) -> str:
    """Amount without grouping or trailing zeros: 1234567, 1234.5."""
    return f"{amount:.2f}".rstrip('0').rstrip('.')


def ledger_rows(data: ProjectionData, config: SimulationConfig) -> List[List[str]]:
    """Build the ledger table, header row first.

    A 'Life Event' column follows 'Age' when the configuration has any
    life events.
    """
    has_events = len(config.life_events) > 0
    headers = list(LEDGER_HEADERS)
    if has_events:
        headers.insert(2, 'Life Event')

    rows = [headers]
    for yd in data.years():
        line = [
            str(yd.year),
            str(yd.age),
            f"{yd.base_salary:.2f}",
            f"{yd.bonus:.2f}",
            f"{yd.annual_net_pay:.2f}",
            f"{yd.investable_cash:.2f}",
            f"{yd.rsu_grant:.2f}",
            f"{yd.wealth_moderate:.2f}",
        ]
        if has_events:
            line.insert(2, f"{yd.event.description} ({_plain_amount(yd.event.amount)})" if yd.event else '-')
        rows.append(line)
    return rows


def to_csv(data: ProjectionData, config: SimulationConfig) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerows(ledger_rows(data, config))
    return buffer.getvalue()


def to_tsv(data: ProjectionData, config: SimulationConfig) -> str:
    """Tab separated ledger, suitable for pasting into a spreadsheet."""
    return '\n'.join('\t'.join(row) for row in ledger_rows(data, config))


def export_metadata(config: SimulationConfig, currency_code: str,
                    overrides: Optional[Dict[int, YearOverride]] = None) -> dict:
    return {
        'app': APP_NAME,
        'version': EXPORT_VERSION,
        'exportDate': datetime.now().isoformat(),
        'config': config.to_spec(),
        'currency': currency_code,
        'overrides': overrides_to_spec(overrides or {}),
    }


def default_export_name() -> str:
    return f"{APP_NAME}_Export_{date.today().isoformat()}.zip"


def export_zip(path: str, config: SimulationConfig, data: ProjectionData, currency_code: str,
               overrides: Optional[Dict[int, YearOverride]] = None) -> str:
    """Write the ledger CSV and configuration metadata into a ZIP file.

    If path is a directory, a dated file name is used inside it.

    Returns:
        Path to the written file
    """
    if os.path.isdir(path):
        path = os.path.join(path, default_export_name())
    with zipfile.ZipFile(path, 'w', zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(CSV_FILENAME, to_csv(data, config))
        zf.writestr(CONFIG_FILENAME, json.dumps(export_metadata(config, currency_code, overrides), indent=2))
    return path


@dataclass
class ImportedPlan:
    """Raw content found in an imported file."""
    spec: Optional[dict] = None
    csv_text: Optional[str] = None


def import_file(path: str) -> ImportedPlan:
    """Read a ZIP export, a config JSON or a ledger CSV.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: for unsupported file types or content that is neither
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Import file not found: {path}")

    lower = path.lower()
    imported = ImportedPlan()
    if lower.endswith('.zip'):
        with zipfile.ZipFile(path, 'r') as zf:
            names = zf.namelist()
            if CONFIG_FILENAME in names:
                imported.spec = json.loads(zf.read(CONFIG_FILENAME).decode('utf-8'))
            if CSV_FILENAME in names:
                imported.csv_text = zf.read(CSV_FILENAME).decode('utf-8')
    elif lower.endswith('.json'):
        with open(path, 'r') as f:
            imported.spec = json.load(f)
    elif lower.endswith('.csv'):
        with open(path, 'r') as f:
            imported.csv_text = f.read()
    else:
        raise ValueError(f"Unsupported file type: {os.path.basename(path)} (expected .zip, .json or .csv)")

    if imported.spec is None and imported.csv_text is None:
        raise ValueError(f"No {CONFIG_FILENAME} or {CSV_FILENAME} found in {os.path.basename(path)}")
    return imported


@dataclass
class ImportResult:
    """Session state after applying an import."""
    config: SimulationConfig
    currency: str
    overrides: Dict[int, YearOverride] = field(default_factory=dict)
    history: List[YearlyData] = field(default_factory=list)


def apply_import(imported: ImportedPlan, current: SimulationConfig, currency: str,
                 current_year: Optional[int] = None,
                 overrides: Optional[Dict[int, YearOverride]] = None) -> ImportResult:
    """Combine imported content with the current session.

    Ledger rows before current_year become history and the configuration
    is rolled forward to start after the last of them. Without history the
    imported configuration replaces the current one as-is; without a
    configuration the current one is rolled forward.
    """
    if current_year is None:
        current_year = date.today().year

    history = load_history_csv(imported.csv_text, current_year) if imported.csv_text else []
    last_row = history[-1] if history else None

    if imported.spec is not None:
        base_spec = dict(current.to_spec())
        base_spec.update(imported.spec.get('config', imported.spec))
        config = SimulationConfig.from_spec(base_spec, validate=False)
        if last_row is not None:
            config = roll_forward_config(config, last_row, original_end_year=config.end_year)
        config.validate()
        new_currency = (imported.spec.get('currency') or currency).strip().upper()
        new_overrides = parse_overrides(imported.spec.get('overrides'))
        return ImportResult(config, new_currency, new_overrides, history)

    if last_row is not None:
        return ImportResult(roll_forward_config(current, last_row), currency, dict(overrides or {}), history)

    return ImportResult(current, currency, dict(overrides or {}), [])
