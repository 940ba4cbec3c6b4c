"""Loading of named programs from input-parameters/<name>/spec.json."""

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from calc.history import splice_history
from calc.projection_calculator import run_projection
from model.ProjectionData import ProjectionData, YearlyData
from model.SimulationConfig import SimulationConfig, YearOverride, overrides_to_spec, parse_overrides
from model.currencies import DEFAULT_CURRENCY

INPUT_PARAMETERS_DIR = os.path.normpath(os.path.join(os.path.dirname(__file__), '..', '..', 'input-parameters'))


@dataclass
class Program:
    """A configuration together with its overrides, currency and imported history."""
    name: str
    config: SimulationConfig
    currency: str = DEFAULT_CURRENCY
    overrides: Dict[int, YearOverride] = field(default_factory=dict)
    history: List[YearlyData] = field(default_factory=list)

    def calculate(self) -> ProjectionData:
        live = run_projection(self.config, self.overrides, self.currency)
        return splice_history(self.history, live)

    def to_spec(self) -> dict:
        return {
            'currency': self.currency,
            'config': self.config.to_spec(),
            'overrides': overrides_to_spec(self.overrides),
        }


def spec_path_for(program_name: str, input_dir: Optional[str] = None) -> str:
    return os.path.join(input_dir or INPUT_PARAMETERS_DIR, program_name, 'spec.json')


def load_spec(spec_path: str) -> dict:
    """Read a spec.json file.

    Raises:
        FileNotFoundError: if the file does not exist
        json.JSONDecodeError: if the file is not valid JSON
    """
    if not os.path.exists(spec_path):
        raise FileNotFoundError(f"Spec file not found: {spec_path}")
    with open(spec_path, 'r') as f:
        return json.load(f)


def program_from_spec(spec: dict, name: str = '') -> Program:
    """Build a validated Program from a spec dictionary.

    Raises:
        ValueError: if the configuration or an override is invalid
    """
    config = SimulationConfig.from_spec(spec)
    currency = (spec.get('currency') or DEFAULT_CURRENCY).strip().upper()
    return Program(name, config, currency, parse_overrides(spec.get('overrides')))


def load_program(program_name: str, input_dir: Optional[str] = None) -> Program:
    return program_from_spec(load_spec(spec_path_for(program_name, input_dir)), program_name)


def list_programs(input_dir: Optional[str] = None) -> List[str]:
    """Names of the program folders that contain a spec.json."""
    input_dir = input_dir or INPUT_PARAMETERS_DIR
    if not os.path.isdir(input_dir):
        return []
    return sorted(
        item for item in os.listdir(input_dir)
        if os.path.isfile(os.path.join(input_dir, item, 'spec.json'))
    )
