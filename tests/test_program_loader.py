import json
import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from calc.history import load_history_csv
from calc.program_loader import (
    INPUT_PARAMETERS_DIR,
    list_programs,
    load_program,
    load_spec,
    program_from_spec,
    spec_path_for,
)
from model.SimulationConfig import YearOverride

FIXTURES = os.path.join(os.path.dirname(__file__), 'mcp_server_tests', 'fixtures')


def test_list_programs():
    assert list_programs(FIXTURES) == ['otherprogram', 'testprogram']


def test_list_programs_missing_dir(tmp_path):
    assert list_programs(str(tmp_path / 'missing')) == []


def test_list_programs_skips_folders_without_spec(tmp_path):
    (tmp_path / 'empty').mkdir()
    (tmp_path / 'plan').mkdir()
    (tmp_path / 'plan' / 'spec.json').write_text('{}')
    assert list_programs(str(tmp_path)) == ['plan']


def test_bundled_programs_load():
    for name in list_programs():
        program = load_program(name)
        assert program.calculate().yearly_data
    assert os.path.basename(INPUT_PARAMETERS_DIR) == 'input-parameters'


def test_load_nested_program():
    program = load_program('testprogram', FIXTURES)
    assert program.name == 'testprogram'
    assert program.currency == 'INR'
    assert program.config.base_salary == 2000000
    assert len(program.config.life_events) == 2
    assert program.overrides == {2028: YearOverride(base=3000000)}


def test_load_flat_program():
    program = load_program('otherprogram', FIXTURES)
    assert program.currency == 'USD'
    assert program.config.hike_percent == 3
    assert program.overrides == {}


def test_missing_program():
    with pytest.raises(FileNotFoundError, match='Spec file not found'):
        load_program('nope', FIXTURES)


def test_load_spec(tmp_path):
    path = tmp_path / 'spec.json'
    path.write_text(json.dumps({"currency": "GBP"}))
    assert load_spec(str(path)) == {"currency": "GBP"}


def test_spec_path_for():
    assert spec_path_for('abc', '/data') == os.path.join('/data', 'abc', 'spec.json')


def test_program_defaults_to_inr():
    assert program_from_spec({"startYear": 2030}).currency == 'INR'


def test_currency_code_is_normalised():
    program = program_from_spec({"startYear": 2030, "baseSalary": 100000, "currency": " usd"})
    assert program.currency == 'USD'
    upper = program_from_spec({"startYear": 2030, "baseSalary": 100000, "currency": "USD"})
    assert program.calculate().years() == upper.calculate().years()


def test_invalid_program():
    with pytest.raises(ValueError):
        program_from_spec({"startYear": 2030, "duration": 0})


def test_calculate_applies_overrides():
    program = load_program('testprogram', FIXTURES)
    assert program.calculate().get_year(2028).base_salary == 3000000


def test_calculate_splices_history():
    program = load_program('testprogram', FIXTURES)
    text = "Year,Age,Base Salary,Bonus,Disposable Income,Investable Cash,RSU Grant,Total Wealth\n" \
           "2024,29,1,2,3,4,5,6\n"
    program.history = load_history_csv(text, 2025)
    data = program.calculate()
    assert data.first_year == 2024
    assert data.get_year(2024).is_historical
    assert data.get_year(2025).base_salary == 2000000


def test_to_spec_round_trip():
    program = load_program('testprogram', FIXTURES)
    again = program_from_spec(program.to_spec(), program.name)
    assert again.config == program.config
    assert again.overrides == program.overrides
    assert again.currency == program.currency
