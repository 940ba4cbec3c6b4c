"""Tests for the MCP server module."""

import os
import sys
import json
import shutil
import tempfile
import pytest
from unittest.mock import patch

# Add src and mcp-server to path for imports BEFORE importing mcp modules
MCP_SERVER_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../mcp-server'))
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src'))

if MCP_SERVER_PATH not in sys.path:
    sys.path.insert(0, MCP_SERVER_PATH)
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from mcp.types import Tool, TextContent

# Import server module - need to import from the mcp-server directory
import importlib.util
server_spec = importlib.util.spec_from_file_location("mcp_server", os.path.join(MCP_SERVER_PATH, "server.py"))
mcp_server = importlib.util.module_from_spec(server_spec)
server_spec.loader.exec_module(mcp_server)

tools_spec = importlib.util.spec_from_file_location("tools", os.path.join(MCP_SERVER_PATH, "tools.py"))
tools_module = importlib.util.module_from_spec(tools_spec)
tools_spec.loader.exec_module(tools_module)
MultiProgramTools = tools_module.MultiProgramTools


FIXTURES_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), 'fixtures'))


@pytest.fixture(scope="module")
def fixture_base_path():
    """Temporary project directory holding the fixture programs."""
    temp_dir = tempfile.mkdtemp()
    shutil.copytree(FIXTURES_PATH, os.path.join(temp_dir, 'input-parameters'))
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def fixture_tools(fixture_base_path):
    """Install tools over the fixture programs as the server's global instance."""
    mcp_server.tools = MultiProgramTools(fixture_base_path, 'testprogram')
    yield mcp_server.tools
    mcp_server.tools = None


async def call(name: str, arguments: dict) -> dict:
    result = await mcp_server.call_tool(name, arguments)
    assert isinstance(result, list)
    assert len(result) == 1
    assert isinstance(result[0], TextContent)
    return json.loads(result[0].text)


class TestServerConfiguration:
    """Tests for server configuration and setup."""

    def test_server_name(self):
        assert mcp_server.server.name == "wealth-projector"

    def test_param_schemas(self):
        assert mcp_server.PROGRAM_PARAM['type'] == 'string'
        assert 'description' in mcp_server.PROGRAM_PARAM
        assert mcp_server.YEAR_PARAM['type'] == 'integer'


class TestGetTools:
    """Tests for get_tools function."""

    def setup_method(self):
        mcp_server.tools = None

    def teardown_method(self):
        mcp_server.tools = None

    def test_get_tools_initializes_on_first_call(self):
        tools = mcp_server.get_tools()
        # Check by class name since we're using dynamic imports
        assert tools.__class__.__name__ == 'MultiProgramTools'
        assert 'example' in tools.programs

    def test_get_tools_returns_cached_instance(self):
        assert mcp_server.get_tools() is mcp_server.get_tools()

    @patch.dict(os.environ, {'WEALTH_PROJECTOR_PROGRAM': 'usexample'})
    def test_get_tools_uses_env_default_program(self):
        assert mcp_server.get_tools().default_program == 'usexample'


class TestListTools:
    """Tests for list_tools function."""

    @pytest.mark.asyncio
    async def test_list_tools_contains_expected_tools(self):
        tools = await mcp_server.list_tools()
        assert all(isinstance(t, Tool) for t in tools)
        assert sorted(t.name for t in tools) == sorted([
            'list_programs',
            'reload_programs',
            'get_program_overview',
            'list_available_years',
            'get_year_summary',
            'get_tax_details',
            'get_wealth_trajectories',
            'compare_years',
            'get_final_wealth',
            'compute_tax',
            'search_financial_data',
            'compare_programs',
        ])

    @pytest.mark.asyncio
    async def test_tools_have_descriptions_and_schemas(self):
        for tool in await mcp_server.list_tools():
            assert tool.description
            assert tool.inputSchema['type'] == 'object'

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,required", [
        ('get_year_summary', ['year']),
        ('get_tax_details', ['year']),
        ('compare_years', ['year1', 'year2']),
        ('compute_tax', ['income']),
        ('search_financial_data', ['query']),
        ('compare_programs', ['program1', 'program2']),
        ('get_wealth_trajectories', []),
    ])
    async def test_required_arguments(self, name, required):
        tools = {t.name: t for t in await mcp_server.list_tools()}
        assert tools[name].inputSchema['required'] == required


class TestCallTool:
    """Tests for call_tool function against the fixture programs."""

    @pytest.mark.asyncio
    async def test_call_list_programs(self, fixture_tools):
        data = await call('list_programs', {})
        assert sorted(data['available_programs']) == ['otherprogram', 'testprogram']

    @pytest.mark.asyncio
    async def test_call_get_program_overview(self, fixture_tools):
        data = await call('get_program_overview', {'program': 'testprogram'})
        assert data['projection_horizon']['start_year'] == 2025
        assert data['program'] == 'testprogram'

    @pytest.mark.asyncio
    async def test_call_list_available_years(self, fixture_tools):
        data = await call('list_available_years', {'program': 'otherprogram'})
        assert data['event_years'] == []
        assert data['total_years'] == 11

    @pytest.mark.asyncio
    async def test_call_get_year_summary(self, fixture_tools):
        data = await call('get_year_summary', {'year': 2028, 'program': 'testprogram'})
        assert data['base_salary'] == 3000000

    @pytest.mark.asyncio
    async def test_call_get_tax_details(self, fixture_tools):
        data = await call('get_tax_details', {'year': 2025, 'program': 'testprogram'})
        assert data['cash_pay']['total_tax'] == 240500

    @pytest.mark.asyncio
    async def test_call_get_wealth_trajectories(self, fixture_tools):
        data = await call('get_wealth_trajectories', {'program': 'testprogram'})
        # JSON object keys are strings
        assert '2035' in data['yearly']
        data = await call('get_wealth_trajectories', {'year': 2030, 'program': 'testprogram'})
        assert data['year'] == 2030

    @pytest.mark.asyncio
    async def test_call_compare_years(self, fixture_tools):
        data = await call('compare_years', {'year1': 2025, 'year2': 2030, 'program': 'testprogram'})
        assert data['comparison'] == '2025 vs 2030'

    @pytest.mark.asyncio
    async def test_call_get_final_wealth(self, fixture_tools):
        data = await call('get_final_wealth', {'program': 'otherprogram'})
        assert data['final_year'] == 2035

    @pytest.mark.asyncio
    async def test_call_compute_tax(self, fixture_tools):
        data = await call('compute_tax', {'income': 1000000, 'currency': 'INR'})
        assert data['total_tax'] == 33800
        data = await call('compute_tax', {'income': 26200, 'program': 'otherprogram'})
        assert data['tax_regime'] == 'USD'
        assert data['total_tax'] == 1160

    @pytest.mark.asyncio
    async def test_call_search_financial_data(self, fixture_tools):
        data = await call('search_financial_data', {'query': 'bonus', 'year': 2025, 'program': 'testprogram'})
        assert data['results'] == {'bonus': 200000}
        data = await call('search_financial_data', {'query': 'bonus', 'program': 'testprogram'})
        assert len(data['years']) == 11

    @pytest.mark.asyncio
    async def test_call_compare_programs(self, fixture_tools):
        data = await call('compare_programs', {'program1': 'testprogram', 'program2': 'otherprogram',
                                               'metrics': ['final_moderate', 'lifetime_income']})
        assert sorted(data['metrics']) == ['final_moderate', 'lifetime_income']
        assert 'recommendation' in data

    @pytest.mark.asyncio
    async def test_call_reload_programs(self, fixture_tools):
        data = await call('reload_programs', {})
        assert data['status'] == 'success'
        assert sorted(data['changes']['reloaded']) == ['otherprogram', 'testprogram']

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self, fixture_tools):
        data = await call('unknown_tool', {})
        assert 'Unknown tool' in data['error']

    @pytest.mark.asyncio
    async def test_missing_program_returns_error(self, fixture_tools):
        data = await call('get_final_wealth', {})
        assert 'Multiple programs' in data['error']

    @pytest.mark.asyncio
    async def test_missing_year_returns_error(self, fixture_tools):
        data = await call('get_year_summary', {'year': 1990, 'program': 'testprogram'})
        assert 'error' in data

    @pytest.mark.asyncio
    async def test_missing_argument_returns_error(self, fixture_tools):
        data = await call('get_year_summary', {'program': 'testprogram'})
        assert 'error' in data
