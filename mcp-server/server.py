#!/usr/bin/env python3
"""MCP Server for Wealth Projector.

This server exposes wealth projections as MCP tools, allowing AI
assistants to answer questions about a user's income, savings and
long-term wealth.
"""

import os
import sys
import json
import asyncio
from typing import Any

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from tools import MultiProgramTools


server = Server("wealth-projector")

tools: MultiProgramTools | None = None


def get_tools() -> MultiProgramTools:
    """Tools over input-parameters, created on first use."""
    global tools
    if tools is None:
        default_program = os.environ.get('WEALTH_PROJECTOR_PROGRAM')
        base_path = os.path.join(os.path.dirname(__file__), '..')
        tools = MultiProgramTools(base_path, default_program)
    return tools


PROGRAM_PARAM = {
    "type": "string",
    "description": "Program folder under input-parameters; the default program when omitted (see list_programs)"
}

YEAR_PARAM = {
    "type": "integer",
    "description": "Calendar year within the projection"
}


def _tool(name: str, description: str, properties: dict | None = None,
          required: list[str] | None = None, per_program: bool = True) -> Tool:
    properties = dict(properties or {})
    if per_program:
        properties["program"] = PROGRAM_PARAM
    return Tool(
        name=name,
        description=description,
        inputSchema={"type": "object", "properties": properties, "required": required or []},
    )


def _optional(kind: str, description: str) -> dict:
    return {"type": kind, "description": f"Optional: {description}"}


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [
        _tool("list_programs",
              "List all available wealth projection programs with their currency and year range.",
              per_program=False),
        _tool("reload_programs",
              "Re-read every program spec.json from disk. Call after adding, editing or deleting "
              "programs; the server does not need a restart.",
              per_program=False),
        _tool("get_program_overview",
              "Overview of a projection: currency and tax regime, horizon, income, savings and return "
              "assumptions, life events and overridden years. Start here to learn what a program covers."),
        _tool("list_available_years",
              "Years covered by the projection, split into imported history, projected years and "
              "years with life events."),
        _tool("get_year_summary",
              "Income, tax and savings for one year: base salary, bonus, RSU grant, disposable income, "
              "effective tax rate, investable amounts, moderate wealth and any life event.",
              {"year": YEAR_PARAM}, ["year"]),
        _tool("get_tax_details",
              "Tax breakdown for one year: tax on cash pay (base + bonus) and on the RSU grant, with "
              "effective and marginal rates.",
              {"year": YEAR_PARAM}, ["year"]),
        _tool("get_wealth_trajectories",
              "Cumulative wealth under the conservative, moderate and aggressive returns for one year "
              "or all years, with the cash/stock split of the moderate trajectory.",
              {"year": _optional("integer", "one year; omit for every year plus final wealth")}),
        _tool("compare_years",
              "Compare salary, gross income, disposable income, investable amount and moderate wealth "
              "between two years.",
              {"year1": {"type": "integer", "description": "Earlier year"},
               "year2": {"type": "integer", "description": "Later year"}},
              ["year1", "year2"]),
        _tool("get_final_wealth",
              "Wealth at the end of the projection on each trajectory, with lifetime income and "
              "savings totals."),
        _tool("compute_tax",
              "Income tax on an annual income. The currency picks the regime: INR (new regime slabs "
              "with rebate, surcharge and cess), USD (federal brackets after the standard deduction), "
              "any other currency a flat 25%.",
              {"income": {"type": "number", "description": "Annual income"},
               "currency": _optional("string", "INR, USD, EUR or GBP; defaults to the program's currency")},
              ["income"]),
        _tool("search_financial_data",
              "Look up metrics by keyword, e.g. 'RSU grant' or 'moderate wealth', for one year or all.",
              {"query": {"type": "string", "description": "Keywords such as 'bonus', 'take home' or 'wealth'"},
               "year": _optional("integer", "restrict the search to this year")},
              ["query"]),
        _tool("compare_programs",
              "Compare two programs on final wealth per trajectory and lifetime income, disposable "
              "income and investable totals, and say which ends better.",
              {"program1": {"type": "string", "description": "First program"},
               "program2": {"type": "string", "description": "Second program"},
               "metrics": {
                   "type": "array",
                   "items": {"type": "string"},
                   "description": "Optional subset of: final_conservative, final_moderate, final_aggressive, "
                                  "lifetime_income, lifetime_net_pay, lifetime_investable. Defaults to all.",
               }},
              ["program1", "program2"], per_program=False),
    ]


def _dispatch(wp_tools: MultiProgramTools, name: str, args: dict[str, Any]) -> dict:
    program = args.get("program")
    handlers = {
        "list_programs": lambda: wp_tools.list_programs(),
        "reload_programs": lambda: wp_tools.reload_programs(),
        "get_program_overview": lambda: wp_tools.get_program_overview(program),
        "list_available_years": lambda: wp_tools.list_available_years(program),
        "get_year_summary": lambda: wp_tools.get_year_summary(args["year"], program),
        "get_tax_details": lambda: wp_tools.get_tax_details(args["year"], program),
        "get_wealth_trajectories": lambda: wp_tools.get_wealth_trajectories(args.get("year"), program),
        "compare_years": lambda: wp_tools.compare_years(args["year1"], args["year2"], program),
        "get_final_wealth": lambda: wp_tools.get_final_wealth(program),
        "compute_tax": lambda: wp_tools.compute_tax(args["income"], args.get("currency"), program),
        "search_financial_data": lambda: wp_tools.search_financial_data(args["query"], args.get("year"), program),
        "compare_programs": lambda: wp_tools.compare_programs(args["program1"], args["program2"],
                                                              args.get("metrics")),
    }
    handler = handlers.get(name)
    if handler is None:
        return {"error": f"Unknown tool: {name}"}
    return handler()


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Run a tool and return its result as JSON; failures become {"error": ...}."""
    try:
        payload = json.dumps(_dispatch(get_tools(), name, arguments), indent=2, default=str)
    except Exception as e:
        payload = json.dumps({"error": str(e)}, indent=2)
    return [TextContent(type="text", text=payload)]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
