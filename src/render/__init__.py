"""Render module for wealth projection output display."""

from render.renderers import (
    BaseRenderer,
    YearDetailsRenderer,
    LedgerRenderer,
    WealthRenderer,
    EventsRenderer,
    format_multiline_headers,
    parse_year_range,
    RENDERER_REGISTRY,
)

__all__ = [
    'BaseRenderer',
    'YearDetailsRenderer',
    'LedgerRenderer',
    'WealthRenderer',
    'EventsRenderer',
    'format_multiline_headers',
    'parse_year_range',
    'RENDERER_REGISTRY',
]
