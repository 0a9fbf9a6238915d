"""CLI subcommand implementations."""

from . import (
    convert,
    stops,
    composition,
    code_info,
)

__all__ = [
    "convert",
    "stops",
    "composition",
    "code_info",
]
