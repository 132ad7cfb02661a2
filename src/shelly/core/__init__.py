"""Command classification and regex generation."""

from .catalog import CATALOG, PatternCatalog, Rule, build_pattern_catalog
from .parser import parse_command, parse_commands, split_lines
from .verify import matches_own_line

__all__ = [
    "CATALOG",
    "PatternCatalog",
    "Rule",
    "build_pattern_catalog",
    "matches_own_line",
    "parse_command",
    "parse_commands",
    "split_lines",
]
