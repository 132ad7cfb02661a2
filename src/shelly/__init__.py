"""Shelly - command-to-regex lexical parser."""

from .core import parse_command, parse_commands
from .types import AnalysisSettings, Components, ParsedCommand

__version__ = "0.1.0"

__all__ = ["AnalysisSettings", "Components", "ParsedCommand", "parse_command", "parse_commands"]
