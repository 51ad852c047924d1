"""
quickswitch input parsing components.

This package provides the trigger index, the single pass scanner, precedence
resolution and the input parser that validates commands against handlers.
"""

from quickswitch.parsing.parser import InputParser, ParsedResult, parse_input
from quickswitch.parsing.resolver import ResolvedCommand, resolve_precedence
from quickswitch.parsing.scanner import RawOccurrence, Scanner
from quickswitch.parsing.trigger_index import MappedTrigger, TriggerIndex

__all__ = [
    "InputParser",
    "MappedTrigger",
    "ParsedResult",
    "RawOccurrence",
    "ResolvedCommand",
    "Scanner",
    "TriggerIndex",
    "parse_input",
    "resolve_precedence",
]
