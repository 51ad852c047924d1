"""
quickswitch command definitions and handler lookup.

This package contains the built-in command definitions and the registry that
maps modes, suggestions and trigger strings to handlers.
"""

from quickswitch.commands.definitions import TriggerDefinition, get_command_definitions
from quickswitch.commands.registry import HandlerRegistry

__all__ = [
    "HandlerRegistry",
    "TriggerDefinition",
    "get_command_definitions",
]
