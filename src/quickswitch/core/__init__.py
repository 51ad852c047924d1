"""
Core quickswitch components.

This package provides the enums and value types shared across the parser,
the handlers and the session state.
"""

from quickswitch.core.types import (
    ActiveContext,
    Mode,
    Suggestion,
    SuggestionType,
    TriggerKind,
)

__all__ = [
    "ActiveContext",
    "Mode",
    "Suggestion",
    "SuggestionType",
    "TriggerKind",
]
