"""
Mode handlers for quickswitch.

This package provides the Handler capability interface and one handler
variant per switcher mode.
"""

from quickswitch.handlers.base import (
    Handler,
    PrefixModeHandler,
    SourcedModeHandler,
    StandardHandler,
)
from quickswitch.handlers.modes import (
    BookmarksHandler,
    CommandHandler,
    EditorHandler,
    HeadingsHandler,
    RelatedItemsHandler,
    SymbolHandler,
    VaultHandler,
    WorkspaceHandler,
)

__all__ = [
    "Handler",
    "PrefixModeHandler",
    "SourcedModeHandler",
    "StandardHandler",
    "BookmarksHandler",
    "CommandHandler",
    "EditorHandler",
    "HeadingsHandler",
    "RelatedItemsHandler",
    "SymbolHandler",
    "VaultHandler",
    "WorkspaceHandler",
]
