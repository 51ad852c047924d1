"""
Core type definitions for the quickswitch command palette.

This module contains the enums and small value types shared by the parser,
the handler registry and the input session state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Mode(Enum):
    """Operational mode of the switcher, one per handler."""

    STANDARD = 1
    EDITOR_LIST = 2
    SYMBOL_LIST = 4
    WORKSPACE_LIST = 8
    HEADINGS_LIST = 16
    BOOKMARKS_LIST = 32
    COMMAND_LIST = 64
    RELATED_ITEMS_LIST = 128
    VAULT_LIST = 256


class TriggerKind(Enum):
    """How a command can be triggered from the input text."""

    PREFIX = "prefix"  # Only valid at position 0 of the clean input
    SOURCED = "sourced"  # Valid anywhere, operates on a source item
    NONE = "none"  # Never triggered from text


class SuggestionType(Enum):
    """Type tag carried by every suggestion shown in the list."""

    EDITOR_LIST = "editorList"
    SYMBOL_LIST = "symbolList"
    WORKSPACE_LIST = "workspaceList"
    HEADINGS_LIST = "headingsList"
    BOOKMARK = "bookmark"
    COMMAND_LIST = "commandList"
    RELATED_ITEMS_LIST = "relatedItemsList"
    VAULT_LIST = "vaultList"
    FILE = "file"
    ALIAS = "alias"
    UNRESOLVED = "unresolved"


@dataclass
class Suggestion:
    """A suggestion item, identified by its type tag.

    Params:
        type: Suggestion type used to map the suggestion back to its handler
        item: Handler specific payload
        file: Path of the document the suggestion points at, if any
    """

    type: SuggestionType
    item: Any = None
    file: str | None = None


@dataclass
class ActiveContext:
    """The item currently active in the host application (e.g. open editor)."""

    file: str | None = None
    view_type: str = "markdown"

    @property
    def has_file(self) -> bool:
        return self.file is not None
