"""Concrete handlers, one per switcher mode."""

from quickswitch.core.types import Mode, SuggestionType
from quickswitch.handlers.base import PrefixModeHandler, SourcedModeHandler

# Suggestions that point at a document and can therefore act as a source
DOCUMENT_SUGGESTION_TYPES = frozenset(
    {
        SuggestionType.FILE,
        SuggestionType.ALIAS,
        SuggestionType.EDITOR_LIST,
        SuggestionType.BOOKMARK,
        SuggestionType.HEADINGS_LIST,
    }
)


class EditorHandler(PrefixModeHandler):
    mode = Mode.EDITOR_LIST
    command_setting = "editor_list_command"


class WorkspaceHandler(PrefixModeHandler):
    mode = Mode.WORKSPACE_LIST
    command_setting = "workspace_list_command"


class HeadingsHandler(PrefixModeHandler):
    mode = Mode.HEADINGS_LIST
    command_setting = "headings_list_command"


class BookmarksHandler(PrefixModeHandler):
    mode = Mode.BOOKMARKS_LIST
    command_setting = "bookmarks_list_command"


class CommandHandler(PrefixModeHandler):
    mode = Mode.COMMAND_LIST
    command_setting = "command_list_command"


class VaultHandler(PrefixModeHandler):
    mode = Mode.VAULT_LIST
    command_setting = "vault_list_command"


class SymbolHandler(SourcedModeHandler):
    """Symbols of a document; a selected symbol is not itself a source."""

    mode = Mode.SYMBOL_LIST
    command_setting = "symbol_list_command"
    active_command_setting = "symbol_list_active_editor_command"
    source_suggestion_types = DOCUMENT_SUGGESTION_TYPES | {
        SuggestionType.RELATED_ITEMS_LIST
    }


class RelatedItemsHandler(SourcedModeHandler):
    mode = Mode.RELATED_ITEMS_LIST
    command_setting = "related_items_list_command"
    active_command_setting = "related_items_list_active_editor_command"
    source_suggestion_types = DOCUMENT_SUGGESTION_TYPES | {SuggestionType.SYMBOL_LIST}
