"""
Command definitions for the switcher.

A TriggerDefinition ties a command to the mode it activates, the handler
class serving that mode and the trigger string that invokes it from the
input field. Definitions are built from settings and never mutated; a
settings change rebuilds the whole list.
"""

from attrs import field, frozen

from quickswitch.core.types import Mode, SuggestionType, TriggerKind
from quickswitch.handlers import (
    BookmarksHandler,
    CommandHandler,
    EditorHandler,
    Handler,
    HeadingsHandler,
    RelatedItemsHandler,
    StandardHandler,
    SymbolHandler,
    VaultHandler,
    WorkspaceHandler,
)
from quickswitch.settings import SwitcherSettings


@frozen
class TriggerDefinition:
    """
    Immutable definition of a switcher command.

    Params:
        command_id: Unique command identifier (e.g. "switcher-plus:open")
        mode: Mode the command activates
        kind: Whether the trigger is a prefix, sourced, or not triggerable
        trigger: Trigger string, may be empty or multi-codepoint
        handler_class: Handler serving the mode
        name: Human readable command name
        icon_id: Icon shown next to the command
        own_suggestion_types: Suggestion types produced by the handler
        use_active_editor_as_source: Use the active item as implicit source
    """

    command_id: str
    mode: Mode
    kind: TriggerKind
    trigger: str
    handler_class: type[Handler]
    name: str = ""
    icon_id: str = ""
    own_suggestion_types: tuple[SuggestionType, ...] = field(
        default=(), converter=tuple
    )
    use_active_editor_as_source: bool = False

    @property
    def is_triggerable(self) -> bool:
        return self.kind is not TriggerKind.NONE and len(self.trigger) > 0


def get_command_definitions(settings: SwitcherSettings) -> list[TriggerDefinition]:
    """
    Build the built-in command definitions from settings.

    Params:
        settings: Switcher settings supplying the trigger strings

    Returns:
        Definitions in configuration order
    """
    return [
        TriggerDefinition(
            command_id="switcher-plus:open",
            name="Open in Standard Mode",
            mode=Mode.STANDARD,
            icon_id="lucide-file-search",
            handler_class=StandardHandler,
            own_suggestion_types=(SuggestionType.ALIAS, SuggestionType.FILE),
            kind=TriggerKind.NONE,
            trigger="",
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-editors",
            name="Open in Editor Mode",
            mode=Mode.EDITOR_LIST,
            icon_id="lucide-file-edit",
            handler_class=EditorHandler,
            own_suggestion_types=(SuggestionType.EDITOR_LIST,),
            kind=TriggerKind.PREFIX,
            trigger=settings.editor_list_command,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-symbols",
            name="Open Symbols for selected suggestion or editor",
            mode=Mode.SYMBOL_LIST,
            icon_id="lucide-dollar-sign",
            handler_class=SymbolHandler,
            own_suggestion_types=(SuggestionType.SYMBOL_LIST,),
            kind=TriggerKind.SOURCED,
            trigger=settings.symbol_list_command,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-symbols-active",
            name="Open Symbols for the active editor",
            mode=Mode.SYMBOL_LIST,
            icon_id="lucide-dollar-sign",
            handler_class=SymbolHandler,
            kind=TriggerKind.PREFIX,
            trigger=settings.symbol_list_active_editor_command,
            use_active_editor_as_source=True,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-workspaces",
            name="Open in Workspaces Mode",
            mode=Mode.WORKSPACE_LIST,
            icon_id="lucide-album",
            handler_class=WorkspaceHandler,
            own_suggestion_types=(SuggestionType.WORKSPACE_LIST,),
            kind=TriggerKind.PREFIX,
            trigger=settings.workspace_list_command,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-headings",
            name="Open in Headings Mode",
            mode=Mode.HEADINGS_LIST,
            icon_id="lucide-file-search",
            handler_class=HeadingsHandler,
            own_suggestion_types=(SuggestionType.HEADINGS_LIST,),
            kind=TriggerKind.PREFIX,
            trigger=settings.headings_list_command,
        ),
        TriggerDefinition(
            # Id kept from the old starred plugin so existing hotkeys still work
            command_id="switcher-plus:open-starred",
            name="Open in Bookmarks Mode",
            mode=Mode.BOOKMARKS_LIST,
            icon_id="lucide-bookmark",
            handler_class=BookmarksHandler,
            own_suggestion_types=(SuggestionType.BOOKMARK,),
            kind=TriggerKind.PREFIX,
            trigger=settings.bookmarks_list_command,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-commands",
            name="Open in Commands Mode",
            mode=Mode.COMMAND_LIST,
            icon_id="run-command",
            handler_class=CommandHandler,
            own_suggestion_types=(SuggestionType.COMMAND_LIST,),
            kind=TriggerKind.PREFIX,
            trigger=settings.command_list_command,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-related-items",
            name="Open Related Items for selected suggestion or editor",
            mode=Mode.RELATED_ITEMS_LIST,
            icon_id="lucide-file-plus-2",
            handler_class=RelatedItemsHandler,
            own_suggestion_types=(SuggestionType.RELATED_ITEMS_LIST,),
            kind=TriggerKind.SOURCED,
            trigger=settings.related_items_list_command,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-related-items-active",
            name="Open Related Items for the active editor",
            mode=Mode.RELATED_ITEMS_LIST,
            icon_id="lucide-file-plus-2",
            handler_class=RelatedItemsHandler,
            kind=TriggerKind.PREFIX,
            trigger=settings.related_items_list_active_editor_command,
            use_active_editor_as_source=True,
        ),
        TriggerDefinition(
            command_id="switcher-plus:open-vaults",
            name="Open in Vaults Mode",
            mode=Mode.VAULT_LIST,
            icon_id="vault",
            handler_class=VaultHandler,
            own_suggestion_types=(SuggestionType.VAULT_LIST,),
            kind=TriggerKind.PREFIX,
            trigger=settings.vault_list_command,
        ),
    ]
