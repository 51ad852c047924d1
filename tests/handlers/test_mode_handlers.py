"""
Tests for mode handlers.

This module tests:
- Prefix validation at position 0 only
- Source selection for sourced handlers
- Source state kept between validations and reset
- Command strings derived from settings
"""

import pytest

from quickswitch.core.types import ActiveContext, Mode, Suggestion, SuggestionType
from quickswitch.handlers import (
    BookmarksHandler,
    CommandHandler,
    EditorHandler,
    HeadingsHandler,
    RelatedItemsHandler,
    StandardHandler,
    SymbolHandler,
    VaultHandler,
    WorkspaceHandler,
)
from quickswitch.session import InputInfo, SessionOpts
from quickswitch.settings import SwitcherSettings

PREFIX_HANDLERS = [
    EditorHandler,
    WorkspaceHandler,
    HeadingsHandler,
    BookmarksHandler,
    CommandHandler,
    VaultHandler,
]


class TestStandardHandler:
    def test_never_validates(self, settings):
        info = InputInfo("foo")

        cmd = StandardHandler(settings).validate_command(info, 0, "foo", None, None)

        assert cmd is info.parsed_command(Mode.STANDARD)
        assert not cmd.is_validated

    def test_has_no_command_string(self, settings):
        assert StandardHandler(settings).get_command_string() == ""


class TestPrefixModeHandler:
    """Test handlers whose trigger must start the input."""

    @pytest.mark.parametrize("handler_class", PREFIX_HANDLERS, ids=lambda c: c.__name__)
    def test_validates_at_start(self, settings, handler_class):
        info = InputInfo()

        cmd = handler_class(settings).validate_command(info, 0, "filter", None, None)

        assert cmd is info.parsed_command(handler_class.mode)
        assert cmd.is_validated
        assert cmd.index == 0
        assert cmd.parsed_input == "filter"

    @pytest.mark.parametrize("handler_class", PREFIX_HANDLERS, ids=lambda c: c.__name__)
    def test_rejects_later_position(self, settings, handler_class):
        info = InputInfo()

        cmd = handler_class(settings).validate_command(info, 3, "filter", None, None)

        assert not cmd.is_validated
        assert cmd.parsed_input is None

    def test_rejection_clears_earlier_validation(self, settings):
        """Test that a rejected command does not keep a previous acceptance."""
        info = InputInfo()
        headings = HeadingsHandler(settings)
        headings.validate_command(info, 0, "first", None, None)

        cmd = headings.validate_command(info, 2, "second", None, None)

        assert not cmd.is_validated
        assert cmd.index == -1
        assert info.parsed_command(Mode.HEADINGS_LIST) is cmd

    def test_only_touches_own_record(self, settings):
        """Test that validation leaves other modes' records alone."""
        info = InputInfo("#foo")

        HeadingsHandler(settings).validate_command(info, 0, "foo", None, None)

        assert info.parsed_command(Mode.STANDARD).parsed_input == "#foo"
        assert info.mode is Mode.STANDARD

    @pytest.mark.parametrize(
        "handler_class,expected",
        [
            (EditorHandler, "edt "),
            (WorkspaceHandler, "+"),
            (HeadingsHandler, "#"),
            (BookmarksHandler, "'"),
            (CommandHandler, ">"),
            (VaultHandler, "vault "),
        ],
    )
    def test_command_string(self, settings, handler_class, expected):
        assert handler_class(settings).get_command_string() == expected


class TestSourcedModeHandler:
    """Test source selection of the symbol and related items handlers."""

    @pytest.fixture
    def symbols(self, settings):
        return SymbolHandler(settings)

    def validate(self, handler, index, suggestion=None, context=None, use_active=False):
        info = InputInfo(session_opts=SessionOpts(use_active_editor_as_source=use_active))
        return handler.validate_command(info, index, "foo", suggestion, context)

    def test_selected_suggestion_is_source(self, symbols, file_suggestion):
        cmd = self.validate(symbols, 4, file_suggestion)

        assert cmd.is_validated
        assert cmd.index == 4
        assert cmd.parsed_input == "foo"
        assert cmd.source.file == file_suggestion.file
        assert cmd.source.suggestion is file_suggestion

    def test_suggestion_preferred_over_context(self, symbols, file_suggestion, active_context):
        cmd = self.validate(symbols, 0, file_suggestion, active_context)

        assert cmd.source.file == file_suggestion.file

    def test_context_used_at_start(self, symbols, active_context):
        cmd = self.validate(symbols, 0, context=active_context)

        assert cmd.is_validated
        assert cmd.source.file == active_context.file
        assert cmd.source.suggestion is None

    def test_context_ignored_after_start(self, symbols, active_context):
        assert not self.validate(symbols, 2, context=active_context).is_validated

    def test_context_without_file(self, symbols):
        assert not self.validate(symbols, 0, context=ActiveContext()).is_validated

    def test_use_active_editor_ignores_suggestion(
        self, symbols, file_suggestion, active_context
    ):
        cmd = self.validate(symbols, 5, file_suggestion, active_context, use_active=True)

        assert cmd.is_validated
        assert cmd.source.file == active_context.file

    def test_use_active_editor_requires_context(self, symbols, file_suggestion):
        symbols.validate_command(InputInfo(), 0, "", file_suggestion, None)

        cmd = self.validate(symbols, 0, file_suggestion, use_active=True)

        assert not cmd.is_validated

    @pytest.mark.parametrize(
        "handler_class,suggestion_type,expected",
        [
            (SymbolHandler, SuggestionType.FILE, True),
            (SymbolHandler, SuggestionType.BOOKMARK, True),
            (SymbolHandler, SuggestionType.RELATED_ITEMS_LIST, True),
            (SymbolHandler, SuggestionType.SYMBOL_LIST, False),
            (SymbolHandler, SuggestionType.COMMAND_LIST, False),
            (RelatedItemsHandler, SuggestionType.SYMBOL_LIST, True),
            (RelatedItemsHandler, SuggestionType.HEADINGS_LIST, True),
            (RelatedItemsHandler, SuggestionType.RELATED_ITEMS_LIST, False),
            (RelatedItemsHandler, SuggestionType.VAULT_LIST, False),
        ],
    )
    def test_source_suggestion_types(self, settings, handler_class, suggestion_type, expected):
        suggestion = Suggestion(type=suggestion_type, file="doc.md")

        cmd = self.validate(handler_class(settings), 3, suggestion)

        assert cmd.is_validated is expected

    def test_suggestion_without_file(self, symbols):
        assert not self.validate(symbols, 3, Suggestion(type=SuggestionType.FILE)).is_validated

    def test_previous_source_kept(self, symbols, file_suggestion):
        """Test that a later validation without a source reuses the last one."""
        self.validate(symbols, 0, file_suggestion)

        cmd = self.validate(symbols, 0, Suggestion(type=SuggestionType.SYMBOL_LIST))

        assert cmd.is_validated
        assert cmd.source.file == file_suggestion.file
        assert symbols.source.file == file_suggestion.file

    def test_rejection_clears_record_in_same_input_info(self, symbols, file_suggestion):
        """Test that a reused InputInfo does not keep an earlier source."""
        info = InputInfo()
        symbols.validate_command(info, 0, "foo", file_suggestion, None)
        symbols.reset()

        cmd = symbols.validate_command(info, 0, "bar", None, None)

        assert not cmd.is_validated
        assert cmd.source is None
        assert cmd.parsed_input is None

    def test_reset_drops_source(self, symbols, file_suggestion):
        self.validate(symbols, 0, file_suggestion)

        symbols.reset()

        assert symbols.source is None
        assert not self.validate(symbols, 0).is_validated

    def test_command_string(self, settings):
        symbols = SymbolHandler(settings)

        assert symbols.get_command_string() == "@"
        assert symbols.get_command_string(SessionOpts()) == "@"
        assert symbols.get_command_string(SessionOpts(use_active_editor_as_source=True)) == "$ "

    def test_command_string_follows_settings(self):
        settings = SwitcherSettings(related_items_list_active_editor_command="rel ")
        related = RelatedItemsHandler(settings)

        assert related.get_command_string(SessionOpts(use_active_editor_as_source=True)) == "rel "
