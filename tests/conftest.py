"""
Shared test fixtures and utilities for the quickswitch test suite.

Trigger strings used throughout the tests are the SwitcherSettings defaults:
editors "edt ", symbols "@", headings "#", related items "~", workspaces "+",
escape marker "!".
"""

from unittest.mock import Mock

import pytest

from quickswitch.commands import HandlerRegistry, TriggerDefinition, get_command_definitions
from quickswitch.core.types import ActiveContext, Mode, Suggestion, SuggestionType, TriggerKind
from quickswitch.handlers import Handler
from quickswitch.parsing import InputParser
from quickswitch.session import ParsedCommand
from quickswitch.settings import SwitcherSettings


def _make_definition(
    mode: Mode,
    trigger: str,
    kind: TriggerKind,
    handler_class: type[Handler] | None = None,
    use_active_editor_as_source: bool = False,
) -> TriggerDefinition:
    return TriggerDefinition(
        command_id=f"test:{mode.name.lower()}:{kind.value}:{trigger}",
        mode=mode,
        kind=kind,
        trigger=trigger,
        handler_class=handler_class or Mock(),
        use_active_editor_as_source=use_active_editor_as_source,
    )


def _make_mock_handler(is_validated: bool = False) -> Mock:
    handler = Mock(spec=Handler)
    handler.validate_command.return_value = ParsedCommand(is_validated=is_validated)
    return handler


@pytest.fixture
def make_definition():
    """Factory for minimal TriggerDefinition instances.

    Usage:
        def test_something(make_definition):
            definition = make_definition(Mode.SYMBOL_LIST, "@", TriggerKind.SOURCED)
    """
    return _make_definition


@pytest.fixture
def make_mock_handler():
    """Factory for mock handlers returning a fixed validation outcome."""
    return _make_mock_handler


@pytest.fixture
def settings():
    """Default switcher settings."""
    return SwitcherSettings()


@pytest.fixture
def definitions(settings):
    """Built-in command definitions for the default settings."""
    return get_command_definitions(settings)


@pytest.fixture
def registry(settings, definitions):
    """Handler registry over the built-in definitions."""
    return HandlerRegistry(settings, definitions)


@pytest.fixture
def parser(registry, settings, definitions):
    """Input parser over the built-in definitions."""
    return InputParser(registry, settings, definitions)


@pytest.fixture
def test_definitions():
    """Headings/editor prefix and symbol/related items sourced definitions."""
    return [
        _make_definition(Mode.HEADINGS_LIST, "#", TriggerKind.PREFIX),
        _make_definition(Mode.EDITOR_LIST, "edt ", TriggerKind.PREFIX),
        _make_definition(Mode.SYMBOL_LIST, "@", TriggerKind.SOURCED),
        _make_definition(Mode.RELATED_ITEMS_LIST, "~", TriggerKind.SOURCED),
    ]


@pytest.fixture
def mock_registry():
    """Mock handler registry with no handlers registered."""
    registry = Mock(spec=HandlerRegistry)
    registry.get_handler.return_value = None
    return registry


@pytest.fixture
def file_suggestion():
    """A file suggestion that can act as a source."""
    return Suggestion(type=SuggestionType.FILE, file="notes/daily.md")


@pytest.fixture
def active_context():
    """An active editor with an open document."""
    return ActiveContext(file="notes/active.md")
