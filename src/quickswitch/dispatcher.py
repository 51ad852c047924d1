"""
Mode dispatch for a switcher session.

The ModeDispatcher owns the command definitions, the handler registry and the
input parser for one switcher. The host calls update_input on every
(debounced) keystroke and reads the resolved mode and filter text back from
the returned InputInfo.
"""

import logging
from dataclasses import replace
from typing import NamedTuple

from quickswitch.commands import HandlerRegistry, get_command_definitions
from quickswitch.core.types import ActiveContext, Mode, Suggestion
from quickswitch.parsing import InputParser
from quickswitch.session import InputInfo, SessionOpts
from quickswitch.settings import SwitcherSettings

logger = logging.getLogger(__name__)


class InitialInput(NamedTuple):
    """Text a newly opened session starts with and where its selection begins."""

    text: str
    selection_start: int


class FulltextQuery(NamedTuple):
    """Query forwarded to a global text search."""

    mode: Mode
    parsed_input: str | None
    file: str | None


class ModeDispatcher:
    """Runs the input parser for a switcher and keeps per-session state."""

    def __init__(self, settings: SwitcherSettings | None = None):
        """
        Params:
            settings: Switcher settings, defaults to SwitcherSettings()
        """
        self.settings = settings if settings is not None else SwitcherSettings()
        self.previous_input_history: dict[Mode, InputInfo] = {}
        self.session_opts = SessionOpts()
        self._build()
        self.reset()

    def _build(self) -> None:
        self.definitions = get_command_definitions(self.settings)
        self.handler_registry = HandlerRegistry(self.settings, self.definitions)
        self.input_parser = InputParser(
            self.handler_registry, self.settings, self.definitions
        )

    @property
    def input_info(self) -> InputInfo:
        return self._input_info

    def apply_settings(self, settings: SwitcherSettings) -> None:
        """Rebuild definitions, registry and parser from new settings."""
        self.settings = settings
        self._build()
        self.reset()
        logger.debug("Switcher rebuilt with %d command definitions", len(self.definitions))

    def reset(self) -> None:
        """Start over with empty input and no source context."""
        self._input_info = InputInfo()
        self.session_opts = SessionOpts()
        self.handler_registry.reset_sourced_handlers()

    def set_session_open_mode(self, session_opts: SessionOpts | None = None) -> None:
        """
        Prepare a new opening of the switcher.

        Params:
            session_opts: Options for this opening, copied
        """
        self.reset()
        if session_opts is not None:
            self.session_opts = replace(session_opts)

    def initial_input_for_session(self) -> InitialInput | None:
        """
        Get the text a freshly opened session should start with.

        Only the first call after set_session_open_mode returns a value.

        Returns:
            The initial input, or None when the input should stay empty
        """
        mode = self.session_opts.mode
        if mode is None:
            return None

        self.session_opts.mode = None

        previous = self.previous_input_history.get(mode)
        previous_text = previous.input_text if previous is not None else ""
        command_string = ""
        if mode is not Mode.STANDARD:
            handler = self.handler_registry.require_handler(mode)
            command_string = handler.get_command_string(self.session_opts)

        if mode is Mode.COMMAND_LIST:
            preserve = self.settings.preserve_command_palette_last_input
        else:
            preserve = self.settings.preserve_quick_switcher_last_input

        if preserve and previous_text:
            return InitialInput(previous_text, len(command_string))
        if command_string:
            return InitialInput(command_string, len(command_string))
        return None

    def determine_run_mode(
        self,
        query: str | None,
        active_suggestion: Suggestion | None = None,
        active_context: ActiveContext | None = None,
    ) -> InputInfo:
        """
        Parse a query into a fresh InputInfo.

        Params:
            query: Raw switcher input
            active_suggestion: Suggestion currently selected in the list
            active_context: Item active in the host application

        Returns:
            InputInfo with the resolved mode
        """
        text = query or ""
        info = InputInfo(text, Mode.STANDARD, self.session_opts)

        if not text:
            self.reset()
            return info

        self.input_parser.parse_input_for_mode(
            info, text, active_suggestion, active_context
        )
        return info

    def update_input(
        self,
        query: str | None,
        active_suggestion: Suggestion | None = None,
        active_context: ActiveContext | None = None,
    ) -> InputInfo:
        """Resolve the mode for a query and make it the current input."""
        info = self.determine_run_mode(query, active_suggestion, active_context)
        self._input_info = info
        self.previous_input_history[info.mode] = info
        return info

    def input_text_for_standard_mode(self, input_text: str) -> str:
        """Get the text the built-in search should run with."""
        info = self._input_info
        if info.mode is Mode.STANDARD and info.clean_input:
            return info.clean_input
        return input_text

    def input_text_for_fulltext_search(self) -> FulltextQuery:
        """Get the mode, filter text and source file for a global text search."""
        info = self._input_info
        if info.mode is Mode.STANDARD:
            return FulltextQuery(info.mode, info.clean_input, None)

        cmd = info.parsed_command()
        file = None
        if info.mode in self.handler_registry.sourced_modes and cmd.source is not None:
            file = cmd.source.file
        return FulltextQuery(info.mode, cmd.parsed_input, file)
