"""
Handler capability interface and the generic handler variants.

Every mode is served by exactly one handler. The parser only talks to
handlers through validate_command and reset; callers hold the Handler type,
never a concrete class.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from quickswitch.core.types import ActiveContext, Mode, Suggestion, SuggestionType
from quickswitch.session.input_info import (
    InputInfo,
    ParsedCommand,
    SessionOpts,
    SourceInfo,
)
from quickswitch.settings import SwitcherSettings


class Handler(ABC):
    """Abstract base class for mode handlers."""

    mode: ClassVar[Mode]
    # Name of the SwitcherSettings field holding this mode's trigger
    command_setting: ClassVar[str | None] = None

    def __init__(self, settings: SwitcherSettings):
        self.settings = settings

    @abstractmethod
    def validate_command(
        self,
        input_info: InputInfo,
        index: int,
        filter_text: str,
        active_suggestion: Suggestion | None,
        active_context: ActiveContext | None,
    ) -> ParsedCommand | None:
        """
        Decide whether a trigger found by the parser is valid for this mode.

        Implementations only mutate the InputInfo they are given.

        Params:
            input_info: Session state for the current parse
            index: Position of the trigger in the clean input
            filter_text: Clean input following the trigger
            active_suggestion: Suggestion currently selected in the list, if any
            active_context: Item active in the host application, if any

        Returns:
            The mode's ParsedCommand; is_validated tells whether the command won
        """
        pass

    def reset(self) -> None:
        """Drop any state kept between parses."""
        pass

    def get_command_string(self, session_opts: SessionOpts | None = None) -> str:
        """Get the trigger string that opens this mode."""
        if self.command_setting is None:
            return ""
        return getattr(self.settings, self.command_setting)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self.mode})"


class StandardHandler(Handler):
    """Default plain text search mode. Never claims a trigger."""

    mode = Mode.STANDARD

    def validate_command(
        self,
        input_info: InputInfo,
        index: int,
        filter_text: str,
        active_suggestion: Suggestion | None,
        active_context: ActiveContext | None,
    ) -> ParsedCommand | None:
        return input_info.parsed_command(Mode.STANDARD)


class PrefixModeHandler(Handler):
    """Handler for modes whose trigger is only meaningful at the start of input."""

    def validate_command(
        self,
        input_info: InputInfo,
        index: int,
        filter_text: str,
        active_suggestion: Suggestion | None,
        active_context: ActiveContext | None,
    ) -> ParsedCommand | None:
        cmd = input_info.reset_parsed_command(self.mode)
        if index == 0:
            cmd.index = index
            cmd.parsed_input = filter_text
            cmd.is_validated = True
        return cmd


class SourcedModeHandler(Handler):
    """
    Handler for modes that list content derived from a source item.

    The source is picked in this order: the active context when the session
    asks for it explicitly, the selected suggestion when it points at a
    document, the active context when the trigger starts the input, and
    finally the source kept from this handler's previous validation.
    """

    # Trigger used when the active context is the implicit source
    active_command_setting: ClassVar[str | None] = None
    source_suggestion_types: ClassVar[frozenset[SuggestionType]] = frozenset()

    def __init__(self, settings: SwitcherSettings):
        super().__init__(settings)
        self._source: SourceInfo | None = None

    @property
    def source(self) -> SourceInfo | None:
        return self._source

    def validate_command(
        self,
        input_info: InputInfo,
        index: int,
        filter_text: str,
        active_suggestion: Suggestion | None,
        active_context: ActiveContext | None,
    ) -> ParsedCommand | None:
        cmd = input_info.reset_parsed_command(self.mode)
        source = self.get_source_info(
            active_suggestion,
            active_context,
            is_prefix=index == 0,
            use_active_editor_as_source=input_info.session_opts.use_active_editor_as_source,
        )

        if source is not None:
            cmd.source = source
            cmd.index = index
            cmd.parsed_input = filter_text
            cmd.is_validated = True
            self._source = source

        return cmd

    def get_source_info(
        self,
        active_suggestion: Suggestion | None,
        active_context: ActiveContext | None,
        is_prefix: bool,
        use_active_editor_as_source: bool,
    ) -> SourceInfo | None:
        """
        Pick the source item for this mode.

        Params:
            active_suggestion: Suggestion currently selected in the list
            active_context: Item active in the host application
            is_prefix: True when the trigger sits at position 0
            use_active_editor_as_source: Only the active context may be used

        Returns:
            A valid SourceInfo, or None when no source is available
        """
        context_info = self.source_from_context(active_context)
        if use_active_editor_as_source:
            return context_info if context_info.is_valid_source else None

        suggestion_info = self.source_from_suggestion(active_suggestion)
        if suggestion_info.is_valid_source:
            return suggestion_info

        if is_prefix and context_info.is_valid_source:
            return context_info

        return self._source

    def source_from_suggestion(self, suggestion: Suggestion | None) -> SourceInfo:
        if suggestion is None or suggestion.type not in self.source_suggestion_types:
            return SourceInfo(suggestion=suggestion)
        return SourceInfo(
            file=suggestion.file,
            suggestion=suggestion,
            is_valid_source=suggestion.file is not None,
        )

    def source_from_context(self, context: ActiveContext | None) -> SourceInfo:
        if context is None or not context.has_file:
            return SourceInfo()
        return SourceInfo(file=context.file, is_valid_source=True)

    def reset(self) -> None:
        self._source = None

    def get_command_string(self, session_opts: SessionOpts | None = None) -> str:
        if (
            session_opts is not None
            and session_opts.use_active_editor_as_source
            and self.active_command_setting is not None
        ):
            return getattr(self.settings, self.active_command_setting)
        return super().get_command_string(session_opts)
