"""
Input parser for the switcher.

This module turns the text typed into the switcher into an operational mode.
Parsing runs in two phases:

  - parse: scan the input and order trigger occurrences by precedence. Pure,
    no handler is consulted.
  - parse_input_for_mode: walk the ordered commands and let each owning
    handler validate it. The first validated command sets the mode; without
    one the session falls back to Standard mode.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from quickswitch.commands.definitions import TriggerDefinition, get_command_definitions
from quickswitch.commands.registry import HandlerRegistry
from quickswitch.core.types import ActiveContext, Mode, Suggestion, TriggerKind
from quickswitch.parsing.resolver import ResolvedCommand, resolve_precedence
from quickswitch.parsing.scanner import Scanner
from quickswitch.parsing.trigger_index import TriggerIndex
from quickswitch.session.input_info import InputInfo
from quickswitch.settings import SwitcherSettings

logger = logging.getLogger(__name__)


@dataclass
class ParsedResult:
    """Result of the pure parsing phase.

    Params:
        clean_input: Input with escape markers in front of triggers removed
        resolved_commands: Candidate commands sorted by validation precedence
    """

    clean_input: str
    resolved_commands: list[ResolvedCommand] = field(default_factory=list)


class InputParser:
    """Parses switcher input and resolves the operational mode."""

    def __init__(
        self,
        handler_registry: HandlerRegistry,
        settings: SwitcherSettings,
        definitions: Iterable[TriggerDefinition],
    ):
        """
        Params:
            handler_registry: Registry used to find the handler of each command
            settings: Settings supplying the escape marker
            definitions: All command definitions
        """
        self.handler_registry = handler_registry
        self.escape_marker = settings.escape_cmd_char
        self.trigger_index = TriggerIndex(definitions)
        self.scanner = Scanner(self.trigger_index, self.escape_marker)

    def parse(self, input_text: str) -> ParsedResult:
        """
        Scan input and resolve command precedence without validation.

        Params:
            input_text: Raw text from the switcher input field

        Returns:
            ParsedResult with the clean input and the ordered candidate commands
        """
        clean_input, occurrences = self.scanner.scan(input_text)
        resolved_commands = resolve_precedence(occurrences, clean_input)

        logger.debug(
            "Parsed %r: %d occurrence(s), %d candidate command(s)",
            input_text,
            len(occurrences),
            len(resolved_commands),
        )
        return ParsedResult(clean_input=clean_input, resolved_commands=resolved_commands)

    def parse_input_for_mode(
        self,
        input_info: InputInfo,
        input_text: str | None = None,
        active_suggestion: Suggestion | None = None,
        active_context: ActiveContext | None = None,
    ) -> None:
        """
        Resolve the mode for the input and record it on input_info.

        Params:
            input_info: Session state, updated in place
            input_text: Raw input, defaults to input_info.input_text
            active_suggestion: Suggestion currently selected in the list
            active_context: Item active in the host application
        """
        if input_text is not None:
            input_info.input_text = input_text

        result = self.parse(input_info.input_text)
        input_info.clean_input = result.clean_input
        # Records describe this parse only
        input_info.clear_parsed_commands()

        validated = self._find_first_valid_command(
            result.resolved_commands, input_info, active_suggestion, active_context
        )

        if not validated:
            self.handler_registry.reset_sourced_handlers()
            input_info.mode = Mode.STANDARD
            input_info.active_command = None
            logger.debug("No command validated for %r, using Standard mode", input_info.input_text)

    def _find_first_valid_command(
        self,
        resolved_commands: list[ResolvedCommand],
        input_info: InputInfo,
        active_suggestion: Suggestion | None,
        active_context: ActiveContext | None,
    ) -> bool:
        for command in resolved_commands:
            definition = command.definition
            handler = self.handler_registry.get_handler(definition.mode)
            if handler is None:
                logger.debug("No handler registered for %s, skipping", definition.mode)
                continue

            # Handlers read this flag while validating
            input_info.session_opts.use_active_editor_as_source = (
                definition.use_active_editor_as_source
            )

            outcome = handler.validate_command(
                input_info,
                command.index,
                command.filter_text,
                active_suggestion,
                active_context,
            )
            if outcome is None or not outcome.is_validated:
                continue

            # A validated sourced command owns the source context now; every
            # other sourced handler drops what it kept.
            keep = [handler] if definition.kind is TriggerKind.SOURCED else []
            self.handler_registry.reset_sourced_handlers(keep)

            input_info.mode = definition.mode
            input_info.active_command = command
            logger.debug(
                "Command %s validated at index %d", definition.command_id, command.index
            )
            return True

        return False


def parse_input(input_text: str, settings: SwitcherSettings | None = None) -> ParsedResult:
    """
    Convenience function to parse input with the built-in command definitions.

    Params:
        input_text: Raw switcher input
        settings: Settings to build definitions from, defaults to SwitcherSettings()

    Returns:
        ParsedResult for the input
    """
    settings = settings if settings is not None else SwitcherSettings()
    definitions = get_command_definitions(settings)
    registry = HandlerRegistry(settings, definitions)
    return InputParser(registry, settings, definitions).parse(input_text)
