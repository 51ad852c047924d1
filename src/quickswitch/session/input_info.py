"""
Input session state for the switcher.

An InputInfo is created for every keystroke that reaches the parser. It
records the raw and clean input, the mode the parser resolved, and the
per-mode parse records written by handlers during validation.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from quickswitch.core.types import Mode, Suggestion

if TYPE_CHECKING:
    from quickswitch.parsing.resolver import ResolvedCommand


@dataclass
class SessionOpts:
    """Options that live for one opening of the switcher.

    Params:
        mode: Mode the switcher was asked to open in, consumed once
        use_active_editor_as_source: Staged by the parser from the trigger
            definition before each handler validation
    """

    mode: Mode | None = None
    use_active_editor_as_source: bool = False


@dataclass
class SourceInfo:
    """The item a sourced command draws its results from."""

    file: str | None = None
    suggestion: Suggestion | None = None
    is_valid_source: bool = False


@dataclass
class ParsedCommand:
    """Outcome of a handler validating a command.

    Params:
        is_validated: True when the handler accepted the command
        parsed_input: Normalized filter text for the handler
        index: Position of the trigger in the clean input
        source: Source item for sourced commands
    """

    is_validated: bool = False
    parsed_input: str | None = None
    index: int = -1
    source: SourceInfo | None = None


class InputInfo:
    """State of the switcher input for a single parse."""

    def __init__(
        self,
        input_text: str = "",
        mode: Mode = Mode.STANDARD,
        session_opts: SessionOpts | None = None,
    ):
        self.input_text = input_text
        self.clean_input = input_text
        self.mode = mode
        self.session_opts = session_opts if session_opts is not None else SessionOpts()
        self.active_command: "ResolvedCommand | None" = None
        self._parsed_commands: dict[Mode, ParsedCommand] = {
            Mode.STANDARD: ParsedCommand(parsed_input=input_text),
        }

    def parsed_command(self, mode: Mode | None = None) -> ParsedCommand:
        """
        Get the parse record for a mode, creating an empty one on first access.

        Params:
            mode: Mode to look up, defaults to the current mode

        Returns:
            The mutable ParsedCommand for that mode
        """
        mode = mode if mode is not None else self.mode
        if mode not in self._parsed_commands:
            self._parsed_commands[mode] = ParsedCommand()
        return self._parsed_commands[mode]

    def reset_parsed_command(self, mode: Mode) -> ParsedCommand:
        """Replace the record for a mode with an empty one and return it."""
        self._parsed_commands[mode] = ParsedCommand()
        return self._parsed_commands[mode]

    def clear_parsed_commands(self) -> None:
        """Drop every per-mode record; Standard filters on the clean input."""
        self._parsed_commands = {
            Mode.STANDARD: ParsedCommand(parsed_input=self.clean_input),
        }

    def __repr__(self) -> str:
        return (
            f"InputInfo(input_text={self.input_text!r}, "
            f"clean_input={self.clean_input!r}, mode={self.mode})"
        )
