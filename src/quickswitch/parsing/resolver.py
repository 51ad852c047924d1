"""
Precedence resolution for scanned trigger occurrences.

Sourced occurrences are validated first, in the order they appear, followed
by the single prefix occurrence at position 0 if there is one. A sourced
trigger typed after other text is more specific than a whole-input prefix
mode.

Each command's filter text runs from the end of its trigger to the end of
the clean input. It is not cut at the next trigger: "#foo @bar" gives the
headings command "foo @bar".
"""

from collections.abc import Iterable
from dataclasses import dataclass

from quickswitch.commands.definitions import TriggerDefinition
from quickswitch.core.types import Mode, TriggerKind
from quickswitch.parsing.scanner import RawOccurrence


@dataclass(frozen=True)
class ResolvedCommand:
    """A candidate command ready for handler validation.

    Params:
        definition: Definition owning the trigger
        trigger: The exact trigger string matched
        index: Position of the trigger in the clean input
        filter_text: Clean input after the trigger
    """

    definition: TriggerDefinition
    trigger: str
    index: int
    filter_text: str

    @property
    def mode(self) -> Mode:
        return self.definition.mode


def resolve_precedence(
    occurrences: Iterable[RawOccurrence], clean_input: str
) -> list[ResolvedCommand]:
    """
    Order occurrences for validation and compute their filter text.

    Params:
        occurrences: Occurrences produced by the scanner
        clean_input: Clean input the occurrence positions refer to

    Returns:
        Sourced commands by ascending position, then the prefix command
    """
    sourced: list[ResolvedCommand] = []
    prefix: ResolvedCommand | None = None

    for occurrence in occurrences:
        resolved = ResolvedCommand(
            definition=occurrence.definition,
            trigger=occurrence.trigger,
            index=occurrence.index,
            filter_text=clean_input[occurrence.index + len(occurrence.trigger) :],
        )

        kind = occurrence.definition.kind
        if kind is TriggerKind.PREFIX and occurrence.index == 0 and prefix is None:
            prefix = resolved
        elif kind is TriggerKind.SOURCED:
            sourced.append(resolved)

    sourced.sort(key=lambda command: command.index)
    if prefix is not None:
        sourced.append(prefix)
    return sourced
