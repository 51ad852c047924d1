"""
Trigger lookup for the input scanner.

Triggers are grouped by their first character and each group is sorted
longest first, so the first trigger in a group that matches the input at a
position is also the longest one. With "::" and ":" both configured, input
"::" matches "::".
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from quickswitch.commands.definitions import TriggerDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MappedTrigger:
    """A trigger string and the definition it belongs to."""

    definition: TriggerDefinition
    trigger: str


class TriggerIndex:
    """First-character index over all triggerable definitions."""

    def __init__(self, definitions: Iterable[TriggerDefinition]):
        self._groups = self._build(definitions)

    @staticmethod
    def _build(
        definitions: Iterable[TriggerDefinition],
    ) -> dict[str, list[MappedTrigger]]:
        groups: dict[str, list[MappedTrigger]] = {}
        seen: dict[str, TriggerDefinition] = {}

        for definition in definitions:
            if not definition.is_triggerable:
                continue

            trigger = definition.trigger
            if trigger in seen:
                # Stable sort below keeps the earlier definition in front
                logger.warning(
                    "Trigger %r of %s is already used by %s and will never match",
                    trigger,
                    definition.command_id,
                    seen[trigger].command_id,
                )
            else:
                seen[trigger] = definition

            groups.setdefault(trigger[0], []).append(MappedTrigger(definition, trigger))

        for group in groups.values():
            group.sort(key=lambda mapped: len(mapped.trigger), reverse=True)

        return groups

    def match(self, text: str, index: int) -> MappedTrigger | None:
        """
        Find the longest trigger starting at a position in text.

        Params:
            text: Input text
            index: Position to match at

        Returns:
            The matching trigger, or None
        """
        if index >= len(text):
            return None

        candidates = self._groups.get(text[index])
        if not candidates:
            return None

        for mapped in candidates:
            if text.startswith(mapped.trigger, index):
                return mapped

        return None

    def triggers_for(self, first_char: str) -> list[str]:
        """List the triggers starting with a character, longest first."""
        return [mapped.trigger for mapped in self._groups.get(first_char, [])]

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())
