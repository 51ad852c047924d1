"""
Single pass scanner over switcher input.

The scanner walks the raw input once and produces the clean input (escape
markers in front of real triggers removed) together with every unescaped
trigger occurrence and its position in the clean input.

At each position, in order:
  1. escape marker followed by a trigger: the trigger is copied as literal
     text and no occurrence is recorded
  2. a trigger: an occurrence is recorded and the trigger is copied
  3. anything else: one character is copied

Only one layer of escaping is structural. An escape marker that is not
directly followed by a trigger is ordinary text, so "!!@" scans to "!@".
"""

from dataclasses import dataclass

from quickswitch.commands.definitions import TriggerDefinition
from quickswitch.parsing.trigger_index import TriggerIndex


@dataclass(frozen=True)
class RawOccurrence:
    """An unescaped trigger found in the input.

    Params:
        definition: Definition owning the trigger
        trigger: The exact trigger string matched
        index: Position of the trigger in the clean input
    """

    definition: TriggerDefinition
    trigger: str
    index: int


class Scanner:
    """Tokenizer for switcher input."""

    def __init__(self, trigger_index: TriggerIndex, escape_marker: str):
        """
        Params:
            trigger_index: Longest-first trigger lookup
            escape_marker: Non-empty marker forcing the next trigger to be literal
        """
        self.trigger_index = trigger_index
        self.escape_marker = escape_marker

    def scan(self, raw_input: str) -> tuple[str, list[RawOccurrence]]:
        """
        Scan raw input.

        Python strings index by codepoint, so copying one character never
        splits a surrogate pair; multi-codepoint clusters are copied one
        codepoint at a time in their original order.

        Params:
            raw_input: Text typed into the switcher

        Returns:
            Tuple of clean input and occurrences in left to right order
        """
        parts: list[str] = []
        clean_length = 0
        occurrences: list[RawOccurrence] = []
        escape_marker = self.escape_marker
        match = self.trigger_index.match

        i = 0
        end = len(raw_input)
        while i < end:
            if raw_input.startswith(escape_marker, i):
                escaped = match(raw_input, i + len(escape_marker))
                if escaped is not None:
                    parts.append(escaped.trigger)
                    clean_length += len(escaped.trigger)
                    i += len(escape_marker) + len(escaped.trigger)
                    continue

            found = match(raw_input, i)
            if found is not None:
                occurrences.append(
                    RawOccurrence(found.definition, found.trigger, clean_length)
                )
                parts.append(found.trigger)
                clean_length += len(found.trigger)
                i += len(found.trigger)
                continue

            parts.append(raw_input[i])
            clean_length += 1
            i += 1

        return "".join(parts), occurrences
