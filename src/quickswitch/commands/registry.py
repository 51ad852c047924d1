"""
Handler registry for the switcher.

The registry maps modes, suggestion types and trigger strings to the handler
serving them. It is constructed once by the application root from the command
definitions and passed to every component that needs a handler lookup.
"""

import logging
from collections.abc import Iterable

from quickswitch.commands.definitions import TriggerDefinition
from quickswitch.core.types import Mode, Suggestion, SuggestionType, TriggerKind
from quickswitch.exceptions import HandlerNotFoundError
from quickswitch.handlers import Handler
from quickswitch.settings import SwitcherSettings

logger = logging.getLogger(__name__)

HandlerIdentifier = Mode | Suggestion | str


class HandlerRegistry:
    """Lookup and lazy instantiation of mode handlers.

    Lookup tables:
      - mode -> handler class (used to instantiate handlers)
      - suggestion type -> mode
      - trigger string -> mode

    Handlers are created on first access and cached per mode. Handlers of
    modes with a sourced trigger keep state between parses and are reset
    through reset_sourced_handlers.
    """

    def __init__(
        self,
        settings: SwitcherSettings,
        definitions: Iterable[TriggerDefinition],
    ):
        self.settings = settings
        self.instance_cache: dict[Mode, Handler] = {}
        self.mode_to_handler_class: dict[Mode, type[Handler]] = {}
        self.suggestion_type_to_mode: dict[SuggestionType, Mode] = {}
        self.trigger_to_mode: dict[str, Mode] = {}
        self.sourced_modes: set[Mode] = set()

        for definition in definitions:
            self._register(definition)

    def _register(self, definition: TriggerDefinition) -> None:
        self.mode_to_handler_class[definition.mode] = definition.handler_class

        for suggestion_type in definition.own_suggestion_types:
            self.suggestion_type_to_mode[suggestion_type] = definition.mode

        if definition.trigger:
            # First definition in configuration order owns a duplicate trigger
            self.trigger_to_mode.setdefault(definition.trigger, definition.mode)

        if definition.kind is TriggerKind.SOURCED:
            self.sourced_modes.add(definition.mode)

    def resolve_mode(self, identifier: HandlerIdentifier) -> Mode | None:
        """
        Resolve a mode, a suggestion or a trigger string to a mode.

        Params:
            identifier: Mode, suggestion (looked up by its type) or trigger string

        Returns:
            The resolved mode, or None when the identifier is unknown
        """
        if isinstance(identifier, Mode):
            return identifier
        if isinstance(identifier, Suggestion):
            return self.suggestion_type_to_mode.get(identifier.type)
        if isinstance(identifier, str):
            return self.trigger_to_mode.get(identifier)
        return None

    def get_handler(self, identifier: HandlerIdentifier) -> Handler | None:
        """
        Get the handler for an identifier, instantiating it on first access.

        Params:
            identifier: Mode, suggestion or trigger string

        Returns:
            The cached handler instance, or None if nothing is registered
        """
        mode = self.resolve_mode(identifier)
        if mode is None:
            return None

        handler = self.instance_cache.get(mode)
        if handler is None:
            handler_class = self.mode_to_handler_class.get(mode)
            if handler_class is None:
                return None
            handler = handler_class(self.settings)
            self.instance_cache[mode] = handler

        return handler

    def require_handler(self, identifier: HandlerIdentifier) -> Handler:
        """Get the handler for an identifier.

        Raises:
            HandlerNotFoundError: If the identifier does not resolve to a handler
        """
        handler = self.get_handler(identifier)
        if handler is None:
            raise HandlerNotFoundError(identifier)
        return handler

    def reset_sourced_handlers(self, exclude: Iterable[Handler] = ()) -> None:
        """
        Reset every instantiated sourced handler not listed in exclude.

        Handlers that were never instantiated hold no state and are skipped.

        Params:
            exclude: Handlers whose state must be kept
        """
        excluded = {id(handler) for handler in exclude}

        for mode in self.sourced_modes:
            handler = self.instance_cache.get(mode)
            if handler is not None and id(handler) not in excluded:
                logger.debug("Resetting sourced handler %r", handler)
                handler.reset()
