"""
Exception classes for quickswitch.

Parsing user input never raises: malformed escapes are literal text and
unvalidated commands fall back to Standard mode. These exceptions cover
lookups that callers expect to succeed.
"""


class QuickSwitchError(Exception):
    """Base exception for all quickswitch errors."""

    pass


class HandlerNotFoundError(QuickSwitchError):
    """Raised when an identifier cannot be resolved to a handler."""

    def __init__(self, identifier: object):
        """
        Initialize the exception.

        Params:
            identifier: The mode, suggestion or trigger string that was looked up
        """
        self.identifier = identifier
        super().__init__(f"No handler registered for {identifier!r}")
