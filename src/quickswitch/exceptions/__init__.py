"""
quickswitch exception classes.

This package provides the exception types used throughout quickswitch.
"""

from quickswitch.exceptions.core import HandlerNotFoundError, QuickSwitchError

__all__ = [
    "QuickSwitchError",
    "HandlerNotFoundError",
]
