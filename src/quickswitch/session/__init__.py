"""
quickswitch input session state.

This package provides the per-parse InputInfo record, session options and the
per-mode parse records written by handlers.
"""

from quickswitch.session.input_info import (
    InputInfo,
    ParsedCommand,
    SessionOpts,
    SourceInfo,
)

__all__ = [
    "InputInfo",
    "ParsedCommand",
    "SessionOpts",
    "SourceInfo",
]
