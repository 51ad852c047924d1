"""
quickswitch - Input command parser for a fuzzy-finder command palette

quickswitch resolves the text typed into a single search box into a switcher
mode and the filter text that mode operates on.
"""

from importlib.metadata import version

from quickswitch.dispatcher import ModeDispatcher
from quickswitch.parsing import InputParser, parse_input
from quickswitch.settings import SwitcherSettings

__version__ = version("quickswitch")

__all__ = [
    "__version__",
    "InputParser",
    "ModeDispatcher",
    "SwitcherSettings",
    "parse_input",
]
