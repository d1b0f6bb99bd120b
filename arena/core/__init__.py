"""
Core system module for the arena.

This package contains the shared building blocks of the game: constants and
enumerations, logging setup, runtime settings, error types, console helpers
and the static content tables (imported directly from ``arena.core.content``).
"""

from .constants import ItemType, NiceEnum, Scene
from .errors import InvalidChoiceError
from .utils import ccapture, cprint, crule, format_number, make_bar

__all__ = [
    "InvalidChoiceError",
    "ItemType",
    "NiceEnum",
    "Scene",
    "ccapture",
    "cprint",
    "crule",
    "format_number",
    "make_bar",
]
