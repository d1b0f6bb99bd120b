"""
Character package for the arena.
"""

from .main import Combatant

__all__ = ["Combatant"]
