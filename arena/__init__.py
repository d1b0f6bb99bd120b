"""
Battle Arena: a text-based turn-combat game.

The player names a hero, picks a class and fights a fixed roster of enemies
one after the other.
"""

__version__ = "0.1.0"
