"""
Constants and enumerations for the arena.

Defines the scenes of the game loop, item boost types and the fixed menu
labels shared between the scene controller and the command-line interface.
"""

from enum import Enum


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class Scene(NiceEnum):
    """Defines the discrete phases of the game loop."""

    NAMING_INPUT = "NAMING_INPUT"
    CLASS_SELECTION = "CLASS_SELECTION"
    BATTLE = "BATTLE"
    MAIN_MENU = "MAIN_MENU"


class ItemType(NiceEnum):
    """Defines which stat an item boosts while it is equipped."""

    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"

    @property
    def color(self) -> str:
        """Returns the color string associated with this item type."""
        return {
            ItemType.ATTACK: "bold red",
            ItemType.DEFENSE: "bold blue",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies item type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


# Labels for the binary confirmation prompts.
YES = "Yes"
NO = "No"

# Labels for the battle menu.
ATTACK = "Attack"
DODGE = "Dodge"
EQUIP_ITEM = "Equip Item"
