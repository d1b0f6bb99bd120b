"""
Static content tables for the arena.

Holds the fixed enemy roster, the selectable class presets and the items each
class starts with. The tables are validated by pydantic when this module is
imported, and the scene controller builds fresh combatants from them every
time a game starts.
"""

from pydantic import BaseModel, Field

from arena.core.constants import ItemType
from arena.items.item import Item


class StatBlock(BaseModel):
    """The base statistics shared by enemies and class presets."""

    model_config = {"frozen": True}

    name: str = Field(
        description="The display name.",
        min_length=1,
    )
    health: float = Field(
        description="The starting health.",
        ge=0,
    )
    attack_power: float = Field(
        description="The base attack power.",
        ge=0,
    )
    defense_power: float = Field(
        description="The base defense power.",
        ge=0,
    )


class EnemyTemplate(StatBlock):
    """An entry of the enemy roster."""


class ClassPreset(StatBlock):
    """A selectable player class, with the items it starts with."""

    items: tuple[Item, ...] = Field(
        default=(),
        description="The items handed to the player when this class is picked.",
    )


# The items, by name.
ITEMS: dict[str, Item] = {
    item.name: item
    for item in (
        Item(name="Wand", stat_boost=5, boost_type=ItemType.ATTACK),
        Item(name="Cloak", stat_boost=5, boost_type=ItemType.DEFENSE),
        Item(name="Sword", stat_boost=10, boost_type=ItemType.ATTACK),
        Item(name="Shield", stat_boost=10, boost_type=ItemType.DEFENSE),
    )
}

# The enemies, in the order they are fought.
ENEMY_ROSTER: tuple[EnemyTemplate, ...] = (
    EnemyTemplate(name="Slime", health=10, attack_power=1, defense_power=0),
    EnemyTemplate(name="Zom-B", health=15, attack_power=12, defense_power=2),
    EnemyTemplate(name="Kris", health=25, attack_power=20, defense_power=5),
)

# The selectable classes, in the order they are offered.
CLASS_PRESETS: tuple[ClassPreset, ...] = (
    ClassPreset(
        name="Wizard",
        health=50,
        attack_power=25,
        defense_power=5,
        items=(ITEMS["Wand"], ITEMS["Cloak"]),
    ),
    ClassPreset(
        name="Knight",
        health=75,
        attack_power=15,
        defense_power=10,
        items=(ITEMS["Sword"], ITEMS["Shield"]),
    ),
)
