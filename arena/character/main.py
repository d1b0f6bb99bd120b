"""
Combatant module for the arena.

Defines the Combatant model shared by the player and the enemies: a name,
health, attack and defense, plus the items the combatant carries and the one
it has equipped.
"""

from typing import Any

from pydantic import BaseModel, Field

from arena.core.constants import ItemType
from arena.core.content import StatBlock
from arena.items.item import Item


class Combatant(BaseModel):
    """
    Represents an entity taking part in a battle.

    Health is only lowered through ``arena.combat.damage.attack``, which keeps
    it at zero or above. Equipping an item never changes the base stats; the
    bonus is applied through the ``effective_*`` properties.

    Attributes:
        name (str):
            The name of the combatant.
        health (float):
            The current health.
        attack_power (float):
            The base attack power.
        defense_power (float):
            The base defense power.
        max_health (float):
            The health the combatant started with, used to draw health bars.
        items (list[Item]):
            The items the combatant can equip.
        equipped_item (Item | None):
            The item currently equipped, if any.

    """

    name: str = Field(
        default="",
        description="The name of the combatant.",
    )
    health: float = Field(
        default=0,
        description="The current health.",
        ge=0,
    )
    attack_power: float = Field(
        default=0,
        description="The base attack power.",
        ge=0,
    )
    defense_power: float = Field(
        default=0,
        description="The base defense power.",
        ge=0,
    )
    max_health: float = Field(
        default=0,
        description="The starting health, used for display.",
        ge=0,
    )
    items: list[Item] = Field(
        default_factory=list,
        description="The items the combatant can equip.",
    )
    equipped_item: Item | None = Field(
        default=None,
        description="The item currently equipped.",
    )

    def model_post_init(self, _: Any) -> None:
        """Defaults the maximum health to the starting health."""
        if self.max_health < self.health:
            self.max_health = self.health

    @classmethod
    def from_template(cls, template: StatBlock) -> "Combatant":
        """
        Creates a fresh combatant from a content table entry.

        Args:
            template (StatBlock): The enemy or class entry to copy stats from.

        Returns:
            Combatant: A new combatant at full health.

        """
        return cls(
            name=template.name,
            health=template.health,
            attack_power=template.attack_power,
            defense_power=template.defense_power,
        )

    @property
    def effective_attack_power(self) -> float:
        """Returns the attack power including the equipped item's bonus."""
        return self.attack_power + self._boost(ItemType.ATTACK)

    @property
    def effective_defense_power(self) -> float:
        """Returns the defense power including the equipped item's bonus."""
        return self.defense_power + self._boost(ItemType.DEFENSE)

    def _boost(self, boost_type: ItemType) -> float:
        if self.equipped_item and self.equipped_item.boost_type == boost_type:
            return self.equipped_item.stat_boost
        return 0

    def is_alive(self) -> bool:
        """Returns True if the combatant still has health left."""
        return self.health > 0

    def equip(self, item: Item) -> None:
        """
        Equips one of the carried items, replacing the current one.

        Args:
            item (Item): The item to equip.

        Raises:
            ValueError: If the combatant does not carry the item.

        """
        if item not in self.items:
            raise ValueError(f"{self.name} does not carry {item.name}")
        self.equipped_item = item

    def unequip(self) -> None:
        """Removes the equipped item, if any."""
        self.equipped_item = None
