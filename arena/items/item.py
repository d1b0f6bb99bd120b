"""
Item module for the arena.

Defines the Item model: a named, read-only stat bonus that a combatant can
equip. Items are never consumed.
"""

from pydantic import BaseModel, Field

from arena.core.constants import ItemType


class Item(BaseModel):
    """
    Represents an item that boosts one stat of the combatant wielding it.
    """

    model_config = {"frozen": True}

    name: str = Field(
        description="The name of the item.",
        min_length=1,
    )
    stat_boost: float = Field(
        description="The amount added to the boosted stat while equipped.",
        ge=0,
    )
    boost_type: ItemType = Field(
        default=ItemType.ATTACK,
        description="The stat boosted by this item (attack or defense).",
    )

    @property
    def colored_name(self) -> str:
        """Returns the item name colored by its boost type."""
        return self.boost_type.colorize(self.name)

    @property
    def description(self) -> str:
        """Returns a short description of the bonus, e.g. '+10 Attack'."""
        return f"+{self.stat_boost:g} {self.boost_type.display_name}"
