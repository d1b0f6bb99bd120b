"""
Character display module for the arena.

Provides the stat table shown at the start of every battle turn.
"""

from rich.markup import escape
from rich.table import Table

from arena.core.utils import format_number, make_bar

from .main import Combatant


def create_stats_table(combatant: Combatant) -> Table:
    """
    Builds a table with the combatant's name, health, attack and defense.

    Boosts from the equipped item are shown next to the base stat.

    Args:
        combatant (Combatant): The combatant to describe.

    Returns:
        Table: The rich table, ready to be printed.

    """
    table = Table(show_header=False, pad_edge=False, box=None)
    table.add_column("Stat", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Name", f"[bold]{escape(combatant.name)}[/]")
    table.add_row(
        "Health",
        f"{format_number(combatant.health)} "
        f"{make_bar(combatant.health, combatant.max_health, color='green')}",
    )
    table.add_row(
        "Attack Power",
        _with_boost(combatant.attack_power, combatant.effective_attack_power),
    )
    table.add_row(
        "Defense Power",
        _with_boost(combatant.defense_power, combatant.effective_defense_power),
    )
    if combatant.equipped_item:
        table.add_row("Equipped", combatant.equipped_item.colored_name)
    return table


def _with_boost(base: float, effective: float) -> str:
    if effective == base:
        return format_number(base)
    return f"{format_number(base)} [green](+{format_number(effective - base)})[/]"

