"""
Damage module for the arena.

Handles damage calculation and its application to a defending combatant.
"""

from catchery import log_debug

from arena.character.main import Combatant


def calculate_damage(attack_power: float, defense_power: float) -> float:
    """
    Calculates the amount of damage an attack deals.

    Args:
        attack_power (float): The attacker's attack power.
        defense_power (float): The defender's defense power.

    Returns:
        float: The damage dealt, never below zero.

    """
    return max(0.0, attack_power - defense_power)


def attack(attacker: Combatant, defender: Combatant) -> float:
    """
    Resolves an attack and lowers the defender's health.

    The defender is modified in place and its health never drops below zero.
    The attacker is left untouched.

    Args:
        attacker (Combatant): The combatant initiating the attack.
        defender (Combatant): The combatant being attacked.

    Returns:
        float: The damage dealt to the defender.

    """
    damage = calculate_damage(
        attacker.effective_attack_power,
        defender.effective_defense_power,
    )
    defender.health = max(0.0, defender.health - damage)
    log_debug(
        f"{attacker.name} hits {defender.name} for {damage:g}",
        {
            "attacker": attacker.name,
            "defender": defender.name,
            "damage": damage,
            "defender_health": defender.health,
            "context": "attack_resolution",
        },
    )
    return damage
