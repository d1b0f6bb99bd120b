"""
Game state module for the arena.

Holds everything the scene controller mutates between two updates.
"""

from dataclasses import dataclass, field

from arena.character.main import Combatant
from arena.core.constants import Scene
from arena.core.content import ENEMY_ROSTER, EnemyTemplate


def build_enemies(roster: tuple[EnemyTemplate, ...] = ENEMY_ROSTER) -> list[Combatant]:
    """Creates fresh, full-health enemies from the roster, in order."""
    return [Combatant.from_template(template) for template in roster]


@dataclass
class GameState:
    """
    The state of a single game session.

    Attributes:
        current_scene (Scene):
            The scene dispatched on the next update.
        game_over (bool):
            Set when the player chooses to quit.
        player (Combatant):
            The player's combatant.
        enemies (list[Combatant]):
            The enemies of the current run, fought in order.
        current_enemy_index (int):
            The index of the enemy being fought; equal to ``len(enemies)``
            once every enemy is defeated.

    """

    current_scene: Scene = Scene.NAMING_INPUT
    game_over: bool = False
    player: Combatant = field(default_factory=Combatant)
    enemies: list[Combatant] = field(default_factory=list)
    current_enemy_index: int = 0

    @property
    def current_enemy(self) -> Combatant | None:
        """Returns the enemy being fought, or None once the roster is exhausted."""
        if 0 <= self.current_enemy_index < len(self.enemies):
            return self.enemies[self.current_enemy_index]
        return None

    @property
    def all_enemies_defeated(self) -> bool:
        """Returns True once the enemy index has moved past the last enemy."""
        return self.current_enemy_index >= len(self.enemies)

    def reset_roster(self, roster: tuple[EnemyTemplate, ...] = ENEMY_ROSTER) -> None:
        """Rebuilds the enemies from the roster and goes back to the first one."""
        self.enemies = build_enemies(roster)
        self.current_enemy_index = 0
