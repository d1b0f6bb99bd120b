"""
Scene controller for the arena.

The GameManager owns the GameState and moves it through the scenes of the
game: naming the player, picking a class, fighting the enemy roster and the
play-again menu.
"""

from collections.abc import Callable

from catchery import log_debug
from rich.console import Console
from rich.markup import escape

from arena.core.config import DEFAULT_SETTINGS, GameSettings
from arena.core.constants import ATTACK, DODGE, EQUIP_ITEM, NO, YES, Scene
from arena.core.content import CLASS_PRESETS, ENEMY_ROSTER, ClassPreset, EnemyTemplate
from arena.ui.cli_interface import PlayerInterface

from .damage import attack
from .game_state import GameState


class GameManager:
    """Runs the game loop and dispatches each update to the current scene.

    The enemy roster and the class presets are read from the content tables
    when the game starts, and a fresh set of enemies is built for every run.
    """

    def __init__(
        self,
        ui: PlayerInterface | None = None,
        settings: GameSettings = DEFAULT_SETTINGS,
        roster: tuple[EnemyTemplate, ...] = ENEMY_ROSTER,
        class_presets: tuple[ClassPreset, ...] = CLASS_PRESETS,
    ) -> None:
        """Initialize the GameManager.

        Args:
            ui (PlayerInterface | None): The input/display collaborator.
            settings (GameSettings): The runtime settings.
            roster (tuple[EnemyTemplate, ...]): The enemies, in fighting order.
            class_presets (tuple[ClassPreset, ...]): The selectable classes.

        """
        self.settings = settings
        self.ui: PlayerInterface = ui or PlayerInterface(
            console=Console(markup=True, width=settings.console_width),
            prompt_marker=settings.prompt_marker,
        )
        self.roster = roster
        self.class_presets = class_presets
        self.state = GameState()
        self._handlers: dict[Scene, Callable[[], None]] = {
            Scene.NAMING_INPUT: self.get_player_name,
            Scene.CLASS_SELECTION: self.character_selection,
            Scene.BATTLE: self._battle_scene,
            Scene.MAIN_MENU: self.display_main_menu,
        }

    # ============================================================================
    # GAME LOOP
    # ============================================================================

    def run(self) -> None:
        """Starts the game and updates it until the player quits."""
        self.start()
        while not self.state.game_over:
            self.update()
        self.end()

    def start(self) -> None:
        """Resets the state to the first scene with a fresh enemy roster."""
        self.state.game_over = False
        self.state.player.unequip()
        self._change_scene(Scene.NAMING_INPUT)
        self.state.reset_roster(self.roster)

    def update(self) -> None:
        """Runs the handler of the current scene once."""
        self._handlers[self.state.current_scene]()

    def end(self) -> None:
        """Shows the farewell message."""
        self.ui.show(f"[bold]{self.settings.farewell_message}[/]")

    def _change_scene(self, scene: Scene) -> None:
        if scene != self.state.current_scene:
            log_debug(
                f"Scene change: {self.state.current_scene} -> {scene}",
                {"from": str(self.state.current_scene), "to": str(scene)},
            )
        self.state.current_scene = scene

    # ============================================================================
    # SCENES
    # ============================================================================

    def get_player_name(self) -> None:
        """Asks for the player's name until the player decides to keep it."""
        player = self.state.player
        player.name = self.ui.get_text("Please enter your name.")
        choice = self.ui.get_input(
            f"You've entered {escape(player.name)}. "
            "Are you sure you want to keep this name?",
            [YES, NO],
        )
        if choice == 1:
            self._change_scene(Scene.CLASS_SELECTION)

    def character_selection(self) -> None:
        """Lets the player pick a class and applies its stats and items."""
        player = self.state.player
        choice = self.ui.get_input(
            f"Nice to meet you {escape(player.name)}. Please select a character.",
            [preset.name for preset in self.class_presets],
        )
        preset = self.class_presets[choice - 1]
        player.health = preset.health
        player.max_health = preset.health
        player.attack_power = preset.attack_power
        player.defense_power = preset.defense_power
        player.items = list(preset.items)
        player.equipped_item = None
        log_debug(
            f"{player.name} picked {preset.name}",
            {"player": player.name, "class": preset.name, "context": "class_selection"},
        )
        self._change_scene(Scene.BATTLE)

    def _battle_scene(self) -> None:
        self.battle()
        self.check_battle_results()

    def battle(self) -> None:
        """Plays one turn against the current enemy.

        Attacking or equipping an item lets the enemy strike back; dodging
        ends the turn without retaliation.
        """
        player = self.state.player
        enemy = self.state.current_enemy
        assert enemy is not None, "Battle entered with every enemy already defeated."

        self.ui.show_rule(
            f"Battle {self.state.current_enemy_index + 1}/{len(self.state.enemies)}"
        )
        self.ui.show_stats(player)
        self.ui.show_stats(enemy)

        options = [ATTACK, DODGE]
        if player.items:
            options.append(EQUIP_ITEM)
        choice = options[
            self.ui.get_input(
                f"A {escape(enemy.name)} stands in front of you! What will you do?",
                options,
            )
            - 1
        ]

        if choice == ATTACK:
            damage = attack(player, enemy)
            self.ui.show(f"You dealt {damage:g} damage!")
        elif choice == DODGE:
            self.ui.show("You dodged the enemy's attack!")
            return
        elif choice == EQUIP_ITEM:
            self.equip_item()

        damage = attack(enemy, player)
        self.ui.show(f"The {escape(enemy.name)} dealt {damage:g} damage!")

    def equip_item(self) -> None:
        """Lets the player equip one of the items of their class."""
        player = self.state.player
        if len(player.items) == 1:
            item = player.items[0]
        else:
            item_choice = self.ui.get_input(
                "Which item will you equip?",
                [f"{item.name} ({item.description})" for item in player.items],
            )
            item = player.items[item_choice - 1]
        player.equip(item)
        self.ui.show(f"You equipped {item.colored_name}!")

    def check_battle_results(self) -> None:
        """Checks whether the player or the current enemy has fallen.

        A fallen player ends the run. A fallen enemy is replaced by the next
        one in the roster, and the run ends in victory once none are left.
        """
        player = self.state.player
        enemy = self.state.current_enemy

        if not player.is_alive():
            self.ui.show("[bold red]You were slain...[/]")
            self._change_scene(Scene.MAIN_MENU)
        elif enemy is not None and not enemy.is_alive():
            self.ui.show(f"You slayed the {escape(enemy.name)}")
            self.state.current_enemy_index += 1

            if self.state.all_enemies_defeated:
                self._change_scene(Scene.MAIN_MENU)
                self.ui.show(
                    "[bold green]You've slain all the enemies! "
                    "You are a true warrior.[/]"
                )

    def display_main_menu(self) -> None:
        """Asks whether to play again; quitting ends the game loop."""
        choice = self.ui.get_input("Play Again?", [YES, NO])

        if choice == 1:
            self.state.player.unequip()
            self.state.reset_roster(self.roster)
            self._change_scene(Scene.NAMING_INPUT)
        else:
            self.state.game_over = True
