"""
Main entry point for the Battle Arena.

Sets up logging, greets the player and runs the scene controller until the
player chooses to stop playing. The game takes no arguments.
"""

from arena.combat.game_manager import GameManager
from arena.core.config import DEFAULT_SETTINGS, GameSettings
from arena.core.logging import get_logger, setup_logging
from arena.core.utils import cprint, crule

logger = get_logger(__name__)


def main(settings: GameSettings = DEFAULT_SETTINGS) -> None:
    """Runs a whole game session."""
    setup_logging(level=settings.log_level, width=settings.console_width)

    crule("Battle Arena", style="bold green")
    cprint(
        "Name your hero, pick a class and defeat every enemy of the arena. "
        "Answer each question with the number or the name of an option.\n",
        style="bold blue",
    )

    manager = GameManager(settings=settings)
    try:
        manager.run()
    except (KeyboardInterrupt, EOFError):
        logger.info(
            "Input closed in scene %s, quitting",
            manager.state.current_scene,
        )
        manager.end()


if __name__ == "__main__":
    main()
