"""
Tests for the command-line entry point.
"""

import logging

from arena import main as main_module
from arena.combat.game_manager import GameManager
from arena.core.config import GameSettings


def test_main_plays_until_quit(monkeypatch, ui, session, output):
    monkeypatch.setattr(
        main_module,
        "GameManager",
        lambda settings: GameManager(ui=ui, settings=settings),
    )
    session.feed("Rin", "Yes", "Knight", "Dodge", "Dodge")

    # The scripted session closes the input after the last answer.
    main_module.main(GameSettings(log_level=logging.DEBUG))

    text = output()
    assert text.count("You dodged the enemy's attack!") == 2
    assert text.rstrip().endswith("Farewell, warrior.")


def test_main_uses_custom_farewell(monkeypatch, ui, output):
    monkeypatch.setattr(
        main_module,
        "GameManager",
        lambda settings: GameManager(ui=ui, settings=settings),
    )

    main_module.main(GameSettings(farewell_message="See you soon."))

    assert output().rstrip().endswith("See you soon.")
