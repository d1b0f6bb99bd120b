"""
Shared fixtures for the arena tests.

``ScriptedSession`` stands in for the prompt_toolkit session and replays a
fixed list of answers, so a whole game can be played without a terminal.
"""

import pytest
from rich.console import Console

from arena.combat.game_manager import GameManager
from arena.ui.cli_interface import PlayerInterface


class ScriptedSession:
    """Replays answers in order and records every prompt it was shown."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts = []

    def feed(self, *answers):
        self.answers.extend(answers)

    def prompt(self, message, **kwargs):
        self.prompts.append(message)
        if not self.answers:
            raise EOFError("No scripted answers left")
        return self.answers.pop(0)


@pytest.fixture
def session():
    return ScriptedSession()


@pytest.fixture
def console():
    return Console(record=True, width=100, color_system=None)


@pytest.fixture
def ui(session, console):
    return PlayerInterface(session=session, console=console)


@pytest.fixture
def manager(ui):
    """A started game manager, waiting in the naming scene."""
    game = GameManager(ui=ui)
    game.start()
    return game


@pytest.fixture
def output(console):
    """Returns a callable giving the plain text printed so far."""
    return lambda: console.export_text(clear=False)
