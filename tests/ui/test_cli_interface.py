"""
Tests for the command-line interface: menu parsing, re-prompting and output.
"""

import pytest

from arena.character.main import Combatant
from arena.core.errors import InvalidChoiceError
from arena.ui.cli_interface import parse_choice

OPTIONS = ["Yes", "No"]


@pytest.mark.parametrize(
    "answer, expected",
    [
        ("1", 1),
        ("2", 2),
        (" 2 ", 2),
        ("Yes", 1),
        ("no", 2),
        ("  NO  ", 2),
    ],
)
def test_parse_choice_accepts_index_or_label(answer, expected):
    assert parse_choice(answer, OPTIONS) == expected


@pytest.mark.parametrize(
    "answer", ["", "0", "3", "-1", "maybe", "1.0", "Yes please", "²", "①"]
)
def test_parse_choice_rejects_anything_else(answer):
    with pytest.raises(InvalidChoiceError) as info:
        parse_choice(answer, OPTIONS)
    assert info.value.answer == answer
    assert info.value.options == OPTIONS


def test_parse_choice_with_more_options():
    options = ["Attack", "Dodge", "Equip Item"]
    assert parse_choice("3", options) == 3
    assert parse_choice("equip item", options) == 3


def test_get_input_reprompts_on_out_of_range_index(ui, session, output):
    session.feed("3", "2")

    assert ui.get_input("Play Again?", OPTIONS) == 2
    assert len(session.prompts) == 2
    assert output().count("Invalid Input") == 1


def test_get_input_keeps_asking_until_valid(ui, session, output):
    session.feed("", "banana", "7", "yes")

    assert ui.get_input("Play Again?", OPTIONS) == 1
    assert len(session.prompts) == 4
    assert output().count("Invalid Input") == 3


def test_get_input_lists_numbered_options(ui, session):
    session.feed("1")

    ui.get_input("Please select a character.", ["Wizard", "Knight"])

    prompt = session.prompts[0].value
    assert "Please select a character." in prompt
    assert "1." in prompt and "Wizard" in prompt
    assert "2." in prompt and "Knight" in prompt
    assert prompt.endswith("> ")


def test_get_input_requires_two_options(ui):
    with pytest.raises(ValueError):
        ui.get_input("Nothing to choose", ["Only"])


def test_get_text_strips_answer(ui, session):
    session.feed("  Rin  ")

    assert ui.get_text("Please enter your name.") == "Rin"
    assert "Please enter your name." in session.prompts[0].value


def test_input_closed_propagates(ui):
    with pytest.raises(EOFError):
        ui.get_input("Play Again?", OPTIONS)


def test_show_stats_prints_every_stat(ui, output):
    ui.show_stats(Combatant(name="Slime", health=10, attack_power=1, defense_power=0))

    text = output()
    assert "Name" in text and "Slime" in text
    assert "Health" in text and "10" in text
    assert "Attack Power" in text
    assert "Defense Power" in text


def test_get_input_reprompts_on_superscript_digit(ui, session, output):
    session.feed("²", "1")

    assert ui.get_input("Play Again?", OPTIONS) == 1
    assert len(session.prompts) == 2
    assert output().count("Invalid Input") == 1


def test_show_stats_prints_name_literally(ui, output):
    ui.show_stats(Combatant(name="Rin[/]", health=75, attack_power=15, defense_power=10))

    assert "Rin[/]" in output()
