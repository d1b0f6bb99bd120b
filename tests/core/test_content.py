"""
Tests for the static content tables and the console helpers.
"""

import pytest
from pydantic import ValidationError

from arena.core.content import (
    CLASS_PRESETS,
    ENEMY_ROSTER,
    ITEMS,
    EnemyTemplate,
)
from arena.core.utils import format_number, make_bar


def test_enemy_roster_order_and_stats():
    assert [(e.name, e.health, e.attack_power, e.defense_power) for e in ENEMY_ROSTER] == [
        ("Slime", 10, 1, 0),
        ("Zom-B", 15, 12, 2),
        ("Kris", 25, 20, 5),
    ]


def test_class_presets_are_distinct():
    assert [preset.name for preset in CLASS_PRESETS] == ["Wizard", "Knight"]
    stats = {(p.health, p.attack_power, p.defense_power) for p in CLASS_PRESETS}
    assert len(stats) == len(CLASS_PRESETS)


def test_knight_preset():
    knight = CLASS_PRESETS[1]
    assert knight.name == "Knight"
    assert (knight.health, knight.attack_power, knight.defense_power) == (75, 15, 10)
    assert knight.items == (ITEMS["Sword"], ITEMS["Shield"])


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "Ghost", "health": -1, "attack_power": 1, "defense_power": 1},
        {"name": "Ghost", "health": 1, "attack_power": -1, "defense_power": 1},
        {"name": "", "health": 1, "attack_power": 1, "defense_power": 1},
    ],
)
def test_invalid_templates_are_rejected(fields):
    with pytest.raises(ValidationError):
        EnemyTemplate(**fields)


def test_format_number():
    assert format_number(75.0) == "75"
    assert format_number(1.5) == "1.5"


def test_make_bar():
    assert make_bar(5, 10, length=4).count("▮") == 2
    assert make_bar(0, 10, length=4).count("▯") == 4
    assert make_bar(20, 10, length=4).count("▮") == 4
    assert make_bar(5, 0) == ""
