"""Tests for the basic roll serializer."""

import pytest

from dnd5e_enrichers.models import BasicRollOptions, DiceDescription
from dnd5e_enrichers.serializers import serialize_basic_roll


class TestRegularRolls:

    def test_empty(self) -> None:
        assert serialize_basic_roll() == "[[/roll]]"
        assert serialize_basic_roll({"formula": ""}) == "[[/roll]]"

    def test_legacy_string(self) -> None:
        assert serialize_basic_roll("1d10 + 1d4 + 4") == "[[/roll 1d10 + 1d4 + 4]]"

    def test_formula(self) -> None:
        assert serialize_basic_roll({"formula": "5d20"}) == "[[/roll 5d20]]"

    def test_description(self) -> None:
        assert serialize_basic_roll(
            {"formula": "5d20", "description": "This is my roll!"}
        ) == "[[/roll 5d20 # This is my roll!]]"

    @pytest.mark.parametrize("mode,keyword", [
        ("public", "publicroll"),
        ("gm", "gmroll"),
        ("blind", "blindroll"),
        ("self", "selfroll"),
    ])
    def test_modes(self, mode: str, keyword: str) -> None:
        assert serialize_basic_roll({"formula": "1d20", "mode": mode}) == f"[[/{keyword} 1d20]]"

    def test_dice_descriptions_replace_formula(self) -> None:
        options = BasicRollOptions(
            formula="ignored",
            dice_descriptions=[
                DiceDescription(formula="2d6", description="slashing damage"),
                DiceDescription(formula="1d8", description="fire damage"),
            ],
        )
        assert serialize_basic_roll(options) == "[[/roll 2d6[slashing damage]+1d8[fire damage]]]"

    def test_label_dropped_when_not_inline(self) -> None:
        assert serialize_basic_roll({"formula": "1d20", "label": "Go", "inline": False}) == "[[/roll 1d20]]"


class TestInlineRolls:

    def test_immediate(self) -> None:
        assert serialize_basic_roll({"formula": "5d20", "inline": "immediate"}) == "[[5d20]]"

    def test_immediate_with_label(self) -> None:
        assert serialize_basic_roll(
            {"formula": "5d20", "inline": "immediate", "label": "Roll for damage"}
        ) == "[[5d20]]{Roll for damage}"

    def test_deferred_ignores_mode(self) -> None:
        assert serialize_basic_roll(
            {"formula": "1d20", "inline": "deferred", "mode": "gm", "label": "Click to roll"}
        ) == "[[/roll 1d20]]{Click to roll}"

    def test_inline_without_formula(self) -> None:
        assert serialize_basic_roll({"inline": "immediate"}) == "[[]]"

    def test_inline_with_dice_descriptions(self) -> None:
        assert serialize_basic_roll({
            "inline": "immediate",
            "diceDescriptions": [{"formula": "1d6", "description": "fire"}],
        }) == "[[1d6[fire]]]"
