"""
Unit tests for ability and skill vocabulary.
"""

import pytest

from dnd5e_enrichers.vocabulary import (
    ABILITIES,
    ABILITY_ABBREVIATIONS,
    SKILL_ABBREVIATIONS,
    SKILLS,
    is_ability,
    is_skill,
    normalize_ability,
    normalize_skill,
)


class TestTables:
    """Shape of the static tables."""

    def test_six_abilities_each_abbreviated(self) -> None:
        assert len(ABILITIES) == 6
        assert sorted(ABILITY_ABBREVIATIONS.values()) == sorted(ABILITIES)
        assert all(len(abbr) == 3 for abbr in ABILITY_ABBREVIATIONS)

    def test_eighteen_skills_twelve_abbreviated(self) -> None:
        assert len(SKILLS) == 18
        assert len(SKILL_ABBREVIATIONS) == 12
        assert set(SKILL_ABBREVIATIONS.values()) <= set(SKILLS)

    def test_skills_are_hyphenated(self) -> None:
        assert "sleight-of-hand" in SKILLS
        assert "animal-handling" in SKILLS


class TestNormalizeAbility:

    @pytest.mark.parametrize("value,expected", [
        ("dex", "dexterity"),
        ("DEX", "dexterity"),
        ("Wisdom", "wisdom"),
        ("charisma", "charisma"),
        ("con", "constitution"),
    ])
    def test_known_values(self, value: str, expected: str) -> None:
        assert normalize_ability(value) == expected

    def test_unknown_passes_through(self) -> None:
        assert normalize_ability("xyz") == "xyz"
        assert normalize_ability("Sanity") == "Sanity"

    @pytest.mark.parametrize("value", ["dex", "DEX", "Strength", "sanity", "", "Con "])
    def test_idempotent(self, value: str) -> None:
        once = normalize_ability(value)
        assert normalize_ability(once) == once


class TestNormalizeSkill:

    def test_abbreviation_wins(self) -> None:
        assert normalize_skill("prc") == "perception"
        assert normalize_skill("PER") == "persuasion"

    def test_full_name_any_case(self) -> None:
        assert normalize_skill("Sleight-Of-Hand") == "sleight-of-hand"

    def test_list_is_space_joined(self) -> None:
        assert normalize_skill(["acr", "ath"]) == "acrobatics athletics"

    def test_empty_list(self) -> None:
        assert normalize_skill([]) == ""

    def test_unknown_passes_through(self) -> None:
        assert normalize_skill("basket-weaving") == "basket-weaving"

    def test_skill_without_abbreviation(self) -> None:
        assert normalize_skill("arc") == "arc"
        assert normalize_skill("arcana") == "arcana"


class TestPredicates:
    """Full names are matched exactly, abbreviations in any case."""

    def test_is_ability(self) -> None:
        assert is_ability("strength")
        assert is_ability("STR")
        assert not is_ability("Strength")
        assert not is_ability("luck")

    def test_is_skill(self) -> None:
        assert is_skill("stealth")
        assert is_skill("STE")
        assert not is_skill("Stealth")
        assert not is_skill("cooking")
