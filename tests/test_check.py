"""
Unit tests for the check/skill/tool serializer.
"""

import pytest
from pydantic import ValidationError

from dnd5e_enrichers.models import CheckOptions
from dnd5e_enrichers.serializers import create_ability_check, create_skill_check, serialize_check


class TestLegacyAndEmpty:

    def test_empty(self) -> None:
        assert serialize_check() == "[[/check]]"
        assert serialize_check({}) == "[[/check]]"
        assert serialize_check(None, "tool") == "[[/tool]]"

    def test_legacy_ability(self) -> None:
        assert serialize_check("dex") == "[[/check dexterity]]"

    def test_legacy_skill(self) -> None:
        assert serialize_check("prc", "skill") == "[[/skill perception]]"

    def test_legacy_unknown_is_verbatim(self) -> None:
        assert serialize_check("custom-check") == "[[/check custom-check]]"


class TestShorthand:
    """Shorthand combinations, in precedence order."""

    def test_ability_only(self) -> None:
        assert serialize_check({"ability": "dexterity"}) == "[[/check dexterity]]"

    def test_ability_with_dc_drops_dc(self) -> None:
        assert serialize_check({"ability": "strength", "dc": 15}) == "[[/check strength]]"

    def test_ability_with_formula_dc_drops_dc(self) -> None:
        assert serialize_check({"ability": "wis", "dc": "@abilities.wis.dc"}) == "[[/check wisdom]]"

    def test_single_skill(self) -> None:
        assert serialize_check({"skill": "ath"}) == "[[/check athletics]]"

    def test_single_skill_with_dc(self) -> None:
        assert serialize_check({"skill": "perception", "dc": 15}, "skill") == "[[/skill perception 15]]"

    def test_ability_and_skill(self) -> None:
        assert serialize_check({"ability": "str", "skill": "itm"}) == "[[/check strength intimidation]]"

    def test_multiple_skills(self) -> None:
        assert serialize_check({"skill": ["acr", "ath"]}) == "[[/check acrobatics athletics]]"

    def test_multiple_skills_with_dc(self) -> None:
        assert serialize_check({"skill": ["acr", "ath"], "dc": 15}) == "[[/check acrobatics athletics 15]]"

    def test_ability_multiple_skills_dc(self) -> None:
        assert serialize_check(
            {"ability": "strength", "skill": ["dec", "per"], "dc": 15}
        ) == "[[/check strength deception persuasion 15]]"


class TestExplicit:

    def test_dc_kept_when_other_field_present(self) -> None:
        assert serialize_check(
            {"ability": "strength", "dc": 15, "format": "long"}
        ) == "[[/check ability=strength dc=15 format=long]]"

    def test_string_dc_with_skill(self) -> None:
        assert serialize_check(
            {"skill": "perception", "dc": "@abilities.wis.dc"}
        ) == "[[/check skill=perception dc=@abilities.wis.dc]]"

    def test_ability_skill_dc_forces_explicit(self) -> None:
        assert serialize_check(
            {"ability": "dex", "skill": "acr", "dc": 12}
        ) == "[[/check ability=dexterity skill=acrobatics dc=12]]"

    def test_single_element_skill_list(self) -> None:
        assert serialize_check({"skill": ["perception"]}) == "[[/check skill=perception]]"

    def test_multiple_skills_slash_joined(self) -> None:
        assert serialize_check(
            {"skill": ["acr", "ath"], "format": "long"}
        ) == "[[/check skill=acrobatics/athletics format=long]]"

    def test_full_field_order(self) -> None:
        options = CheckOptions(
            ability="str",
            skill="itm",
            tool=("hammer", "chisel"),
            vehicle="horse",
            dc=15,
            format="long",
            passive=True,
            activity="RLQlsLo5InKHZadn",
            rules="2024",
        )
        assert serialize_check(options) == (
            "[[/check ability=strength skill=intimidation tool=hammer/chisel vehicle=horse "
            "dc=15 format=long passive=true activity=RLQlsLo5InKHZadn rules=2024]]"
        )

    def test_passive_false_not_rendered(self) -> None:
        assert serialize_check({"skill": "perception", "passive": False, "format": "short"}) == (
            "[[/check skill=perception format=short]]"
        )

    def test_activity_only(self) -> None:
        assert serialize_check({"activity": "RLQlsLo5InKHZadn"}) == "[[/check activity=RLQlsLo5InKHZadn]]"

    def test_tool_kind(self) -> None:
        assert serialize_check({"tool": "thieves-tools", "dc": 15}, "tool") == "[[/tool tool=thieves-tools dc=15]]"


class TestCreators:

    def test_create_skill_check(self) -> None:
        assert create_skill_check("ste", dc=12) == "[[/skill stealth 12]]"

    def test_create_ability_check(self) -> None:
        assert create_ability_check("int", format="long") == "[[/check ability=intelligence format=long]]"


class TestValidation:

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            serialize_check({"ability": "dex", "format": "huge"})

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            serialize_check({"abilty": "dex"})
