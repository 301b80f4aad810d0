"""
Unit tests for rule reference vocabulary and the &Reference serializer.
"""

import pytest

from dnd5e_enrichers.models import ReferenceOptions
from dnd5e_enrichers.serializers import serialize_reference
from dnd5e_enrichers.vocabulary import (
    REFERENCE_TABLES,
    ReferenceCategory,
    infer_reference_category,
    is_reference,
    normalize_reference,
)


class TestReferenceTables:

    def test_nine_closed_categories(self) -> None:
        assert len(REFERENCE_TABLES) == 9
        assert ReferenceCategory.RULE not in REFERENCE_TABLES

    def test_table_sizes(self) -> None:
        assert len(REFERENCE_TABLES[ReferenceCategory.CONDITION].names) == 15
        assert len(REFERENCE_TABLES[ReferenceCategory.CREATURE_TYPE].names) == 14
        assert len(REFERENCE_TABLES[ReferenceCategory.DAMAGE_TYPE].names) == 13
        assert len(REFERENCE_TABLES[ReferenceCategory.SPELL_SCHOOL].names) == 8

    def test_skill_references_are_camel_case(self) -> None:
        names = REFERENCE_TABLES[ReferenceCategory.SKILL].names
        assert "animalHandling" in names
        assert "sleightOfHand" in names


class TestNormalizeReference:

    def test_inferred_condition(self) -> None:
        assert normalize_reference("PRONE") == "prone"

    def test_abbreviations_before_full_names(self) -> None:
        # "con" is both an ability and a spell school abbreviation
        assert normalize_reference("con") == "constitution"
        assert normalize_reference("evo") == "evocation"
        assert normalize_reference("ani") == "animalHandling"

    def test_full_name_case_insensitive(self) -> None:
        assert normalize_reference("sleightofhand") == "sleightOfHand"
        assert normalize_reference("HEAVILYOBSCURED") == "heavilyObscured"

    def test_within_category(self) -> None:
        assert normalize_reference("con", "spellSchool") == "conjuration"
        assert normalize_reference("fire", ReferenceCategory.DAMAGE_TYPE) == "fire"

    def test_not_in_category(self) -> None:
        assert normalize_reference("fire", "condition") is None

    def test_rule_category_keeps_name(self) -> None:
        assert normalize_reference("Difficult Terrain", "rule") == "Difficult Terrain"

    def test_unknown_name_passes_through(self) -> None:
        assert normalize_reference("Difficult Terrain") == "Difficult Terrain"


class TestInferAndMembership:

    @pytest.mark.parametrize("name,expected", [
        ("poisoned", ReferenceCategory.CONDITION),
        ("dex", ReferenceCategory.ABILITY),
        ("stealth", ReferenceCategory.SKILL),
        ("radiant", ReferenceCategory.DAMAGE_TYPE),
        ("fey", ReferenceCategory.CREATURE_TYPE),
        ("necromancy", ReferenceCategory.SPELL_SCHOOL),
        ("cone", ReferenceCategory.AREA_OF_EFFECT),
        ("somatic", ReferenceCategory.SPELL_COMPONENT),
        ("falling", ReferenceCategory.OTHER_RULESET),
    ])
    def test_infer(self, name: str, expected: ReferenceCategory) -> None:
        assert infer_reference_category(name) is expected

    def test_infer_unknown(self) -> None:
        assert infer_reference_category("Flanking") is None

    def test_poison_is_a_damage_type_not_a_condition(self) -> None:
        assert infer_reference_category("poison") is ReferenceCategory.DAMAGE_TYPE

    def test_is_reference(self) -> None:
        assert is_reference("Blinded", "condition")
        assert not is_reference("blinded", "skill")
        assert not is_reference("anything", "rule")


class TestSerializeReference:

    def test_empty(self) -> None:
        assert serialize_reference() == "&Reference[]"
        assert serialize_reference({}) == "&Reference[]"

    def test_legacy_string_is_verbatim(self) -> None:
        assert serialize_reference("Prone") == "&Reference[Prone]"

    def test_inferred(self) -> None:
        assert serialize_reference({"rule": "Prone"}) == "&Reference[prone]"
        assert serialize_reference({"rule": "str"}) == "&Reference[strength]"

    def test_explicit_category(self) -> None:
        assert serialize_reference({"category": "condition", "rule": "prone"}) == "&Reference[condition=prone]"
        assert serialize_reference({"category": "skill", "rule": "ani"}) == "&Reference[skill=animalHandling]"

    def test_explicit_category_unknown_value_kept(self) -> None:
        assert serialize_reference({"category": "condition", "rule": "Dazed"}) == "&Reference[condition=Dazed]"

    def test_generic_rule_quoted(self) -> None:
        assert serialize_reference({"rule": "Difficult Terrain"}) == '&Reference["Difficult Terrain"]'
        assert serialize_reference({"category": "rule", "rule": "Difficult Terrain"}) == '&Reference[rule="Difficult Terrain"]'

    def test_category_without_rule(self) -> None:
        assert serialize_reference({"category": "condition"}) == "&Reference[condition=]"

    def test_apply_false_on_condition(self) -> None:
        assert serialize_reference({"rule": "prone", "apply": False}) == "&Reference[prone apply=false]"
        assert serialize_reference(
            ReferenceOptions(category="condition", rule="blinded", apply=False)
        ) == "&Reference[condition=blinded apply=false]"

    def test_apply_true_never_rendered(self) -> None:
        assert serialize_reference({"rule": "prone", "apply": True}) == "&Reference[prone]"

    def test_apply_ignored_for_non_conditions(self) -> None:
        assert serialize_reference({"rule": "fire", "apply": False}) == "&Reference[fire]"
        assert serialize_reference({"category": "damageType", "rule": "fire", "apply": False}) == "&Reference[damageType=fire]"
