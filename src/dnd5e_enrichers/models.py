"""
Option models for roll commands and rule references.

Each command kind has one immutable options model. Every field is optional;
an options model with no fields set serializes to the bare ``[[/kind]]`` form
and is what parsing that form gives back.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CheckFormat = Literal["short", "long"]
RollFormat = Literal["short", "long", "extended"]
RulesVersion = Literal["2014", "2024"]
HealType = Literal["healing", "temp", "temphp"]
RollMode = Literal["public", "gm", "blind", "self"]
InlineMode = Literal["immediate", "deferred", False]
ReferenceCategoryName = Literal[
    "ability",
    "skill",
    "condition",
    "creatureType",
    "damageType",
    "areaOfEffect",
    "spellComponent",
    "spellSchool",
    "otherRuleset",
    "rule",
]


class CommandKind(str, Enum):
    """Kind of a recognized command, as reported by the parser."""
    CHECK = "check"
    SKILL = "skill"
    TOOL = "tool"
    ATTACK = "attack"
    DAMAGE = "damage"
    HEAL = "heal"
    ITEM = "item"
    SAVE = "save"
    CONCENTRATION = "concentration"
    ROLL = "roll"
    REFERENCE = "reference"


class EnricherModel(BaseModel):
    """Base for all option models.

    Frozen, snake_case fields with camelCase aliases, unknown keys rejected.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )

    def is_empty(self) -> bool:
        """True when no field is set."""
        return all(getattr(self, name) is None for name in type(self).model_fields)

    def to_dict(self, by_alias: bool = False) -> dict[str, Any]:
        """Dump the set fields only, optionally under their camelCase names."""
        return self.model_dump(by_alias=by_alias, exclude_none=True)


class CheckOptions(EnricherModel):
    """Options for ``[[/check]]``, ``[[/skill]]`` and ``[[/tool]]``.

    Attributes:
        ability: Ability used for the check
        skill: One skill or several (any of them may be rolled)
        tool: One tool or several
        vehicle: Vehicle proficiency
        dc: Target number, or a formula string such as ``@abilities.wis.dc``
        format: Display format
        passive: Render as a passive check
        activity: Activity id the check belongs to
        rules: Rules edition, only relevant for skill and tool combinations
    """
    ability: str | None = None
    skill: str | tuple[str, ...] | None = None
    tool: str | tuple[str, ...] | None = None
    vehicle: str | None = None
    dc: int | str | None = None
    format: CheckFormat | None = None
    passive: bool | None = None
    activity: str | None = None
    rules: RulesVersion | None = None


class AttackOptions(EnricherModel):
    """Options for ``[[/attack]]``."""
    formula: int | str | None = Field(default=None, description="To-hit bonus or formula")
    activity: str | None = None
    attack_mode: str | None = Field(default=None, description="melee, ranged, thrown, ...")
    format: RollFormat | None = None
    rules: RulesVersion | None = None


class DamagePart(EnricherModel):
    """One formula of a multi-part damage roll."""
    formula: str
    type: str | tuple[str, ...] | None = None


class DamageOptions(EnricherModel):
    """Options for ``[[/damage]]``.

    ``rolls`` describes several damage parts joined by ``&``; when set it
    replaces ``formula`` and ``type``.
    """
    formula: str | None = None
    type: str | tuple[str, ...] | None = None
    average: bool | int | str | None = None
    activity: str | None = None
    format: RollFormat | None = None
    rolls: tuple[DamagePart, ...] | None = None


class HealOptions(EnricherModel):
    """Options for ``[[/heal]]``. ``temp`` and ``temphp`` are synonyms."""
    formula: str | None = None
    type: HealType | None = None
    average: bool | int | str | None = None
    activity: str | None = None
    format: RollFormat | None = None


class SaveOptions(EnricherModel):
    """Options for ``[[/save]]`` and ``[[/concentration]]``."""
    ability: str | tuple[str, ...] | None = None
    dc: int | str | None = None
    format: CheckFormat | None = None
    activity: str | None = None


class ItemOptions(EnricherModel):
    """Options for ``[[/item]]``.

    Only one identifier is emitted; ``uuid`` wins over ``relative_id``,
    which wins over ``item_name``.
    """
    item_name: str | None = None
    activity: str | None = None
    uuid: str | None = None
    relative_id: str | None = None


class DiceDescription(EnricherModel):
    """A labelled dice term, rendered as ``formula[description]``."""
    formula: str
    description: str


class BasicRollOptions(EnricherModel):
    """Options for plain dice rolls.

    Attributes:
        formula: Dice formula, ignored when dice_descriptions is set
        mode: Roll visibility, selects the command word
        description: Flavor text appended after ``#``
        dice_descriptions: Labelled dice terms joined with ``+``
        inline: Render as an immediate ``[[formula]]`` or deferred inline roll
        label: Link text for inline rolls
    """
    formula: str | None = None
    mode: RollMode | None = None
    description: str | None = None
    dice_descriptions: tuple[DiceDescription, ...] | None = None
    inline: InlineMode | None = None
    label: str | None = None


class ReferenceOptions(EnricherModel):
    """Options for ``&Reference[...]`` rule links."""
    category: ReferenceCategoryName | None = None
    rule: str | None = None
    apply: bool | None = None  # only False is ever rendered


CommandOptions = Union[
    CheckOptions,
    AttackOptions,
    DamageOptions,
    HealOptions,
    SaveOptions,
    ItemOptions,
    BasicRollOptions,
    ReferenceOptions,
]


class ParsedCommand(BaseModel):
    """A command recognized in text.

    Attributes:
        kind: Command kind
        options: Options recovered from the command body
        original_text: The text that was parsed
    """
    model_config = ConfigDict(frozen=True)

    kind: CommandKind
    options: CommandOptions
    original_text: str

    def to_dict(self, by_alias: bool = False) -> dict[str, Any]:
        """Plain-data view, suitable for JSON or YAML output."""
        return {
            "kind": self.kind.value,
            "options": self.options.model_dump(mode="json", by_alias=by_alias, exclude_none=True),
            "original_text": self.original_text,
        }


# Options model per command kind.
OPTIONS_BY_KIND: dict[CommandKind, type[EnricherModel]] = {
    CommandKind.CHECK: CheckOptions,
    CommandKind.SKILL: CheckOptions,
    CommandKind.TOOL: CheckOptions,
    CommandKind.ATTACK: AttackOptions,
    CommandKind.DAMAGE: DamageOptions,
    CommandKind.HEAL: HealOptions,
    CommandKind.ITEM: ItemOptions,
    CommandKind.SAVE: SaveOptions,
    CommandKind.CONCENTRATION: SaveOptions,
    CommandKind.ROLL: BasicRollOptions,
    CommandKind.REFERENCE: ReferenceOptions,
}


__all__ = [
    "AttackOptions",
    "BasicRollOptions",
    "CheckOptions",
    "CommandKind",
    "CommandOptions",
    "DamageOptions",
    "DamagePart",
    "DiceDescription",
    "EnricherModel",
    "HealOptions",
    "ItemOptions",
    "OPTIONS_BY_KIND",
    "ParsedCommand",
    "ReferenceOptions",
    "SaveOptions",
]
