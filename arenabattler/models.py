"""Core data types: attributes, damage types, identifiers and data templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, StrEnum


@dataclass
class Attributes:
    """The core attributes of a creature."""

    strength: int = 0
    dexterity: int = 0
    endurance: int = 0


AttributeBonus = Attributes


class DamageType(Enum):
    """Kinds of damage a weapon or attack can deal."""

    SLASHING = "Slashing"
    PIERCING = "Piercing"
    BLUDGEONING = "Bludgeoning"


def parse_damage_type(text: str) -> DamageType:
    """Return the damage type named by ``text``, as written in the data files."""
    try:
        return DamageType(text)
    except ValueError:
        raise ValueError(f"Unknown damage type: {text}") from None


class PlayerClassChoice(IntEnum):
    """Classes the player can pick, numbered as shown in the menu."""

    ROGUE = 1
    WARRIOR = 2
    BARBARIAN = 3


class PostBattleChoice(Enum):
    """What the player does with a weapon dropped after a battle."""

    TAKE_WEAPON = "take"
    LEAVE_WEAPON = "leave"


class WeaponId(StrEnum):
    """Identifiers of weapon templates."""

    WEAPON_CLUB = "WEAPON_CLUB"
    WEAPON_DAGGER = "WEAPON_DAGGER"
    WEAPON_SWORD = "WEAPON_SWORD"
    WEAPON_AXE = "WEAPON_AXE"
    WEAPON_SPEAR = "WEAPON_SPEAR"
    WEAPON_LEGENDARY_SWORD = "WEAPON_LEGENDARY_SWORD"


class MonsterId(StrEnum):
    """Identifiers of monster templates."""

    MONSTER_GOBLIN = "MONSTER_GOBLIN"
    MONSTER_SKELETON = "MONSTER_SKELETON"
    MONSTER_SLIME = "MONSTER_SLIME"
    MONSTER_GHOST = "MONSTER_GHOST"
    MONSTER_GOLEM = "MONSTER_GOLEM"
    MONSTER_DRAGON = "MONSTER_DRAGON"


class ClassId(StrEnum):
    """Identifiers of character class templates."""

    CLASS_ROGUE = "CLASS_ROGUE"
    CLASS_WARRIOR = "CLASS_WARRIOR"
    CLASS_BARBARIAN = "CLASS_BARBARIAN"


class AbilityId(StrEnum):
    """Identifiers of abilities."""

    SNEAK_ATTACK = "SNEAK_ATTACK"
    POISON = "POISON"
    ACTION_SURGE = "ACTION_SURGE"
    SHIELD = "SHIELD"
    RAGE = "RAGE"
    STONE_SKIN = "STONE_SKIN"
    VULNERABILITY_TO_BLUDGEONING = "VULNERABILITY_TO_BLUDGEONING"
    IMMUNITY_TO_SLASHING = "IMMUNITY_TO_SLASHING"
    FIRE_BREATH = "FIRE_BREATH"


_CLASS_IDS = {
    PlayerClassChoice.ROGUE: ClassId.CLASS_ROGUE,
    PlayerClassChoice.WARRIOR: ClassId.CLASS_WARRIOR,
    PlayerClassChoice.BARBARIAN: ClassId.CLASS_BARBARIAN,
}


def class_id_for(choice: PlayerClassChoice) -> ClassId:
    """Return the class identifier that a menu choice stands for."""
    return _CLASS_IDS[PlayerClassChoice(choice)]


@dataclass(frozen=True)
class AbilityData:
    """Display data of an ability."""

    id: str
    name: str
    description: str


@dataclass(frozen=True)
class AbilityBonus:
    """A level bonus that grants an ability."""

    ability_id: str


@dataclass(frozen=True)
class LevelBonus:
    """A bonus granted on reaching a level in a class."""

    level: int
    bonus: AbilityBonus | Attributes


@dataclass(frozen=True)
class CharacterClass:
    """A character class template."""

    id: str
    name: str
    health_per_level: int
    starting_weapon_id: str
    level_bonuses: tuple[LevelBonus, ...] = ()


@dataclass(frozen=True)
class MonsterData:
    """A monster template."""

    id: str
    name: str
    health: int
    attributes: Attributes
    innate_damage: int
    innate_damage_type: DamageType
    dropped_weapon_id: str
    ability_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WeaponData:
    """A weapon template."""

    id: str
    name: str
    damage: int
    damage_type: DamageType