"""Loading of game data templates from JSON files and lookups by identifier."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from os import PathLike
from pathlib import Path
from typing import Any

from arenabattler.dice import roll
from arenabattler.events import ErrorMessage, EventBus, GameMessage, default_bus
from arenabattler.models import (
    AbilityBonus,
    AbilityData,
    Attributes,
    CharacterClass,
    LevelBonus,
    MonsterData,
    WeaponData,
    parse_damage_type,
)

WEAPONS_FILE = "weapons.json"
MONSTERS_FILE = "monsters.json"
CLASSES_FILE = "classes.json"
ABILITIES_FILE = "abilities.json"


class DataFormatError(ValueError):
    """A data file cannot be read, or one of its entries is malformed."""


def _field(entry: Any, key: str) -> Any:
    if not isinstance(entry, dict):
        raise DataFormatError(f"expected an object, got {json.dumps(entry)}")
    try:
        return entry[key]
    except KeyError:
        raise DataFormatError(f"missing key '{key}'") from None


def _to_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataFormatError(f"key '{key}' must be a number")
    return int(value)


def _int(entry: Any, key: str) -> int:
    return _to_int(_field(entry, key), key)


def _int_or(entry: Any, key: str, default: int) -> int:
    if not isinstance(entry, dict):
        raise DataFormatError(f"expected an object, got {json.dumps(entry)}")
    if key not in entry:
        return default
    return _to_int(entry[key], key)


def _str(entry: Any, key: str) -> str:
    value = _field(entry, key)
    if not isinstance(value, str):
        raise DataFormatError(f"key '{key}' must be a string")
    return value


def _str_list(entry: Any, key: str) -> tuple[str, ...]:
    value = _field(entry, key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DataFormatError(f"key '{key}' must be an array of strings")
    return tuple(value)


def _entries(data: Any) -> Iterable[Any]:
    if isinstance(data, dict):
        return data.values()
    if isinstance(data, list):
        return data
    return [data]


class DataManager:
    """Holds weapon, monster, class and ability templates loaded from a data directory."""

    def __init__(self, *, bus: EventBus | None = None) -> None:
        self._bus = bus if bus is not None else default_bus
        self._weapons: dict[str, WeaponData] = {}
        self._monsters: dict[str, MonsterData] = {}
        self._classes: dict[str, CharacterClass] = {}
        self._abilities: dict[str, AbilityData] = {}
        self._monster_ids: list[str] = []

    @property
    def monster_ids(self) -> tuple[str, ...]:
        """Identifiers of the loaded monsters, in load order."""
        return tuple(self._monster_ids)

    def load_from_files(self, data_path: str | PathLike[str]) -> None:
        """Load every data file from ``data_path``; problems are reported as error events."""
        directory = Path(data_path)
        if not directory.exists():
            self._bus.publish(
                ErrorMessage(f'FATAL ERROR: Data directory not found at "{directory}"')
            )
            return
        self._load(directory / WEAPONS_FILE, self._parse_weapon, "weapon")
        self._load(directory / MONSTERS_FILE, self._parse_monster, "monster")
        self._load(directory / CLASSES_FILE, self._parse_class, "class")
        self._load(directory / ABILITIES_FILE, self._parse_ability, "ability")

    def _load(self, path: Path, parse_entry: Callable[[Any], None], data_type: str) -> None:
        try:
            try:
                with path.open(encoding="utf-8") as handle:
                    data = json.load(handle)
            except OSError:
                raise DataFormatError(f"Could not open file: {path}") from None
            count = 0
            for entry in _entries(data):
                parse_entry(entry)
                count += 1
        except ValueError as exc:
            self._bus.publish(
                ErrorMessage(f"Error loading {data_type} data from '{path}': {exc}")
            )
            return
        self._bus.publish(GameMessage(f"Successfully loaded {count} {data_type} templates."))

    def _parse_weapon(self, entry: Any) -> None:
        weapon = WeaponData(
            id=_str(entry, "id"),
            name=_str(entry, "name"),
            damage=_int(entry, "damage"),
            damage_type=parse_damage_type(_str(entry, "damageType")),
        )
        self._weapons[weapon.id] = weapon

    def _parse_monster(self, entry: Any) -> None:
        identifier = _str(entry, "id")
        name = _str(entry, "name")
        health = _int(entry, "health")
        raw_attributes = _field(entry, "attributes")
        attributes = Attributes(
            strength=_int(raw_attributes, "strength"),
            dexterity=_int(raw_attributes, "dexterity"),
            endurance=_int(raw_attributes, "endurance"),
        )
        monster = MonsterData(
            id=identifier,
            name=name,
            health=health,
            attributes=attributes,
            innate_damage=_int(entry, "damage"),
            innate_damage_type=parse_damage_type(_str(entry, "damageType")),
            dropped_weapon_id=_str(entry, "droppedWeaponId"),
            ability_ids=_str_list(entry, "abilities"),
        )
        self._monsters[monster.id] = monster
        self._monster_ids.append(monster.id)

    def _parse_class(self, entry: Any) -> None:
        identifier = _str(entry, "id")
        name = _str(entry, "name")
        health_per_level = _int(entry, "healthPerLevel")
        starting_weapon_id = _str(entry, "startingWeaponId")
        raw_bonuses = _field(entry, "levelBonuses")

        bonuses: list[LevelBonus] = []
        for bonus_entry in _entries(raw_bonuses):
            level = _int(bonus_entry, "level")
            if "ability" in bonus_entry:
                bonus: AbilityBonus | Attributes = AbilityBonus(_str(bonus_entry, "ability"))
            elif "attributeBonus" in bonus_entry:
                raw = bonus_entry["attributeBonus"]
                bonus = Attributes(
                    strength=_int_or(raw, "strength", 0),
                    dexterity=_int_or(raw, "dexterity", 0),
                    endurance=_int_or(raw, "endurance", 0),
                )
            else:
                dump = json.dumps(bonus_entry, separators=(",", ":"), sort_keys=True)
                self._bus.publish(
                    ErrorMessage(
                        f"Warning: Unknown bonus type in class '{identifier}'. "
                        f"Bonus data: {dump}"
                    )
                )
                continue
            bonuses.append(LevelBonus(level, bonus))

        self._classes[identifier] = CharacterClass(
            id=identifier,
            name=name,
            health_per_level=health_per_level,
            starting_weapon_id=starting_weapon_id,
            level_bonuses=tuple(bonuses),
        )

    def _parse_ability(self, entry: Any) -> None:
        ability = AbilityData(
            id=_str(entry, "id"),
            name=_str(entry, "name"),
            description=_str(entry, "description"),
        )
        self._abilities[ability.id] = ability

    def weapon_data(self, weapon_id: str) -> WeaponData | None:
        """Weapon template with ``weapon_id``, or None."""
        return self._weapons.get(str(weapon_id))

    def monster_data(self, monster_id: str) -> MonsterData | None:
        """Monster template with ``monster_id``, or None."""
        return self._monsters.get(str(monster_id))

    def random_monster_data(self) -> MonsterData | None:
        """A randomly chosen monster template, or None if none are loaded."""
        if not self._monster_ids:
            return None
        index = roll(0, len(self._monster_ids) - 1)
        return self.monster_data(self._monster_ids[index])

    def character_class(self, class_id: str) -> CharacterClass | None:
        """Character class template with ``class_id``, or None."""
        return self._classes.get(str(class_id))

    def ability_data(self, ability_id: str) -> AbilityData | None:
        """Ability data with ``ability_id``, or None."""
        return self._abilities.get(str(ability_id))