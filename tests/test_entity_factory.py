import json

import pytest

from arenabattler.data_manager import (
    ABILITIES_FILE,
    CLASSES_FILE,
    MONSTERS_FILE,
    WEAPONS_FILE,
    DataManager,
)
from arenabattler.entity_factory import EntityFactory
from arenabattler.events import ErrorMessage, EventBus, GameMessage, default_bus
from arenabattler.models import DamageType, PlayerClassChoice
from arenabattler.weapon import Weapon

WEAPONS = [
    {"id": "WEAPON_DAGGER", "name": "Dagger", "damage": 2, "damageType": "Piercing"},
    {"id": "WEAPON_CLUB", "name": "Club", "damage": 3, "damageType": "Bludgeoning"},
    {"id": "WEAPON_AXE", "name": "Axe", "damage": 4, "damageType": "Slashing"},
]


def monster(identifier, name, dropped, abilities=(), health=8):
    return {
        "id": identifier,
        "name": name,
        "health": health,
        "attributes": {"strength": 2, "dexterity": 1, "endurance": 2},
        "damage": 1,
        "damageType": "Bludgeoning",
        "droppedWeaponId": dropped,
        "abilities": list(abilities),
    }


MONSTERS = [
    monster("MONSTER_GOBLIN", "Goblin", "WEAPON_DAGGER"),
    monster("MONSTER_GOLEM", "Golem", "WEAPON_CLUB", ["FIRE_BREATH", "STONE_SKIN", "UNKNOWN"], 12),
]

CLASSES = [
    {
        "id": "CLASS_ROGUE",
        "name": "Rogue",
        "healthPerLevel": 4,
        "startingWeaponId": "WEAPON_DAGGER",
        "levelBonuses": [
            {"level": 1, "ability": "SNEAK_ATTACK"},
            {"level": 2, "ability": "POISON"},
        ],
    },
    {
        "id": "CLASS_WARRIOR",
        "name": "Warrior",
        "healthPerLevel": 5,
        "startingWeaponId": "WEAPON_AXE",
        "levelBonuses": [{"level": 1, "attributeBonus": {"strength": 1}}],
    },
    {
        "id": "CLASS_BARBARIAN",
        "name": "Barbarian",
        "healthPerLevel": 6,
        "startingWeaponId": "WEAPON_CLUB",
        "levelBonuses": [{"level": 1, "ability": "RAGE"}],
    },
]

ABILITIES = [{"id": "SNEAK_ATTACK", "name": "Sneak Attack", "description": "strikes unseen."}]


@pytest.fixture
def events():
    default_bus.clear()
    received = []
    default_bus.subscribe(received.append)
    yield received
    default_bus.clear()


def make_factory(directory, weapons=WEAPONS, monsters=MONSTERS, classes=CLASSES):
    contents = {
        WEAPONS_FILE: weapons,
        MONSTERS_FILE: monsters,
        CLASSES_FILE: classes,
        ABILITIES_FILE: ABILITIES,
    }
    for name, content in contents.items():
        (directory / name).write_text(json.dumps(content), encoding="utf-8")
    manager = DataManager(bus=EventBus())
    manager.load_from_files(directory)
    return EntityFactory(manager)


def texts(events, kind):
    return [event.message for event in events if isinstance(event, kind)]


def test_create_weapon(tmp_path, events):
    factory = make_factory(tmp_path)
    assert factory.create_weapon("WEAPON_DAGGER") == Weapon("Dagger", 2, DamageType.PIERCING)


def test_create_unknown_weapon(tmp_path, events):
    factory = make_factory(tmp_path)
    assert factory.create_weapon("WEAPON_NOPE") is None
    assert texts(events, ErrorMessage) == ["Warning: Weapon template not found for ID: WEAPON_NOPE"]


def test_create_monster(tmp_path, events):
    factory = make_factory(tmp_path)
    golem = factory.create_monster("MONSTER_GOLEM")
    assert golem.name == "Golem"
    assert golem.current_health == golem.max_health == MONSTERS[1]["health"]
    assert golem.damage_source == Weapon("Innate Attack", 1, DamageType.BLUDGEONING)
    assert golem.dropped_weapon_name() == "Club"
    assert golem.attack_ability_ids == ["FIRE_BREATH"]
    assert golem.defense_ability_ids == ["STONE_SKIN"]
    assert texts(events, ErrorMessage) == []


def test_create_unknown_monster(tmp_path, events):
    factory = make_factory(tmp_path)
    assert factory.create_monster("MONSTER_NOPE") is None
    assert texts(events, ErrorMessage) == ["Warning: Monster template not found for ID: MONSTER_NOPE"]


def test_monster_with_missing_dropped_weapon(tmp_path, events):
    monsters = [monster("MONSTER_BROKEN", "Broken", "WEAPON_NOPE")]
    factory = make_factory(tmp_path, monsters=monsters)
    assert factory.create_monster("MONSTER_BROKEN") is None
    assert texts(events, ErrorMessage)[-1] == (
        "Error: Could not create dropped weapon 'WEAPON_NOPE' for monster 'MONSTER_BROKEN'"
    )


def test_create_random_monster(tmp_path, events):
    factory = make_factory(tmp_path)
    names = {entry["name"] for entry in MONSTERS}
    for _ in range(10):
        assert factory.create_random_monster().name in names


def test_create_random_monster_without_templates(tmp_path, events):
    factory = make_factory(tmp_path, monsters=[])
    assert factory.create_random_monster() is None
    assert texts(events, ErrorMessage) == ["Could not get random monster data. Exiting."]


def test_create_rogue(tmp_path, events):
    factory = make_factory(tmp_path)
    player = factory.create_player("Hero", PlayerClassChoice.ROGUE)
    attributes = player.attributes
    for value in (attributes.strength, attributes.dexterity, attributes.endurance):
        assert 1 <= value <= 3
    assert player.name == "Hero"
    assert player.max_health == player.current_health == attributes.endurance + 4
    assert player.damage_source == Weapon("Dagger", 2, DamageType.PIERCING)
    assert player.level_in_class("CLASS_ROGUE") == 1
    assert player.total_level() == 1
    assert player.attack_ability_ids == ["SNEAK_ATTACK"]
    infos = texts(events, GameMessage)
    assert infos[0] == "You have chosen the path of the Rogue."
    assert "You have gained the ability: Sneak Attack!" in infos


def test_create_warrior_applies_attribute_bonus(tmp_path, events):
    factory = make_factory(tmp_path)
    player = factory.create_player("Hero", PlayerClassChoice.WARRIOR)
    assert 2 <= player.attributes.strength <= 4
    assert 1 <= player.attributes.dexterity <= 3
    assert player.max_health == player.attributes.endurance + 5
    assert player.damage_source.name == "Axe"
    assert player.class_levels == {"CLASS_WARRIOR": 1}
    assert "Your attributes have increased!" in texts(events, GameMessage)


def test_create_barbarian(tmp_path, events):
    factory = make_factory(tmp_path)
    player = factory.create_player("Hero", PlayerClassChoice.BARBARIAN)
    assert player.attack_ability_ids == ["RAGE"]
    assert player.level_in_class("CLASS_BARBARIAN") == 1
    assert "You have gained the ability: RAGE (Name not found)!!" in texts(events, GameMessage)


def test_create_player_with_missing_class(tmp_path, events):
    factory = make_factory(tmp_path, classes=[])
    assert factory.create_player("Hero", PlayerClassChoice.ROGUE) is None
    assert texts(events, ErrorMessage) == ["FATAL: Could not find data for class ID: CLASS_ROGUE"]
    assert texts(events, GameMessage) == []


def test_create_player_rejects_invalid_choice(tmp_path, events):
    factory = make_factory(tmp_path)
    with pytest.raises(ValueError):
        factory.create_player("Hero", 7)