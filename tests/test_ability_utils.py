import json

import pytest

from arenabattler.ability_utils import add_ability, apply_bonus
from arenabattler.creatures import Creature
from arenabattler.data_manager import ABILITIES_FILE, DataManager
from arenabattler.events import ErrorMessage, EventBus, GameMessage, default_bus
from arenabattler.models import AbilityBonus, Attributes, DamageType, LevelBonus
from arenabattler.weapon import Weapon


@pytest.fixture
def events():
    default_bus.clear()
    received = []
    default_bus.subscribe(received.append)
    yield received
    default_bus.clear()


def make_creature():
    return Creature("Tester", 10, Attributes(1, 1, 1), Weapon("Stick", 2, DamageType.BLUDGEONING))


def texts(events, kind):
    return [event.message for event in events if isinstance(event, kind)]


def test_add_attack_ability(events):
    creature = make_creature()
    add_ability(creature, "RAGE")
    assert creature.attack_ability_ids == ["RAGE"]
    assert creature.defense_ability_ids == []
    assert texts(events, ErrorMessage) == []


def test_add_defense_ability(events):
    creature = make_creature()
    add_ability(creature, "STONE_SKIN")
    assert creature.defense_ability_ids == ["STONE_SKIN"]
    assert creature.attack_ability_ids == []


def test_add_unknown_ability_reports_warning(events):
    creature = make_creature()
    add_ability(creature, "FLY")
    assert creature.attack_ability_ids == [] and creature.defense_ability_ids == []
    assert texts(events, ErrorMessage) == ["Warning: Unknown ability ID 'FLY' for creature 'Tester'."]


def test_ability_bonus_uses_ability_name(tmp_path, events):
    (tmp_path / ABILITIES_FILE).write_text(
        json.dumps([{"id": "RAGE", "name": "Rage", "description": "rages."}]), encoding="utf-8"
    )
    manager = DataManager(bus=EventBus())
    manager.load_from_files(tmp_path)
    creature = make_creature()
    apply_bonus(creature, LevelBonus(1, AbilityBonus("RAGE")), manager)
    assert creature.attack_ability_ids == ["RAGE"]
    assert texts(events, GameMessage) == ["You have gained the ability: Rage!"]


def test_ability_bonus_without_ability_data(events):
    manager = DataManager(bus=EventBus())
    creature = make_creature()
    apply_bonus(creature, LevelBonus(1, AbilityBonus("RAGE")), manager)
    assert texts(events, GameMessage) == ["You have gained the ability: RAGE (Name not found)!!"]


def test_attribute_bonus_raises_attributes_and_health(events):
    creature = make_creature()
    before = Attributes(1, 1, 1)
    bonus = Attributes(strength=1, dexterity=0, endurance=2)
    apply_bonus(creature, LevelBonus(2, bonus), DataManager(bus=EventBus()))
    assert creature.attributes == Attributes(
        before.strength + bonus.strength,
        before.dexterity + bonus.dexterity,
        before.endurance + bonus.endurance,
    )
    assert creature.max_health == 10 + bonus.endurance
    assert creature.current_health == 10
    assert texts(events, GameMessage) == ["Your attributes have increased!"]


def test_attribute_bonus_without_endurance_keeps_max_health(events):
    creature = make_creature()
    apply_bonus(creature, LevelBonus(2, Attributes(dexterity=1)), DataManager(bus=EventBus()))
    assert creature.max_health == 10
    assert creature.attributes.dexterity == 1 + 1