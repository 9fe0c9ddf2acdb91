import dataclasses

import pytest

from arenabattler.models import DamageType
from arenabattler.weapon import DamageSource, Weapon


def test_weapon_fields():
    sword = Weapon("Sword", 4, DamageType.SLASHING)
    assert sword.name == "Sword"
    assert sword.base_damage == 4
    assert sword.damage_type is DamageType.SLASHING


def test_weapon_is_a_damage_source():
    club = Weapon("Club", 3, DamageType.BLUDGEONING)
    assert isinstance(club, DamageSource)
    assert club.damage_type is DamageType.BLUDGEONING


def test_object_without_damage_is_not_a_damage_source():
    candidates = [Weapon("Spear", 3, DamageType.PIERCING), object()]
    assert [isinstance(c, DamageSource) for c in candidates] == [True, False]


def test_weapon_is_immutable():
    dagger = Weapon("Dagger", 2, DamageType.PIERCING)
    with pytest.raises(dataclasses.FrozenInstanceError):
        dagger.base_damage = 10
    assert dagger.base_damage == 2


def test_weapon_equality_by_value():
    assert Weapon("Axe", 4, DamageType.SLASHING) == Weapon("Axe", 4, DamageType.SLASHING)
    assert Weapon("Axe", 4, DamageType.SLASHING) != Weapon("Axe", 5, DamageType.SLASHING)