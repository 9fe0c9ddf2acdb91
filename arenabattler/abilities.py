"""Abilities that change the damage a creature deals or receives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from arenabattler.models import DamageType

if TYPE_CHECKING:
    from arenabattler.creatures import Creature


class AttackModifier(ABC):
    """An ability applied when its owner attacks."""

    @abstractmethod
    def modify_attack(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        """Return the attack damage after this ability has been applied."""


class DefenseModifier(ABC):
    """An ability applied when its owner receives damage."""

    @abstractmethod
    def modify_defense(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        """Return the incoming damage after this ability has been applied."""


def _attacker_damage_type_is(attacker: Creature, damage_type: DamageType) -> bool:
    source = attacker.damage_source
    return source is not None and source.damage_type == damage_type


class ActionSurgeAbility(AttackModifier):
    """Adds the weapon's base damage once more on the first turn."""

    TURN_NUMBER_TO_APPLY = 1

    def modify_attack(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if turn_count == self.TURN_NUMBER_TO_APPLY and attacker.damage_source is not None:
            return damage + attacker.damage_source.base_damage
        return damage


class FireBreathAbility(AttackModifier):
    """Adds a fixed bonus on every third turn."""

    TURN_NUMBER_TO_APPLY = 3
    DAMAGE_AMPLIFIER = 3

    def modify_attack(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if turn_count % self.TURN_NUMBER_TO_APPLY == 0:
            return damage + self.DAMAGE_AMPLIFIER
        return damage


class PoisonAbility(AttackModifier):
    """Adds a bonus that starts on the second turn and grows by one each turn."""

    TURN_NUMBER_TO_APPLY = 2

    def modify_attack(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if turn_count >= self.TURN_NUMBER_TO_APPLY:
            return damage + (turn_count - 1)
        return damage


class RageAbility(AttackModifier):
    """A bonus for the first turns of a battle and a penalty afterwards."""

    DAMAGE_BONUS_DURATION_IN_TURNS = 3
    DAMAGE_BONUS = 2
    DAMAGE_PENALTY = -1

    def modify_attack(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if turn_count <= self.DAMAGE_BONUS_DURATION_IN_TURNS:
            return damage + self.DAMAGE_BONUS
        return damage + self.DAMAGE_PENALTY


class SneakAttackAbility(AttackModifier):
    """Adds a bonus when the attacker is more dexterous than the defender."""

    DAMAGE_AMPLIFIER = 1

    def modify_attack(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if attacker.attributes.dexterity > defender.attributes.dexterity:
            return damage + self.DAMAGE_AMPLIFIER
        return damage


class ImmunityToSlashingAbility(DefenseModifier):
    """Absorbs the weapon's base damage of slashing attacks."""

    def modify_defense(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if _attacker_damage_type_is(attacker, DamageType.SLASHING):
            return damage - attacker.damage_source.base_damage
        return damage


class ShieldAbility(DefenseModifier):
    """Reduces damage when the defender is stronger than the attacker."""

    DAMAGE_REDUCTION = 3

    def modify_defense(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if defender.attributes.strength > attacker.attributes.strength:
            return max(0, damage - self.DAMAGE_REDUCTION)
        return damage


class StoneSkinAbility(DefenseModifier):
    """Reduces damage by the defender's endurance."""

    def modify_defense(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        return max(0, damage - defender.attributes.endurance)


class VulnerabilityToBludgeoningAbility(DefenseModifier):
    """Multiplies the damage of bludgeoning attacks."""

    DAMAGE_AMPLIFIER = 2

    def modify_defense(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int:
        if _attacker_damage_type_is(attacker, DamageType.BLUDGEONING):
            return damage * self.DAMAGE_AMPLIFIER
        return damage