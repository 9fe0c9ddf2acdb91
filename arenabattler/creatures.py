"""Battle participants: the shared creature logic, the player and monsters."""

from __future__ import annotations

from dataclasses import replace
from typing import Protocol

from arenabattler.events import AbilityTriggered, EventBus, default_bus
from arenabattler.models import Attributes, DamageType
from arenabattler.weapon import DamageSource, Weapon

INNATE_ATTACK_NAME = "Innate Attack"
NO_WEAPON_NAME = "None"


class _AttackModifier(Protocol):
    def modify_attack(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int: ...


class _DefenseModifier(Protocol):
    def modify_defense(
        self, damage: int, attacker: Creature, defender: Creature, turn_count: int
    ) -> int: ...


class Creature:
    """A participant in a battle, with health, attributes, a damage source and modifiers."""

    def __init__(
        self,
        name: str,
        health: int,
        attributes: Attributes,
        damage_source: DamageSource | None,
        *,
        bus: EventBus | None = None,
    ) -> None:
        self._name = name
        self._attributes = replace(attributes)
        self.current_health = health
        self.max_health = health
        self.damage_source = damage_source
        self._bus = bus if bus is not None else default_bus
        self._attack_modifiers: list[tuple[str, _AttackModifier]] = []
        self._defense_modifiers: list[tuple[str, _DefenseModifier]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def attributes(self) -> Attributes:
        return self._attributes

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"health={self.current_health}/{self.max_health}, "
            f"attributes={self._attributes!r})"
        )

    def is_alive(self) -> bool:
        """True while current health is above zero."""
        return self.current_health > 0

    def calculate_damage(self, defender: Creature, turn_number: int) -> int:
        """Damage this creature deals: base damage plus strength, then attack modifiers."""
        damage = self.damage_source.base_damage + self._attributes.strength
        for ability_id, modifier in self._attack_modifiers:
            before = damage
            damage = modifier.modify_attack(damage, self, defender, turn_number)
            if damage != before:
                self._bus.publish(AbilityTriggered(self._name, ability_id))
        return damage

    def take_damage(self, damage: int, attacker: Creature, turn_number: int) -> int:
        """Apply incoming damage after defense modifiers; return the damage applied."""
        if damage <= 0:
            return 0
        for ability_id, modifier in self._defense_modifiers:
            before = damage
            damage = modifier.modify_defense(damage, attacker, self, turn_number)
            if damage != before:
                self._bus.publish(AbilityTriggered(self._name, ability_id))
        final_damage = max(0, damage)
        if final_damage > 0:
            self.current_health = max(0, self.current_health - final_damage)
        return final_damage

    def add_attack_modifier(self, modifier: _AttackModifier, ability_id: str) -> None:
        """Attach an ability that changes the damage this creature deals."""
        self._attack_modifiers.append((ability_id, modifier))

    def add_defense_modifier(self, modifier: _DefenseModifier, ability_id: str) -> None:
        """Attach an ability that changes the damage this creature receives."""
        self._defense_modifiers.append((ability_id, modifier))

    @property
    def attack_ability_ids(self) -> list[str]:
        return [ability_id for ability_id, _ in self._attack_modifiers]

    @property
    def defense_ability_ids(self) -> list[str]:
        return [ability_id for ability_id, _ in self._defense_modifiers]

    def apply_attribute_bonus(self, bonus: Attributes) -> None:
        """Add ``bonus`` to the attributes; added endurance also raises max health."""
        self._attributes.strength += bonus.strength
        self._attributes.dexterity += bonus.dexterity
        self._attributes.endurance += bonus.endurance
        if bonus.endurance != 0:
            self.increase_max_health(bonus.endurance)

    def increase_max_health(self, amount: int) -> None:
        """Raise max health by ``amount``; non-positive amounts are ignored."""
        if amount > 0:
            self.max_health += amount


class Player(Creature):
    """The player's hero, with class levels and an exchangeable weapon."""

    def __init__(
        self,
        name: str,
        health: int,
        attributes: Attributes,
        starting_weapon: Weapon | None,
        *,
        bus: EventBus | None = None,
    ) -> None:
        super().__init__(name, health, attributes, starting_weapon, bus=bus)
        self._class_levels: dict[str, int] = {}

    def restore_health(self) -> None:
        """Set current health back to max health."""
        self.current_health = self.max_health

    def equip_weapon(self, weapon: Weapon) -> None:
        """Replace the current weapon."""
        self.damage_source = weapon

    def add_class_level(self, class_id: str) -> None:
        """Gain one level in ``class_id``."""
        self._class_levels[class_id] = self._class_levels.get(class_id, 0) + 1

    def total_level(self) -> int:
        """Sum of levels over all classes."""
        return sum(self._class_levels.values())

    def level_in_class(self, class_id: str) -> int:
        """Level in ``class_id``, zero if the player has none."""
        return self._class_levels.get(class_id, 0)

    @property
    def class_levels(self) -> dict[str, int]:
        """Levels by class identifier, ordered by identifier."""
        return dict(sorted(self._class_levels.items()))


class Monster(Creature):
    """A monster with an innate attack that may drop a weapon when defeated."""

    def __init__(
        self,
        name: str,
        attributes: Attributes,
        health: int,
        innate_damage: int,
        innate_damage_type: DamageType,
        dropped_weapon: Weapon | None,
        *,
        bus: EventBus | None = None,
    ) -> None:
        innate = Weapon(INNATE_ATTACK_NAME, innate_damage, innate_damage_type)
        super().__init__(name, health, attributes, innate, bus=bus)
        self._dropped_weapon = dropped_weapon

    def dropped_weapon_name(self) -> str:
        """Name of the weapon the monster drops, or ``"None"``."""
        if self._dropped_weapon is not None:
            return self._dropped_weapon.name
        return NO_WEAPON_NAME

    def take_dropped_weapon(self) -> Weapon | None:
        """Hand over the dropped weapon; later calls return None."""
        weapon, self._dropped_weapon = self._dropped_weapon, None
        return weapon