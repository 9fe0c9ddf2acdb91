"""Creation of players, monsters and weapons from loaded templates."""

from __future__ import annotations

from arenabattler.ability_factory import create_attack_modifier, create_defense_modifier
from arenabattler.ability_utils import apply_bonus
from arenabattler.creatures import Monster, Player
from arenabattler.data_manager import DataManager
from arenabattler.dice import roll
from arenabattler.events import ErrorMessage, EventBus, GameMessage, default_bus
from arenabattler.models import Attributes, PlayerClassChoice, class_id_for
from arenabattler.weapon import Weapon

STARTING_ATTRIBUTE_MIN = 1
STARTING_ATTRIBUTE_MAX = 3


def _starting_attribute() -> int:
    return roll(STARTING_ATTRIBUTE_MIN, STARTING_ATTRIBUTE_MAX)


class EntityFactory:
    """Builds game entities from the templates of a data manager."""

    def __init__(self, data_manager: DataManager, *, bus: EventBus | None = None) -> None:
        self._data = data_manager
        self._bus = bus if bus is not None else default_bus

    def create_player(self, name: str, class_choice: PlayerClassChoice) -> Player | None:
        """Create a level-1 player of the chosen class, or None if the class is unknown."""
        attributes = Attributes(
            strength=_starting_attribute(),
            dexterity=_starting_attribute(),
            endurance=_starting_attribute(),
        )
        class_id = str(class_id_for(class_choice))
        class_data = self._data.character_class(class_id)
        if class_data is None:
            self._bus.publish(ErrorMessage(f"FATAL: Could not find data for class ID: {class_id}"))
            return None

        self._bus.publish(GameMessage(f"You have chosen the path of the {class_data.name}."))

        health = attributes.endurance + class_data.health_per_level
        weapon = self.create_weapon(class_data.starting_weapon_id)
        player = Player(name, health, attributes, weapon, bus=self._bus)
        player.add_class_level(class_id)

        for bonus in class_data.level_bonuses:
            if bonus.level == 1:
                apply_bonus(player, bonus, self._data)
        return player

    def create_monster(self, monster_id: str) -> Monster | None:
        """Create the monster with ``monster_id``, or None if it cannot be built."""
        data = self._data.monster_data(monster_id)
        if data is None:
            self._bus.publish(
                ErrorMessage(f"Warning: Monster template not found for ID: {monster_id}")
            )
            return None

        dropped_weapon = self.create_weapon(data.dropped_weapon_id)
        if dropped_weapon is None:
            self._bus.publish(
                ErrorMessage(
                    f"Error: Could not create dropped weapon '{data.dropped_weapon_id}' "
                    f"for monster '{monster_id}'"
                )
            )
            return None

        monster = Monster(
            data.name,
            data.attributes,
            data.health,
            data.innate_damage,
            data.innate_damage_type,
            dropped_weapon,
            bus=self._bus,
        )
        for ability_id in data.ability_ids:
            attack_modifier = create_attack_modifier(ability_id)
            if attack_modifier is not None:
                monster.add_attack_modifier(attack_modifier, ability_id)
            defense_modifier = create_defense_modifier(ability_id)
            if defense_modifier is not None:
                monster.add_defense_modifier(defense_modifier, ability_id)
        return monster

    def create_random_monster(self) -> Monster | None:
        """Create a monster from a randomly chosen template, or None."""
        data = self._data.random_monster_data()
        if data is None:
            self._bus.publish(ErrorMessage("Could not get random monster data. Exiting."))
            return None
        return self.create_monster(data.id)

    def create_weapon(self, weapon_id: str) -> Weapon | None:
        """Create the weapon with ``weapon_id``, or None if there is no such template."""
        data = self._data.weapon_data(weapon_id)
        if data is None:
            self._bus.publish(ErrorMessage(f"Warning: Weapon template not found for ID: {weapon_id}"))
            return None
        return Weapon(data.name, data.damage, data.damage_type)