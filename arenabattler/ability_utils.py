"""Granting abilities and applying level-up bonuses to creatures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arenabattler.ability_factory import create_attack_modifier, create_defense_modifier
from arenabattler.events import ErrorMessage, GameMessage, publish
from arenabattler.models import AbilityBonus, Attributes, LevelBonus

if TYPE_CHECKING:
    from arenabattler.creatures import Creature
    from arenabattler.data_manager import DataManager


def add_ability(creature: Creature, ability_id: str) -> None:
    """Attach the modifiers of ``ability_id`` to ``creature``; unknown IDs are reported."""
    ability_id = str(ability_id)
    added = False

    attack_modifier = create_attack_modifier(ability_id)
    if attack_modifier is not None:
        creature.add_attack_modifier(attack_modifier, ability_id)
        added = True

    defense_modifier = create_defense_modifier(ability_id)
    if defense_modifier is not None:
        creature.add_defense_modifier(defense_modifier, ability_id)
        added = True

    if not added:
        publish(
            ErrorMessage(
                f"Warning: Unknown ability ID '{ability_id}' for creature '{creature.name}'."
            )
        )


def apply_bonus(creature: Creature, bonus: LevelBonus, data_manager: DataManager) -> None:
    """Apply a level bonus: grant its ability or add its attributes."""
    match bonus.bonus:
        case AbilityBonus(ability_id=ability_id):
            add_ability(creature, ability_id)
            ability = data_manager.ability_data(ability_id)
            shown = ability.name if ability is not None else f"{ability_id} (Name not found)!"
            publish(GameMessage(f"You have gained the ability: {shown}!"))
        case Attributes() as attributes:
            creature.apply_attribute_bonus(attributes)
            publish(GameMessage("Your attributes have increased!"))
        case other:
            raise TypeError(f"unsupported level bonus: {other!r}")