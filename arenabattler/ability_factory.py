"""Creation of ability modifiers from ability identifiers."""

from __future__ import annotations

from collections.abc import Callable

from arenabattler.abilities import (
    ActionSurgeAbility,
    AttackModifier,
    DefenseModifier,
    FireBreathAbility,
    ImmunityToSlashingAbility,
    PoisonAbility,
    RageAbility,
    ShieldAbility,
    SneakAttackAbility,
    StoneSkinAbility,
    VulnerabilityToBludgeoningAbility,
)
from arenabattler.models import AbilityId

_ATTACK_CREATORS: dict[str, Callable[[], AttackModifier]] = {
    AbilityId.RAGE: RageAbility,
    AbilityId.SNEAK_ATTACK: SneakAttackAbility,
    AbilityId.POISON: PoisonAbility,
    AbilityId.ACTION_SURGE: ActionSurgeAbility,
    AbilityId.FIRE_BREATH: FireBreathAbility,
}

_DEFENSE_CREATORS: dict[str, Callable[[], DefenseModifier]] = {
    AbilityId.STONE_SKIN: StoneSkinAbility,
    AbilityId.VULNERABILITY_TO_BLUDGEONING: VulnerabilityToBludgeoningAbility,
    AbilityId.IMMUNITY_TO_SLASHING: ImmunityToSlashingAbility,
    AbilityId.SHIELD: ShieldAbility,
}


def create_attack_modifier(ability_id: str) -> AttackModifier | None:
    """Return a new attack modifier for ``ability_id``, or None if it is not one."""
    creator = _ATTACK_CREATORS.get(str(ability_id))
    return creator() if creator is not None else None


def create_defense_modifier(ability_id: str) -> DefenseModifier | None:
    """Return a new defense modifier for ``ability_id``, or None if it is not one."""
    creator = _DEFENSE_CREATORS.get(str(ability_id))
    return creator() if creator is not None else None