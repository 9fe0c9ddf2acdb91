"""Weapons and the damage source protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from arenabattler.models import DamageType


@runtime_checkable
class DamageSource(Protocol):
    """Anything that deals damage, such as a weapon or a natural attack."""

    @property
    def name(self) -> str: ...

    @property
    def base_damage(self) -> int: ...

    @property
    def damage_type(self) -> DamageType: ...


@dataclass(frozen=True)
class Weapon:
    """An equippable weapon."""

    name: str
    base_damage: int
    damage_type: DamageType