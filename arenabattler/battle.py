"""A single turn-based battle between two creatures."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import Enum

from arenabattler.creatures import Creature
from arenabattler.dice import roll
from arenabattler.events import (
    AttackMissed,
    BattleEnded,
    BattleStarted,
    DamageApplied,
    EventBus,
    TurnStarted,
    default_bus,
)

PAUSE_SECONDS = 1.0


class BattleResult(Enum):
    """Possible outcomes of a battle."""

    COMBATANT1_WON = "combatant1_won"
    COMBATANT2_WON = "combatant2_won"
    DRAW = "draw"


class Battle:
    """Runs an automatic battle; the more dexterous combatant attacks first."""

    def __init__(
        self,
        combatant1: Creature,
        combatant2: Creature,
        *,
        bus: EventBus | None = None,
        pause: float = PAUSE_SECONDS,
        roll_die: Callable[[int, int], int] = roll,
    ) -> None:
        self._combatant1 = combatant1
        self._combatant2 = combatant2
        self._bus = bus if bus is not None else default_bus
        self._pause = pause
        self._roll = roll_die
        if combatant1.attributes.dexterity >= combatant2.attributes.dexterity:
            self.attacker, self.defender = combatant1, combatant2
        else:
            self.attacker, self.defender = combatant2, combatant1
        self.turn_number = 1

    def start(self) -> BattleResult:
        """Fight until one combatant falls and return the outcome."""
        self._bus.publish(BattleStarted(self._combatant1, self._combatant2))
        while self._combatant1.is_alive() and self._combatant2.is_alive():
            self.do_turn()
        winner = self._combatant1 if self._combatant1.is_alive() else self._combatant2
        self._bus.publish(BattleEnded(winner.name))
        if winner is self._combatant1:
            return BattleResult.COMBATANT1_WON
        return BattleResult.COMBATANT2_WON

    def do_turn(self) -> None:
        """Perform one attack; if the defender survives, swap roles and advance the turn."""
        attacker, defender = self.attacker, self.defender
        self._bus.publish(TurnStarted(attacker.name, defender.name, self.turn_number))

        attacker_dex = attacker.attributes.dexterity
        defender_dex = defender.attributes.dexterity
        hit_roll = self._roll(1, attacker_dex + defender_dex)

        if hit_roll > defender_dex:
            initial = attacker.calculate_damage(defender, self.turn_number)
            applied = defender.take_damage(initial, attacker, self.turn_number)
            self._bus.publish(
                DamageApplied(
                    defender.name, applied, defender.current_health, defender.max_health
                )
            )
        else:
            self._bus.publish(AttackMissed(attacker.name, defender.name))

        if defender.is_alive():
            if self._pause > 0:
                time.sleep(self._pause)
            self.attacker, self.defender = defender, attacker
            self.turn_number += 1