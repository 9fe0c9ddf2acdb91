"""Game events and a simple publish/subscribe bus."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

EventHandler = Callable[["Event"], None]


@dataclass(frozen=True)
class Event:
    """Base class of all game events."""


@dataclass(frozen=True)
class GameMessage(Event):
    """A general message to show to the user."""

    message: str


@dataclass(frozen=True)
class ErrorMessage(Event):
    """An error message."""

    message: str


@dataclass(frozen=True)
class BattleStarted(Event):
    """A battle between two creatures has begun."""

    combatant1: Any
    combatant2: Any


@dataclass(frozen=True)
class NewGameStarted(Event):
    """The player has started a new game."""


@dataclass(frozen=True)
class GameWon(Event):
    """The player has won the game."""


@dataclass(frozen=True)
class GameLost(Event):
    """The player has lost the game."""


@dataclass(frozen=True)
class TurnStarted(Event):
    """A battle turn has begun."""

    attacker_name: str
    defender_name: str
    turn_number: int


@dataclass(frozen=True)
class DamageApplied(Event):
    """A creature has taken damage."""

    target_name: str
    damage_amount: int
    current_hp: int
    max_hp: int


@dataclass(frozen=True)
class AttackMissed(Event):
    """An attack did not hit."""

    attacker_name: str
    defender_name: str


@dataclass(frozen=True)
class BattleEnded(Event):
    """A battle has ended."""

    winner_name: str


@dataclass(frozen=True)
class AbilityTriggered(Event):
    """An ability changed the outcome of an attack."""

    creature_name: str
    ability_id: str


class EventBus:
    """Delivers published events to every subscribed handler, in subscription order."""

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> EventHandler:
        """Register ``handler``; returns it so this can be used as a decorator."""
        self._handlers.append(handler)
        return handler

    def publish(self, event: Event) -> None:
        """Send ``event`` to all handlers."""
        for handler in tuple(self._handlers):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()


default_bus = EventBus()


def subscribe(handler: EventHandler) -> EventHandler:
    """Subscribe ``handler`` to the shared bus."""
    return default_bus.subscribe(handler)


def publish(event: Event) -> None:
    """Publish ``event`` on the shared bus."""
    default_bus.publish(event)