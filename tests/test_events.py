import dataclasses

import pytest

from arenabattler import events
from arenabattler.events import (
    AbilityTriggered,
    BattleEnded,
    DamageApplied,
    ErrorMessage,
    Event,
    EventBus,
    GameMessage,
    GameWon,
    TurnStarted,
)


@pytest.fixture
def shared_bus():
    events.default_bus.clear()
    yield events.default_bus
    events.default_bus.clear()


def test_publish_reaches_all_handlers_in_order():
    bus = EventBus()
    seen = []
    bus.subscribe(lambda e: seen.append(("a", e)))
    bus.subscribe(lambda e: seen.append(("b", e)))
    msg = GameMessage("hello")
    bus.publish(msg)
    assert seen == [("a", msg), ("b", msg)]


def test_publish_on_other_bus_does_not_reach_handler():
    listening = EventBus()
    other = EventBus()
    seen = []
    listening.subscribe(seen.append)
    other.publish(GameWon())
    assert seen == []
    listening.publish(GameWon())
    assert seen == [GameWon()]


def test_clear_removes_handlers():
    bus = EventBus()
    seen = []
    bus.subscribe(seen.append)
    bus.clear()
    bus.publish(GameWon())
    assert seen == []


def test_subscribe_returns_handler():
    bus = EventBus()
    seen = []
    handler = bus.subscribe(seen.append)
    assert handler == seen.append
    bus.publish(BattleEnded("Hero"))
    assert seen == [BattleEnded("Hero")]


def test_handler_subscribed_during_publish_sees_next_event_only():
    bus = EventBus()
    late = []

    def first(event):
        if not late and event == GameMessage("one"):
            bus.subscribe(late.append)

    bus.subscribe(first)
    bus.publish(GameMessage("one"))
    bus.publish(GameMessage("two"))
    assert late == [GameMessage("two")]


def test_module_functions_use_shared_bus(shared_bus):
    seen = []
    events.subscribe(seen.append)
    events.publish(ErrorMessage("boom"))
    assert seen == [ErrorMessage("boom")]


def test_events_hold_their_fields():
    turn = TurnStarted("Hero", "Goblin", 3)
    damage = DamageApplied("Goblin", 4, 1, 5)
    triggered = AbilityTriggered("Hero", "RAGE")
    assert (turn.attacker_name, turn.defender_name, turn.turn_number) == ("Hero", "Goblin", 3)
    assert (damage.damage_amount, damage.current_hp, damage.max_hp) == (4, 1, 5)
    assert triggered.ability_id == "RAGE"
    assert isinstance(triggered, Event) and triggered.creature_name == "Hero"


def test_events_are_immutable():
    msg = GameMessage("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.message = "y"
    assert msg.message == "x"


def test_dispatch_by_type():
    bus = EventBus()
    errors = []
    bus.subscribe(lambda e: errors.append(e.message) if isinstance(e, ErrorMessage) else None)
    bus.publish(GameMessage("fine"))
    bus.publish(ErrorMessage("bad"))
    assert errors == ["bad"]