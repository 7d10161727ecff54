"""Tests for encounter dispatch on the player's cell."""

import random

import pytest

from dungeon_game.dispatch import EncounterDispatcher
from dungeon_game.encounters import Result
from dungeon_game.event_system import Event, EventBus
from dungeon_game.grid import Position
from dungeon_game.interaction import ScriptedInteraction
from dungeon_game.inventory import HAMMER, RELIC, TELEPORTATION_SPELL, Inventory
from dungeon_game.placement import EncounterKind, EncounterRecord, EncounterSlot
from dungeon_game.player import Player

TRAP_CELL = Position(1, 1)
GUARDIAN_CELL = Position(2, 2)


def make_record():
    record = EncounterRecord(level_number=3)
    record.slots[EncounterKind.TRAP] = EncounterSlot(EncounterKind.TRAP, TRAP_CELL)
    record.slots[EncounterKind.GUARDIAN] = EncounterSlot(EncounterKind.GUARDIAN, GUARDIAN_CELL)
    return record


@pytest.fixture
def dispatcher():
    return EncounterDispatcher(rng=random.Random(0))


class TestDispatch:
    def test_empty_cell_does_nothing(self, dispatcher):
        player = Player()
        assert dispatcher.check(make_record(), Position(0, 0), player, ScriptedInteraction()) is None
        assert player.power.points == 100

    def test_one_shot_fires_once(self, dispatcher):
        """A trap fires on the first visit and is disarmed afterwards."""
        record = make_record()
        player = Player()

        first = dispatcher.check(record, TRAP_CELL, player, ScriptedInteraction())
        assert first.result is Result.LOST
        assert record.slots[EncounterKind.TRAP].triggered

        second = dispatcher.check(record, TRAP_CELL, player, ScriptedInteraction())
        assert second is None
        assert player.power.points == 93

    def test_bypassed_one_shot_is_still_spent(self, dispatcher):
        record = make_record()
        player = Player(inventory=Inventory([HAMMER]))
        dispatcher.check(record, TRAP_CELL, player, ScriptedInteraction(["1"]))
        assert dispatcher.check(record, TRAP_CELL, player, ScriptedInteraction()) is None


class TestGuardianRetrigger:
    """
    The Guardian is the one encounter that is not disarmed by firing. This is
    intentional: fleeing only postpones the fight.
    """

    def test_retriggers_after_flee(self, dispatcher):
        record = make_record()
        player = Player(inventory=Inventory([TELEPORTATION_SPELL]))

        fled = dispatcher.check(record, GUARDIAN_CELL, player, ScriptedInteraction(["1"]))
        assert fled.result is Result.ESCAPED
        assert record.slots[EncounterKind.GUARDIAN].is_armed()

        player.inventory.add(RELIC)
        won = dispatcher.check(record, GUARDIAN_CELL, player, ScriptedInteraction(["1"]))
        assert won is not None
        assert won.result is Result.WON

    def test_never_fires_after_win(self, dispatcher):
        record = make_record()
        player = Player(inventory=Inventory([RELIC]))

        dispatcher.check(record, GUARDIAN_CELL, player, ScriptedInteraction(["1"]))
        assert record.guardian_resolved
        assert dispatcher.check(record, GUARDIAN_CELL, player, ScriptedInteraction()) is None
        assert player.is_alive()

    def test_fresh_record_rearms_guardian(self, dispatcher):
        """Resolution belongs to one placement record, not to the player."""
        record = make_record()
        player = Player(inventory=Inventory([RELIC]))
        dispatcher.check(record, GUARDIAN_CELL, player, ScriptedInteraction(["1"]))

        assert not make_record().guardian_resolved


class TestDispatchEvents:
    def test_events_emitted(self):
        bus = EventBus()
        seen = []
        for event in (
            Event.ENCOUNTER_TRIGGERED,
            Event.ENCOUNTER_RESOLVED,
            Event.ITEM_REMOVED,
            Event.ITEM_ADDED,
        ):
            bus.subscribe(event, seen.append)

        dispatcher = EncounterDispatcher(rng=random.Random(0), event_bus=bus)
        player = Player(inventory=Inventory([HAMMER]))
        dispatcher.check(make_record(), TRAP_CELL, player, ScriptedInteraction(["1"]))

        assert [data.event for data in seen] == [
            Event.ENCOUNTER_TRIGGERED,
            Event.ITEM_REMOVED,
            Event.ENCOUNTER_RESOLVED,
        ]
        assert seen[1].kwargs["item"] == HAMMER
        assert seen[2].kwargs["result"] is Result.BYPASSED
