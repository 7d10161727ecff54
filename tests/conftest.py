"""Shared fixtures for game tests."""

import random
from typing import Dict

import pytest

from dungeon_game.grid import Position
from dungeon_game.interaction import ScriptedInteraction
from dungeon_game.placement import EncounterKind, EncounterRecord, EncounterSlot
from dungeon_game.session import GameSession


def place_encounters(
    session: GameSession, placements: Dict[EncounterKind, Position]
) -> EncounterRecord:
    """Replace the session's random placement with a fixed one."""
    record = EncounterRecord(level_number=session.level_number)
    for kind, position in placements.items():
        record.slots[kind] = EncounterSlot(kind=kind, position=position)
    session.encounters = record
    return record


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def session(rng: random.Random) -> GameSession:
    """A new player at the entrance of level 1 with no encounters placed."""
    game = GameSession.new_game("Tester", rng=rng)
    place_encounters(game, {})
    return game


@pytest.fixture
def interaction() -> ScriptedInteraction:
    return ScriptedInteraction()
