"""Turn-based text dungeon crawl: levels, movement, encounters and progression."""

from dungeon_game.errors import (
    GameError,
    ConfigurationError,
    OutOfBounds,
    InvalidPosition,
    InvalidCommand,
)
from dungeon_game.grid import Cell, Direction, GridLevel, Position
from dungeon_game.levels import get_level, level_count, list_levels
from dungeon_game.position import PositionState
from dungeon_game.inventory import Inventory
from dungeon_game.power import PowerPool
from dungeon_game.player import Player
from dungeon_game.placement import EncounterKind, EncounterRecord, assign_encounters
from dungeon_game.encounters import EncounterOutcome, Result
from dungeon_game.dispatch import EncounterDispatcher
from dungeon_game.transition import COMPLETE, next_level
from dungeon_game.session import GameSession, TurnResult
from dungeon_game.store import PlayerRecord, PlayerStore
