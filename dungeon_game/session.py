"""
Game session: the explicit context object for one playthrough.

The session owns the active GridLevel, the player's PositionState on it and
the EncounterRecord for it. All three are replaced together whenever a level
becomes active, so nothing from a previous level's placement leaks into the
next one. The Player (power points, inventory, relic flag) carries over.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Optional

from .dispatch import EncounterDispatcher
from .display import parse_room_label, room_label
from .encounters import EncounterOutcome
from .errors import InvalidPosition
from .event_system import Event, EventBus
from .grid import Cell, Direction, GridLevel, Position
from .interaction import Interaction
from .inventory import RELIC, Inventory
from .levels import get_level, level_count
from .placement import EncounterRecord, assign_encounters
from .player import Player
from .position import PositionState
from .power import MOVE_COST, PowerPool
from .store import PlayerRecord
from .transition import COMPLETE, NextLevel, is_on_exit, next_level

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """What happened when the player tried to move."""

    moved: bool
    position: Position
    reason: str = ""
    outcome: Optional[EncounterOutcome] = None
    reached_exit: bool = False
    next_level: Optional[NextLevel] = None
    game_over: bool = False


class GameSession:
    def __init__(
        self,
        player: Optional[Player] = None,
        level_number: int = 1,
        start: Optional[Position] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
        dispatcher: Optional[EncounterDispatcher] = None,
    ) -> None:
        self.player: Player = player or Player()
        self.rng: random.Random = rng or random.Random()
        self.event_bus: Optional[EventBus] = event_bus
        self.dispatcher: EncounterDispatcher = dispatcher or EncounterDispatcher(
            rng=self.rng, event_bus=event_bus
        )
        self.level_count: int = level_count()

        self.game_over: bool = False
        self.complete: bool = False

        # Set by load_level()
        self.level_number: int
        self.level: GridLevel
        self.position: PositionState
        self.encounters: EncounterRecord
        self.load_level(level_number, start)

    def set_event_bus(self, bus: EventBus) -> None:
        self.event_bus = bus
        self.dispatcher.event_bus = bus

    def _emit(self, event: Event, **kwargs: Any) -> None:
        if self.event_bus:
            self.event_bus.emit(event, **kwargs)

    @property
    def finished(self) -> bool:
        return self.game_over or self.complete

    def load_level(self, number: int, start: Optional[Position] = None) -> None:
        """
        Make level `number` active.

        The player starts at the level's entrance unless `start` is given, and
        encounters are placed afresh.
        """
        level = get_level(number)
        position = PositionState(level, start)
        encounters = assign_encounters(level, self.rng)

        self.level_number = number
        self.level = level
        self.position = position
        self.encounters = encounters

        logger.info(
            "Level %d active, player at %s", number, room_label(position.current)
        )
        self._emit(Event.LEVEL_START, level=number)

    def take_step(self, direction: Direction, interaction: Interaction) -> TurnResult:
        """
        Run one movement turn: validate and commit the move, pay for it, fire
        any encounter on the new cell, then check for death and the exit.

        A rejected move changes nothing and costs nothing.
        """
        if self.finished:
            raise RuntimeError("The session has already ended")

        target = self.position.propose_move(direction)
        try:
            self.position.commit_move(target)
        except InvalidPosition as e:
            self._emit(Event.MOVE_REJECTED, row=target.row, col=target.column, reason=str(e))
            return TurnResult(moved=False, position=self.position.current, reason=str(e))

        self.player.power.deduct(MOVE_COST)
        self._emit(Event.PLAYER_MOVED, row=target.row, col=target.column)

        result = TurnResult(moved=True, position=target)
        result.outcome = self.dispatcher.check(
            self.encounters, target, self.player, interaction
        )

        if not self.player.is_alive():
            self.handle_game_over()
            result.game_over = True
            return result

        if self.is_on_exit():
            result.reached_exit = True
            result.next_level = self.advance()
        return result

    def is_on_exit(self) -> bool:
        return is_on_exit(self.position)

    def advance(self) -> NextLevel:
        """Leave the current level for the next one, or finish the game after the last."""
        self._emit(Event.LEVEL_END, level=self.level_number)
        upcoming = next_level(self.level_number, self.level_count)
        if upcoming is COMPLETE:
            logger.info("Final level cleared")
            self.complete = True
            self._emit(Event.GAME_COMPLETE)
            return COMPLETE

        self.load_level(upcoming)
        return upcoming

    def handle_game_over(self) -> None:
        """End the session. Player state is left exactly as it is."""
        logger.info("Game over on level %d", self.level_number)
        self.game_over = True
        self._emit(Event.GAME_OVER)

    def room_label(self) -> str:
        return room_label(self.position.current)

    def to_record(self) -> PlayerRecord:
        return PlayerRecord(
            name=self.player.name,
            current_level=self.level_number,
            power_points=self.player.power.points,
            current_room=self.room_label(),
            inventory=self.player.inventory.to_record(),
            relic_found=self.player.relic_found,
        )

    @classmethod
    def from_record(
        cls,
        record: PlayerRecord,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "GameSession":
        """
        Resume a saved player.

        The player is put back in their saved room when that room is a
        walkable, non-exit cell of the saved level; otherwise at the entrance.
        """
        inventory = Inventory.from_record(record.inventory)
        player = Player(
            name=record.name,
            power=PowerPool(max(0, record.power_points)),
            inventory=inventory,
            relic_found=record.relic_found or inventory.has(RELIC),
        )
        level = get_level(record.current_level)
        start = parse_room_label(record.current_room)
        if start is not None and (
            not level.is_walkable(start.row, start.column)
            or level.cell_at(start.row, start.column) == Cell.EXIT
        ):
            start = None

        return cls(
            player=player,
            level_number=record.current_level,
            start=start,
            rng=rng,
            event_bus=event_bus,
        )

    @classmethod
    def new_game(
        cls,
        name: str,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "GameSession":
        return cls(player=Player(name=name), rng=rng, event_bus=event_bus)
