"""Fires the encounter placed on the player's cell after each move."""

import logging
import random
from typing import Dict, Optional

from .encounters import Encounter, EncounterOutcome, Result, default_encounters
from .event_system import Event, EventBus
from .grid import Position
from .interaction import Interaction
from .placement import EncounterKind, EncounterRecord
from .player import Player

logger = logging.getLogger(__name__)


class EncounterDispatcher:
    """
    Looks up the encounter on a cell and runs its handler.

    One-shot encounters are disarmed the moment they fire, before the handler
    runs, so re-entering the cell later does nothing. The Guardian stays armed
    until a win marks it resolved.
    """

    def __init__(
        self,
        handlers: Optional[Dict[EncounterKind, Encounter]] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.handlers: Dict[EncounterKind, Encounter] = handlers or default_encounters(rng)
        self.event_bus: Optional[EventBus] = event_bus

    def _emit(self, event: Event, **kwargs) -> None:
        if self.event_bus:
            self.event_bus.emit(event, **kwargs)

    def check(
        self,
        record: EncounterRecord,
        position: Position,
        player: Player,
        interaction: Interaction,
    ) -> Optional[EncounterOutcome]:
        """Run the armed encounter at `position`, if there is one."""
        slot = record.slot_at(position)
        if slot is None or not slot.is_armed():
            return None

        handler = self.handlers[slot.kind]
        slot.triggered = True
        logger.debug(
            "Triggering %s at (%d, %d)", slot.kind.display_name, position.row, position.column
        )
        self._emit(Event.ENCOUNTER_TRIGGERED, kind=slot.kind)

        outcome = handler.run(player, interaction)

        if slot.kind.repeatable and outcome.result is Result.WON:
            slot.resolved = True

        for item in outcome.items_used:
            self._emit(Event.ITEM_REMOVED, item=item)
        for item in outcome.items_granted:
            self._emit(Event.ITEM_ADDED, item=item)
        self._emit(Event.ENCOUNTER_RESOLVED, kind=slot.kind, result=outcome.result)
        return outcome
