"""
Encounter Placement
===================

Every time a level becomes active, each encounter that applies to that level
is placed on its own cell:

1. Trap and Mad Scientist appear on every level.
2. The Lost Explorer appears only on level 2.
3. The Guardian appears only on level 3, and only on a plain floor cell.

Placement order is fixed (trap, mad scientist, lost explorer, guardian). For
each kind we sample uniformly random cells until one is a floor-like cell
(not a wall, entrance or exit) that no earlier kind has taken. Each kind gets
a bounded number of attempts; running out means the level is too small or
too blocked for its encounters, which is a configuration error.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Set

from .errors import ConfigurationError
from .grid import Cell, GridLevel, Position

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 100

# Cells an encounter may never sit on
BLOCKED_CELLS: FrozenSet[Cell] = frozenset({Cell.WALL, Cell.ENTRANCE, Cell.EXIT})


class EncounterKind(Enum):
    """Encounter kinds, declared in placement order."""

    TRAP = "trap"
    MAD_SCIENTIST = "mad_scientist"
    LOST_EXPLORER = "lost_explorer"
    GUARDIAN = "guardian"

    @property
    def repeatable(self) -> bool:
        """The Guardian fires on every visit until beaten; everything else fires once."""
        return self is EncounterKind.GUARDIAN

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


# Kinds restricted to a single level. Kinds not listed appear on every level.
LEVEL_EXCLUSIVE: Dict[EncounterKind, int] = {
    EncounterKind.LOST_EXPLORER: 2,
    EncounterKind.GUARDIAN: 3,
}

# Kinds that need plain floor rather than just an unblocked cell
FLOOR_ONLY: FrozenSet[EncounterKind] = frozenset({EncounterKind.GUARDIAN})


def kinds_for_level(level_number: int) -> List[EncounterKind]:
    """Encounter kinds that apply to a level, in placement order."""
    return [
        kind
        for kind in EncounterKind
        if LEVEL_EXCLUSIVE.get(kind, level_number) == level_number
    ]


@dataclass
class EncounterSlot:
    """Where one encounter sits on the active level, and whether it has fired."""

    kind: EncounterKind
    position: Position
    triggered: bool = False
    # Only meaningful for repeatable encounters: set once the encounter is beaten
    resolved: bool = False

    def is_armed(self) -> bool:
        if self.kind.repeatable:
            return not self.resolved
        return not self.triggered


@dataclass
class EncounterRecord:
    """All encounter placements for one activation of one level."""

    level_number: int
    slots: Dict[EncounterKind, EncounterSlot] = field(default_factory=dict)

    def kinds(self) -> List[EncounterKind]:
        return list(self.slots.keys())

    def position_of(self, kind: EncounterKind) -> Optional[Position]:
        slot = self.slots.get(kind)
        return slot.position if slot else None

    def slot_at(self, position: Position) -> Optional[EncounterSlot]:
        """The encounter placed on `position`, if any. Placements never overlap."""
        for slot in self.slots.values():
            if slot.position == position:
                return slot
        return None

    @property
    def guardian_resolved(self) -> bool:
        slot = self.slots.get(EncounterKind.GUARDIAN)
        return slot is not None and slot.resolved


def _is_candidate(
    level: GridLevel, position: Position, kind: EncounterKind, taken: Set[Position]
) -> bool:
    if position in taken:
        return False
    cell = level.cell_at(position.row, position.column)
    if kind in FLOOR_ONLY:
        return cell == Cell.FLOOR
    return cell not in BLOCKED_CELLS


def _sample_cell(
    level: GridLevel,
    kind: EncounterKind,
    taken: Set[Position],
    rng: random.Random,
    max_attempts: int,
) -> Position:
    """Rejection-sample a valid cell for `kind`, failing loudly after `max_attempts`."""
    for _ in range(max_attempts):
        candidate = Position(row=rng.randrange(level.rows), column=rng.randrange(level.cols))
        if _is_candidate(level, candidate, kind, taken):
            return candidate
    raise ConfigurationError(
        f"Failed to find a cell for the {kind.display_name} on level {level.number} "
        f"after {max_attempts} attempts"
    )


def assign_encounters(
    level: GridLevel,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> EncounterRecord:
    """
    Place every encounter that applies to `level`.

    Returns a fresh EncounterRecord with all triggered/resolved flags cleared.

    Raises:
        ConfigurationError: If some kind cannot be placed within `max_attempts`.
    """
    rng = rng or random.Random()
    record = EncounterRecord(level_number=level.number)
    taken: Set[Position] = set()

    for kind in kinds_for_level(level.number):
        position = _sample_cell(level, kind, taken, rng, max_attempts)
        taken.add(position)
        record.slots[kind] = EncounterSlot(kind=kind, position=position)
        logger.debug(
            "Level %d: %s at (%d, %d)",
            level.number,
            kind.display_name,
            position.row,
            position.column,
        )

    return record
