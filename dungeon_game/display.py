"""Text descriptions of rooms, maps and inventories."""

import string
from typing import TYPE_CHECKING, Dict, List, Optional

from .grid import Cell, Direction, GridLevel, Position
from .inventory import Inventory
from .placement import EncounterKind, EncounterRecord

if TYPE_CHECKING:
    from .session import GameSession

CELL_SYMBOLS: Dict[Cell, str] = {
    Cell.WALL: "W",
    Cell.FLOOR: ".",
    Cell.ENTRANCE: "E",
    Cell.EXIT: "X",
}

ENCOUNTER_SYMBOLS: Dict[EncounterKind, str] = {
    EncounterKind.TRAP: "T",
    EncounterKind.MAD_SCIENTIST: "M",
    EncounterKind.LOST_EXPLORER: "L",
    EncounterKind.GUARDIAN: "G",
}

PLAYER_SYMBOL = "P"

# How each neighbouring cell is described, relative to the player
SURROUNDINGS = (
    (Direction.LEFT, "to the left"),
    (Direction.RIGHT, "to the right"),
    (Direction.UP, "ahead"),
    (Direction.DOWN, "behind"),
)

CELL_NAMES: Dict[Cell, str] = {
    Cell.WALL: "Wall",
    Cell.FLOOR: "Room",
    Cell.ENTRANCE: "Entrance",
    Cell.EXIT: "Exit",
}


def room_label(position: Position) -> str:
    """Rooms are labelled by row letter and 1-based column, e.g. row 1, column 1 is B2."""
    return f"{string.ascii_uppercase[position.row]}{position.column + 1}"


def parse_room_label(label: Optional[str]) -> Optional[Position]:
    """Inverse of room_label. Returns None for anything that isn't a label."""
    if not label:
        return None
    label = label.strip().upper()
    if len(label) < 2 or label[0] not in string.ascii_uppercase or not label[1:].isdigit():
        return None
    column = int(label[1:]) - 1
    if column < 0:
        return None
    return Position(row=string.ascii_uppercase.index(label[0]), column=column)


def describe_neighbour(level: GridLevel, position: Position, direction: Direction) -> str:
    target = position.offset(direction.step())
    if not level.in_bounds(target.row, target.column):
        return "Wall"
    return CELL_NAMES[level.cell_at(target.row, target.column)]


def describe_room(session: "GameSession") -> List[str]:
    position = session.position.current
    surroundings = ", ".join(
        f"{describe_neighbour(session.level, position, direction)} {where}"
        for direction, where in SURROUNDINGS
    )
    return [
        f"You are in Level {session.level_number} Room {room_label(position)}.",
        "You have a long way to go.",
        f"Surroundings: {surroundings}",
        f"Current Power Points: {session.player.power.points}",
    ]


def render_level_map(
    level: GridLevel,
    player: Optional[Position] = None,
    encounters: Optional[EncounterRecord] = None,
) -> str:
    """
    Render a level as text, one bracketed cell per column.

    The player is drawn as [P]. Encounter markers are only drawn when
    `encounters` is given, which is for debugging; players never see them.
    """
    markers: Dict[Position, str] = {}
    if encounters is not None:
        for kind, slot in encounters.slots.items():
            markers[slot.position] = ENCOUNTER_SYMBOLS[kind]
    if player is not None:
        markers[player] = PLAYER_SYMBOL

    lines = []
    for row in range(level.rows):
        cells = []
        for col in range(level.cols):
            symbol = markers.get(Position(row=row, column=col))
            if symbol is None:
                symbol = CELL_SYMBOLS[level.cell_at(row, col)]
            cells.append(f"[{symbol}]")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def describe_inventory(inventory: Inventory) -> List[str]:
    if not len(inventory):
        return ["Your inventory is empty."]
    return ["Your Items:"] + [f"- {item}" for item in inventory]
