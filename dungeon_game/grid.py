"""
Grid levels
===========

A level is a fixed rectangular grid of cells. Each level has exactly one
entrance, where the player arrives, and exactly one exit, which leads to the
next level (or ends the game on the last one).

Levels are written as ASCII rows:

    W = wall
      = floor (a single space)
    E = entrance
    X = exit
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Dict, List, Sequence

import numpy as np

from .errors import ConfigurationError, OutOfBounds


class Cell(IntEnum):
    """Cell kinds. Everything except WALL can be stood on."""

    WALL = 0
    FLOOR = 1
    ENTRANCE = 2
    EXIT = 3


ASCII_TO_CELL: Dict[str, Cell] = {
    "W": Cell.WALL,
    " ": Cell.FLOOR,
    "E": Cell.ENTRANCE,
    "X": Cell.EXIT,
}

CELL_TO_ASCII: Dict[Cell, str] = {cell: char for char, cell in ASCII_TO_CELL.items()}


@dataclass(frozen=True)
class Position:
    """A cell on the grid, measured in rows and columns from the top-left."""

    row: int
    column: int

    def offset(self, step: "Position") -> "Position":
        return Position(row=self.row + step.row, column=self.column + step.column)


class Direction(Enum):
    """The four orthogonal moves. There are no diagonals."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def opposite(self) -> "Direction":
        """Returns the opposite direction."""
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    def step(self) -> Position:
        """Returns the Position offset for moving one cell in this direction."""
        steps = {
            Direction.UP: Position(row=-1, column=0),
            Direction.DOWN: Position(row=1, column=0),
            Direction.LEFT: Position(row=0, column=-1),
            Direction.RIGHT: Position(row=0, column=1),
        }
        return steps[self]


# Type Definition
LevelMap = np.ndarray


def parse_level(rows: Sequence[str]) -> LevelMap:
    """
    Parse ASCII rows into a 2D cell array.

    Raises:
        ConfigurationError: If the rows are empty, ragged, or use unknown characters.
    """
    if not rows:
        raise ConfigurationError("Level has no rows")

    width = len(rows[0])
    cells: List[List[int]] = []
    for row_idx, line in enumerate(rows):
        if len(line) != width:
            raise ConfigurationError(
                f"Level row {row_idx} has width {len(line)}, expected {width}"
            )
        try:
            cells.append([ASCII_TO_CELL[char] for char in line])
        except KeyError as e:
            raise ConfigurationError(
                f"Unknown cell character {e.args[0]!r} in level row {row_idx}"
            ) from None

    return np.array(cells, dtype=int)


class GridLevel:
    """
    Static layout of one level.

    The underlying array is marked read-only; levels are built once at startup
    and never mutated.
    """

    def __init__(self, number: int, level_map: LevelMap) -> None:
        self.number: int = number
        self.map: LevelMap = np.array(level_map, dtype=int)
        self.map.setflags(write=False)

        self.rows: int
        self.cols: int
        self.rows, self.cols = self.map.shape

    @classmethod
    def from_ascii(cls, number: int, rows: Sequence[str]) -> "GridLevel":
        return cls(number, parse_level(rows))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Return the kind of cell at (row, col).

        Raises:
            OutOfBounds: If (row, col) lies outside the grid. Negative indices
                are out of bounds too; they never wrap around.
        """
        if not self.in_bounds(row, col):
            raise OutOfBounds(
                f"({row}, {col}) is outside the {self.rows}x{self.cols} level {self.number}"
            )
        return Cell(int(self.map[row, col]))

    def is_walkable(self, row: int, col: int) -> bool:
        """Check if a cell is inside the grid and not a wall."""
        return self.in_bounds(row, col) and self.map[row, col] != Cell.WALL

    def _find_unique(self, cell: Cell) -> Position:
        matches = np.argwhere(self.map == cell)
        if len(matches) != 1:
            raise ConfigurationError(
                f"Level {self.number} must have exactly one {cell.name.lower()}, "
                f"found {len(matches)}"
            )
        row, col = matches[0]
        return Position(row=int(row), column=int(col))

    def find_entrance(self) -> Position:
        """Locate the entrance. Raises ConfigurationError unless there is exactly one."""
        return self._find_unique(Cell.ENTRANCE)

    def find_exit(self) -> Position:
        """Locate the exit. Raises ConfigurationError unless there is exactly one."""
        return self._find_unique(Cell.EXIT)

    def cells_of(self, *kinds: Cell) -> List[Position]:
        """All positions whose cell is one of `kinds`, in row-major order."""
        mask = np.isin(self.map, [int(kind) for kind in kinds])
        return [Position(row=int(r), column=int(c)) for r, c in np.argwhere(mask)]

    def to_ascii(self) -> List[str]:
        return [
            "".join(CELL_TO_ASCII[Cell(int(cell))] for cell in row)
            for row in self.map
        ]

    def __repr__(self) -> str:
        return f"GridLevel(number={self.number}, shape={self.rows}x{self.cols})"
