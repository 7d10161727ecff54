"""Player position on the active level, with move validation."""

from typing import Optional

from .errors import InvalidPosition
from .grid import Cell, Direction, GridLevel, Position


class PositionState:
    """
    The player's coordinates on one GridLevel.

    A PositionState is bound to a single level instance and always refers to a
    non-wall cell inside that level's bounds. A new instance is created every
    time a level becomes active.
    """

    def __init__(self, level: GridLevel, start: Optional[Position] = None) -> None:
        self.level: GridLevel = level
        if start is None:
            start = level.find_entrance()
        self._validate(start)
        self._current: Position = start

    @property
    def current(self) -> Position:
        return self._current

    @property
    def row(self) -> int:
        return self._current.row

    @property
    def column(self) -> int:
        return self._current.column

    def propose_move(self, direction: Direction) -> Position:
        """Compute the candidate cell one step away. Does not validate or move."""
        return self._current.offset(direction.step())

    def commit_move(self, target: Position) -> Position:
        """
        Move to `target`.

        Raises:
            InvalidPosition: If the target is outside the level or a wall. The
                tracked position is left unchanged.
        """
        self._validate(target)
        self._current = target
        return target

    def move(self, direction: Direction) -> Position:
        return self.commit_move(self.propose_move(direction))

    def current_cell(self) -> Cell:
        return self.level.cell_at(self._current.row, self._current.column)

    def _validate(self, target: Position) -> None:
        if not self.level.in_bounds(target.row, target.column):
            raise InvalidPosition("You cannot move outside the map!")
        if self.level.cell_at(target.row, target.column) == Cell.WALL:
            raise InvalidPosition("You cannot move through a wall!")

    def __repr__(self) -> str:
        return f"PositionState(level={self.level.number}, row={self.row}, column={self.column})"
