"""Level-to-level progression."""

from typing import Union

from .grid import Cell
from .position import PositionState


class _Complete:
    """Sentinel returned instead of a level number once the last level is cleared."""

    _instance = None

    def __new__(cls) -> "_Complete":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "COMPLETE"


COMPLETE = _Complete()

NextLevel = Union[int, _Complete]


def is_on_exit(position: PositionState) -> bool:
    return position.current_cell() == Cell.EXIT


def next_level(current: int, level_count: int) -> NextLevel:
    """The level after `current`, or COMPLETE after the final level."""
    if not 1 <= current <= level_count:
        raise ValueError(f"Level {current} is outside 1..{level_count}")
    if current == level_count:
        return COMPLETE
    return current + 1
