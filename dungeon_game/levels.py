"""Level registry holding the fixed sequence of dungeon levels."""

from typing import Dict, List, Sequence

from .grid import GridLevel

LEVEL_1 = [
    "WWWWW",
    "W   W",
    "W W W",
    "W WXW",
    "WEWWW",
]

LEVEL_2 = [
    "WWWWW",
    "WE  W",
    "W W W",
    "W   X",
    "WW  W",
]

LEVEL_3 = [
    "WW  X",
    "W  W ",
    "W    ",
    "W EWW",
    "WWWWW",
]

# Registry of available levels, keyed by level number
_LEVELS: Dict[int, GridLevel] = {}


def register_level(number: int, rows: Sequence[str]) -> GridLevel:
    """Parse and register a level. Levels must be registered in order starting at 1."""
    if number != len(_LEVELS) + 1:
        raise ValueError(f"Level {number} registered out of order")
    level = GridLevel.from_ascii(number, rows)
    # Fail early on corrupt content
    level.find_entrance()
    level.find_exit()
    _LEVELS[number] = level
    return level


def get_level(number: int) -> GridLevel:
    """Get a level by number."""
    if number not in _LEVELS:
        raise ValueError(f"Unknown level: {number}")
    return _LEVELS[number]


def level_count() -> int:
    return len(_LEVELS)


def list_levels() -> List[int]:
    """List all registered level numbers in play order."""
    return sorted(_LEVELS.keys())


register_level(1, LEVEL_1)
register_level(2, LEVEL_2)
register_level(3, LEVEL_3)
