"""Turning typed text into game commands."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional

from .errors import InvalidCommand
from .grid import Direction


class Action(Enum):
    MOVE = auto()
    LOOK = auto()
    INVENTORY = auto()
    EXIT = auto()


@dataclass(frozen=True)
class Command:
    action: Action
    direction: Optional[Direction] = None


MOVE_ALIASES: Dict[Direction, tuple] = {
    Direction.UP: ("up", "move up", "move forward", "forward", "go up", "upwards", "move upwards"),
    Direction.DOWN: ("down", "go down", "below", "go below", "move below", "behind", "go behind"),
    Direction.LEFT: ("left", "go left", "move left"),
    Direction.RIGHT: ("right", "go right", "move right"),
}

ACTION_ALIASES: Dict[Action, tuple] = {
    Action.LOOK: ("look around", "search", "around", "look", "observe"),
    Action.INVENTORY: ("look inventory", "inventory", "bag", "open inventory", "open bag"),
    Action.EXIT: ("exit", "quit"),
}

_COMMANDS: Dict[str, Command] = {}
for _direction, _aliases in MOVE_ALIASES.items():
    for _alias in _aliases:
        _COMMANDS[_alias] = Command(Action.MOVE, _direction)
for _action, _aliases in ACTION_ALIASES.items():
    for _alias in _aliases:
        _COMMANDS[_alias] = Command(_action)

PROMPT = "Enter your move (up, down, left, right, look around, inventory, exit): "


def parse_command(text: str) -> Command:
    """
    Raises:
        InvalidCommand: If the text is not a known command.
    """
    key = " ".join(text.lower().split())
    if key not in _COMMANDS:
        raise InvalidCommand(f"Invalid input: {text!r}")
    return _COMMANDS[key]
