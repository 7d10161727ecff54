"""
Error taxonomy for the dungeon game.

Configuration errors are fatal and surface at startup or level load.
Position and command errors are recoverable: they are reported to the player
and the turn is re-prompted with no state change.
"""


class GameError(Exception):
    """Base class for all game errors."""


class ConfigurationError(GameError):
    """Static level content cannot support the game (missing entrance, too few cells)."""


class OutOfBounds(GameError, IndexError):
    """A (row, column) lookup fell outside the grid."""


class InvalidPosition(GameError):
    """A move targeted a wall or a cell outside the grid."""


class InvalidCommand(GameError):
    """Player input did not match any known command."""
