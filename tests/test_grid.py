"""Tests for grid levels, positions and directions."""

import numpy as np
import pytest

from dungeon_game.errors import ConfigurationError, OutOfBounds
from dungeon_game.grid import Cell, Direction, GridLevel, Position, parse_level


SMALL_LEVEL = [
    "WWWW",
    "WE W",
    "W XW",
    "WWWW",
]


class TestParseLevel:
    """Test ASCII level parsing."""

    def test_parses_cell_kinds(self):
        """Each character maps to its cell kind."""
        level_map = parse_level(SMALL_LEVEL)
        assert level_map.shape == (4, 4)
        assert level_map[0, 0] == Cell.WALL
        assert level_map[1, 1] == Cell.ENTRANCE
        assert level_map[1, 2] == Cell.FLOOR
        assert level_map[2, 2] == Cell.EXIT

    def test_ragged_rows_rejected(self):
        """All rows must be the same width."""
        with pytest.raises(ConfigurationError, match="width"):
            parse_level(["WWW", "WE", "WXW"])

    def test_unknown_character_rejected(self):
        """Characters outside the legend are rejected."""
        with pytest.raises(ConfigurationError, match="Unknown cell character"):
            parse_level(["WEX?"])

    def test_empty_level_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_level([])


class TestGridLevel:
    """Test GridLevel lookups."""

    def test_cell_at(self):
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        assert level.cell_at(1, 1) == Cell.ENTRANCE
        assert level.cell_at(2, 1) == Cell.FLOOR

    @pytest.mark.parametrize("row,col", [(4, 0), (0, 4), (-1, 0), (0, -1)])
    def test_cell_at_out_of_bounds(self, row, col):
        """Lookups outside the grid raise OutOfBounds; negative indices don't wrap."""
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        with pytest.raises(OutOfBounds):
            level.cell_at(row, col)

    def test_out_of_bounds_is_an_index_error(self):
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        with pytest.raises(IndexError):
            level.cell_at(10, 10)

    def test_find_entrance_and_exit(self):
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        assert level.find_entrance() == Position(row=1, column=1)
        assert level.find_exit() == Position(row=2, column=2)

    def test_missing_entrance_is_configuration_error(self):
        level = GridLevel.from_ascii(1, ["W X"])
        with pytest.raises(ConfigurationError, match="entrance"):
            level.find_entrance()

    def test_missing_exit_is_configuration_error(self):
        level = GridLevel.from_ascii(1, ["WE "])
        with pytest.raises(ConfigurationError, match="exit"):
            level.find_exit()

    def test_two_exits_is_configuration_error(self):
        level = GridLevel.from_ascii(1, ["EXX"])
        with pytest.raises(ConfigurationError):
            level.find_exit()

    def test_is_walkable(self):
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        assert level.is_walkable(1, 2)
        assert level.is_walkable(2, 2)
        assert not level.is_walkable(0, 0)
        assert not level.is_walkable(-1, 1)

    def test_map_is_read_only(self):
        """Levels are static content and cannot be modified."""
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        with pytest.raises(ValueError):
            level.map[1, 2] = Cell.WALL

    def test_source_array_is_copied(self):
        """Modifying the array a level was built from doesn't change the level."""
        source = parse_level(SMALL_LEVEL)
        level = GridLevel(1, source)
        source[1, 2] = Cell.WALL
        assert level.cell_at(1, 2) == Cell.FLOOR

    def test_cells_of(self):
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        assert level.cells_of(Cell.FLOOR) == [Position(1, 2), Position(2, 1)]

    def test_to_ascii_round_trips(self):
        level = GridLevel.from_ascii(1, SMALL_LEVEL)
        assert level.to_ascii() == SMALL_LEVEL


class TestDirection:
    """Test movement directions."""

    def test_steps_are_orthogonal(self):
        for direction in Direction:
            step = direction.step()
            assert abs(step.row) + abs(step.column) == 1

    def test_up_decreases_row(self):
        assert Direction.UP.step() == Position(row=-1, column=0)
        assert Direction.RIGHT.step() == Position(row=0, column=1)

    def test_opposite(self):
        for direction in Direction:
            assert direction.opposite().opposite() == direction
            back = direction.opposite().step()
            assert direction.step().offset(back) == Position(0, 0)
