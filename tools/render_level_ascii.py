#!/usr/bin/env python3
"""
Render the dungeon levels as ASCII art for debugging, with one encounter
placement overlaid on each.

Usage:
    python tools/render_level_ascii.py [--level N] [--seed S]
"""

import argparse
import random
import sys
from pathlib import Path

# Add parent directory to path so we can import dungeon_game
sys.path.insert(0, str(Path(__file__).parent.parent))

from dungeon_game.display import room_label, render_level_map
from dungeon_game.levels import get_level, list_levels
from dungeon_game.placement import assign_encounters


def main():
    parser = argparse.ArgumentParser(description="Render levels as ASCII art")
    parser.add_argument("--level", type=int, help="Only render this level")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible placement")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    numbers = [args.level] if args.level is not None else list_levels()

    for number in numbers:
        level = get_level(number)
        encounters = assign_encounters(level, rng)
        entrance = level.find_entrance()

        print(f"--- Level {number} ---")
        print(render_level_map(level, encounters=encounters))
        print(f"Map size: {level.cols}x{level.rows} cells")
        print(f"Entrance: {room_label(entrance)}  Exit: {room_label(level.find_exit())}")
        for kind, slot in encounters.slots.items():
            print(f"{kind.display_name}: {room_label(slot.position)}")
        print()


if __name__ == "__main__":
    main()
