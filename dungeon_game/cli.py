"""Command-line entry point."""

import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import GameConfig, setup_logging
from .console import ConsoleInteraction
from .errors import ConfigurationError
from .event_system import EventBus, log_events
from .game import GameLoop
from .levels import level_count
from .session import GameSession
from .store import PlayerStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="A turn-based text dungeon crawl")
    parser.add_argument("--db", type=str, default="game.db", help="SQLite file for saved players")
    parser.add_argument("--name", type=str, default=None, help="Player name (prompted if omitted)")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--print-delay",
        type=float,
        default=0.015,
        help="Seconds between printed characters (0 prints instantly)",
    )
    parser.add_argument("--no-clear", action="store_true", help="Never clear the screen")
    parser.add_argument(
        "--no-pause", action="store_true", help="Don't wait for Enter after encounters"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging to stderr")
    return parser


def create_session(config: GameConfig, store: PlayerStore, name: str) -> GameSession:
    """Resume the named player if they have a saved record, else start and save a new one."""
    rng = random.Random(config.seed)
    bus = EventBus()
    log_events(bus)

    record = store.load(name)
    if record is not None:
        return GameSession.from_record(record, rng=rng, event_bus=bus)

    session = GameSession.new_game(name, rng=rng, event_bus=bus)
    store.save(session.to_record())
    return session


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = GameConfig.from_args(args)
    setup_logging(config.verbose)

    if config.seed is not None:
        logger.info("Using random seed: %d", config.seed)

    interaction = ConsoleInteraction(
        print_delay=config.print_delay,
        clear_screen=config.clear_screen,
        wait_for_enter=config.wait_for_enter,
    )

    try:
        name = config.player_name or interaction.ask_name()
        if name is None:
            interaction.show("Exiting...")
            return 0

        store = PlayerStore(config.db_path, level_count=level_count())
        store.create_table()
        session = create_session(config, store, name)
        interaction.clear()
        interaction.header("Welcome to the Dungeon Game!")
        interaction.show(
            f"You start at Level {session.level_number} with "
            f"{session.player.power.points} power points"
        )
        GameLoop(session, interaction, store).run()
    except ConfigurationError as e:
        logger.error("Cannot run the game: %s", e)
        return 1
    except KeyboardInterrupt:
        print("", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
