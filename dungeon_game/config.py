"""Runtime configuration."""

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@dataclass
class GameConfig:
    """Configuration for a game session."""

    db_path: Path = field(default_factory=lambda: Path("game.db"))

    # Seconds between printed characters; 0 prints instantly
    print_delay: float = 0.015
    clear_screen: bool = True
    wait_for_enter: bool = True

    seed: Optional[int] = None
    player_name: Optional[str] = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Ensure paths are Path objects."""
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)
        if self.print_delay < 0:
            raise ValueError(f"print_delay cannot be negative: {self.print_delay}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GameConfig":
        return cls(
            db_path=args.db,
            print_delay=args.print_delay,
            clear_screen=not args.no_clear,
            wait_for_enter=not args.no_pause,
            seed=args.seed,
            player_name=args.name,
            verbose=args.verbose,
        )
