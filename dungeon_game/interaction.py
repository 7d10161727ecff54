"""
Player interaction.

Encounters, searches and the inventory screen talk to the player through an
Interaction: they show text, offer a numbered list of options, and read back
raw text. The core never reads stdin directly, so the same encounter code is
driven by the console in play and by scripted input in tests.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence


def parse_choice(raw: Optional[str], count: int) -> Optional[int]:
    """
    Convert a 1-indexed menu selection into a 0-based index.

    Returns None for anything that is not a number between 1 and `count`.
    Callers treat None as "no beneficial option" rather than re-prompting.
    """
    if raw is None:
        return None
    try:
        choice = int(raw.strip())
    except ValueError:
        return None
    if 1 <= choice <= count:
        return choice - 1
    return None


def normalize_answer(text: Optional[str]) -> str:
    return (text or "").strip().lower()


class Interaction(ABC):
    """Abstract player-facing I/O used by the game core."""

    @abstractmethod
    def show(self, text: str) -> None:
        """Display a line of text."""
        pass

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Display a prompt and return the player's raw reply."""
        pass

    def header(self, title: str) -> None:
        self.show(title.upper())

    def choose(self, prompt: str, options: Sequence[str]) -> str:
        """Show numbered options, then ask. Returns the raw reply for parse_choice."""
        for number, option in enumerate(options, start=1):
            self.show(f"{number}. {option}")
        return self.ask(prompt)

    def pause(self) -> None:
        """Give the player a moment before the screen moves on."""
        pass

    def clear(self) -> None:
        pass


class ScriptedInteraction(Interaction):
    """
    Interaction that replays canned replies.

    Every line shown and every prompt asked is recorded in `transcript`. Once
    the script runs out, replies are empty strings.
    """

    def __init__(self, replies: Optional[Iterable[str]] = None) -> None:
        self.replies: List[str] = list(replies or [])
        self.transcript: List[str] = []

    def feed(self, *replies: str) -> None:
        self.replies.extend(replies)

    def show(self, text: str) -> None:
        self.transcript.append(text)

    def ask(self, prompt: str) -> str:
        self.transcript.append(prompt)
        if self.replies:
            return self.replies.pop(0)
        return ""

    def saw(self, fragment: str) -> bool:
        """True if any transcript line contains `fragment`."""
        return any(fragment in line for line in self.transcript)
