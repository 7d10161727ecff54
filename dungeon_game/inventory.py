"""Held items. Membership only: an item is either held or not."""

import random
from typing import Iterable, Iterator, List, Optional, Sequence, Set

HAMMER = "Hammer"
FREEZE_SPELL = "Freeze Spell"
TELEPORTATION_SPELL = "Teleportation Spell"
CAKE = "Cake"
SANDWICH = "Sandwich"
RELIC = "Relic"

# Items handed out when an encounter rewards the player
GRANTABLE_ITEMS: Sequence[str] = (
    TELEPORTATION_SPELL,
    FREEZE_SPELL,
    CAKE,
    SANDWICH,
    HAMMER,
)

RECORD_SEPARATOR = ","


class Inventory:
    """A set of item names."""

    def __init__(self, items: Optional[Iterable[str]] = None) -> None:
        self._items: Set[str] = set(items or ())

    def add(self, item: str) -> bool:
        """Add an item. Returns False (and changes nothing) if it is already held."""
        if item in self._items:
            return False
        self._items.add(item)
        return True

    def remove(self, item: str) -> bool:
        """Remove an item. Returns True if it was held."""
        if item not in self._items:
            return False
        self._items.remove(item)
        return True

    def has(self, item: str) -> bool:
        return item in self._items

    def clear(self) -> None:
        self._items.clear()

    def grant_random(
        self,
        count: int,
        item_pool: Sequence[str] = GRANTABLE_ITEMS,
        rng: Optional[random.Random] = None,
    ) -> List[str]:
        """
        Grant up to `count` distinct items from `item_pool` that are not already held.

        When fewer than `count` pool items are missing from the inventory, all
        of them are granted and the shortfall is simply not filled.

        Returns:
            The granted items, in the order they were drawn.
        """
        rng = rng or random.Random()
        candidates = [item for item in dict.fromkeys(item_pool) if item not in self._items]
        granted = rng.sample(candidates, min(count, len(candidates)))
        self._items.update(granted)
        return granted

    def items(self) -> List[str]:
        """Held items, sorted for stable display."""
        return sorted(self._items)

    def to_record(self) -> str:
        return RECORD_SEPARATOR.join(self.items())

    @classmethod
    def from_record(cls, text: Optional[str]) -> "Inventory":
        if not text:
            return cls()
        return cls(part.strip() for part in text.split(RECORD_SEPARATOR) if part.strip())

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Inventory({self.items()!r})"
