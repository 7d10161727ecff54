"""The player's own state, which travels with them from level to level."""

from dataclasses import dataclass, field

from .inventory import Inventory
from .power import PowerPool


@dataclass
class Player:
    name: str = ""
    power: PowerPool = field(default_factory=PowerPool)
    inventory: Inventory = field(default_factory=Inventory)

    # Set when the Relic is picked up; it is never offered again afterwards
    relic_found: bool = False

    def is_alive(self) -> bool:
        return self.power.is_alive()
