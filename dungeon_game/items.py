"""Using items from the inventory screen."""

import logging
import random
from typing import TYPE_CHECKING, List, Optional, Tuple

from .display import describe_inventory
from .errors import ConfigurationError
from .event_system import Event
from .grid import Cell, Position
from .interaction import Interaction, parse_choice
from .inventory import CAKE, SANDWICH, TELEPORTATION_SPELL

if TYPE_CHECKING:
    from .session import GameSession

logger = logging.getLogger(__name__)

CAKE_BONUS = 3
SANDWICH_BONUS = 5
MAX_TELEPORT_ATTEMPTS = 100

# (item, menu label), in menu order
USABLE_ITEMS: Tuple[Tuple[str, str], ...] = (
    (TELEPORTATION_SPELL, "Teleportation Spell"),
    (CAKE, f"Cake (+{CAKE_BONUS} Power Points)"),
    (SANDWICH, f"Sandwich (+{SANDWICH_BONUS} Power Points)"),
)

FOOD_BONUS = {CAKE: CAKE_BONUS, SANDWICH: SANDWICH_BONUS}


def usable_items(session: "GameSession") -> List[Tuple[str, str]]:
    return [(item, label) for item, label in USABLE_ITEMS if session.player.inventory.has(item)]


def pick_teleport_target(
    session: "GameSession",
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_TELEPORT_ATTEMPTS,
) -> Position:
    """
    Sample a random plain floor cell other than the player's current one.

    Raises:
        ConfigurationError: If no such cell turns up within `max_attempts`.
    """
    rng = rng or session.rng
    level = session.level
    current = session.position.current
    for _ in range(max_attempts):
        candidate = Position(row=rng.randrange(level.rows), column=rng.randrange(level.cols))
        if candidate == current:
            continue
        if level.cell_at(candidate.row, candidate.column) == Cell.FLOOR:
            return candidate
    raise ConfigurationError(
        f"No teleport destination found on level {level.number} after {max_attempts} attempts"
    )


def teleport(session: "GameSession", interaction: Interaction) -> Position:
    """
    Move the player to a random floor cell.

    Encounters on the destination do not fire; only walking into a cell does that.
    """
    target = pick_teleport_target(session)
    session.player.inventory.remove(TELEPORTATION_SPELL)
    interaction.show("You activate the Teleportation Spell...")
    session.position.commit_move(target)
    interaction.show("The spell teleports you to a new location!")
    logger.debug("Teleported to (%d, %d)", target.row, target.column)
    return target


def use_item(session: "GameSession", item: str, interaction: Interaction) -> bool:
    """Use one held item. Returns False if the player doesn't have it."""
    player = session.player
    if not player.inventory.has(item):
        interaction.show(f"You don't have a {item} anymore.")
        return False

    if item == TELEPORTATION_SPELL:
        interaction.show("You used the Teleportation Spell!")
        teleport(session, interaction)
    elif item in FOOD_BONUS:
        player.inventory.remove(item)
        player.power.add(FOOD_BONUS[item])
        interaction.show(f"You ate the {item} and gained {FOOD_BONUS[item]} Power Points!")
    else:
        raise ValueError(f"{item} cannot be used from the inventory")

    if session.event_bus:
        session.event_bus.emit(Event.ITEM_REMOVED, item=item)
    return True


def use_inventory(session: "GameSession", interaction: Interaction) -> Optional[str]:
    """
    Show the inventory and offer to use one item.

    Returns the item used, or None.
    """
    interaction.header("Inventory")
    for line in describe_inventory(session.player.inventory):
        interaction.show(line)

    if not len(session.player.inventory):
        interaction.pause()
        return None

    usable = usable_items(session)
    if not usable:
        interaction.show("You have no usable items.")
        interaction.pause()
        return None

    interaction.show("You have usable items. Do you want to use one?")
    labels = [label for _, label in usable] + ["Exit Inventory"]
    raw = interaction.choose("Choose an item to use (Enter the number): ", labels)
    index = parse_choice(raw, len(usable))
    if index is None:
        interaction.show("Exiting inventory.")
        interaction.pause()
        return None

    item = usable[index][0]
    use_item(session, item, interaction)
    interaction.pause()
    return item
