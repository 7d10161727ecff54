"""Looking around a room for things to pick up."""

import logging
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from .display import render_level_map
from .event_system import Event
from .interaction import Interaction, parse_choice
from .inventory import CAKE, FREEZE_SPELL, HAMMER, RELIC, SANDWICH, TELEPORTATION_SPELL

if TYPE_CHECKING:
    from .session import GameSession

logger = logging.getLogger(__name__)

POTION = "Potion"

ROOM_CONTENTS = (TELEPORTATION_SPELL, FREEZE_SPELL, CAKE, SANDWICH, HAMMER, POTION)

# The Relic can only be found on this level, and only once per playthrough
RELIC_LEVEL = 3

MAX_FINDS = 2

SLEEPING_PENALTY = 5
HEALTH_BONUS = 5

FIND_LABELS = {
    POTION: "A mysterious potion",
    RELIC: "A strange glowing Relic",
}


class Potion(Enum):
    SLEEPING = "Sleeping Potion"
    HEALTH = "Health Potion"
    VISION = "Vision Potion"


def room_contents(session: "GameSession") -> List[str]:
    contents = list(ROOM_CONTENTS)
    if session.level_number == RELIC_LEVEL and not session.player.relic_found:
        contents.append(RELIC)
    return contents


def roll_finds(session: "GameSession") -> List[str]:
    """One or two distinct things lying around the current room."""
    contents = room_contents(session)
    count = session.rng.randint(1, min(MAX_FINDS, len(contents)))
    return session.rng.sample(contents, count)


def drink_potion(
    session: "GameSession", interaction: Interaction, potion: Optional[Potion] = None
) -> Potion:
    potion = potion or session.rng.choice(list(Potion))
    power = session.player.power

    if potion is Potion.SLEEPING:
        interaction.show(
            f"You drink the Sleeping Potion. You feel drowsy and lose {SLEEPING_PENALTY} power points."
        )
        power.deduct(SLEEPING_PENALTY)
    elif potion is Potion.HEALTH:
        interaction.show(
            f"You drink the Health Potion. You feel rejuvenated and gain {HEALTH_BONUS} power points!"
        )
        power.add(HEALTH_BONUS)
    else:
        interaction.show("You drink the Vision Potion. Your surroundings become clearer...")
        interaction.header("Current Level Map")
        interaction.show(render_level_map(session.level, session.position.current))

    logger.debug("Drank %s, power now %d", potion.value, power.points)
    return potion


def look_around(session: "GameSession", interaction: Interaction) -> Optional[str]:
    """
    Offer what's lying in the room and let the player take one thing.

    Returns the name of the find the player picked (even if it turned out to
    be a duplicate), or None if they left everything.
    """
    interaction.header("Looking Around")
    finds = roll_finds(session)

    interaction.show("You look around and find:")
    labels = [FIND_LABELS.get(find, find) for find in finds] + ["Ignore"]
    raw = interaction.choose("What do you want to pick? Enter the number: ", labels)
    index = parse_choice(raw, len(finds))

    if index is None:
        interaction.show("You decided to leave the items untouched.")
        interaction.pause()
        return None

    picked = finds[index]
    player = session.player
    if picked == POTION:
        drink_potion(session, interaction)
    elif picked == RELIC:
        player.inventory.add(RELIC)
        player.relic_found = True
        interaction.show("You carefully pick up the Relic. It hums with ancient power...")
        _notify_added(session, RELIC)
    elif not player.inventory.add(picked):
        interaction.show(f"You already have {picked}. You leave it behind.")
    else:
        interaction.show(f"{picked} has been added to your inventory.")
        _notify_added(session, picked)

    interaction.pause()
    return picked


def _notify_added(session: "GameSession", item: str) -> None:
    if session.event_bus:
        session.event_bus.emit(Event.ITEM_ADDED, item=item)
