"""
Encounters
==========

Each encounter kind is an Encounter subclass with the same shape:

- `options(player)` lists the numbered choices open to the player, which
  depend on what they carry.
- `resolve(player, action, interaction)` applies the consequence of the chosen
  action to the player's inventory and power points. `action` is None when the
  player gave an invalid selection (or had no choices at all); every encounter
  then falls through to its worst branch instead of asking again.
- `run(player, interaction)` ties the two together.

| Encounter     | Bypass                                        | Loss                      | Win            |
|---------------|-----------------------------------------------|---------------------------|----------------|
| Trap          | Hammer or Freeze Spell (uses one)             | -7 points                 | -              |
| Mad Scientist | Freeze Spell (uses it)                        | wrong riddle: -8 points   | -              |
| Lost Explorer | Hammer + Freeze Spell (uses both, counts as a | fight at <= 70 points:    | 3 new items    |
|               | win); Teleportation Spell (uses it, escapes)  | -5 points, items lost     |                |
| Guardian      | Relic (uses it, wins); Teleportation Spell    | always fatal              | never returns  |
|               | (uses it, flees; the Guardian stays armed)    |                           |                |
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .interaction import Interaction, normalize_answer, parse_choice
from .inventory import FREEZE_SPELL, GRANTABLE_ITEMS, HAMMER, RELIC, TELEPORTATION_SPELL
from .narrative import RIDDLES, SCIENCE_OPENERS
from .placement import EncounterKind
from .player import Player

TRAP_PENALTY = 7
RIDDLE_PENALTY = 8
EXPLORER_PENALTY = 5
# The player must have strictly more points than this to win a fight
EXPLORER_FIGHT_THRESHOLD = 70
EXPLORER_REWARD_COUNT = 3


class Result(Enum):
    BYPASSED = "bypassed"
    WON = "won"
    LOST = "lost"
    ESCAPED = "escaped"
    FATAL = "fatal"


@dataclass
class EncounterOutcome:
    """What an encounter did to the player."""

    kind: EncounterKind
    result: Result
    points_lost: int = 0
    items_used: List[str] = field(default_factory=list)
    items_granted: List[str] = field(default_factory=list)

    @property
    def fatal(self) -> bool:
        return self.result is Result.FATAL


@dataclass(frozen=True)
class EncounterOption:
    """One numbered menu entry: the text shown and the action it selects."""

    label: str
    action: str


class Encounter(ABC):
    """Abstract base for encounter handlers."""

    kind: EncounterKind
    title: str = ""
    prompt: str = "What do you want to do? Enter the number: "

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def intro(self, player: Player) -> List[str]:
        """Lines shown before any choice is offered."""
        return []

    @abstractmethod
    def options(self, player: Player) -> List[EncounterOption]:
        pass

    @abstractmethod
    def resolve(
        self, player: Player, action: Optional[str], interaction: Interaction
    ) -> EncounterOutcome:
        pass

    def run(self, player: Player, interaction: Interaction) -> EncounterOutcome:
        interaction.header(self.title)
        for line in self.intro(player):
            interaction.show(line)

        action: Optional[str] = None
        options = self.options(player)
        if options:
            raw = interaction.choose(self.prompt, [option.label for option in options])
            index = parse_choice(raw, len(options))
            if index is not None:
                action = options[index].action

        outcome = self.resolve(player, action, interaction)
        interaction.pause()
        return outcome

    def _outcome(self, result: Result) -> EncounterOutcome:
        return EncounterOutcome(kind=self.kind, result=result)

    @staticmethod
    def _use(player: Player, item: str, outcome: EncounterOutcome) -> None:
        if player.inventory.remove(item):
            outcome.items_used.append(item)

    @staticmethod
    def _penalize(player: Player, amount: int, outcome: EncounterOutcome) -> None:
        player.power.deduct(amount)
        outcome.points_lost += amount


class TrapEncounter(Encounter):
    kind = EncounterKind.TRAP
    title = "Trap Encounter"

    def intro(self, player: Player) -> List[str]:
        if player.inventory.has(HAMMER) or player.inventory.has(FREEZE_SPELL):
            return ["Oh no! You've triggered a trap! But you have tools to escape it."]
        return []

    def options(self, player: Player) -> List[EncounterOption]:
        options: List[EncounterOption] = []
        if player.inventory.has(HAMMER):
            options.append(EncounterOption("Use Hammer", "hammer"))
        if player.inventory.has(FREEZE_SPELL):
            options.append(EncounterOption("Use Freeze Spell", "freeze"))
        if options:
            options.append(EncounterOption("Do nothing", "nothing"))
        return options

    def resolve(
        self, player: Player, action: Optional[str], interaction: Interaction
    ) -> EncounterOutcome:
        if action == "hammer":
            outcome = self._outcome(Result.BYPASSED)
            self._use(player, HAMMER, outcome)
            interaction.show("You used a Hammer to disable the trap! You're free to move now.")
            return outcome
        if action == "freeze":
            outcome = self._outcome(Result.BYPASSED)
            self._use(player, FREEZE_SPELL, outcome)
            interaction.show(
                "You cast the Freeze Spell! The trap has been neutralized. You're free to move now."
            )
            return outcome

        outcome = self._outcome(Result.LOST)
        self._penalize(player, TRAP_PENALTY, outcome)
        interaction.show(
            f"Oh no! You couldn't escape the trap! You lose {TRAP_PENALTY} power points."
        )
        return outcome


class MadScientistEncounter(Encounter):
    kind = EncounterKind.MAD_SCIENTIST
    title = "Mad Scientist Encounter"
    prompt = "Enter your choice: "

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        riddles: Sequence[Tuple[str, str]] = RIDDLES,
    ) -> None:
        super().__init__(rng)
        if not riddles:
            raise ValueError("MadScientistEncounter needs at least one riddle")
        self.riddles = riddles

    def intro(self, player: Player) -> List[str]:
        lines = [self.rng.choice(SCIENCE_OPENERS)]
        if player.inventory.has(FREEZE_SPELL):
            lines.append("The Mad Scientist blocks your way, but you have a Freeze Spell.")
        return lines

    def options(self, player: Player) -> List[EncounterOption]:
        if not player.inventory.has(FREEZE_SPELL):
            return []
        return [
            EncounterOption("Use Freeze Spell", "freeze"),
            EncounterOption("Solve the riddle", "riddle"),
        ]

    def pick_riddle(self) -> Tuple[str, str]:
        return self.riddles[self.rng.randrange(len(self.riddles))]

    def resolve(
        self, player: Player, action: Optional[str], interaction: Interaction
    ) -> EncounterOutcome:
        if action == "freeze":
            outcome = self._outcome(Result.BYPASSED)
            self._use(player, FREEZE_SPELL, outcome)
            interaction.show(
                "You cast the Freeze Spell! The Mad Scientist is frozen. You're free to move again!"
            )
            return outcome

        question, answer = self.pick_riddle()
        interaction.show("The Mad Scientist challenges you with a riddle!")
        interaction.show(question)
        reply = interaction.ask("Your Answer: ")

        if normalize_answer(reply) == normalize_answer(answer):
            interaction.show("Mad Scientist: Correct! You may proceed. Brilliant mind!")
            return self._outcome(Result.WON)

        outcome = self._outcome(Result.LOST)
        self._penalize(player, RIDDLE_PENALTY, outcome)
        interaction.show(
            f"Mad Scientist: Incorrect! The correct answer was: {answer}. "
            f"You lose {RIDDLE_PENALTY} power points."
        )
        return outcome


class LostExplorerEncounter(Encounter):
    kind = EncounterKind.LOST_EXPLORER
    title = "Lost Explorer Encounter"

    def intro(self, player: Player) -> List[str]:
        return [
            "You encounter a desperate explorer...",
            "The Lost Explorer stares at you, desperate and threatening.",
        ]

    def options(self, player: Player) -> List[EncounterOption]:
        options: List[EncounterOption] = []
        if player.inventory.has(HAMMER) and player.inventory.has(FREEZE_SPELL):
            options.append(
                EncounterOption("Use Hammer and Freeze Spell to subdue the Explorer.", "subdue")
            )
        if player.inventory.has(TELEPORTATION_SPELL):
            options.append(EncounterOption("Use Teleportation Spell to escape.", "teleport"))
        options.append(EncounterOption("Fight the Lost Explorer.", "fight"))
        return options

    def resolve(
        self, player: Player, action: Optional[str], interaction: Interaction
    ) -> EncounterOutcome:
        if action == "subdue":
            outcome = self._outcome(Result.WON)
            self._use(player, FREEZE_SPELL, outcome)
            self._use(player, HAMMER, outcome)
            interaction.show(
                "You use the Hammer and Freeze Spell to overwhelm the Lost Explorer without a fight!"
            )
            self._reward(player, outcome, interaction)
            return outcome
        if action == "teleport":
            outcome = self._outcome(Result.ESCAPED)
            self._use(player, TELEPORTATION_SPELL, outcome)
            interaction.show("You use the Teleportation Spell to escape the Lost Explorer!")
            return outcome

        if action is None:
            interaction.show("You hesitate and the Explorer attacks!")
        return self.fight(player, interaction)

    def fight(self, player: Player, interaction: Interaction) -> EncounterOutcome:
        if player.power.points > EXPLORER_FIGHT_THRESHOLD:
            outcome = self._outcome(Result.WON)
            interaction.show("You overpower the Lost Explorer and take some of his items!")
            self._reward(player, outcome, interaction)
            return outcome

        outcome = self._outcome(Result.LOST)
        interaction.show("The Lost Explorer overpowers you and takes all your items!")
        self._penalize(player, EXPLORER_PENALTY, outcome)
        player.inventory.clear()
        interaction.show(f"You lose {EXPLORER_PENALTY} power points.")
        return outcome

    def _reward(
        self, player: Player, outcome: EncounterOutcome, interaction: Interaction
    ) -> None:
        granted = player.inventory.grant_random(EXPLORER_REWARD_COUNT, GRANTABLE_ITEMS, self.rng)
        outcome.items_granted.extend(granted)
        for item in granted:
            interaction.show(f"You received: {item}")


class GuardianEncounter(Encounter):
    """
    The final boss.

    Unlike every other encounter, the Guardian is not disarmed by firing: it
    comes back each time the player steps onto its cell until it is beaten
    with the Relic. Fleeing with a Teleportation Spell only postpones it.
    """

    kind = EncounterKind.GUARDIAN
    title = "The Guardian Encounter"

    def intro(self, player: Player) -> List[str]:
        return [
            "You stand before The Guardian, a towering sentinel protecting "
            "the dungeon's deepest secrets..."
        ]

    def options(self, player: Player) -> List[EncounterOption]:
        options: List[EncounterOption] = []
        if player.inventory.has(RELIC):
            options.append(EncounterOption("Use the Relic to destroy The Guardian.", "relic"))
        if player.inventory.has(TELEPORTATION_SPELL):
            options.append(EncounterOption("Use Teleportation Spell to flee.", "teleport"))
        return options

    def resolve(
        self, player: Player, action: Optional[str], interaction: Interaction
    ) -> EncounterOutcome:
        if action == "relic":
            outcome = self._outcome(Result.WON)
            self._use(player, RELIC, outcome)
            interaction.show("The Relic shines brightly, unmaking The Guardian in an instant!")
            interaction.show(
                "With The Guardian gone, the path forward is clear. You have triumphed!"
            )
            return outcome
        if action == "teleport":
            outcome = self._outcome(Result.ESCAPED)
            self._use(player, TELEPORTATION_SPELL, outcome)
            interaction.show("You used the Teleportation Spell and fled from The Guardian!")
            return outcome

        if self.options(player):
            interaction.show("You hesitated and The Guardian attacked!")
        else:
            interaction.show("You have no means to overcome or escape The Guardian.")
        interaction.show(
            "Overwhelmed by The Guardian, you fall, and the dungeon claims another victim..."
        )
        outcome = self._outcome(Result.FATAL)
        outcome.points_lost = player.power.points
        player.power.drain()
        return outcome


def default_encounters(rng: Optional[random.Random] = None) -> Dict[EncounterKind, Encounter]:
    """One handler per encounter kind, sharing a random source."""
    rng = rng or random.Random()
    return {
        EncounterKind.TRAP: TrapEncounter(rng),
        EncounterKind.MAD_SCIENTIST: MadScientistEncounter(rng),
        EncounterKind.LOST_EXPLORER: LostExplorerEncounter(rng),
        EncounterKind.GUARDIAN: GuardianEncounter(rng),
    }
