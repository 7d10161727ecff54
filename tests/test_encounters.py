"""
Tests for encounter resolution.

Each encounter is exercised directly with a Player and a ScriptedInteraction,
without a session or a level.
"""

import random

import pytest

from dungeon_game.encounters import (
    EXPLORER_PENALTY,
    RIDDLE_PENALTY,
    TRAP_PENALTY,
    GuardianEncounter,
    LostExplorerEncounter,
    MadScientistEncounter,
    Result,
    TrapEncounter,
    default_encounters,
)
from dungeon_game.interaction import ScriptedInteraction
from dungeon_game.inventory import (
    CAKE,
    FREEZE_SPELL,
    GRANTABLE_ITEMS,
    HAMMER,
    RELIC,
    TELEPORTATION_SPELL,
    Inventory,
)
from dungeon_game.placement import EncounterKind
from dungeon_game.player import Player
from dungeon_game.power import PowerPool

RIDDLE = [("What has keys but can't open locks?", "A piano")]


def make_player(points=100, items=()):
    return Player(name="Tester", power=PowerPool(points), inventory=Inventory(items))


class TestTrap:
    def test_no_tools_loses_points(self):
        """Without tools there is no menu: the trap just costs 7 points."""
        player = make_player()
        interaction = ScriptedInteraction()
        outcome = TrapEncounter().run(player, interaction)

        assert outcome.result is Result.LOST
        assert outcome.points_lost == TRAP_PENALTY
        assert player.power.points == 93
        assert not any(line.startswith("1.") for line in interaction.transcript)

    def test_hammer_bypasses(self):
        player = make_player(items=[HAMMER])
        outcome = TrapEncounter().run(player, ScriptedInteraction(["1"]))

        assert outcome.result is Result.BYPASSED
        assert outcome.items_used == [HAMMER]
        assert player.power.points == 100
        assert not player.inventory.has(HAMMER)

    def test_freeze_bypasses(self):
        """With both tools, option 2 is the Freeze Spell and the Hammer is kept."""
        player = make_player(items=[HAMMER, FREEZE_SPELL])
        outcome = TrapEncounter().run(player, ScriptedInteraction(["2"]))

        assert outcome.result is Result.BYPASSED
        assert outcome.items_used == [FREEZE_SPELL]
        assert player.inventory.has(HAMMER)
        assert player.power.points == 100

    def test_do_nothing_loses(self):
        player = make_player(items=[HAMMER])
        outcome = TrapEncounter().run(player, ScriptedInteraction(["2"]))

        assert outcome.result is Result.LOST
        assert player.power.points == 93
        assert player.inventory.has(HAMMER)

    @pytest.mark.parametrize("reply", ["", "abc", "0", "9"])
    def test_invalid_selection_falls_through_to_loss(self, reply):
        """An invalid selection is not re-prompted; it counts as doing nothing."""
        player = make_player(items=[HAMMER])
        outcome = TrapEncounter().run(player, ScriptedInteraction([reply]))

        assert outcome.result is Result.LOST
        assert player.power.points == 93
        assert player.inventory.has(HAMMER)


class TestMadScientist:
    def test_correct_answer(self):
        player = make_player()
        encounter = MadScientistEncounter(random.Random(0), riddles=RIDDLE)
        outcome = encounter.run(player, ScriptedInteraction(["a piano"]))

        assert outcome.result is Result.WON
        assert player.power.points == 100

    def test_answer_ignores_case_and_whitespace(self):
        player = make_player()
        encounter = MadScientistEncounter(random.Random(0), riddles=RIDDLE)
        outcome = encounter.run(player, ScriptedInteraction(["   A PIANO  "]))
        assert outcome.result is Result.WON

    def test_wrong_answer_costs_eight(self):
        """The penalty and the message agree on 8 points."""
        player = make_player()
        interaction = ScriptedInteraction(["a guitar"])
        encounter = MadScientistEncounter(random.Random(0), riddles=RIDDLE)
        outcome = encounter.run(player, interaction)

        assert outcome.result is Result.LOST
        assert outcome.points_lost == RIDDLE_PENALTY == 8
        assert player.power.points == 92
        assert interaction.saw("The correct answer was: A piano")
        assert interaction.saw("You lose 8 power points")

    def test_freeze_spell_bypasses(self):
        player = make_player(items=[FREEZE_SPELL])
        encounter = MadScientistEncounter(random.Random(0), riddles=RIDDLE)
        interaction = ScriptedInteraction(["1"])
        outcome = encounter.run(player, interaction)

        assert outcome.result is Result.BYPASSED
        assert not player.inventory.has(FREEZE_SPELL)
        assert not interaction.saw("Your Answer")

    def test_choosing_riddle_keeps_spell(self):
        player = make_player(items=[FREEZE_SPELL])
        encounter = MadScientistEncounter(random.Random(0), riddles=RIDDLE)
        outcome = encounter.run(player, ScriptedInteraction(["2", "a piano"]))

        assert outcome.result is Result.WON
        assert player.inventory.has(FREEZE_SPELL)

    def test_invalid_selection_goes_to_riddle(self):
        player = make_player(items=[FREEZE_SPELL])
        encounter = MadScientistEncounter(random.Random(0), riddles=RIDDLE)
        outcome = encounter.run(player, ScriptedInteraction(["7", "wrong"]))

        assert outcome.result is Result.LOST
        assert player.power.points == 92
        assert player.inventory.has(FREEZE_SPELL)

    def test_needs_riddles(self):
        with pytest.raises(ValueError):
            MadScientistEncounter(riddles=[])


class TestLostExplorer:
    def test_fight_win_above_threshold(self):
        player = make_player(points=71)
        outcome = LostExplorerEncounter(random.Random(5)).run(
            player, ScriptedInteraction(["1"])
        )

        assert outcome.result is Result.WON
        assert player.power.points == 71
        assert len(outcome.items_granted) == 3
        assert set(outcome.items_granted) <= set(GRANTABLE_ITEMS)
        assert len(player.inventory) == 3

    def test_fight_at_threshold_loses(self):
        """70 is not more than 70: the player loses points and every item."""
        player = make_player(points=70)
        outcome = LostExplorerEncounter(random.Random(5)).run(
            player, ScriptedInteraction(["1"])
        )

        assert outcome.result is Result.LOST
        assert outcome.points_lost == EXPLORER_PENALTY
        assert player.power.points == 65
        assert len(player.inventory) == 0

    def test_fight_loss_takes_relic_too(self):
        player = make_player(points=40, items=[RELIC, CAKE])
        LostExplorerEncounter(random.Random(5)).run(player, ScriptedInteraction(["1"]))
        assert len(player.inventory) == 0

    def test_reward_skips_owned_items(self):
        player = make_player(points=90, items=[CAKE, HAMMER])
        outcome = LostExplorerEncounter(random.Random(5)).run(
            player, ScriptedInteraction(["1"])
        )
        assert CAKE not in outcome.items_granted
        assert HAMMER not in outcome.items_granted
        assert len(player.inventory) == 5

    def test_subdue_with_hammer_and_freeze(self):
        """Subduing uses both tools and counts as a win with the usual reward."""
        player = make_player(points=50, items=[HAMMER, FREEZE_SPELL])
        outcome = LostExplorerEncounter(random.Random(5)).run(
            player, ScriptedInteraction(["1"])
        )

        assert outcome.result is Result.WON
        assert sorted(outcome.items_used) == sorted([HAMMER, FREEZE_SPELL])
        assert len(outcome.items_granted) == 3
        assert player.power.points == 50

    def test_teleport_escapes(self):
        player = make_player(points=50, items=[TELEPORTATION_SPELL])
        outcome = LostExplorerEncounter(random.Random(5)).run(
            player, ScriptedInteraction(["1"])
        )

        assert outcome.result is Result.ESCAPED
        assert outcome.items_used == [TELEPORTATION_SPELL]
        assert player.power.points == 50

    def test_option_order(self):
        player = make_player(items=[HAMMER, FREEZE_SPELL, TELEPORTATION_SPELL])
        options = LostExplorerEncounter().options(player)
        assert [option.action for option in options] == ["subdue", "teleport", "fight"]

    def test_invalid_selection_fights(self):
        player = make_player(points=60, items=[TELEPORTATION_SPELL])
        interaction = ScriptedInteraction(["x"])
        outcome = LostExplorerEncounter(random.Random(5)).run(player, interaction)

        assert interaction.saw("You hesitate and the Explorer attacks!")
        assert outcome.result is Result.LOST
        assert player.power.points == 55
        assert len(player.inventory) == 0


class TestGuardian:
    def test_relic_wins(self):
        player = make_player(items=[RELIC])
        outcome = GuardianEncounter().run(player, ScriptedInteraction(["1"]))

        assert outcome.result is Result.WON
        assert not player.inventory.has(RELIC)
        assert player.is_alive()

    def test_teleport_flees(self):
        player = make_player(items=[TELEPORTATION_SPELL])
        outcome = GuardianEncounter().run(player, ScriptedInteraction(["1"]))

        assert outcome.result is Result.ESCAPED
        assert not player.inventory.has(TELEPORTATION_SPELL)
        assert player.is_alive()

    def test_no_means_is_fatal(self):
        """With neither Relic nor Teleportation Spell the Guardian always kills."""
        player = make_player(points=250, items=[HAMMER])
        interaction = ScriptedInteraction()
        outcome = GuardianEncounter().run(player, interaction)

        assert outcome.fatal
        assert outcome.points_lost == 250
        assert player.power.points == 0
        assert not player.is_alive()
        assert interaction.saw("no means to overcome")

    def test_invalid_selection_is_fatal(self):
        player = make_player(items=[RELIC])
        outcome = GuardianEncounter().run(player, ScriptedInteraction(["3"]))

        assert outcome.fatal
        assert player.inventory.has(RELIC)
        assert not player.is_alive()


class TestDefaultEncounters:
    def test_one_handler_per_kind(self):
        handlers = default_encounters(random.Random(0))
        assert set(handlers) == set(EncounterKind)
        for kind, handler in handlers.items():
            assert handler.kind is kind
