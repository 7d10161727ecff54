"""The turn loop: one command in, state fully updated, one summary out."""

import logging
from typing import Optional

from .commands import PROMPT, Action, parse_command
from .display import describe_room
from .errors import InvalidCommand
from .interaction import Interaction
from .items import use_inventory
from .search import look_around
from .session import GameSession
from .store import PlayerRecord, PlayerStore
from .transition import COMPLETE

logger = logging.getLogger(__name__)


class GameLoop:
    def __init__(
        self,
        session: GameSession,
        interaction: Interaction,
        store: Optional[PlayerStore] = None,
    ) -> None:
        self.session = session
        self.interaction = interaction
        self.store = store
        self.running: bool = True

    def show_room(self) -> None:
        self.interaction.header("Current Room")
        for line in describe_room(self.session):
            self.interaction.show(line)

    def save(self) -> bool:
        """
        Save the player. After death or victory the saved record is reset so
        the next run under this name starts a new game.
        """
        if self.store is None:
            return False
        if self.session.finished:
            record = PlayerRecord(name=self.session.player.name)
        else:
            record = self.session.to_record()
        return self.store.save(record)

    def play_turn(self, text: str) -> bool:
        """Handle one command. Returns False once the session is over."""
        interaction = self.interaction
        try:
            command = parse_command(text)
        except InvalidCommand:
            interaction.show("Invalid input!")
            return True

        if command.action is Action.EXIT:
            if self.save():
                interaction.show("Game saved. Exiting...")
            else:
                interaction.show("Exiting...")
            self.running = False
            return False

        interaction.clear()
        if command.action is Action.LOOK:
            look_around(self.session, interaction)
        elif command.action is Action.INVENTORY:
            use_inventory(self.session, interaction)
        else:
            result = self.session.take_step(command.direction, interaction)
            if not result.moved:
                interaction.show(result.reason)
                return True

            interaction.show(f"Player moved {command.direction.name.lower()}.")
            if result.game_over:
                return self._finish_game_over()
            if result.next_level is COMPLETE:
                interaction.header("Level Exit")
                interaction.show("Congratulations! You have completed the game!")
                self.save()
                self.running = False
                return False
            if result.reached_exit:
                interaction.header("Level Exit")
                interaction.show("You found the exit! Moving to the next level...")
                interaction.header(f"Welcome to Level {result.next_level}")

        if not self.session.player.is_alive():
            # Potions can also empty the pool
            self.session.handle_game_over()
            return self._finish_game_over()

        self.show_room()
        return True

    def _finish_game_over(self) -> bool:
        self.interaction.header("Game Over")
        self.interaction.show("You have run out of power points. Better luck next time!")
        self.save()
        self.running = False
        return False

    def run(self) -> None:
        """Play until the player exits, dies or clears the final level."""
        self.show_room()
        while self.running:
            text = self.interaction.ask(PROMPT)
            self.play_turn(text)
        self.interaction.show("Thank you for playing the Dungeon Game!")
