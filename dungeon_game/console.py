"""Terminal implementation of Interaction: paced printing and input()."""

import os
import sys
import time
from typing import Callable, Optional, TextIO

from .interaction import Interaction

RULE = "=" * 42

# Returned by ask() when stdin is closed, so the game loop saves and exits
EOF_REPLY = "exit"


class ConsoleInteraction(Interaction):
    def __init__(
        self,
        print_delay: float = 0.015,
        clear_screen: bool = True,
        wait_for_enter: bool = True,
        stream: Optional[TextIO] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.print_delay = print_delay
        self.clear_screen = clear_screen
        self.wait_for_enter = wait_for_enter
        self.stream = stream or sys.stdout
        self.read_line = read_line or input

    def delay_print(self, text: str) -> None:
        """Print one character at a time, then a newline."""
        if self.print_delay <= 0:
            self.stream.write(text + "\n")
            self.stream.flush()
            return
        for char in text:
            self.stream.write(char)
            self.stream.flush()
            time.sleep(self.print_delay)
        self.stream.write("\n")
        self.stream.flush()

    def show(self, text: str) -> None:
        self.delay_print(text)

    def header(self, title: str) -> None:
        self.stream.write(f"{RULE}\n{title.upper()}\n{RULE}\n")
        self.stream.flush()

    def ask(self, prompt: str) -> str:
        try:
            return self.read_line(prompt)
        except EOFError:
            return EOF_REPLY

    def ask_name(self, prompt: str = "Enter your name: ") -> Optional[str]:
        """Ask until a non-blank name is given. Returns None if stdin is closed."""
        while True:
            try:
                name = self.read_line(prompt).strip()
            except EOFError:
                return None
            if name:
                return name

    def pause(self) -> None:
        if not self.wait_for_enter:
            return
        try:
            self.read_line("Press Enter to continue...")
        except EOFError:
            pass

    def clear(self) -> None:
        if not self.clear_screen:
            return
        if os.name == "nt":
            os.system("cls")
        else:
            self.stream.write("\033[H\033[2J")
            self.stream.flush()
