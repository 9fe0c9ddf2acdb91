"""Reading the player's choices from the console."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from arenabattler.colors import Color
from arenabattler.models import PlayerClassChoice, PostBattleChoice
from arenabattler.weapon import DamageSource

DEFAULT_NAME = "Hero"

_CLASS_NAMES = {
    PlayerClassChoice.ROGUE: "Rogue",
    PlayerClassChoice.WARRIOR: "Warrior",
    PlayerClassChoice.BARBARIAN: "Barbarian",
}

_LEADING_INT = re.compile(r"[+-]?\d+")


class ConsoleInput:
    """Prompts the player and validates answers, asking again until they are valid."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _write(self, *parts: str) -> None:
        self._out.write("".join(str(part) for part in parts))
        self._out.flush()

    def _read_token_line(self) -> str:
        """Return the next non-blank input line, stripped; raise EOFError at end of input."""
        while True:
            line = self._in.readline()
            if line == "":
                raise EOFError("input ended")
            text = line.strip()
            if text:
                return text

    def player_name(self) -> str:
        """Ask for the hero's name; an empty answer gives the default name."""
        self._write("\n", Color.WHITE, "Enter your hero's name: ", Color.GREY)
        name = self._in.readline().rstrip("\r\n")
        self._write(Color.RESET)
        return name or DEFAULT_NAME

    def player_class(self) -> PlayerClassChoice:
        """Ask for the starting class."""
        return self._class_choice("\nChoose your class:\n")

    def level_up_class_choice(self) -> PlayerClassChoice:
        """Ask which class to gain a level in."""
        return self._class_choice("\nChoose a class to level up:\n")

    def _class_choice(self, prompt: str) -> PlayerClassChoice:
        while True:
            self._write(Color.BOLD_YELLOW, prompt, Color.RESET, "\n")
            for choice, name in _CLASS_NAMES.items():
                self._write(Color.WHITE, f"  {int(choice)}. {name}\n")
            self._write(Color.GREY, "> ")
            text = self._read_token_line()
            self._write(Color.RESET)

            match = _LEADING_INT.match(text)
            if match is not None:
                value = int(match.group())
                if value in _CLASS_NAMES.keys():
                    return PlayerClassChoice(value)
            self._write(
                Color.BOLD_RED,
                f"Invalid input. Please enter a number between 1 and {len(_CLASS_NAMES)}.\n",
                Color.RESET,
            )

    def _yes_no(self, prompt: str) -> bool:
        while True:
            self._write(Color.BOLD_YELLOW, prompt, Color.GREY)
            answer = self._read_token_line()[0].lower()
            self._write(Color.RESET)
            if answer in ("y", "n"):
                return answer == "y"
            self._write(Color.BOLD_RED, "Invalid input. Please enter 'y' or 'n'.\n", Color.RESET)

    def ask_to_play_again(self) -> bool:
        """Ask whether to start another game."""
        return self._yes_no("\nDo you want to play again?: ")

    def post_battle_choice(
        self, current_weapon: DamageSource, dropped_weapon: DamageSource
    ) -> PostBattleChoice:
        """Show both weapons and ask whether to take the dropped one."""
        self._write(
            Color.WHITE, "\nYour current weapon: ", Color.YELLOW, current_weapon.name,
            Color.WHITE, " (Damage: ", Color.YELLOW, str(current_weapon.base_damage),
            Color.WHITE, ").", Color.RESET,
        )
        self._write(
            Color.WHITE, "\nThe defeated monster dropped a ", Color.CYAN, dropped_weapon.name,
            Color.WHITE, " (Damage: ", Color.CYAN, str(dropped_weapon.base_damage),
            Color.WHITE, ").", Color.RESET,
        )
        if self._yes_no("\nDo you want to take it? (y/n): "):
            return PostBattleChoice.TAKE_WEAPON
        return PostBattleChoice.LEAVE_WEAPON