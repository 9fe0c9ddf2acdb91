"""Wiring of all game systems and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path
from typing import TextIO

from arenabattler.battle import PAUSE_SECONDS
from arenabattler.console_input import ConsoleInput
from arenabattler.data_manager import DataManager
from arenabattler.entity_factory import EntityFactory
from arenabattler.events import EventBus, default_bus
from arenabattler.game import Game
from arenabattler.renderer import ConsoleRenderer


def default_data_directory() -> Path:
    """Directory holding the bundled data files."""
    return Path(__file__).resolve().parent / "data"


class GameManager:
    """Creates the data manager, factories, input, renderer and game, and runs the game."""

    def __init__(
        self,
        data_directory: str | PathLike[str] | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        bus: EventBus | None = None,
        battle_pause: float = PAUSE_SECONDS,
    ) -> None:
        self.bus = bus if bus is not None else default_bus
        directory = default_data_directory() if data_directory is None else Path(data_directory)

        self.data_manager = DataManager(bus=self.bus)
        self.data_manager.load_from_files(directory)

        self.entity_factory = EntityFactory(self.data_manager, bus=self.bus)
        self.input = ConsoleInput(stdin=stdin, stdout=stdout)

        self.renderer = ConsoleRenderer(
            self.data_manager, bus=self.bus, stdout=stdout, stderr=stderr
        )
        self.renderer.register_event_handlers()

        self.game = Game(
            self.data_manager,
            self.entity_factory,
            self.input,
            bus=self.bus,
            battle_pause=battle_pause,
        )

    def run(self) -> None:
        """Run the game loop."""
        self.game.run()


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(description="A turn-based arena auto battler.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory with weapons.json, monsters.json, classes.json and abilities.json",
    )
    args = parser.parse_args(argv)

    try:
        GameManager(args.data_dir).run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0