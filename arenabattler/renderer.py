"""Console output of game events."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import TextIO

from arenabattler.colors import Color
from arenabattler.creatures import Creature, Player
from arenabattler.events import (
    AbilityTriggered,
    AttackMissed,
    BattleEnded,
    BattleStarted,
    DamageApplied,
    ErrorMessage,
    Event,
    EventBus,
    GameLost,
    GameMessage,
    GameWon,
    NewGameStarted,
    TurnStarted,
    default_bus,
)

BATTLE_START = r"""
  ____        _   _   _         _____ _             _   
 |  _ \      | | | | | |       / ____| |           | |  
 | |_) | __ _| |_| |_| | ___  | (___ | |_ __ _ _ __| |_ 
 |  _ < / _` | __| __| |/ _ \  \___ \| __/ _` | '__| __|
 | |_) | (_| | |_| |_| |  __/  ____) | || (_| | |  | |_ 
 |____/ \__,_|\__|\__|_|\___| |_____/ \__\__,_|_|   \__|
                                                        
"""

VICTORY = r"""
 __      ___      _                   
 \ \    / (_)    | |                  
  \ \  / / _  ___| |_ ___  _ __ _   _ 
   \ \/ / | |/ __| __/ _ \| '__| | | |
    \  /  | | (__| || (_) | |  | |_| |
     \/   |_|\___|\__\___/|_|   \__, |
                                 __/ |
                                |___/ 
"""

DEFEAT = r"""
______      __           _   
|  _  \    / _|         | |  
| | | |___| |_ ___  __ _| |_ 
| | | / _ \  _/ _ \/ _` | __|
| |/ /  __/ ||  __/ (_| | |_ 
|___/ \___|_| \___|\__,_|\__|
                             
"""

HEALTH_BAR_WIDTH = 20
COMPACT_HEALTH_BAR_WIDTH = 15
SEPARATOR = "======================================\n"
TURN_SEPARATOR = "--------------------------------------\n"
_CLEAR_SCREEN = "\033[2J\033[1;1H"
_FILLED = "█"


def health_bar(current: int, maximum: int, width: int) -> str:
    """Return a coloured bar of ``width`` cells followed by ``current/maximum``."""
    percentage = current / maximum if maximum > 0 else 0.0
    filled = min(max(int(percentage * width), 0), width)
    if percentage > 0.6:
        color = Color.BOLD_GREEN
    elif percentage > 0.3:
        color = Color.BOLD_YELLOW
    else:
        color = Color.BOLD_RED
    cells = _FILLED * filled + " " * (width - filled)
    return f"{color}[{cells}]{Color.RESET} {current}/{maximum}"


class ConsoleRenderer:
    """Listens for game events and writes them to the console."""

    def __init__(
        self,
        data_manager,
        *,
        bus: EventBus | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._data = data_manager
        self._bus = bus if bus is not None else default_bus
        self._stdout = stdout
        self._stderr = stderr

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def _err(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _write(self, *parts: object) -> None:
        self._out.write("".join(str(part) for part in parts))
        self._out.flush()

    def register_event_handlers(self) -> None:
        """Subscribe this renderer to its event bus."""
        self._bus.subscribe(self.handle)

    def handle(self, event: Event) -> None:
        """Render ``event``; events without a presentation are ignored."""
        match event:
            case GameMessage(message=message):
                self._game_message(message)
            case ErrorMessage(message=message):
                self._err.write(f"{Color.BOLD_RED}ERROR: {message}{Color.RESET}\n")
                self._err.flush()
            case BattleStarted(combatant1=first, combatant2=second):
                self._write(Color.BOLD_YELLOW, BATTLE_START, Color.RESET, "\n")
                self._print_creature_info(first)
                self._print_creature_info(second)
                self._write(SEPARATOR)
            case TurnStarted(attacker_name=attacker, defender_name=defender, turn_number=turn):
                self._write(TURN_SEPARATOR)
                self._write(Color.GREY, f"Turn #{turn}", Color.RESET, "\n")
                self._write(Color.YELLOW, f"{attacker} attacks {defender}!", Color.RESET, "\n")
            case DamageApplied(
                target_name=target, damage_amount=amount, current_hp=current, max_hp=maximum
            ):
                self._write(
                    Color.BOLD_RED, "HIT! ", Color.RESET, f"{target} takes ",
                    Color.BOLD_RED, amount, Color.RESET, " damage.\n",
                )
                self._write(
                    f" > {target} HP: ",
                    health_bar(current, maximum, COMPACT_HEALTH_BAR_WIDTH),
                    "\n",
                )
            case AttackMissed(attacker_name=attacker, defender_name=defender):
                self._write(
                    Color.CYAN, "MISS! ", Color.RESET,
                    f"{attacker}'s attack is dodged by {defender}!\n",
                )
            case BattleEnded(winner_name=winner):
                self._write(SEPARATOR)
                self._write(Color.BOLD_GREEN, f"{winner} is victorious!", Color.RESET, "\n")
                self._write(SEPARATOR, "\n")
            case NewGameStarted():
                self._clear_screen()
            case AbilityTriggered(creature_name=creature, ability_id=ability_id):
                ability = self._data.ability_data(ability_id)
                if ability is not None:
                    self._write(
                        " > ", Color.MAGENTA, f"{creature} {ability.description}",
                        Color.RESET, "\n",
                    )
            case GameWon():
                self._write(Color.BOLD_GREEN, VICTORY, Color.RESET, "\n")
                self._write(
                    Color.BOLD_GREEN,
                    "CONGRATULATIONS! You have defeated all monsters and won the game!",
                    Color.RESET, "\n",
                )
            case GameLost():
                self._write(Color.BOLD_RED, DEFEAT, Color.RESET, "\n")
                self._write(
                    Color.BOLD_RED, "\nGAME OVER. You have been defeated.", Color.RESET, "\n"
                )

    def _game_message(self, message: str) -> None:
        if "leveled up" in message or "You have reached level" in message:
            color = Color.BOLD_GREEN
        elif "You have equipped" in message:
            color = Color.BOLD_CYAN
        else:
            color = Color.CYAN
        self._write(color, message, Color.RESET, "\n")

    def _print_creature_info(self, creature: Creature) -> None:
        attributes = creature.attributes
        source = creature.damage_source
        is_player = isinstance(creature, Player)

        self._write(
            Color.BOLD_CYAN if is_player else Color.BOLD_RED,
            f"  {creature.name}", Color.RESET, "\n",
        )

        if is_player:
            self._write("  - Level: ", Color.BOLD_YELLOW, creature.total_level(), Color.RESET, " (")
            entries = []
            for class_id, level in creature.class_levels.items():
                class_data = self._data.character_class(class_id)
                if class_data is not None:
                    entries.append(f"{Color.WHITE}{class_data.name} {level}{Color.RESET}")
                else:
                    entries.append("")
            self._write(", ".join(entries), ")\n")

        self._write(
            "  - HP: ",
            health_bar(creature.current_health, creature.max_health, HEALTH_BAR_WIDTH),
            "\n",
        )
        self._write(
            "  - Stats: [",
            Color.RED, f"Str:{attributes.strength}", Color.RESET, " ",
            Color.GREEN, f"Dex:{attributes.dexterity}", Color.RESET, " ",
            Color.BLUE, f"End:{attributes.endurance}", Color.RESET, "]\n",
        )
        if source is not None:
            self._write(
                f"  - Weapon: {source.name} (Base Dmg: ",
                Color.YELLOW, source.base_damage, Color.RESET, ")\n",
            )
        self._write("\n")

    def _clear_screen(self) -> None:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            self._write(_CLEAR_SCREEN)