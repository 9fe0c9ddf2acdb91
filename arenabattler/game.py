"""The game flow: character creation, battle rounds, loot and level-ups."""

from __future__ import annotations

from arenabattler.ability_utils import apply_bonus
from arenabattler.battle import PAUSE_SECONDS, Battle, BattleResult
from arenabattler.console_input import ConsoleInput
from arenabattler.creatures import Monster, Player
from arenabattler.data_manager import DataManager
from arenabattler.entity_factory import EntityFactory
from arenabattler.events import (
    ErrorMessage,
    EventBus,
    GameLost,
    GameMessage,
    GameWon,
    NewGameStarted,
    default_bus,
)
from arenabattler.models import PostBattleChoice, class_id_for


class Game:
    """Runs games: a hero fights a series of random monsters."""

    BATTLES_TO_WIN = 5
    MAX_TOTAL_LEVEL = 3

    def __init__(
        self,
        data_manager: DataManager,
        entity_factory: EntityFactory,
        console_input: ConsoleInput,
        *,
        bus: EventBus | None = None,
        battle_pause: float = PAUSE_SECONDS,
    ) -> None:
        self._data = data_manager
        self._factory = entity_factory
        self._input = console_input
        self._bus = bus if bus is not None else default_bus
        self._battle_pause = battle_pause
        self.player: Player | None = None

    def run(self) -> None:
        """Play games until the player declines another one."""
        while True:
            if self.start_new_game() is None:
                return
            if self.play_rounds():
                self._bus.publish(GameWon())
            else:
                self._bus.publish(GameLost())
            if not self._input.ask_to_play_again():
                return

    def start_new_game(self) -> Player | None:
        """Create a new hero from the player's answers; None if creation fails."""
        self._bus.publish(NewGameStarted())
        self._bus.publish(GameMessage("Welcome to the Arena!"))

        name = self._input.player_name()
        choice = self._input.player_class()
        self.player = self._factory.create_player(name, choice)

        if self.player is None:
            self._bus.publish(ErrorMessage("Character creation failed. Exiting."))
            return None

        self._bus.publish(
            GameMessage(
                f"\nYour hero, {self.player.name}, is ready! Let the battles begin..."
            )
        )
        return self.player

    def play_rounds(self) -> bool:
        """Fight all rounds; True if the hero wins every battle."""
        if self.player is None:
            raise RuntimeError("no player: start a new game first")

        for round_number in range(1, self.BATTLES_TO_WIN + 1):
            self._announce_round(round_number)

            monster = self._factory.create_random_monster()
            if monster is None:
                self._bus.publish(ErrorMessage("Failed to create monster. Exiting."))
                return False

            battle = Battle(self.player, monster, bus=self._bus, pause=self._battle_pause)
            if battle.start() is BattleResult.COMBATANT2_WON:
                return False

            if round_number < self.BATTLES_TO_WIN:
                self._post_battle_phase(monster)
        return True

    def _announce_round(self, round_number: int) -> None:
        self._bus.publish(
            GameMessage(f"\n--- ROUND {round_number} of {self.BATTLES_TO_WIN} ---")
        )

    def _post_battle_phase(self, defeated: Monster) -> None:
        self._handle_loot(defeated)
        self._handle_level_up()
        self.player.restore_health()
        self._bus.publish(GameMessage("Your health has been fully restored."))

    def _handle_loot(self, defeated: Monster) -> None:
        dropped = defeated.take_dropped_weapon()
        if dropped is None:
            return
        choice = self._input.post_battle_choice(self.player.damage_source, dropped)
        if choice is PostBattleChoice.TAKE_WEAPON:
            self.player.equip_weapon(dropped)
            self._bus.publish(
                GameMessage(f"You have equipped the {self.player.damage_source.name}.")
            )

    def _handle_level_up(self) -> None:
        player = self.player
        if player.total_level() >= self.MAX_TOTAL_LEVEL:
            return

        self._bus.publish(GameMessage("\nCongratulations! You leveled up!"))

        class_id = str(class_id_for(self._input.level_up_class_choice()))
        player.add_class_level(class_id)
        new_level = player.level_in_class(class_id)

        self._bus.publish(GameMessage(f"You have reached level {player.total_level()}!"))

        class_data = self._data.character_class(class_id)
        if class_data is None:
            return
        player.increase_max_health(class_data.health_per_level)
        for bonus in class_data.level_bonuses:
            if bonus.level == new_level:
                apply_bonus(player, bonus, self._data)