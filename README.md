# arenabattler

A small turn-based auto-battler that you play in the terminal. You create a
hero, choose a class, and fight your way through five arena battles against
randomly chosen monsters. The battles resolve on their own. Between rounds you
decide whether to take the weapon a defeated monster dropped, and you choose
which class to level up.

## Installing

```
pip install .
```

The package has no runtime dependencies beyond the Python standard library
(Python 3.11 or later).

## Game data is not included

The game reads its weapons, monsters, classes and abilities from four JSON
files, and **the package does not ship any of them**. You must supply a data
directory yourself (the formats are described below) and pass it with
`--data-dir`. Without it the game looks in
`arenabattler.game_manager.default_data_directory()` (a `data` directory
inside the installed package), which does not exist in this distribution: an
error is reported, character creation fails and the game exits.

## Playing

```
arenabattler --data-dir path/to/data
```

`--data-dir` names the directory holding `weapons.json`, `monsters.json`,
`classes.json` and `abilities.json`. End of input (Ctrl-D) or Ctrl-C quits.

A game goes like this:

1. Enter a name for your hero. An empty name becomes `Hero`.
2. Choose a starting class: `1. Rogue`, `2. Warrior` or `3. Barbarian`
   (class IDs `CLASS_ROGUE`, `CLASS_WARRIOR`, `CLASS_BARBARIAN` in
   `classes.json`). Strength, dexterity and endurance are each rolled between
   1 and 3. Starting health is endurance plus the class's health per level.
   You get the class's starting weapon and its level-1 bonuses.
3. Fight five rounds. Each round puts you against a random monster.
   - The combatant with the higher dexterity attacks first. On a tie, you do.
   - An attack hits when a roll from 1 to (attacker dexterity + defender
     dexterity) is higher than the defender's dexterity.
   - Damage is the weapon's base damage plus the attacker's strength. The
     attacker's and the defender's abilities then adjust it.
   - There is a one-second pause between turns.
4. After every won round except the last:
   - you may swap your weapon for the one the monster dropped,
   - while your total level is below 3, you gain a level in a class of your
     choice: your maximum health rises by that class's health per level, and
     the class's bonuses for your new level in it are applied,
   - your health is fully restored.
5. Win all five rounds to win the game. After a win or a loss you are asked
   whether to play again (`y` or `n`).

### Abilities

| Ability ID | Effect |
| --- | --- |
| `SNEAK_ATTACK` | +1 damage when the attacker is more dexterous than the target |
| `ACTION_SURGE` | On turn 1, adds the weapon's base damage again |
| `RAGE` | +2 damage on turns 1 to 3, then -1 |
| `POISON` | From turn 2, adds (turn - 1) damage |
| `FIRE_BREATH` | +3 damage on every third turn |
| `SHIELD` | -3 incoming damage when the defender is stronger than the attacker |
| `STONE_SKIN` | Incoming damage is reduced by the defender's endurance |
| `IMMUNITY_TO_SLASHING` | Cancels the base damage of slashing weapons |
| `VULNERABILITY_TO_BLUDGEONING` | Doubles damage from bludgeoning weapons |

When an ability changes the damage, the renderer prints the creature's name
followed by the ability's `description` from `abilities.json`.

## Data file formats

Each file holds a JSON array of entries. Damage types are `"Slashing"`,
`"Piercing"` or `"Bludgeoning"`.

`weapons.json`:

```json
[{"id": "WEAPON_DAGGER", "name": "Dagger", "damage": 2, "damageType": "Piercing"}]
```

`monsters.json`:

```json
[{"id": "MONSTER_GOBLIN", "name": "Goblin", "health": 5,
  "attributes": {"strength": 1, "dexterity": 1, "endurance": 1},
  "damage": 2, "damageType": "Slashing",
  "droppedWeaponId": "WEAPON_DAGGER", "abilities": []}]
```

`classes.json` (each level bonus carries either `ability` or
`attributeBonus`; missing attribute keys count as 0):

```json
[{"id": "CLASS_ROGUE", "name": "Rogue", "healthPerLevel": 4,
  "startingWeaponId": "WEAPON_DAGGER",
  "levelBonuses": [
    {"level": 1, "ability": "SNEAK_ATTACK"},
    {"level": 2, "attributeBonus": {"dexterity": 1}}]}]
```

`abilities.json`:

```json
[{"id": "SNEAK_ATTACK", "name": "Sneak Attack", "description": "strikes from the shadows!"}]
```

The values above are only examples. A file that is missing or malformed is
reported as an error and skipped; the other files still load. A monster whose
dropped weapon is not in `weapons.json` cannot be created.

## Using the pieces from Python

```python
from arenabattler.battle import Battle, BattleResult
from arenabattler.data_manager import DataManager
from arenabattler.entity_factory import EntityFactory
from arenabattler.models import MonsterId, PlayerClassChoice

data = DataManager()
data.load_from_files("path/to/data")

factory = EntityFactory(data)
hero = factory.create_player("Ayla", PlayerClassChoice.ROGUE)
goblin = factory.create_monster(MonsterId.MONSTER_GOBLIN)

result = Battle(hero, goblin, pause=0).start()
print("won" if result is BattleResult.COMBATANT1_WON else "lost")
```

`create_player`, `create_monster`, `create_random_monster` and
`create_weapon` return `None` (and publish an `ErrorMessage`) when the
template they need is missing.

Everything that happens during play is published as an event from
`arenabattler.events`: `GameMessage`, `ErrorMessage`, `NewGameStarted`,
`BattleStarted`, `TurnStarted`, `DamageApplied`, `AttackMissed`,
`AbilityTriggered`, `BattleEnded`, `GameWon` and `GameLost`. Listen to them
with `arenabattler.events.subscribe(handler)`, or give the classes their own
`EventBus` through their `bus=` keyword. The terminal output comes from
`arenabattler.renderer.ConsoleRenderer`, and
`arenabattler.game_manager.GameManager` wires everything together.

## Running the tests

```
pip install .[test]
pytest
```