# textrpg

Building blocks for a turn-based text role-playing game. The game text and the
built-in item names are in Korean.

## Modules

- `textrpg.stats`: `StatType`, `Modifier`, `ModifierContainer`, `Stat` and
  `StatContainer`, whose `get_stat_value` caches each final value (base plus
  bonus plus every additive modifier) until a modifier group touching it is
  added or removed. `Experience` levels up as often as `add_experience`
  allows (level *n* needs `3 + (n - 1) * 5`), `ExperienceTable` looks up fixed
  requirements, and `Gold` (10000 to start) adds and spends money.
- `textrpg.items`: stackable `Item`s (up to 99 per stack), `EquipableItem`s
  with an `EquipType` slot and a `ModifierContainer`, and `ItemTable`, the
  catalogue of five known items. `ItemTable.get_item` returns the catalogue's
  own instance, `create_item` a fresh copy; an unknown name raises
  `ItemNotFoundError`.
- `textrpg.inventory`: `Inventory`, a bag of five slots by default.
  Equipment always takes a new slot; other items stack onto a held stack of the
  same name that is not full.
- `textrpg.equipment`: `Equipment` with `weapon` and `armor` slots. `equip`
  wears a copy of the item and adds its modifiers to a `StatContainer`,
  replacing what was in the slot; `unequip` takes the item off and returns it.
- `textrpg.characters`: `Character`, `CombatCharacter` (damage less defence,
  never below zero; healing capped at the HP stat), `EnemyCharacter` with its
  experience, gold and item drops, `PlayerCharacter` (HP 50, attack 10,
  defence 7, agility 7, with experience, gold, equipment and inventory) and
  the abstract `NPCCharacter`.
- `textrpg.game_instance`: `GameInstance` holds the item table, the player
  and a `scene_manager` slot (None until you set it); `instance()` returns one
  shared `GameInstance`.
- `textrpg.combat`: `CombatGameMode`, a state machine advanced one step per
  `process_combat` call. The faster side (by agility, ties to the player) acts
  first; the player answers with `"1"`/`"공격"` to attack or `"2"`/`"회복"` to
  heal 10 HP. When a side falls, the next step hands the player the enemy's
  experience and gold and one of its drop items chosen at random, and
  `is_combat_ended` becomes True.
- `textrpg.screen`: `Screen`, a grid of 128 × 32 cells by default in which
  Hangul syllables take two cells (`char_width`). `render` draws it with ANSI
  escape codes; `show_cursor` shows or hides the cursor, and the constructor
  hides it on its stream (standard output unless another is given).
- `textrpg.command_input`: `CommandInput` turns characters passed to `feed`
  into commands: Enter finishes a line, Backspace deletes, and `get_command`
  returns the line with spaces removed.
- `textrpg.text_prompt`: `TextPrompt`, a message log that reveals one queued
  message per `update`, draws them every other row and drops the oldest once
  they no longer fit in 25 rows.
- `textrpg.scenes`: the abstract `Scene` and a `SceneManager` that runs
  `on_exit` on the old scene and `on_enter` on the new one.

## Example

```python
from textrpg.equipment import Equipment
from textrpg.inventory import Inventory
from textrpg.items import ItemTable
from textrpg.stats import Experience, Stat, StatContainer, StatType

table = ItemTable()
sword = table.create_item("최하급 검")

bag = Inventory()
bag.add_item(sword)

stats = StatContainer(stats={StatType.ATTACK_POWER: Stat(base_value=10)})
gear = Equipment()
gear.equip(sword, stats)
stats.get_stat_value(StatType.ATTACK_POWER)   # 11

exp = Experience()
exp.add_experience(5)                         # True: level 2, 2 experience left
```

A fight, one step at a time:

```python
from textrpg.characters import EnemyCharacter
from textrpg.combat import CombatGameMode
from textrpg.stats import Stat, StatContainer, StatType
from textrpg.text_prompt import TextPrompt

goblin = EnemyCharacter(
    "고블린", "고블린 병사", 10, 5,
    StatContainer(stats={
        StatType.HP: Stat(base_value=50),
        StatType.ATTACK_POWER: Stat(base_value=10),
        StatType.DEFENCE: Stat(base_value=5),
        StatType.AGILITY: Stat(base_value=5),
    }),
)

prompt = TextPrompt()
combat = CombatGameMode(prompt)      # uses the shared game instance's player
combat.set_enemy(goblin)
combat.process_combat()              # the player is faster and is asked to act
combat.set_player_command("1")       # attack
combat.process_combat()
print(prompt.pending)
```

## What it does not do

The package has no command and no game loop, and no concrete scenes: there is
no title screen, town, dungeon or shop to play through. `Scene` must be
subclassed to make one. Keyboard input is not read from the terminal;
characters must be handed to `CommandInput.feed`. Nothing is saved between
runs.