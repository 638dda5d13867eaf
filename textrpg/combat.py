"""Turn-based combat between the player and one enemy."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Protocol

from textrpg.characters import EnemyCharacter
from textrpg.game_instance import GameInstance, instance
from textrpg.items import ItemNotFoundError
from textrpg.stats import StatType

HEAL_AMOUNT = 10
ATTACK_COMMANDS = frozenset({"1", "공격", "1공격", "1.공격"})
HEAL_COMMANDS = frozenset({"2", "회복", "2회복", "2.회복"})

_PLAYER_TURN = "시스템 : 플레이어가 공격합니다. 어떤 행동을 하시겠습니까?"
_ACTION_MENU = "시스템 : 1.공격 2.회복"


class MessageSink(Protocol):
    """Anything that accepts lines of text for display."""

    def enqueue(self, msg: str) -> None: ...


class CombatState(Enum):
    """Phase of a fight."""

    COMBAT_START = auto()
    COMBAT_END = auto()
    PLAYER_ACTION = auto()
    ENEMY_ACTION = auto()
    WAIT_FOR_PLAYER_INPUT = auto()


class CombatGameMode:
    """Runs one fight, one step per call to process_combat."""

    def __init__(
        self,
        text_prompt: MessageSink,
        game: GameInstance | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._prompt = text_prompt
        self._game = game if game is not None else instance()
        self._rng = rng if rng is not None else random.Random()
        self.enemy: EnemyCharacter | None = None
        self.state = CombatState.COMBAT_START
        self._command = ""
        self._ended = False

    @property
    def is_combat_ended(self) -> bool:
        """True once the fight's rewards have been handed out."""
        return self._ended

    def set_enemy(self, enemy: EnemyCharacter) -> None:
        """Start a new fight against the given enemy."""
        self.enemy = enemy
        self.state = CombatState.COMBAT_START
        self._ended = False

    def set_player_command(self, command: str) -> None:
        """Hand the player's choice over; ignored unless input is awaited."""
        if self.state is not CombatState.WAIT_FOR_PLAYER_INPUT:
            return
        self._command = command
        self.state = CombatState.PLAYER_ACTION

    def process_combat(self) -> None:
        """Advance the fight by one step according to its state."""
        if self.enemy is None:
            return
        step = {
            CombatState.COMBAT_START: self._combat_start,
            CombatState.COMBAT_END: self._combat_end,
            CombatState.PLAYER_ACTION: self._player_action,
            CombatState.ENEMY_ACTION: self._enemy_action,
        }.get(self.state)
        if step is not None:
            step(self.enemy)

    def _ask_player(self) -> None:
        self._prompt.enqueue(_PLAYER_TURN)
        self._prompt.enqueue(_ACTION_MENU)
        self.state = CombatState.WAIT_FOR_PLAYER_INPUT

    def _combat_start(self, enemy: EnemyCharacter) -> None:
        self._ended = False
        self._prompt.enqueue("시스템 : 전투를 시작합니다.")

        player_agility = self._game.player.stats.get_stat_value(StatType.AGILITY)
        enemy_agility = enemy.stats.get_stat_value(StatType.AGILITY)

        if player_agility >= enemy_agility:
            self._ask_player()
        else:
            self._prompt.enqueue("시스템 : 적 캐릭터가 공격합니다.")
            self.state = CombatState.ENEMY_ACTION

    def _player_action(self, enemy: EnemyCharacter) -> None:
        player = self._game.player
        command = self._command

        if command in ATTACK_COMMANDS:
            damage = player.stats.get_stat_value(StatType.ATTACK_POWER)
            enemy.take_damage(damage)
            self._prompt.enqueue(
                f"플레이어 : [{enemy.name}]에게 {damage} 피해를 입혔습니다. "
                f"현재 적 HP {enemy.current_hp}"
            )
        elif command in HEAL_COMMANDS:
            player.heal_hp(HEAL_AMOUNT)
            self._prompt.enqueue(f"플레이어 : HP를 {HEAL_AMOUNT} 회복했습니다.")
        else:
            self._prompt.enqueue("시스템 : 잘못된 명령입니다. 다시 선택하세요.")
            self.state = CombatState.WAIT_FOR_PLAYER_INPUT
            return

        self._command = ""

        if enemy.is_dead:
            self._prompt.enqueue("시스템 : 적을 처치했습니다!")
            self.state = CombatState.COMBAT_END
        else:
            self.state = CombatState.ENEMY_ACTION

    def _enemy_action(self, enemy: EnemyCharacter) -> None:
        player = self._game.player
        damage = enemy.stats.get_stat_value(StatType.ATTACK_POWER)
        player.take_damage(damage)

        self._prompt.enqueue(
            f"{enemy.name} : [{player.name}]에게 {damage} 피해를 입혔습니다. "
            f"현재 플레이어 HP {player.current_hp}"
        )

        if player.is_dead:
            self._prompt.enqueue("시스템 : 당신은 쓰러졌습니다...")
            self.state = CombatState.COMBAT_END
        else:
            self._ask_player()

    def _combat_end(self, enemy: EnemyCharacter) -> None:
        player = self._game.player

        player.experience.add_experience(enemy.drop_exp)
        self._prompt.enqueue(f"시스템 : {enemy.drop_exp} 경험치를 획득했습니다.")

        player.gold.add_gold(enemy.drop_gold)
        self._prompt.enqueue(f"시스템 : {enemy.drop_gold} 골드를 획득했습니다.")

        drop_name = self._rng.choice(enemy.drop_items)
        try:
            drop_item = self._game.item_table.create_item(drop_name)
        except ItemNotFoundError:
            self._prompt.enqueue(f"[오류] : [{drop_name}] 해당 아이템이 존재하지 않습니다.")
            self._ended = True
            return

        if not player.inventory.add_item(drop_item):
            self._prompt.enqueue("시스템 : 인벤토리가 가득 차 아이템을 획득하지 못했습니다.")
        self._prompt.enqueue(f"시스템 : 전리품으로 [{drop_item.name}] 를 획득했습니다.")

        self._ended = True