"""Characters: the player, enemies and non-player characters."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

from textrpg.equipment import Equipment
from textrpg.inventory import Inventory
from textrpg.stats import Experience, Gold, Stat, StatContainer, StatType

ENEMY_DROP_ITEMS = ("최하급 검", "하급 검", "고블린의 뼈")


class Character:
    """Anything in the game world with a name and a description."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class CombatCharacter(Character):
    """A character that has statistics and hit points and can fight."""

    def __init__(
        self, name: str, description: str, stats: StatContainer | None = None
    ) -> None:
        super().__init__(name, description)
        self.stats = stats if stats is not None else StatContainer()
        self.current_hp = 0
        self.is_dead = False

    @property
    def max_hp(self) -> int:
        """Maximum hit points, as given by the HP statistic."""
        return self.stats.get_stat_value(StatType.HP)

    def take_damage(self, damage: int) -> None:
        """Lose hit points after defence; the character dies at zero."""
        self.current_hp = max(0, self.current_hp - self.calculate_damage(damage))
        if self.current_hp <= 0:
            self.is_dead = True

    def heal_hp(self, amount: int) -> None:
        """Regain hit points, never beyond the maximum."""
        self.current_hp = min(self.current_hp + amount, self.max_hp)

    def calculate_damage(self, damage: int) -> int:
        """Damage actually taken: the incoming damage less defence, at least 0."""
        defence = self.stats.get_stat_value(StatType.DEFENCE)
        return max(0, damage - defence)


class EnemyCharacter(CombatCharacter):
    """A hostile character that rewards the player when defeated."""

    def __init__(
        self,
        name: str,
        description: str,
        drop_exp: int,
        drop_gold: int,
        stats: StatContainer,
    ) -> None:
        super().__init__(name, description, copy.deepcopy(stats))
        self.drop_exp = drop_exp
        self.drop_gold = drop_gold
        self.drop_items: list[str] = list(ENEMY_DROP_ITEMS)
        self.current_hp = self.max_hp


class PlayerCharacter(CombatCharacter):
    """The character the player controls."""

    def __init__(self, name: str, description: str) -> None:
        stats = StatContainer(
            stats={
                StatType.HP: Stat(base_value=50),
                StatType.ATTACK_POWER: Stat(base_value=10),
                StatType.DEFENCE: Stat(base_value=7),
                StatType.AGILITY: Stat(base_value=7),
            }
        )
        super().__init__(name, description, stats)
        self.experience = Experience()
        self.gold = Gold()
        self.equipment = Equipment()
        self.inventory = Inventory()
        self.current_hp = self.max_hp


class NPCCharacter(Character, ABC):
    """A non-player character the player can interact with."""

    @abstractmethod
    def interact(self) -> None:
        """React to the player talking to this character."""