"""Character statistics, modifiers, experience and gold."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

UINT8_MAX = 255
_UINT16_MASK = 0xFFFF


class StatType(Enum):
    """Kinds of character statistics."""

    HP = 0
    ATTACK_POWER = 1
    DEFENCE = 2
    AGILITY = 3


class ModifierType(Enum):
    """How a modifier changes its target statistic."""

    ADD = 0


@dataclass(frozen=True)
class Modifier:
    """A single change applied to one statistic."""

    target_stat_type: StatType
    modifier_type: ModifierType = ModifierType.ADD
    value: int = 0


@dataclass
class ModifierContainer:
    """A named group of modifiers, applied and removed together."""

    id: str = ""
    modifiers: list[Modifier] = field(default_factory=list)


@dataclass
class Stat:
    """One statistic with its cached final value."""

    base_value: int = 0
    bonus_value: int = 0
    final_value: int = 0
    changed: bool = True


@dataclass
class StatContainer:
    """All statistics of a character plus the modifier groups acting on them."""

    stats: dict[StatType, Stat] = field(default_factory=dict)
    modifier_containers: dict[str, ModifierContainer] = field(default_factory=dict)

    def get_stat_value(self, stat_type: StatType) -> int:
        """Return the final value of a statistic, or 0 if it is not present."""
        stat = self.stats.get(stat_type)
        if stat is None:
            return 0
        if stat.changed:
            stat.final_value = self._calculate(stat_type, stat)
            stat.changed = False
        return stat.final_value

    def add_modifier_container(self, container: ModifierContainer) -> None:
        """Store a modifier group under its id, replacing any group with that id."""
        self.modifier_containers[container.id] = copy.deepcopy(container)
        self._mark_changed(container)

    def remove_modifier_container(self, container_id: str) -> None:
        """Remove the modifier group with the given id, if present."""
        container = self.modifier_containers.pop(container_id, None)
        if container is not None:
            self._mark_changed(container)

    def _calculate(self, stat_type: StatType, stat: Stat) -> int:
        bonus = sum(
            modifier.value
            for container in self.modifier_containers.values()
            for modifier in container.modifiers
            if modifier.target_stat_type is stat_type
            and modifier.modifier_type is ModifierType.ADD
        )
        return (stat.base_value + stat.bonus_value + bonus) & _UINT16_MASK

    def _mark_changed(self, container: ModifierContainer) -> None:
        for modifier in container.modifiers:
            stat = self.stats.get(modifier.target_stat_type)
            if stat is not None:
                stat.changed = True


@dataclass
class Experience:
    """Level and experience progress of a character."""

    level: int = 1
    current_exp: int = 0

    def required_exp_for_next_level(self) -> int:
        """Experience needed to leave the current level."""
        return 3 + (self.level - 1) * 5

    def add_experience(self, amount: int) -> bool:
        """Add experience, levelling up as often as it allows; True if levelled."""
        self.current_exp += amount
        leveled_up = False
        while self.current_exp >= self.required_exp_for_next_level():
            self.current_exp -= self.required_exp_for_next_level()
            self.level += 1
            leveled_up = True
        return leveled_up


@dataclass(frozen=True)
class ExperienceTable:
    """Fixed experience requirements per level, starting at level 1."""

    required_exp_per_level: tuple[int, ...]

    def get_required_exp(self, level: int) -> int:
        """Requirement for a level, or UINT8_MAX when the level is out of range."""
        if level <= 0 or level - 1 >= len(self.required_exp_per_level):
            return UINT8_MAX
        return self.required_exp_per_level[level - 1]


@dataclass
class Gold:
    """A character's money, held in a 16-bit amount."""

    amount: int = 10000

    def add_gold(self, amount: int) -> None:
        """Add gold; the total wraps around at 16 bits."""
        self.amount = (self.amount + amount) & _UINT16_MASK

    def remove_gold(self, amount: int) -> bool:
        """Spend gold if enough is held; True when it was spent."""
        if self.amount < amount:
            return False
        self.amount -= amount
        return True