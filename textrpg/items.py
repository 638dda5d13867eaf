"""Items, equipable items and the table of known items."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from textrpg.stats import Modifier, ModifierContainer, StatType


class ItemType(Enum):
    """Broad category of an item."""

    NONE = 0
    EQUIP = 1
    OTHER = 2


class EquipType(Enum):
    """Equipment slot an item occupies."""

    NONE = 0
    WEAPON = 1
    ARMOR = 2


class ItemNotFoundError(LookupError):
    """Raised when an item name is not in the item table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no item named {name!r}")
        self.name = name


@dataclass
class Item:
    """A stackable item."""

    item_type: ItemType
    name: str
    description: str = ""
    buy_price: int = 0
    sell_price: int = 0
    max_count: int = 99
    count: int = 1

    def clone(self) -> Item:
        """Return an independent copy of this item."""
        return copy.deepcopy(self)

    def add(self, num: int = 1) -> bool:
        """Grow the stack by num; False if it would exceed the maximum."""
        if self.count + num > self.max_count:
            return False
        self.count += num
        return True

    def remove(self, num: int = 1) -> bool:
        """Shrink the stack by num; False if not enough are held."""
        if self.count <= 0 or self.count - num < 0:
            return False
        self.count -= num
        return True

    def is_full(self) -> bool:
        """True when the stack holds its maximum count."""
        return self.count == self.max_count

    @property
    def remaining(self) -> int:
        """How many more fit on this stack."""
        return self.max_count - self.count


@dataclass
class EquipableItem(Item):
    """An item that can be worn in an equipment slot and modifies stats."""

    equip_type: EquipType = EquipType.NONE
    modifier_container: ModifierContainer = field(default_factory=ModifierContainer)

    def clone(self) -> EquipableItem:
        """Return an independent copy, modifiers included."""
        return copy.deepcopy(self)


def _equipable(
    equip_type: EquipType,
    name: str,
    description: str,
    buy_price: int,
    sell_price: int,
    *modifiers: Modifier,
) -> EquipableItem:
    return EquipableItem(
        ItemType.EQUIP,
        name,
        description,
        buy_price,
        sell_price,
        equip_type=equip_type,
        modifier_container=ModifierContainer(name, list(modifiers)),
    )


class ItemTable:
    """The catalogue of every item the game knows about."""

    def __init__(self) -> None:
        self._items: dict[str, Item] = {
            item.name: item for item in self._load()
        }

    @staticmethod
    def _load() -> list[Item]:
        return [
            _equipable(
                EquipType.WEAPON,
                "최하급 검",
                "언제 부러질지 모르는 최하급 무기이다.",
                10,
                5,
                Modifier(StatType.ATTACK_POWER, value=1),
            ),
            _equipable(
                EquipType.WEAPON,
                "하급 검",
                "한두번 정도는 더 사용할 수 있을듯 한 하급 무기이다.",
                20,
                10,
                Modifier(StatType.ATTACK_POWER, value=1),
                Modifier(StatType.AGILITY, value=1),
            ),
            _equipable(
                EquipType.WEAPON,
                "일반 검",
                "좋지도 나쁘지도 않은 일반적인 무기이다.",
                30,
                15,
                Modifier(StatType.ATTACK_POWER, value=2),
                Modifier(StatType.AGILITY, value=1),
            ),
            _equipable(
                EquipType.ARMOR,
                "최하급 갑옷",
                "공격이 닿으면 부서질것 같은 최하급 갑옷이다.",
                10,
                5,
                Modifier(StatType.DEFENCE, value=1),
            ),
            Item(
                ItemType.OTHER,
                "고블린의 뼈",
                "고블린 처치 시 일정 확률로 획득할 수 있다.",
                0,
                2,
            ),
        ]

    @property
    def items(self) -> Mapping[str, Item]:
        """Read-only view of the catalogue by name."""
        return MappingProxyType(self._items)

    def create_item(self, name: str) -> Item:
        """Return a fresh copy of the named item."""
        return self.get_item(name).clone()

    def get_item(self, name: str) -> Item:
        """Return the catalogue's own instance of the named item."""
        try:
            return self._items[name]
        except KeyError:
            raise ItemNotFoundError(name) from None