"""Weapon and armour slots that apply item modifiers to stats."""

from __future__ import annotations

from textrpg.items import EquipableItem, EquipType
from textrpg.stats import StatContainer

_SLOTS = {EquipType.WEAPON: "weapon", EquipType.ARMOR: "armor"}


class Equipment:
    """The items a character is wearing."""

    def __init__(self) -> None:
        self.weapon: EquipableItem | None = None
        self.armor: EquipableItem | None = None

    def equip(self, item: EquipableItem | None, stats: StatContainer) -> bool:
        """Wear a copy of the item, replacing whatever held its slot."""
        if item is None:
            return False
        slot = _SLOTS.get(item.equip_type)
        if slot is None:
            return False

        worn = item.clone()
        previous: EquipableItem | None = getattr(self, slot)
        if previous is not None:
            stats.remove_modifier_container(previous.modifier_container.id)
        setattr(self, slot, worn)
        stats.add_modifier_container(worn.modifier_container)
        return True

    def unequip(self, equip_type: EquipType, stats: StatContainer) -> EquipableItem | None:
        """Take off the item in a slot and return it, or None if it was empty."""
        slot = _SLOTS.get(equip_type)
        if slot is None:
            return None
        worn: EquipableItem | None = getattr(self, slot)
        if worn is None:
            return None
        stats.remove_modifier_container(worn.modifier_container.id)
        setattr(self, slot, None)
        return worn

    def is_equipped(self, equip_type: EquipType) -> bool:
        """True when the slot of that type holds an item."""
        slot = _SLOTS.get(equip_type)
        return slot is not None and getattr(self, slot) is not None