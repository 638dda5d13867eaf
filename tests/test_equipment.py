import pytest

from textrpg.equipment import Equipment
from textrpg.items import EquipableItem, EquipType, ItemTable, ItemType
from textrpg.stats import Stat, StatContainer, StatType


@pytest.fixture
def table():
    return ItemTable()


@pytest.fixture
def stats():
    return StatContainer(
        stats={
            StatType.HP: Stat(base_value=50),
            StatType.ATTACK_POWER: Stat(base_value=10),
            StatType.DEFENCE: Stat(base_value=7),
            StatType.AGILITY: Stat(base_value=7),
        }
    )


def _bonus(item, stat_type):
    return sum(
        m.value for m in item.modifier_container.modifiers if m.target_stat_type is stat_type
    )


def test_nothing_equipped_initially():
    equipment = Equipment()
    assert not equipment.is_equipped(EquipType.WEAPON)
    assert not equipment.is_equipped(EquipType.ARMOR)
    assert not equipment.is_equipped(EquipType.NONE)


def test_equip_weapon_applies_modifiers(table, stats):
    equipment = Equipment()
    sword = table.get_item("하급 검")
    attack = stats.get_stat_value(StatType.ATTACK_POWER)
    assert equipment.equip(sword, stats) is True
    assert equipment.is_equipped(EquipType.WEAPON)
    assert stats.get_stat_value(StatType.ATTACK_POWER) - attack == _bonus(
        sword, StatType.ATTACK_POWER
    )
    assert equipment.weapon == sword
    assert equipment.weapon is not sword


def test_swap_weapon_replaces_modifiers(table, stats):
    equipment = Equipment()
    attack = stats.get_stat_value(StatType.ATTACK_POWER)
    equipment.equip(table.get_item("최하급 검"), stats)
    better = table.get_item("일반 검")
    equipment.equip(better, stats)
    assert equipment.weapon.name == "일반 검"
    assert stats.get_stat_value(StatType.ATTACK_POWER) - attack == _bonus(
        better, StatType.ATTACK_POWER
    )
    assert list(stats.modifier_containers) == ["일반 검"]


def test_equip_armor(table, stats):
    equipment = Equipment()
    defence = stats.get_stat_value(StatType.DEFENCE)
    armor = table.get_item("최하급 갑옷")
    assert equipment.equip(armor, stats) is True
    assert equipment.is_equipped(EquipType.ARMOR)
    assert not equipment.is_equipped(EquipType.WEAPON)
    assert stats.get_stat_value(StatType.DEFENCE) - defence == _bonus(
        armor, StatType.DEFENCE
    )


def test_unequip_returns_item_and_restores_stats(table, stats):
    equipment = Equipment()
    attack = stats.get_stat_value(StatType.ATTACK_POWER)
    equipment.equip(table.get_item("최하급 검"), stats)
    removed = equipment.unequip(EquipType.WEAPON, stats)
    assert removed.name == "최하급 검"
    assert equipment.weapon is None
    assert stats.get_stat_value(StatType.ATTACK_POWER) == attack


def test_unequip_empty_slot(stats):
    equipment = Equipment()
    assert equipment.unequip(EquipType.ARMOR, stats) is None
    assert equipment.unequip(EquipType.NONE, stats) is None


def test_equip_none_is_refused(stats):
    equipment = Equipment()
    assert equipment.equip(None, stats) is False
    assert stats.modifier_containers == {}


def test_equip_item_without_slot_is_refused(stats):
    equipment = Equipment()
    item = EquipableItem(ItemType.EQUIP, "ring", equip_type=EquipType.NONE)
    assert equipment.equip(item, stats) is False
    assert equipment.weapon is None and equipment.armor is None