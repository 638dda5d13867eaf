import pytest

from textrpg.items import (
    EquipableItem,
    EquipType,
    Item,
    ItemNotFoundError,
    ItemTable,
    ItemType,
)
from textrpg.stats import Modifier, StatType

ALL_NAMES = {"최하급 검", "하급 검", "일반 검", "최하급 갑옷", "고블린의 뼈"}


def _bone():
    return Item(ItemType.OTHER, "bone", "a bone", 0, 2)


def test_new_item_defaults():
    item = _bone()
    assert (item.count, item.max_count) == (1, 99)
    assert item.remaining == item.max_count - item.count


def test_add_within_limit():
    item = _bone()
    assert item.add(3) is True
    assert item.count == 1 + 3


def test_add_past_limit_is_refused():
    item = _bone()
    assert item.add(item.max_count) is False
    assert item.count == 1


def test_fill_to_max():
    item = _bone()
    assert item.add(item.remaining) is True
    assert item.is_full()
    assert item.remaining == 0


def test_remove_more_than_held_is_refused():
    item = _bone()
    assert item.remove(2) is False
    assert item.count == 1


def test_remove_exact_count():
    item = _bone()
    assert item.remove(1) is True
    assert item.count == 0
    assert item.remove(1) is False


def test_clone_is_independent():
    item = _bone()
    copy = item.clone()
    assert copy == item
    copy.add(5)
    assert item.count == 1


def test_equipable_clone_copies_modifiers():
    item = EquipableItem(ItemType.EQUIP, "stick", equip_type=EquipType.WEAPON)
    item.modifier_container.modifiers.append(Modifier(StatType.ATTACK_POWER, value=1))
    copy = item.clone()
    assert isinstance(copy, EquipableItem)
    copy.modifier_container.modifiers.clear()
    assert len(item.modifier_container.modifiers) == 1


def test_table_holds_all_items():
    assert set(ItemTable().items) == ALL_NAMES


def test_get_item_returns_table_entry():
    table = ItemTable()
    item = table.get_item("하급 검")
    assert item.name == "하급 검"
    assert (item.buy_price, item.sell_price) == (20, 10)
    assert item is table.items["하급 검"]


def test_create_item_returns_fresh_copy():
    table = ItemTable()
    created = table.create_item("최하급 검")
    assert created == table.get_item("최하급 검")
    assert created is not table.get_item("최하급 검")


@pytest.mark.parametrize("method", ["get_item", "create_item"])
def test_unknown_item_raises(method):
    with pytest.raises(ItemNotFoundError) as info:
        getattr(ItemTable(), method)("없는 아이템")
    assert info.value.name == "없는 아이템"


def test_weakest_sword_prices():
    sword = ItemTable().get_item("최하급 검")
    assert (sword.buy_price, sword.sell_price) == (10, 5)
    assert sword.equip_type is EquipType.WEAPON


def test_light_sword_modifiers():
    sword = ItemTable().get_item("하급 검")
    targets = [m.target_stat_type for m in sword.modifier_container.modifiers]
    assert targets == [StatType.ATTACK_POWER, StatType.AGILITY]


def test_armor_slot():
    armor = ItemTable().get_item("최하급 갑옷")
    assert armor.equip_type is EquipType.ARMOR
    assert armor.modifier_container.modifiers[0].target_stat_type is StatType.DEFENCE


def test_modifier_ids_match_names():
    table = ItemTable()
    for name, item in table.items.items():
        if isinstance(item, EquipableItem):
            assert item.modifier_container.id == name


def test_goblin_bone_is_other():
    bone = ItemTable().get_item("고블린의 뼈")
    assert bone.item_type is ItemType.OTHER
    assert not isinstance(bone, EquipableItem)


def test_items_view_is_read_only():
    table = ItemTable()
    with pytest.raises(TypeError):
        table.items["new"] = _bone()