import pytest

from textrpg.inventory import Inventory
from textrpg.items import ItemTable

BONE = "고블린의 뼈"
SWORD = "최하급 검"


@pytest.fixture
def table():
    return ItemTable()


def test_default_capacity_is_five():
    assert Inventory().capacity == 5


def test_none_is_refused():
    inventory = Inventory()
    assert inventory.add_item(None) is False
    assert inventory.items == []


def test_equipment_fills_until_full(table):
    inventory = Inventory()
    sword = table.get_item(SWORD)
    results = [inventory.add_item(sword) for _ in range(inventory.capacity)]
    assert all(results)
    assert inventory.is_full()
    assert inventory.add_item(sword) is False
    assert len(inventory.items) == inventory.capacity


def test_added_item_is_a_copy(table):
    inventory = Inventory()
    sword = table.get_item(SWORD)
    inventory.add_item(sword)
    assert inventory.items[0] == sword
    assert inventory.items[0] is not sword


def test_other_items_stack(table):
    inventory = Inventory()
    bone = table.get_item(BONE)
    assert inventory.add_item(bone) is True
    assert inventory.add_item(bone) is True
    assert len(inventory.items) == 1
    assert inventory.items[0].count == 2


def test_stack_overflow_is_refused(table):
    inventory = Inventory()
    bone = table.get_item(BONE)
    inventory.add_item(bone)
    stack = inventory.items[0]
    assert inventory.add_item(bone, stack.remaining + 1) is False
    assert stack.count == 1


def test_full_stack_starts_new_slot(table):
    inventory = Inventory()
    bone = table.get_item(BONE)
    inventory.add_item(bone)
    inventory.items[0].add(inventory.items[0].remaining)
    assert inventory.add_item(bone) is True
    assert len(inventory.items) == 2


def test_stackable_refused_when_full_and_no_stack(table):
    inventory = Inventory(capacity=1)
    inventory.add_item(table.get_item(SWORD))
    assert inventory.add_item(table.get_item(BONE)) is False
    assert [item.name for item in inventory.items] == [SWORD]


def test_remove_whole_stack_frees_slot(table):
    inventory = Inventory()
    inventory.add_item(table.get_item(SWORD))
    assert inventory.remove_item(SWORD) is True
    assert inventory.items == []


def test_remove_part_of_stack(table):
    inventory = Inventory()
    bone = table.get_item(BONE)
    inventory.add_item(bone)
    inventory.add_item(bone, 2)
    assert inventory.remove_item(BONE) is True
    assert inventory.items[0].count == 2


def test_remove_too_many_is_refused(table):
    inventory = Inventory()
    inventory.add_item(table.get_item(BONE))
    assert inventory.remove_item(BONE, 2) is False
    assert inventory.items[0].count == 1


def test_remove_missing_item(table):
    inventory = Inventory()
    assert inventory.remove_item(SWORD) is False