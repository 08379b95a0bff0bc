from facility.slot import SizeClass
from facility.slot_index import SlotIndex
from facility.slot_registry import SlotRegistry


def create_index():
    registry = SlotRegistry([
        (10, "small"),
        (3, "medium"),
        (5, "small"),
        (8, "large"),
        (1, "medium"),
    ])
    return registry, SlotIndex(registry)


def test_first_available_is_lowest_id():
    _, index = create_index()
    assert index.first_available(SizeClass.SMALL).slot_id == 5
    assert index.first_available(SizeClass.MEDIUM).slot_id == 1
    assert index.first_available(SizeClass.LARGE).slot_id == 8


def test_index_follows_mutations():
    registry, index = create_index()
    assert index.first_available(SizeClass.SMALL).slot_id == 5

    registry.occupy(5, "V1")
    assert index.first_available(SizeClass.SMALL).slot_id == 10

    registry.occupy(10, "V2")
    assert index.first_available(SizeClass.SMALL) is None

    registry.vacate(5)
    assert index.first_available(SizeClass.SMALL).slot_id == 5


def test_free_count():
    registry, index = create_index()
    assert index.free_count(SizeClass.MEDIUM) == 2
    registry.occupy(3, "V1")
    assert index.free_count(SizeClass.MEDIUM) == 1


def test_find_and_ordered_ids():
    _, index = create_index()
    assert index.ordered_ids() == [1, 3, 5, 8, 10]
    assert index.find(8).size == SizeClass.LARGE
    assert index.find(4) is None
    assert index.find(11) is None
