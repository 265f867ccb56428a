from dsakit.circular_list import CircularList


def test_empty_list():
    items = CircularList()
    assert len(items) == 0
    assert list(items) == []
    assert items.view() == "List is empty"


def test_insert_at_front_orders_newest_first():
    items = CircularList()
    for value in (1, 2, 3):
        items.insert_at_front(value)
    assert list(items) == [3, 2, 1]
    assert len(items) == 3


def test_single_element_loops_once():
    items = CircularList()
    items.insert_at_front(42)
    assert list(items) == [42]


def test_view_lines():
    items = CircularList()
    items.insert_at_front(7)
    items.insert_at_front(8)
    assert items.view() == "Data = 8\nData = 7"


def test_iteration_is_repeatable():
    items = CircularList()
    for value in range(5):
        items.insert_at_front(value)
    assert list(items) == list(items)
    assert sorted(items) == list(range(5))