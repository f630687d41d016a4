import pytest

from patternkit.iterator import Aggregate, Iterator


def _walk(iterator):
    items = []
    while not iterator.is_done():
        items.append(iterator.current_item())
        iterator.next()
    return items


def test_empty_aggregate_iterator_is_done():
    aggregate = Aggregate()
    iterator = aggregate.create_iterator()
    assert iterator.is_done() is True


def test_walk_returns_items_in_insertion_order():
    aggregate = Aggregate()
    aggregate.add_item(0)
    aggregate.add_item(10)
    assert _walk(aggregate.create_iterator()) == [0, 10]


def test_walk_over_strings():
    aggregate = Aggregate()
    aggregate.add_item("CIAO")
    aggregate.add_item("mondo")
    assert _walk(aggregate.create_iterator()) == ["CIAO", "mondo"]


def test_first_restarts_the_walk():
    aggregate = Aggregate()
    for value in (3, 4, 5):
        aggregate.add_item(value)
    iterator = aggregate.create_iterator()
    first_pass = _walk(iterator)
    assert iterator.is_done()
    iterator.first()
    assert not iterator.is_done()
    assert _walk(iterator) == first_pass


def test_current_item_past_end_raises():
    aggregate = Aggregate()
    aggregate.add_item("x")
    iterator = aggregate.create_iterator()
    iterator.next()
    with pytest.raises(IndexError):
        iterator.current_item()


def test_len_getitem_and_python_iteration_agree():
    aggregate = Aggregate()
    values = ["a", "b", "c"]
    for value in values:
        aggregate.add_item(value)
    assert len(aggregate) == len(values)
    assert [aggregate[i] for i in range(len(aggregate))] == values
    assert list(aggregate) == values


def test_iterator_sees_items_added_after_creation():
    aggregate = Aggregate()
    iterator = Iterator(aggregate)
    assert iterator.is_done()
    aggregate.add_item(7)
    assert not iterator.is_done()
    assert iterator.current_item() == 7