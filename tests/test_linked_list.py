import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import LinkedList, Node


def test_str_matches_traversal_format():
    assert str(LinkedList([10, 20, 30])) == "10 -> 20 -> 30 -> NULL"
    assert str(LinkedList()) == "NULL"


def test_nodes_are_linked_in_order():
    linked = LinkedList([7, 11, 66])
    assert linked.head.data == 7
    assert linked.head.next.data == 11
    assert linked.head.next.next.next is None


@given(st.lists(st.integers(), max_size=40))
def test_round_trip_and_length(values):
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_insert_at_beginning_and_end():
    linked = LinkedList([2])
    first = linked.insert_at_beginning(1)
    last = linked.insert_at_end(3)
    assert list(linked) == [1, 2, 3]
    assert linked.head is first
    assert last.next is None


def test_insert_at_end_of_empty_list():
    linked = LinkedList()
    node = linked.insert_at_end(5)
    assert linked.head is node
    assert list(linked) == [5]


def test_insert_at_position_middle_and_append():
    linked = LinkedList([10, 20, 40])
    linked.insert_at_position(30, 3)
    linked.insert_at_position(50, 5)
    linked.insert_at_position(5, 1)
    assert list(linked) == [5, 10, 20, 30, 40, 50]


@pytest.mark.parametrize("position", [0, -1, 3])
def test_insert_at_invalid_position(position):
    linked = LinkedList([1])
    with pytest.raises(IndexError):
        linked.insert_at_position(9, position)
    assert list(linked) == [1]


def test_insert_after_node():
    linked = LinkedList([7, 11, 41, 66])
    linked.insert_after(linked.node_at(1), 45)
    assert list(linked) == [7, 11, 45, 41, 66]


def test_delete_from_beginning_and_end():
    linked = LinkedList([10, 20, 30, 40, 50])
    assert linked.delete_from_beginning() == 10
    assert linked.delete_from_end() == 50
    assert list(linked) == [20, 30, 40]


def test_delete_last_remaining_node():
    linked = LinkedList([1])
    assert linked.delete_from_end() == 1
    assert linked.head is None


@pytest.mark.parametrize(
    "method", ["delete_from_beginning", "delete_from_end"]
)
def test_delete_from_empty_list(method):
    with pytest.raises(IndexError, match="empty"):
        getattr(LinkedList(), method)()


def test_delete_from_position():
    linked = LinkedList([10, 20, 30, 40, 50])
    assert linked.delete_from_position(3) == 30
    assert linked.delete_from_position(1) == 10
    assert linked.delete_from_position(3) == 50
    assert list(linked) == [20, 40]


@pytest.mark.parametrize("position", [0, 4, 10])
def test_delete_from_invalid_position(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError, match="Invalid position"):
        linked.delete_from_position(position)
    assert list(linked) == [1, 2, 3]


def test_delete_from_position_on_empty_list():
    with pytest.raises(IndexError, match="empty"):
        LinkedList().delete_from_position(1)


@given(st.lists(st.integers(), min_size=1, max_size=30), st.data())
def test_insert_then_delete_at_same_position_restores(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values) + 1))
    linked = LinkedList(values)
    linked.insert_at_position(None, position)
    assert linked.node_at(position - 1).data is None
    assert linked.delete_from_position(position) is None
    assert list(linked) == values


def test_node_at_bounds():
    linked = LinkedList([4, 5])
    assert isinstance(linked.node_at(1), Node)
    assert linked.node_at(1).data == 5
    with pytest.raises(IndexError):
        linked.node_at(2)
    with pytest.raises(IndexError):
        linked.node_at(-1)


def test_alternate_nodes():
    assert list(LinkedList([10, 20, 30, 40, 50]).alternate()) == [10, 30, 50]
    assert list(LinkedList().alternate()) == []


@given(st.lists(st.integers(), max_size=40))
def test_alternate_takes_every_other(values):
    picked = list(LinkedList(values).alternate())
    assert len(picked) == (len(values) + 1) // 2
    assert picked == values[::2]