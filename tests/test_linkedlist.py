import pytest

from fdfview.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_reverses_order():
    lst = LinkedList()
    for value in (5, 3, 1):
        lst.push_front(value)
    assert list(lst) == [1, 3, 5]
    assert lst.last().content == 5


def test_push_back_keeps_order():
    lst = LinkedList()
    nodes = [lst.push_back(v) for v in ("a", "b", "c")]
    assert list(lst) == ["a", "b", "c"]
    assert lst.last() is nodes[-1]
    assert nodes[0].next is nodes[1]


def test_constructor_from_iterable():
    lst = LinkedList(range(4))
    assert list(lst) == [0, 1, 2, 3]
    assert len(lst) == 4


def test_push_front_returns_head_node():
    lst = LinkedList([2])
    node = lst.push_front(1)
    assert isinstance(node, Node)
    assert lst.head is node
    assert node.next.content == 2


def test_len_counts_nodes():
    lst = LinkedList()
    for i in range(7):
        lst.push_back(i)
    assert len(lst) == 7


def test_remove_middle_calls_delete():
    lst = LinkedList()
    lst.push_back("x")
    middle = lst.push_back("y")
    lst.push_back("z")
    deleted = []
    lst.remove(middle, deleted.append)
    assert deleted == ["y"]
    assert list(lst) == ["x", "z"]


def test_remove_head():
    lst = LinkedList()
    head = lst.push_back(1)
    lst.push_back(2)
    lst.remove(head)
    assert list(lst) == [2]


def test_remove_foreign_node_raises():
    lst = LinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.remove(Node(1))


def test_clear_deletes_in_order_and_empties():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_for_each_visits_all():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.for_each(seen.append)
    assert seen == list(lst)


def test_for_each_on_empty_does_nothing():
    seen = []
    LinkedList().for_each(seen.append)
    assert seen == []