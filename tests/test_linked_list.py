import pytest

from pushswap.linked_list import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_build_from_items():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)
    assert lst.last().content == items[-1]


def test_add_front_becomes_head():
    lst = LinkedList([2, 3])
    node = Node(1)
    lst.add_front(node)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_add_front_none_ignored():
    lst = LinkedList([2, 3])
    lst.add_front(None)
    assert list(lst) == [2, 3]


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = Node("x")
    lst.add_back(node)
    assert lst.head is node
    assert lst.last() is node


def test_add_back_appends():
    lst = LinkedList([1, 2])
    node = Node(3)
    lst.add_back(node)
    assert lst.last() is node
    assert list(lst) == [1, 2, 3]


def test_clear_deletes_each_content_in_order():
    items = [1, 2, 3]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_keeps_list():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == [1, 2]


def test_iterate_visits_every_content():
    items = ["x", "y", "z"]
    seen = []
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = [1, 2, 3]
    lst = LinkedList(items)
    mapped = lst.map(str, lambda content: None)
    assert list(mapped) == [str(item) for item in items]
    assert list(lst) == items


def test_map_without_functions_gives_none():
    lst = LinkedList([1])
    assert lst.map(None, lambda content: None) is None
    assert lst.map(str, None) is None


def test_map_failure_releases_produced_contents():
    deleted = []

    def func(content):
        if content == 3:
            raise RuntimeError("boom")
        return content * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_node_delete_releases_content():
    deleted = []
    node = Node("payload", Node("next"))
    node.delete(deleted.append)
    assert deleted == ["payload"]
    assert node.next is None


def test_node_delete_without_function_keeps_content():
    node = Node("payload")
    node.delete(None)
    assert node.content == "payload"