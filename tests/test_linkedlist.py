import pytest

from sollong.linkedlist import LinkedList, Node


def test_new_node_has_no_next():
    node = Node("Hello, world!")
    assert node.content == "Hello, world!"
    assert node.next is None


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    assert list(LinkedList(["first", "second", "third"])) == ["first", "second", "third"]


def test_push_back_appends():
    lst = LinkedList()
    for word in ["first", "second", "third"]:
        lst.push_back(word)
    assert list(lst) == ["first", "second", "third"]


def test_push_front_prepends():
    lst = LinkedList()
    for word in ["first", "second", "third"]:
        lst.push_front(word)
    assert list(lst) == ["third", "second", "first"]


def test_push_returns_node_linked_in():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert lst.last() is node
    assert lst.head.next is node


def test_len_counts_nodes():
    assert len(LinkedList(["first", "second", "third"])) == 3


def test_last_returns_final_node():
    lst = LinkedList(["first", "second", "third"])
    assert lst.last().content == "third"


def test_remove_middle_releases_content():
    lst = LinkedList(["a", "b", "c"])
    released = []
    lst.remove(lst.head.next, released.append)
    assert list(lst) == ["a", "c"]
    assert released == ["b"]


def test_remove_head():
    lst = LinkedList(["a", "b"])
    lst.remove(lst.head)
    assert list(lst) == ["b"]


def test_remove_foreign_node_raises():
    lst = LinkedList(["a"])
    with pytest.raises(ValueError):
        lst.remove(Node("a"))


def test_clear_releases_everything_in_order():
    lst = LinkedList(["Hello", "World"])
    released = []
    lst.clear(released.append)
    assert released == ["Hello", "World"]
    assert lst.head is None
    assert len(lst) == 0


def test_each_visits_in_order():
    seen = []
    LinkedList(["str1", "str2", "str3"]).each(seen.append)
    assert seen == ["str1", "str2", "str3"]


def test_map_builds_new_list():
    original = LinkedList(["first", "second", "third"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["FIRST", "SECOND", "THIRD"]
    assert list(original) == ["first", "second", "third"]


def test_map_releases_partial_result_on_error():
    def func(word):
        if word == "third":
            raise RuntimeError("boom")
        return word.upper()

    released = []
    with pytest.raises(RuntimeError):
        LinkedList(["first", "second", "third"]).map(func, released.append)
    assert released == ["FIRST", "SECOND"]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper)) == 0