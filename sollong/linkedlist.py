"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Release = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove(self, node: Node, release: Release = None) -> None:
        """Unlink node from the list and pass its content to release.

        Raises ValueError when node is not part of this list.
        """
        previous = None
        for current in self._nodes():
            if current is node:
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                current.next = None
                if release is not None:
                    release(current.content)
                return
            previous = current
        raise ValueError("node is not in this list")

    def clear(self, release: Release = None) -> None:
        """Empty the list, passing every content to release in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if release is not None:
                release(node.content)
            node = following

    def each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], release: Release = None) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func raises, the contents already produced are released and
        the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(release)
            raise
        return result