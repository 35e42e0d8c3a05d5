"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell holding ``content`` and a link to the next cell."""

    content: Any = None
    next: Optional["Node"] = None

    def delete(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Release the content through ``delete`` and unlink the node."""
        if delete is None:
            return
        delete(self.content)
        self.content = None
        self.next = None


class LinkedList:
    """Singly linked list addressed through its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Link ``node`` after the last node."""
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Delete every node through ``delete`` and empty the list."""
        if delete is None:
            return
        for node in self._nodes():
            self.head = node.next
            node.delete(delete)
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on every content in order."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Optional[Callable[[Any], Any]],
        delete: Optional[Callable[[Any], Any]],
    ) -> Optional["LinkedList"]:
        """Return a new list of ``func`` applied to every content.

        If ``func`` raises, the contents already produced are released
        through ``delete`` and the error propagates.
        """
        if func is None or delete is None:
            return None
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result