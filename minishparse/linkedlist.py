"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One cell of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list holding a reference to its first node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` before the first node and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            if delete is not None:
                delete(node.content)

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every content from first to last."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func`` applied to every content, in order.

        If ``func`` raises, the exception propagates and no list is returned.
        """
        return LinkedList(func(content) for content in self)