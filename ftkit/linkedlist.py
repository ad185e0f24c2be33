"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One list cell: a value and a link to the next cell."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)


def delete_node(node: Node | None, delete: Callable[[Any], Any] | None) -> None:
    """Pass the node's content to ``delete``; the node's link is untouched.

    Nothing happens when ``node`` or ``delete`` is ``None``.
    """
    if node is None or delete is None:
        return
    delete(node.content)


class LinkedList:
    """A singly linked list whose nodes can be shared and spliced."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
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
            yield node
            node = node.next

    def push_front(self, node: Node) -> Node:
        """Make ``node`` the new head, linking it before the old head."""
        node.next = self.head
        self.head = node
        return node

    def push_back(self, node: Node) -> Node:
        """Link ``node`` (and whatever follows it) after the last node."""
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or ``None`` for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Unlink every node, passing each content to ``delete`` in order."""
        node = self.head
        while node is not None:
            following = node.next
            delete_node(node, delete)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every node.

        If ``func`` raises, the contents built so far are passed to
        ``delete`` and the exception propagates.
        """
        if not callable(func) or not callable(delete):
            raise TypeError("func and delete must be callable")
        result = LinkedList()
        tail: Node | None = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result