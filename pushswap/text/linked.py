"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One link of a singly linked list."""

    content: Any
    next: Optional["ListNode"] = None


def delete_node(node: ListNode, delete: Callable[[Any], Any]) -> None:
    """Release ``node``: pass its content to ``delete`` and detach it."""
    delete(node.content)
    node.content = None
    node.next = None


def _require_node(node: object) -> ListNode:
    if not isinstance(node, ListNode):
        raise TypeError(f"expected a ListNode, got {type(node).__name__}")
    return node


class LinkedList:
    """A singly linked list holding ``ListNode`` links from ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for item in items:
            node = ListNode(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: ListNode) -> ListNode:
        """Make ``node`` the new head of the list."""
        _require_node(node).next = self.head
        self.head = node
        return node

    def push_back(self, node: ListNode) -> ListNode:
        """Attach ``node`` after the current last link."""
        _require_node(node)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[ListNode]:
        """The last link, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Delete every link, passing each content to ``delete``."""
        while self.head is not None:
            node = self.head
            self.head = node.next
            delete_node(node, delete)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Callable[[Any], Any]) -> "LinkedList":
        """A new list of ``func`` applied to each content.

        If ``func`` fails, contents already produced are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        tail: Optional[ListNode] = None
        try:
            for content in self:
                node = ListNode(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result