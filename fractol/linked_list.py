"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], None]


@dataclass(eq=False)
class Node:
    """One element of a LinkedList: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Deleter) -> None:
    """Release a single node, passing its content to delete first.

    The node is detached from whatever followed it. A missing node is ignored.
    """
    if node is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


class LinkedList:
    """A singly linked list whose nodes are reachable from head."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.append(content)

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

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert content at the front; return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def append(self, content: Any) -> Node:
        """Add content at the end; return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Deleter] = None) -> None:
        """Remove every node, handing each content to delete in order."""
        for node in list(self._nodes()):
            if delete is not None:
                delete_node(node, delete)
            else:
                node.content = None
                node.next = None
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on each content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter) -> "LinkedList":
        """A new list of func applied to each content.

        If func raises, the contents already produced are passed to delete
        and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result