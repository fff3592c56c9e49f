"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class Node:
    """A list cell holding ``content`` and a link to the next cell."""

    __slots__ = ("content", "next")

    def __init__(self, content: Any) -> None:
        self.content = content
        self.next: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


class LinkedList:
    """Singly linked list addressed through its head node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(Node(item))

    @staticmethod
    def _as_node(node: Any) -> Node:
        return node if isinstance(node, Node) else Node(node)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Any) -> Node:
        """Make ``node`` (or a new node for a plain value) the head."""
        node = self._as_node(node)
        if self.head is not None:
            node.next = self.head
        self.head = node
        return node

    def push_back(self, node: Any) -> Node:
        """Link ``node`` (or a new node for a plain value) after the last node."""
        node = self._as_node(node)
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

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first.

        Without a ``delete`` callback the list is left untouched.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            self.head = following
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> LinkedList:
        """A new list of ``f(content)`` for every content.

        If ``f`` raises, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        if f is None or delete is None:
            raise TypeError("map needs both a mapping and a delete callback")
        result = LinkedList()
        try:
            for content in self:
                result.push_back(Node(f(content)))
        except Exception:
            result.clear(delete)
            raise
        return result