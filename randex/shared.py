"""Shared-state structures: a chat room with many writers and a tree with parent links."""

from __future__ import annotations

import weakref

__all__ = ["ChatRoom", "Node", "User", "add_child"]


class User:
    """A chat participant writing into a room's shared message list."""

    def __init__(self, messages: list[str]) -> None:
        self._messages = messages

    def send_message(self, message: str) -> None:
        """Append ``message`` to the shared chat."""
        self._messages.append(str(message))


class ChatRoom:
    """A room whose users all write into one shared list of messages."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def create_user(self) -> User:
        """Create a user who posts into this room."""
        return User(self._messages)

    def messages(self) -> list[str]:
        """Return a copy of all messages, in the order they were sent."""
        return list(self._messages)


class Node:
    """A tree node with a non-owning link to its parent and owned children."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.children: list[Node] = []
        self._parent: weakref.ref[Node] | None = None

    @property
    def parent(self) -> Node | None:
        """The parent node, or None for a root or a parent no longer alive."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Node | None) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, children={len(self.children)})"


def add_child(parent: Node, value: int) -> Node:
    """Create a child of ``parent`` holding ``value`` and return it."""
    child = Node(value)
    child.parent = parent
    parent.children.append(child)
    return child