"""Singly and doubly linked lists, and cycle detection."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list."""

    value: int
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node(value={self.value!r})"


class SinglyLinkedList:
    """A singly linked list with insertion at the front."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self.head: Optional[Node] = None
        for value in reversed(list(values or ())):
            self.push_front(value)

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the current first element."""
        self.head = Node(value, self.head)

    def delete_value(self, value: int) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        previous: Optional[Node] = None
        node = self.head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return True
            previous, node = node, node.next
        return False

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


def has_cycle(head: Optional[Node]) -> bool:
    """Detect a cycle reachable from ``head`` with the tortoise-and-hare method."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


class _DoubleNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.prev: Optional[_DoubleNode] = None
        self.next: Optional[_DoubleNode] = None


class DoublyLinkedList:
    """A doubly linked list with head and tail references."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        for value in values or ():
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = _DoubleNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ValueError(f"value {value} not found")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self)

    @staticmethod
    def _format(label: str, values: Iterable[int]) -> str:
        body = " -> ".join(str(value) for value in values) or "List is empty."
        return f"List {label}: {body} -> NULL"

    def format_forward(self) -> str:
        """Render the list from head to tail."""
        return self._format("Forward", self)

    def format_backward(self) -> str:
        """Render the list from tail to head."""
        return self._format("Backward", reversed(self))


_MENU = (
    "\n--- Doubly Linked List Operations ---\n"
    "1. Insert at End\n"
    "2. Delete Node by Value\n"
    "3. Display Forward\n"
    "4. Display Backward\n"
    "5. Exit\n"
    "Enter choice: "
)


def _read_int(prompt: str) -> Optional[int]:
    print(prompt, end="")
    line = input()
    try:
        return int(line.strip())
    except ValueError:
        print("Invalid input. Please enter a number.")
        return None


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive doubly linked list menu."""
    del argv
    items = DoublyLinkedList()
    try:
        while True:
            choice = _read_int(_MENU)
            if choice is None:
                continue
            if choice == 1:
                value = _read_int("Enter data to insert: ")
                if value is not None:
                    items.append(value)
                    print(f"Inserted {value} at the end.")
            elif choice == 2:
                key = _read_int("Enter value of node to delete: ")
                if key is not None:
                    try:
                        items.remove(key)
                    except ValueError:
                        print(f"Node with value {key} not found.")
                    else:
                        print(f"Node with value {key} deleted.")
            elif choice == 3:
                print(items.format_forward())
            elif choice == 4:
                print(items.format_backward())
            elif choice == 5:
                print("Exiting program. Goodbye!")
                return 0
            else:
                print("Invalid choice. Please select from 1 to 5.")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())