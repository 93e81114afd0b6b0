"""A to-do list kept in memory, with an interactive menu."""

from __future__ import annotations

import sys
from typing import Iterator, Optional

DEFAULT_CAPACITY = 100
TASK_LIMIT = 99


class TodoList:
    """Tasks in the order they were added, at most ``capacity`` of them."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._tasks: list[str] = []

    def add(self, task: str) -> None:
        """Append ``task``; raise OverflowError when the list is full."""
        if len(self._tasks) >= self.capacity:
            raise OverflowError("Task list is full!")
        self._tasks.append(task[:TASK_LIMIT])

    def remove(self, number: int) -> str:
        """Remove and return the task numbered ``number``, counting from 1."""
        if not 1 <= number <= len(self._tasks):
            raise IndexError(f"no task numbered {number}")
        return self._tasks.pop(number - 1)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)


_MENU = (
    "\n===== MENU =====\n"
    "1️⃣ Add Task\n"
    "2️⃣ View All Tasks\n"
    "3️⃣ Remove Task\n"
    "4️⃣ Exit"
)


def _ask_int(prompt: str) -> Optional[int]:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _show(tasks: TodoList) -> None:
    print("\n📜 Your To-Do List:")
    if not len(tasks):
        print("❌ No tasks found.")
    for number, task in enumerate(tasks, 1):
        print(f"{number}. {task}")


def _remove(tasks: TodoList) -> None:
    if not len(tasks):
        print("❌ No tasks to remove.")
        return
    number = _ask_int("🗑️ Enter task number to remove: ")
    try:
        tasks.remove(number if number is not None else 0)
    except IndexError:
        print("❌ Invalid task number.")
    else:
        print("✅ Task removed successfully!")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive to-do list."""
    del argv
    tasks = TodoList()
    print("📋 Welcome to Your To-Do List App")
    try:
        while True:
            print(_MENU)
            choice = _ask_int("👉 Enter your choice: ")
            if choice == 1:
                try:
                    if len(tasks) >= tasks.capacity:
                        raise OverflowError
                    tasks.add(input("✍️ Enter task: "))
                except OverflowError:
                    print("❌ Task list is full!")
                else:
                    print("✅ Task added successfully!")
            elif choice == 2:
                _show(tasks)
            elif choice == 3:
                _remove(tasks)
            elif choice == 4:
                print("👋 Exiting... Have a productive day!")
                return 0
            else:
                print("❌ Invalid choice. Try again.")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())