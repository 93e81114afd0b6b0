"""A small in-memory record store with a tab-separated file format."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Union

DEFAULT_CAPACITY = 100
NAME_LIMIT = 49
DEFAULT_FILE = "db.txt"

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Record:
    """A person with an identifier, a name and an age."""

    record_id: int
    name: str
    age: int

    def __str__(self) -> str:
        return f"ID:{self.record_id} Name:{self.name} Age:{self.age}"


def _parse_line(line: str) -> Optional[Record]:
    parts = line.rstrip("\n").split("\t")
    if len(parts) != 3:
        return None
    raw_id, name, raw_age = parts
    try:
        record_id, age = int(raw_id.strip()), int(raw_age.strip())
    except ValueError:
        return None
    if not name or len(name) > NAME_LIMIT:
        return None
    return Record(record_id, name, age)


class RecordStore:
    """Records kept in insertion order, at most ``capacity`` of them."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._records: list[Record] = []

    def _find(self, record_id: int) -> Record:
        for record in self._records:
            if record.record_id == record_id:
                return record
        raise KeyError(record_id)

    def __contains__(self, record_id: object) -> bool:
        return any(record.record_id == record_id for record in self._records)

    def is_full(self) -> bool:
        return len(self._records) >= self.capacity

    def add(self, record_id: int, name: str, age: int) -> Record:
        """Add a record; raise OverflowError when full, ValueError on a duplicate id."""
        if self.is_full():
            raise OverflowError("Database full")
        if record_id in self:
            raise ValueError(f"Id {record_id} already exists")
        record = Record(record_id, name[:NAME_LIMIT], age)
        self._records.append(record)
        return record

    def update(self, record_id: int, name: str, age: int) -> Record:
        """Change the name and age of a record; raise KeyError if absent."""
        record = self._find(record_id)
        record.name = name[:NAME_LIMIT]
        record.age = age
        return record

    def delete(self, record_id: int) -> Record:
        """Remove and return a record; raise KeyError if absent."""
        record = self._find(record_id)
        self._records.remove(record)
        return record

    def search(self, query: str) -> list[Record]:
        """Return the records whose name contains ``query``."""
        return [record for record in self._records if query in record.name]

    def stats(self) -> Optional[tuple[int, int, float]]:
        """Return the minimum, maximum and mean age, or None when empty."""
        if not self._records:
            return None
        ages = [record.age for record in self._records]
        return min(ages), max(ages), sum(ages) / len(ages)

    def sort_by_age(self) -> None:
        """Order records by age with an exchange sort, so ties may move."""
        records = self._records
        for i in range(len(records)):
            for j in range(i + 1, len(records)):
                if records[i].age > records[j].age:
                    records[i], records[j] = records[j], records[i]

    def save(self, path: PathLike) -> None:
        """Write the records as ``id<TAB>name<TAB>age`` lines."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(
                f"{r.record_id}\t{r.name}\t{r.age}\n" for r in self._records
            )

    def load(self, path: PathLike) -> int:
        """Replace the records with those read from ``path``; return how many.

        Reading stops at the first malformed line or when the store is full.
        """
        with open(path, encoding="utf-8") as handle:
            self._records = []
            for line in handle:
                if self.is_full():
                    break
                record = _parse_line(line)
                if record is None:
                    break
                self._records.append(record)
        return len(self._records)

    def clear(self) -> None:
        """Remove every record."""
        self._records.clear()

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


_MENU = (
    "\n1.Add 2.List 3.Update 4.Delete 5.Stats 6.Search 7.Sort 8.Save 9.Clear 10.Exit\n"
    "Choose: "
)


def _ask_int(prompt: str) -> Optional[int]:
    try:
        return int(input(prompt).strip())
    except ValueError:
        print("Invalid input")
        return None


def _add(store: RecordStore) -> None:
    if store.is_full():
        print("Database full")
        return
    record_id = _ask_int("Enter id: ")
    if record_id is None:
        return
    if record_id in store:
        print("Id already exists")
        return
    name = input("Enter name: ")
    age = _ask_int("Enter age: ")
    if age is None:
        return
    store.add(record_id, name, age)
    print("Record added")


def _list(store: RecordStore) -> None:
    if not len(store):
        print("No records")
    for record in store:
        print(record)


def _update(store: RecordStore) -> None:
    record_id = _ask_int("Enter id to update: ")
    if record_id is None:
        return
    if record_id not in store:
        print("Not found")
        return
    name = input("Enter new name: ")
    age = _ask_int("Enter new age: ")
    if age is None:
        return
    store.update(record_id, name, age)
    print("Updated")


def _delete(store: RecordStore) -> None:
    record_id = _ask_int("Enter id to delete: ")
    if record_id is None:
        return
    try:
        store.delete(record_id)
    except KeyError:
        print("Not found")
    else:
        print("Deleted")


def _stats(store: RecordStore) -> None:
    print(f"Total records: {len(store)}")
    summary = store.stats()
    if summary is not None:
        low, high, mean = summary
        print(f"Min:{low} Max:{high} Avg:{mean:.2f}")


def _search(store: RecordStore) -> None:
    query = input("Enter name to search: ")[:NAME_LIMIT]
    matches = store.search(query)
    for record in matches:
        print(record)
    if not matches:
        print("No match")


def _save(store: RecordStore, path: str) -> None:
    try:
        store.save(path)
    except OSError:
        print("Save error")
    else:
        print(f"Saved to {path}")


def _load(store: RecordStore, path: str) -> None:
    try:
        count = store.load(path)
    except OSError:
        print("No file")
    else:
        print(f"Loaded {count} records")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive record manager."""
    parser = argparse.ArgumentParser(prog="records", description=__doc__)
    parser.add_argument("--file", default=DEFAULT_FILE, help="where records are kept")
    path = parser.parse_args(argv).file

    store = RecordStore()
    print("Simple Manager - Basic Program")
    print("================================")
    _load(store, path)
    actions = {
        1: _add,
        2: _list,
        3: _update,
        4: _delete,
        5: _stats,
        6: _search,
    }
    try:
        while True:
            choice = _ask_int(_MENU)
            if choice is None:
                continue
            if choice in actions:
                actions[choice](store)
            elif choice == 7:
                store.sort_by_age()
                print("Sorted by age")
            elif choice == 8:
                _save(store, path)
            elif choice == 9:
                store.clear()
                print("Cleared all records")
            elif choice == 10:
                print("Exiting")
                _save(store, path)
                return 0
            else:
                print("Invalid choice")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())