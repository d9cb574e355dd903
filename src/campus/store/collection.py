"""
Append/remove-only record collection with its own identifier space.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Collection(Generic[T]):
    """
    Ordered list of records plus a monotonic id counter.

    Ids are unique within one collection only. The counter starts after the
    highest seeded id and is bumped exactly once per successful insert, so a
    delete never lets a later insert reissue an id that a surviving record
    still holds.

    Reads go straight to the live list. Multi-step writes should hold
    ``lock`` for their whole find-then-mutate sequence.
    """

    def __init__(self, name: str, rows: Iterable[T] = ()):
        self.name = name
        self.lock = threading.RLock()
        self._rows: list[T] = list(rows)
        self._next_id = max((row.id for row in self._rows), default=-1) + 1  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self._rows)

    @property
    def next_id(self) -> int:
        return self._next_id

    def all(self) -> list[T]:
        """Return the live backing list; callers must not mutate it."""
        return self._rows

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first record matching predicate, in insertion order."""
        for row in self._rows:
            if predicate(row):
                return row
        return None

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [row for row in self._rows if predicate(row)]

    def insert(self, factory: Callable[[int], T]) -> T:
        """Allocate an id, build the record with ``factory(id)`` and append it."""
        with self.lock:
            row = factory(self._next_id)
            self._rows.append(row)
            self._next_id += 1
            return row

    def remove(self, row: T) -> T:
        """Remove exactly this record (by identity) and return it."""
        with self.lock:
            self._rows[:] = [existing for existing in self._rows if existing is not row]
            return row
