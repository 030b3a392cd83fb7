"""An ordered tree of keyed children, each node holding a data string."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count as _counter
from typing import Any, Callable, Iterator, Optional, TypeVar

__all__ = ["BasicTree"]

TreeT = TypeVar("TreeT", bound="BasicTree")


@dataclass
class _Entry:
    key: str
    child: "BasicTree"
    serial: int


class BasicTree:
    """A node with a data string and a sequence of ``(key, child)`` pairs.

    Children keep their insertion order, duplicate keys are allowed, and
    lookups by key see the children in key order.  Among children with
    equal keys, lookups prefer the one inserted first.  Subclasses change
    how keys compare by setting ``_fold_case`` or overriding ``_order_key``.

    Children are stored by value: inserting a tree stores a copy of it,
    and the inserting methods return the stored copy.
    """

    __hash__ = None  # type: ignore[assignment]

    _fold_case = False

    def __init__(self, data: str = "") -> None:
        self.data = data
        self._entries: list[_Entry] = []
        self._serials = _counter()

    # Key comparison -------------------------------------------------------

    def _order_key(self, key: str) -> Any:
        """Return the value keys are compared and ordered by."""
        return key.lower() if self._fold_case else key

    def keys_equal(self, a: str, b: str) -> bool:
        """Return whether two keys are equivalent under this tree's ordering."""
        return self._order_key(a) == self._order_key(b)

    # Container view -------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, BasicTree]]:
        return ((e.key, e.child) for e in self._entries)

    def __reversed__(self) -> Iterator[tuple[str, BasicTree]]:
        return ((e.key, e.child) for e in reversed(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicTree):
            return NotImplemented
        if len(self) != len(other) or self.data != other.data:
            return False
        return all(
            self.keys_equal(mine.key, theirs.key) and mine.child == theirs.child
            for mine, theirs in zip(self._entries, other._entries)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r}, children={len(self)})"

    def copy(self: TreeT) -> TreeT:
        """Return a deep copy of this tree."""
        result = type(self)(self.data)
        for entry in self._entries:
            result._entries.append(
                _Entry(entry.key, entry.child.copy(), next(result._serials))
            )
        return result

    def swap(self, other: BasicTree) -> None:
        """Exchange data and children with ``other``."""
        self.data, other.data = other.data, self.data
        self._entries, other._entries = other._entries, self._entries
        self._serials, other._serials = other._serials, self._serials

    def empty(self) -> bool:
        """Return whether this tree has no children."""
        return not self._entries

    def front(self) -> tuple[str, BasicTree]:
        if not self._entries:
            raise IndexError("front of a tree without children")
        entry = self._entries[0]
        return entry.key, entry.child

    def back(self) -> tuple[str, BasicTree]:
        if not self._entries:
            raise IndexError("back of a tree without children")
        entry = self._entries[-1]
        return entry.key, entry.child

    def _make_entry(self, key: str, child: BasicTree) -> _Entry:
        return _Entry(key, child.copy(), next(self._serials))

    def insert(self, index: int, key: str, child: BasicTree) -> BasicTree:
        """Insert a copy of ``child`` before position ``index``; return it."""
        entry = self._make_entry(key, child)
        self._entries.insert(index, entry)
        return entry.child

    def push_front(self, key: str, child: BasicTree) -> BasicTree:
        """Insert a copy of ``child`` at the front; return it."""
        return self.insert(0, key, child)

    def push_back(self, key: str, child: BasicTree) -> BasicTree:
        """Append a copy of ``child``; return it."""
        entry = self._make_entry(key, child)
        self._entries.append(entry)
        return entry.child

    def pop_front(self) -> tuple[str, BasicTree]:
        if not self._entries:
            raise IndexError("pop from a tree without children")
        entry = self._entries.pop(0)
        return entry.key, entry.child

    def pop_back(self) -> tuple[str, BasicTree]:
        if not self._entries:
            raise IndexError("pop from a tree without children")
        entry = self._entries.pop()
        return entry.key, entry.child

    def erase_at(self, index: int) -> tuple[str, BasicTree]:
        """Remove and return the child at position ``index``."""
        entry = self._entries.pop(index)
        return entry.key, entry.child

    def reverse(self) -> None:
        """Reverse the order of the children."""
        self._entries.reverse()

    def sort(
        self, key: Optional[Callable[[tuple[str, BasicTree]], Any]] = None
    ) -> None:
        """Stably sort the children, by their keys unless ``key`` is given.

        ``key`` receives each ``(key, child)`` pair.
        """
        if key is None:
            self._entries.sort(key=lambda e: e.key)
        else:
            self._entries.sort(key=lambda e: key((e.key, e.child)))

    # Associative view -----------------------------------------------------

    def _ordered_entries(self) -> list[_Entry]:
        return sorted(
            self._entries, key=lambda e: (self._order_key(e.key), e.serial)
        )

    def ordered(self) -> list[tuple[str, BasicTree]]:
        """Return the children in key order."""
        return [(e.key, e.child) for e in self._ordered_entries()]

    def _matching(self, key: str) -> list[_Entry]:
        wanted = self._order_key(key)
        found = [e for e in self._entries if self._order_key(e.key) == wanted]
        found.sort(key=lambda e: e.serial)
        return found

    def find(self, key: str) -> Optional[BasicTree]:
        """Return the first child with a key equivalent to ``key``, or None."""
        found = self._matching(key)
        return found[0].child if found else None

    def equal_range(self, key: str) -> list[tuple[str, BasicTree]]:
        """Return all children whose keys are equivalent to ``key``."""
        return [(e.key, e.child) for e in self._matching(key)]

    def count(self, key: str) -> int:
        """Return how many children have a key equivalent to ``key``."""
        return len(self._matching(key))

    def erase(self, key: str) -> int:
        """Remove every child with a key equivalent to ``key``; return how many."""
        wanted = self._order_key(key)
        kept = [e for e in self._entries if self._order_key(e.key) != wanted]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def clear(self) -> None:
        """Reset the data and remove all children."""
        self.data = ""
        self._entries.clear()