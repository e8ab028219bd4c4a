"""Ordered storage of dictionary entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import pairwise

from hanconv.entry import DictEntry


class Lexicon:
    """A list of entries that can be sorted and checked for unique keys."""

    def __init__(self, entries: Iterable[DictEntry] = ()) -> None:
        self._entries: list[DictEntry] = list(entries)

    def add(self, entry: DictEntry) -> None:
        """Append an entry."""
        self._entries.append(entry)

    def sort(self) -> None:
        """Sort the entries by key, keeping the order of equal keys."""
        self._entries.sort(key=lambda entry: entry.key)

    def is_sorted(self) -> bool:
        """Whether the entries are in key order."""
        return all(not b < a for a, b in pairwise(self._entries))

    def is_unique(self) -> bool:
        """Whether no two neighbouring entries share a key."""
        return all(a.key != b.key for a, b in pairwise(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> DictEntry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"Lexicon({self._entries!r})"