"""Dictionary entries: a key with zero or more values."""

from __future__ import annotations

from collections.abc import Iterable


class DictEntry:
    """A key together with its candidate values, compared by key only."""

    __slots__ = ("key", "values")

    def __init__(self, key: str, values: Iterable[str] | str = ()) -> None:
        if isinstance(values, str):
            values = (values,)
        self.key = key
        self.values: tuple[str, ...] = tuple(values)

    @property
    def num_values(self) -> int:
        """Number of values held by the entry."""
        return len(self.values)

    @property
    def default(self) -> str:
        """The preferred replacement: the first value, or the key if none."""
        return self.values[0] if self.values else self.key

    @property
    def key_length(self) -> int:
        """Length of the key in characters."""
        return len(self.key)

    def __str__(self) -> str:
        if not self.values:
            return self.key
        return f"{self.key}\t{' '.join(self.values)}"

    def __repr__(self) -> str:
        return f"DictEntry({self.key!r}, {list(self.values)!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return self.key < other.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)