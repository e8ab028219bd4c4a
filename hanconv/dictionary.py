"""Abstract dictionary with exact and prefix matching."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hanconv.entry import DictEntry
from hanconv.lexicon import Lexicon


class Dict(ABC):
    """A dictionary of entries looked up by key.

    Lengths are counted in characters.
    """

    @abstractmethod
    def match(self, word: str) -> DictEntry | None:
        """Return the entry whose key is exactly ``word``, or None."""

    @property
    @abstractmethod
    def key_max_length(self) -> int:
        """Length of the longest key."""

    @property
    @abstractmethod
    def lexicon(self) -> Lexicon:
        """All entries of the dictionary."""

    def _limit(self, word: str, length: int | None) -> int:
        limit = len(word) if length is None else min(length, len(word))
        return min(self.key_max_length, limit)

    def match_prefix(self, word: str, length: int | None = None) -> DictEntry | None:
        """Return the entry of the longest key that is a prefix of ``word``.

        Only the first ``length`` characters of ``word`` are considered.
        Given keys "a", "an", "b", "ba", "ban", "bana", the longest prefix
        of "banana" matched is "bana".
        """
        for size in range(self._limit(word, length), 0, -1):
            entry = self.match(word[:size])
            if entry is not None:
                return entry
        return None

    def match_all_prefixes(
        self, word: str, length: int | None = None
    ) -> list[DictEntry]:
        """Return the entries of every key that is a prefix of ``word``,
        longest first."""
        matches = (
            self.match(word[:size])
            for size in range(self._limit(word, length), 0, -1)
        )
        return [entry for entry in matches if entry is not None]