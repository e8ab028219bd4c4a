"""A group of dictionaries searched in order."""

from __future__ import annotations

from collections.abc import Iterable

from hanconv.dictionary import Dict
from hanconv.entry import DictEntry
from hanconv.lexicon import Lexicon


class DictGroup(Dict):
    """Dictionaries consulted in order; the first that matches wins."""

    def __init__(self, dicts: Iterable[Dict]) -> None:
        self._dicts: tuple[Dict, ...] = tuple(dicts)
        self._key_max_length = max(
            (d.key_max_length for d in self._dicts), default=0
        )

    @property
    def dicts(self) -> tuple[Dict, ...]:
        """The member dictionaries, in lookup order."""
        return self._dicts

    @property
    def key_max_length(self) -> int:
        return self._key_max_length

    def match(self, word: str) -> DictEntry | None:
        for dictionary in self._dicts:
            entry = dictionary.match(word)
            if entry is not None:
                return entry
        return None

    def match_prefix(self, word: str, length: int | None = None) -> DictEntry | None:
        for dictionary in self._dicts:
            entry = dictionary.match_prefix(word, length)
            if entry is not None:
                return entry
        return None

    def match_all_prefixes(
        self, word: str, length: int | None = None
    ) -> list[DictEntry]:
        by_length: dict[int, DictEntry] = {}
        for dictionary in self._dicts:
            for entry in dictionary.match_all_prefixes(word, length):
                by_length.setdefault(entry.key_length, entry)
        return [by_length[size] for size in sorted(by_length, reverse=True)]

    @property
    def lexicon(self) -> Lexicon:
        combined = Lexicon(
            entry for dictionary in self._dicts for entry in dictionary.lexicon
        )
        combined.sort()
        return combined