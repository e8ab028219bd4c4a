"""Unsupervised extraction of phrases from plain text.

Candidate words are scored by frequency, cohesion (minimal pointwise mutual
information of their splits) and the entropy of the characters on their
left and right. Lengths are counted in characters.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import groupby

PUNCTUATIONS: tuple[str, ...] = (
    " ", "\n", "\r", "\t", "-", ",", ".", "?", "!", "*", "\u3000",
    "，", "。", "、", "；", "：", "？", "！", "…", "“", "”", "「",
    "」", "—", "－", "（", "）", "《", "》", "．", "／", "＼",
)

Filter = Callable[["PhraseExtract", str], bool]


def contains_punctuation(word: str) -> bool:
    """Whether ``word`` contains a space or a punctuation mark."""
    return any(mark in word for mark in PUNCTUATIONS)


def default_pre_calculation_filter(extractor: PhraseExtract, word: str) -> bool:
    """Reject only the empty string, which is never a counted word."""
    return not word


def default_post_calculation_filter(extractor: PhraseExtract, word: str) -> bool:
    """Reject words whose cohesion or neighbour entropy is too low."""
    signals = extractor.signal(word)
    log_probability = extractor.log_probability(word)
    cohesion_score = signals.cohesion - log_probability * 0.5
    entropy_score = (
        math.sqrt(signals.prefix_entropy * (signals.suffix_entropy + 1))
        - log_probability * 0.85
    )
    accept = (
        cohesion_score > 9
        and entropy_score > 11
        and signals.prefix_entropy > 0.5
        and signals.suffix_entropy > 0
        and signals.prefix_entropy + signals.suffix_entropy > 3
    )
    return not accept


@dataclass
class Signals:
    """The statistics gathered for one candidate word."""

    frequency: int = 0
    cohesion: float = 0.0
    suffix_entropy: float = 0.0
    prefix_entropy: float = 0.0


def _entropy(choices: Counter[str]) -> float:
    total = sum(choices.values())
    entropy = -sum(
        (count / total) * math.log(count / total) for count in choices.values()
    )
    return entropy if entropy != 0 else 0.0


def _log(value: float) -> float:
    return math.log(value) if value > 0 else -math.inf


class PhraseExtract:
    """Finds words in a text by the statistics of its substrings.

    The steps may be run one by one; each runs the steps it depends on
    when they have not been run yet.
    """

    def __init__(
        self,
        word_min_length: int = 2,
        word_max_length: int = 2,
        prefix_set_length: int = 1,
        suffix_set_length: int = 1,
    ) -> None:
        self.word_min_length = word_min_length
        self.word_max_length = word_max_length
        self.prefix_set_length = prefix_set_length
        self.suffix_set_length = suffix_set_length
        self.reset()

    def reset(self) -> None:
        """Forget the text, every result and the filters; keep the lengths."""
        self._prefixes_extracted = False
        self._suffixes_extracted = False
        self._frequencies_calculated = False
        self._word_candidates_extracted = False
        self._cohesions_calculated = False
        self._prefix_entropies_calculated = False
        self._suffix_entropies_calculated = False
        self._words_selected = False
        self._total_occurrence = 0
        self._log_total_occurrence = 0.0
        self._prefixes: list[str] = []
        self._suffixes: list[str] = []
        self._word_candidates: list[str] = []
        self._words: list[str] = []
        self._signals: dict[str, Signals] = {}
        self._full_text = ""
        self.pre_calculation_filter: Filter = default_pre_calculation_filter
        self.post_calculation_filter: Filter = default_post_calculation_filter

    def set_full_text(self, text: str) -> None:
        """Set the text to extract words from."""
        self._full_text = text

    def extract(self, text: str) -> list[str]:
        """Run every step on ``text`` and return the selected words."""
        self.set_full_text(text)
        self.extract_suffixes()
        self.calculate_frequency()
        self.calculate_suffix_entropy()
        self.release_suffixes()
        self.extract_prefixes()
        self.calculate_prefix_entropy()
        self.release_prefixes()
        self.extract_word_candidates()
        self.calculate_cohesions()
        self.select_words()
        return self.words

    def release_suffixes(self) -> None:
        """Drop the suffix list to free memory."""
        self._suffixes = []

    def release_prefixes(self) -> None:
        """Drop the prefix list to free memory."""
        self._prefixes = []

    def extract_suffixes(self) -> None:
        """Collect the bounded-length suffix starting at every position, sorted."""
        size = self.word_max_length + self.suffix_set_length
        text = self._full_text
        self._suffixes = sorted(
            text[start : start + size] for start in range(len(text))
        )
        self._suffixes_extracted = True

    def extract_prefixes(self) -> None:
        """Collect the bounded-length prefix ending at every position,
        sorted by their reversed text."""
        size = self.word_max_length + self.prefix_set_length
        text = self._full_text
        self._prefixes = sorted(
            (text[max(0, end - size) : end] for end in range(len(text), 0, -1)),
            key=lambda prefix: prefix[::-1],
        )
        self._prefixes_extracted = True

    def calculate_frequency(self) -> None:
        """Count every substring no longer than the maximal word length."""
        if not self._suffixes_extracted:
            self.extract_suffixes()
        counts: Counter[str] = Counter(
            suffix[:size]
            for suffix in self._suffixes
            for size in range(1, min(len(suffix), self.word_max_length) + 1)
        )
        self._total_occurrence += sum(counts.values())
        self._log_total_occurrence = _log(self._total_occurrence)
        for word, count in counts.items():
            self._signals.setdefault(word, Signals()).frequency += count
        self._signals = dict(sorted(self._signals.items()))
        self._frequencies_calculated = True

    def extract_word_candidates(self) -> None:
        """Keep the counted substrings that may be words, most frequent first."""
        if not self._frequencies_calculated:
            self.calculate_frequency()
        candidates = [
            word
            for word in self._signals
            if len(word) >= self.word_min_length
            and not contains_punctuation(word)
            and not self.pre_calculation_filter(self, word)
        ]
        candidates.sort(key=lambda word: (-self.frequency(word), word))
        self._word_candidates = candidates
        self._word_candidates_extracted = True

    def _adjacent_entropies(
        self, presuffixes: Iterable[str], set_length: int, suffix: bool
    ) -> Iterator[tuple[str, float]]:
        presuffixes = list(presuffixes)
        for length in range(self.word_min_length, self.word_max_length + 1):
            eligible = (p for p in presuffixes if len(p) >= length)
            if suffix:
                grouped = groupby(eligible, key=lambda p: p[:length])
            else:
                grouped = groupby(eligible, key=lambda p: p[len(p) - length :])
            for word, group in grouped:
                adjacent: Counter[str] = Counter()
                for presuffix in group:
                    if length + set_length > len(presuffix):
                        continue
                    if suffix:
                        adjacent[presuffix[length : length + set_length]] += 1
                    else:
                        end = len(presuffix) - length
                        adjacent[presuffix[end - set_length : end]] += 1
                yield word, _entropy(adjacent)

    def calculate_suffix_entropy(self) -> None:
        """Score the variety of characters following each word."""
        if not self._suffixes_extracted:
            self.extract_suffixes()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word, entropy in self._adjacent_entropies(
            self._suffixes, self.suffix_set_length, suffix=True
        ):
            self.signal(word).suffix_entropy = entropy
        self._suffix_entropies_calculated = True

    def calculate_prefix_entropy(self) -> None:
        """Score the variety of characters preceding each word."""
        if not self._prefixes_extracted:
            self.extract_prefixes()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word, entropy in self._adjacent_entropies(
            self._prefixes, self.prefix_set_length, suffix=False
        ):
            self.signal(word).prefix_entropy = entropy
        self._prefix_entropies_calculated = True

    def _pmi(self, word: str, left: str, right: str) -> float:
        return (
            self.log_probability(word)
            - self.log_probability(left)
            - self.log_probability(right)
        )

    def _cohesion_of(self, word: str) -> float:
        return min(
            (self._pmi(word, word[:split], word[split:]) for split in range(1, len(word))),
            default=math.inf,
        )

    def calculate_cohesions(self) -> None:
        """Score each candidate by the minimal PMI of its two-part splits."""
        if not self._word_candidates_extracted:
            self.extract_word_candidates()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word in self._word_candidates:
            self.signal(word).cohesion = self._cohesion_of(word)
        self._cohesions_calculated = True

    def select_words(self) -> None:
        """Keep the candidates that the post-calculation filter accepts."""
        if not self._word_candidates_extracted:
            self.extract_word_candidates()
        if not self._cohesions_calculated:
            self.calculate_cohesions()
        if not self._prefix_entropies_calculated:
            self.calculate_prefix_entropy()
        if not self._suffix_entropies_calculated:
            self.calculate_suffix_entropy()
        self._words = [
            word
            for word in self._word_candidates
            if not self.post_calculation_filter(self, word)
        ]
        self._words_selected = True

    def signal(self, word: str) -> Signals:
        """The statistics of a counted word; KeyError if it was never counted."""
        try:
            return self._signals[word]
        except KeyError:
            raise KeyError(f"no statistics for {word!r}") from None

    def cohesion(self, word: str) -> float:
        return self.signal(word).cohesion

    def entropy(self, word: str) -> float:
        """Sum of the suffix and prefix entropies."""
        return self.suffix_entropy(word) + self.prefix_entropy(word)

    def suffix_entropy(self, word: str) -> float:
        return self.signal(word).suffix_entropy

    def prefix_entropy(self, word: str) -> float:
        return self.signal(word).prefix_entropy

    def frequency(self, word: str) -> int:
        return self.signal(word).frequency

    def probability(self, word: str) -> float:
        """Frequency of the word over all counted occurrences."""
        return self.frequency(word) / self._total_occurrence

    def log_probability(self, word: str) -> float:
        return _log(self.frequency(word)) - self._log_total_occurrence

    @property
    def words(self) -> list[str]:
        """The selected words."""
        return list(self._words)

    @property
    def word_candidates(self) -> list[str]:
        """The candidate words, most frequent first."""
        return list(self._word_candidates)

    @property
    def suffixes(self) -> list[str]:
        return list(self._suffixes)

    @property
    def prefixes(self) -> list[str]:
        return list(self._prefixes)