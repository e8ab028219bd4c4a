# hanconv

Building blocks for dictionary-driven Chinese text processing: dictionary
entries and lexicons, an abstract dictionary with exact and longest-prefix
matching, groups of dictionaries consulted in order, a flat binary format
for lexicons, and a statistical phrase extractor.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Entries and lexicons

`hanconv.entry.DictEntry` holds a key and zero or more values. Entries
compare and hash by key only.

```python
from hanconv.entry import DictEntry

entry = DictEntry("干", ["幹", "乾"])
entry.default      # "幹" – the first value, or the key when there are none
entry.num_values   # 2
entry.key_length   # 1 (characters)
str(entry)         # "干\t幹 乾"
```

`hanconv.lexicon.Lexicon` is an ordered list of entries with `add`,
`sort` (stable, by key), `is_sorted`, `is_unique` (no neighbouring entries
share a key), `len()`, iteration and indexing.

## Dictionaries

`hanconv.dictionary.Dict` is an abstract base class. A subclass provides
`match(word)` and the properties `key_max_length` and `lexicon`; it then
gets `match_prefix(word, length=None)`, which returns the entry of the
longest key that is a prefix of `word`, and
`match_all_prefixes(word, length=None)`, which returns every matching
entry, longest key first. `length` limits how many characters of `word`
are considered. All lengths are counted in characters.

```python
from hanconv.dictionary import Dict
from hanconv.entry import DictEntry
from hanconv.lexicon import Lexicon


class MappingDict(Dict):
    def __init__(self, entries):
        self._lexicon = Lexicon(entries)
        self._lexicon.sort()
        self._by_key = {entry.key: entry for entry in self._lexicon}

    def match(self, word):
        return self._by_key.get(word)

    @property
    def key_max_length(self):
        return max((entry.key_length for entry in self._lexicon), default=0)

    @property
    def lexicon(self):
        return self._lexicon


phrases = MappingDict([DictEntry("干燥", ["乾燥"]), DictEntry("干", ["幹", "乾"])])
phrases.match_prefix("干燥剂").default                   # "乾燥"
[e.key for e in phrases.match_all_prefixes("干燥剂")]    # ["干燥", "干"]
```

`hanconv.dictgroup.DictGroup(dicts)` is itself a `Dict`. `match` and
`match_prefix` return the answer of the first member that has one;
`match_all_prefixes` merges the members' results, keeping for each key
length the entry from the earliest member; `lexicon` is all members'
entries, sorted by key; `key_max_length` is the largest of the members'.

## Binary lexicon format

`hanconv.binarydict.BinaryDict` wraps a lexicon and writes it to, or reads
it from, a binary stream: NUL-terminated UTF-8 key and value buffers
followed by per-entry offsets, every size a little-endian 64-bit integer.

```python
import io
from hanconv.binarydict import BinaryDict

buffer = io.BytesIO()
BinaryDict(phrases.lexicon).serialize(buffer)
buffer.seek(0)
restored = BinaryDict.load(buffer)
[entry.key for entry in restored.lexicon]   # ["干", "干燥"]
restored.key_max_length                     # 2
```

A truncated or inconsistent stream raises `hanconv.errors.InvalidFormat`.

## Errors

`hanconv.errors` defines `ConversionError`, the base class, with
`InvalidFormat` and `FileNotFound`. `FileNotFound(path)` keeps `path` and
reads "`<path>` not found or not accessible.".

## Phrase extraction

`hanconv.phrase_extract.PhraseExtract` finds likely words in a text from
their frequency, their cohesion (the smallest pointwise mutual information
over the ways of splitting them in two) and the entropy of the characters
before and after them.

```python
from hanconv.phrase_extract import PhraseExtract

extractor = PhraseExtract(word_min_length=1, word_max_length=3)
extractor.post_calculation_filter = lambda ex, word: ex.frequency(word) == 1
words = extractor.extract("四是四十是十十四是十四四十是四十")
for word in words:
    print(word, extractor.frequency(word), extractor.cohesion(word))
```

`extract` runs every step; the steps (`extract_suffixes`,
`extract_prefixes`, `calculate_frequency`, `extract_word_candidates`,
`calculate_cohesions`, `calculate_suffix_entropy`,
`calculate_prefix_entropy`, `select_words`) can also be called one by one
after `set_full_text`, and each runs the steps it needs first. Statistics
are read with `signal`, `frequency`, `probability`, `log_probability`,
`cohesion`, `suffix_entropy`, `prefix_entropy` and `entropy`; results with
the `words`, `word_candidates`, `suffixes` and `prefixes` properties.
Candidates containing spaces or punctuation (`contains_punctuation`) are
skipped. The default `post_calculation_filter` keeps only words with high
cohesion and neighbour entropy; `reset` restores the default filters and
clears the text and results.

## What this package does not do

It has no concrete in-memory or trie-backed dictionary, no reader for
text dictionary files, no segmenter, no text converter, no loading of
conversion settings from JSON, no conversion between dictionary file
formats, and no command-line program. Text conversion is left to code
built on `Dict` and `DictGroup`.