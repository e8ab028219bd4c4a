import pytest

from hanconv.dictionary import Dict
from hanconv.entry import DictEntry
from hanconv.lexicon import Lexicon


class _MappingDict(Dict):
    def __init__(self, pairs):
        self._entries = {key: DictEntry(key, [value]) for key, value in pairs}

    def match(self, word):
        return self._entries.get(word)

    @property
    def key_max_length(self):
        return max((len(key) for key in self._entries), default=0)

    @property
    def lexicon(self):
        lexicon = Lexicon(self._entries.values())
        lexicon.sort()
        return lexicon


@pytest.fixture
def banana_dict():
    keys = ["a", "an", "b", "ba", "ban", "bana"]
    return _MappingDict((key, key.upper()) for key in keys)


def test_dict_is_abstract():
    with pytest.raises(TypeError):
        Dict()


def test_match_exact(banana_dict):
    assert Dict.match_prefix(banana_dict, "ban", 3).default == "BAN"
    assert Dict.match_prefix(banana_dict, "banana", 6).key == "bana"


def test_match_prefix_longest(banana_dict):
    assert Dict.match_prefix(banana_dict, "banana").key == "bana"


def test_match_prefix_with_length(banana_dict):
    assert Dict.match_prefix(banana_dict, "banana", 2).key == "ba"
    assert Dict.match_prefix(banana_dict, "banana", 100).key == "bana"


def test_match_prefix_none(banana_dict):
    assert Dict.match_prefix(banana_dict, "xyz") is None
    assert Dict.match_prefix(banana_dict, "") is None
    assert Dict.match_prefix(banana_dict, "banana", 0) is None


def test_match_all_prefixes(banana_dict):
    entries = Dict.match_all_prefixes(banana_dict, "banana")
    assert [entry.key for entry in entries] == ["bana", "ban", "ba", "b"]


def test_match_all_prefixes_with_length(banana_dict):
    entries = Dict.match_all_prefixes(banana_dict, "banana", 3)
    assert [entry.key for entry in entries] == ["ban", "ba", "b"]


def test_match_all_prefixes_is_sorted_descending(banana_dict):
    entries = Dict.match_all_prefixes(banana_dict, "anbanana")
    lengths = [entry.key_length for entry in entries]
    assert lengths == sorted(lengths, reverse=True)
    assert lengths == [2, 1]


def test_match_all_prefixes_empty(banana_dict):
    assert Dict.match_all_prefixes(banana_dict, "zzz") == []


def test_lexicon_entries_match_as_prefixes(banana_dict):
    lexicon = banana_dict.lexicon
    assert len(lexicon) == 6
    assert lexicon.is_sorted()
    for entry in lexicon:
        matched = Dict.match_prefix(banana_dict, entry.key, entry.key_length)
        assert matched.key == entry.key
        assert matched.default == entry.key.upper()
    assert [entry.key for entry in lexicon] == ["a", "an", "b", "ba", "ban", "bana"]