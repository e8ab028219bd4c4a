import pytest

from hanconv.entry import DictEntry
from hanconv.lexicon import Lexicon


def _keys(lexicon):
    return [entry.key for entry in lexicon]


def test_add_and_index():
    lexicon = Lexicon()
    lexicon.add(DictEntry("b", ["B"]))
    lexicon.add(DictEntry("a", ["A"]))
    assert len(lexicon) == 2
    assert lexicon[0].key == "b"
    assert lexicon[1].default == "A"


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Lexicon()[0]


def test_sort():
    lexicon = Lexicon([DictEntry("c"), DictEntry("a"), DictEntry("b")])
    assert not lexicon.is_sorted()
    lexicon.sort()
    assert lexicon.is_sorted()
    assert _keys(lexicon) == ["a", "b", "c"]


def test_sort_is_stable():
    lexicon = Lexicon([DictEntry("b", ["2"]), DictEntry("a"), DictEntry("b", ["1"])])
    lexicon.sort()
    assert [entry.default for entry in lexicon] == ["a", "2", "1"]


def test_is_unique():
    lexicon = Lexicon([DictEntry("a"), DictEntry("b")])
    assert lexicon.is_unique()
    lexicon.add(DictEntry("b", ["x"]))
    assert not lexicon.is_unique()


def test_empty_lexicon_is_sorted_and_unique():
    lexicon = Lexicon()
    assert lexicon.is_sorted()
    assert lexicon.is_unique()
    assert list(lexicon) == []