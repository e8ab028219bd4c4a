import io

import pytest

from hanconv.binarydict import BinaryDict
from hanconv.entry import DictEntry
from hanconv.errors import InvalidFormat
from hanconv.lexicon import Lexicon


def _sample() -> Lexicon:
    return Lexicon(
        [
            DictEntry("清", ["Tsing"]),
            DictEntry("清華", ["Tsinghua"]),
            DictEntry("積羽沉舟", ["羣輕折軸"]),
            DictEntry("干", ["幹", "乾", "干"]),
            DictEntry("空"),
        ]
    )


def _round_trip(lexicon: Lexicon) -> BinaryDict:
    buffer = io.BytesIO()
    BinaryDict(lexicon).serialize(buffer)
    buffer.seek(0)
    return BinaryDict.load(buffer)


def test_round_trip_keeps_keys_and_values():
    lexicon = _sample()
    loaded = _round_trip(lexicon)
    assert len(loaded.lexicon) == len(lexicon)
    for original, restored in zip(lexicon, loaded.lexicon):
        assert restored.key == original.key
        assert restored.values == original.values
        assert restored.num_values == original.num_values


def test_round_trip_of_empty_lexicon():
    loaded = _round_trip(Lexicon())
    assert len(loaded.lexicon) == 0
    assert loaded.key_max_length == 0


def test_key_max_length_counts_characters():
    assert BinaryDict(_sample()).key_max_length == len("積羽沉舟")


def test_wire_layout_of_single_entry():
    buffer = io.BytesIO()
    BinaryDict(Lexicon([DictEntry("a", "b")])).serialize(buffer)
    one = (1).to_bytes(8, "little")
    two = (2).to_bytes(8, "little")
    zero = (0).to_bytes(8, "little")
    assert buffer.getvalue() == one + two + b"a\0" + two + b"b\0" + one + zero + zero


@pytest.mark.parametrize("cut", [0, 4, 8, 12, 17, 20])
def test_truncated_stream_is_rejected(cut):
    buffer = io.BytesIO()
    BinaryDict(_sample()).serialize(buffer)
    truncated = io.BytesIO(buffer.getvalue()[:cut])
    with pytest.raises(InvalidFormat):
        BinaryDict.load(truncated)


def test_truncated_offsets_are_rejected():
    buffer = io.BytesIO()
    BinaryDict(_sample()).serialize(buffer)
    data = buffer.getvalue()
    with pytest.raises(InvalidFormat):
        BinaryDict.load(io.BytesIO(data[:-3]))


def test_key_offset_out_of_range_is_rejected():
    one = (1).to_bytes(8, "little")
    two = (2).to_bytes(8, "little")
    zero = (0).to_bytes(8, "little")
    far = (50).to_bytes(8, "little")
    data = one + two + b"a\0" + zero + zero + far
    with pytest.raises(InvalidFormat, match="keyOffset"):
        BinaryDict.load(io.BytesIO(data))