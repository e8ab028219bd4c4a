"""Flat binary serialization of a lexicon."""

from __future__ import annotations

import struct
from typing import BinaryIO

from hanconv.entry import DictEntry
from hanconv.errors import InvalidFormat
from hanconv.lexicon import Lexicon

_SIZE = struct.Struct("<Q")


def _read_size(stream: BinaryIO, field: str) -> int:
    data = stream.read(_SIZE.size)
    if len(data) != _SIZE.size:
        raise InvalidFormat(f"Invalid binary dictionary ({field})")
    return _SIZE.unpack(data)[0]


def _read_bytes(stream: BinaryIO, size: int, field: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise InvalidFormat(f"Invalid binary dictionary ({field})")
    return data


def _string_at(buffer: bytes, offset: int, field: str) -> str:
    if offset >= len(buffer):
        raise InvalidFormat(f"Invalid binary dictionary ({field})")
    end = buffer.find(b"\0", offset)
    if end < 0:
        raise InvalidFormat(f"Invalid binary dictionary ({field})")
    try:
        return buffer[offset:end].decode("utf-8")
    except UnicodeDecodeError as error:
        raise InvalidFormat(f"Invalid binary dictionary ({field})") from error


class BinaryDict:
    """A lexicon stored as NUL-terminated key and value buffers plus offsets.

    Layout, every size a little-endian 64-bit integer: number of entries,
    key buffer length, key buffer, value buffer length, value buffer, then
    for each entry its number of values, its key offset and its value offsets.
    """

    def __init__(self, lexicon: Lexicon) -> None:
        self._lexicon = lexicon

    @property
    def lexicon(self) -> Lexicon:
        """The entries held by the dictionary."""
        return self._lexicon

    @property
    def key_max_length(self) -> int:
        """Length of the longest key in characters."""
        return max((entry.key_length for entry in self._lexicon), default=0)

    def serialize(self, stream: BinaryIO) -> None:
        """Write the dictionary to a binary stream."""
        key_buffer = bytearray()
        value_buffer = bytearray()
        layout: list[tuple[int, list[int]]] = []
        for entry in self._lexicon:
            key_offset = len(key_buffer)
            key_buffer += entry.key.encode("utf-8") + b"\0"
            value_offsets = []
            for value in entry.values:
                value_offsets.append(len(value_buffer))
                value_buffer += value.encode("utf-8") + b"\0"
            layout.append((key_offset, value_offsets))

        parts = [
            _SIZE.pack(len(self._lexicon)),
            _SIZE.pack(len(key_buffer)),
            bytes(key_buffer),
            _SIZE.pack(len(value_buffer)),
            bytes(value_buffer),
        ]
        for key_offset, value_offsets in layout:
            parts.append(_SIZE.pack(len(value_offsets)))
            parts.append(_SIZE.pack(key_offset))
            parts.extend(_SIZE.pack(offset) for offset in value_offsets)
        stream.write(b"".join(parts))

    @classmethod
    def load(cls, stream: BinaryIO) -> BinaryDict:
        """Read a dictionary written by :meth:`serialize`."""
        num_items = _read_size(stream, "numItems")
        key_length = _read_size(stream, "keyTotalLength")
        key_buffer = _read_bytes(stream, key_length, "keyBuffer")
        value_length = _read_size(stream, "valueTotalLength")
        value_buffer = _read_bytes(stream, value_length, "valueBuffer")

        lexicon = Lexicon()
        for _ in range(num_items):
            num_values = _read_size(stream, "numValues")
            key = _string_at(
                key_buffer, _read_size(stream, "keyOffset"), "keyOffset"
            )
            values = [
                _string_at(
                    value_buffer, _read_size(stream, "valueOffset"), "valueOffset"
                )
                for _ in range(num_values)
            ]
            lexicon.add(DictEntry(key, values))
        return cls(lexicon)