"""Selection of stem interchange tables by word type, stem ending and remark."""

from __future__ import annotations

from dataclasses import dataclass

ENCODING = "cp1251"
_MAX_CONDITION = 0x10


def _encode(text: str | bytes) -> bytes:
    return text if isinstance(text, bytes) else text.encode(ENCODING)


_MIX_TYPES = {
    _encode("ге"): 1,
    _encode("й"): 5,
    _encode("к"): 3,
    _encode("ле"): 0,
    _encode("о"): 6,
    _encode("ш"): 2,
    _encode("ь"): 4,
}

_LE = _encode("ле")
_ORDINARY = _encode("о")
_E = _encode("е")[0]
_VOWELS = _encode("аеиоуыэюя")
_HISSING = _encode("жцчшщ")
_KGH = _encode("кгх")
_SOFT = _encode("ь")
_YOT = _encode("й")


@dataclass(frozen=True)
class _Alt:
    offset: int
    condition: bytes


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def varint(self) -> int:
        value = 0
        shift = 0
        while True:
            if self._pos >= len(self._data):
                raise ValueError("truncated interchange index")
            byte = self._data[self._pos]
            self._pos += 1
            value |= (byte & 0x7F) << shift
            shift += 7
            if not byte & 0x80:
                return value

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ValueError("truncated interchange index")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk


def map_mix_type(name: str | bytes) -> int | None:
    """The interchange kind named by a condition, or None if it is not known."""
    return _MIX_TYPES.get(_encode(name))


def default_fragment(tables: bytes, offset: int) -> bytes:
    """The fragment of the first interchange step, the one of the normal form."""
    try:
        count = tables[offset]
        position = offset + 1
        for _ in range(count):
            flags = tables[position]
            length = flags & 0x0F
            if flags & 0x10:
                return bytes(tables[position + 1:position + 1 + length])
            position += 1 + length
    except IndexError:
        raise ValueError(f"interchange table at {offset} is truncated") from None
    raise ValueError("invalid interchange table: no default string")


def min_max_char(tables: bytes, offset: int, chrmin: int, chrmax: int) -> tuple[int, int]:
    """The lowest and highest first bytes of the fragments, falling back to the given pair."""
    count = tables[offset]
    position = offset + 1
    lowest, highest = 0xFF, -1
    for _ in range(count):
        flags = tables[position]
        position += 1
        length = flags & 0x0F
        if length:
            first = tables[position]
            lowest = min(lowest, first)
            highest = max(highest, first)
        else:
            lowest = highest = 0
        position += length
    return (lowest if lowest != 0 else chrmin, chrmax if highest <= 0 else highest)


def _matches(kind: int | None, stem: bytes) -> bool:
    size = len(stem)
    if kind == 0:
        return size >= 3 and stem[size - 3:size - 1] == _LE
    if kind == 1:
        return size >= 3 and stem[size - 3] in _VOWELS and stem[size - 2] == _E
    letters = {2: _HISSING, 3: _KGH, 4: _SOFT, 5: _YOT}.get(kind) if kind is not None else None
    if letters is not None:
        return size >= 2 and stem[size - 2] in letters
    return kind == 6


class Alternator:
    """Index of interchange tables by table type, loaded from a compiled reference file."""

    def __init__(self) -> None:
        self._tables: list[list[_Alt]] = []
        self._mapper: dict[str, int] = {}

    def __contains__(self, table_type: object) -> bool:
        return table_type in self._mapper

    def load(self, data: bytes) -> Alternator:
        """Read the condition sets and table names of a compiled reference index."""
        reader = _Reader(data)
        tables: list[list[_Alt]] = []
        for _ in range(reader.varint()):
            alts = []
            for _ in range(reader.varint()):
                offset = reader.varint()
                if offset > 0xFFFF:
                    raise ValueError(f"interchange offset out of range: {offset}")
                length = reader.varint()
                if length >= _MAX_CONDITION:
                    raise ValueError(f"interchange condition too long: {length} bytes")
                alts.append(_Alt(offset, reader.take(length)))
            tables.append(alts)

        mapper: dict[str, int] = {}
        for _ in range(reader.varint()):
            name = reader.take(reader.varint()).decode(ENCODING)
            index = reader.varint()
            if index >= len(tables):
                raise ValueError(f"table '{name}' refers to a missing condition set {index}")
            mapper.setdefault(name, index)

        self._tables = tables
        self._mapper = mapper
        return self

    def find(self, tables: bytes, table_type: str | bytes, word_type: int,
             stem: str | bytes, remark: str | bytes) -> int:
        """The offset of the interchange that fits a stem, or 0 if none does."""
        key = table_type.decode(ENCODING) if isinstance(table_type, bytes) else table_type
        index = self._mapper.get(key)
        if index is None:
            return 0
        stem_bytes = _encode(stem)
        remark_bytes = _encode(remark)
        verb = 1 <= (word_type & 0x1F) <= 6

        for alt in self._tables[index]:
            if not stem_bytes.endswith(default_fragment(tables, alt.offset)):
                continue
            if verb:
                if alt.condition in (remark_bytes, _ORDINARY):
                    return alt.offset
                continue
            if _matches(map_mix_type(alt.condition), stem_bytes):
                return alt.offset
        return 0