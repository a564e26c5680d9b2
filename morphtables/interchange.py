"""Stem interchange tables and the condition references that select them."""

from __future__ import annotations

from dataclasses import dataclass, field

ENCODING = "cp1251"
TABLES_MAGIC = b"interc"
_FIRST_OFFSET = 6
_SPACES = "".join(chr(code) for code in range(1, 0x21))


def _encode(text: str | bytes) -> bytes:
    return text if isinstance(text, bytes) else text.encode(ENCODING)


def _put_varint(value: int) -> bytes:
    if value < 0:
        raise ValueError(f"cannot serialize a negative value: {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def _put_string(text: bytes) -> bytes:
    return _put_varint(len(text)) + text


@dataclass
class _Fragment:
    text: bytes
    flags: int


@dataclass
class Interchange:
    """The stem fragments of one interchange, each with the steps it belongs to."""

    fragments: list[_Fragment] = field(default_factory=list)
    offset: int = field(default=0, compare=False)

    def add_step(self, mix: str | bytes, step: int) -> None:
        """Mark a fragment as used by a step, adding it in sorted order if new."""
        if step < 0:
            raise ValueError(f"step must not be negative: {step}")
        text = _encode(mix)
        bit = (1 << step) & 0xFF
        position = 0
        for position, fragment in enumerate(self.fragments):
            if fragment.text == text:
                fragment.flags |= bit
                return
            if fragment.text > text:
                break
        else:
            position = len(self.fragments)
        self.fragments.insert(position, _Fragment(text, bit))

    def buffer_length(self) -> int:
        """Size of the serialized interchange."""
        return (1 + sum(1 + len(fragment.text) for fragment in self.fragments)) & 0xFFFF

    def serialize(self) -> bytes:
        """The fragment count, then each fragment as a flags byte and its text."""
        if len(self.fragments) > 0xFF:
            raise ValueError("too many fragments in interchange")
        upper = 0
        for fragment in self.fragments:
            upper |= fragment.flags << 4
        upper = (upper ^ 0x70) & 0x70

        out = bytearray([len(self.fragments)])
        for fragment in self.fragments:
            if len(fragment.text) > 0x0F:
                raise ValueError(f"interchange fragment too long: {fragment.text!r}")
            flags = (len(fragment.text) | (fragment.flags << 4)) & 0xFF
            if upper and flags & 0x10:
                flags |= upper
            out.append(flags)
            out += fragment.text
        return bytes(out)


@dataclass
class Conditions:
    """Conditions naming which interchange applies to a table."""

    references: list[tuple[bytes, int]] = field(default_factory=list)

    def add_condition(self, condition: str | bytes, index: int) -> None:
        """Refer a condition to the interchange at ``index``."""
        self.references.append((_encode(condition), index))

    def serialize(self, interchanges: list[Interchange]) -> bytes:
        """The reference count, then each interchange offset and its condition."""
        out = bytearray(_put_varint(len(self.references)))
        for condition, index in self.references:
            out += _put_varint(interchanges[index].offset)
            out += _put_string(condition)
        return bytes(out)


def parse_table_index(names: str) -> list[str]:
    """Split a comma-separated list of table names, dropping blanks."""
    return [name for name in (part.strip(_SPACES) for part in names.split(",")) if name]


class Collector:
    """Gathers interchanges and the named condition sets that refer to them."""

    def __init__(self) -> None:
        self.interchanges: list[Interchange] = []
        self.conditions: list[Conditions] = []
        self.table_index: dict[str, int] = {}

    def add_interchange(self, names: str, condition: str | bytes,
                        interchange: Interchange) -> None:
        """Register an interchange under a condition for every named table."""
        conditions = self._set_conditions(names)
        conditions.add_condition(condition, self._set_interchange(interchange))

    def _set_conditions(self, names: str) -> Conditions:
        index: int | None = None
        for key in parse_table_index(names):
            found = self.table_index.get(key)
            if found is None:
                if index is None:
                    index = len(self.conditions)
                    self.conditions.append(Conditions())
                self.table_index[key] = index
            else:
                if index is None:
                    index = found
                if index != found:
                    conflicting = next(
                        name for name, value in self.table_index.items() if value == found
                    )
                    raise ValueError(f"table name '{key}' conflicts with '{conflicting}'")
        if index is None:
            raise ValueError("empty table index")
        return self.conditions[index]

    def _set_interchange(self, interchange: Interchange) -> int:
        for index, existing in enumerate(self.interchanges):
            if existing == interchange:
                return index
        self.interchanges.append(interchange)
        return len(self.interchanges) - 1

    def relocate_tables(self) -> None:
        """Give every interchange its offset in the stored tables."""
        offset = _FIRST_OFFSET
        for interchange in self.interchanges:
            interchange.offset = offset
            offset = (offset + interchange.buffer_length()) & 0xFFFF

    def store_tables(self) -> bytes:
        """The magic followed by every serialized interchange."""
        return TABLES_MAGIC + b"".join(item.serialize() for item in self.interchanges)

    def store_references(self) -> bytes:
        """Every condition set, then the table names with their set indices."""
        out = bytearray(_put_varint(len(self.conditions)))
        for conditions in self.conditions:
            out += conditions.serialize(self.interchanges)
        encoded = sorted((_encode(name), index) for name, index in self.table_index.items())
        out += _put_varint(len(encoded))
        for name, index in encoded:
            out += _put_string(name)
            out += _put_varint(index)
        return bytes(out)