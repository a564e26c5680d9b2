"""Inflexion tables built from ``|``-separated flexion lists."""

from __future__ import annotations

from dataclasses import dataclass, field

from morphtables.stringbox import StringBox

FLEX_MAGIC = b"FLEX"


@dataclass
class _FlexTable:
    entries: list[tuple[int, int]] = field(default_factory=list)
    offset: int = 0


class FlexBox:
    """Collects flexion tables and the strings they refer to."""

    def __init__(self, encoding: str = "cp1251") -> None:
        self._strings = StringBox(encoding)
        self._tables: dict[str, _FlexTable] = {}
        self._length = len(FLEX_MAGIC)

    @property
    def strings_length(self) -> int:
        """Size of the serialized string table."""
        return self._strings.length

    @property
    def flexions_length(self) -> int:
        """Size of the serialized flexion tables, magic included."""
        return self._length

    def _fragments(self, flex: str) -> list[tuple[int, str]]:
        body = flex[1:] if flex.startswith("|") else flex
        segments = body.split("|")
        if segments[-1] == "":
            segments.pop()
        fragments = []
        for idform, segment in enumerate(segments):
            if segment in ("", "-"):
                continue
            parts = segment.split("/")
            if segment.endswith("/"):
                parts.pop()
            fragments.extend((idform, "" if part.startswith("0") else part) for part in parts)
        return fragments

    def add_table(self, flex: str) -> int:
        """Register a flexion list and return the offset of its table."""
        existing = self._tables.get(flex)
        if existing is not None:
            return existing.offset

        entries = []
        for idform, text in self._fragments(flex):
            if idform > 0xFF:
                raise ValueError(f"too many forms in flexion table: {flex!r}")
            entries.append((idform, self._strings.add_string(text)))
        if len(entries) > 0xFF:
            raise ValueError(f"too many flexions in table: {flex!r}")

        def key(entry: tuple[int, int]) -> bytes:
            return self._strings.string_at(entry[1]).encode(self._strings.encoding)

        for high in range(len(entries) - 1, 0, -1):
            largest = max(range(high + 1), key=lambda index: key(entries[index]))
            entries[high], entries[largest] = entries[largest], entries[high]

        if self._length > 0xFFFF:
            raise OverflowError("flexion tables are full")
        table = _FlexTable(entries, self._length)
        self._tables[flex] = table
        self._length += len(entries) * 3 + 1
        return table.offset

    def serialize_strings(self) -> bytes:
        """The string table the flexion entries point into."""
        return self._strings.serialize()

    def serialize_flexions(self) -> bytes:
        """The magic followed by every table in offset order."""
        out = bytearray(FLEX_MAGIC)
        for table in sorted(self._tables.values(), key=lambda item: item.offset):
            out.append(len(table.entries))
            for idform, offset in table.entries:
                out += bytes([idform, offset & 0xFF, offset >> 8])
        return bytes(out)