"""Stem class records of the compiled dictionary and word-type predicates."""

from __future__ import annotations

from dataclasses import dataclass

NECESSARY_NEXT = 0x80
OPTIONAL_NEXT = 0x40

WF_POST_STEM = 0x8000
WF_MIX_TAB = 0x4000
WF_FLEXES = 0x2000

TYPE_MASK = 0x3F
PREPOSITION = 51

_ADJECTIVE_TYPES = frozenset({25, 26, 27, 28, 34, 36, 42})


def _word16(data: bytes, position: int) -> int:
    if position + 2 > len(data):
        raise ValueError("truncated stem class record")
    return int.from_bytes(data[position:position + 2], "little")


@dataclass(frozen=True)
class StemInfo:
    """Word type and flags of a stem, with its flexion and interchange table references."""

    wdinfo: int
    tfoffs: int = 0
    mtoffs: int = 0

    @classmethod
    def load(cls, data: bytes) -> StemInfo:
        """Read a class record: the info word, then the table references it announces.

        For prepositions the second word is always present and holds the case scale.
        """
        wdinfo = _word16(data, 0)
        position = 2
        tfoffs = mtoffs = 0
        if wdinfo & WF_FLEXES or (wdinfo & TYPE_MASK) == PREPOSITION:
            tfoffs = _word16(data, position)
            position += 2
        if wdinfo & WF_MIX_TAB:
            mtoffs = _word16(data, position)
        return cls(wdinfo, tfoffs, mtoffs)

    @property
    def word_type(self) -> int:
        """The part-of-speech type, the low six bits of the info word."""
        return self.wdinfo & TYPE_MASK

    @property
    def size(self) -> int:
        """Number of bytes the record takes in the class map."""
        size = 2
        if self.wdinfo & WF_FLEXES or self.word_type == PREPOSITION:
            size += 2
        if self.wdinfo & WF_MIX_TAB:
            size += 2
        return size

    @property
    def flex_table_offset(self) -> int | None:
        """Byte offset of the flexion tree, or None when the stem has none."""
        if self.tfoffs and self.word_type != PREPOSITION:
            return self.tfoffs << 4
        return None

    @property
    def swap_table_offset(self) -> int | None:
        """Byte offset of the interchange table, or None when the stem has none."""
        return self.mtoffs or None


def is_verb(info: int) -> bool:
    """Whether a word type denotes a verb."""
    return (info & TYPE_MASK) <= 6


def is_adjective(info: int) -> bool:
    """Whether a word type declines as an adjective."""
    return (info & TYPE_MASK) in _ADJECTIVE_TYPES