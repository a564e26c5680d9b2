"""Lexeme class records and the helpers that read dictionary comments."""

from __future__ import annotations

from dataclasses import dataclass, field

from morphtables.wordinfo import WF_FLEXES, WF_MIX_TAB

CASE_MARK = "ШП:"
CASE_LETTERS = "ИРДВТП"
POSTFIX_MARK = "post:"
REFLEXIVE_ENDING = "ся"


def _is_space(char: str) -> bool:
    return ord(char) <= 0x20


@dataclass(frozen=True)
class MorphClass:
    """Word info with references to its flexion and interchange tables."""

    wdinfo: int = 0
    tfoffs: int = 0
    mtoffs: int = 0

    def __post_init__(self) -> None:
        for name in ("wdinfo", "tfoffs", "mtoffs"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} out of 16-bit range: {value}")

    @property
    def is_null(self) -> bool:
        """Whether the class carries nothing, as an unresolved lexeme does."""
        return self == MorphClass()

    def buffer_length(self) -> int:
        """Size of the serialized record."""
        return 2 + (2 if self.tfoffs else 0) + (2 if self.mtoffs else 0)

    def serialize(self) -> bytes:
        """The info word with table flags set, then the table references present."""
        info = self.wdinfo
        if self.tfoffs:
            info |= WF_FLEXES
        if self.mtoffs:
            info |= WF_MIX_TAB
        out = bytearray(info.to_bytes(2, "little"))
        if self.tfoffs:
            out += self.tfoffs.to_bytes(2, "little")
        if self.mtoffs:
            out += self.mtoffs.to_bytes(2, "little")
        return bytes(out)


NULL_CLASS = MorphClass()


@dataclass
class LexemeInfo:
    """A resolved dictionary stem: its text, class, first-letter range and postfix."""

    stem: str = ""
    mclass: MorphClass = field(default_factory=MorphClass)
    chrmin: int = 0
    chrmax: int = 0
    postfix: str = ""


def get_remark(comment: str) -> str:
    """The first ``-text-`` remark of a comment, without the dashes, or ''."""
    start = comment.find("-")
    while start != -1:
        end = start + 1
        while end < len(comment) and comment[end] != "-" and not _is_space(comment[end]):
            end += 1
        if end < len(comment) and comment[end] == "-":
            return comment[start + 1:end]
        start = comment.find("-", start + 1)
    return ""


def is_reflexive(stem: str) -> bool:
    """Whether a word is longer than its reflexive ending and ends with it."""
    return len(stem) > len(REFLEXIVE_ENDING) and stem.endswith(REFLEXIVE_ENDING)


def case_scale(text: str) -> int:
    """The case bits listed after the case mark of a preposition, or 0."""
    position = text.find(CASE_MARK)
    if position == -1:
        return 0
    scale = 0
    for char in text[position + len(CASE_MARK):]:
        index = CASE_LETTERS.find(char)
        if index == -1:
            break
        scale |= 1 << index
    return scale


def get_postfix(comment: str) -> str:
    """The word that follows ``post:`` in a comment, or ''."""
    position = comment.find(POSTFIX_MARK)
    if position == -1:
        return ""
    start = position + len(POSTFIX_MARK)
    while start < len(comment) and _is_space(comment[start]) and comment[start] != "\x00":
        start += 1
    end = start
    while end < len(comment) and not _is_space(comment[end]):
        end += 1
    return comment[start:end]