"""Map of the lexical identifiers used in a dictionary source, with its holes."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Iterator

ELEMENT_BITS = 32

USAGE = (
    "dictMap - create the russian morphological dictionary  source lexical map.\n"
    "Usage: dictMap filename, where 'filename' is the morphological dictionary.\n"
)

_LID_MARK = "LID:"
_LID_VALUE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


class LexIdMap:
    """A set of lexical identifiers kept in groups of 32, as the dictionary tools do."""

    def __init__(self) -> None:
        self._ids: set[int] = set()
        self._groups = 0

    def insert(self, lex: int) -> bool:
        """Add an identifier; return False if it was already present."""
        if lex < 0:
            raise ValueError(f"lexical identifier must not be negative: {lex}")
        self._groups = max(self._groups, lex // ELEMENT_BITS + 1)
        if lex in self._ids:
            return False
        self._ids.add(lex)
        return True

    def __contains__(self, lex: object) -> bool:
        return lex in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def min_id(self) -> int | None:
        """The smallest identifier, or None when the map is empty."""
        return min(self._ids) if self._ids else None

    def max_id(self) -> int | None:
        """The largest identifier, or None when the map is empty."""
        return max(self._ids) if self._ids else None

    def next_hole(self, lex: int) -> int | None:
        """The first unused identifier at or after ``lex`` within the allocated groups."""
        limit = self._groups * ELEMENT_BITS
        return next((item for item in range(lex, limit) if item not in self._ids), None)

    def holes(self) -> Iterator[tuple[int, int]]:
        """Yield the inclusive ranges of unused identifiers between the minimum and maximum."""
        lowest, highest = self.min_id(), self.max_id()
        if lowest is None or highest is None:
            return
        current = lowest
        while current < highest:
            low = self.next_hole(current + 1)
            if low is None or low > highest:
                break
            high = low + 1
            while high < highest and high not in self:
                high += 1
            yield low, high - 1
            current = high


def parse_lid(line: str) -> int:
    """Return the identifier of a ``LID:nnn`` mark preceded by whitespace, or 0."""
    start = 1
    while (pos := line.find(_LID_MARK, start)) != -1:
        if ord(line[pos - 1]) <= 0x20:
            match = _LID_VALUE.match(line, pos + len(_LID_MARK))
            if match:
                digits = match.group(2)
                if digits[:2].lower() == "0x":
                    value = int(digits, 16)
                elif digits.startswith("0"):
                    value = int(digits, 8)
                else:
                    value = int(digits)
                if match.group(1) == "-":
                    value = -value
                value &= 0xFFFFFFFF
                if value:
                    return value
        start = pos + 1
    return 0


def scan_lines(lines: Iterable[str]) -> LexIdMap:
    """Build the identifier map of a dictionary, warning about reused identifiers."""
    lexmap = LexIdMap()
    for line in lines:
        lex = parse_lid(line)
        if lex and not lexmap.insert(lex):
            sys.stderr.write(f"Lexical identifier {lex} is already used!\n")
    return lexmap


def report(lexmap: LexIdMap) -> str:
    """Describe the identifier range and the holes in it."""
    lowest, highest = lexmap.min_id(), lexmap.max_id()
    if lowest is None or highest is None:
        return "No lexemes present, no lines with LEXID:nnn string found\n"
    out = [
        f"Minimal lexeme: {lowest} ({lowest:08x})\n",
        f"Maximal lexeme: {highest} ({highest:08x})\n",
    ]
    for low, high in lexmap.holes():
        out.append(
            f"\tHole of {high - low + 1} items, {low} ({low:08x}) - {high} ({high:08x})\n"
        )
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Print the lexical map of the dictionary named by the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write(USAGE)
        return 1
    try:
        with open(args[0], encoding="latin-1", newline="") as source:
            lexmap = scan_lines(source)
    except OSError:
        sys.stderr.write(f"Could not open file {args[0]}!\n")
        return 2
    sys.stdout.write(report(lexmap))
    return 0


if __name__ == "__main__":
    sys.exit(main())