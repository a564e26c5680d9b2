"""Dictionary dump lines: formatting lexeme forms and comparing two dumps."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Mapping, TextIO

_TOO_BIG = "!!! diff too big !!!"
_WINDOW = 0x400


def cut_common_stem(forms: Mapping[int, str]) -> dict[int, str]:
    """Keep the first form whole and strip the common prefix from all the others."""
    ordered = sorted(forms.items())
    if not ordered:
        return {}
    base = ordered[0][1]
    stem = len(base)
    for _, text in ordered[1:]:
        while stem > 0 and not text.startswith(base[:stem]):
            stem -= 1
        if stem == 0:
            break
    result = {ordered[0][0]: base}
    for formid, text in ordered[1:]:
        result[formid] = text[stem:]
    return result


def format_entry(lexid: int, forms: Mapping[int, str]) -> str:
    """A dump line: hex lexeme id, a tab, then ``form|id`` items joined by slashes."""
    items = "/".join(f"{text}|{formid:02x}" for formid, text in sorted(forms.items()))
    return f"{lexid:x}\t{items}"


def read_dump_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a dump without line ends, stopping at the first empty one."""
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            return
        yield line


def _fill(queue: deque[str], source: Iterator[str], limit: int) -> int:
    added = 0
    while len(queue) < limit:
        line = next(source, "")
        if not line:
            break
        queue.append(line)
        added += 1
    return added


def diff_dumps(left: Iterable[str], right: Iterable[str]) -> Iterator[str]:
    """Yield ``<<`` lines only in the left dump and ``>>`` lines only in the right one.

    Differences are resolved within a window of lines; when they cannot be, a
    final ``!!! diff too big !!!`` line is yielded and the comparison stops.
    """
    src1 = iter(left)
    src2 = iter(right)
    while True:
        s1 = next(src1, "")
        s2 = next(src2, "")
        if not s1 and not s2:
            return
        if s1 == s2:
            continue

        v1: deque[str] = deque([s1])
        v2: deque[str] = deque([s2])
        _fill(v1, src1, _WINDOW)
        _fill(v2, src2, _WINDOW)

        while v1 and v2:
            changes = 0
            while v1 and v2 and v1[0] == v2[0]:
                v1.popleft()
                v2.popleft()
                changes += 1
            while v1 and v1[0] not in v2:
                yield f"<< {v1.popleft()}"
                changes += 1
            while v2 and v2[0] not in v1:
                yield f">> {v2.popleft()}"
                changes += 1
            changes += _fill(v1, src1, len(v2))
            changes += _fill(v2, src2, len(v1))
            if not changes:
                break

        if v1 or v2:
            yield _TOO_BIG
            return