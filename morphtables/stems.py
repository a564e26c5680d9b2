"""Dictionary stem entries, article splitting and the dictionary builder's switches."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

ENCODING = "cp1251"
DEFAULT_TARGET_DIR = "./"
DEFAULT_NAMESPACE = "__libmorphrus__"

_log = logging.getLogger(__name__)

# Interchange level kinds by word type: verbs, nouns of each gender and animacy,
# adjectives; all other types have no interchange levels.
MIX_TYPES = bytes(
    [0x00]
    + [0x01] * 6
    + [0x02, 0x03, 0x04, 0x05, 0x06, 0x06]
    + [0x05, 0x06, 0x07]
    + [0x05, 0x06, 0x07]
    + [0x05, 0x06]
    + [0x05, 0x06]
    + [0x05]
    + [0x05]
    + [0x08]
    + [0x00] * 38
)

# Widths of the article fields, terminator included.
_FIELD_LIMITS = (0x100, 0x20, 0x20, 0x20)

_SWITCHES = {
    "flex-table": "flex_table",
    "flex-index": "flex_index",
    "intr-table": "intr_table",
    "intr-index": "intr_index",
    "target-dir": "target_dir",
    "unknown": "unknown",
    "namespace": "namespace",
    "codepage": "codepage",
}


def mix_type(word_type: int) -> int:
    """The interchange level kind of a word type."""
    return MIX_TYPES[word_type & 0x3F]


@dataclass
class StemEntry:
    """A dictionary entry describing how one stem inflects."""

    chrmin: int = 0
    chrmax: int = 0
    nlexid: int = 0
    oclass: int = 0
    stpost: str = ""

    def _key(self) -> tuple[int, int, bytes, int]:
        return (-self.chrmax, self.chrmin, self.stpost.encode(ENCODING), self.nlexid)

    def __lt__(self, other: StemEntry) -> bool:
        if not isinstance(other, StemEntry):
            return NotImplemented
        return self._key() < other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StemEntry):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class Article(NamedTuple):
    """The fields of one dictionary article line."""

    norm: str
    dies: str
    type: str
    zindex: str
    comment: str


def _is_space(char: str) -> bool:
    return char != "\x00" and ord(char) <= 0x20


def _subtext(text: str, limit: int) -> tuple[str, str]:
    end = 0
    while end < len(text) and text[end] != "\x00" and not _is_space(text[end]):
        end += 1
    if end >= limit:
        raise ValueError(f"article field too long: {text[:end]!r}")
    rest = end
    while rest < len(text) and _is_space(text[rest]):
        rest += 1
    return text[:end], text[rest:]


def split_article(article: str) -> Article:
    """Split an article into its four leading fields and the trailing comment.

    The letter ``ё`` of the normal form is replaced with ``е``.
    """
    fields = []
    rest = article
    for limit in _FIELD_LIMITS:
        value, rest = _subtext(rest, limit)
        fields.append(value)
    fields[0] = fields[0].replace("ё", "е")
    return Article(*fields, rest)


@dataclass
class BuildOptions:
    """Settings of a dictionary build given on the command line."""

    flex_table: str = ""
    flex_index: str = ""
    intr_table: str = ""
    intr_index: str = ""
    target_dir: str = ""
    unknown: str = ""
    namespace: str = ""
    codepage: str = ""
    dictionaries: list[str] = field(default_factory=list)


def _match_switch(arg: str) -> tuple[str, str] | None:
    for key, attribute in _SWITCHES.items():
        if arg.startswith(key) and arg[len(key):len(key) + 1] in ("=", ":"):
            return key, attribute
    return None


def parse_switches(argv: Sequence[str]) -> BuildOptions:
    """Read ``-name=value`` switches and dictionary names, applying defaults."""
    options = BuildOptions()
    for arg in argv:
        if not arg.startswith("-"):
            options.dictionaries.append(arg)
            continue
        found = _match_switch(arg[1:])
        if found is None:
            raise ValueError(f"invalid switch: {arg}")
        key, attribute = found
        current = getattr(options, attribute)
        if current:
            raise ValueError(f"'{key}' is already defined as '{current}'")
        setattr(options, attribute, arg[len(key) + 2:])

    if not options.target_dir:
        options.target_dir = DEFAULT_TARGET_DIR
        _log.info("undefined output directory was set to default '%s'", options.target_dir)
    if not options.namespace:
        options.namespace = DEFAULT_NAMESPACE
        _log.info("undefined 'namespace' was set to default '%s'", options.namespace)
    if not options.unknown:
        _log.info("'-unknown' parameter undefined, unknown words will not be dumped")
    if not (options.flex_table and options.flex_index
            and options.intr_table and options.intr_index):
        raise ValueError("no flexion/interchange tables specified, use --help")
    if not options.dictionaries:
        raise ValueError("no dictionaries specified, use --help")
    return options