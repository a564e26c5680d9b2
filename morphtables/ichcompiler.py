"""Compiler of stem interchange table sources into binary tables."""

from __future__ import annotations

import errno
import re
import sys
from pathlib import Path
from typing import Iterable, Iterator

from morphtables.interchange import Collector, Interchange

SOURCE_ENCODING = "cp866"
WINDOWS_ENCODING = "cp1251"

USAGE = (
    "libmorphrus stem-interchange tables compiler, version 1.0 (portable)\n"
    "Usage: makeich [options] inputname binaryname symbolsname\n"
    "Options are:\n"
    "\t-w\tassume source tables use 1251 Windows Cyrillic instead of 866.\n"
)

TABLE_COMMANDS = (".таблица", ".table")
INCLUDE_COMMANDS = (".включить", ".include")

_EMPTY_FRAGMENT = "''"
_TRIMMED = "".join(chr(code) for code in range(0, 0x21))
_SPACES = "".join(chr(code) for code in range(1, 0x21))
_FIELD = re.compile(r"[^\x00-\x20,]*")


class CompileError(ValueError):
    """A table source could not be compiled."""


def trim(text: str) -> str:
    """Strip control characters and spaces from both ends."""
    return text.strip(_TRIMMED)


def next_field(text: str) -> tuple[str, str]:
    """Split off the first comma- or space-delimited field; return it and the rest."""
    match = _FIELD.match(text)
    field = match.group(0) if match else ""
    rest = text[len(field):].lstrip(_SPACES)
    if rest.startswith(","):
        rest = rest[1:].lstrip(_SPACES)
    return field, rest


def has_command(line: str, command: str) -> bool:
    """Whether a line starts with a command followed by whitespace."""
    size = len(command)
    return len(line) > size and line.startswith(command) and "\x00" < line[size] <= " "


def _strip_command(line: str, commands: tuple[str, ...]) -> str | None:
    for command in commands:
        if has_command(line, command):
            return line[len(command) + 1:]
    return None


class SourceReader:
    """Reads the non-blank lines of a table source, with one-line push-back."""

    def __init__(self, lines: Iterable[str], name: str = "<input>",
                 encoding: str = SOURCE_ENCODING, directory: Path | None = None) -> None:
        self.name = name
        self.encoding = encoding
        self.line = 0
        self._lines: Iterator[str] = iter(lines)
        self._pending: list[str] = []
        self._directory = directory

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = SOURCE_ENCODING) -> SourceReader:
        """Read a source file in the given encoding."""
        path = Path(path)
        with path.open(encoding=encoding, errors="replace") as stream:
            lines = list(stream)
        return cls(lines, str(path), encoding, path.parent)

    def get(self) -> str:
        """The next non-blank line, trimmed, or an empty string at the end."""
        if self._pending:
            return self._pending.pop()
        for raw in self._lines:
            self.line += 1
            text = trim(raw)
            if text:
                return text
        return ""

    def put_back(self, line: str) -> SourceReader:
        """Return a line so that the next ``get`` yields it again."""
        self._pending.append(line)
        return self

    def open(self, name: str) -> SourceReader:
        """Open an included source, relative to this source's directory."""
        path = Path(name)
        if not path.is_absolute() and self._directory is not None:
            path = self._directory / path
        try:
            return SourceReader.from_file(path, self.encoding)
        except OSError as error:
            raise CompileError(f"could not open file '{name}'") from error


def make_table(source: SourceReader, collector: Collector) -> None:
    """Compile one ``.table`` block and register its interchanges."""
    header = source.get()
    if not header:
        raise CompileError("unexpected end of file")
    names = _strip_command(header, TABLE_COMMANDS)
    if names is None:
        raise CompileError("'.table' declaration followed by table index expected")
    names = trim(names)
    if not names:
        raise CompileError("unexpected end of line, table index expected")

    opening = source.get()
    if not opening:
        raise CompileError("unexpected end of file")
    if opening != "{":
        raise CompileError("'{' expected")

    while True:
        line = source.get()
        if not line:
            raise CompileError("unexpected end of file")
        if line == "}":
            break

        condition, rest = next_field(line)
        first, rest = next_field(rest)
        second, rest = next_field(rest)
        if not condition or not first or not second:
            raise CompileError("interchange table has less than 2 fragments")

        steps = [first, second]
        while rest:
            extra, rest = next_field(rest)
            steps.append(extra)

        interchange = Interchange()
        for step, text in enumerate(steps):
            interchange.add_step("" if text == _EMPTY_FRAGMENT else text, step)
        collector.add_interchange(names, condition, interchange)


def compile_source(source: SourceReader, collector: Collector) -> None:
    """Compile every table and include in a source into the collector."""
    try:
        while line := source.get():
            included = _strip_command(line, INCLUDE_COMMANDS)
            if included is None:
                make_table(source.put_back(line), collector)
                continue
            name = trim(included)
            if not name:
                raise CompileError("file name expected")
            nested = source.open(name)
            sys.stderr.write(f"\t{name}\n")
            compile_source(nested, collector)
    except ValueError as error:
        raise CompileError(f"{error}\n\tfrom {source.name}, line {source.line}") from error


def _write(path: str, payload: bytes) -> int:
    try:
        stream = open(path, "wb")
    except OSError:
        sys.stderr.write(f"Could not create file '{path}'!\n")
        return 1
    with stream:
        try:
            stream.write(payload)
        except OSError:
            sys.stderr.write(f"Error writing the file '{path}'!\n")
            return errno.EACCES
    return 0


def main(argv: list[str] | None = None) -> int:
    """Compile a table source into its binary tables and reference index."""
    args = sys.argv[1:] if argv is None else argv
    encoding = SOURCE_ENCODING
    names: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            if arg == "-w":
                encoding = WINDOWS_ENCODING
                continue
            sys.stderr.write(f"Invalid switch '{arg}'!\n")
            return 1
        if len(names) == 3:
            break
        names.append(arg)

    if len(names) < 3:
        sys.stderr.write(USAGE)
        return 1
    inname, binname, symname = names

    sys.stderr.write("Compiling tables...\n")
    collector = Collector()
    try:
        try:
            source = SourceReader.from_file(inname, encoding)
        except OSError as error:
            raise CompileError(f"could not open file '{inname}'") from error
        sys.stderr.write(f"\t{inname}\n")
        compile_source(source, collector)
        collector.relocate_tables()
        tables = collector.store_tables()
        references = collector.store_references()
    except ValueError as error:
        sys.stderr.write(f"Error: {error}\n")
        return 1

    for path, payload in ((binname, tables), (symname, references)):
        status = _write(path, payload)
        if status:
            return status
    return 0


if __name__ == "__main__":
    sys.exit(main())