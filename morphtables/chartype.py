"""Character classes and case mapping for Windows-1251 Cyrillic text."""

from __future__ import annotations

from enum import IntEnum


class CharType(IntEnum):
    """Class of a single Windows-1251 byte as the dictionary sees it."""

    CAPITAL = 0
    REGULAR = 1
    DELIMITER = 2
    INVALID = 3


def _build_types() -> tuple[CharType, ...]:
    table = [CharType.INVALID] * 256
    table[0x00] = CharType.DELIMITER
    table[0x27] = CharType.DELIMITER
    table[0x2C] = CharType.REGULAR
    table[0x2D] = CharType.DELIMITER
    table[0xA8] = CharType.CAPITAL
    table[0xB8] = CharType.REGULAR
    for code in range(0xC0, 0xE0):
        table[code] = CharType.CAPITAL
    for code in range(0xE0, 0x100):
        table[code] = CharType.REGULAR
    return tuple(table)


def _build_lower() -> bytes:
    table = list(range(256))
    table[0xA8] = 0xE5
    table[0xB8] = 0xE5
    for code in range(0xC0, 0xE0):
        table[code] = code + 0x20
    return bytes(table)


def _build_upper() -> bytes:
    table = list(range(256))
    for code in range(0x61, 0x7B):
        table[code] = code - 0x20
    table[0xB3] = 0xB2
    table[0xB4] = 0xA5
    table[0xB8] = 0xA8
    table[0xBA] = 0xAA
    table[0xBF] = 0xAF
    for code in range(0xE0, 0x100):
        table[code] = code - 0x20
    return bytes(table)


_CHAR_TYPES = _build_types()
_TO_LOWER = _build_lower()
_TO_UPPER = _build_upper()


def char_type(code: int) -> CharType:
    """The class of a byte value."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"byte value out of range: {code}")
    return _CHAR_TYPES[code]


def to_lower(data: bytes | bytearray) -> bytes:
    """Lower-case Cyrillic letters; ``ё`` and ``Ё`` both become ``е``."""
    return bytes(data).translate(_TO_LOWER)


def to_upper(data: bytes | bytearray) -> bytes:
    """Upper-case Latin and Cyrillic letters."""
    return bytes(data).translate(_TO_UPPER)