"""A box of unique strings, each with a fixed offset in its serialized form."""

from __future__ import annotations

STRING_NOT_FOUND = 0xFFFF
MAX_STRING_LENGTH = 0xFF


class StringBox:
    """Stores strings once each; an offset never changes after a string is added."""

    def __init__(self, encoding: str = "cp1251") -> None:
        self.encoding = encoding
        self._offsets: dict[bytes, int] = {}
        self._strings: dict[int, bytes] = {}
        self._length = 0

    def _encode(self, string: str | bytes) -> bytes:
        return string if isinstance(string, bytes) else string.encode(self.encoding)

    @property
    def length(self) -> int:
        """Size of the serialized box in bytes."""
        return self._length

    def __len__(self) -> int:
        return len(self._offsets)

    def __contains__(self, string: object) -> bool:
        if not isinstance(string, (str, bytes)):
            return False
        return self._encode(string) in self._offsets

    def add_string(self, string: str | bytes) -> int:
        """Add a string if it is new and return its offset."""
        key = self._encode(string)
        existing = self._offsets.get(key)
        if existing is not None:
            return existing
        if len(key) > MAX_STRING_LENGTH:
            raise ValueError(f"string longer than {MAX_STRING_LENGTH} bytes: {string!r}")
        if self._length >= STRING_NOT_FOUND:
            raise OverflowError("string box is full")
        offset = self._length
        self._offsets[key] = offset
        self._strings[offset] = key
        self._length += len(key) + 1
        return offset

    def offset_of(self, string: str | bytes) -> int:
        """The offset of a string already in the box."""
        try:
            return self._offsets[self._encode(string)]
        except KeyError:
            raise KeyError(string) from None

    def string_at(self, offset: int) -> str:
        """The string stored at an offset."""
        try:
            return self._strings[offset].decode(self.encoding)
        except KeyError:
            raise KeyError(offset) from None

    def serialize(self) -> bytes:
        """Strings in offset order, each as a length byte followed by its bytes."""
        return b"".join(
            bytes([len(self._strings[offset])]) + self._strings[offset]
            for offset in sorted(self._strings)
        )