"""Mutable byte strings with clamped, length-aware editing operations."""

from __future__ import annotations

from typing import Union

BytesLike = Union["BString", bytes, bytearray, memoryview, str]


class BStringError(ValueError):
    """Raised when an operation is given arguments it cannot honour."""


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, BString):
        return bytes(value._data)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    raise TypeError(f"expected a byte string, got {type(value).__name__}")


def _as_byte(value: Union[int, bytes, bytearray, str]) -> int:
    """Turn an int or a one-character value into a single byte value."""
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise BStringError(f"byte value out of range: {value}")
        return value
    if isinstance(value, str):
        value = value.encode("utf-8", "surrogateescape")
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise BStringError(f"expected a single byte, got {len(value)}")
        return value[0]
    raise TypeError(f"expected a byte value, got {type(value).__name__}")


class BString:
    """A mutable string of bytes that may contain NUL characters."""

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike = b"") -> None:
        self._data = bytearray(_as_bytes(data))

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __str__(self) -> str:
        return self._data.decode("utf-8", "surrogateescape")

    def __repr__(self) -> str:
        return f"BString({bytes(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BString):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(bytes(self._data))

    def copy(self) -> "BString":
        """Return an independent copy."""
        return BString(self)

    def assign(self, other: BytesLike) -> None:
        """Overwrite the contents with those of ``other``."""
        self._data[:] = _as_bytes(other)

    def assign_mid(self, other: BytesLike, left: int, length: int) -> None:
        """Overwrite the contents with a clamped slice of ``other``."""
        self._data[:] = self._clamped_slice(_as_bytes(other), left, length)

    def mid(self, left: int, length: int) -> "BString":
        """Return the substring at ``left`` of ``length``, clamped to the ends."""
        return BString(self._clamped_slice(bytes(self._data), left, length))

    @staticmethod
    def _clamped_slice(source: bytes, left: int, length: int) -> bytes:
        if left < 0:
            length += left
            left = 0
        length = min(length, len(source) - left)
        if length <= 0:
            return b""
        return source[left:left + length]

    def concat(self, other: BytesLike) -> None:
        """Append ``other`` to the end."""
        self._data.extend(_as_bytes(other))

    def append_char(self, c: Union[int, bytes, str]) -> None:
        """Append a single byte."""
        self._data.append(_as_byte(c))

    def _pad_to(self, pos: int, fill: int) -> None:
        if pos > len(self._data):
            self._data.extend(bytes([fill]) * (pos - len(self._data)))

    def insert(self, pos: int, other: BytesLike, fill: Union[int, bytes, str]) -> None:
        """Insert ``other`` at ``pos``, padding with ``fill`` past the end."""
        if pos < 0:
            raise BStringError(f"negative position: {pos}")
        piece = _as_bytes(other)
        self._pad_to(pos, _as_byte(fill))
        self._data[pos:pos] = piece

    def insert_char(self, pos: int, length: int, fill: Union[int, bytes, str]) -> None:
        """Insert ``length`` copies of ``fill`` at ``pos``; a gap past the end is filled too."""
        if pos < 0:
            raise BStringError(f"negative position: {pos}")
        if length < 0:
            raise BStringError(f"negative length: {length}")
        byte = _as_byte(fill)
        if pos > len(self._data):
            self._pad_to(pos + length, byte)
        else:
            self._data[pos:pos] = bytes([byte]) * length

    def replace(self, pos: int, length: int, other: BytesLike,
                fill: Union[int, bytes, str]) -> None:
        """Replace ``length`` bytes at ``pos`` with ``other``."""
        if pos < 0:
            raise BStringError(f"negative position: {pos}")
        if length < 0:
            raise BStringError(f"negative length: {length}")
        piece = _as_bytes(other)
        self._pad_to(pos, _as_byte(fill))
        self._data[pos:pos + length] = piece

    def delete(self, pos: int, length: int) -> None:
        """Remove ``length`` bytes from ``pos``, clamped to the string."""
        if pos < 0:
            length += pos
            pos = 0
        if length < 0:
            raise BStringError(f"negative length: {length}")
        if length > 0 and pos < len(self._data):
            del self._data[pos:pos + length]

    def set_str(self, pos: int, other: BytesLike | None,
                fill: Union[int, bytes, str]) -> None:
        """Overwrite from ``pos`` with ``other``; ``None`` acts as empty."""
        if pos < 0:
            raise BStringError(f"negative position: {pos}")
        piece = b"" if other is None else _as_bytes(other)
        self._pad_to(pos, _as_byte(fill))
        self._data[pos:pos + len(piece)] = piece

    def truncate(self, n: int) -> None:
        """Shorten to at most ``n`` bytes."""
        if n < 0:
            raise BStringError(f"negative length: {n}")
        del self._data[n:]

    def pattern(self, length: int) -> None:
        """Repeat the contents end to end and cut to exactly ``length`` bytes."""
        size = len(self._data)
        if size <= 0:
            raise BStringError("cannot repeat an empty string")
        if length < 0:
            raise BStringError(f"negative length: {length}")
        repeats = -(-length // size)
        self._data[:] = (bytes(self._data) * repeats)[:length]

    def upper(self) -> None:
        """Convert ASCII letters to upper case in place."""
        self._data[:] = self._data.upper()

    def lower(self) -> None:
        """Convert ASCII letters to lower case in place."""
        self._data[:] = self._data.lower()

    def ltrim(self) -> None:
        """Remove leading whitespace."""
        self._data[:] = self._data.lstrip()

    def rtrim(self) -> None:
        """Remove trailing whitespace."""
        self._data[:] = self._data.rstrip()

    def trim(self) -> None:
        """Remove whitespace from both ends."""
        self._data[:] = self._data.strip()

    def to_cstr(self, z: Union[int, bytes, str]) -> bytes:
        """Return the contents with every NUL byte replaced by ``z``."""
        return bytes(self._data).replace(b"\x00", bytes([_as_byte(z)]))

    def char_at(self, pos: int, default: int = 0) -> int:
        """Return the byte at ``pos``, or ``default`` when out of range."""
        if 0 <= pos < len(self._data):
            return self._data[pos]
        return default