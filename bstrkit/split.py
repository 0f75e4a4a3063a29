"""Splitting byte strings on characters, character sets or substrings,
and joining pieces back together."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from .bstring import BString, BStringError, BytesLike, _as_byte, _as_bytes

ByteValue = Union[int, bytes, str]


def _check_pos(pos: int, size: int) -> None:
    if pos < 0 or pos > size:
        raise BStringError(f"position {pos} outside 0..{size}")


def _split_on(data: bytes, pos: int, members: frozenset[int]) -> Iterator[tuple[int, BString]]:
    start = pos
    while True:
        end = next(
            (i for i, byte in enumerate(data[start:], start) if byte in members),
            len(data),
        )
        yield start, BString(data[start:end])
        start = end + 1
        if start > len(data):
            return


def iter_split(s: BytesLike, char: ByteValue, pos: int = 0) -> Iterator[tuple[int, BString]]:
    """Yield ``(offset, piece)`` for each run of ``s`` between ``char`` bytes.

    Scanning starts at ``pos``, which must lie within ``0..len(s)``.
    """
    data = _as_bytes(s)
    _check_pos(pos, len(data))
    return _split_on(data, pos, frozenset((_as_byte(char),)))


def iter_split_any(s: BytesLike, chars: BytesLike, pos: int = 0) -> Iterator[tuple[int, BString]]:
    """Yield ``(offset, piece)`` for each run of ``s`` between any byte of ``chars``.

    An empty ``chars`` yields the whole of ``s`` once, at offset 0.
    """
    data = _as_bytes(s)
    _check_pos(pos, len(data))
    members = frozenset(_as_bytes(chars))
    if not members:
        return iter([(0, BString(data))])
    return _split_on(data, pos, members)


def _split_on_str(data: bytes, pos: int, sep: bytes) -> Iterator[tuple[int, BString]]:
    start = pos
    i = pos
    while i <= len(data) - len(sep):
        if data.startswith(sep, i):
            yield start, BString(data[start:i])
            i += len(sep)
            start = i
        i += 1
    yield start, BString(data[start:])


def iter_split_str(s: BytesLike, sep: BytesLike, pos: int = 0) -> Iterator[tuple[int, BString]]:
    """Yield ``(offset, piece)`` for each run of ``s`` between occurrences of ``sep``.

    An empty ``sep`` yields every single byte from ``pos`` on. After a match,
    scanning resumes one byte past the end of the separator.
    """
    data = _as_bytes(s)
    _check_pos(pos, len(data))
    separator = _as_bytes(sep)
    if not separator:
        return ((i, BString(data[i:i + 1])) for i in range(pos, len(data)))
    if len(separator) == 1:
        return _split_on(data, pos, frozenset(separator))
    return _split_on_str(data, pos, separator)


def split(s: BytesLike, char: ByteValue) -> list[BString]:
    """Return the pieces of ``s`` divided by the byte ``char``."""
    return [piece for _, piece in iter_split(s, char)]


def split_any(s: BytesLike, chars: BytesLike) -> list[BString]:
    """Return the pieces of ``s`` divided by any byte of ``chars``.

    An empty ``chars`` gives a single piece holding a copy of ``s``.
    """
    return [piece for _, piece in iter_split_any(s, chars)]


def split_str(s: BytesLike, sep: BytesLike) -> list[BString]:
    """Return the pieces of ``s`` divided by the whole substring ``sep``."""
    return [piece for _, piece in iter_split_str(s, sep)]


def join(parts: Iterable[BytesLike], sep: Optional[BytesLike] = None) -> BString:
    """Concatenate ``parts`` with ``sep`` between them; ``None`` means no separator."""
    separator = b"" if sep is None else _as_bytes(sep)
    return BString(separator.join(_as_bytes(part) for part in parts))