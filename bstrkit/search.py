"""Searching byte strings for substrings, characters and character sets,
and replacing every occurrence of a substring."""

from __future__ import annotations

from typing import Callable, Iterable, Union

from .bstring import BString, BStringError, BytesLike, _as_byte, _as_bytes

ByteValue = Union[int, bytes, str]


def _check_pos(pos: int) -> None:
    if pos < 0:
        raise BStringError(f"negative position: {pos}")


def find(haystack: BytesLike, pos: int, needle: BytesLike) -> int:
    """Return the first index at or after ``pos`` where ``needle`` starts.

    An empty ``needle`` is found at ``pos`` itself. Returns ``-1`` when
    there is no match or ``pos`` lies past the end.
    """
    _check_pos(pos)
    h, n = _as_bytes(haystack), _as_bytes(needle)
    if pos > len(h):
        return -1
    if not n:
        return pos
    return h.find(n, pos)


def rfind(haystack: BytesLike, pos: int, needle: BytesLike) -> int:
    """Return the last index no greater than ``pos`` where ``needle`` starts.

    An empty ``needle`` is found at ``pos`` itself. Returns ``-1`` when
    there is no match or ``pos`` lies past the end.
    """
    _check_pos(pos)
    h, n = _as_bytes(haystack), _as_bytes(needle)
    if pos > len(h):
        return -1
    if not n:
        return pos
    last_start = len(h) - len(n)
    if last_start < 0:
        return -1
    start = min(pos, last_start)
    return h.rfind(n, 0, start + len(n))


def find_caseless(haystack: BytesLike, pos: int, needle: BytesLike) -> int:
    """As :func:`find`, ignoring ASCII case."""
    return find(_as_bytes(haystack).lower(), pos, _as_bytes(needle).lower())


def rfind_caseless(haystack: BytesLike, pos: int, needle: BytesLike) -> int:
    """As :func:`rfind`, ignoring ASCII case."""
    return rfind(_as_bytes(haystack).lower(), pos, _as_bytes(needle).lower())


def find_char(b: BytesLike, c: ByteValue, pos: int = 0) -> int:
    """Return the first index at or after ``pos`` holding byte ``c``, or ``-1``."""
    _check_pos(pos)
    data = _as_bytes(b)
    if pos >= len(data):
        return -1
    return data.find(bytes([_as_byte(c)]), pos)


def rfind_char(b: BytesLike, c: ByteValue, pos: int) -> int:
    """Return the last index no greater than ``pos`` holding byte ``c``, or ``-1``."""
    _check_pos(pos)
    data = _as_bytes(b)
    if pos >= len(data):
        return -1
    return data.rfind(bytes([_as_byte(c)]), 0, pos + 1)


def _char_set(chars: BytesLike) -> frozenset[int]:
    members = frozenset(_as_bytes(chars))
    if not members:
        raise BStringError("empty character set")
    return members


def _first_match(data: bytes, pos: int, accept: Callable[[int], bool]) -> int:
    return next((i for i, byte in enumerate(data[pos:], pos) if accept(byte)), -1)


def _last_match(data: bytes, pos: int, accept: Callable[[int], bool]) -> int:
    candidates: Iterable[tuple[int, int]] = reversed(list(enumerate(data[:pos + 1])))
    return next((i for i, byte in candidates if accept(byte)), -1)


def find_any(b: BytesLike, pos: int, chars: BytesLike) -> int:
    """Return the first index at or after ``pos`` holding any byte of ``chars``."""
    _check_pos(pos)
    data = _as_bytes(b)
    if pos >= len(data):
        return -1
    members = _char_set(chars)
    return _first_match(data, pos, members.__contains__)


def rfind_any(b: BytesLike, pos: int, chars: BytesLike) -> int:
    """Return the last index no greater than ``pos`` holding any byte of ``chars``.

    A ``pos`` equal to the length is treated as the last index.
    """
    _check_pos(pos)
    data = _as_bytes(b)
    if pos > len(data):
        return -1
    members = _char_set(chars)
    pos = min(pos, len(data) - 1)
    if pos < 0:
        return -1
    return _last_match(data, pos, members.__contains__)


def find_none(b: BytesLike, pos: int, chars: BytesLike) -> int:
    """Return the first index at or after ``pos`` holding no byte of ``chars``."""
    _check_pos(pos)
    data = _as_bytes(b)
    if pos >= len(data):
        return -1
    members = _char_set(chars)
    return _first_match(data, pos, lambda byte: byte not in members)


def rfind_none(b: BytesLike, pos: int, chars: BytesLike) -> int:
    """Return the last index no greater than ``pos`` holding no byte of ``chars``.

    A ``pos`` equal to the length is treated as the last index.
    """
    _check_pos(pos)
    data = _as_bytes(b)
    if pos > len(data):
        return -1
    members = _char_set(chars)
    pos = min(pos, len(data) - 1)
    if pos < 0:
        return -1
    return _last_match(data, pos, lambda byte: byte not in members)


def _replace_all(b: BString, find_str: BytesLike, repl: BytesLike, pos: int,
                 finder: Callable[[bytes, int, bytes], int]) -> int:
    if not isinstance(b, BString):
        raise TypeError(f"expected a BString, got {type(b).__name__}")
    _check_pos(pos)
    data, target, replacement = bytes(b), _as_bytes(find_str), _as_bytes(repl)
    if not target:
        raise BStringError("cannot replace an empty string")
    if pos > len(data) - len(target):
        return 0
    pieces = [data[:pos]]
    start = pos
    count = 0
    while (i := finder(data, start, target)) >= 0:
        pieces.append(data[start:i])
        pieces.append(replacement)
        start = i + len(target)
        count += 1
    if count:
        pieces.append(data[start:])
        b.assign(b"".join(pieces))
    return count


def find_replace(b: BString, find_str: BytesLike, repl: BytesLike, pos: int = 0) -> int:
    """Replace, in place, every occurrence of ``find_str`` at or after ``pos``.

    Matches are taken left to right without overlap. Returns the number of
    replacements made.
    """
    return _replace_all(b, find_str, repl, pos, find)


def find_replace_caseless(b: BString, find_str: BytesLike, repl: BytesLike,
                          pos: int = 0) -> int:
    """As :func:`find_replace`, matching ``find_str`` without regard to ASCII case."""
    return _replace_all(b, find_str, repl, pos, find_caseless)