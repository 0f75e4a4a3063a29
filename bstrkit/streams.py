"""Buffered reading of byte streams: whole reads, line reads, fixed-size
reads, push-back and splitting a stream into pieces."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Union

from .bstring import BString, BStringError, BytesLike, _as_byte, _as_bytes

Reader = Callable[[int], Optional[bytes]]
Getc = Callable[[], Union[int, bytes, None]]

DEFAULT_BUFFER_SIZE = 1024
_SPLIT_CHUNK = 256
_INITIAL_READ = 16


def _pull(read: Reader, size: int) -> bytes:
    chunk = read(size)
    if not chunk:
        return b""
    return bytes(chunk)


def read_all(read: Reader) -> BString:
    """Read a source to its end with an ``fread``-like ``read(size)`` callable.

    Requests grow in size; reading stops at the first request that returns
    fewer bytes than asked for.
    """
    if read is None:
        raise BStringError("no reader given")
    data = bytearray()
    target = _INITIAL_READ
    while True:
        data += _pull(read, target - len(data))
        if len(data) < target:
            break
        target += min(target, DEFAULT_BUFFER_SIZE)
    return BString(data)


def _next_byte(getc: Getc) -> Optional[int]:
    value = getc()
    if value is None:
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, (bytes, bytearray)):
        return value[0] if value else None
    raise TypeError(f"getc returned {type(value).__name__}")


def gets(getc: Getc, terminator: Union[int, bytes, str]) -> Optional[BString]:
    """Read bytes one at a time up to and including ``terminator``.

    ``getc`` returns a byte as an int or a one-byte value, and a negative
    number, ``None`` or an empty value at the end. Returns ``None`` when
    nothing could be read.
    """
    term = _as_byte(terminator)
    out = bytearray()
    while (byte := _next_byte(getc)) is not None:
        out.append(byte)
        if byte == term:
            break
    return BString(out) if out else None


class BStream:
    """A read-ahead wrapper around an ``fread``-like ``read(size)`` callable."""

    def __init__(self, read: Reader) -> None:
        if read is None:
            raise BStringError("no reader given")
        self._read: Optional[Reader] = read
        self._buffer = bytearray()
        self._max_buffer = DEFAULT_BUFFER_SIZE
        self._at_eof = False

    def _source(self) -> Reader:
        if self._read is None:
            raise BStringError("stream is closed")
        return self._read

    def buffer_length(self, size: int = 0) -> int:
        """Set the read-ahead size when ``size`` is positive; return the previous one."""
        if size < 0:
            raise BStringError(f"negative buffer length: {size}")
        old = self._max_buffer
        if size > 0:
            self._max_buffer = size
        return old

    def eof(self) -> bool:
        """Return whether the source is exhausted and nothing is buffered."""
        self._source()
        return self._at_eof and not self._buffer

    def close(self) -> Optional[Reader]:
        """Close the stream and hand back the reader it wrapped."""
        read = self._read
        self._read = None
        self._buffer = bytearray()
        self._at_eof = True
        return read

    def __enter__(self) -> "BStream":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _read_until(self, members: frozenset[int]) -> BString:
        read = self._source()
        cut = next((i for i, b in enumerate(self._buffer) if b in members), -1)
        if cut >= 0:
            line = bytes(self._buffer[:cut + 1])
            del self._buffer[:cut + 1]
            return BString(line)
        result = bytearray(self._buffer)
        self._buffer.clear()
        while True:
            chunk = _pull(read, self._max_buffer)
            if not chunk:
                self._at_eof = True
                return BString(result)
            cut = next((i for i, b in enumerate(chunk) if b in members), -1)
            if cut >= 0:
                result += chunk[:cut + 1]
                self._buffer[:] = chunk[cut + 1:]
                return BString(result)
            result += chunk

    def read_line(self, terminator: Union[int, bytes, str]) -> BString:
        """Read up to and including ``terminator``; empty at the end of the stream."""
        return self._read_until(frozenset((_as_byte(terminator),)))

    def read_line_any(self, terminators: BytesLike) -> BString:
        """Read up to and including any byte of ``terminators``."""
        members = frozenset(_as_bytes(terminators))
        if not members:
            raise BStringError("empty terminator set")
        return self._read_until(members)

    def read(self, n: int) -> BString:
        """Read up to ``n`` bytes; fewer only at the end, none once exhausted."""
        if n <= 0:
            raise BStringError(f"read length must be positive: {n}")
        read = self._source()
        result = bytearray(self._buffer[:n])
        del self._buffer[:n]
        while len(result) < n and not self._at_eof:
            chunk = _pull(read, min(n - len(result), self._max_buffer))
            if not chunk:
                self._at_eof = True
                break
            take = n - len(result)
            result += chunk[:take]
            self._buffer += chunk[take:]
        return BString(result)

    def unread(self, data: BytesLike) -> None:
        """Push ``data`` back so it is read before anything else."""
        self._source()
        self._buffer[:0] = _as_bytes(data)

    def peek(self) -> BString:
        """Return the bytes buffered ahead of the source."""
        self._source()
        return BString(self._buffer)

    def split_chars(self, chars: BytesLike) -> Iterator[tuple[int, BString]]:
        """Yield ``(offset, piece)`` for runs of the stream between any byte of ``chars``.

        An empty ``chars`` yields the whole remaining stream once. While a
        piece is being handled, the stream sits just past its split byte.
        """
        self._source()
        members = frozenset(_as_bytes(chars))
        if not members:
            whole = bytearray()
            while chunk := bytes(self.read(_SPLIT_CHUNK)):
                whole += chunk
            yield 0, BString(whole)
            return
        offset = 0
        pending = bytearray()
        scanned = 0
        while True:
            if scanned >= len(pending):
                pending += bytes(self.read(_SPLIT_CHUNK))
                if scanned >= len(pending):
                    yield offset, BString(pending)
                    return
            if pending[scanned] in members:
                self.unread(bytes(pending[scanned + 1:]))
                yield offset, BString(pending[:scanned])
                offset += scanned + 1
                pending = bytearray()
                scanned = 0
                continue
            scanned += 1

    def split_str(self, sep: BytesLike) -> Iterator[tuple[int, BString]]:
        """Yield ``(offset, piece)`` for runs of the stream between occurrences of ``sep``.

        An empty ``sep`` yields the stream in chunks, each at offset 0.
        """
        self._source()
        separator = _as_bytes(sep)
        if len(separator) == 1:
            yield from self.split_chars(separator)
            return
        if not separator:
            while chunk := self.read(_SPLIT_CHUNK):
                yield 0, chunk
            return
        offset = 0
        pending = bytearray()
        while True:
            found = pending.find(separator)
            if found >= 0:
                step = found + len(separator)
                piece = BString(pending[:found])
                del pending[:step]
                yield offset, piece
                offset += step
            else:
                pending += bytes(self.read(_SPLIT_CHUNK))
                if self.eof():
                    yield offset, BString(pending)
                    return