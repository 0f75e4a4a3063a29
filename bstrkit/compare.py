"""Ordering and equality checks between byte strings."""

from __future__ import annotations

from .bstring import BStringError, BytesLike, _as_bytes

_UCHAR_SPAN = 256


def _signed(byte: int) -> int:
    """Interpret a byte value as a signed char."""
    return byte - 256 if byte >= 128 else byte


def _lower(byte: int) -> int:
    """Lower-case a single ASCII letter, leaving other bytes alone."""
    return byte + 32 if 65 <= byte <= 90 else byte


def compare(a: BytesLike, b: BytesLike) -> int:
    """Compare like ``strcmp``: stop at the first NUL, shorter sorts first.

    The result is the signed difference of the first differing bytes, or
    ``1``/``-1`` when one string is a proper prefix of the other.
    """
    x, y = _as_bytes(a), _as_bytes(b)
    if len(x) == len(y) and (x is y or not x):
        return 0
    for cx, cy in zip(x, y):
        diff = _signed(cx) - _signed(cy)
        if diff:
            return diff
        if cx == 0:
            return 0
    if len(x) > len(y):
        return 1
    if len(y) > len(x):
        return -1
    return 0


def compare_n(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare as :func:`compare` would after cutting both to ``n`` bytes."""
    x, y = _as_bytes(a), _as_bytes(b)
    m = min(n, len(x), len(y))
    for cx, cy in zip(x[:max(m, 0)], y[:max(m, 0)]):
        diff = _signed(cx) - _signed(cy)
        if diff:
            return diff
        if cx == 0:
            return 0
    if n == m or len(x) == len(y):
        return 0
    return 1 if len(x) > m else -1


def _tail_difference(x: bytes, y: bytes, m: int) -> int:
    if len(x) > m:
        value = _signed(_lower(x[m]))
        return value if value else _UCHAR_SPAN
    value = -_signed(_lower(y[m]))
    return value if value else -_UCHAR_SPAN


def compare_caseless(a: BytesLike, b: BytesLike) -> int:
    """Compare ignoring ASCII case.

    Returns the difference of the first differing lower-cased bytes. When
    one string is longer, its first extra byte decides; a NUL there counts
    as 256.
    """
    x, y = _as_bytes(a), _as_bytes(b)
    n = min(len(x), len(y))
    for cx, cy in zip(x[:n], y[:n]):
        diff = _signed(_lower(cx)) - _signed(_lower(cy))
        if diff:
            return diff
    if len(x) == len(y):
        return 0
    return _tail_difference(x, y, n)


def compare_n_caseless(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare at most ``n`` bytes ignoring ASCII case.

    Where the bytes first differ beyond case, the raw byte difference is
    returned. Raises :class:`BStringError` for a negative ``n``.
    """
    if n < 0:
        raise BStringError(f"negative length: {n}")
    x, y = _as_bytes(a), _as_bytes(b)
    m = min(n, len(x), len(y))
    for cx, cy in zip(x[:m], y[:m]):
        if _lower(cx) != _lower(cy):
            return cx - cy
    if n == m or len(x) == len(y):
        return 0
    return _tail_difference(x, y, m)


def equal(a: BytesLike, b: BytesLike) -> bool:
    """Return whether both hold exactly the same bytes."""
    return _as_bytes(a) == _as_bytes(b)


def equal_caseless(a: BytesLike, b: BytesLike) -> bool:
    """Return whether both hold the same bytes apart from ASCII case."""
    return _as_bytes(a).lower() == _as_bytes(b).lower()


def is_stem(a: BytesLike, prefix: BytesLike) -> bool:
    """Return whether ``a`` begins with ``prefix``."""
    return _as_bytes(a).startswith(_as_bytes(prefix))


def is_stem_caseless(a: BytesLike, prefix: BytesLike) -> bool:
    """Return whether ``a`` begins with ``prefix``, ignoring ASCII case."""
    x, p = _as_bytes(a), _as_bytes(prefix)
    if len(x) < len(p):
        return False
    return x[:len(p)].lower() == p.lower()


def _cstr(s: BytesLike) -> bytes:
    return _as_bytes(s).split(b"\x00", 1)[0]


def equal_cstr(b: BytesLike, s: BytesLike) -> bool:
    """Return whether ``b`` equals the NUL-terminated string ``s``.

    A ``b`` holding a NUL byte never matches.
    """
    return _as_bytes(b) == _cstr(s)


def equal_cstr_caseless(b: BytesLike, s: BytesLike) -> bool:
    """As :func:`equal_cstr`, ignoring ASCII case."""
    return _as_bytes(b).lower() == _cstr(s).lower()