"""printf-style formatting into byte strings."""

from __future__ import annotations

from typing import Any, Union

from .bstring import BString, BStringError, _as_bytes

Format = Union[str, bytes, bytearray, memoryview, BString]


def _prepare_args(args: tuple[Any, ...], as_bytes: bool) -> tuple[Any, ...]:
    if as_bytes:
        return tuple(
            _as_bytes(arg) if isinstance(arg, (str, BString)) else arg
            for arg in args
        )
    return tuple(str(arg) if isinstance(arg, BString) else arg for arg in args)


def _render(fmt: Format, args: tuple[Any, ...]) -> bytes:
    if fmt is None:
        raise BStringError("no format given")
    try:
        if isinstance(fmt, str):
            text = fmt % _prepare_args(args, as_bytes=False)
            result = text.encode("utf-8", "surrogateescape")
        else:
            result = _as_bytes(fmt) % _prepare_args(args, as_bytes=True)
    except (TypeError, ValueError, KeyError) as exc:
        raise BStringError(f"cannot format {fmt!r}: {exc}") from exc
    # Output stops at the first NUL produced, as a C string would.
    return result.split(b"\x00", 1)[0]


def format_bytes(fmt: Format, *args: Any) -> BString:
    """Return a new string formatted from ``fmt`` and ``args``.

    Output is cut at the first NUL byte the formatting produces.
    """
    return BString(_render(fmt, args))


def format_append(b: BString, fmt: Format, *args: Any) -> None:
    """Append the formatted result to ``b``."""
    if not isinstance(b, BString):
        raise TypeError(f"expected a BString, got {type(b).__name__}")
    b.concat(_render(fmt, args))


def format_assign(b: BString, fmt: Format, *args: Any) -> None:
    """Replace the contents of ``b`` with the formatted result."""
    if not isinstance(b, BString):
        raise TypeError(f"expected a BString, got {type(b).__name__}")
    b.assign(_render(fmt, args))