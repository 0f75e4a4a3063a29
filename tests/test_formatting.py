import pytest

from bstrkit.bstring import BString, BStringError
from bstrkit.formatting import format_append, format_assign, format_bytes


def test_format_bytes_with_str_format():
    assert format_bytes("%s:%s", "abc", "def") == b"abc:def"


def test_format_bytes_with_integer():
    assert format_bytes("%d", 42) == b"42"


def test_format_bytes_with_bytes_format_and_str_arg():
    assert format_bytes(b"<%s>", "inner") == b"<inner>"


def test_format_bytes_accepts_bstring_argument():
    assert format_bytes("%s", BString(b"value")) == b"value"


def test_format_bytes_truncates_at_nul():
    assert format_bytes("ab%sc", "\x00") == b"ab"


def test_format_bytes_no_args():
    assert format_bytes("plain text") == b"plain text"


def test_format_bytes_returns_independent_bstring():
    result = format_bytes("%s", "x")
    result.concat(b"y")
    assert result == b"xy"


def test_format_bytes_bad_format_raises():
    with pytest.raises(BStringError):
        format_bytes("%d", "not a number")


def test_format_bytes_too_few_args_raises():
    with pytest.raises(BStringError):
        format_bytes("%s %s", "one")


def test_format_bytes_none_raises():
    with pytest.raises(BStringError):
        format_bytes(None)


def test_format_append():
    b = BString(b"start-")
    format_append(b, "%s", "end")
    assert b == b"start-end"


def test_format_append_is_concat_of_format():
    b = BString(b"head")
    format_append(b, "%s/%s", "a", "b")
    assert bytes(b) == b"head" + bytes(format_bytes("%s/%s", "a", "b"))


def test_format_assign_overwrites():
    b = BString(b"old contents")
    format_assign(b, "%s", "new")
    assert b == b"new"


def test_format_assign_error_leaves_string_unchanged():
    b = BString(b"keep")
    with pytest.raises(BStringError):
        format_assign(b, "%d", "bad")
    assert b == b"keep"


def test_format_append_rejects_non_bstring():
    with pytest.raises(TypeError):
        format_append(bytearray(b"x"), "%s", "y")