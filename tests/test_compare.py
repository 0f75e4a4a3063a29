import pytest

from bstrkit.bstring import BString, BStringError
from bstrkit.compare import (
    compare,
    compare_caseless,
    compare_n,
    compare_n_caseless,
    equal,
    equal_caseless,
    equal_cstr,
    equal_cstr_caseless,
    is_stem,
    is_stem_caseless,
)


def test_compare_equal_strings():
    assert compare(BString(b"hello"), b"hello") == 0
    assert compare(b"", b"") == 0


def test_compare_ordering_and_antisymmetry():
    assert compare(b"abc", b"abd") < 0
    assert compare(b"abd", b"abc") > 0
    assert compare(b"abc", b"abd") == -compare(b"abd", b"abc")


def test_compare_returns_byte_difference():
    assert compare(b"a", b"c") == ord("a") - ord("c")


def test_compare_prefix_length_rule():
    assert compare(b"ab", b"abc") == -1
    assert compare(b"abc", b"ab") == 1


def test_compare_stops_at_nul():
    assert compare(b"a\x00x", b"a\x00y") == 0


def test_compare_high_bytes_are_signed():
    assert compare(b"\x80", b"a") < 0


def test_compare_n():
    assert compare_n(b"abcX", b"abcY", 3) == 0
    assert compare_n(b"abc", b"abcd", 4) == -1
    assert compare_n(b"abcd", b"abc", 4) == 1
    assert compare_n(b"abc", b"abcd", 3) == 0
    assert compare_n(b"abX", b"abY", 3) < 0


def test_compare_caseless_ignores_case():
    assert compare_caseless(b"ABC", b"abc") == 0
    assert compare_caseless(b"Apple", b"BANANA") < 0


def test_compare_caseless_nul_tail_counts_as_256():
    assert compare_caseless(b"abc\x00", b"ABC") == 256
    assert compare_caseless(b"ABC", b"abc\x00") == -256


def test_compare_caseless_longer_sorts_after():
    assert compare_caseless(b"abx", b"AB") > 0
    assert compare_caseless(b"AB", b"abx") < 0


def test_compare_n_caseless():
    assert compare_n_caseless(b"HELLO", b"help", 3) == 0
    assert compare_n_caseless(b"abc", b"ABD", 3) == ord("c") - ord("D")
    assert compare_n_caseless(b"ab\x00", b"AB", 5) == 256


def test_compare_n_caseless_rejects_negative_length():
    with pytest.raises(BStringError):
        compare_n_caseless(b"a", b"a", -1)


def test_equal():
    assert equal(BString(b"a\x00b"), b"a\x00b") is True
    assert equal(b"a\x00b", b"a\x00c") is False
    assert equal(b"ab", b"abc") is False


def test_equal_caseless():
    assert equal_caseless(b"Hello", b"hELLO") is True
    assert equal_caseless(b"Hello", b"hELLx") is False
    assert equal_caseless(b"", b"") is True


def test_is_stem():
    assert is_stem(b"devpkg", b"dev") is True
    assert is_stem(b"devpkg", b"pkg") is False
    assert is_stem(b"de", b"dev") is False
    assert is_stem(b"abc", b"") is True


def test_is_stem_caseless():
    assert is_stem_caseless(b"DevPkg", b"dEV") is True
    assert is_stem_caseless(b"DevPkg", b"dx") is False
    assert is_stem_caseless(b"D", b"dev") is False


def test_equal_cstr():
    assert equal_cstr(BString(b"abc"), b"abc") is True
    assert equal_cstr(b"abc", b"abc\x00junk") is True
    assert equal_cstr(b"ab\x00c", b"ab\x00c") is False
    assert equal_cstr(b"abc", b"abcd") is False
    assert equal_cstr(b"abc", "abc") is True


def test_equal_cstr_caseless():
    assert equal_cstr_caseless(b"ABC", b"abc") is True
    assert equal_cstr_caseless(b"ABC", b"abd") is False
    assert equal_cstr_caseless(b"A\x00", b"a\x00") is False