import pytest

from bstrkit.bstring import BString, BStringError


def test_construct_and_round_trip():
    raw = b"abc\x00def"
    b = BString(raw)
    assert len(b) == len(raw)
    assert bytes(b) == raw
    assert str(BString("héllo")) == "héllo"
    assert BString(b) == raw


def test_equality_and_hash():
    a = BString(b"same")
    b = BString(bytearray(b"same"))
    assert a == b
    assert hash(a) == hash(b)
    assert not (a == BString(b"other"))
    assert repr(a) == "BString(b'same')"


def test_copy_is_independent():
    a = BString(b"data")
    c = a.copy()
    c.concat(b"more")
    assert a == b"data"
    assert c == b"data" + b"more"


def test_assign_and_assign_mid():
    a = BString(b"old")
    a.assign(b"replacement")
    assert a == b"replacement"
    src = b"hello world"
    a.assign_mid(src, -3, 5)
    assert a == src[:2]
    a.assign_mid(src, 20, 3)
    assert a == b""


def test_mid_clamps():
    src = b"hello world"
    b = BString(src)
    assert b.mid(6, 100) == src[6:]
    assert b.mid(0, 0) == b""
    assert b.mid(-2, 4) == src[:2]
    assert b == src


def test_concat_self_and_append_char():
    b = BString(b"ab")
    b.concat(b)
    assert b == b"ab" + b"ab"
    b.append_char(ord("z"))
    b.append_char(b"y")
    assert b == b"abab" + b"z" + b"y"
    with pytest.raises(BStringError):
        b.append_char(300)


def test_insert_middle_and_past_end():
    b = BString(b"ad")
    b.insert(1, b"bc", b"?")
    assert b == b"a" + b"bc" + b"d"
    c = BString(b"ab")
    c.insert(4, b"cd", b"?")
    assert c == b"ab" + b"??" + b"cd"
    with pytest.raises(BStringError):
        c.insert(-1, b"x", b"?")


def test_insert_char():
    b = BString(b"ad")
    b.insert_char(1, 3, b"-")
    assert b == b"a" + b"---" + b"d"
    c = BString(b"ab")
    c.insert_char(3, 2, b".")
    assert c == b"ab" + b"." * 3
    with pytest.raises(BStringError):
        c.insert_char(0, -1, b".")


def test_replace_cases():
    b = BString(b"hello world")
    b.replace(0, 5, b"bye", b" ")
    assert b == b"bye" + b" world"
    b.replace(4, 100, b"all", b" ")
    assert b == b"bye " + b"all"
    c = BString(b"ab")
    c.replace(4, 1, b"z", b"*")
    assert c == b"ab" + b"**" + b"z"
    with pytest.raises(BStringError):
        c.replace(0, -2, b"z", b"*")


def test_delete_clamps():
    b = BString(b"abcdef")
    b.delete(-1, 3)
    assert b == b"cdef"
    b.delete(2, 100)
    assert b == b"cd"
    b.delete(10, 1)
    assert b == b"cd"
    with pytest.raises(BStringError):
        b.delete(0, -1)


def test_set_str():
    b = BString(b"abcdef")
    b.set_str(1, b"XY", b" ")
    assert b == b"a" + b"XY" + b"def"
    b.set_str(5, b"123", b" ")
    assert b == b"aXYde" + b"123"
    c = BString(b"a")
    c.set_str(3, None, b"_")
    assert c == b"a" + b"__"
    with pytest.raises(BStringError):
        c.set_str(-1, b"x", b"_")


def test_truncate():
    b = BString(b"abcdef")
    b.truncate(10)
    assert b == b"abcdef"
    b.truncate(3)
    assert b == b"abc"
    with pytest.raises(BStringError):
        b.truncate(-1)


def test_pattern():
    b = BString(b"ab")
    b.pattern(5)
    assert b == b"ababa"
    single = BString(b"x")
    single.pattern(4)
    assert single == b"x" * 4
    with pytest.raises(BStringError):
        BString(b"").pattern(3)
    with pytest.raises(BStringError):
        BString(b"ab").pattern(-1)


@pytest.mark.parametrize("length", [0, 1, 3, 7, 12])
def test_pattern_is_periodic(length):
    unit = b"xyz"
    b = BString(unit)
    b.pattern(length)
    data = bytes(b)
    assert len(data) == length
    assert all(data[i] == unit[i % len(unit)] for i in range(length))


def test_case_conversion():
    text = b"Hello, World! 123"
    b = BString(text)
    b.upper()
    assert b == text.upper()
    b.lower()
    assert b == text.lower()


def test_trims():
    ws = b" \t\n\r\x0b\x0c"
    core = b"x y"
    b = BString(ws + core + ws)
    b.ltrim()
    assert b == core + ws
    b.rtrim()
    assert b == core
    c = BString(ws + core + ws)
    c.trim()
    assert c == core
    d = BString(ws)
    d.trim()
    assert len(d) == 0


def test_to_cstr_and_char_at():
    b = BString(b"a\x00b")
    assert b.to_cstr(b"?") == b"a?b"
    assert b.char_at(0) == ord("a")
    assert b.char_at(5) == 0
    assert b.char_at(-1, default=-1) == -1


def test_bad_fill_rejected():
    with pytest.raises(BStringError):
        BString(b"a").insert(0, b"b", b"xy")