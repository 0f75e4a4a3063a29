# bstrkit

A small toolkit for working with mutable byte strings, with no dependencies
beyond the standard library.

## What is in it

- `bstrkit.bstring.BString` is a mutable byte string that may hold NUL bytes.
  It accepts `bytes`, `bytearray`, `memoryview`, `str` (UTF-8) or another
  `BString`. Methods: `copy`, `assign`, `assign_mid`, `mid`, `concat`,
  `append_char`, `insert`, `insert_char`, `replace`, `delete`, `set_str`,
  `truncate`, `pattern`, `upper`, `lower`, `ltrim`, `rtrim`, `trim`,
  `to_cstr` and `char_at`. `mid`, `assign_mid` and `delete` clamp positions
  and lengths to the string's ends; `insert`, `insert_char`, `replace` and
  `set_str` pad with a fill byte when the position lies past the end.
  Invalid arguments raise `BStringError` (a `ValueError`).
- `bstrkit.compare` holds ordering and equality checks: `compare`,
  `compare_n`, `compare_caseless`, `compare_n_caseless`, `equal`,
  `equal_caseless`, `is_stem`, `is_stem_caseless`, `equal_cstr` and
  `equal_cstr_caseless`. The `compare*` functions return signed byte
  differences in the manner of `strcmp`; case folding is ASCII only.
- `bstrkit.search` holds forward and backward substring searches, with and
  without case (`find`, `rfind`, `find_caseless`, `rfind_caseless`),
  searches for a single byte or a set of bytes (`find_char`, `rfind_char`,
  `find_any`, `rfind_any`, `find_none`, `rfind_none`), and in-place
  find-and-replace (`find_replace`, `find_replace_caseless`), which returns
  the number of replacements made. Searches return `-1` when nothing is found.
- `bstrkit.split` splits on a byte, on any of a set of bytes or on a whole
  separator (`split`, `split_any`, `split_str`). The lazy forms
  `iter_split`, `iter_split_any` and `iter_split_str` yield
  `(offset, piece)` pairs. `join` puts parts back together.
- `bstrkit.formatting` builds byte strings from `%`-style formats:
  `format_bytes`, `format_append`, `format_assign`. Output is cut at the
  first NUL byte it contains.
- `bstrkit.streams` reads from any `read(n)`-style callable. `read_all`
  reads everything; `gets` reads byte by byte from a `getc()`-style callable
  up to and including a terminator, returning `None` when nothing was read.
  `BStream` is a buffered reader with `read_line`, `read_line_any`, `read`,
  `unread`, `peek`, `eof`, `buffer_length`, `split_chars` and `split_str`;
  it works as a context manager and `close` hands back the wrapped reader.
- `bstrkit.db.PackageDB` keeps a plain-text list of package URLs, one per
  line, in a file named `db` inside a directory (by default
  `/usr/local/.devpkg`). It has `init`, `load`, `list`, `find` and `update`;
  `find` reports whether the URL appears anywhere in the file. Failures to
  read or write raise `DatabaseError` (an `OSError`).

## Installation

```
pip install .
```

## Example

```python
from bstrkit.bstring import BString
from bstrkit.search import find, find_replace
from bstrkit.split import split, join

s = BString(b"  hello, world  ")
s.trim()
assert bytes(s) == b"hello, world"

assert find(s, 0, BString(b"world")) == 7

find_replace(s, BString(b"o"), BString(b"0"), 0)
assert bytes(s) == b"hell0, w0rld"

parts = split(BString(b"a,b,,c"), b",")
assert [bytes(p) for p in parts] == [b"a", b"b", b"", b"c"]
assert bytes(join(parts, BString(b"-"))) == b"a-b--c"
```

Reading lines from a stream:

```python
import io
from bstrkit.streams import BStream

with BStream(io.BytesIO(b"one\ntwo\n").read) as stream:
    assert bytes(stream.read_line(b"\n")) == b"one\n"
    assert bytes(stream.read_line(b"\n")) == b"two\n"
```

Keeping a record of installed packages:

```python
from bstrkit.db import PackageDB

db = PackageDB("/tmp/pkgdb")
db.init()
db.update("https://example.com/pkg.tar.gz")
assert db.find("https://example.com/pkg.tar.gz")
```

## What it does not do

There is no command-line program. `PackageDB` only records URLs: nothing in
the package downloads, unpacks, builds or installs packages, or works through
a list of dependencies.

## Running the tests

```
pip install .[test]
pytest
```