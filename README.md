# firebbs

Library pieces of a Firebird-style bulletin board system, written in plain
Python with no third-party dependencies.

## What is inside

- `firebbs.md5`: an incremental MD5 hash with a hashlib-like interface
  (`MD5` with `update`, `copy`, `digest`, `hexdigest`; and `md5(data)`).
- `firebbs.printf_spec`: parsing of printf directives into
  `ConversionSpec` objects (`parse_conversion(fmt, pos)`,
  `tokenize(fmt)`).
- `firebbs.printf`: a C99-style formatter for `s c d i u o x X p`
  (and the synonyms `D U O`). It handles the flags `- + space 0 #`,
  `*` widths and precisions, and `h`/`l`/`ll` length modifiers:
  `sprintf(fmt, *args)`, `vformat(fmt, args)` and
  `snprintf(size, fmt, *args)`. The last returns the stored text and the
  full length. A directive with an unknown conversion character is dropped
  and the character itself is kept.
- `firebbs.stringlist`: `StringList`, which keeps strings in numbered slots
  that stay stable when others are removed. It offers `add`, `remove`,
  `clear`, `next`, `prev`, `len()` and iteration. `load(path)` reads
  non-empty lines from a file and `save(path)` writes one string per line.
- `firebbs.readmarks`: the per-user `.boardrc` read-mark file.
  `parse_boardrc` and `dump_boardrc` convert between bytes and `BrcRecord`
  lists. `ReadState` holds one board's marks and provides `locate`,
  `insert`, `unread_time`, `unread`, `add_filename`, `clear` and `merged`.
  `load_read_state` and `save_read_state` work on files.
- `firebbs.ads`: the advertisement file of `href,img_src` lines. It
  provides `Ad`, `read_ads`, `write_ads`, `parse_ad_update` (splits the
  `;`-separated fields of an update) and `format_click_log`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from firebbs.md5 import md5
from firebbs.printf import sprintf, snprintf

md5(b"abc").hexdigest()                    # '900150983cd24fb0d6963f7d28e17f72'

sprintf("%-6s|%05d|%#x", "id", 42, 255)    # 'id    |00042|0xff'
snprintf(4, "%s", "truncated")             # ('tru', 9)
```

Keeping a list of strings in a file:

```python
from firebbs.stringlist import StringList

names = StringList()
names.add("alice")
names.add("bob")
names.remove(0)
names.add("carol")        # fills slot 0 again
names.save("names.txt")
```

Reading and updating the read marks for a board:

```python
from firebbs.readmarks import load_read_state, save_read_state

state = load_read_state("home/G/guest/.boardrc", "sysop")
if state.unread("M.1000000000.A"):
    state.add_filename("M.1000000000.A")
save_read_state(state, "home/G/guest/.boardrc")
```

## What it does not do

This package is a set of helper pieces, not a running board. It has no
server, web pages or terminal screens. It does not store users or
articles. It does not hash passwords: only plain MD5 digests are
provided. It offers no user permission checks.