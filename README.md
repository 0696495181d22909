# ftkit

A small library of everyday helpers for characters, byte buffers, strings,
linked lists, scoped object tracking, line reading and printf-style
formatting. It has no dependencies beyond the standard library.

## Modules

- `ftkit.chars`: classification and case mapping of single ASCII characters:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`. Each accepts a one-character string or an integer code point;
  the case converters return the same kind they were given.
- `ftkit.memory`: operations on `bytearray`/`bytes` buffers: `memset`,
  `bzero`, `calloc`, `memchr` (returns an index or `None`), `memcmp`,
  `memcpy`, and `memmove` (copies within one buffer between two offsets,
  overlap allowed). Lengths beyond a buffer raise `ValueError`.
- `ftkit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `atoi`, `itoa`. Positions are returned as
  indices, a missing match as `None`. `strlcpy` and `strlcat` return a tuple
  of the resulting string and the length that would have been produced.
  `atoi` stops at the first non-digit and wraps its result to a 32-bit
  signed integer.
- `ftkit.transform`: `substr`, `strjoin`, `strtrim`, `split` (drops empty
  pieces), `strmapi`, and `striteri` (calls a function on each element of a
  mutable sequence of characters, replacing it when the function returns a
  character).
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`. The
  target is a text stream with a `write` method or an integer file
  descriptor (written UTF-8 encoded).
- `ftkit.lists`: `LinkedList`, a singly linked list of `Node` objects with
  `push_front`, `push_back`, `last`, `clear`, `iterate`, `map`, `len()` and
  iteration.
- `ftkit.memscope`: `ScopeRegistry`, which keeps objects under numbered
  scopes (`MAIN_SCOPE` is 1). Objects added with a `reference` to an object
  already in the scope join its group. Methods: `allocate`, `add`, `free`,
  `purge`, `free_object`, `move`, `merge`, `scopes`, `objects`. An optional
  `on_release` callback receives each object the registry lets go of.
- `ftkit.reader`: `LineReader`, which reads lines (newline kept) from a file
  descriptor or file object in chunks of `buffer_size` (default 10), and
  `get_next_line(fd)`, which keeps one reader per descriptor between calls
  and returns `None` at end of input.
- `ftkit.formatting`: `sprintf` and `printf` for `%c %s %p %d %i %u %x %X %%`
  with the `-`, `0`, `#`, `+`, space, width and precision flags, plus
  `parse_flags` and the `FormatFlags` dataclass. `printf` writes to standard
  output or the given `stream` and returns the number of characters written.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.strings import atoi, itoa
from ftkit.transform import split, strtrim
from ftkit.formatting import sprintf

atoi("   -42abc")                 # -42
itoa(-2147483648)                 # "-2147483648"
split("  a b  c ", " ")           # ["a", "b", "c"]
strtrim("xxhixx", "x")            # "hi"
sprintf("[%-5d|%05x]", 42, 255)   # "[42   |000ff]"
```

```python
from ftkit.lists import LinkedList

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
list(items)                  # [0, 1, 2]
len(items)                   # 3
```

```python
from ftkit.memscope import ScopeRegistry

registry = ScopeRegistry(on_release=print)
table = registry.add({}, scope=2)
registry.add("row", scope=2, reference=table)
registry.merge(2, 1)
registry.objects(1)          # [{}, "row"]
registry.purge()             # prints {} and row
```

```python
import os
from ftkit.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line, end="")
os.close(fd)
```

## What it does not do

ftkit is a library only: it installs no command-line program. `ScopeRegistry`
tracks ownership and reports releases through its callback; it does not
manage Python's own memory.

## Running the tests

```
pip install .[test]
pytest
```