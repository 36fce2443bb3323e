# ftkit

A small, dependency-free toolkit of classic low-level helpers with Pythonic
interfaces. Searches return an index or `None` instead of a pointer, and
bounded copies return the resulting text together with a length.

- `ftkit.chars`: ASCII character tests and case conversion (`is_alnum`,
  `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`). Each takes an
  integer code or a one-character string; `to_lower` returns the same type it
  was given.
- `ftkit.memory`: byte-buffer operations on `bytearray` and `bytes`
  (`memset`, `bzero`, `memcpy`, `memchr`, `memcmp`, `calloc`, `realloc`).
  `memmove(buf, dest, src, n)` copies between two offsets of one buffer,
  with overlapping regions handled correctly. Byte counts that are negative
  or run past a buffer raise `ValueError`.
- `ftkit.strings`: searching and comparing strings (`strlen`, `strchr`,
  `strrchr`, `strchrlen`, `strcmp`, `strncmp`, `strnstr`, `strstr`),
  bounded copying (`strlcpy`, `strlcat`, both returning `(text, length)`),
  and `getenv(name, env)` for looking up a name in a list of `NAME=VALUE`
  entries.
- `ftkit.transform`: building new strings (`strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, `strdelchar`) and `striteri`, which calls a
  function on every position of a mutable list of characters.
- `ftkit.numbers`: `atoi`, `itoa` and `int_sqrt`, which returns the largest
  `m` with `m * (m + 1) <= nb` (one below the exact root of a perfect square).
- `ftkit.arrays`: helpers for string lists that end at the first `None`
  (`arrdup`, `arrlen`, `resize`).
- `ftkit.output`: a minimal printf supporting `%c %s %p %d %i %u %x %X %%`
  (`format_printf` returns the text, `printf` writes it to standard output
  and returns its length) and stream writers (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`) that write to any text stream.
- `ftkit.linked_list`: `IntList`, a doubly linked list of integers built from
  `Node` objects, with `push_back`, `push_front`, `last`, `is_ordered`,
  `has_duplicates`, `assign_indexes`, `max_index_node`, `for_each`, `map`
  and `clear`. Iterating an `IntList` yields its values; the nodes are
  reachable from its `head` attribute.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.transform import split, strtrim
from ftkit.numbers import atoi, itoa
from ftkit.output import format_printf
from ftkit.strings import strlcpy
from ftkit.linked_list import IntList

split("  hello   world ", " ")        # ['hello', 'world']
strtrim("xxhixx", "x")                # 'hi'
strlcpy("hello", 3)                   # ('he', 5)
atoi("   -42abc")                     # -42
itoa(-7)                              # '-7'
format_printf("%s=%d (%x)", "n", 255, 255)   # 'n=255 (ff)'

numbers = IntList([3, 1, 2])
numbers.is_ordered()                  # False
numbers.assign_indexes()              # [2, 0, 1]
numbers.max_index_node().value        # 3
list(numbers.map(lambda v: v * 10))   # [30, 10, 20]
```

## Running the tests

```
pip install .[test]
pytest
```