# cstrkit

Character tests, byte-buffer helpers and string utilities that behave like
the familiar C library routines (`strlen`, `strlcpy`, `memmove`, `atoi`,
`split`, `itoa`, ...), exposed with Python data types.

Strings may be `str` or bytes-like objects. As in C, a NUL character (or
zero byte) ends a string: anything after it is ignored. Where the C routines
return pointers, these functions return indexes, and `None` where nothing is
found. Requests that reach past the end of a buffer raise `ValueError`.

## Installation

```
pip install cstrkit
```

To run the test suite:

```
pip install "cstrkit[test]"
pytest
```

## Modules

- `cstrkit.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_upper`, `to_lower`. Each takes an integer code or a
  one-character string; only ASCII ranges are recognised, and the case
  converters return the same type they were given.
- `cstrkit.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc` working on `bytearray` and other buffer-protocol
  objects. `calloc` returns a zero-filled `bytearray` and raises
  `OverflowError` when the total size exceeds the 64-bit size range.
- `cstrkit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `atoi`. `strlcpy` and `strlcat` write
  into a writable byte buffer; `atoi` wraps its result to a signed 32-bit
  integer.
- `cstrkit.output`: `put_char_fd`, `put_str_fd`, `put_endl_fd`,
  `put_nbr_fd` write to an open file descriptor. Text is written in UTF-8.
- `cstrkit.transform`: `substr`, `strjoin`, `strtrim`, `split`,
  `word_count`, `itoa`, `strmapi`, `striteri`. Results are of the same kind
  as the input: text gives `str`, bytes-like input gives `bytes`.

## Examples

```python
from cstrkit.strings import atoi, strncmp, strchr
from cstrkit.transform import split, itoa, strtrim
from cstrkit.memory import calloc, memmove

atoi("  -42abc")              # -42
strncmp("abc", "abd", 2)      # 0
strchr("hello", "l")          # 2
split("to be , or not", " ")  # ['to', 'be', ',', 'or', 'not']
itoa(-2147483648)             # '-2147483648'
strtrim("xxhixx", "x")        # 'hi'

buf = calloc(4, 2)            # bytearray of 8 zero bytes
memmove(buf, b"abcd", 4)      # bytearray(b'abcd\x00\x00\x00\x00')
```

```python
import sys
from cstrkit.output import put_endl_fd, put_nbr_fd

put_nbr_fd(-123, sys.stdout.fileno())
put_endl_fd("", sys.stdout.fileno())
```

## What it does not do

cstrkit is a library only: it has no command-line program. Its classifiers
and case converters know only ASCII.