# mxlib

A small collection of everyday helpers:

- **`mxlib.chars`**: ASCII character classes: `is_space`, `is_alpha` and `is_digit`. Each takes a one-character string and raises `TypeError` or `ValueError` for anything else.
- **`mxlib.numbers`**: `atoi` (leading decimal integer after whitespace and one optional sign; no digits gives 0), `itoa`, `digits_num` (number of characters in the decimal form, sign included), `nbr_to_hex` (lowercase hex of an unsigned 64-bit number), `hex_to_nbr` (either case, no prefix; raises `ValueError` on a non-hex character and wraps to 64 bits), `power` (non-negative integer exponent, returns a float) and `exact_sqrt` (the root of a perfect square, otherwise 0).
- **`mxlib.strings`**: comparison (`strcmp`, `strncmp`, returning the code-point difference at the first mismatch), searching (`strstr`, `find_char`, `find_substr`, `count_substr`), words (`count_words`, `strsplit`, which drops empty pieces), cleanup (`strtrim`, `del_extra_spaces`), plus `strjoin`, `replace_substr` and `str_reverse`.
- **`mxlib.memory`**: byte-buffer helpers `memcmp`, `memchr`, `memrchr`, `memmem` and `memccpy`. Searches return an index or `None`; `memchr` and `memmem` stop at the first zero byte.
- **`mxlib.sorting`**: `binary_search` (returns `(index, steps)`, or `(-1, 0)` when absent), `bubble_sort` (sorts in place, returns the number of swaps) and `quicksort` (sorts a slice in place by string length, returns the number of partitioning passes).
- **`mxlib.linked_list`**: `LinkedList`, a singly linked list with `push_front`, `push_back`, `pop_front` and `pop_back` (pops return the removed value, or `None` when empty), `sort(cmp)`, `len()` and iteration.
- **`mxlib.output`**: `encode_utf8` and the writers `print_char`, `print_unicode`, `print_str`, `print_strarr`, `print_int` and `print_err`. They write bytes to a binary stream you pass, or by default to standard output (standard error for `print_err`).
- **`mxlib.files`**: `file_to_str` reads a whole UTF-8 file, returning `None` for an empty one; a file that cannot be opened raises `OSError`.

## Installation

```
pip install .
```

## Examples

```python
from mxlib.numbers import atoi, nbr_to_hex, hex_to_nbr
from mxlib.strings import strsplit, del_extra_spaces, replace_substr
from mxlib.linked_list import LinkedList

atoi("  -42abc")                        # -42
nbr_to_hex(255)                         # "ff"
hex_to_nbr("FF")                        # 255
strsplit("**a*bc**d*", "*")             # ["a", "bc", "d"]
del_extra_spaces("  hello \t  world ")  # "hello world"
replace_substr("a-b-c", "-", "+")       # "a+b+c"

lst = LinkedList([3, 1, 2])
lst.push_front(0)
lst.sort(lambda a, b: a > b)            # swaps neighbours while cmp is true
list(lst)                               # [0, 1, 2, 3]
```

The output helpers write bytes, so give them a binary stream:

```python
import io
from mxlib.output import print_strarr, encode_utf8

buf = io.BytesIO()
print_strarr(["a", "b", "c"], ", ", buf)
buf.getvalue()                          # b"a, b, c\n"

encode_utf8(0x20AC)                     # b"\xe2\x82\xac"
```

## What it does not do

mxlib is a library only: it has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```