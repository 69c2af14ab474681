# cstrkit

This package provides the familiar C `string.h` routines and an
`sscanf`-style integer scanner. Both work on ordinary Python `str` and
`bytes` values.

## Installation

    pip install cstrkit

## String helpers

`cstrkit.cstring` provides `strlen`, `strcpy`, `strncpy`, `strcat`,
`strncat`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strspn`, `strcspn`,
`strpbrk` and `strstr`. A string ends at its first NUL character, as it
would in C. Where C would return a pointer, these functions return an
index, or `None` where C would return a null pointer. Every argument must
be `str` or every argument must be `bytes`. Mixing the two raises
`TypeError`. A negative size raises `ValueError`.

```python
from cstrkit.cstring import strlen, strchr, strstr, strspn, strcmp, strncpy

strlen("abc\0def")                      # 3
strchr("abvdefg", "d")                  # 3
strchr("abvdefg", "\0")                 # 7, the terminator
strstr("planet Earth", "et ")           # 4
strspn("123456789 asdda", "987654321")  # 9
strcmp("abc", "abd") < 0                # True
strncpy("adsadsadasdaasa", "asd", 5)    # 'asd\x00\x00dasdaasa'
```

`strchr` and `strrchr` accept the character as a one-character string, or
as an integer code that is reduced modulo 256.

`strcpy`, `strncpy`, `strcat` and `strncat` treat `dest` as a buffer and
return its new contents. The result holds the characters written, then
whatever `dest` already held beyond them. The arguments themselves are
never changed.

## Tokenizing

In C, `strtok` keeps hidden state between calls. Here that state lives in a
`Tokenizer` object, so each call can use its own delimiters:

```python
from cstrkit.cstring import Tokenizer, tokenize

tok = Tokenizer("hello man! how,are ,you.")
tok.next_token(" !")   # 'hello'
tok.next_token(".,")   # 'man! how'

list(tokenize("hello man how are you", " "))
# ['hello', 'man', 'how', 'are', 'you']
```

When the text is used up, `next_token` returns `None`.

## Scanning integers

`cstrkit.scan.sscanf(text, fmt)` reads values as C `sscanf` does. It
supports these conversions:

- `%d %i %o %x %X %p` for integers,
- `%c` for characters,
- `%n` for the position reached so far,
- `%%` for a literal percent sign.

Each conversion may carry a `*` to skip its value, a field width, and one
of the length modifiers `hh h l ll L`. Converted values are returned, not
stored. Each integer is wrapped to the range of the C type that its length
modifier names.

```python
from cstrkit.scan import sscanf

result = sscanf("123 0x7f", "%d %i")
result.count    # 2
result.values   # (123, 127)
a, b = result   # a ScanResult iterates over its values
```

`ScanResult.count` is the number of assigned conversions. When the input
runs out before anything was assigned, `count` is `-1` and `result.eof` is
`True`. `%n` values appear in `values` but are not counted. A mismatch
stops the scan quietly and keeps what was assigned up to that point.

## Limitations

`sscanf` does not read floating-point numbers or strings. A malformed
directive raises `ValueError`, and so does any of the conversions
`e E f g G s u`. The package has no formatted-output (`sprintf`-style)
counterpart.