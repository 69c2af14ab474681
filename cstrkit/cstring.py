"""NUL-terminated string routines over ``str`` and ``bytes`` values.

A string is read up to its first NUL character, as a C string would be.
Functions that would return a pointer into the string return an index
instead, or ``None`` where no match exists.

The copy and concatenate routines treat ``dest`` as a buffer. They return
its new contents: the bytes they write, followed by whatever ``dest``
already held beyond them. A ``dest`` that is too short grows as needed.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional, TypeVar, Union

__all__ = [
    "strlen",
    "strcat",
    "strncat",
    "strchr",
    "strrchr",
    "strcmp",
    "strncmp",
    "strcpy",
    "strncpy",
    "strcspn",
    "strspn",
    "strpbrk",
    "strstr",
    "Tokenizer",
    "tokenize",
]

Text = TypeVar("Text", str, bytes)
CharLike = Union[int, str, bytes]


def _nul(s: Text) -> Text:
    """Return the terminator matching the kind of ``s``."""
    if isinstance(s, str):
        return "\0"
    if isinstance(s, bytes):
        return b"\0"
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def _cstr(s: Text) -> Text:
    return s.partition(_nul(s))[0]


def _same_kind(a: Text, b: Text) -> None:
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("cannot mix str and bytes arguments")


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("size must not be negative")


def _as_char(s: Text, c: CharLike) -> Text:
    """Return ``c`` as a one-character value of the same kind as ``s``."""
    if isinstance(c, int):
        code = c & 0xFF
        return chr(code) if isinstance(s, str) else bytes([code])
    _same_kind(s, c)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _codes(s: Text) -> Iterator[int]:
    """Yield the character codes of the C string ``s``, then the terminator."""
    if isinstance(s, str):
        yield from map(ord, s)
    else:
        yield from s
    yield 0


def _overlay(buffer: Text, start: int, data: Text) -> Text:
    return buffer[:start] + data + buffer[start + len(data):]


def strlen(s: Text) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strcpy(dest: Text, src: Text) -> Text:
    """Copy ``src`` and its terminator to the start of ``dest``."""
    _same_kind(dest, src)
    return _overlay(dest, 0, _cstr(src) + _nul(dest))


def strncpy(dest: Text, src: Text, n: int) -> Text:
    """Copy at most ``n`` characters of ``src``, padding with NULs up to ``n``."""
    _same_kind(dest, src)
    _check_size(n)
    field = _cstr(src)[:n]
    field += _nul(dest) * (n - len(field))
    return _overlay(dest, 0, field)


def strcat(dest: Text, src: Text) -> Text:
    """Append ``src`` to the C string held in ``dest``."""
    _same_kind(dest, src)
    return _overlay(dest, strlen(dest), _cstr(src) + _nul(dest))


def strncat(dest: Text, src: Text, n: int) -> Text:
    """Append at most ``n`` characters of ``src``; ``n == 0`` leaves ``dest`` as is."""
    _check_size(n)
    if n == 0:
        return dest
    _same_kind(dest, src)
    return _overlay(dest, strlen(dest), _cstr(src)[:n] + _nul(dest))


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _as_char(s, c)
    if ch == _nul(s):
        return len(text)
    index = text.find(ch)
    return index if index >= 0 else None


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _as_char(s, c)
    if ch == _nul(s):
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def _compare(s1: Text, s2: Text, limit: Optional[int]) -> int:
    _same_kind(s1, s2)
    pairs = zip(_codes(_cstr(s1)), _codes(_cstr(s2)))
    for a, b in islice(pairs, limit):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strcmp(s1: Text, s2: Text) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return _compare(s1, s2, None)


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_size(n)
    return _compare(s1, s2, n)


def _span(s: Text, chars: Text, inside: bool) -> int:
    _same_kind(s, chars)
    text = _cstr(s)
    charset = set(_cstr(chars))
    for index, ch in enumerate(text):
        if (ch in charset) != inside:
            return index
    return len(text)


def strcspn(s: Text, reject: Text) -> int:
    """Length of the leading part of ``s`` holding no character of ``reject``."""
    return _span(s, reject, inside=False)


def strspn(s: Text, accept: Text) -> int:
    """Length of the leading part of ``s`` made only of characters of ``accept``."""
    return _span(s, accept, inside=True)


def strpbrk(s: Text, accept: Text) -> Optional[int]:
    """Index of the first character of ``s`` found in ``accept``."""
    index = strcspn(s, accept)
    return index if index < strlen(s) else None


def strstr(haystack: Text, needle: Text) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle matches at 0."""
    _same_kind(haystack, needle)
    index = _cstr(haystack).find(_cstr(needle))
    return index if index >= 0 else None


class Tokenizer:
    """Splits a string into tokens; each call may use a different delimiter set."""

    def __init__(self, text: Text) -> None:
        self._rest: Optional[Text] = _cstr(text)

    def next_token(self, delim: Text) -> Optional[Text]:
        """Return the next token, or ``None`` once the text is used up."""
        rest = self._rest
        if rest is None:
            return None
        _same_kind(rest, delim)
        rest = rest[strspn(rest, delim):]
        if not rest:
            self._rest = None
            return None
        end = strcspn(rest, delim)
        self._rest = rest[end + 1:]
        return rest[:end]


def tokenize(text: Text, delim: Text) -> Iterator[Text]:
    """Yield every token of ``text`` separated by characters of ``delim``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delim)) is not None:
        yield token