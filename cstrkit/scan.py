"""Formatted input: reading integers and characters out of a string.

:func:`sscanf` understands the integer conversions ``d``, ``i``, ``o``,
``x``, ``X`` and ``p``, the character conversion ``c``, ``n`` and ``%%``,
each with an optional ``*`` (assignment suppression), field width and
length modifier (``hh``, ``h``, ``l``, ``ll``, ``L``). Converted values are
returned rather than stored; each is reduced to the range of the C type its
length modifier names, as a C caller would see it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

__all__ = ["ScanResult", "Length", "sscanf"]

_SPACE = " \t\n\v\f\r"
_SPECIFIERS = "cdieEfgGosuxXpn%"
_UNSUPPORTED = "eEfgGsu"
_DIGITS = "0123456789abcdef"
_WIDTH = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")

_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1
_ULONG_MAX = (1 << 64) - 1

Value = Union[int, str]


class Length(Enum):
    """Length modifier of a conversion."""

    DEFAULT = ""
    HH = "hh"
    H = "h"
    L = "l"
    LL = "ll"
    LONG_DOUBLE = "L"

    @property
    def bits(self) -> int:
        """Width in bits of the integer type this modifier selects."""
        return {
            Length.HH: 8,
            Length.H: 16,
            Length.L: 64,
            Length.LL: 64,
        }.get(self, 32)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a scan.

    ``count`` is the number of assigned conversions, or -1 when the input
    ran out before anything was assigned. ``values`` holds what was assigned,
    including ``%n`` positions, in format order.
    """

    count: int
    values: tuple[Value, ...] = ()

    @property
    def eof(self) -> bool:
        return self.count == -1

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)


@dataclass(frozen=True)
class _Spec:
    suppressed: bool
    width: int
    length: Length
    conversion: str


class _InputFailure(Exception):
    """The input ended before the format was satisfied."""


class _MatchFailure(Exception):
    """The input did not match the format."""


def _skip_space(s: str, pos: int) -> int:
    while pos < len(s) and s[pos] in _SPACE:
        pos += 1
    return pos


def _resolve_length(found: set[Length]) -> Length:
    for candidate in (Length.LL, Length.L, Length.H, Length.HH, Length.LONG_DOUBLE):
        if candidate in found:
            return candidate
    return Length.DEFAULT


def _parse_spec(fmt: str, fpos: int) -> tuple[_Spec, int]:
    """Parse the directive starting at the ``%`` at ``fpos``."""
    fpos += 1
    suppressed = fmt.startswith("*", fpos)
    if suppressed:
        fpos += 1
    width = 0
    match = _WIDTH.match(fmt, fpos)
    if match:
        width = int(match.group())
        fpos = match.end()
    if width < 0:
        raise ValueError(f"negative field width in format {fmt!r}")
    found: set[Length] = set()
    while fpos < len(fmt) and fmt[fpos] in "hlL":
        if fmt.startswith("hh", fpos) or fmt.startswith("ll", fpos):
            found.add(Length.HH if fmt[fpos] == "h" else Length.LL)
            fpos += 2
        else:
            found.add({"h": Length.H, "l": Length.L, "L": Length.LONG_DOUBLE}[fmt[fpos]])
            fpos += 1
    if fpos >= len(fmt) or fmt[fpos] not in _SPECIFIERS:
        raise ValueError(f"malformed conversion in format {fmt!r}")
    spec = _Spec(suppressed, width, _resolve_length(found), fmt[fpos])
    return spec, fpos + 1


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _read_number(text: str, pos: int, width: int, base: int) -> Optional[tuple[int, bool, int]]:
    """Read a number's sign and magnitude; ``None`` if no digit was found."""
    limit = len(text) if width == 0 else min(len(text), pos + width)
    negative = False
    if pos < limit and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    leading_zero = False
    if pos < limit and text[pos] == "0":
        leading_zero = True
        pos += 1
        if pos < limit and text[pos] in "xX":
            if base == 0:
                base = 16
            if base == 16:
                pos += 1
        elif base == 0:
            base = 8
    if base == 0:
        base = 10
    alphabet = _DIGITS[:base]
    start = pos
    while pos < limit and text[pos].lower() in alphabet:
        pos += 1
    body = text[start:pos]
    if not body and not leading_zero:
        return None
    return (int(body, base) if body else 0), negative, pos


def _scan_integer(spec: _Spec, text: str, pos: int, base: int, signed: bool) -> tuple[int, int]:
    pos = _skip_space(text, pos)
    if pos >= len(text):
        raise _InputFailure
    number = _read_number(text, pos, spec.width, base)
    if number is None:
        raise _MatchFailure
    magnitude, negative, pos = number
    if signed:
        value = max(_LONG_MIN, min(_LONG_MAX, -magnitude if negative else magnitude))
        return _wrap(value, spec.length.bits, True), pos
    if magnitude > _ULONG_MAX:
        value = _ULONG_MAX
    else:
        value = (-magnitude if negative else magnitude) & _ULONG_MAX
    bits = 64 if spec.conversion == "p" else spec.length.bits
    return _wrap(value, bits, False), pos


def _convert(spec: _Spec, text: str, pos: int) -> tuple[Optional[Value], int]:
    conv = spec.conversion
    if conv == "%":
        if pos < len(text) and text[pos] == "%":
            return None, pos + 1
        raise _MatchFailure
    if conv == "c":
        if pos >= len(text):
            raise _InputFailure
        chunk = text[pos:pos + max(spec.width, 1)]
        return chunk, pos + len(chunk)
    if conv in _UNSUPPORTED:
        raise ValueError(f"conversion %{conv} is not supported")
    signed = conv in "di"
    base = {"d": 10, "i": 0, "o": 8, "x": 16, "X": 16, "p": 16}[conv]
    return _scan_integer(spec, text, pos, base, signed)


def sscanf(text: str, fmt: str) -> ScanResult:
    """Scan ``text`` according to ``fmt``.

    Raises ValueError for a malformed directive or an unsupported
    conversion.
    """
    values: list[Value] = []
    count = 0
    pos = 0
    fpos = _skip_space(fmt, 0)
    try:
        while fpos < len(fmt):
            ch = fmt[fpos]
            if ch == "%":
                spec, fpos = _parse_spec(fmt, fpos)
                if spec.conversion == "n":
                    if not spec.suppressed:
                        values.append(_wrap(pos, spec.length.bits, True))
                    continue
                value, pos = _convert(spec, text, pos)
                if spec.conversion != "%" and not spec.suppressed:
                    values.append(value)
                    count += 1
            elif pos >= len(text):
                raise _InputFailure
            elif ch == text[pos]:
                fpos += 1
                pos += 1
            elif ch in _SPACE:
                fpos = _skip_space(fmt, fpos)
            else:
                raise _MatchFailure
    except _InputFailure:
        if count == 0:
            count = -1
    except _MatchFailure:
        pass
    return ScanResult(count, tuple(values))