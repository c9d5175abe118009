"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

HEX_LOW = "0123456789abcdef"
HEX_UP = "0123456789ABCDEF"


def put_char_fd(c: Union[str, int], stream: TextIO) -> None:
    """Write one character to stream."""
    stream.write(_as_char(c))


def put_str_fd(s: str, stream: TextIO) -> None:
    """Write s to stream."""
    stream.write(s)


def put_endl_fd(s: str, stream: TextIO) -> None:
    """Write s followed by a newline to stream."""
    stream.write(s)
    stream.write("\n")


def put_nbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of n to stream."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    stream.write(format_digits(n, 10, False))


def format_digits(n: int, base: int, upper: bool) -> str:
    """Return n written in base (2 to 16), with a leading '-' when negative."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if n < 0:
        return "-" + format_digits(-n, base, upper)
    digits = HEX_UP if upper else HEX_LOW
    out = []
    while True:
        n, rest = divmod(n, base)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def format_pointer(ptr: Optional[int]) -> str:
    """Return an address as '0x' and lower-case hex, or '(nil)' for zero."""
    value = (ptr or 0) & 0xFFFFFFFFFFFFFFFF
    if value == 0:
        return "(nil)"
    return "0x" + format_digits(value, 16, False)


def _as_char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, not {type(c).__name__}")


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _unsigned32(value: int) -> int:
    return value & 0xFFFFFFFF


def _convert(spec: str, arg: Any) -> str:
    if spec == "c":
        return _as_char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        return format_pointer(arg)
    if spec in "di":
        return format_digits(_signed32(arg), 10, False)
    if spec == "u":
        return format_digits(_unsigned32(arg), 10, False)
    if spec == "x":
        return format_digits(_unsigned32(arg), 16, False)
    return format_digits(_unsigned32(arg), 16, True)


def format_printf(fmt: str, *args: Any) -> str:
    """Format args with the conversions %c %s %p %d %i %u %x %X and %%.

    Any other conversion character produces nothing, as does a lone '%'
    at the end of fmt.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pending = iter(args)
    out = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
        elif spec in "cspdiuxX":
            try:
                arg = next(pending)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            out.append(_convert(spec, arg))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)