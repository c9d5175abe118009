"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices, and a missing match is ``None``. The NUL
character ``"\\0"`` stands for the end of a string, as it does in C: searching
for it gives the length of the string.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return c as a one-character string; an integer is taken as a code."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer, not bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer, not {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns the code difference of the first unequal pair, a missing
    character counting as NUL, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for pos in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first occurrence of little lying within the first length
    characters of big, or None. An empty little is found at 0."""
    if not little:
        return 0
    needle = len(little)
    for pos in range(len(big)):
        if needle > length - pos:
            break
        if big.startswith(little, pos):
            return pos
    return None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, NUL included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of src, which tells whether the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst in a buffer of size characters, NUL included.

    Returns the resulting text and the length the full concatenation would
    have had. If dst already fills the buffer, it is returned unchanged with
    ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    used = len(dst)
    if used >= size:
        return dst, size + len(src)
    room = size - used - 1
    return dst + src[:room], used + len(src)


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split s on the character sep, dropping empty pieces."""
    ch = _char(sep)
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string of f(index, char) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Union[str, MutableSequence[str]],
    f: Callable[[int, MutableSequence[str]], None],
) -> Union[str, MutableSequence[str]]:
    """Call f(index, chars) for every position of a character sequence.

    f may change ``chars[index]`` in place. A mutable sequence is updated and
    returned; for a str the changes are made on a copy and the new string is
    returned.
    """
    chars: MutableSequence[str] = list(s) if isinstance(s, str) else s
    for index in range(len(chars)):
        f(index, chars)
    return "".join(chars) if isinstance(s, str) else chars