"""String helpers: splitting, searching, bounded copies and comparisons."""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty words between repeated separators."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``, which tells whether the
    copy was truncated. A ``size`` of 0 copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` so the result holds at most ``size - 1`` characters.

    Returns the new string and the length it tried to create. When ``size``
    does not exceed the length of ``dest``, ``dest`` is left unchanged and
    ``size + len(src)`` is returned.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def striteri(text: str, func: Callable[[int, str], str | None]) -> str:
    """Visit each character with its index; ``func`` may return a replacement.

    A return value of None keeps the character as it was.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    The end of a string compares as code 0.
    """
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``n`` characters, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[: max(n, 0)].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if charset is None:
        return strdup(text)
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]