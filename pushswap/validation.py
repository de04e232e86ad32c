"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from pushswap.libft.chars import is_digit
from pushswap.libft.output import put_str
from pushswap.libft.strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")


class InputError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""


def parse_number(text: str) -> int:
    """Read a leading signed decimal number after optional whitespace.

    Returns 0 when no digit follows the optional sign.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + ord(ch) - ord("0")
    return sign * value


def check_all_numbers(words: Sequence[str]) -> None:
    """Raise InputError unless every word is an optional sign and digits only."""
    for word in words:
        body = word
        if body[:1] in ("-", "+"):
            body = body[1:]
            if not body:
                raise InputError(f"sign without digits: {word!r}")
        if not all(is_digit(ch) for ch in body):
            raise InputError(f"not a number: {word!r}")


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the command-line arguments into the list of numbers to sort.

    A single argument is split on spaces; several arguments are taken one
    number each. Non-numbers, values outside the 32-bit range and duplicates
    raise InputError.
    """
    if not args:
        return []
    words = split(args[0], " ") if len(args) == 1 else list(args)
    if not words:
        raise InputError("no numbers given")
    check_all_numbers(words)
    numbers: list[int] = []
    seen: set[int] = set()
    for word in words:
        value = parse_number(word)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {word!r}")
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)
        numbers.append(value)
    return numbers


def report_error(stream: TextIO | None = None) -> int:
    """Write the error line to ``stream`` (standard error by default); return 1."""
    put_str("Error\n", sys.stderr if stream is None else stream)
    return 1