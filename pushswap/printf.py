"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from pushswap.libft.chars import itoa

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NEEDS_ARGUMENT = frozenset("cspdiuxX")


def _check_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError(f"base needs at least two digits, got {base!r}")


def format_unsigned(number: int, base: str) -> str:
    """Render a non-negative integer with the digits of ``base``."""
    _check_base(base)
    if number < 0:
        raise ValueError(f"expected a non-negative number, got {number}")
    radix = len(base)
    digits = []
    while True:
        number, rem = divmod(number, radix)
        digits.append(base[rem])
        if number == 0:
            break
    return "".join(reversed(digits))


def format_signed(number: int, base: str) -> str:
    """Render an integer with the digits of ``base``, '-' first when negative."""
    _check_base(base)
    if number < 0:
        return "-" + format_unsigned(-number, base)
    return format_unsigned(number, base)


def format_pointer(address: int) -> str:
    """Render an address as lower-case hex with a 0x prefix; zero is (nil)."""
    if address == 0:
        return "(nil)"
    return "0x" + format_unsigned(address, HEX_LOWER)


def format_decimal(number: int) -> str:
    """Render an integer in decimal."""
    return itoa(number)


def format_string(text: str | None) -> str:
    """Return ``text``, or (null) for None."""
    return "(null)" if text is None else text


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _NEEDS_ARGUMENT:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"missing argument for %{spec}") from None
    if spec == "c":
        return value if isinstance(value, str) and len(value) == 1 else chr(value & 0xFF)
    if spec == "s":
        return format_string(value)
    if spec == "p":
        return format_pointer(value & _POINTER_MASK)
    if spec in "di":
        return format_decimal(_as_int32(value))
    if spec == "u":
        return format_unsigned(value & _UINT_MASK, DECIMAL)
    if spec == "x":
        return format_unsigned(value & _UINT_MASK, HEX_LOWER)
    return format_unsigned(value & _UINT_MASK, HEX_UPPER)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing; a lone trailing '%' is dropped.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return its length."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)