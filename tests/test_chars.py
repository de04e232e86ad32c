import string

import pytest

from pushswap.libft.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("code", range(0, 200))
def test_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", [-1, 128, 255])
def test_is_ascii_bounds_outside(code):
    assert is_ascii(code) is False


@pytest.mark.parametrize("code", [0, 127])
def test_is_ascii_bounds_inside(code):
    assert is_ascii(code) is True


def test_is_print_range():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_case_round_trip(c):
    upper = to_upper(c)
    assert upper == c.upper()
    assert to_lower(upper) == c


@pytest.mark.parametrize("c", ["1", "!", " ", "~"])
def test_case_leaves_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_keeps_int_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42", -42),
        ("\t\n+17abc", 17),
        ("123", 123),
        ("abc", 0),
        ("--5", 0),
        ("", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_itoa_fixed_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, 2147483647, -2147483648, 12345])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)