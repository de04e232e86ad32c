import io

import pytest

from pushswap.libft.output import put_char, put_endl, put_number, put_str


def test_put_char():
    buf = io.StringIO()
    put_char("a", buf)
    put_char("b", buf)
    assert buf.getvalue() == "ab"


def test_put_char_rejects_long():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    buf = io.StringIO()
    put_str("Error", buf)
    assert buf.getvalue() == "Error"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl():
    buf = io.StringIO()
    put_endl("Error", buf)
    assert buf.getvalue() == "Error\n"


def test_put_endl_none_writes_newline():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_put_number(n):
    buf = io.StringIO()
    put_number(n, buf)
    assert buf.getvalue() == str(n)


def test_default_stream_is_stdout(capsys):
    put_str("hi")
    put_number(-5)
    assert capsys.readouterr().out == "hi-5"