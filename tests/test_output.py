import io

import pytest

from cubparse.output import (
    format_digits,
    format_pointer,
    format_printf,
    printf,
    put_char_fd,
    put_endl_fd,
    put_nbr_fd,
    put_str_fd,
)


def test_put_char_accepts_str_and_code():
    stream = io.StringIO()
    put_char_fd("a", stream)
    put_char_fd(ord("b"), stream)
    assert stream.getvalue() == "ab"


def test_put_str_and_endl():
    stream = io.StringIO()
    put_str_fd("hello", stream)
    put_endl_fd("world", stream)
    assert stream.getvalue() == "hello" + "world\n"


def test_put_nbr_min_int():
    stream = io.StringIO()
    put_nbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 123456789])
def test_put_nbr_round_trip(n):
    stream = io.StringIO()
    put_nbr_fd(n, stream)
    assert int(stream.getvalue()) == n


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr_fd("12", io.StringIO())


@pytest.mark.parametrize("n", [0, 1, 255, 4096, -31])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_format_digits_round_trip(n, base):
    assert int(format_digits(n, base, False), base) == n


def test_format_digits_case():
    assert format_digits(255, 16, True) == format_digits(255, 16, False).upper()


def test_format_digits_bad_base():
    with pytest.raises(ValueError):
        format_digits(5, 1, False)


def test_format_pointer():
    assert format_pointer(0) == "(nil)"
    text = format_pointer(0xDEAD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEAD


def test_printf_conversions():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%%") == "%"
    assert format_printf("%c%s", "x", "yz") == "xyz"
    assert format_printf("%x", 255) == format_digits(255, 16, False)
    assert format_printf("%X", 255) == format_digits(255, 16, True)
    assert format_printf("%p", 0) == "(nil)"


def test_printf_integer_widths():
    assert format_printf("%u", -1) == format_printf("%u", 0xFFFFFFFF)
    assert format_printf("%d", 2**31) == format_printf("%i", -(2**31))


def test_printf_unknown_and_trailing_percent():
    assert format_printf("a%qb") == "ab"
    assert format_printf("ab%") == "ab"


def test_printf_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_printf_none_format():
    with pytest.raises(TypeError):
        printf(None)


def test_printf_writes_stdout(capsys):
    count = printf("n=%d %s", 12, "ok")
    out = capsys.readouterr().out
    assert out == "n=12 ok"
    assert count == len(out)