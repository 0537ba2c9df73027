import io

import pytest

from ftlib.printf import dprintf, format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_string_conversion():
    assert format_string("hello %s!", "world") == "hello world!"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_nil_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


@pytest.mark.parametrize("address", [1, 15, 16, 255, 0xDEADBEEF, 2**48 + 7])
def test_pointer_is_hex_with_prefix(address):
    assert format_string("%p", address) == "0x" + format(address, "x")


def test_pointer_of_object_uses_identity():
    obj = object()
    assert format_string("%p", obj) == "0x" + format(id(obj), "x")


@pytest.mark.parametrize("value", [0, 7, -7, 42, 2**31 - 1, -(2**31)])
def test_decimal_matches_builtin(value):
    assert format_string("%d", value) == str(value)
    assert format_string("%i", value) == str(value)


@pytest.mark.parametrize("spec", ["%5d", "%-5d", "%1d", "%12d", "%-12d"])
@pytest.mark.parametrize("value", [0, 42, -42, 123456])
def test_width_matches_builtin(spec, value):
    assert format_string(spec, value) == spec % value


def test_width_is_ignored_for_other_conversions():
    assert format_string("%5s", "ab") == "ab"
    assert format_string("%5x", 10) == format(10, "x")


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_matches_builtin(value):
    assert format_string("%x", value) == format(value, "x")
    assert format_string("%X", value) == format(value, "X")


@pytest.mark.parametrize("value", [0, 9, 10, 2**32 - 1])
def test_unsigned_matches_builtin(value):
    assert format_string("%u", value) == str(value)


def test_negative_unsigned_wraps():
    assert format_string("%u", -1) == str(2**32 - 1)
    assert format_string("%x", -1) == format(2**32 - 1, "x")


def test_char_from_str_and_code():
    assert format_string("%c%c", "a", ord("b")) == "ab"


def test_percent_and_unknown_conversion():
    assert format_string("100%%") == "100%"
    assert format_string("%q") == "q"


def test_mixed_conversions_consume_args_in_order():
    result = format_string("%s=%d (%x)", "n", 26, 26)
    assert result == "n=26 (" + format(26, "x") + ")"


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_string("oops %")
    with pytest.raises(ValueError):
        format_string("oops %12")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d and %d", 1)


def test_bad_argument_types_raise():
    with pytest.raises(TypeError):
        format_string("%d", "1")
    with pytest.raises(TypeError):
        format_string("%s", 5)
    with pytest.raises(ValueError):
        format_string("%c", "ab")


def test_decimal_out_of_range_raises():
    with pytest.raises(OverflowError):
        format_string("%d", 2**31)


def test_printf_writes_stdout_and_returns_length(capsys):
    count = printf("%s-%d", "abc", -5)
    captured = capsys.readouterr().out
    assert captured == "abc--5"
    assert count == len(captured)


def test_dprintf_writes_to_stream():
    stream = io.StringIO()
    count = dprintf(stream, "%-4d|%s", 7, None)
    assert stream.getvalue() == format_string("%-4d|%s", 7, None)
    assert count == len(stream.getvalue())