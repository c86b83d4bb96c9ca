import pytest

from fdfview.printf import format_hex, format_pointer, format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_trailing_percent_kept():
    assert format_printf("abc%") == "abc%"


def test_unknown_specifier_produces_nothing_and_keeps_args():
    assert format_printf("a%qb%d", 7) == "a" + "b" + str(7)


@pytest.mark.parametrize("n", [0, 5, 42, -17, 2147483647])
def test_decimal(n):
    assert format_printf("%d", n) == str(n)
    assert format_printf("%i", n) == str(n)


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_unsigned_wraps():
    assert format_printf("%u", -1) == str(2**32 - 1)
    assert format_printf("%u", 12) == str(12)


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_string_and_null():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_printf("%c%c", "x", ord("y")) == "xy"


def test_pointer_null():
    assert format_pointer(None) == "0x0"
    assert format_pointer(0) == "0x0"
    assert format_printf("%p", None) == "0x0"


def test_pointer_round_trip():
    text = format_pointer(0x7FFE1234)
    assert text.startswith("0x")
    assert int(text, 16) == 0x7FFE1234


def test_format_hex_rejects_negative():
    with pytest.raises(ValueError):
        format_hex(-1)


def test_format_hex_case():
    assert format_hex(171, upper=True) == format_hex(171).upper()
    assert int(format_hex(171), 16) == 171


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "1")
    with pytest.raises(TypeError):
        format_printf("%s", 3)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "x", 3)
    out = capsys.readouterr().out
    assert out == "x=3\n"
    assert count == len(out)