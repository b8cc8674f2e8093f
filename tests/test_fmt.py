import pytest

from solong.fmt import format_message, printf


def test_plain_text_is_unchanged():
    assert format_message("hello world") == "hello world"


@pytest.mark.parametrize("number", [0, 7, -42, 2147483647, -2147483648])
@pytest.mark.parametrize("spec", ["%d", "%i"])
def test_signed_decimal_round_trip(spec, number):
    assert int(format_message(spec, number)) == number


def test_signed_decimal_wraps_to_32_bits():
    assert int(format_message("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("number", [0, 9, 255, 48879, 2**32 - 1])
def test_hex_round_trip(number):
    lower = format_message("%x", number)
    assert int(lower, 16) == number
    assert format_message("%X", number) == lower.upper()


@pytest.mark.parametrize("number", [0, 10, 123456])
def test_unsigned_matches_decimal_for_positive(number):
    assert format_message("%u", number) == str(number)


def test_negative_unsigned_and_hex_agree():
    as_unsigned = int(format_message("%u", -1))
    assert int(format_message("%x", -1), 16) == as_unsigned
    assert as_unsigned == 4294967295


def test_null_string():
    assert format_message("%s", None) == "(null)"


@pytest.mark.parametrize("pointer", [None, 0])
def test_null_pointer(pointer):
    assert format_message("%p", pointer) == "(nil)"


def test_pointer_is_hex_with_prefix():
    text = format_message("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_percent_escape_and_stray_percent():
    assert format_message("%%") == "%"
    assert format_message("100%") == "100%"
    assert format_message("%q") == "%q"


def test_char_from_int_and_str():
    assert format_message("%c", 65) == chr(65)
    assert format_message("%c", "z") == "z"


def test_several_conversions_in_order():
    assert format_message("%s=%d;", "a", 1) == "a=1;"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%d %d", 1)


def test_printf_writes_and_returns_length(capsys):
    written = printf("Steps Taken: %i\n", 3)
    out = capsys.readouterr().out
    assert out == "Steps Taken: 3\n"
    assert written == len(out)