import pytest

from fractol.printf import format_message, print_formatted


def test_plain_text_is_unchanged():
    assert format_message("hello world") == "hello world"


def test_percent_escape():
    assert format_message("100%%") == "100%"


def test_signed_decimal_passes_value_through():
    assert format_message("%d and %i", 42, -7) == "42 and -7"


def test_int_min_is_printed():
    assert format_message("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert format_message("%d", 2**32 + 5) == "5"


@pytest.mark.parametrize("value", [0, 1, 9, 10, 255, 4096, 123456789, 2**32 - 1])
def test_hex_round_trip(value):
    assert int(format_message("%x", value), 16) == value
    assert int(format_message("%X", value), 16) == value


def test_hex_case():
    text = format_message("%x%X", 0xABCDEF, 0xABCDEF)
    assert text == "abcdefABCDEF"


def test_negative_hex_and_unsigned_wrap():
    assert int(format_message("%x", -10), 16) == 2**32 - 10
    assert int(format_message("%u", -1)) == 2**32 - 1


def test_null_string():
    assert format_message("[%s]", None) == "[(null)]"


def test_string_and_char():
    assert format_message("%s=%c", "key", "v") == "key=v"
    assert format_message("%c", ord("A")) == "A"


def test_pointer_from_integer():
    text = format_message("%p", 0x1F2E)
    assert text.startswith("0x")
    assert int(text, 16) == 0x1F2E


def test_unknown_conversion_consumes_nothing():
    assert format_message("a%qb%d", 7) == "ab7"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%d %d", 1)


def test_lone_percent_at_end_raises():
    with pytest.raises(ValueError):
        format_message("oops %")


def test_string_conversion_rejects_non_string():
    with pytest.raises(TypeError):
        format_message("%s", 12)


def test_print_formatted_writes_and_counts(capsys):
    count = print_formatted("%s:%d\n", "n", 12)
    captured = capsys.readouterr().out
    assert captured == "n:12\n"
    assert count == len(captured)