import pytest

from fractol.numbers import atoi, itoa


@pytest.mark.parametrize("text", ["0", "42", "-42", "+17", "2147483647", "-2147483648"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r-123") == -123


def test_atoi_stops_at_non_digit():
    assert atoi("12abc34") == 12


def test_atoi_double_sign_gives_zero():
    assert atoi("--1234535388") == 0


def test_atoi_empty_and_garbage_give_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 123456, -2147483648, 2147483647])
def test_itoa_round_trip(n):
    text = itoa(n)
    assert text == str(n)
    assert atoi(text) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)
    with pytest.raises(OverflowError):
        itoa(-2147483649)