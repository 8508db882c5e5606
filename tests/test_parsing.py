import pytest

from fractol.parsing import (
    Arguments,
    FractalKind,
    UsageError,
    compare_input,
    is_valid_julia,
    parse_arguments,
    parse_double,
)


@pytest.mark.parametrize(
    "text, expected",
    [("1.5", 1.5), ("-0.25", -0.25), ("   3", 3.0), ("0.8", 0.8), (".5", 0.5)],
)
def test_parse_double_values(text, expected):
    assert parse_double(text) == pytest.approx(expected)


def test_parse_double_stops_at_junk():
    assert parse_double("12.5abc") == pytest.approx(12.5)
    assert parse_double("7x") == pytest.approx(7.0)


def test_parse_double_does_not_accept_plus():
    assert parse_double("+1.5") == 0.0


def test_parse_double_without_digits():
    assert parse_double("abc") == 0.0


@pytest.mark.parametrize("value", [0.125, 2.5, 10.75, 123.0625])
def test_parse_double_round_trip(value):
    assert parse_double(f"{value}") == pytest.approx(value)
    assert parse_double(f"-{value}") == pytest.approx(-value)


def test_compare_input_equal_words():
    assert compare_input("mandelbrot", "mandelbrot", 10) == 0


def test_compare_input_length_mismatch():
    assert compare_input("mandel", "mandelbrot", 10) == 1
    assert compare_input("mandelbrots", "mandelbrot", 10) == 1


def test_compare_input_same_length_different_words():
    assert compare_input("julia", "julix", 5) < 0
    assert compare_input("julix", "julia", 5) > 0


@pytest.mark.parametrize(
    "argv",
    [
        ["julia", "0.285", "0.01"],
        ["julia", "-0.8", "+0.156"],
        ["julia", "1", "2"],
    ],
)
def test_valid_julia(argv):
    assert is_valid_julia(argv) is True


@pytest.mark.parametrize(
    "argv",
    [
        ["julia", "0,5", "1"],
        ["julia", "abc", "1"],
        ["julia", "--1", "1"],
        ["julia", "1"],
        ["mandelbrot", "1", "2"],
        ["Julia", "1", "2"],
    ],
)
def test_invalid_julia(argv):
    assert is_valid_julia(argv) is False


def test_parse_arguments_mandelbrot():
    assert parse_arguments(["mandelbrot"]) == Arguments(FractalKind.MANDELBROT)


def test_parse_arguments_julia():
    args = parse_arguments(["julia", "-0.8", "0.156"])
    assert args.kind is FractalKind.JULIA
    assert args.c_re == pytest.approx(-0.8)
    assert args.c_im == pytest.approx(0.156)


@pytest.mark.parametrize(
    "argv",
    [[], ["julia"], ["mandelbrot", "x"], ["burningship"], ["julia", "1,0", "2"]],
)
def test_parse_arguments_rejects(argv):
    with pytest.raises(UsageError):
        parse_arguments(argv)


def test_usage_error_message_mentions_usage():
    with pytest.raises(UsageError, match="mandelbrot \\| julia"):
        parse_arguments(["nothing"])