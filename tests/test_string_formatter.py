import pytest

from alienbase.string_formatter import format_float, format_int


@pytest.mark.parametrize("n", [0, 7, 42, 999])
def test_small_numbers_have_no_separator(n):
    assert format_int(n) == str(n)


def test_thousands_separators():
    assert format_int(1000) == "1,000"
    assert format_int(1234567) == "1,234,567"


@pytest.mark.parametrize("n", [1000, 98765, 123456789, 18446744073709551615])
def test_grouping_invariants(n):
    result = format_int(n)
    assert result.replace(",", "") == str(n)
    groups = result.split(",")
    assert 1 <= len(groups[0]) <= 3
    assert all(len(group) == 3 for group in groups[1:])


def test_format_int_rejects_negative():
    with pytest.raises(ValueError):
        format_int(-1)


def test_format_float_negative():
    assert format_float(-2.5, 1) == "-2.5"


@pytest.mark.parametrize("decimals", [0, 1, 3, 5])
def test_format_float_decimal_count(decimals):
    result = format_float(3.25, decimals)
    integer_part, fraction = result.split(".")
    assert integer_part == "3"
    assert len(fraction) == decimals


def test_format_float_zero_decimals_keeps_point():
    assert format_float(7.9, 0).endswith(".")
    assert format_float(7.9, 0).rstrip(".") == format_int(7)


def test_format_float_uses_separators():
    assert format_float(1234.5, 1).startswith(format_int(1234) + ".")


def test_format_float_sign_only_for_negative():
    assert format_float(0.5, 2).startswith("0.")
    assert format_float(-0.5, 2) == "-" + format_float(0.5, 2)


def test_format_float_exact_fractions():
    assert format_float(0.25, 2) == "0.25"