import pytest

from algokit.integers import (
    INT32_MAX,
    INT32_MIN,
    int_to_roman,
    is_palindrome,
    my_atoi,
    reverse_int,
    roman_to_int,
)


@pytest.mark.parametrize("x", [121, 0, 7, 1221, 12321])
def test_palindromes(x):
    assert is_palindrome(x) is True


@pytest.mark.parametrize("x", [-121, 10, 123, 1231])
def test_non_palindromes(x):
    assert is_palindrome(x) is False


def test_reverse_int_source_example():
    assert reverse_int(-123) == -321


@pytest.mark.parametrize("x", [123, -456, 120, 0, 9])
def test_reverse_int_twice_restores_without_trailing_zeros(x):
    once = reverse_int(x)
    assert (once < 0) == (x < 0)
    if x % 10 != 0:
        assert reverse_int(once) == x


@pytest.mark.parametrize("x", [1534236469, -2147483648, INT32_MAX])
def test_reverse_int_overflow_gives_zero(x):
    assert reverse_int(x) == 0


def test_int_to_roman_known_value():
    assert int_to_roman(1994) == "MCMXCIV"


def test_roman_to_int_source_example():
    assert roman_to_int("III") == 3


def test_roman_round_trip():
    for number in range(1, 4000):
        assert roman_to_int(int_to_roman(number)) == number


@pytest.mark.parametrize("num", [0, -5])
def test_int_to_roman_non_positive_is_empty(num):
    assert int_to_roman(num) == ""


@pytest.mark.parametrize("text", ["IZ", "abc", "X1"])
def test_roman_to_int_rejects_bad_characters(text):
    with pytest.raises(ValueError):
        roman_to_int(text)


def test_atoi_source_example():
    assert my_atoi("4193 with words") == 4193


@pytest.mark.parametrize("text, expected", [("42", 42), ("   -42", -42), ("+17", 17)])
def test_atoi_signs_and_spaces(text, expected):
    assert my_atoi(text) == expected


@pytest.mark.parametrize("text", ["words and 987", "", "+-12", "- 5", ".1"])
def test_atoi_no_number(text):
    assert my_atoi(text) == 0


def test_atoi_clamps():
    assert my_atoi("-91283472332") == INT32_MIN
    assert my_atoi("91283472332") == INT32_MAX