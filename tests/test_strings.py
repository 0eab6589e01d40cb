import pytest

from algokit.strings import INT_MAX, INT_MIN, my_atoi, roman_to_int, roman_value


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("+1", 1),
        ("4193 with words", 4193),
        ("1-2", 1),
        ("  007", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_my_atoi_values(text, expected):
    assert my_atoi(text) == expected


def test_my_atoi_empty_is_zero():
    assert my_atoi("") == 0


@pytest.mark.parametrize("text", ["words and 987", "-", "+-12", "\t5", "  "])
def test_my_atoi_no_digits_matches_empty(text):
    assert my_atoi(text) == my_atoi("")


@pytest.mark.parametrize("text", ["91283472332", "2147483648", "99999999999999999999999"])
def test_my_atoi_clamps_high(text):
    assert my_atoi(text) == INT_MAX


@pytest.mark.parametrize("text", ["-91283472332", "-2147483649"])
def test_my_atoi_clamps_low(text):
    assert my_atoi(text) == INT_MIN


@pytest.mark.parametrize(
    "symbol, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_value(symbol, value):
    assert roman_value(symbol) == value


def test_roman_value_unknown():
    assert roman_value("Z") == roman_value("")


def test_roman_to_int_additive():
    assert roman_to_int("III") == 3 * roman_value("I")
    assert roman_to_int("LVIII") == roman_value("L") + roman_value("V") + 3 * roman_value("I")


def test_roman_to_int_subtractive():
    assert roman_to_int("IV") == roman_value("V") - roman_value("I")
    assert roman_to_int("CM") == roman_value("M") - roman_value("C")


def test_roman_to_int_worked_example():
    assert roman_to_int("MCMXCIV") == 1994


@pytest.mark.parametrize("left, right", [("M", "CM"), ("MM", "XC"), ("X", "IV")])
def test_roman_to_int_descending_parts_add(left, right):
    assert roman_to_int(left + right) == roman_to_int(left) + roman_to_int(right)


@pytest.mark.parametrize("symbol", ["I", "V", "X", "L", "C", "D", "M"])
def test_roman_to_int_single_symbol(symbol):
    assert roman_to_int(symbol) == roman_value(symbol)