import pytest
from .base_decoder import decode, DIGIT_VALUES, MIN_BASE, MAX_BASE
from .errors import BadDigit


@pytest.mark.parametrize("base", range(MIN_BASE, MAX_BASE + 1))
def test_zero_and_ten(base):
    assert decode("0", base) == 0
    assert decode("10", base) == base


@pytest.mark.parametrize("digits, base, expected", [
    ("111", 2, 7),
    ("11", 3, 4),
    ("20", 3, 6),
    ("ff", 16, 255),
    ("FF", 16, 255),
    ("fF", 16, 255),
    ("z", 36, 35),
    ("Zz", 36, 35*36 + 35),
    ("", 10, 0),
    ("007", 8, 7),
])
def test_known_values(digits, base, expected):
    assert decode(digits, base) == expected


def test_matches_int_builtin_for_big_values():
    digits = "e1b8f2a9c7d3" * 10
    assert decode(digits, 16) == int(digits, 16)
    digits = "7" * 200
    assert decode(digits, 8) == int(digits, 8)


@pytest.mark.parametrize("digits, base", [
    ("1_000_000", 10),
    ("1 000 000", 10),
    ("ff_ff ff", 16),
    ("_1_", 2),
])
def test_separators_are_ignored(digits, base):
    plain = digits.replace("_", "").replace(" ", "")
    assert decode(digits, base) == decode(plain, base)


def test_only_separators_is_zero():
    assert decode("_ _", 7) == 0


@pytest.mark.parametrize("digits, base, char", [
    ("2", 2, "2"),
    ("1Z", 10, "Z"),
    ("$", 16, "$"),
    ("-5", 10, "-"),
    ("1.5", 10, "."),
    ("g", 16, "g"),
    ("12\t3", 10, "\t"),
])
def test_bad_digit(digits, base, char):
    with pytest.raises(BadDigit) as exc_info:
        decode(digits, base)
    assert exc_info.value.char == char
    assert exc_info.value.base == base


def test_bad_digit_message():
    with pytest.raises(ValueError, match=r"Bad digit 'Z' for base 10"):
        decode("1Z", 10)


@pytest.mark.parametrize("base", [0, 1, 37, -10])
def test_base_out_of_range(base):
    with pytest.raises(ValueError):
        decode("1", base)


def test_non_integer_base():
    with pytest.raises(TypeError):
        decode("1", "10")
    with pytest.raises(TypeError):
        decode(101, 10)


def test_digit_table():
    assert len(DIGIT_VALUES) == 10 + 26 + 26
    assert DIGIT_VALUES["a"] == DIGIT_VALUES["A"] == 10
    assert max(DIGIT_VALUES.values()) == 35
