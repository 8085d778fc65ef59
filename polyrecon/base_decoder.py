import string
from .errors import BadDigit

MIN_BASE = 2
MAX_BASE = 36

# readability separators, e.g "1_000_000" or "ff ff"
SEPARATORS = frozenset("_ ")

# '0'-'9' -> 0-9, 'a'-'z' and 'A'-'Z' -> 10-35
DIGIT_VALUES = {
    **{c: i for i, c in enumerate(string.digits)},
    **{c: 10 + i for i, c in enumerate(string.ascii_lowercase)},
    **{c: 10 + i for i, c in enumerate(string.ascii_uppercase)},
}


def decode(digits: str, base: int) -> int:
    """
    Convert a digit string written in `base` to an int, most significant digit first.

    '_' and ' ' are skipped, an empty string (after skipping) is 0.
    There are no sign characters, every value is non-negative.

    Raises BadDigit for a character outside the alphabet or a digit >= base.
    """
    if not isinstance(base, int) or isinstance(base, bool):
        raise TypeError(f"base must be an integer (currently {base!r})")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE} inclusive (currently {base})")
    if not isinstance(digits, str):
        raise TypeError(f"digits must be a string (currently {digits!r})")

    value = 0
    for char in digits:
        if char in SEPARATORS:
            continue
        digit = DIGIT_VALUES.get(char)
        if digit is None or digit >= base:
            raise BadDigit(char, base)
        value = value*base + digit
    return value
