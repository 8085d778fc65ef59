from dataclasses import dataclass


class BadDigit(ValueError):
    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"Bad digit '{char}' for base {base}")


class DivisionByZero(ZeroDivisionError):
    pass


class InputParseError(ValueError):
    pass


# not raised - the document is still usable, the caller just gets told about it
@dataclass(frozen=True)
class CountMismatch:
    declared: int
    actual: int

    def __str__(self):
        return f"Warning: keys.n ({self.declared}) != actual entries ({self.actual})"
