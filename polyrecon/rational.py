# exact fractions over python ints
# every Rational is kept in canonical form:
#   denominator > 0
#   gcd(|numerator|, denominator) == 1
#   zero is 0/1
# so two Rationals are equal iff their (numerator, denominator) pairs are equal

from .errors import DivisionByZero


def gcd(a: int, b: int) -> int:
    # euclid, gcd(a, 0) = a
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    if a == 0 and b == 0:
        return 0
    return (a // gcd(a, b)) * b


def _check_int(value, name):
    # bool is an int subclass but True/False as a numerator is almost certainly a bug
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer (currently {value!r})")


class Rational:
    __slots__ = ("_n", "_d")

    def __init__(self, numerator: int, denominator: int = 1):
        _check_int(numerator, "numerator")
        _check_int(denominator, "denominator")
        if denominator == 0:
            raise DivisionByZero(f"Denominator 0 (numerator {numerator})")

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        # gcd(0, d) = d so zero normalises to 0/1
        g = gcd(abs(numerator), denominator)
        self._n = numerator // g
        self._d = denominator // g

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    def is_integer(self) -> bool:
        return self._d == 1

    def add(self, other: "Rational") -> "Rational":
        return Rational(self._n*other._d + other._n*self._d, self._d*other._d)

    def sub(self, other: "Rational") -> "Rational":
        return Rational(self._n*other._d - other._n*self._d, self._d*other._d)

    def mul(self, other: "Rational") -> "Rational":
        return Rational(self._n*other._n, self._d*other._d)

    def div(self, other: "Rational") -> "Rational":
        if other._n == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return Rational(self._n*other._d, self._d*other._n)

    def neg(self) -> "Rational":
        return Rational(-self._n, self._d)

    # operator forms, ints are accepted on either side

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.add(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.div(other)

    # to make 1/x work
    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.div(self)

    def __neg__(self):
        return self.neg()

    def __eq__(self, other):
        if isinstance(other, Rational):
            return self._n == other._n and self._d == other._d
        if isinstance(other, int) and not isinstance(other, bool):
            return self._d == 1 and self._n == other
        return NotImplemented

    def __hash__(self):
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    def __str__(self):
        if self._d == 1:
            return str(self._n)
        return f"{self._n}/{self._d}"

    def __repr__(self):
        return f"Rational({self._n}, {self._d})"


def _coerce(value):
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value, 1)
    return NotImplemented
