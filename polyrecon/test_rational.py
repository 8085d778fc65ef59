import pytest
from .rational import Rational, gcd, lcm
from .errors import DivisionByZero


def is_canonical(r):
    return r.denominator > 0 and gcd(abs(r.numerator), r.denominator) == 1


def test_zero_denominator():
    with pytest.raises(DivisionByZero):
        Rational(1, 0)
    with pytest.raises(ZeroDivisionError):  # DivisionByZero is still a ZeroDivisionError
        Rational(0, 0)


@pytest.mark.parametrize("n, d, expected", [
    (2, 4, (1, 2)),
    (-2, 4, (-1, 2)),
    (2, -4, (-1, 2)),
    (-2, -4, (1, 2)),
    (0, 5, (0, 1)),
    (0, -7, (0, 1)),
    (9, 3, (3, 1)),
    (10**30, 10**29, (10, 1)),
])
def test_normalisation(n, d, expected):
    r = Rational(n, d)
    assert (r.numerator, r.denominator) == expected
    assert is_canonical(r)


def test_non_integer_arguments():
    with pytest.raises(TypeError):
        Rational(1.5, 2)
    with pytest.raises(TypeError):
        Rational(1, "2")
    with pytest.raises(TypeError):
        Rational(True)


def test_arithmetic():
    a = Rational(1, 2)
    b = Rational(1, 3)
    assert a + b == Rational(5, 6)
    assert a - b == Rational(1, 6)
    assert a * b == Rational(1, 6)
    assert a / b == Rational(3, 2)
    assert -a == Rational(-1, 2)

    # named forms match the operators
    assert a.add(b) == a + b
    assert a.sub(b) == a - b
    assert a.mul(b) == a * b
    assert a.div(b) == a / b
    assert a.neg() == -a


def test_mixed_with_ints():
    a = Rational(3, 4)
    assert a + 1 == Rational(7, 4)
    assert 1 + a == Rational(7, 4)
    assert 1 - a == Rational(1, 4)
    assert 2 * a == Rational(3, 2)
    assert 1 / a == Rational(4, 3)
    assert Rational(6, 3) == 2
    assert Rational(1, 2) != 0


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Rational(1, 2) + 0.5


def test_divide_by_zero_rational():
    with pytest.raises(DivisionByZero):
        Rational(1, 2) / Rational(0)
    with pytest.raises(DivisionByZero):
        Rational(5) / 0


def test_results_stay_canonical():
    values = [Rational(n, d) for n in range(-6, 7) for d in (-4, -3, 1, 2, 6)]
    for a in values:
        for b in values:
            assert is_canonical(a + b)
            assert is_canonical(a - b)
            assert is_canonical(a * b)
            if b != 0:
                assert is_canonical(a / b)


def test_string_form():
    assert str(Rational(3)) == "3"
    assert str(Rational(-3, 6)) == "-1/2"
    assert str(Rational(0, -9)) == "0"
    assert repr(Rational(2, 4)) == "Rational(1, 2)"


def test_hash_and_equality():
    assert Rational(2, 4) == Rational(1, 2)
    assert hash(Rational(2, 4)) == hash(Rational(1, 2))
    assert hash(Rational(4, 2)) == hash(2)
    assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1


def test_is_integer():
    assert Rational(4, 2).is_integer()
    assert not Rational(1, 2).is_integer()
    assert Rational.from_int(-7) == Rational(-7, 1)


@pytest.mark.parametrize("a, b, g, l", [
    (12, 18, 6, 36),
    (7, 0, 7, 0),
    (0, 7, 7, 0),
    (1, 1, 1, 1),
    (4, 6, 2, 12),
    (2**64, 2**32, 2**32, 2**64),
])
def test_gcd_lcm(a, b, g, l):
    assert gcd(a, b) == g
    assert lcm(a, b) == l


def test_lcm_zero_zero():
    assert lcm(0, 0) == 0
