# dense polynomials with Rational coefficients
# a polynomial is a list [a0, a1, ..., am] representing a0 + a1 x + ... + am x^m
# lists are never trimmed, so the length is always degree + 1 as built

from .rational import Rational

Polynomial = list[Rational]


def zero_poly() -> Polynomial:
    return [Rational(0)]


def one_poly() -> Polynomial:
    return [Rational(1)]


def poly_add(a: Polynomial, b: Polynomial) -> Polynomial:
    n = max(len(a), len(b))
    res = [Rational(0) for _ in range(n)]
    for i, c in enumerate(a):
        res[i] = res[i] + c
    for i, c in enumerate(b):
        res[i] = res[i] + c
    return res


def poly_scale(a: Polynomial, s: Rational) -> Polynomial:
    return [c * s for c in a]


def poly_mul_linear(a: Polynomial, xi: int) -> Polynomial:
    # multiply by (x - xi)
    res = [Rational(0) for _ in range(len(a) + 1)]
    x_i = Rational(xi)
    for i, c in enumerate(a):
        res[i+1] = res[i+1] + c        # * x
        res[i] = res[i] - c * x_i      # - xi
    return res


def poly_eval(a: Polynomial, x) -> Rational:
    """Evaluate exactly at x (int or Rational) using horner's rule."""
    total = Rational(0)
    for c in reversed(a):
        total = total * x + c
    return total
