from dataclasses import dataclass
from .rational import lcm
from .polynomial import Polynomial


@dataclass(frozen=True)
class IntegerForm:
    # Q(x) = scale * P(x), every coefficient of Q is an integer
    coefficients: list[int]
    scale: int


def to_integer_form(poly: Polynomial) -> IntegerForm:
    """
    Clear denominators by multiplying by the lcm of all of them.
    The lcm is the smallest positive scale that makes every coefficient whole.
    """
    L = 1
    for c in poly:
        L = lcm(L, c.denominator)

    # exact, L is a multiple of every denominator
    ints = [c.numerator * (L // c.denominator) for c in poly]
    return IntegerForm(ints, L)
