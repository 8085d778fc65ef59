from dataclasses import dataclass
from .errors import DivisionByZero
from .rational import Rational
from .polynomial import Polynomial, zero_poly, one_poly, poly_add, poly_scale, poly_mul_linear


@dataclass(frozen=True)
class Point:
    x: int
    y: int


# formulas taken from https://en.wikipedia.org/wiki/Newton_polynomial
class NewtonInterpolator:
    def __init__(self, points: list[Point]):
        if not points:
            raise ValueError("points list must not be empty (need at least one point to interpolate)")

        self.points = list(points)
        self.degree = len(self.points)-1
        self.newton_coefficients = self.get_divided_differences(self.points)

    # c_j = f[x_0, ..., x_j], the top entry of each column of the table
    def get_divided_differences(self, points):
        n = len(points)
        X = [Rational(p.x) for p in points]
        col = [Rational(p.y) for p in points]

        coef = [col[0]]
        for j in range(1, n):
            next_col = []
            for i in range(n - j):
                gap = X[i+j] - X[i]
                if gap == 0:
                    raise DivisionByZero(
                        f"x = {points[i].x} appears more than once (points {i} and {i+j}), "
                        "interpolation needs distinct x values")
                next_col.append((col[i+1] - col[i]) / gap)
            coef.append(next_col[0])
            col = next_col

        return coef

    def coefficients(self) -> Polynomial:
        """
        expands sum_j c_j * prod_{i<j} (x - x_i) into standard basis [a0, a1, ..., a_{k-1}]
        the result always has exactly k entries, even if the leading ones are 0
        """
        n = len(self.points)
        total = zero_poly()
        prod = one_poly()
        for j, c in enumerate(self.newton_coefficients):
            total = poly_add(total, poly_scale(prod, c))
            if j < n-1:
                prod = poly_mul_linear(prod, self.points[j].x)
        return total


def interpolate(points: list[Point]) -> Polynomial:
    return NewtonInterpolator(points).coefficients()
