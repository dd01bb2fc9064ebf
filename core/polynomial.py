"""Polynomials over exact fractions: evaluation, fitting, interpolation at zero."""

from core import rng
from core.fraction import Fraction
from core.linalg import solve


def vandermonde_row(x: int, y: int, degree: int) -> list[int]:
    """[x^degree, x^(degree-1), ..., x^0, y] as exact ints."""
    return [x ** power for power in range(degree, -1, -1)] + [y]


class Polynomial:
    """Polynomial with Fraction coefficients. coeffs[0] = constant term."""

    def __init__(self, coeffs):
        self.coeffs = [Fraction.from_int(c) for c in coeffs]

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    @property
    def constant_term(self) -> Fraction:
        return self.coeffs[0]

    def evaluate(self, x) -> Fraction:
        """Evaluate polynomial at x using Horner's method."""
        x = Fraction.from_int(x)
        result = Fraction.zero()
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __repr__(self):
        return f"Polynomial([{', '.join(str(c) for c in self.coeffs)}])"

    @staticmethod
    def random(degree: int, constant: int, bound: int) -> 'Polynomial':
        """Random integer polynomial with p(0) = constant.

        Coefficients are drawn from [0, bound); the leading one is nonzero.
        """
        coeffs = [constant]
        for i in range(degree):
            if i == degree - 1:
                coeffs.append(rng.randrange(1, bound))
            else:
                coeffs.append(rng.randbelow(bound))
        return Polynomial(coeffs)

    @staticmethod
    def fit(points: list[tuple[int, int]]) -> 'Polynomial':
        """The unique degree len(points)-1 polynomial through the points.

        Solves the Vandermonde system exactly; the solver returns the
        highest-degree coefficient first.
        """
        degree = len(points) - 1
        matrix = [vandermonde_row(x, y, degree) for x, y in points]
        return Polynomial(list(reversed(solve(matrix))))

    @staticmethod
    def interpolate_at_zero(points: list[tuple[int, int]]) -> Fraction:
        """Lagrange interpolation evaluated at x=0.

        points: list of (x_i, y_i) pairs.
        Returns p(0) = sum_i y_i * lambda_i where lambda_i = prod_{j!=i} (-x_j)/(x_i - x_j).
        """
        lambdas = lagrange_coefficients_at_zero([x for x, _ in points])
        result = Fraction.zero()
        for (_, yi), lambda_i in zip(points, lambdas):
            result = result + lambda_i * yi
        return result


def lagrange_coefficients_at_zero(x_values: list[int]) -> list[Fraction]:
    """Lagrange basis coefficients at x=0 for the given x-coordinates.

    Returns lambda_i = prod_{j!=i} (-x_j) / (x_i - x_j) for each i.
    """
    n = len(x_values)
    lambdas = []
    for i in range(n):
        numerator = Fraction.one()
        denominator = Fraction.one()
        for j in range(n):
            if i == j:
                continue
            numerator = numerator * (-x_values[j])
            denominator = denominator * (x_values[i] - x_values[j])
        lambdas.append(numerator / denominator)
    return lambdas
