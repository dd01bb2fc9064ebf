"""Exact rational arithmetic over unbounded ints, always in canonical form."""

from math import gcd

from core.errors import DivisionByZero


def reduce(num: int, den: int) -> tuple[int, int]:
    """Canonical (num, den): gcd(|num|, |den|) == 1 and den > 0."""
    if den == 0:
        raise DivisionByZero("zero denominator")
    g = gcd(abs(num), abs(den))
    num, den = num // g, den // g
    if den < 0:
        num, den = -num, -den
    return num, den


class Fraction:
    """Immutable exact rational num/den."""

    __slots__ = ('num', 'den')

    def __init__(self, num: int, den: int = 1):
        num, den = reduce(num, den)
        object.__setattr__(self, 'num', num)
        object.__setattr__(self, 'den', den)

    def __setattr__(self, name, value):
        raise AttributeError("Fraction is immutable")

    @staticmethod
    def from_int(value) -> 'Fraction':
        if isinstance(value, Fraction):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int or Fraction, got {type(value).__name__}")
        return Fraction(value, 1)

    @staticmethod
    def zero():
        return Fraction(0)

    @staticmethod
    def one():
        return Fraction(1)

    def is_integer(self) -> bool:
        return self.den == 1

    def __add__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        if isinstance(other, int):
            return add(Fraction(other), self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        if isinstance(other, int):
            return subtract(Fraction(other), self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        if isinstance(other, int):
            return multiply(Fraction(other), self)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        if isinstance(other, int):
            return divide(Fraction(other), self)
        return NotImplemented

    def __neg__(self):
        return Fraction(-self.num, self.den)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.den == 1 and self.num == other
        if isinstance(other, Fraction):
            return self.num == other.num and self.den == other.den
        return NotImplemented

    def __hash__(self):
        if self.den == 1:
            return hash(self.num)
        return hash((self.num, self.den))

    def __bool__(self):
        return self.num != 0

    def __repr__(self):
        return f"Fraction({self.num}, {self.den})"

    def __str__(self):
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"


def add(a: Fraction, b: Fraction) -> Fraction:
    return Fraction(a.num * b.den + b.num * a.den, a.den * b.den)


def subtract(a: Fraction, b: Fraction) -> Fraction:
    return Fraction(a.num * b.den - b.num * a.den, a.den * b.den)


def multiply(a: Fraction, b: Fraction) -> Fraction:
    return Fraction(a.num * b.num, a.den * b.den)


def divide(a: Fraction, b: Fraction) -> Fraction:
    if b.num == 0:
        raise DivisionByZero()
    return Fraction(a.num * b.den, a.den * b.num)
