"""Core primitives: base decoding, exact fractions, linear solver, polynomials."""

from core.errors import (
    ErrorKind, ReconstructionError, InvalidBase, InvalidDigitChar,
    DigitOutOfRange, DivisionByZero, SingularMatrix, InvalidDocument,
    InsufficientPoints,
)
from core.radix import decode, encode, digit_value, check_base, MIN_BASE, MAX_BASE
from core.fraction import Fraction, reduce, add, subtract, multiply, divide
from core.linalg import Elimination, gauss_jordan, solve
from core.polynomial import Polynomial, lagrange_coefficients_at_zero, vandermonde_row
from core import rng
