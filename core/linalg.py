"""Gauss-Jordan elimination over exact fractions.

Pivot = first nonzero row at or below the diagonal, never the largest.
"""

import logging
from dataclasses import dataclass, field

from core.errors import SingularMatrix
from core.fraction import Fraction, divide, multiply, subtract

logger = logging.getLogger(__name__)


@dataclass
class Elimination:
    """Solution vector plus the (column, pivot_row) swaps that produced it."""
    solution: list[Fraction]
    swaps: list[tuple[int, int]] = field(default_factory=list)


def _augmented_copy(matrix) -> list[list[Fraction]]:
    n = len(matrix)
    grid = []
    for i, row in enumerate(matrix):
        if len(row) != n + 1:
            raise ValueError(
                f"row {i} has {len(row)} entries, expected {n + 1} for a "
                f"{n}x{n + 1} augmented matrix")
        grid.append([Fraction.from_int(v) for v in row])
    return grid


def gauss_jordan(matrix) -> Elimination:
    """Reduce an n x (n+1) augmented matrix to [I | x] and return x.

    Entries may be ints or Fractions. The input is not modified.
    Raises SingularMatrix when a column has no nonzero pivot candidate.
    """
    mat = _augmented_copy(matrix)
    n = len(mat)
    m = n + 1
    swaps = []

    for col in range(n):
        pivot_row = None
        for r in range(col, n):
            if mat[r][col].num != 0:
                pivot_row = r
                break
        if pivot_row is None:
            raise SingularMatrix(col)

        if pivot_row != col:
            mat[col], mat[pivot_row] = mat[pivot_row], mat[col]
            swaps.append((col, pivot_row))
            logger.debug("column %d: swapped rows %d and %d", col, col, pivot_row)

        pivot = mat[col][col]
        for c in range(col, m):
            mat[col][c] = divide(mat[col][c], pivot)

        for r in range(n):
            if r == col:
                continue
            factor = mat[r][col]
            for c in range(col, m):
                mat[r][c] = subtract(mat[r][c], multiply(factor, mat[col][c]))

    return Elimination(solution=[row[n] for row in mat], swaps=swaps)


def solve(matrix) -> list[Fraction]:
    """Exact solution of an n x (n+1) augmented system, in unknown order."""
    return gauss_jordan(matrix).solution
