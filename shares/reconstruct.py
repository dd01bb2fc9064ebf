"""Recover the constant term of the polynomial behind a set of shares.

Builds one Vandermonde row per selected point, solves the system exactly and
reports the degree-0 coefficient. A non-integer constant term is surfaced
through `Reconstruction.is_integral` and a warning, never rounded.
"""

import logging
from dataclasses import dataclass, field

from core.errors import InsufficientPoints
from core.fraction import Fraction
from core.linalg import solve
from core.polynomial import Polynomial, vandermonde_row
from shares.document import ShareDocument, SharePoint

logger = logging.getLogger(__name__)

ORDER_BY_X = "x"
ORDER_AS_GIVEN = "document"
DEFAULT_ORDER = ORDER_BY_X


@dataclass
class Reconstruction:
    coefficients: list[Fraction]  # highest degree first
    used: list[SharePoint]
    inconsistent: list[int] = field(default_factory=list)

    @property
    def constant(self) -> Fraction:
        return self.coefficients[-1]

    @property
    def secret(self) -> int:
        """Numerator of the constant term (the reported answer)."""
        return self.constant.num

    @property
    def is_integral(self) -> bool:
        return self.constant.den == 1

    @property
    def polynomial(self) -> Polynomial:
        return Polynomial(list(reversed(self.coefficients)))


def select_points(points: list[SharePoint], k: int,
                  order: str = DEFAULT_ORDER) -> list[SharePoint]:
    """Pick the k points that define the polynomial.

    ORDER_BY_X sorts by x-coordinate before truncating, so the result does
    not depend on how the document happened to list its keys.
    ORDER_AS_GIVEN keeps the first k in the order supplied.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if len(points) < k:
        raise InsufficientPoints(k, len(points))
    if order == ORDER_BY_X:
        points = sorted(points, key=lambda p: p.x)
    elif order != ORDER_AS_GIVEN:
        raise ValueError(f"unknown point order {order!r}")
    return list(points[:k])


def build_matrix(points: list[SharePoint]) -> list[list[int]]:
    degree = len(points) - 1
    return [vandermonde_row(p.x, p.y, degree) for p in points]


def reconstruct_points(points: list[SharePoint], k: int,
                       order: str = DEFAULT_ORDER) -> Reconstruction:
    used = select_points(points, k, order)
    coefficients = solve(build_matrix(used))
    result = Reconstruction(coefficients=coefficients, used=used)

    used_x = {p.x for p in used}
    poly = result.polynomial
    for p in points:
        if p.x not in used_x and poly.evaluate(p.x) != p.y:
            result.inconsistent.append(p.x)
    if result.inconsistent:
        logger.warning("shares at x=%s do not lie on the reconstructed polynomial",
                       ", ".join(str(x) for x in result.inconsistent))

    if not result.is_integral:
        logger.warning("constant term %s is fractional; reporting numerator %d",
                       result.constant, result.secret)
    logger.debug("reconstructed from x=%s: constant term %s",
                 [p.x for p in used], result.constant)
    return result


def reconstruct(document: ShareDocument, order: str = DEFAULT_ORDER) -> Reconstruction:
    """Decode the document's shares and recover its constant term."""
    return reconstruct_points(document.points(), document.k, order)
