"""Generate share documents for a known secret."""

import json

from core import rng
from core.polynomial import Polynomial
from core.radix import encode, check_base, MIN_BASE, MAX_BASE
from shares.document import RESERVED_KEY

DEFAULT_BOUND = 1 << 64


def deal(secret: int, k: int, n: int, bases: list[int] | None = None,
         seed: int | None = None, bound: int = DEFAULT_BOUND) -> dict:
    """Shares of a random degree-(k-1) polynomial with p(0) = secret.

    Points are x = 1..n. Each y is written in bases[i % len(bases)], or in a
    random base when no bases are given.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if n < k:
        raise ValueError(f"n={n} is smaller than k={k}")
    if bound < 2:
        raise ValueError(f"bound must be at least 2, got {bound}")
    if bases is not None:
        if not bases:
            raise ValueError("bases must not be empty")
        bases = [check_base(b) for b in bases]

    if seed is not None:
        rng.set_seed(seed)

    poly = Polynomial.random(degree=k - 1, constant=secret, bound=bound)
    document = {RESERVED_KEY: {"n": n, "k": k}}
    for i, x in enumerate(range(1, n + 1)):
        base = bases[i % len(bases)] if bases else rng.randrange(MIN_BASE, MAX_BASE + 1)
        y = poly.evaluate(x).num
        document[str(x)] = {"base": str(base), "value": encode(y, base)}
    return document


def write_document(document: dict, path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
        f.write("\n")
