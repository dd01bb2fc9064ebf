"""Test utilities: share fixtures and a cleartext oracle."""

from pathlib import Path

from core.radix import encode
from shares.document import RESERVED_KEY, SharePoint

SAMPLES = Path(__file__).parent.parent / "samples"


def sample_path(name):
    return SAMPLES / name


def evaluate(coeffs, x):
    """Cleartext oracle: sum c_i * x^i over ints, coeffs[0] = constant."""
    return sum(c * x ** i for i, c in enumerate(coeffs))


def make_points(coeffs, xs):
    return [SharePoint(x, evaluate(coeffs, x)) for x in xs]


def make_document(coeffs, xs, bases, k=None):
    """Share document for the integer polynomial `coeffs` at `xs`.

    y at xs[i] is written in bases[i % len(bases)].
    """
    k = len(coeffs) if k is None else k
    doc = {RESERVED_KEY: {"n": len(xs), "k": k}}
    for i, x in enumerate(xs):
        base = bases[i % len(bases)]
        doc[str(x)] = {"base": str(base), "value": encode(evaluate(coeffs, x), base)}
    return doc
