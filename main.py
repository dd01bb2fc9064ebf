"""Polynomial Secret Recovery — Entry Point.

Usage:
    python main.py <input.json> [--document-order] [-v]
    python main.py --deal SECRET K N [SEED] [-v]

Prints the constant term of the degree k-1 polynomial defined by the first
k shares of the input document.
"""

import json
import logging
import sys

from core.errors import ReconstructionError
from shares.dealer import deal
from shares.document import load_document
from shares.reconstruct import reconstruct, ORDER_AS_GIVEN, ORDER_BY_X

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

USAGE = ("Usage: python main.py <input.json> [--document-order] [-v]\n"
         "       python main.py --deal SECRET K N [SEED] [-v]")

logger = logging.getLogger("main")


def run_deal(args: list[str]) -> int:
    if len(args) not in (3, 4):
        print(USAGE, file=sys.stderr)
        return 1
    try:
        secret, k, n = (int(a) for a in args[:3])
        seed = int(args[3]) if len(args) == 4 else None
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        document = deal(secret, k, n, seed=seed)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(json.dumps(document, indent=2))
    return 0


def run_reconstruct(path: str, order: str) -> int:
    try:
        document = load_document(path)
        result = reconstruct(document, order=order)
    except OSError as e:
        print(f"error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return 2
    except ReconstructionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info("used %d of %d shares (k=%d, n=%d)",
                len(result.used), len(document.entries), document.k, document.n)
    print(result.secret)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in args:
            args.remove(flag)
            verbose = True
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format=LOG_FORMAT, stream=sys.stderr)

    if args and args[0] == "--deal":
        return run_deal(args[1:])

    order = ORDER_BY_X
    if "--document-order" in args:
        args.remove("--document-order")
        order = ORDER_AS_GIVEN

    if len(args) != 1 or args[0].startswith("-"):
        print(USAGE, file=sys.stderr)
        return 1
    return run_reconstruct(args[0], order)


if __name__ == "__main__":
    sys.exit(main())
