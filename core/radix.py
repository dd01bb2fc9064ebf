"""Arbitrary-precision base-N digit strings (bases 2..36)."""

from core.errors import InvalidBase, InvalidDigitChar, DigitOutOfRange

MIN_BASE = 2
MAX_BASE = 36

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def check_base(base) -> int:
    """Return base as an int, or raise InvalidBase."""
    if isinstance(base, bool):
        raise InvalidBase(base)
    if isinstance(base, float):
        if not base.is_integer():
            raise InvalidBase(base)
        base = int(base)
    if not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    return base


def digit_value(ch: str) -> int:
    """Map '0'-'9' to 0-9 and 'a'-'z' (either case) to 10-35."""
    if '0' <= ch <= '9':
        return ord(ch) - ord('0')
    lower = ch.lower()
    if ch.isascii() and 'a' <= lower <= 'z':
        return ord(lower) - ord('a') + 10
    raise InvalidDigitChar(ch)


def decode(digits: str, base) -> int:
    """Parse a signed digit string in the given base into an exact int.

    Surrounding whitespace is ignored and a single leading '-' negates the
    result. An empty digit sequence decodes to 0.
    """
    if not isinstance(digits, str):
        raise TypeError(f"digits must be a string, got {type(digits).__name__}")
    b = check_base(base)

    s = digits.strip()
    negative = s.startswith('-')
    if negative:
        s = s[1:]

    result = 0
    for ch in s:
        d = digit_value(ch)
        if d >= b:
            raise DigitOutOfRange(ch, b)
        result = result * b + d
    return -result if negative else result


def encode(value: int, base) -> str:
    """Render an int as a lowercase digit string in the given base."""
    b = check_base(base)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    out = []
    while value:
        value, d = divmod(value, b)
        out.append(DIGITS[d])
    return sign + "".join(reversed(out))
