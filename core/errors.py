"""Error taxonomy for decoding, exact arithmetic and reconstruction."""

from enum import Enum


class ErrorKind(Enum):
    INVALID_BASE = "invalid_base"
    INVALID_DIGIT_CHAR = "invalid_digit_char"
    DIGIT_OUT_OF_RANGE = "digit_out_of_range"
    DIVISION_BY_ZERO = "division_by_zero"
    SINGULAR_MATRIX = "singular_matrix"
    INVALID_DOCUMENT = "invalid_document"
    INSUFFICIENT_POINTS = "insufficient_points"


class ReconstructionError(Exception):
    """Base class. Every failure is terminal for the computation."""

    kind: ErrorKind

    def __str__(self):
        return f"{self.kind.value}: {self.args[0] if self.args else ''}"


class InvalidBase(ReconstructionError, ValueError):
    kind = ErrorKind.INVALID_BASE

    def __init__(self, base):
        self.base = base
        super().__init__(f"base {base!r} not supported, must be an integer in [2, 36]")


class InvalidDigitChar(ReconstructionError, ValueError):
    kind = ErrorKind.INVALID_DIGIT_CHAR

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid digit {char!r}")


class DigitOutOfRange(ReconstructionError, ValueError):
    kind = ErrorKind.DIGIT_OUT_OF_RANGE

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"digit {char!r} not valid for base {base}")


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "fraction division by zero"):
        super().__init__(message)


class SingularMatrix(ReconstructionError, ArithmeticError):
    """No nonzero pivot candidate in a column."""

    kind = ErrorKind.SINGULAR_MATRIX

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"no nonzero pivot in column {column}")


class InvalidDocument(ReconstructionError, ValueError):
    kind = ErrorKind.INVALID_DOCUMENT

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{path}: {message}")


class InsufficientPoints(ReconstructionError, ValueError):
    kind = ErrorKind.INSUFFICIENT_POINTS

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"need {required} points, only {available} available")
