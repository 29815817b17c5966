"""
Math modules для quiz

Числовые последовательности и границы домена int32.
"""

# Int32 Domain
from quiz.math.int_domain import (
    INT32_MAX,
    INT32_MIN,
    is_int,
    is_int32,
    square_fits_int32,
    validate_int,
)

# Sequences
from quiz.math.sequences import (
    RANGE_START,
    SQUARE_DIVISOR,
    SquareOverflowError,
    UpperLimitOutOfRangeError,
    get_even_numbers,
    get_squares,
)

__all__ = [
    # Int32 Domain: Constants
    "INT32_MAX",
    "INT32_MIN",
    # Int32 Domain: Checks
    "is_int",
    "is_int32",
    "square_fits_int32",
    "validate_int",
    # Sequences: Constants
    "RANGE_START",
    "SQUARE_DIVISOR",
    # Sequences: Exceptions
    "SquareOverflowError",
    "UpperLimitOutOfRangeError",
    # Sequences: Functions
    "get_even_numbers",
    "get_squares",
]
