"""
Statistics modules для quiz

Агрегации по семьям и частотам букв.
"""

# Family Statistics
from quiz.stats.family_statistics import (
    EMPTY_FAMILY_AVERAGE_AGE,
    NullArgumentError,
    age_to_decimal,
    get_family_statistic,
    summarize_family,
)

# Letter Statistics
from quiz.stats.letter_statistics import (
    ALPHABET,
    COUNTED_CHARACTERS,
    get_letter_statistic,
)

__all__ = [
    # Family Statistics: Constants
    "EMPTY_FAMILY_AVERAGE_AGE",
    # Family Statistics: Exceptions
    "NullArgumentError",
    # Family Statistics: Functions
    "age_to_decimal",
    "get_family_statistic",
    "summarize_family",
    # Letter Statistics: Constants
    "ALPHABET",
    "COUNTED_CHARACTERS",
    # Letter Statistics: Functions
    "get_letter_statistic",
]
