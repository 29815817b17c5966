"""
Quiz: набор чистых функций-запросов над числами, строками и коллекциями.

Операции независимы друг от друга и не имеют побочных эффектов:
- get_even_numbers      : чётные числа в [1, limit)
- get_squares           : квадраты, кратные 7, по убыванию
- get_family_statistic  : сводка по каждой семье
- get_letter_statistic  : частоты букв A–Z
"""

from quiz.contracts import ContractViolation
from quiz.domain import Family, FamilySummary, LetterOccurrence, Person
from quiz.math.sequences import (
    SquareOverflowError,
    UpperLimitOutOfRangeError,
    get_even_numbers,
    get_squares,
)
from quiz.report import QuizReport, build_quiz_report
from quiz.stats.family_statistics import NullArgumentError, get_family_statistic
from quiz.stats.letter_statistics import get_letter_statistic

__all__ = [
    # Operations
    "get_even_numbers",
    "get_squares",
    "get_family_statistic",
    "get_letter_statistic",
    # Exceptions
    "UpperLimitOutOfRangeError",
    "SquareOverflowError",
    "NullArgumentError",
    "ContractViolation",
    # Models
    "Family",
    "Person",
    "FamilySummary",
    "LetterOccurrence",
    # Report
    "QuizReport",
    "build_quiz_report",
]
