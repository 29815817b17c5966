"""
Domain models and value objects.

Contains input records (Family, Person) and output values
(FamilySummary, LetterOccurrence).
"""

from quiz.domain.family import Family, Person
from quiz.domain.family_summary import FamilySummary
from quiz.domain.letter_occurrence import LetterOccurrence

__all__ = [
    # Input records
    "Family",
    "Person",
    # Output values
    "FamilySummary",
    "LetterOccurrence",
]
