"""
LetterOccurrence: Частота буквы в тексте

Элемент выхода get_letter_statistic: пара (letter, number_of_occurrences).
NamedTuple, поэтому равен обычному кортежу ("L", 3).
"""

from typing import NamedTuple


class LetterOccurrence(NamedTuple):
    """Буква A–Z и количество её вхождений (всегда >= 1)."""

    letter: str
    number_of_occurrences: int
