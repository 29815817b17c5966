"""
Letter Statistics: Частота букв в тексте

Считает вхождения букв A–Z без учёта регистра:
- строчные латинские буквы приводятся к верхнему регистру
- всё остальное (цифры, пунктуация, пробелы, нелатинские буквы) игнорируется

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат упорядочен по алфавиту A→Z
2. Буквы с нулевым количеством вхождений в результат НЕ попадают
3. Нелатинские символы не сворачиваются в A–Z ("ß".upper() == "SS" не считается)
"""

import string
from collections import Counter
from typing import Final

from quiz.domain.letter_occurrence import LetterOccurrence

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Алфавит подсчёта (и порядок выхода)
ALPHABET: Final[str] = string.ascii_uppercase

# Символы, участвующие в подсчёте (до приведения регистра)
COUNTED_CHARACTERS: Final[frozenset[str]] = frozenset(string.ascii_letters)


# =============================================================================
# LETTER STATISTIC
# =============================================================================


def get_letter_statistic(text: str) -> tuple[LetterOccurrence, ...]:
    """
    Статистика вхождений букв A–Z в тексте.

    Args:
        text: Анализируемый текст (может быть пустым)

    Returns:
        LetterOccurrence по алфавиту, только для букв с >= 1 вхождением

    Examples:
        >>> get_letter_statistic("abBA!")
        (LetterOccurrence(letter='A', number_of_occurrences=2), LetterOccurrence(letter='B', number_of_occurrences=2))
        >>> get_letter_statistic("")
        ()
    """
    counts = Counter(char.upper() for char in text if char in COUNTED_CHARACTERS)

    return tuple(
        LetterOccurrence(letter, counts[letter])
        for letter in ALPHABET
        if counts[letter] > 0
    )
