"""
QuizReport: Сводный отчёт по всем операциям

Вызывает четыре независимые операции и собирает их результаты
в один неизменяемый объект. Ошибки операций пробрасываются без изменений.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Dict

from quiz.contracts.schemas import QUIZ_REPORT_SCHEMA, check_contract
from quiz.domain.family import Family
from quiz.domain.family_summary import FamilySummary
from quiz.domain.letter_occurrence import LetterOccurrence
from quiz.math.sequences import get_even_numbers, get_squares
from quiz.stats.family_statistics import get_family_statistic
from quiz.stats.letter_statistics import get_letter_statistic


@dataclass(frozen=True)
class QuizReport:
    """Результаты всех операций для одного набора входных данных."""

    even_numbers: tuple[int, ...]
    squares: tuple[int, ...]
    family_statistic: tuple[FamilySummary, ...]
    letter_statistic: tuple[LetterOccurrence, ...]

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление отчёта.

        average_age сериализуется строкой (как Pydantic в JSON-режиме).
        Результат проверяется против контракта quiz_report.

        Raises:
            ContractViolation: Если отчёт собран вручную из невалидных данных
        """
        data = {
            "even_numbers": list(self.even_numbers),
            "squares": list(self.squares),
            "family_statistic": [
                summary.model_dump(mode="json") for summary in self.family_statistic
            ],
            "letter_statistic": [
                occurrence._asdict() for occurrence in self.letter_statistic
            ],
        }
        check_contract(QUIZ_REPORT_SCHEMA, data)
        return data


def build_quiz_report(
    exclusive_upper_limit: int,
    families: Iterable[Family] | None,
    text: str,
) -> QuizReport:
    """
    Построение отчёта.

    Args:
        exclusive_upper_limit: Граница для get_even_numbers и get_squares
        families: Семьи для get_family_statistic
        text: Текст для get_letter_statistic

    Returns:
        QuizReport

    Raises:
        UpperLimitOutOfRangeError: из get_even_numbers
        SquareOverflowError: из get_squares
        NullArgumentError: из get_family_statistic
    """
    return QuizReport(
        even_numbers=get_even_numbers(exclusive_upper_limit),
        squares=get_squares(exclusive_upper_limit),
        family_statistic=get_family_statistic(families),
        letter_statistic=get_letter_statistic(text),
    )
