"""
Family Statistics: Сводная статистика по семьям

Для каждой входной семьи формируется FamilySummary:
- family_id = family.id
- number_of_family_members = len(family.persons)
- average_age = сумма возрастов / количество членов (Decimal)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. families is None → NullArgumentError
2. Ровно одна сводка на семью, порядок входа сохраняется
3. Семья без членов → average_age = 0 (деления на ноль нет)
4. Среднее считается в Decimal, без целочисленного усечения
5. Входные записи не изменяются и не попадают в результат
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Final

from quiz.domain.family import Family
from quiz.domain.family_summary import FamilySummary

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Средний возраст семьи без членов
EMPTY_FAMILY_AVERAGE_AGE: Final[Decimal] = Decimal(0)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NullArgumentError(TypeError):
    """
    Обязательный аргумент не передан (None).

    Attributes:
        param_name: Имя отсутствующего аргумента
    """

    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(f"Argument '{param_name}' must not be None")


# =============================================================================
# HELPERS
# =============================================================================


def age_to_decimal(age: Decimal | int | float) -> Decimal:
    """
    Конверсия возраста в Decimal.

    float проходит через repr, чтобы 30.1 дал ровно Decimal("30.1"),
    а не двоичное приближение.

    Examples:
        >>> age_to_decimal(30)
        Decimal('30')
        >>> age_to_decimal(30.1)
        Decimal('30.1')
    """
    if isinstance(age, Decimal):
        return age
    if isinstance(age, float):
        return Decimal(repr(age))
    return Decimal(age)


def summarize_family(family: Family) -> FamilySummary:
    """
    Сводка по одной семье.

    Args:
        family: Семья (любой объект с атрибутами id и persons)

    Returns:
        Новый FamilySummary
    """
    ages = tuple(age_to_decimal(person.age) for person in family.persons)
    member_count = len(ages)

    if member_count == 0:
        average_age = EMPTY_FAMILY_AVERAGE_AGE
    else:
        average_age = sum(ages, Decimal(0)) / member_count

    return FamilySummary(
        family_id=family.id,
        number_of_family_members=member_count,
        average_age=average_age,
    )


# =============================================================================
# FAMILY STATISTIC
# =============================================================================


def get_family_statistic(families: Iterable[Family] | None) -> tuple[FamilySummary, ...]:
    """
    Статистика по семьям: одна запись FamilySummary на каждую семью.

    Args:
        families: Семьи для анализа (не None)

    Returns:
        Сводки в порядке итерации families; пустой tuple для пустого входа

    Raises:
        NullArgumentError: Если families is None
    """
    if families is None:
        raise NullArgumentError("families")

    return tuple(summarize_family(family) for family in families)
