"""
Int32 Domain: Границы 32-битного знакового целого

Все числовые генераторы работают в домене signed int32:
- границы диапазонов (exclusive_upper_limit) лежат в [INT32_MIN, INT32_MAX]
- вычисленные значения (например, квадраты) не превышают INT32_MAX

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение проверяется ДО вычисления, а не ловится после
2. bool не считается целым числом (True/False отвергаются)
3. Все проверки точные (целочисленная арифметика, без float sqrt)
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ДОМЕНА
# =============================================================================

INT32_MAX: Final[int] = 2**31 - 1
INT32_MIN: Final[int] = -(2**31)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_int(value: object) -> bool:
    """
    Проверка, что значение является целым числом (bool исключён).

    Examples:
        >>> is_int(7)
        True
        >>> is_int(True)
        False
        >>> is_int(7.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def is_int32(value: int) -> bool:
    """Значение лежит в [INT32_MIN, INT32_MAX]."""
    return INT32_MIN <= value <= INT32_MAX


def square_fits_int32(value: int) -> bool:
    """
    Проверка, что value * value не превышает INT32_MAX.

    Точное целочисленное сравнение: граница 46340 (46340² = 2147395600),
    46341² = 2147488281 уже выходит за домен.

    Examples:
        >>> square_fits_int32(46340)
        True
        >>> square_fits_int32(46341)
        False
        >>> square_fits_int32(-46340)
        True
    """
    return value * value <= INT32_MAX


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int(value: object, name: str) -> None:
    """
    Валидация, что значение является целым числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или является bool)
    """
    if not is_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
