"""
Sequences: Генераторы числовых последовательностей

Две операции над диапазоном [1, exclusive_upper_limit):
- get_even_numbers: чётные числа по возрастанию
- get_squares: квадраты, кратные SQUARE_DIVISOR, по убыванию

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. get_even_numbers: exclusive_upper_limit < 1 → UpperLimitOutOfRangeError
2. get_squares: exclusive_upper_limit < 1 → пустой результат (не ошибка)
3. get_squares: (exclusive_upper_limit - 1)² > INT32_MAX → SquareOverflowError,
   проверяется до перебора; усечённый результат невозможен
4. Порядок get_squares: строго по убыванию (контракт выхода)
5. Результаты неизменяемы (tuple), функции детерминированы
"""

from typing import Final

from quiz.math.int_domain import (
    INT32_MAX,
    is_int32,
    square_fits_int32,
    validate_int,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Нижняя граница диапазона (включительно)
RANGE_START: Final[int] = 1

# Квадрат попадает в результат get_squares, если делится на SQUARE_DIVISOR
SQUARE_DIVISOR: Final[int] = 7


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UpperLimitOutOfRangeError(ValueError):
    """
    Граница диапазона вне допустимых значений.

    Возникает в get_even_numbers при exclusive_upper_limit < 1
    или exclusive_upper_limit > INT32_MAX.
    """

    pass


class SquareOverflowError(OverflowError):
    """
    Квадрат наибольшего кандидата превышает INT32_MAX.

    Обнаруживается проспективно: до вычисления квадратов.
    """

    pass


# =============================================================================
# EVEN NUMBERS
# =============================================================================


def get_even_numbers(exclusive_upper_limit: int) -> tuple[int, ...]:
    """
    Все чётные числа n, 1 <= n < exclusive_upper_limit, по возрастанию.

    Args:
        exclusive_upper_limit: Верхняя граница (не включительно), >= 1

    Returns:
        Чётные числа по возрастанию (пустой tuple при exclusive_upper_limit == 1)

    Note:
        Результат материализуется целиком: около exclusive_upper_limit / 2
        элементов. Для INT32_MAX это ~1.07 млрд int (десятки ГБ памяти).

    Raises:
        TypeError: Если exclusive_upper_limit не int
        UpperLimitOutOfRangeError: Если exclusive_upper_limit < 1 или > INT32_MAX

    Examples:
        >>> get_even_numbers(10)
        (2, 4, 6, 8)
        >>> get_even_numbers(1)
        ()
    """
    validate_int(exclusive_upper_limit, "exclusive_upper_limit")

    if exclusive_upper_limit < RANGE_START:
        raise UpperLimitOutOfRangeError(
            f"exclusive_upper_limit must be >= {RANGE_START}, got {exclusive_upper_limit}"
        )

    if exclusive_upper_limit > INT32_MAX:
        raise UpperLimitOutOfRangeError(
            f"exclusive_upper_limit must be <= {INT32_MAX}, got {exclusive_upper_limit}"
        )

    # Первое чётное число в [1, ...): это 2
    return tuple(range(2, exclusive_upper_limit, 2))


# =============================================================================
# SQUARES
# =============================================================================


def get_squares(exclusive_upper_limit: int) -> tuple[int, ...]:
    """
    Квадраты чисел n, 1 <= n < exclusive_upper_limit, делящиеся на SQUARE_DIVISOR.

    Результат упорядочен по убыванию.

    Args:
        exclusive_upper_limit: Верхняя граница (не включительно)

    Returns:
        Квадраты по убыванию; пустой tuple при exclusive_upper_limit < 1

    Raises:
        TypeError: Если exclusive_upper_limit не int
        SquareOverflowError: Если (exclusive_upper_limit - 1)² > INT32_MAX

    Examples:
        >>> get_squares(8)
        (49,)
        >>> get_squares(15)
        (196, 49)
        >>> get_squares(0)
        ()
    """
    validate_int(exclusive_upper_limit, "exclusive_upper_limit")

    if exclusive_upper_limit < RANGE_START:
        return ()

    largest = exclusive_upper_limit - 1

    if not is_int32(largest) or not square_fits_int32(largest):
        raise SquareOverflowError(
            f"Square of {largest} exceeds INT32_MAX={INT32_MAX} "
            f"(exclusive_upper_limit={exclusive_upper_limit})"
        )

    # Перебор сверху вниз сразу даёт порядок по убыванию
    return tuple(
        n * n
        for n in range(largest, RANGE_START - 1, -1)
        if (n * n) % SQUARE_DIVISOR == 0
    )
