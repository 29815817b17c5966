"""
Тесты для Family Statistics

Проверяемые инварианты:
1. Одна сводка на семью, порядок входа сохраняется
2. Средний возраст в Decimal без усечения
3. Семья без членов → average_age = 0
4. None → NullArgumentError, пустой вход → пустой результат
5. Входные записи не изменяются и не совпадают с выходом
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from quiz.domain import Family, FamilySummary, Person
from quiz.stats.family_statistics import (
    EMPTY_FAMILY_AVERAGE_AGE,
    NullArgumentError,
    age_to_decimal,
    get_family_statistic,
    summarize_family,
)


def make_family(family_id: int, ages: list) -> Family:
    return Family(id=family_id, persons=tuple(Person(age=age) for age in ages))


@pytest.fixture
def families() -> list[Family]:
    """Семья из двух человек и пустая семья"""
    return [make_family(1, [30, 40]), make_family(2, [])]


# =============================================================================
# ТЕСТЫ: get_family_statistic
# =============================================================================


class TestGetFamilyStatistic:
    """Тесты get_family_statistic"""

    def test_basic(self, families: list[Family]) -> None:
        """Сводки для обычной и пустой семьи"""
        result = get_family_statistic(families)

        assert result == (
            FamilySummary(family_id=1, number_of_family_members=2, average_age=Decimal(35)),
            FamilySummary(family_id=2, number_of_family_members=0, average_age=Decimal(0)),
        )

    def test_empty_family_average_zero(self) -> None:
        """Семья без членов → average_age = 0, members = 0"""
        (summary,) = get_family_statistic([make_family(7, [])])

        assert summary.family_id == 7
        assert summary.number_of_family_members == 0
        assert summary.average_age == EMPTY_FAMILY_AVERAGE_AGE == 0

    def test_empty_family_not_first(self) -> None:
        """Пустая семья в середине списка обрабатывается так же"""
        result = get_family_statistic(
            [make_family(1, [10]), make_family(2, []), make_family(3, [20, 30])]
        )

        assert [s.family_id for s in result] == [1, 2, 3]
        assert [s.number_of_family_members for s in result] == [1, 0, 2]
        assert [s.average_age for s in result] == [Decimal(10), Decimal(0), Decimal(25)]

    def test_no_integer_truncation(self) -> None:
        """Средний возраст не усекается до целого"""
        (summary,) = get_family_statistic([make_family(1, [1, 2])])
        assert summary.average_age == Decimal("1.5")

    def test_repeating_decimal(self) -> None:
        """Среднее 100/3 считается в Decimal"""
        (summary,) = get_family_statistic([make_family(1, [33, 33, 34])])
        assert summary.average_age == Decimal(100) / Decimal(3)

    def test_decimal_ages(self) -> None:
        """Дробные возрасты"""
        (summary,) = get_family_statistic(
            [make_family(1, [Decimal("30.5"), Decimal("40.5")])]
        )
        assert summary.average_age == Decimal("35.5")

    def test_order_preserved(self) -> None:
        """Порядок выхода совпадает с порядком входа"""
        ids = [5, 3, 9, 1]
        result = get_family_statistic([make_family(i, [i]) for i in ids])
        assert [s.family_id for s in result] == ids

    def test_none_raises(self) -> None:
        """None → NullArgumentError"""
        with pytest.raises(NullArgumentError, match="families") as exc_info:
            get_family_statistic(None)

        assert exc_info.value.param_name == "families"

    def test_null_argument_is_type_error(self) -> None:
        """NullArgumentError: подкласс TypeError"""
        with pytest.raises(TypeError):
            get_family_statistic(None)

    def test_empty_collection(self) -> None:
        """Пустой список → пустой результат"""
        assert get_family_statistic([]) == ()

    def test_accepts_generator(self) -> None:
        """Любой Iterable допустим"""
        result = get_family_statistic(make_family(i, [20]) for i in range(3))
        assert len(result) == 3

    def test_duck_typed_records(self) -> None:
        """Допустим любой объект с атрибутами id / persons / age"""
        family = SimpleNamespace(
            id=42, persons=[SimpleNamespace(age=20), SimpleNamespace(age=31)]
        )
        (summary,) = get_family_statistic([family])

        assert summary.family_id == 42
        assert summary.number_of_family_members == 2
        assert summary.average_age == Decimal("25.5")

    def test_input_not_mutated(self, families: list[Family]) -> None:
        """Вход не изменяется"""
        snapshot = [family.model_dump() for family in families]
        get_family_statistic(families)
        assert [family.model_dump() for family in families] == snapshot

    def test_output_does_not_alias_input(self, families: list[Family]) -> None:
        """Выход: новые объекты FamilySummary"""
        result = get_family_statistic(families)
        assert all(isinstance(summary, FamilySummary) for summary in result)
        assert all(summary is not family for summary, family in zip(result, families))

    def test_deterministic(self, families: list[Family]) -> None:
        """Повторный вызов даёт идентичный результат"""
        assert get_family_statistic(families) == get_family_statistic(families)


# =============================================================================
# ТЕСТЫ: helpers
# =============================================================================


class TestAgeToDecimal:
    """Тесты age_to_decimal"""

    def test_int(self) -> None:
        assert age_to_decimal(30) == Decimal(30)

    def test_decimal_unchanged(self) -> None:
        value = Decimal("12.25")
        assert age_to_decimal(value) is value

    def test_float_uses_repr(self) -> None:
        """30.1 → ровно Decimal('30.1')"""
        assert age_to_decimal(30.1) == Decimal("30.1")


class TestSummarizeFamily:
    """Тесты summarize_family"""

    def test_single_member(self) -> None:
        summary = summarize_family(make_family(3, [18]))
        assert summary == FamilySummary(
            family_id=3, number_of_family_members=1, average_age=Decimal(18)
        )
