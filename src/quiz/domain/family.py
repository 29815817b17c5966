"""
Family / Person: Входные модели семьи

Immutable Pydantic модели семьи и её членов.

Статистика семей читает только атрибуты family.id, family.persons
и person.age, поэтому вместо этих моделей допустим любой объект
с теми же атрибутами.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# =============================================================================
# PERSON MODEL
# =============================================================================


class Person(BaseModel):
    """
    Член семьи.

    Возраст хранится как Decimal (int и float конвертируются автоматически).
    """

    first_name: str = Field("", description="Имя")
    last_name: str = Field("", description="Фамилия")
    age: Decimal = Field(..., ge=0, description="Возраст (неотрицательный)")

    model_config = {"frozen": True}


# =============================================================================
# FAMILY MODEL
# =============================================================================


class Family(BaseModel):
    """
    Семья: уникальный идентификатор и упорядоченный набор членов.

    Immutable модель (frozen=True); persons хранится как tuple.
    """

    id: int = Field(..., description="Уникальный идентификатор семьи")
    persons: tuple[Person, ...] = Field(
        default=(), description="Члены семьи (порядок сохраняется)"
    )

    model_config = {"frozen": True}
