"""
FamilySummary: Сводка по одной семье

Immutable Pydantic модель выхода get_family_statistic.
Соответствует схеме contracts/schema/family_summary.json.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class FamilySummary(BaseModel):
    """
    Сводка по семье.

    Immutable модель (frozen=True). Создаётся заново для каждой семьи
    и не ссылается на входные записи.
    """

    family_id: int = Field(..., description="Идентификатор семьи (копия family.id)")
    number_of_family_members: int = Field(..., ge=0, description="Количество членов семьи")
    average_age: Decimal = Field(
        ..., ge=0, description="Средний возраст (0 для семьи без членов)"
    )

    model_config = {"frozen": True}
