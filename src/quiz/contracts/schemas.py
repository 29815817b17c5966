"""
Output Contracts: JSON Schema для сериализованных результатов

Схемы лежат в пакете (quiz/contracts/schema/*.json) и читаются через
importlib.resources, поэтому работают и из обычной установки.
Схема и валидатор загружаются при первом обращении и кэшируются.

Схемы:
- quiz_report (QuizReport.to_dict())
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

QUIZ_REPORT_SCHEMA: Final[str] = "quiz_report"

SCHEMA_NAMES: Final[frozenset[str]] = frozenset({QUIZ_REPORT_SCHEMA})


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """
    Данные не соответствуют контракту.

    Attributes:
        schema_name: Имя нарушенной схемы
        errors: Все найденные нарушения в виде "путь: сообщение"
    """

    def __init__(self, schema_name: str, errors: tuple[str, ...]):
        self.schema_name = schema_name
        self.errors = errors
        super().__init__(f"{schema_name} contract violated: " + "; ".join(errors))


# =============================================================================
# LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-validation схемы из ресурсов пакета.

    Raises:
        KeyError: Если схема не входит в SCHEMA_NAMES
        ValueError: Если схема не проходит meta-validation Draft 2020-12
    """
    if schema_name not in SCHEMA_NAMES:
        raise KeyError(f"Unknown contract schema: {schema_name!r}")

    resource = files(__package__) / "schema" / f"{schema_name}.json"
    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    return schema


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """Валидатор для схемы (создаётся один раз)."""
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# CHECKS
# =============================================================================


def contract_errors(schema_name: str, data: Any) -> tuple[str, ...]:
    """
    Все нарушения контракта, упорядоченные по пути в документе.

    Returns:
        Кортеж строк "путь: сообщение"; пустой, если данные валидны

    Examples:
        >>> contract_errors("quiz_report", {"even_numbers": [], "squares": [],
        ...     "family_statistic": [], "letter_statistic": []})
        ()
    """
    errors = sorted(get_validator(schema_name).iter_errors(data), key=lambda e: e.json_path)
    return tuple(f"{e.json_path}: {e.message}" for e in errors)


def check_contract(schema_name: str, data: Any) -> None:
    """
    Проверка данных против контракта.

    Raises:
        ContractViolation: Со списком всех нарушений
    """
    errors = contract_errors(schema_name, data)
    if errors:
        raise ContractViolation(schema_name, errors)
