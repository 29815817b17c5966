"""
Output contracts для quiz

JSON Schema контракты сериализованных результатов.
"""

from .schemas import (
    QUIZ_REPORT_SCHEMA,
    SCHEMA_NAMES,
    ContractViolation,
    check_contract,
    contract_errors,
    get_validator,
    load_schema,
)

__all__ = [
    # Constants
    "QUIZ_REPORT_SCHEMA",
    "SCHEMA_NAMES",
    # Exceptions
    "ContractViolation",
    # Functions
    "check_contract",
    "contract_errors",
    "get_validator",
    "load_schema",
]
