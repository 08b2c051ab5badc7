"""
Vortex Contracts — JSON Schema проверка вывода Vortex Matrix

Два контракта в contracts/schema/:
- vortex_result.json: один уровень (price, time, origin, kind);
  origin ограничен форматом pivot/пересечения
- vortex_matrix.json: границы диапазона + список уровней; элементы
  списка ссылаются на vortex_result через $ref (urn-идентификатор),
  поэтому формат уровня задан в одном месте

Схемы загружаются один раз в общий referencing.Registry.
Нарушение контракта поднимается как ContractViolation со списком
всех ошибок (путь в документе + сообщение jsonschema).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator
from referencing import Registry
from referencing.jsonschema import DRAFT202012

from src.core.domain.result import VortexMatrix


# =============================================================================
# CONSTANTS
# =============================================================================

# Корень проекта / contracts / schema (4 уровня вверх от этого файла)
SCHEMA_DIR: Final[Path] = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"

VORTEX_RESULT_CONTRACT: Final[str] = "vortex_result"
VORTEX_MATRIX_CONTRACT: Final[str] = "vortex_matrix"

CONTRACT_NAMES: Final[tuple[str, ...]] = (VORTEX_RESULT_CONTRACT, VORTEX_MATRIX_CONTRACT)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """
    Данные не соответствуют контракту Vortex.

    Attributes:
        contract: Имя нарушенного контракта
        errors: Сообщения в формате '<путь>: <сообщение>', отсортированные по пути
    """

    def __init__(self, contract: str, errors: list[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract} contract violated: " + "; ".join(errors))


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def _load_contracts() -> tuple[dict[str, dict[str, Any]], Registry]:
    """
    Загрузка обеих схем и построение registry для $ref между ними.

    Returns:
        (схемы по имени контракта, registry по $id)

    Raises:
        FileNotFoundError: Если файл схемы не найден
        jsonschema.SchemaError: Если файл не является валидной JSON Schema
    """
    schemas: dict[str, dict[str, Any]] = {}
    registry: Registry = Registry()

    for name in CONTRACT_NAMES:
        schema_path = SCHEMA_DIR / f"{name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
        Draft202012Validator.check_schema(schema)

        schemas[name] = schema
        registry = registry.with_resource(schema["$id"], DRAFT202012.create_resource(schema))

    return schemas, registry.crawl()


def load_contract_schema(contract: str) -> dict[str, Any]:
    """
    Схема контракта по имени.

    Args:
        contract: 'vortex_result' или 'vortex_matrix'

    Raises:
        KeyError: Если контракт неизвестен
    """
    schemas, _ = _load_contracts()
    if contract not in schemas:
        raise KeyError(f"Unknown contract: {contract}, expected one of {CONTRACT_NAMES}")
    return schemas[contract]


def _validator(contract: str) -> Draft202012Validator:
    _, registry = _load_contracts()
    return Draft202012Validator(load_contract_schema(contract), registry=registry)


# =============================================================================
# VALIDATION
# =============================================================================


def contract_errors(contract: str, data: Any) -> list[str]:
    """
    Все ошибки данных относительно контракта.

    Args:
        contract: Имя контракта
        data: JSON-совместимые данные

    Returns:
        Сообщения '<путь>: <сообщение>' (путь '$' для корня), пустой список если данные валидны
    """
    errors = sorted(
        _validator(contract).iter_errors(data),
        key=lambda e: [str(part) for part in e.absolute_path],
    )
    return [
        "$" + "".join(f"/{part}" for part in error.absolute_path) + f": {error.message}"
        for error in errors
    ]


def validate_vortex_result(data: Any) -> None:
    """
    Проверка одного уровня.

    Raises:
        ContractViolation: Если данные не соответствуют vortex_result
    """
    errors = contract_errors(VORTEX_RESULT_CONTRACT, data)
    if errors:
        raise ContractViolation(VORTEX_RESULT_CONTRACT, errors)


def validate_vortex_matrix(data: Any) -> None:
    """
    Проверка полного результата вычисления.

    Raises:
        ContractViolation: Если данные не соответствуют vortex_matrix
    """
    errors = contract_errors(VORTEX_MATRIX_CONTRACT, data)
    if errors:
        raise ContractViolation(VORTEX_MATRIX_CONTRACT, errors)


def dump_vortex_matrix(matrix: VortexMatrix) -> dict[str, Any]:
    """
    JSON-представление результата, проверенное по vortex_matrix.

    Args:
        matrix: Результат вычисления

    Returns:
        dict для json.dumps

    Raises:
        ContractViolation: Если результат нарушает контракт
    """
    payload = matrix.model_dump(mode="json")
    validate_vortex_matrix(payload)
    return payload
