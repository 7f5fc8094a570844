"""
ArithMap JSON Contract

Модуль для валидации JSON-формы ArithMap (arith_map.json) и обмена
ArithMap ↔ JSON через ArithMapSnapshot.

Схема использует собственное ключевое слово "finite": значение должно быть
конечным числом. JSON не представляет NaN/Inf, но Python-dict до
сериализации может их содержать, поэтому "type": "number" недостаточно.

Поток данных:
    ArithMap → ArithMapSnapshot → dict (mode="json") → schema
    dict → schema → ArithMapSnapshot → ArithMap
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError, validators

from src.arith.containers.arith_map import ArithMap
from src.arith.domain.snapshot import ArithMapSnapshot
from src.arith.math.numeric import is_valid_number

logger = logging.getLogger(__name__)

ARITH_MAP_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "arith_map.json"


# =============================================================================
# SCHEMA
# =============================================================================


def _finite(validator, finite, instance, schema):
    """Ключевое слово "finite": число должно быть конечным."""
    if finite and validator.is_type(instance, "number"):
        if not is_valid_number(instance):
            yield ValidationError(f"{instance!r} is not a finite number")


# Draft 2020-12 + ключевое слово "finite"
ArithMapSchemaValidator = validators.extend(
    Draft202012Validator, {"finite": _finite}
)


@lru_cache(maxsize=None)
def load_arith_map_schema(path: Path = ARITH_MAP_SCHEMA_PATH) -> Dict[str, Any]:
    """
    Загрузка схемы arith_map.json (с кэшированием).

    Args:
        path: Путь к файлу схемы

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        ValueError: Если файл не является валидной JSON Schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        ArithMapSchemaValidator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e

    logger.debug("loaded schema from %s", path)
    return schema


# =============================================================================
# VALIDATOR
# =============================================================================


class ArithMapValidator:
    """
    Валидатор JSON-формы ArithMap.

    Кроме проверки dict против схемы умеет выгружать ArithMap в
    проверенную JSON-форму (dump) и загружать её обратно (load).
    """

    def __init__(self, schema_path: Path = ARITH_MAP_SCHEMA_PATH):
        self.schema = load_arith_map_schema(schema_path)
        self.validator = ArithMapSchemaValidator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def dump(self, arith_map: ArithMap) -> Dict[str, Any]:
        """
        Выгрузка ArithMap в JSON-форму, проверенную по схеме.

        Args:
            arith_map: Контейнер со строковыми ключами

        Returns:
            dict, готовый для json.dumps

        Raises:
            pydantic.ValidationError: Если контейнер не представим снимком
            ValidationError: Если JSON-форма не соответствует схеме
        """
        data = ArithMapSnapshot.from_arith_map(arith_map).model_dump(mode="json")
        self.validate(data)
        return data

    def load(self, data: Dict[str, Any]) -> ArithMap:
        """
        Загрузка ArithMap из JSON-формы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validate(data)
        return ArithMapSnapshot.model_validate(data).to_arith_map()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_arith_map(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-формы ArithMap (включая проверку NaN/Inf).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ArithMapValidator().validate(data)


def dump_arith_map(arith_map: ArithMap) -> Dict[str, Any]:
    """ArithMap → проверенный JSON-совместимый dict."""
    return ArithMapValidator().dump(arith_map)


def load_arith_map(data: Dict[str, Any]) -> ArithMap:
    """JSON-совместимый dict → ArithMap (после проверки по схеме)."""
    return ArithMapValidator().load(data)
