"""
ArithMapSnapshot — сериализуемый снимок ArithMap

Immutable Pydantic модель, представляющая содержимое ArithMap
со строковыми ключами и конечными вещественными значениями.
Полная совместимость с JSON Schema (contracts/schema/arith_map.json).
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.arith.containers.arith_map import ArithMap
from src.arith.math.numeric import ADDITIVE_IDENTITY_DEFAULT, is_valid_number

logger = logging.getLogger(__name__)

# Версия формата снимка (должна совпадать с arith_map.json)
SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# VALIDATION
# =============================================================================


def _check_finite_entries(entries: dict) -> None:
    """
    Проверка, что все значения — конечные числа.

    Raises:
        ValueError: Если значение NaN/Inf, bool или не число
    """
    for key, value in entries.items():
        if not is_valid_number(value):
            raise ValueError(
                f"entry {key!r} has non-finite or non-numeric value {value!r}"
            )


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class ArithMapSnapshot(BaseModel):
    """
    Снимок содержимого ArithMap.

    Immutable модель (frozen=True). Ключи — строки, значения — конечные
    int/float (NaN/Inf не представимы в JSON и отклоняются).

    frozen=True запрещает только переприсваивание полей: dict в entries
    остаётся изменяемым; to_arith_map повторно проверяет значения.
    """

    schema_version: str = Field(
        SNAPSHOT_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия формата снимка",
    )
    entries: dict[str, int | float] = Field(
        default_factory=dict, description="Записи key → value"
    )

    model_config = {"frozen": True}

    @field_validator("entries", mode="before")
    @classmethod
    def validate_finite_values(cls, v: Any) -> Any:
        """
        Проверка, что все значения — конечные числа.

        bool числом не считается и отклоняется.
        """
        if isinstance(v, dict):
            _check_finite_entries(v)
        return v

    @classmethod
    def from_arith_map(cls, arith_map: ArithMap) -> "ArithMapSnapshot":
        """
        Снимок текущего содержимого контейнера.

        Args:
            arith_map: Контейнер со строковыми ключами

        Returns:
            ArithMapSnapshot

        Raises:
            ValidationError: Если ключи не строки или значения не конечные числа
        """
        logger.debug("snapshot of %d entries", len(arith_map))
        return cls(entries=dict(arith_map.data))

    def to_arith_map(self, zero: Any = ADDITIVE_IDENTITY_DEFAULT) -> ArithMap:
        """
        Восстановление контейнера из снимка.

        Args:
            zero: Аддитивная единица восстановленного контейнера

        Returns:
            Новый ArithMap (независимый от снимка)

        Raises:
            ValueError: Если entries изменили после создания снимка
                и в них оказалось NaN/Inf или не число
        """
        _check_finite_entries(self.entries)
        return ArithMap(self.entries, zero=zero)
