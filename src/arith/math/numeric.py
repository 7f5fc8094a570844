"""
Numeric — примитивы для значений арифметических контейнеров

Модуль задаёт общие правила работы со значениями ArithMap:
- Аддитивная единица (zero) по умолчанию
- Определение скаляра (numbers.Number) и контейнера (Mapping)
- Точная проверка на аддитивную единицу (без epsilon)
- Проверка конечности значения (NaN/Inf) для сериализации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение с zero всегда точное: 1e-300 != 0 и сохраняется при prune
2. Скаляр — только numbers.Number, Mapping никогда не считается скаляром
"""

import cmath
import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Integral, Number
from typing import Any, Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Аддитивная единица по умолчанию (0 == 0.0 == Decimal(0) == Fraction(0))
ADDITIVE_IDENTITY_DEFAULT: Final[int] = 0


# =============================================================================
# КЛАССИФИКАЦИЯ ОПЕРАНДОВ
# =============================================================================


def is_scalar(value: Any) -> bool:
    """
    Проверка, является ли операнд скаляром.

    Скаляр — любое значение numbers.Number (int, float, Decimal,
    Fraction, complex, numpy scalar types).

    Examples:
        >>> is_scalar(1)
        True
        >>> is_scalar(2.5)
        True
        >>> is_scalar({"a": 1})
        False
        >>> is_scalar("1")
        False
    """
    return isinstance(value, Number)


def is_container(value: Any) -> bool:
    """Проверка, является ли операнд контейнером (Mapping)."""
    return isinstance(value, Mapping)


# =============================================================================
# АДДИТИВНАЯ ЕДИНИЦА
# =============================================================================


def is_additive_identity(value: Any, zero: Any = ADDITIVE_IDENTITY_DEFAULT) -> bool:
    """
    Точная проверка равенства аддитивной единице.

    В отличие от epsilon-сравнений, здесь толерантность не применяется:
    значения, близкие к нулю, но не равные ему, не считаются нулём.

    Args:
        value: Проверяемое значение
        zero: Аддитивная единица типа значения (default: 0)

    Returns:
        True если value == zero

    Examples:
        >>> is_additive_identity(0)
        True
        >>> is_additive_identity(0.0)
        True
        >>> is_additive_identity(-0.0)
        True
        >>> is_additive_identity(1e-300)
        False
    """
    return value == zero


def negate(value: Any, zero: Any = ADDITIVE_IDENTITY_DEFAULT) -> Any:
    """
    Аддитивная инверсия: zero - value.

    Используется вместо унарного минуса, чтобы поддержать типы,
    для которых определено только бинарное вычитание.
    """
    return zero - value


# =============================================================================
# КОНЕЧНОСТЬ ЗНАЧЕНИЙ
# =============================================================================


def is_valid_number(value: Any) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение — конечное число, False для NaN/Inf
        и для значений, не являющихся числами

    Examples:
        >>> is_valid_number(1.5)
        True
        >>> is_valid_number(float("nan"))
        False
        >>> is_valid_number(float("-inf"))
        False
        >>> is_valid_number(True)
        False
    """
    # bool — подкласс int, но числом значения контейнера не считается
    if isinstance(value, bool) or not is_scalar(value):
        return False

    if isinstance(value, Integral):
        return True

    if isinstance(value, Decimal):
        return value.is_finite()

    if isinstance(value, complex):
        return cmath.isfinite(value)

    try:
        return math.isfinite(value)
    except (TypeError, ValueError, OverflowError):
        # Number без конверсии в float (пользовательские типы)
        return False
