"""
Тесты для модуля Numeric

Проверяет:
1. Классификацию операндов (скаляр / контейнер)
2. Точную проверку аддитивной единицы
3. Проверку конечности значений
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.arith.containers import arithmap
from src.arith.math import (
    ADDITIVE_IDENTITY_DEFAULT,
    is_additive_identity,
    is_container,
    is_scalar,
    is_valid_number,
    negate,
)


class TestOperandClassification:
    """Тесты is_scalar / is_container"""

    @pytest.mark.parametrize(
        "value", [1, 2.5, -3, Decimal("1.1"), Fraction(1, 2), 1 + 2j]
    )
    def test_numbers_are_scalars(self, value) -> None:
        assert is_scalar(value)
        assert not is_container(value)

    @pytest.mark.parametrize("value", ["1", None, [1], (1,), object()])
    def test_non_numbers_are_not_scalars(self, value) -> None:
        assert not is_scalar(value)

    def test_mappings_are_containers(self) -> None:
        assert is_container({})
        assert is_container(arithmap(a=1))
        assert not is_scalar(arithmap(a=1))


class TestAdditiveIdentity:
    """Тесты is_additive_identity и negate"""

    def test_default_is_zero(self) -> None:
        assert ADDITIVE_IDENTITY_DEFAULT == 0

    @pytest.mark.parametrize("value", [0, 0.0, -0.0, Decimal("0"), Fraction(0)])
    def test_zero_values(self, value) -> None:
        assert is_additive_identity(value)

    @pytest.mark.parametrize("value", [1, -1, 1e-300, -5e-324, Decimal("0.0001")])
    def test_non_zero_values_exact(self, value) -> None:
        """Никакой толерантности: малые значения не равны нулю"""
        assert not is_additive_identity(value)

    def test_custom_zero(self) -> None:
        assert is_additive_identity(Decimal("0.00"), zero=Decimal("0"))
        assert not is_additive_identity(0, zero=1)

    def test_negate(self) -> None:
        assert negate(3) == -3
        assert negate(-2.5) == 2.5
        assert negate(Fraction(1, 3)) == Fraction(-1, 3)


class TestIsValidNumber:
    """Тесты is_valid_number"""

    @pytest.mark.parametrize(
        "value", [0, 1, -1.5, 10**400, Decimal("2.5"), Fraction(1, 3), 1 + 1j]
    )
    def test_finite_numbers(self, value) -> None:
        assert is_valid_number(value)

    @pytest.mark.parametrize(
        "value",
        [
            float("nan"),
            float("inf"),
            float("-inf"),
            Decimal("NaN"),
            Decimal("Infinity"),
            complex(float("inf"), 0),
        ],
    )
    def test_non_finite_numbers(self, value) -> None:
        assert not is_valid_number(value)

    @pytest.mark.parametrize("value", [True, False, "1", None, [1.0]])
    def test_non_numbers(self, value) -> None:
        assert not is_valid_number(value)
