"""
ArithMap — контейнер ключ → число с поэлементной арифметикой

Словарь, над которым определены операции:
- Скалярные: M + s, M - s, M * s (и отражённые s + M, s - M, s * M)
- Поэлементные: A + B, A - B по объединению ключей
- prune(): удаление записей, равных аддитивной единице
- In-place варианты: +=, -=, *=

ПРАВИЛО ОБЪЕДИНЕНИЯ (union-with-fallback):
    Ключ, отсутствующий в одном из операндов, считается равным zero:
    (A + B)[k] = A.get(k, zero) + B.get(k, zero)
    (A - B)[k] = A.get(k, zero) - B.get(k, zero)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Бинарные операторы не изменяют операнды (возвращается новый ArithMap)
2. Множество ключей результата поэлементной операции — объединение ключей
3. prune сравнивает с zero точно, без толерантности
4. Порядок вставки не влияет на равенство

Examples:
    >>> arithmap(a=1, b=2) + 1 == {"a": 2, "b": 3}
    True
    >>> arithmap(a=1, b=2) + arithmap(b=2, c=3) == {"a": 1, "b": 4, "c": 3}
    True
    >>> arithmap(a=0, b=1).prune() == {"b": 1}
    True
"""

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from src.arith.math.numeric import (
    ADDITIVE_IDENTITY_DEFAULT,
    is_additive_identity,
    is_container,
    is_scalar,
    negate,
)

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

MapSource = Union[Mapping[K, V], Iterable[tuple[K, V]]]

# Маркер "zero не передан": ArithMap-источник передаёт свой zero
_UNSET: Any = object()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithMapIdentityMismatch(ValueError):
    """
    Попытка объединить два ArithMap с разными аддитивными единицами.

    Union-with-fallback подставляет zero вместо отсутствующих ключей,
    поэтому у операндов zero обязан совпадать.
    """

    pass


# =============================================================================
# ARITH MAP
# =============================================================================


class ArithMap(MutableMapping[K, V], Generic[K, V]):
    """
    Словарь с поэлементной арифметикой.

    Значения — любые numbers.Number (int, float, Decimal, Fraction, complex).
    Ключи — любые hashable значения.

    Attributes:
        data: Нижележащий dict (прямой доступ для интероперабельности)
        zero: Аддитивная единица типа значений (default: 0)
    """

    __slots__ = ("data", "zero")

    def __init__(
        self,
        source: Optional[MapSource] = None,
        *,
        zero: Any = _UNSET,
    ) -> None:
        """
        Создание контейнера.

        Args:
            source: Mapping или iterable пар (key, value); None — пустой контейнер
            zero: Аддитивная единица типа значений; по умолчанию берётся
                у source, если это ArithMap, иначе ADDITIVE_IDENTITY_DEFAULT
        """
        if zero is _UNSET:
            if isinstance(source, ArithMap):
                zero = source.zero
            else:
                zero = ADDITIVE_IDENTITY_DEFAULT
        self.data: dict[K, V] = dict(source) if source is not None else {}
        self.zero = zero

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[K, V]],
        *,
        zero: Any = ADDITIVE_IDENTITY_DEFAULT,
    ) -> "ArithMap[K, V]":
        """
        Создание из последовательности пар (key, value).

        Повторный ключ перезаписывает предыдущее значение, как в dict.

        Examples:
            >>> ArithMap.from_pairs([("a", 1), ("b", 2)]) == {"a": 1, "b": 2}
            True
        """
        return cls(pairs, zero=zero)

    def copy(self) -> "ArithMap[K, V]":
        """Независимая поверхностная копия с тем же zero."""
        return type(self)(self.data, zero=self.zero)

    # -------------------------------------------------------------------------
    # MutableMapping protocol
    # -------------------------------------------------------------------------

    def __getitem__(self, key: K) -> V:
        return self.data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self.data[key] = value

    def __delitem__(self, key: K) -> None:
        del self.data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"

    # Mapping.__eq__ сравнивает items без учёта порядка; контейнер изменяемый
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # PRUNE
    # -------------------------------------------------------------------------

    def prune(self, inplace: bool = False) -> "ArithMap[K, V]":
        """
        Удаление записей, значение которых равно аддитивной единице.

        Сравнение точное: значения, близкие к нулю (например 1e-300),
        сохраняются.

        Args:
            inplace: Если True, фильтрует сам контейнер и возвращает его

        Returns:
            ArithMap без нулевых записей

        Examples:
            >>> arithmap(a=0, b=1).prune()
            ArithMap({'b': 1})
            >>> arithmap().prune()
            ArithMap({})
        """
        kept = {
            k: v for k, v in self.data.items()
            if not is_additive_identity(v, self.zero)
        }
        removed = len(self.data) - len(kept)
        logger.debug("prune removed %d of %d entries", removed, len(self.data))

        if inplace:
            for k in [k for k in self.data if k not in kept]:
                del self.data[k]
            return self
        return type(self)(kept, zero=self.zero)

    # -------------------------------------------------------------------------
    # Внутренние помощники
    # -------------------------------------------------------------------------

    def _check_identity(self, other: Mapping) -> None:
        if isinstance(other, ArithMap) and not (other.zero == self.zero):
            raise ArithMapIdentityMismatch(
                f"Cannot combine maps with different additive identities: "
                f"{self.zero!r} vs {other.zero!r}"
            )

    def _broadcast(self, op: Callable[[Any], Any]) -> dict[K, Any]:
        return {k: op(v) for k, v in self.data.items()}

    def _merge(
        self,
        other: Mapping,
        op: Callable[[Any, Any], Any],
        missing: Callable[[Any], Any],
    ) -> dict[K, Any]:
        """
        Объединение по ключам: op для общих ключей, missing — для ключей
        только из other. Ключи только из self переносятся без изменений.
        """
        self._check_identity(other)
        result = dict(self.data)
        for k, v2 in other.items():
            if k in result:
                result[k] = op(result[k], v2)
            else:
                result[k] = missing(v2)
        return result

    def _new(self, data: dict[K, Any]) -> "ArithMap[K, V]":
        return type(self)(data, zero=self.zero)

    # -------------------------------------------------------------------------
    # ADDITION
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "ArithMap[K, V]":
        if is_container(other):
            return self._new(self._merge(other, lambda a, b: a + b, lambda b: b))
        if is_scalar(other):
            return self._new(self._broadcast(lambda v: v + other))
        return NotImplemented

    def __radd__(self, other: Any) -> "ArithMap[K, V]":
        # dict + ArithMap и sum(..., start=0)
        if is_container(other):
            return self._new(
                ArithMap(other, zero=self.zero)._merge(
                    self, lambda a, b: a + b, lambda b: b
                )
            )
        if is_scalar(other):
            return self._new(self._broadcast(lambda v: other + v))
        return NotImplemented

    def __iadd__(self, other: Any) -> "ArithMap[K, V]":
        if is_container(other):
            self.data.update(self._merge(other, lambda a, b: a + b, lambda b: b))
            return self
        if is_scalar(other):
            self.data.update(self._broadcast(lambda v: v + other))
            return self
        return NotImplemented

    # -------------------------------------------------------------------------
    # SUBTRACTION
    # -------------------------------------------------------------------------

    def _negate_missing(self, value: Any) -> Any:
        return negate(value, self.zero)

    def __sub__(self, other: Any) -> "ArithMap[K, V]":
        if is_container(other):
            return self._new(
                self._merge(other, lambda a, b: a - b, self._negate_missing)
            )
        if is_scalar(other):
            return self._new(self._broadcast(lambda v: v - other))
        return NotImplemented

    def __rsub__(self, other: Any) -> "ArithMap[K, V]":
        if is_container(other):
            return self._new(
                ArithMap(other, zero=self.zero)._merge(
                    self, lambda a, b: a - b, self._negate_missing
                )
            )
        if is_scalar(other):
            return self._new(self._broadcast(lambda v: other - v))
        return NotImplemented

    def __isub__(self, other: Any) -> "ArithMap[K, V]":
        if is_container(other):
            self.data.update(
                self._merge(other, lambda a, b: a - b, self._negate_missing)
            )
            return self
        if is_scalar(other):
            self.data.update(self._broadcast(lambda v: v - other))
            return self
        return NotImplemented

    def __neg__(self) -> "ArithMap[K, V]":
        return self._new(self._broadcast(self._negate_missing))

    # -------------------------------------------------------------------------
    # SCALAR MULTIPLICATION
    # -------------------------------------------------------------------------

    def __mul__(self, other: Any) -> "ArithMap[K, V]":
        if is_scalar(other):
            return self._new(self._broadcast(lambda v: v * other))
        return NotImplemented

    def __rmul__(self, other: Any) -> "ArithMap[K, V]":
        if is_scalar(other):
            return self._new(self._broadcast(lambda v: other * v))
        return NotImplemented

    def __imul__(self, other: Any) -> "ArithMap[K, V]":
        if is_scalar(other):
            self.data.update(self._broadcast(lambda v: v * other))
            return self
        return NotImplemented


# =============================================================================
# CONVENIENCE CONSTRUCTOR
# =============================================================================


def arithmap(
    source: Optional[MapSource] = None,
    /,
    **entries: Any,
) -> ArithMap:
    """
    Короткая запись для создания ArithMap со строковыми ключами.

    Args:
        source: Mapping или iterable пар (key, value), опционально
        **entries: Дополнительные записи key=value (перезаписывают source)

    Returns:
        Новый ArithMap (zero наследуется от source-ArithMap, иначе 0)

    Examples:
        >>> arithmap(a=1, b=2)
        ArithMap({'a': 1, 'b': 2})
        >>> arithmap({"a": 1}, b=2) == {"a": 1, "b": 2}
        True
        >>> arithmap([("x", 1.5)])["x"]
        1.5
    """
    result: ArithMap = ArithMap(source)
    result.data.update(entries)
    return result
