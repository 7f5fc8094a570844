"""
Tests for ArithMapSnapshot

Покрывает:
- Создание снимка из ArithMap и восстановление контейнера
- JSON сериализацию/десериализацию
- Отклонение NaN/Inf, bool и нестроковых ключей
- Immutability (frozen=True)
- Совместимость с JSON Schema контрактом
"""

import json

import pytest
from pydantic import ValidationError

from src.arith import SNAPSHOT_SCHEMA_VERSION, ArithMap, ArithMapSnapshot, arithmap
from src.arith.contracts import validate_arith_map


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def mixed_map() -> ArithMap:
    """Контейнер со значениями int и float"""
    return arithmap(a=1, b=2.5, c=-3)


# =============================================================================
# SNAPSHOT TESTS
# =============================================================================


class TestArithMapSnapshot:
    """Тесты для модели ArithMapSnapshot"""

    def test_from_arith_map(self, mixed_map: ArithMap) -> None:
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        assert snapshot.schema_version == SNAPSHOT_SCHEMA_VERSION
        assert snapshot.entries == {"a": 1, "b": 2.5, "c": -3}

    def test_int_values_stay_int(self, mixed_map: ArithMap) -> None:
        """int значения не превращаются в float"""
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        assert isinstance(snapshot.entries["a"], int)
        assert isinstance(snapshot.entries["b"], float)

    def test_to_arith_map(self, mixed_map: ArithMap) -> None:
        restored = ArithMapSnapshot.from_arith_map(mixed_map).to_arith_map()
        assert isinstance(restored, ArithMap)
        assert restored == mixed_map
        assert restored.zero == 0

    def test_restored_map_is_independent(self, mixed_map: ArithMap) -> None:
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        restored = snapshot.to_arith_map()
        restored += 10
        assert snapshot.entries["a"] == 1

    def test_snapshot_unaffected_by_later_mutation(self, mixed_map: ArithMap) -> None:
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        mixed_map["a"] = 100
        assert snapshot.entries["a"] == 1

    def test_empty_map(self) -> None:
        snapshot = ArithMapSnapshot.from_arith_map(arithmap())
        assert snapshot.entries == {}
        assert snapshot.to_arith_map() == {}

    def test_json_roundtrip(self, mixed_map: ArithMap) -> None:
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        payload = snapshot.model_dump_json()
        assert json.loads(payload)["schema_version"] == "1"
        restored = ArithMapSnapshot.model_validate_json(payload)
        assert restored == snapshot

    def test_frozen(self, mixed_map: ArithMap) -> None:
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        with pytest.raises(ValidationError):
            snapshot.schema_version = "2"

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, bad: float) -> None:
        with pytest.raises(ValidationError, match="non-finite"):
            ArithMapSnapshot.from_arith_map(arithmap(a=1, b=bad))

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ArithMapSnapshot(entries={"a": True})

    def test_non_string_keys_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ArithMapSnapshot.from_arith_map(ArithMap({1: 1.0}))

    def test_wrong_schema_version_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ArithMapSnapshot(schema_version="2", entries={})

    def test_mutated_entries_rechecked(self, mixed_map: ArithMap) -> None:
        """Заморозка поверхностная: to_arith_map перепроверяет значения"""
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        snapshot.entries["a"] = float("nan")
        with pytest.raises(ValueError, match="non-finite"):
            snapshot.to_arith_map()

    def test_json_form_matches_contract(self, mixed_map: ArithMap) -> None:
        """model_dump(mode="json") проходит JSON Schema валидацию"""
        snapshot = ArithMapSnapshot.from_arith_map(mixed_map)
        validate_arith_map(snapshot.model_dump(mode="json"))
