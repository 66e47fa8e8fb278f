"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделью FibonacciResult
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    FibonacciResultValidator,
    SchemaLoader,
    validate_fibonacci_result,
)
from src.engine import EngineConfig, fibonacci_with_stats


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_fibonacci_result():
    """Валидный fibonacci_result для тестирования."""
    return {
        "schema_version": "1",
        "n": 10,
        "value": "55",
        "bit_length": 6,
        "digits": 2,
        "strategy": "iterative",
        "squarings": 3,
        "extra_multiplications": 1,
        "multiplications": 4,
    }


# =============================================================================
# ТЕСТЫ: SchemaLoader
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_schema(self):
        schema = SchemaLoader().load_schema("fibonacci_result")
        assert schema["title"] == "FibonacciResult"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("fibonacci_result") is loader.load_schema("fibonacci_result")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# ТЕСТЫ: FibonacciResultValidator
# =============================================================================


class TestFibonacciResultValidator:
    """Тесты fibonacci_result контракта."""

    def test_valid(self, valid_fibonacci_result):
        validate_fibonacci_result(valid_fibonacci_result)
        assert FibonacciResultValidator().is_valid(valid_fibonacci_result)

    @pytest.mark.parametrize(
        "field",
        ["schema_version", "n", "value", "digits", "strategy", "multiplications"],
    )
    def test_missing_required(self, valid_fibonacci_result, field):
        del valid_fibonacci_result[field]
        with pytest.raises(ValidationError):
            validate_fibonacci_result(valid_fibonacci_result)

    def test_value_must_be_string(self, valid_fibonacci_result):
        valid_fibonacci_result["value"] = 55
        with pytest.raises(ValidationError):
            validate_fibonacci_result(valid_fibonacci_result)

    def test_value_pattern(self, valid_fibonacci_result):
        valid_fibonacci_result["value"] = "055"
        with pytest.raises(ValidationError):
            validate_fibonacci_result(valid_fibonacci_result)

    def test_negative_index(self, valid_fibonacci_result):
        valid_fibonacci_result["n"] = -1
        with pytest.raises(ValidationError):
            validate_fibonacci_result(valid_fibonacci_result)

    def test_strategy_enum(self, valid_fibonacci_result):
        valid_fibonacci_result["strategy"] = "eigen"
        with pytest.raises(ValidationError):
            validate_fibonacci_result(valid_fibonacci_result)

    def test_additional_properties(self, valid_fibonacci_result):
        valid_fibonacci_result["modulus"] = 7
        with pytest.raises(ValidationError):
            validate_fibonacci_result(valid_fibonacci_result)

    def test_iter_errors_collects_all(self, valid_fibonacci_result):
        valid_fibonacci_result["n"] = -1
        valid_fibonacci_result["strategy"] = "eigen"
        errors = list(FibonacciResultValidator().iter_errors(valid_fibonacci_result))
        assert len(errors) == 2


# =============================================================================
# ТЕСТЫ: Интеграция с Pydantic
# =============================================================================


class TestPydanticIntegration:
    """model_dump(mode='json') соответствует контракту."""

    @pytest.mark.parametrize("n", [0, 1, 2, 10, 100, 777])
    @pytest.mark.parametrize("strategy", ["iterative", "recursive"])
    def test_engine_output_matches_contract(self, n, strategy):
        result = fibonacci_with_stats(n, EngineConfig(strategy=strategy))
        validate_fibonacci_result(result.model_dump(mode="json"))
