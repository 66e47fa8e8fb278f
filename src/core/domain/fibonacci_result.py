"""
FibonacciResult — Модель результата вычисления F(n)

Immutable Pydantic модель: значение F(n) и статистика matrix-power.
Полная совместимость с JSON Schema (src/core/contracts/schema/fibonacci_result.json).

Значение хранится десятичной строкой: F(n) быстро выходит за пределы
чисел JSON, а строка сохраняет его точно.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.bigint import BigInt


# =============================================================================
# FIBONACCI RESULT MODEL
# =============================================================================


class FibonacciResult(BaseModel):
    """
    Результат вычисления F(n).

    Immutable модель (frozen=True). Содержит:
    - Индекс n и значение F(n) (десятичная строка)
    - Размер значения (bit_length, digits)
    - Статистику умножений матриц (squarings, extra_multiplications)
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )

    # Вход и значение
    n: int = Field(..., ge=0, description="Индекс в последовательности Фибоначчи")
    value: str = Field(
        ..., pattern="^(0|[1-9][0-9]*)$", description="F(n) в десятичной записи"
    )
    bit_length: int = Field(..., ge=0, description="Количество бит F(n)")
    digits: int = Field(..., ge=1, description="Количество десятичных цифр F(n)")

    # Статистика matrix-power
    strategy: str = Field(..., pattern="^(iterative|recursive)$", description="Стратегия power()")
    squarings: int = Field(..., ge=0, description="Число возведений в квадрат")
    extra_multiplications: int = Field(
        ..., ge=0, description="Число дополнительных умножений на основание"
    )
    multiplications: int = Field(..., ge=0, description="Общее число умножений матриц")

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_digits_match_value(cls, v: int, info) -> int:
        """Проверка, что digits совпадает с длиной value"""
        if "value" in info.data:
            length = len(info.data["value"])
            if v != length:
                raise ValueError(f"digits {v} must equal len(value) {length}")
        return v

    @field_validator("multiplications")
    @classmethod
    def validate_multiplications_total(cls, v: int, info) -> int:
        """Проверка, что multiplications = squarings + extra_multiplications"""
        if "squarings" in info.data and "extra_multiplications" in info.data:
            total = info.data["squarings"] + info.data["extra_multiplications"]
            if v != total:
                raise ValueError(
                    f"multiplications {v} must equal squarings + extra_multiplications ({total})"
                )
        return v

    def to_bigint(self) -> BigInt:
        """
        Значение F(n) как BigInt.

        Returns:
            BigInt, разобранный из десятичной строки value
        """
        return BigInt.from_decimal(self.value)
