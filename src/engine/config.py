"""
Конфигурация Matrix-Power Engine

Ядро не читает переменные окружения: конфигурация передаётся явно
(EngineConfig) либо используется DEFAULT_ENGINE_CONFIG.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional


# =============================================================================
# ENUMS
# =============================================================================


class PowerStrategy(str, Enum):
    """Стратегия возведения в степень делением показателя пополам."""

    # Явный цикл с аккумулятором, O(1) стек
    ITERATIVE = "iterative"
    # Рекурсия power(m, n // 2), глубина O(log n)
    RECURSIVE = "recursive"


# =============================================================================
# CONFIG
# =============================================================================

# Индекс, начиная с которого вычисление логируется на уровне INFO
LARGE_INDEX_LOG_THRESHOLD: Final[int] = 100_000


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация вычисления F(n).

    max_index ограничивает допустимый индекс заранее, до выделения памяти
    под limbs (F(n) занимает ≈0.694·n бит). None — без ограничения.
    """

    strategy: PowerStrategy = PowerStrategy.ITERATIVE
    max_index: Optional[int] = None
    log_large_index_threshold: int = LARGE_INDEX_LOG_THRESHOLD

    def __post_init__(self) -> None:
        # Допускается строковое значение ("iterative"/"recursive")
        object.__setattr__(self, "strategy", PowerStrategy(self.strategy))

        if self.max_index is not None and self.max_index < 0:
            raise ValueError(f"max_index must be non-negative, got {self.max_index}")
        if self.log_large_index_threshold < 0:
            raise ValueError(
                f"log_large_index_threshold must be non-negative, "
                f"got {self.log_large_index_threshold}"
            )


DEFAULT_ENGINE_CONFIG: Final[EngineConfig] = EngineConfig()
