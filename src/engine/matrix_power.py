"""
Matrix Power — Возведение симметричной матрицы в степень делением пополам

Binary exponentiation (divide-and-conquer):
- n == 1 → m
- halves = power(m, n // 2)
- n чётное → times(halves, halves)
- n нечётное → times(halves, halves, m)  (m компенсирует отброшенный остаток)

Θ(log n) умножений матриц вместо Θ(n).

Стратегии:
- RECURSIVE: дословная рекурсия, глубина стека O(log n)
- ITERATIVE: проход по битам n от старшего к младшему с аккумулятором,
  стек O(1). Выполняет те же умножения в том же порядке, поэтому
  результат идентичен RECURSIVE.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from src.core.errors import InvalidArgument
from src.core.math.symmetric_matrix import SymmetricMatrix2x2, times
from src.engine.config import PowerStrategy

logger = logging.getLogger(__name__)


# =============================================================================
# STATISTICS
# =============================================================================


@dataclass
class PowerStats:
    """Счётчики умножений за один вызов power()."""

    # Возведения в квадрат halves·halves (по одному на уровень)
    squarings: int = 0
    # Дополнительные умножения на m для нечётных показателей
    extra_multiplications: int = 0

    @property
    def multiplications(self) -> int:
        """Общее число попарных умножений матриц."""
        return self.squarings + self.extra_multiplications


# =============================================================================
# POWER
# =============================================================================


def _power_recursive(
    m: SymmetricMatrix2x2, n: int, stats: PowerStats
) -> SymmetricMatrix2x2:
    if n == 1:
        return m

    halves = _power_recursive(m, n // 2, stats)
    stats.squarings += 1

    if n % 2 == 0:
        return times(halves, halves)

    stats.extra_multiplications += 1
    return times(halves, halves, m)


def _power_iterative(
    m: SymmetricMatrix2x2, n: int, stats: PowerStats
) -> SymmetricMatrix2x2:
    result = m

    # Старший бит соответствует базовому случаю n == 1
    for shift in range(n.bit_length() - 2, -1, -1):
        result = times(result, result)
        stats.squarings += 1

        if (n >> shift) & 1:
            result = times(result, m)
            stats.extra_multiplications += 1

    return result


def power(
    m: SymmetricMatrix2x2,
    n: int,
    strategy: Union[PowerStrategy, str] = PowerStrategy.ITERATIVE,
    stats: Optional[PowerStats] = None,
) -> SymmetricMatrix2x2:
    """
    Возведение симметричной матрицы в n-ю степень.

    Args:
        m: Основание (симметричная матрица)
        n: Показатель степени, n >= 1
        strategy: ITERATIVE (default) или RECURSIVE
        stats: Опциональный аккумулятор счётчиков умножений

    Returns:
        m**n

    Raises:
        InvalidArgument: Если n не целое или n < 1 (нарушение контракта)

    Examples:
        >>> power(SymmetricMatrix2x2.of(1, 1, 0), 10).b
        BigInt(55)
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"exponent must be an int, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgument(f"exponent must be >= 1, got {n}")

    strategy = PowerStrategy(strategy)
    if stats is None:
        stats = PowerStats()

    if strategy is PowerStrategy.RECURSIVE:
        result = _power_recursive(m, n, stats)
    else:
        result = _power_iterative(m, n, stats)

    logger.debug(
        "power(n=%d, strategy=%s): squarings=%d extra=%d",
        n,
        strategy.value,
        stats.squarings,
        stats.extra_multiplications,
    )
    return result
