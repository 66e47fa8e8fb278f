"""
Fibonacci — Точка входа вычисления F(n)

F(0) = 0, F(1) = 1, F(n) = F(n-1) + F(n-2)

Вычисление через степень порождающей матрицы:
    [[1, 1], [1, 0]]**k = [[F(k+1), F(k)], [F(k), F(k-1)]]

Поэтому F(n) = power(GENERATOR, n - 1).a для n >= 2.
Для n < 2 значение возвращается напрямую, без вызова power()
(power(GENERATOR, 0) нарушил бы контракт n >= 1).

Ошибки:
- TypeError: n не является целым (bool также отвергается)
- InvalidArgument: n < 0 или n > config.max_index
- MemoryError: пробрасывается без изменений
"""

import logging
from typing import Optional, Union

from src.core.domain.fibonacci_result import FibonacciResult
from src.core.errors import InvalidArgument
from src.core.math.bigint import BigInt, from_small_integer
from src.core.math.symmetric_matrix import GENERATOR
from src.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from src.engine.matrix_power import PowerStats, power

logger = logging.getLogger(__name__)


def _validate_index(n: Union[int, BigInt], config: EngineConfig) -> int:
    if isinstance(n, BigInt):
        n = int(n)

    if isinstance(n, bool) or not isinstance(n, int):
        logger.warning("Rejected non-integer Fibonacci index of type %s", type(n).__name__)
        raise TypeError(f"Fibonacci index must be an int, got {type(n).__name__}")

    if n < 0:
        logger.warning("Rejected negative Fibonacci index: %d", n)
        raise InvalidArgument(f"Fibonacci index must be non-negative, got {n}")

    if config.max_index is not None and n > config.max_index:
        logger.warning(
            "Rejected Fibonacci index %d above max_index %d", n, config.max_index
        )
        raise InvalidArgument(
            f"Fibonacci index {n} exceeds configured max_index {config.max_index}"
        )

    return n


def _compute(n: int, config: EngineConfig, stats: PowerStats) -> BigInt:
    if n < 2:
        return from_small_integer(n)

    if n >= config.log_large_index_threshold:
        logger.info(
            "Computing F(%d) via %s matrix power (~%d bits)",
            n,
            config.strategy.value,
            int(n * 0.6943),
        )

    return power(GENERATOR, n - 1, strategy=config.strategy, stats=stats).a


def fibonacci(n: Union[int, BigInt], config: Optional[EngineConfig] = None) -> BigInt:
    """
    n-й член последовательности Фибоначчи.

    Args:
        n: Неотрицательный индекс (int или BigInt)
        config: Конфигурация engine (default: DEFAULT_ENGINE_CONFIG)

    Returns:
        F(n) как BigInt

    Raises:
        TypeError: Если n не целое
        InvalidArgument: Если n < 0 или превышает config.max_index

    Examples:
        >>> fibonacci(10)
        BigInt(55)
        >>> fibonacci(100)
        BigInt(354224848179261915075)
    """
    config = config or DEFAULT_ENGINE_CONFIG
    n = _validate_index(n, config)
    return _compute(n, config, PowerStats())


# Короткий алиас
fib = fibonacci


def fibonacci_with_stats(
    n: Union[int, BigInt], config: Optional[EngineConfig] = None
) -> FibonacciResult:
    """
    F(n) вместе со статистикой умножений матриц.

    Args:
        n: Неотрицательный индекс (int или BigInt)
        config: Конфигурация engine (default: DEFAULT_ENGINE_CONFIG)

    Returns:
        FibonacciResult (значение в десятичной записи + счётчики)

    Raises:
        TypeError: Если n не целое
        InvalidArgument: Если n < 0 или превышает config.max_index
    """
    config = config or DEFAULT_ENGINE_CONFIG
    n = _validate_index(n, config)

    stats = PowerStats()
    value = _compute(n, config, stats)
    text = str(value)

    return FibonacciResult(
        n=n,
        value=text,
        bit_length=value.bit_length(),
        digits=len(text),
        strategy=config.strategy.value,
        squarings=stats.squarings,
        extra_multiplications=stats.extra_multiplications,
        multiplications=stats.multiplications,
    )
