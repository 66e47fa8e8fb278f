"""Matrix-Power Engine — вычисление F(n) через степень симметричной матрицы 2×2.

- power(): binary exponentiation (ITERATIVE / RECURSIVE)
- fibonacci(): точка входа, F(n) как BigInt
- fibonacci_with_stats(): F(n) + статистика умножений (FibonacciResult)
"""

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig, PowerStrategy
from .fibonacci import fib, fibonacci, fibonacci_with_stats
from .matrix_power import PowerStats, power

__all__ = [
    "DEFAULT_ENGINE_CONFIG",
    "EngineConfig",
    "PowerStrategy",
    "PowerStats",
    "power",
    "fib",
    "fibonacci",
    "fibonacci_with_stats",
]
