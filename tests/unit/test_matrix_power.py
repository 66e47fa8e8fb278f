"""
Тесты для power() — Возведение в степень делением пополам

Проверяемые инварианты:
1. power(m, n) совпадает с линейной свёрткой m·m·…·m (n раз)
2. RECURSIVE и ITERATIVE дают идентичный результат
3. Θ(log n) умножений: squarings = floor(log2 n), extra = popcount(n) - 1
4. n < 1 → InvalidArgument
"""

import random

import pytest

from src.core.errors import InvalidArgument
from src.core.math.symmetric_matrix import GENERATOR, SymmetricMatrix2x2, times
from src.engine.config import PowerStrategy
from src.engine.matrix_power import PowerStats, power

STRATEGIES = [PowerStrategy.ITERATIVE, PowerStrategy.RECURSIVE]


def linear_power(m: SymmetricMatrix2x2, n: int) -> SymmetricMatrix2x2:
    """Наивная свёртка: times(m, m, ..., m)."""
    return times(*([m] * n))


def random_symmetric(rng: random.Random) -> SymmetricMatrix2x2:
    return SymmetricMatrix2x2.of(
        rng.randint(-50, 50), rng.randint(-50, 50), rng.randint(-50, 50)
    )


# =============================================================================
# ТЕСТЫ: Корректность
# =============================================================================


class TestPowerCorrectness:
    """Тесты эквивалентности power() и линейной свёртки."""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_base_case(self, strategy):
        """n == 1 → m без изменений."""
        m = SymmetricMatrix2x2.of(3, 4, 5)
        assert power(m, 1, strategy=strategy) is m

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize("seed", range(5))
    def test_matches_linear_fold(self, strategy, seed):
        """Случайная симметричная база, n в 1..20."""
        rng = random.Random(seed)
        m = random_symmetric(rng)
        for n in range(1, 21):
            assert power(m, n, strategy=strategy) == linear_power(m, n)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_generator_powers_encode_fibonacci(self, strategy):
        """GENERATOR**k = [[F(k+1), F(k)], [F(k), F(k-1)]]."""
        result = power(GENERATOR, 10, strategy=strategy)
        assert result == SymmetricMatrix2x2.of(89, 55, 34)

    @pytest.mark.parametrize("n", [1, 2, 3, 7, 8, 63, 64, 65, 1000, 12345])
    def test_strategies_agree(self, n):
        assert power(GENERATOR, n, strategy=PowerStrategy.ITERATIVE) == power(
            GENERATOR, n, strategy=PowerStrategy.RECURSIVE
        )

    def test_strategy_as_string(self):
        assert power(GENERATOR, 5, strategy="recursive") == power(GENERATOR, 5)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            power(GENERATOR, 5, strategy="eigen")


# =============================================================================
# ТЕСТЫ: Контракт
# =============================================================================


class TestPowerContract:
    """Тесты предусловия n >= 1."""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_non_positive_exponent_rejected(self, strategy, n):
        with pytest.raises(InvalidArgument, match=">= 1"):
            power(GENERATOR, n, strategy=strategy)

    @pytest.mark.parametrize("n", [2.0, "3", True, None])
    def test_non_integer_exponent_rejected(self, n):
        with pytest.raises(InvalidArgument, match="must be an int"):
            power(GENERATOR, n)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            power(GENERATOR, 0)


# =============================================================================
# ТЕСТЫ: Статистика
# =============================================================================


class TestPowerStats:
    """Тесты числа умножений: Θ(log n)."""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize("n", [1, 2, 3, 5, 16, 31, 1000, 4097])
    def test_multiplication_counts(self, strategy, n):
        stats = PowerStats()
        power(GENERATOR, n, strategy=strategy, stats=stats)
        assert stats.squarings == n.bit_length() - 1
        assert stats.extra_multiplications == bin(n).count("1") - 1
        assert stats.multiplications == stats.squarings + stats.extra_multiplications

    def test_logarithmic_bound(self):
        stats = PowerStats()
        power(GENERATOR, 20_000, stats=stats)
        assert stats.multiplications <= 2 * (20_000).bit_length()

    def test_stats_optional(self):
        assert power(GENERATOR, 4) == SymmetricMatrix2x2.of(5, 3, 2)
