"""
SymmetricMatrix2x2 — Симметричная матрица 2×2 над BigInt

Матрица хранится тремя элементами (a, b, c):

    [ a  b ]
    [ b  c ]

Внедиагональный элемент b общий, четвёртый элемент никогда не
материализуется.

Умножение (a,b,c)·(d,e,f):
    a' = a*d + b*e
    b' = a*e + b*f
    c' = b*e + c*f

6 умножений + 3 сложения вместо 8 + 4 у плотного умножения 2×2.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Формула точна, только если сомножители коммутируют (нижний левый
   элемент плотного произведения b*d + c*e совпадает с a*e + b*f).
   Все степени одной симметричной матрицы коммутируют, поэтому степени
   GENERATOR всегда перемножаются корректно.
2. Асимметричная матрица через это представление не проходит никогда.
3. Значения immutable: times() всегда возвращает новый экземпляр.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Final

from src.core.errors import InvalidArgument
from src.core.math.bigint import ONE, ZERO, BigInt, IntLike


# =============================================================================
# SYMMETRIC MATRIX
# =============================================================================


@dataclass(frozen=True)
class SymmetricMatrix2x2:
    """
    Симметричная матрица [[a, b], [b, c]].

    Immutable (frozen=True). GENERATOR**k = [[F(k+1), F(k)], [F(k), F(k-1)]].
    """

    a: BigInt
    b: BigInt
    c: BigInt

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            value = getattr(self, name)
            if not isinstance(value, BigInt):
                raise TypeError(
                    f"entry {name} must be BigInt, got {type(value).__name__} "
                    f"(use SymmetricMatrix2x2.of() for int literals)"
                )

    @classmethod
    def of(cls, a: IntLike, b: IntLike, c: IntLike) -> "SymmetricMatrix2x2":
        """Создание матрицы из int/BigInt литералов."""
        return cls(BigInt.from_int(a), BigInt.from_int(b), BigInt.from_int(c))

    def to_dense(self) -> tuple[tuple[BigInt, BigInt], tuple[BigInt, BigInt]]:
        """Полная запись строк ((a, b), (b, c))."""
        return ((self.a, self.b), (self.b, self.c))

    def transpose(self) -> "SymmetricMatrix2x2":
        """Транспонирование (для симметричной матрицы совпадает с исходной)."""
        return SymmetricMatrix2x2(self.a, self.b, self.c)

    def __matmul__(self, other: object) -> "SymmetricMatrix2x2":
        if not isinstance(other, SymmetricMatrix2x2):
            return NotImplemented
        return _multiply_pair(self, other)


# Порождающая матрица последовательности Фибоначчи [[1, 1], [1, 0]]
GENERATOR: Final[SymmetricMatrix2x2] = SymmetricMatrix2x2(ONE, ONE, ZERO)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def _multiply_pair(
    left: SymmetricMatrix2x2, right: SymmetricMatrix2x2
) -> SymmetricMatrix2x2:
    a, b, c = left.a, left.b, left.c
    d, e, f = right.a, right.b, right.c

    be = b * e
    return SymmetricMatrix2x2(
        a=a * d + be,
        b=a * e + b * f,
        c=be + c * f,
    )


def times(*factors: SymmetricMatrix2x2) -> SymmetricMatrix2x2:
    """
    Произведение симметричных матриц со свёрткой слева направо.

    times(m1, m2, m3) == times(times(m1, m2), m3)
    times(m) == m

    Args:
        *factors: Один или более сомножителей (попарно коммутирующих)

    Returns:
        Симметричное произведение

    Raises:
        InvalidArgument: Если сомножителей нет
    """
    if not factors:
        raise InvalidArgument("times() requires at least one factor")
    return reduce(_multiply_pair, factors)
