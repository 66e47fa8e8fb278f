"""
Core math modules для fibmatrix

Точная арифметика произвольной точности и симметричные матрицы 2×2.
"""

# BigInt (limb-представление, base 2**32)
from src.core.math.bigint import (
    # Representation constants
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    # Value type
    BigInt,
    ONE,
    ZERO,
    # Functional interface
    add,
    equals,
    from_small_integer,
    less_than,
    multiply,
)

# Symmetric matrix 2×2
from src.core.math.symmetric_matrix import (
    GENERATOR,
    SymmetricMatrix2x2,
    times,
)

__all__ = [
    # BigInt — Representation constants
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # BigInt — Value type
    "BigInt",
    "ONE",
    "ZERO",
    # BigInt — Functional interface
    "add",
    "equals",
    "from_small_integer",
    "less_than",
    "multiply",
    # Symmetric matrix
    "GENERATOR",
    "SymmetricMatrix2x2",
    "times",
]
