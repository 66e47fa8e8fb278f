"""
Contract Validation Module

Модуль для валидации JSON контрактов fibmatrix.
"""

from .validators import (
    ContractValidator,
    FibonacciResultValidator,
    SchemaLoader,
    validate_fibonacci_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FibonacciResultValidator",
    # Functions
    "validate_fibonacci_result",
]
