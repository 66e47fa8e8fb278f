"""
Domain models and value objects.

Contains the FibonacciResult model exchanged with callers.
"""

from src.core.domain.fibonacci_result import FibonacciResult

__all__ = [
    "FibonacciResult",
]
