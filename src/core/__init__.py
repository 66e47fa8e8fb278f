"""
Core mathematical primitives, domain models, and contracts.

This module contains the foundational building blocks of fibmatrix:
arbitrary-precision integers, the symmetric 2x2 matrix they populate,
and the result model with its JSON contract.
"""
