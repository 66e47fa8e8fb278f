"""
Test suite for fibmatrix

Contains:
- tests/unit/          : Unit tests for BigInt, symmetric matrix, power engine,
                         result model, JSON contracts and CLI
"""
