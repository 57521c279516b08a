"""
Test suite for linalg

Contains:
- tests/unit/          : Unit tests for kernels, value types and contracts
"""
