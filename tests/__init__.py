"""
Test suite for bounded_cast

Contains:
- tests/unit/          : Unit tests for numeric types, domains, converter, contracts
"""
