"""
Test suite for financial-ops

Contains:
- tests/unit/          : Unit and property tests for the decimal engine
"""
