"""
Core decimal arithmetic: fixed-width unsigned primitives, decimal alignment,
checked and unchecked operations, and value objects.

This module has no external state and performs no I/O.
"""
