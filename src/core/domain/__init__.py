"""
Domain models and value objects.

Contains the ScaledValue value object over the decimal arithmetic engine.
"""

from src.core.domain.scaled_value import ScaledValue

__all__ = [
    "ScaledValue",
]
