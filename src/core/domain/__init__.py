"""
Domain models and value objects.

Contains the NumericProfile value object consumed by display layers.
"""

from src.core.domain.numeric_profile import NumericProfile

__all__ = [
    "NumericProfile",
]
