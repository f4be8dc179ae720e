"""
Schema validation for raw dimension records.
"""

from .validator import DIMENSION_SCHEMA, ValidationError, validate_dimension

__all__ = [
    "DIMENSION_SCHEMA",
    "ValidationError",
    "validate_dimension",
]
