"""Validation package - result objects produced when a write is checked.

Constraint evaluation itself lives on the constraint instances; this package
only carries the outcome back to the caller.
"""

from .base import ValidationResult, ValidationViolation

__all__ = [
    "ValidationResult",
    "ValidationViolation",
]
