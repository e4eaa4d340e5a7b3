"""constraint-by-name: variables whose names declare what they may hold.

Typical usage:

    from cbn import ConstrainedScalar

    price = ConstrainedScalar.construct("scalar_with_integers_between_10_and_5000")
    price.write(4000)          # ValidationResult(allowed=True)
    price.write(9001).allowed  # False
"""

__version__ = "0.1.0"

from .constraints import (
    BUILTIN_KINDS,
    Between,
    Constraint,
    ConstraintKind,
    ConstraintRegistry,
    Contains,
    DivisibleBy,
    default_registry,
)
from .container import UNSET, ConstrainedScalar
from .exceptions import (
    CBNError,
    ConfigurationError,
    ConstraintViolationError,
    NameFormatError,
)
from .parser import parse_constraints, parse_name, split_name
from .validation import ValidationResult, ValidationViolation

__all__ = [
    "__version__",
    "BUILTIN_KINDS",
    "Between",
    "CBNError",
    "ConfigurationError",
    "ConstrainedScalar",
    "Constraint",
    "ConstraintKind",
    "ConstraintRegistry",
    "ConstraintViolationError",
    "Contains",
    "DivisibleBy",
    "NameFormatError",
    "UNSET",
    "ValidationResult",
    "ValidationViolation",
    "default_registry",
    "parse_constraints",
    "parse_name",
    "split_name",
]
