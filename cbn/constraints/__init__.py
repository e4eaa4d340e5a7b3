"""Constraint kinds and the default keyword registry.

The set of built-in kinds is fixed here; adding a kind means adding its
class to ``BUILTIN_KINDS`` (or building a separate
:class:`ConstraintRegistry` in application code).
"""

from .base import Constraint
from .between import Between
from .contains import TYPE_TAGS, Contains
from .divisible import DivisibleBy
from .registry import ConstraintKind, ConstraintRegistry

BUILTIN_KINDS = (Between, Contains, DivisibleBy)

_DEFAULT_REGISTRY = ConstraintRegistry(BUILTIN_KINDS)


def default_registry() -> ConstraintRegistry:
    """Return the process-wide registry of built-in constraint kinds."""

    return _DEFAULT_REGISTRY


__all__ = [
    "BUILTIN_KINDS",
    "Between",
    "Constraint",
    "ConstraintKind",
    "ConstraintRegistry",
    "Contains",
    "DivisibleBy",
    "TYPE_TAGS",
    "default_registry",
]
