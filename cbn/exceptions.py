# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for constraint-by-name."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class CBNError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(CBNError):
    """A constraint registry or kind was declared incorrectly."""


class NameFormatError(CBNError):
    """The identifier does not start with a recognised type + linker prefix."""

    def __init__(self, name: Any, reason: Optional[str] = None):
        self.name = name
        message = reason or (
            f"Cannot derive constraints from name {name!r}: expected a prefix such as "
            "'scalar_with_...' or 'scalar_which_contains_...'"
        )
        super().__init__(message)


class ConstraintViolationError(CBNError):
    """A value assignment was rejected by an attached constraint."""

    def __init__(self, name: str, value: Any, violations: Sequence[Any] = ()):
        self.name = name
        self.value = value
        self.violations = list(violations)

        details = "; ".join(v.message for v in self.violations)
        message = f"Value {value!r} rejected for '{name}'"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)


__all__ = [
    "CBNError",
    "ConfigurationError",
    "NameFormatError",
    "ConstraintViolationError",
]
