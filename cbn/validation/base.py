# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Result types shared by every validation path."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple


@dataclass(frozen=True)
class ValidationViolation:
    """A single rejected constraint.

    ``index`` is the constraint's position in the container's evaluation
    order, ``keyword`` the alias it is registered under and ``expected`` the
    arguments it consumed while parsing.
    """

    index: int
    keyword: str
    expected: Tuple[Any, ...]
    actual: Any
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating one candidate value."""

    allowed: bool = True
    violations: List[ValidationViolation] = field(default_factory=list)

    def add(self, violation: ValidationViolation) -> None:
        self.violations.append(violation)
        self.allowed = False

    def merge(self, other: "ValidationResult") -> None:
        if not other.allowed:
            self.allowed = False
        self.violations.extend(other.violations)

    def __bool__(self) -> bool:
        return self.allowed


__all__ = ["ValidationResult", "ValidationViolation"]
