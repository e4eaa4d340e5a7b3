# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Scalar value holder that enforces its name-derived constraints on write."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence, Tuple

from .constraints import Constraint, ConstraintRegistry
from .exceptions import ConstraintViolationError
from .parser import parse_constraints, split_name
from .telemetry.metrics import record_write
from .validation import ValidationResult, ValidationViolation

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for a container that has never been written."""

    _instance: Optional["_Unset"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class ConstrainedScalar:
    """A named scalar whose writes must satisfy every attached constraint.

    Constraints are evaluated in the order they were parsed and are
    AND-ed together. A rejected write leaves the stored value untouched.

    Example:
        ```python
        count = ConstrainedScalar.construct("scalar_with_integers_between_10_and_5000")
        count.write(4000).allowed   # True
        count.write(9001).allowed   # False, value is still 4000
        count.value = 4000.5        # raises ConstraintViolationError
        ```

    The container does no locking; concurrent writers must synchronise
    externally.
    """

    def __init__(
        self,
        name: str,
        constraints: Iterable[Constraint] = (),
        *,
        container_type: str = "scalar",
    ):
        self._name = name
        self._constraints: Tuple[Constraint, ...] = tuple(constraints)
        self._container_type = container_type
        self._value: Any = UNSET

    @classmethod
    def construct(
        cls,
        name: str,
        tokens: Optional[Sequence[str]] = None,
        *,
        registry: Optional[ConstraintRegistry] = None,
    ) -> "ConstrainedScalar":
        """Parse constraints and build a container in one step.

        When *tokens* is omitted the name itself is checked for a
        ``scalar_with_...`` style prefix and split into tokens.

        Raises:
            NameFormatError: If *tokens* is omitted and *name* has no valid prefix
        """
        container_type = "scalar"
        if tokens is None:
            container_type, tokens = split_name(name)

        constraints = parse_constraints(tokens, registry)
        logger.debug(
            "Constructed '%s' with constraints: %s",
            name,
            [c.describe() for c in constraints],
        )
        return cls(name, constraints, container_type=container_type)

    @property
    def name(self) -> str:
        return self._name

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return self._constraints

    @property
    def container_type(self) -> str:
        return self._container_type

    @property
    def is_set(self) -> bool:
        return self._value is not UNSET

    def read(self) -> Any:
        """Return the stored value, or :data:`UNSET` if nothing was written."""

        return self._value

    def check(self, candidate: Any) -> ValidationResult:
        """Validate *candidate* without storing it.

        Stops at the first rejecting constraint, so the result holds at most
        one violation.
        """
        result = ValidationResult(allowed=True)
        for index, constraint in enumerate(self._constraints):
            if constraint.validate(candidate):
                continue

            result.add(
                ValidationViolation(
                    index=index,
                    keyword=constraint.keyword,
                    expected=constraint.args,
                    actual=candidate,
                    message=(
                        f"{candidate!r} violates constraint #{index} "
                        f"'{constraint.describe()}' ({constraint.description})"
                    ),
                )
            )
            break
        return result

    def write(self, candidate: Any) -> ValidationResult:
        """Store *candidate* if every constraint accepts it."""

        result = self.check(candidate)
        if result.allowed:
            self._value = candidate
            record_write("allowed")
            return result

        violation = result.violations[0]
        logger.debug("Rejected write to '%s': %s", self._name, violation.message)
        record_write("denied", violation.keyword)
        return result

    def clear(self) -> None:
        self._value = UNSET

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, candidate: Any) -> None:
        result = self.write(candidate)
        if not result.allowed:
            raise ConstraintViolationError(self._name, candidate, result.violations)

    def __repr__(self) -> str:
        rules = ", ".join(c.describe() for c in self._constraints)
        return f"ConstrainedScalar({self._name!r}, value={self._value!r}, constraints=[{rules}])"


__all__ = ["ConstrainedScalar", "UNSET"]
