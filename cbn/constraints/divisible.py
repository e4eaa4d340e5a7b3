# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Divisibility constraint: ``divisible_by_37_point_2``."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any

from .base import REJECT, Constraint, is_number, parse_number


def _exact(number: Any) -> Fraction:
    # Floats are read by their shortest repr, so 37.2 means exactly 186/5
    if isinstance(number, float):
        return Fraction(repr(number))
    return Fraction(number)


class DivisibleBy(Constraint):
    """Value is an exact multiple of a non-zero number."""

    keywords = frozenset({"divisible", "multiple"})
    arity = 1
    description = "Value is an exact multiple of a given number."
    decimal_word = "point"

    def _coerce(self, token: str) -> Any:
        number = parse_number(token)
        if number is REJECT or number == 0:
            return REJECT
        return number

    @property
    def divisor(self) -> Any:
        return self._args[0] if self._args else None

    def validate(self, value: Any) -> bool:
        if not self.satisfied() or not is_number(value):
            return False
        if isinstance(value, float) and not math.isfinite(value):
            return False

        try:
            return _exact(value) % _exact(self._args[0]) == 0
        except (TypeError, ValueError, OverflowError, ZeroDivisionError):
            return False

    def describe(self) -> str:
        if self.satisfied():
            return f"{self.keyword} by {self._args[0]}"
        return super().describe()


__all__ = ["DivisibleBy"]
