# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Numeric range constraint: ``between_10_and_5000``."""

from __future__ import annotations

from typing import Any

from .base import Constraint, is_number, parse_number


class Between(Constraint):
    """Value exists within a given numeric range.

    Bounds may be written in either order; they are kept sorted so
    ``args[0]`` is always the low bound. Both ends are inclusive.
    """

    keywords = frozenset({"between", "betwixt", "surrounded"})
    arity = 2
    description = "Value exists within a given numeric range."
    decimal_word = "point"

    def _coerce(self, token: str) -> Any:
        return parse_number(token)

    def _accept(self, argument: Any) -> None:
        self._args = sorted([*self._args, argument])

    @property
    def low(self) -> Any:
        return self._args[0] if self._args else None

    @property
    def high(self) -> Any:
        return self._args[1] if len(self._args) > 1 else None

    def validate(self, value: Any) -> bool:
        if not self.satisfied() or not is_number(value):
            return False
        return self._args[0] <= value <= self._args[1]

    def describe(self) -> str:
        if self.satisfied():
            return f"{self.keyword} {self._args[0]} and {self._args[1]}"
        return super().describe()


__all__ = ["Between"]
