# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Type membership constraint: ``contains_integers_and_floats``."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict

from .base import REJECT, Constraint


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


# "hashrefs"/"arrayrefs" keep their historical names but mean any mapping or
# any non-string sequence.
TYPE_TAGS: Dict[str, Callable[[Any], bool]] = {
    "integers": _is_integer,
    "floats": _is_float,
    "strings": _is_string,
    "hashrefs": _is_mapping,
    "arrayrefs": _is_sequence,
}


class Contains(Constraint):
    """Value is of at least one of the listed types."""

    keywords = frozenset({"contains", "with"})
    arity = 0
    description = "Value is one of the given types."
    joiners = frozenset({"and", "or"})

    def _coerce(self, token: str) -> Any:
        if token in TYPE_TAGS:
            return token
        return REJECT

    def _accept(self, argument: Any) -> None:
        if argument not in self._args:
            self._args.append(argument)

    def validate(self, value: Any) -> bool:
        return any(TYPE_TAGS[tag](value) for tag in self._args)

    def describe(self) -> str:
        if not self._args:
            return self.keyword
        return f"{self.keyword} {' or '.join(self._args)}"


__all__ = ["Contains", "TYPE_TAGS"]
