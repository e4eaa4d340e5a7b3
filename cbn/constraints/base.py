# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constraint instances and the shared argument-consumption protocol.

Every constraint kind is a subclass of :class:`Constraint` that declares
three class attributes and implements two hooks:

* ``keywords`` - aliases that select the kind while parsing a name
* ``arity`` - number of arguments needed before the instance is satisfied;
  ``0`` means variadic (one or more)
* ``description`` - human-readable summary
* ``_coerce(token)`` - convert a token into an argument, or return
  :data:`REJECT` when the token is not an argument for this kind
* ``validate(value)`` - check a candidate value

Instances start *hungry*, consume tokens through :meth:`Constraint.consume`
and stop being hungry once they have their arguments. Variadic kinds stay
hungry until, holding at least one argument, they are offered a token they
reject that is not one of their ``joiners`` (e.g. ``and``).

Kinds that set ``decimal_word`` read ``<integer> point <digits>`` as one
decimal argument, since names cannot contain a ``.``; an integer argument
keeps the instance hungry for one more token to allow this.
"""

from __future__ import annotations

import re
from numbers import Real
from typing import Any, ClassVar, FrozenSet, List, Optional, Tuple

# Integer or decimal with optional sign: "10", "-3", "+7", "2.5", "4."
NUMERIC_TOKEN = re.compile(r"^[-+]?\d+(\.\d*)?$")

REJECT = object()


def parse_number(token: str) -> Any:
    """Return *token* as ``int``/``float`` or :data:`REJECT` if not numeric."""

    if not isinstance(token, str) or not NUMERIC_TOKEN.match(token):
        return REJECT
    if "." in token:
        return float(token)
    return int(token)


def is_number(value: Any) -> bool:
    """True for real numbers; ``bool`` is deliberately excluded."""

    return isinstance(value, Real) and not isinstance(value, bool)


class Constraint:
    """Base class for one parsed constraint attached to a container."""

    keywords: ClassVar[FrozenSet[str]] = frozenset()
    arity: ClassVar[int] = 0
    description: ClassVar[str] = ""
    joiners: ClassVar[FrozenSet[str]] = frozenset()
    # Numeric kinds read "37 point 2" as the single argument 37.2
    decimal_word: ClassVar[Optional[str]] = None

    def __init__(self, keyword: str | None = None):
        self.keyword = keyword or self.primary_keyword()
        self._args: List[Any] = []
        self._closed = False
        self._whole: Optional[int] = None
        self._after_point = False

    @classmethod
    def primary_keyword(cls) -> str:
        return min(cls.keywords) if cls.keywords else cls.__name__.lower()

    @property
    def args(self) -> Tuple[Any, ...]:
        return tuple(self._args)

    @property
    def variadic(self) -> bool:
        return self.arity == 0

    def hungry(self) -> bool:
        if self._whole is not None:
            return True
        if self.variadic:
            return not self._closed
        return len(self._args) < self.arity

    def satisfied(self) -> bool:
        if self.variadic:
            return len(self._args) >= 1
        return len(self._args) == self.arity

    def consume(self, token: str) -> bool:
        """Offer *token* as an argument; return whether it was accepted."""

        if self._continue_decimal(token):
            return True
        if not self.hungry():
            return False

        argument = self._coerce(token)
        if argument is REJECT:
            # A variadic kind with no arguments yet skips unexpected words
            if self.variadic and self._args and token not in self.joiners:
                self._closed = True
            return False

        self._accept(argument)
        if self.decimal_word and isinstance(argument, int):
            self._whole = argument
        return True

    def _continue_decimal(self, token: str) -> bool:
        if self._whole is None:
            return False

        if not self._after_point:
            if token == self.decimal_word:
                self._after_point = True
                return True
            self._whole = None
            return False

        whole, self._whole, self._after_point = self._whole, None, False
        if not (token.isascii() and token.isdigit()):
            return False

        sign = "-" if whole < 0 else ""
        self._args.remove(whole)
        self._accept(parse_number(f"{sign}{abs(whole)}.{token}"))
        return True

    def _accept(self, argument: Any) -> None:
        self._args.append(argument)

    def _coerce(self, token: str) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def validate(self, value: Any) -> bool:  # pragma: no cover - abstract
        raise NotImplementedError

    def describe(self) -> str:
        """Render the constraint the way it reads inside a name."""

        return " ".join([self.keyword, *(str(a) for a in self._args)])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return type(self) is type(other) and self._args == other._args

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        args = ", ".join(repr(a) for a in self._args)
        return f"{type(self).__name__}({args})"


__all__ = [
    "Constraint",
    "NUMERIC_TOKEN",
    "REJECT",
    "is_number",
    "parse_number",
]
