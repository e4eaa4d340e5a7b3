# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Static registry mapping keywords to constraint kinds."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Type

from ..exceptions import ConfigurationError
from .base import Constraint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstraintKind:
    """Descriptor for one kind of constraint."""

    keywords: FrozenSet[str]
    arity: int
    description: str
    factory: Type[Constraint]

    @classmethod
    def from_class(cls, constraint_cls: Type[Constraint]) -> "ConstraintKind":
        return cls(
            keywords=frozenset(k.lower() for k in constraint_cls.keywords),
            arity=constraint_cls.arity,
            description=constraint_cls.description,
            factory=constraint_cls,
        )

    @property
    def name(self) -> str:
        return self.factory.__name__

    @property
    def variadic(self) -> bool:
        return self.arity == 0

    def create(self, keyword: Optional[str] = None) -> Constraint:
        return self.factory(keyword)


class ConstraintRegistry:
    """Keyword lookup table for a fixed list of constraint kinds.

    Lookups are case-insensitive exact matches; there is no prefix matching.
    """

    def __init__(self, kinds: Iterable[ConstraintKind | Type[Constraint]] = ()):
        self._kinds: List[ConstraintKind] = []
        self._by_keyword: Dict[str, ConstraintKind] = {}
        for kind in kinds:
            self.register(kind)

    def register(self, kind: ConstraintKind | Type[Constraint]) -> ConstraintKind:
        if isinstance(kind, type) and issubclass(kind, Constraint):
            kind = ConstraintKind.from_class(kind)

        if not kind.keywords:
            raise ConfigurationError(f"Constraint kind '{kind.name}' declares no keywords")
        if kind.arity < 0:
            raise ConfigurationError(
                f"Constraint kind '{kind.name}' declares negative arity {kind.arity}"
            )

        for keyword in kind.keywords:
            existing = self._by_keyword.get(keyword.lower())
            if existing is not None:
                raise ConfigurationError(
                    f"Keyword '{keyword}' is already registered to '{existing.name}'"
                )

        for keyword in kind.keywords:
            self._by_keyword[keyword.lower()] = kind
        self._kinds.append(kind)
        logger.debug("Registered constraint kind '%s' for keywords %s", kind.name, sorted(kind.keywords))
        return kind

    def lookup(self, keyword: str) -> Optional[ConstraintKind]:
        if not isinstance(keyword, str):
            return None
        return self._by_keyword.get(keyword.lower())

    def keywords(self) -> FrozenSet[str]:
        return frozenset(self._by_keyword)

    def kinds(self) -> List[ConstraintKind]:
        return list(self._kinds)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and keyword.lower() in self._by_keyword

    def __len__(self) -> int:
        return len(self._kinds)


__all__ = ["ConstraintKind", "ConstraintRegistry"]
