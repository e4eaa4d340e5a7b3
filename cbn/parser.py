# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Turn an identifier such as ``scalar_with_integers_between_10_and_5000``
into an ordered list of constraint instances.

Parsing is a single left-to-right pass over lowercase word tokens:

1. While the current constraint is hungry, each token is first offered to it
   as an argument.
2. A token it does not accept is looked up in the registry; a match
   finalizes the current constraint and starts a new one.
3. Anything else is a filler word and is discarded.

A constraint that never received enough arguments is dropped when it is
finalized. Drops are logged at DEBUG (WARNING when ``CBN_WARN_INCOMPLETE``
is set) and never raise.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Iterable, List, Optional, Tuple

from .constraints import Constraint, ConstraintRegistry, default_registry
from .exceptions import NameFormatError
from .telemetry.metrics import record_parse

logger = logging.getLogger(__name__)

CONTAINER_TYPES = ("scalar", "arrayref", "hashref")
LINKERS = ("with", "contains", "which_contains")

_NAME_PREFIX = re.compile(
    r"^(?P<type>%s)_(?P<linker>%s)(?:_|$)" % ("|".join(CONTAINER_TYPES), "|".join(LINKERS))
)
_SEPARATOR = "_"


def _warn_incomplete_enabled() -> bool:
    return os.getenv("CBN_WARN_INCOMPLETE", "0").lower() not in ("", "0", "false", "no")


def split_name(name: str) -> Tuple[str, List[str]]:
    """Check the type + linker prefix of *name* and split it into tokens.

    Accepted prefixes are ``<type>_with``, ``<type>_contains`` and
    ``<type>_which_contains``. Returns ``(container_type, tokens)``; the type
    tag and the word ``which`` are stripped, while ``with`` and ``contains``
    stay in the token stream since they select the ``Contains`` constraint.

    Raises:
        NameFormatError: If *name* is not a string or lacks a known prefix
    """
    if not isinstance(name, str):
        raise NameFormatError(name, f"Constraint names must be strings, got {type(name).__name__}")

    lowered = name.strip().lower()
    match = _NAME_PREFIX.match(lowered)
    if match is None:
        raise NameFormatError(name)

    container_type = match.group("type")
    tokens = [t for t in lowered[len(container_type):].split(_SEPARATOR) if t]
    if tokens and tokens[0] == "which":
        tokens = tokens[1:]

    logger.debug("Split name '%s' into type '%s' and tokens %s", name, container_type, tokens)
    return container_type, tokens


def _finalize(
    current: Optional[Constraint],
    constraints: List[Constraint],
    dropped: List[Constraint],
) -> None:
    if current is None:
        return
    if current.satisfied():
        constraints.append(current)
        return

    dropped.append(current)
    level = logging.WARNING if _warn_incomplete_enabled() else logging.DEBUG
    logger.log(
        level,
        "Dropping incomplete constraint '%s': got %d argument(s), needs %s",
        current.keyword,
        len(current.args),
        current.arity or "at least 1",
    )


def parse_constraints(
    tokens: Iterable[str],
    registry: Optional[ConstraintRegistry] = None,
) -> List[Constraint]:
    """Parse word tokens into fully populated constraint instances.

    Args:
        tokens: Lowercase words, already split and stripped of the name prefix
        registry: Keyword registry to use (defaults to the built-in kinds)

    Returns:
        Constraints in the order their keywords appeared
    """
    if registry is None:
        registry = default_registry()
    constraints: List[Constraint] = []
    dropped: List[Constraint] = []
    current: Optional[Constraint] = None

    for raw in tokens:
        token = str(raw).lower()
        if not token:
            continue

        if current is not None and current.hungry() and current.consume(token):
            continue

        kind = registry.lookup(token)
        if kind is not None:
            _finalize(current, constraints, dropped)
            current = kind.create(token)
            continue

        logger.debug("Discarding filler token '%s'", token)

    _finalize(current, constraints, dropped)

    record_parse(len(constraints), len(dropped))
    return constraints


def parse_name(
    name: str,
    registry: Optional[ConstraintRegistry] = None,
) -> Tuple[str, List[Constraint]]:
    """Convenience wrapper: :func:`split_name` followed by :func:`parse_constraints`."""

    container_type, tokens = split_name(name)
    return container_type, parse_constraints(tokens, registry)


__all__ = [
    "CONTAINER_TYPES",
    "LINKERS",
    "parse_constraints",
    "parse_name",
    "split_name",
]
