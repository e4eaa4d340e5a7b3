"""Shared fixtures for the constraint-by-name test-suite."""
from __future__ import annotations

import pytest

from cbn.constraints import Between, Constraint, ConstraintRegistry, Contains


class Exactly(Constraint):
    """Test-only kind that takes any single word as its argument."""

    keywords = frozenset({"exactly"})
    arity = 1
    description = "Value equals the given word."

    def _coerce(self, token):
        return token

    def validate(self, value):
        return self.satisfied() and value == self._args[0]


@pytest.fixture()
def custom_registry() -> ConstraintRegistry:  # noqa: D401
    """Return a registry with a greedy test kind alongside the built-ins it needs."""
    return ConstraintRegistry([Exactly, Between, Contains])


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("CBN_WARN_INCOMPLETE", raising=False)
    yield
