# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constraint-by-name Demo: Variable Names That Enforce Themselves.

This demo shows how a descriptive name such as
``scalar_with_integers_between_10_and_5000`` turns into constraints that
are checked on every write.

Run with:
    python examples/constraint_by_name_demo.py
"""

import logging
import os

from cbn import ConstrainedScalar, ConstraintViolationError, NameFormatError


def demo_basic_writes():
    """Show accepted and rejected writes."""
    print("\n" + "=" * 70)
    print("DEMO 1: Writes Checked Against the Name")
    print("=" * 70)

    count = ConstrainedScalar.construct("scalar_with_integers_between_10_and_5000")
    print(f"\n  Constraints parsed from the name:")
    for constraint in count.constraints:
        print(f"    - {constraint.describe()}")

    for candidate in (4000, 9001, 4000.5):
        result = count.write(candidate)
        if result.allowed:
            print(f"\n  write({candidate!r}) -> accepted")
        else:
            print(f"\n  write({candidate!r}) -> rejected")
            print(f"    {result.violations[0].message}")
    print(f"\n  Stored value: {count.read()!r}")


def demo_assignment():
    """Show the raising assignment path."""
    print("\n" + "=" * 70)
    print("DEMO 2: Assignment Through the value Property")
    print("=" * 70)

    total = ConstrainedScalar.construct(
        "scalar_which_contains_integers_between_10_and_5000_divisible_by_37"
    )
    total.value = 555
    print(f"\n  total.value = 555 -> stored {total.value!r}")

    try:
        total.value = 558
    except ConstraintViolationError as e:
        print("  total.value = 558 -> ConstraintViolationError")
        print(f"    {e}")


def demo_incomplete_constraints():
    """Show that half-written constraints are dropped, optionally with a warning."""
    print("\n" + "=" * 70)
    print("DEMO 3: Incomplete Constraints")
    print("=" * 70)

    os.environ["CBN_WARN_INCOMPLETE"] = "1"
    try:
        scalar = ConstrainedScalar.construct("scalar_with_floats_between_50")
    finally:
        os.environ.pop("CBN_WARN_INCOMPLETE", None)

    print(f"\n  Constraints kept: {[c.describe() for c in scalar.constraints]}")
    print(f"  write(1e9) allowed: {scalar.write(1e9).allowed}")


def demo_bad_name():
    """Show that names without a recognised prefix are refused."""
    print("\n" + "=" * 70)
    print("DEMO 4: Names Without a Prefix")
    print("=" * 70)

    try:
        ConstrainedScalar.construct("count_between_1_and_10")
    except NameFormatError as e:
        print(f"\n  NameFormatError: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="  [%(levelname)s] %(message)s")
    demo_basic_writes()
    demo_assignment()
    demo_incomplete_constraints()
    demo_bad_name()
