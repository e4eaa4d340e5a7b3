# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for identifier prefix checking and splitting."""

from __future__ import annotations

import pytest

from cbn.exceptions import CBNError, NameFormatError
from cbn.parser import parse_name, split_name


@pytest.mark.parametrize(
    "name,container_type,tokens",
    [
        (
            "scalar_with_integers_between_10_and_5000",
            "scalar",
            ["with", "integers", "between", "10", "and", "5000"],
        ),
        (
            "scalar_which_contains_integers",
            "scalar",
            ["contains", "integers"],
        ),
        (
            "scalar_contains_integers_and_floats",
            "scalar",
            ["contains", "integers", "and", "floats"],
        ),
        ("arrayref_with_arrayrefs", "arrayref", ["with", "arrayrefs"]),
        ("hashref_which_contains", "hashref", ["contains"]),
        ("Scalar_With_Floats", "scalar", ["with", "floats"]),
        ("scalar_with__floats_", "scalar", ["with", "floats"]),
    ],
)
def test_split_name(name, container_type, tokens):
    assert split_name(name) == (container_type, tokens)


@pytest.mark.parametrize(
    "name",
    [
        "count",
        "scalar_which",
        "hashref_which",
        "scalar_which_is_quite_nice",
        "scalar_which_holds_integers",
        "",
        "scalar",
        "scalar_between_1_and_2",
        "scalarwith_integers",
        "scalar_withers",
        "vector_with_integers",
        "my_scalar_with_integers",
    ],
)
def test_bad_prefix_raises(name):
    with pytest.raises(NameFormatError) as excinfo:
        split_name(name)

    assert excinfo.value.name == name
    assert "scalar_with_" in excinfo.value.message


@pytest.mark.parametrize("name", [None, 42, b"scalar_with_integers"])
def test_non_string_name_raises(name):
    with pytest.raises(NameFormatError, match="must be strings"):
        split_name(name)


def test_name_format_error_is_a_cbn_error():
    with pytest.raises(CBNError):
        split_name("nope")


def test_parse_name_combines_split_and_parse():
    container_type, constraints = parse_name("hashref_which_contains_hashrefs")

    assert container_type == "hashref"
    assert [c.args for c in constraints] == [("hashrefs",)]
