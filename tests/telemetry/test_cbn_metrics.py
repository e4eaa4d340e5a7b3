# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry must record outcomes and never break callers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from cbn import ConstrainedScalar
from cbn.telemetry import metrics


def test_allowed_write_is_recorded():
    scalar = ConstrainedScalar.construct("scalar_with_integers")

    with patch("cbn.container.record_write") as record:
        scalar.write(5)

    record.assert_called_once_with("allowed")


def test_denied_write_records_rejecting_keyword():
    scalar = ConstrainedScalar.construct("scalar_with_integers_between_1_and_10")

    with patch("cbn.container.record_write") as record:
        scalar.write(50)

    record.assert_called_once_with("denied", "between")


def test_record_write_counts_violations():
    write_total = MagicMock()
    violation_total = MagicMock()

    with patch.object(metrics, "write_total", write_total), patch.object(
        metrics, "violation_total", violation_total
    ):
        metrics.record_write("denied", "with")

    write_total.add.assert_called_once_with(1, {"status": "denied"})
    violation_total.add.assert_called_once_with(1, {"keyword": "with"})


def test_record_write_swallows_instrument_errors():
    broken = MagicMock()
    broken.add.side_effect = RuntimeError("exporter down")

    with patch.object(metrics, "write_total", broken):
        metrics.record_write("allowed")


def test_record_parse_only_counts_drops_when_present():
    parse_total = MagicMock()
    dropped_total = MagicMock()

    with patch.object(metrics, "parse_total", parse_total), patch.object(
        metrics, "parse_dropped_total", dropped_total
    ):
        metrics.record_parse(2, 0)
        metrics.record_parse(1, 3)

    assert parse_total.add.call_count == 2
    dropped_total.add.assert_called_once_with(3)


def test_write_survives_broken_telemetry():
    broken = MagicMock()
    broken.add.side_effect = RuntimeError("exporter down")
    scalar = ConstrainedScalar.construct("scalar_with_floats")

    with patch.object(metrics, "write_total", broken):
        assert scalar.write(1.5).allowed is True

    assert scalar.read() == 1.5
