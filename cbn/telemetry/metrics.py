# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for constraint-by-name."""

from __future__ import annotations

import logging

from .runtime import meter

logger = logging.getLogger(__name__)

parse_total = meter.create_counter(
    name="cbn.parse.total",
    description="Counts token sequences parsed into constraint sets.",
    unit="1",
)

parse_dropped_total = meter.create_counter(
    name="cbn.parse.dropped.total",
    description="Counts constraint instances dropped because they never received enough arguments.",
    unit="1",
)

write_total = meter.create_counter(
    name="cbn.write.total",
    description="Counts writes to constrained containers, partitioned by status.",
    unit="1",
)

violation_total = meter.create_counter(
    name="cbn.violation.total",
    description="Counts rejected writes partitioned by the rejecting constraint keyword.",
    unit="1",
)


def record_write(status: str, keyword: str | None = None) -> None:
    """Record the outcome of a single container write.

    Args:
        status: ``"allowed"`` or ``"denied"``
        keyword: Keyword of the rejecting constraint (denied writes only)
    """
    try:
        write_total.add(1, {"status": status})
        if keyword is not None:
            violation_total.add(1, {"keyword": keyword})
    except Exception:
        # Telemetry must never interfere with user code
        logger.debug("Failed to record write metrics", exc_info=True)


def record_parse(constraints: int, dropped: int) -> None:
    try:
        parse_total.add(1, {"constraints": constraints})
        if dropped:
            parse_dropped_total.add(dropped)
    except Exception:
        logger.debug("Failed to record parse metrics", exc_info=True)


__all__ = [
    "parse_total",
    "parse_dropped_total",
    "write_total",
    "violation_total",
    "record_parse",
    "record_write",
]
