"""Telemetry package - OpenTelemetry instruments for parsing and writes."""

from .metrics import (
    parse_dropped_total,
    parse_total,
    record_parse,
    record_write,
    violation_total,
    write_total,
)

__all__ = [
    "parse_total",
    "parse_dropped_total",
    "write_total",
    "violation_total",
    "record_parse",
    "record_write",
]
