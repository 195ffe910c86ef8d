"""Prometheus metrics for token lookups."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

token_lookup_total = Counter(
    "token_lookup_total",
    "Total number of single token lookups by view and outcome",
    labelnames=["lookup", "outcome"],
)
"""
Labels:
    lookup: user or device
    outcome: found, not_found, invalid_record, malformed_result
"""

token_batch_lookup_duration_seconds = Histogram(
    "token_batch_lookup_duration_seconds",
    "Duration of batch token lookups",
    labelnames=["lookup"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

token_deleted_total = Counter(
    "token_deleted_total",
    "Total number of token deletions issued",
)
