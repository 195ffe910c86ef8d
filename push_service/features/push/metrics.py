"""Prometheus metrics for push dispatch.

Usage:
    from push_service.features.push.metrics import push_published_total

    push_published_total.labels(target="endpoint", outcome="delivered").inc()
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

push_published_total = Counter(
    "push_published_total",
    "Total number of SNS publish attempts by target type and outcome",
    labelnames=["target", "outcome"],
)
"""
Labels:
    target: endpoint (direct push) or topic (broadcast)
    outcome: delivered, no_message_id
"""

push_unsupported_platform_total = Counter(
    "push_unsupported_platform_total",
    "Total number of direct pushes skipped because of an unknown platform",
)

push_publish_duration_seconds = Histogram(
    "push_publish_duration_seconds",
    "Time spent in the SNS publish call",
    labelnames=["target"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)
