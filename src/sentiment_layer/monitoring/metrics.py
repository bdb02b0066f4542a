"""Custom Prometheus metrics for the Sentiment Layer.

Exposed at /metrics (via prometheus-fastapi-instrumentator) when enabled.
Useful alerts:
- classifier_requests_total{outcome!="success"} rising: remote models degraded
- sentiment_analyses_total{source="local"} share rising: ensemble not in use
"""

from prometheus_client import Counter, Histogram

# === Remote classifier metrics ===

classifier_requests_total = Counter(
    "classifier_requests_total",
    "Remote classifier calls by model and outcome",
    ["model", "outcome"],
)
"""
Labels:
- model: primary, secondary
- outcome: success, empty, timeout, connection_error, http_error, bad_response
"""

classifier_latency_seconds = Histogram(
    "classifier_latency_seconds",
    "Remote classifier call latency in seconds",
    ["model"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 15.0),
)

# === Analysis metrics ===

sentiment_analyses_total = Counter(
    "sentiment_analyses_total",
    "Completed analyses by distribution source and top label",
    ["source", "label"],
)
"""
Labels:
- source: ensemble, primary, secondary, local
- label: positive, neutral, negative
"""
