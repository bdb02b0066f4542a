"""Monitoring and metrics instrumentation for the Sentiment Layer."""

from sentiment_layer.monitoring.metrics import (
    classifier_latency_seconds,
    classifier_requests_total,
    sentiment_analyses_total,
)

__all__ = [
    "classifier_requests_total",
    "classifier_latency_seconds",
    "sentiment_analyses_total",
]
