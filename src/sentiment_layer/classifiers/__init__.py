"""
Remote classifier abstraction and implementations.

Components:
- ClassifierGateway: shared httpx client for hosted inference endpoints
- BaseClassifier: common `classify(text, token) -> ClassifierOutcome` capability
- HuggingFaceClassifier: endpoint-backed adapter with its own label vocabulary
- exceptions: transport/payload errors (never escape `classify`)
"""

from sentiment_layer.classifiers.base import BaseClassifier
from sentiment_layer.classifiers.exceptions import (
    ClassifierConnectionError,
    ClassifierError,
    ClassifierHTTPError,
    ClassifierResponseError,
    ClassifierTimeoutError,
)
from sentiment_layer.classifiers.gateway import ClassifierGateway
from sentiment_layer.classifiers.huggingface import (
    GENERIC_VOCABULARY,
    STAR_VOCABULARY,
    HuggingFaceClassifier,
    build_primary,
    build_secondary,
)

__all__ = [
    "BaseClassifier",
    "ClassifierGateway",
    "HuggingFaceClassifier",
    "build_primary",
    "build_secondary",
    "GENERIC_VOCABULARY",
    "STAR_VOCABULARY",
    "ClassifierError",
    "ClassifierConnectionError",
    "ClassifierTimeoutError",
    "ClassifierHTTPError",
    "ClassifierResponseError",
]
