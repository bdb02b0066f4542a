"""
Abstract base for remote sentiment classifiers.

Every classifier exposes the same capability, `classify(text, token)`,
returning a ClassifierOutcome over the canonical labels. Vocabulary mapping
(LABEL_0..2, star ratings, ...) is owned by each classifier, so the combiner
only ever sees canonical labels.
"""

import time
from abc import ABC, abstractmethod
from typing import Mapping

import structlog

from sentiment_layer.classifiers.exceptions import (
    ClassifierConnectionError,
    ClassifierError,
    ClassifierHTTPError,
    ClassifierResponseError,
    ClassifierTimeoutError,
)
from sentiment_layer.models.enums import SentimentLabel
from sentiment_layer.models.scores import ClassifierOutcome, ClassScore, RawLabelScore
from sentiment_layer.monitoring.metrics import (
    classifier_latency_seconds,
    classifier_requests_total,
)

logger = structlog.get_logger(__name__)


def _outcome_label(error: ClassifierError) -> str:
    if isinstance(error, ClassifierTimeoutError):
        return "timeout"
    if isinstance(error, ClassifierConnectionError):
        return "connection_error"
    if isinstance(error, ClassifierHTTPError):
        return "http_error"
    if isinstance(error, ClassifierResponseError):
        return "bad_response"
    return "error"


class BaseClassifier(ABC):
    """
    Abstract base class for remote classifiers.

    Subclasses implement `_fetch` (transport) and supply a vocabulary
    mapping their native labels to canonical ones. `classify` never raises
    ClassifierError: failures come back as `ClassifierOutcome.failed`.
    """

    def __init__(self, name: str, vocabulary: Mapping[str, SentimentLabel]):
        """
        Args:
            name: Short classifier name used in logs and metrics (e.g. "primary")
            vocabulary: Native label -> canonical label; unmapped labels are dropped
        """
        self.name = name
        self.vocabulary = dict(vocabulary)

    @abstractmethod
    async def _fetch(self, text: str, token: str) -> list[RawLabelScore]:
        """
        Send `text` to the remote model and return its native label scores.

        Raises:
            ClassifierError: Any transport or payload failure
        """
        pass

    def map_labels(self, raw_scores: list[RawLabelScore]) -> list[ClassScore]:
        """Translate native labels to canonical ones, dropping unmapped labels."""
        mapped: list[ClassScore] = []
        for raw in raw_scores:
            label = self.vocabulary.get(raw.label)
            if label is None:
                logger.debug("Dropping unmapped label", classifier=self.name, label=raw.label)
                continue
            mapped.append(ClassScore(label=label, score=max(raw.score, 0.0)))
        return mapped

    async def classify(self, text: str, token: str) -> ClassifierOutcome:
        """
        Classify normalized text into canonical label scores.

        Returns:
            Succeeded outcome (possibly with no scores if nothing mapped) or
            failed outcome carrying the error message
        """
        start_time = time.perf_counter()
        try:
            raw_scores = await self._fetch(text, token)
        except ClassifierError as e:
            classifier_requests_total.labels(model=self.name, outcome=_outcome_label(e)).inc()
            logger.warning(
                "Classifier call failed",
                classifier=self.name,
                error_type=type(e).__name__,
                error=e.message,
                details=e.details,
            )
            return ClassifierOutcome.failed(e.message)
        finally:
            classifier_latency_seconds.labels(model=self.name).observe(
                time.perf_counter() - start_time
            )

        scores = self.map_labels(raw_scores)
        classifier_requests_total.labels(
            model=self.name, outcome="success" if scores else "empty"
        ).inc()
        if not scores:
            logger.warning(
                "Classifier returned no canonical labels",
                classifier=self.name,
                labels=[raw.label for raw in raw_scores],
            )
        return ClassifierOutcome.succeeded(scores)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
