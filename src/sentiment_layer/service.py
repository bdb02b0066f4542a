"""
SentimentService: the single entry point of the scoring core.

Flow for one text:
    normalize -> (credential? ensemble?) -> classify concurrently -> combine

The service holds an immutable ServiceConfig. `set_credential` and
`set_ensemble` swap in a new config object; each analysis reads the config
reference once at its start and uses that snapshot throughout.

Usage:
    config = ServiceConfig.from_settings(settings)
    service = SentimentService.from_config(config)
    distribution = await service.analyze_one("Great product!")
"""

import asyncio
from typing import Optional

import structlog

from sentiment_layer.classifiers.base import BaseClassifier
from sentiment_layer.classifiers.gateway import ClassifierGateway
from sentiment_layer.classifiers.huggingface import build_primary, build_secondary
from sentiment_layer.config import ServiceConfig
from sentiment_layer.models.enums import SentimentLabel
from sentiment_layer.models.results import BatchAnalysisResult, BatchSummary, SentimentResult
from sentiment_layer.models.scores import ClassifierOutcome, CombinedDistribution
from sentiment_layer.monitoring.metrics import sentiment_analyses_total
from sentiment_layer.scoring.combiner import ScoreCombiner
from sentiment_layer.scoring.keywords import extract_keywords
from sentiment_layer.scoring.normalizer import normalize

logger = structlog.get_logger(__name__)


def split_batch_document(document: str) -> list[str]:
    """Split a multi-line document into batch items: one per non-blank line, trimmed."""
    return [line.strip() for line in document.splitlines() if line.strip()]


def _settle(name: str, result: object) -> ClassifierOutcome:
    """Turn a gather() result into an outcome; unexpected exceptions become failures."""
    if isinstance(result, ClassifierOutcome):
        return result
    if isinstance(result, BaseException) and not isinstance(result, Exception):
        raise result
    logger.error(
        "Unexpected classifier error",
        classifier=name,
        error_type=type(result).__name__,
        exc_info=result if isinstance(result, BaseException) else None,
    )
    return ClassifierOutcome.failed(f"unexpected error: {type(result).__name__}")


class SentimentService:
    """
    Sentiment scoring service.

    Attributes:
        primary: Primary (higher precision) remote classifier
        secondary: Secondary remote classifier, fused at a lower weight
    """

    def __init__(
        self,
        config: ServiceConfig,
        primary: BaseClassifier,
        secondary: BaseClassifier,
        gateway: Optional[ClassifierGateway] = None,
    ):
        """
        Args:
            config: Initial runtime configuration
            primary: Primary classifier
            secondary: Secondary classifier
            gateway: Gateway to close on shutdown, when owned by this service
        """
        self._config = config
        self.primary = primary
        self.secondary = secondary
        self._gateway = gateway

        logger.info(
            "SentimentService initialized",
            remote_enabled=config.has_credential,
            ensemble_enabled=config.ensemble_enabled,
            primary=repr(primary),
            secondary=repr(secondary),
        )

    @classmethod
    def from_config(
        cls, config: ServiceConfig, gateway: Optional[ClassifierGateway] = None
    ) -> "SentimentService":
        """Wire the default Hugging Face classifiers behind one shared gateway."""
        gateway = gateway or ClassifierGateway(timeout=config.timeout)
        return cls(
            config,
            primary=build_primary(gateway, config.primary_url),
            secondary=build_secondary(gateway, config.secondary_url),
            gateway=gateway,
        )

    # === Configuration ===

    @property
    def config(self) -> ServiceConfig:
        return self._config

    def set_credential(self, token: Optional[str]) -> None:
        """Replace the remote classifier token (None or blank disables remote calls)."""
        self._config = self._config.with_credential(token)
        logger.info("Credential updated", remote_enabled=self._config.has_credential)

    def set_ensemble(self, enabled: bool) -> None:
        """Toggle two-model ensemble; when off, only the primary model is called."""
        self._config = self._config.with_ensemble(enabled)
        logger.info("Ensemble mode updated", ensemble_enabled=enabled)

    # === Analysis ===

    async def analyze_one(self, text: str) -> CombinedDistribution:
        """
        Analyze one text.

        Never raises for classifier problems: every failure path degrades
        to the local estimator.

        Returns:
            CombinedDistribution with one score per label, best first
        """
        config = self._config
        normalized = normalize(text)
        combiner = ScoreCombiner(config.primary_weight, config.secondary_weight)

        if not config.has_credential:
            distribution = combiner.combine(text, normalized, fallback_reason="no_credential")
        elif config.ensemble_enabled:
            results = await asyncio.gather(
                self.primary.classify(normalized.text, config.api_token),
                self.secondary.classify(normalized.text, config.api_token),
                return_exceptions=True,
            )
            primary = _settle(self.primary.name, results[0])
            secondary = _settle(self.secondary.name, results[1])
            distribution = combiner.combine(text, normalized, primary, secondary)
        else:
            try:
                primary = await self.primary.classify(normalized.text, config.api_token)
            except Exception as e:
                primary = _settle(self.primary.name, e)
            distribution = combiner.combine(
                text, normalized, primary, fallback_reason="primary_failed"
            )

        sentiment_analyses_total.labels(
            source=distribution.source.value, label=distribution.top.label.value
        ).inc()
        return distribution

    async def analyze_batch(self, texts: list[str]) -> list[CombinedDistribution]:
        """
        Analyze many texts in fixed-size concurrent groups.

        Groups run one after another with a fixed pause between them to stay
        under remote rate limits. Output order always matches input order.
        """
        config = self._config
        size = config.batch_size
        results: list[CombinedDistribution] = []

        logger.info("Batch analysis started", total=len(texts), group_size=size)
        for start in range(0, len(texts), size):
            group = texts[start:start + size]
            results.extend(await asyncio.gather(*(self.analyze_one(t) for t in group)))

            if start + size < len(texts):
                await asyncio.sleep(config.batch_pause_seconds)

        logger.info("Batch analysis completed", total=len(results))
        return results

    def extract_keywords(self, text: str, label: SentimentLabel | str) -> list[str]:
        """Keywords from `text` that best explain `label`."""
        return extract_keywords(text, label, limit=self._config.keyword_limit)

    # === Result assembly ===

    def build_result(self, text: str, distribution: CombinedDistribution) -> SentimentResult:
        """Attach top label, confidence and keywords to a distribution."""
        top = distribution.top
        return SentimentResult(
            text=text,
            sentiment=top.label,
            confidence=top.score,
            keywords=self.extract_keywords(text, top.label),
            scores=list(distribution.scores),
            source=distribution.source,
        )

    async def analyze(self, text: str) -> SentimentResult:
        return self.build_result(text, await self.analyze_one(text))

    async def analyze_texts(self, texts: list[str]) -> BatchAnalysisResult:
        distributions = await self.analyze_batch(texts)
        results = [self.build_result(t, d) for t, d in zip(texts, distributions)]
        return BatchAnalysisResult(results=results, summary=BatchSummary.from_results(results))

    async def close(self):
        """Close the owned gateway, if any."""
        if self._gateway is not None:
            await self._gateway.close()
