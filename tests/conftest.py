"""Shared test fixtures and configuration for all tests.

Provides service configs, stub classifiers and canned classifier payloads
used across unit and integration tests.
"""

import asyncio
from typing import Callable, Optional, Union

import pytest

from sentiment_layer.classifiers.base import BaseClassifier
from sentiment_layer.classifiers.huggingface import GENERIC_VOCABULARY, STAR_VOCABULARY
from sentiment_layer.config import ServiceConfig
from sentiment_layer.models.scores import RawLabelScore

Responder = Union[list[dict], Callable[[str], list[dict]]]


class StubClassifier(BaseClassifier):
    """In-memory classifier: returns canned native labels or raises a given error.

    Records every call and the peak number of concurrent in-flight calls.
    """

    def __init__(
        self,
        name: str,
        vocabulary: dict,
        response: Optional[Responder] = None,
        error: Optional[Exception] = None,
        delay: Union[float, Callable[[str], float]] = 0.0,
    ):
        super().__init__(name, vocabulary)
        self.response = response if response is not None else []
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def _fetch(self, text: str, token: str) -> list[RawLabelScore]:
        self.calls.append((text, token))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self.delay(text) if callable(self.delay) else self.delay
            if delay:
                await asyncio.sleep(delay)
            if self.error is not None:
                raise self.error
            payload = self.response(text) if callable(self.response) else self.response
            return [RawLabelScore(**item) for item in payload]
        finally:
            self.in_flight -= 1


@pytest.fixture
def service_config() -> ServiceConfig:
    """Config with a real-looking token, ensemble on and no batch pause."""
    return ServiceConfig(
        api_token="hf_test_token",
        primary_url="https://models.test/primary",
        secondary_url="https://models.test/secondary",
        timeout=15.0,
        ensemble_enabled=True,
        batch_size=3,
        batch_pause_seconds=0.0,
        keyword_limit=6,
    )


@pytest.fixture
def local_config(service_config: ServiceConfig) -> ServiceConfig:
    """Same config without a credential (local estimator only)."""
    return service_config.with_credential(None)


@pytest.fixture
def primary_payload() -> list[dict]:
    """Primary model output favouring positive."""
    return [
        {"label": "positive", "score": 0.9},
        {"label": "neutral", "score": 0.05},
        {"label": "negative", "score": 0.05},
    ]


@pytest.fixture
def secondary_payload() -> list[dict]:
    """Secondary (star rating) model output."""
    return [{"label": "5 stars", "score": 0.8}]


@pytest.fixture
def make_primary():
    """Factory fixture for a primary StubClassifier (generic vocabulary).

    Usage:
        def test_something(make_primary):
            primary = make_primary(response=[{"label": "LABEL_2", "score": 0.9}])
    """
    def _create(**kwargs) -> StubClassifier:
        return StubClassifier("primary", GENERIC_VOCABULARY, **kwargs)

    return _create


@pytest.fixture
def make_secondary():
    """Factory fixture for a secondary StubClassifier (star vocabulary)."""
    def _create(**kwargs) -> StubClassifier:
        return StubClassifier("secondary", STAR_VOCABULARY, **kwargs)

    return _create
