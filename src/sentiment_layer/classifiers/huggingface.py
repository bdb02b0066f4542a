"""
Hosted Hugging Face classifiers.

Two adapters share the same HTTP gateway but speak different vocabularies:
- primary: general-purpose 3-class model (LABEL_0/1/2 or named labels)
- secondary: 1-5 star review model
"""

from typing import Mapping

from sentiment_layer.classifiers.base import BaseClassifier
from sentiment_layer.classifiers.gateway import ClassifierGateway
from sentiment_layer.models.enums import SentimentLabel
from sentiment_layer.models.scores import RawLabelScore

GENERIC_VOCABULARY: dict[str, SentimentLabel] = {
    "LABEL_0": SentimentLabel.NEGATIVE,
    "LABEL_1": SentimentLabel.NEUTRAL,
    "LABEL_2": SentimentLabel.POSITIVE,
    "negative": SentimentLabel.NEGATIVE,
    "neutral": SentimentLabel.NEUTRAL,
    "positive": SentimentLabel.POSITIVE,
}

STAR_VOCABULARY: dict[str, SentimentLabel] = {
    "1 star": SentimentLabel.NEGATIVE,
    "2 stars": SentimentLabel.NEGATIVE,
    "3 stars": SentimentLabel.NEUTRAL,
    "4 stars": SentimentLabel.POSITIVE,
    "5 stars": SentimentLabel.POSITIVE,
}


class HuggingFaceClassifier(BaseClassifier):
    """Classifier backed by one hosted inference endpoint."""

    def __init__(
        self,
        name: str,
        endpoint: str,
        gateway: ClassifierGateway,
        vocabulary: Mapping[str, SentimentLabel],
    ):
        super().__init__(name, vocabulary)
        self.endpoint = endpoint
        self.gateway = gateway

    async def _fetch(self, text: str, token: str) -> list[RawLabelScore]:
        return await self.gateway.fetch(self.endpoint, text, token)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, endpoint={self.endpoint})"


def build_primary(gateway: ClassifierGateway, endpoint: str) -> HuggingFaceClassifier:
    return HuggingFaceClassifier("primary", endpoint, gateway, GENERIC_VOCABULARY)


def build_secondary(gateway: ClassifierGateway, endpoint: str) -> HuggingFaceClassifier:
    return HuggingFaceClassifier("secondary", endpoint, gateway, STAR_VOCABULARY)
