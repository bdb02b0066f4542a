"""
Keyword extraction explaining an already-decided sentiment label.
"""

import re

from sentiment_layer.models.enums import SentimentLabel
from sentiment_layer.scoring.lexicon import LABEL_KEYWORDS, SENTIMENT_WORDS, STOP_WORDS
from sentiment_layer.scoring.normalizer import normalize

_TOKEN_SPLIT = re.compile(r"\W+")

MIN_TOKEN_LENGTH = 3
LONG_TOKEN_LENGTH = 5
CONTEXT_WINDOW = 2
LABEL_MATCH_BONUS = 3.0


def tokenize(normalized_text: str) -> list[str]:
    """Lowercase, split on non-word runs, drop tokens shorter than 3 chars."""
    return [
        token
        for token in _TOKEN_SPLIT.split(normalized_text.lower())
        if len(token) >= MIN_TOKEN_LENGTH
    ]


def _near_sentiment_word(token: str, tokens: list[str]) -> bool:
    # Window is anchored on the token's first occurrence
    index = tokens.index(token)
    window = tokens[max(0, index - CONTEXT_WINDOW): index + CONTEXT_WINDOW + 1]
    return any(word in SENTIMENT_WORDS for word in window)


def extract_keywords(text: str, label: SentimentLabel | str, limit: int = 6) -> list[str]:
    """
    Rank the words of `text` that best explain `label`.

    A token is kept when it is in the label's keyword list, is longer than
    4 characters, or sits within two tokens of any sentiment word. Kept tokens
    are scored (+3 label match, + frequency, + min(len/10, 1)), ranked, cut to
    `limit`, and finally any sentinel token (contains "_") is dropped.

    Args:
        text: Raw text
        label: Sentiment label (enum or its string value)
        limit: Maximum number of keywords

    Returns:
        Up to `limit` keywords, best first
    """
    label_words = LABEL_KEYWORDS.get(SentimentLabel(label), frozenset())
    tokens = tokenize(normalize(text).text)

    relevant: dict[str, None] = {}
    for token in tokens:
        if token in STOP_WORDS or token in relevant:
            continue
        if (
            token in label_words
            or len(token) >= LONG_TOKEN_LENGTH
            or _near_sentiment_word(token, tokens)
        ):
            relevant[token] = None

    scored: list[tuple[str, float]] = []
    for keyword in relevant:
        score = LABEL_MATCH_BONUS if keyword in label_words else 0.0
        score += tokens.count(keyword)
        score += min(len(keyword) / 10, 1.0)
        scored.append((keyword, score))

    scored.sort(key=lambda item: item[1], reverse=True)
    return [keyword for keyword, _ in scored[:limit] if "_" not in keyword]
