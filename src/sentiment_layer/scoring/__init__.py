"""
Deterministic sentiment scoring core.

- normalizer: raw text -> NormalizedText (sentinel text + marker set)
- estimator: local heuristic distribution
- combiner: ensemble fusion / passthrough / local fallback
- keywords: label-explaining keyword extraction
- lexicon: shared word lists and weights
"""

from sentiment_layer.scoring.combiner import ScoreCombiner, from_single, fuse
from sentiment_layer.scoring.estimator import estimate, extract_features
from sentiment_layer.scoring.keywords import extract_keywords
from sentiment_layer.scoring.normalizer import normalize

__all__ = [
    "normalize",
    "estimate",
    "extract_features",
    "ScoreCombiner",
    "fuse",
    "from_single",
    "extract_keywords",
]
