"""
Sentiment Layer: polarity estimation for free-form text.

Turns raw text into a ranked positive/neutral/negative distribution:
- Normalization (negation, intensity, affect cues surfaced as markers)
- Remote classifier ensemble (two hosted models, fused 70/30)
- Local heuristic estimator when no remote classifier is usable
- Keyword extraction explaining a decided label

Architecture: FastAPI surface + httpx classifier gateway + deterministic scoring core
"""

__version__ = "0.1.0"
