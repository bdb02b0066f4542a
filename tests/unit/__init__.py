"""
Unit tests for the Sentiment Layer.

Test individual components in isolation:
- Normalizer (cues, contractions, markers, idempotence)
- Local estimator and score combiner
- Keyword extraction
- Classifier gateway and adapters (httpx.MockTransport, no network)
- SentimentService orchestration with stub classifiers
"""
