"""
Integration tests for the Sentiment Layer.

Test components together or against real external services:
- API endpoints (FastAPI TestClient with stub classifiers)
- Hosted Hugging Face classifiers (skipped without HF_API_TOKEN)
"""
