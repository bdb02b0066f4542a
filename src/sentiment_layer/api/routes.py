"""
API routes for sentiment analysis.

All endpoints delegate to the singleton SentimentService. Analysis endpoints
always return a distribution: remote classifier failures degrade to the
local estimator instead of surfacing as errors.
"""

import structlog
from fastapi import APIRouter, Depends, Response, status

from sentiment_layer.api.dependencies import get_service, get_settings
from sentiment_layer.api.middleware import SOURCE_HEADER
from sentiment_layer.api.models import (
    AnalyzeRequest,
    BatchAnalyzeRequest,
    CredentialUpdate,
    EnsembleUpdate,
    HealthResponse,
    KeywordsRequest,
    KeywordsResponse,
)
from sentiment_layer.config import Settings
from sentiment_layer.models.results import BatchAnalysisResult, SentimentResult
from sentiment_layer.service import SentimentService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    response_model=SentimentResult,
    status_code=status.HTTP_200_OK,
    summary="Analyze single text",
    description="""
    Estimate the sentiment of one text.

    Returns the top label, its confidence, explaining keywords and the full
    3-class distribution together with the path that produced it
    (ensemble, primary, secondary or local).
    """,
)
async def analyze_text(
    request: AnalyzeRequest,
    response: Response,
    service: SentimentService = Depends(get_service),
) -> SentimentResult:
    result = await service.analyze(request.text)
    response.headers[SOURCE_HEADER] = result.source.value
    logger.info(
        "Analysis completed",
        sentiment=result.sentiment.value,
        confidence=round(result.confidence, 4),
        source=result.source.value,
    )
    return result


@router.post(
    "/analyze/batch",
    response_model=BatchAnalysisResult,
    status_code=status.HTTP_200_OK,
    summary="Analyze a batch of texts",
    description="""
    Analyze several texts, in groups of three with a short pause between
    groups. Results are returned in input order with a label summary.
    """,
)
async def analyze_batch(
    request: BatchAnalyzeRequest,
    service: SentimentService = Depends(get_service),
) -> BatchAnalysisResult:
    batch = await service.analyze_texts(request.items())
    logger.info(
        "Batch analysis completed",
        total=batch.summary.total,
        positive=batch.summary.positive,
        negative=batch.summary.negative,
        neutral=batch.summary.neutral,
    )
    return batch


@router.post(
    "/keywords",
    response_model=KeywordsResponse,
    summary="Extract keywords explaining a sentiment label",
)
async def keywords(
    request: KeywordsRequest,
    service: SentimentService = Depends(get_service),
) -> KeywordsResponse:
    return KeywordsResponse(keywords=service.extract_keywords(request.text, request.sentiment))


@router.put(
    "/config/credential",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Set the remote classifier token",
)
async def set_credential(
    update: CredentialUpdate,
    service: SentimentService = Depends(get_service),
) -> Response:
    service.set_credential(update.token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/config/ensemble",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Enable or disable two-model ensemble",
)
async def set_ensemble(
    update: EnsembleUpdate,
    service: SentimentService = Depends(get_service),
) -> Response:
    service.set_ensemble(update.enabled)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="""
    Report service status and the active scoring mode:
    - ensemble: credential set, two remote models fused
    - single: credential set, primary model only
    - local: no credential, local estimator only
    """,
)
async def health_check(
    service: SentimentService = Depends(get_service),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    config = service.config
    if not config.has_credential:
        mode = "local"
    elif config.ensemble_enabled:
        mode = "ensemble"
    else:
        mode = "single"

    return HealthResponse(status="healthy", version=settings.APP_VERSION, mode=mode)
