"""
FastAPI application entry point for the Sentiment Layer.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from sentiment_layer.api.dependencies import get_service
from sentiment_layer.api.error_handlers import EXCEPTION_HANDLERS
from sentiment_layer.api.middleware import RequestTracingMiddleware
from sentiment_layer.api.routes import router
from sentiment_layer.config import settings
from sentiment_layer.logging_config import configure_logging

# Configure structured logging before the app is built
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        primary_model=settings.PRIMARY_MODEL_URL,
        secondary_model=settings.SECONDARY_MODEL_URL,
        ensemble=settings.ENSEMBLE_ENABLED,
    )
    service = get_service()
    yield
    logger.info("Application shutdown")
    await service.close()


app = FastAPI(
    title=settings.APP_NAME,
    description="Sentiment scoring with remote classifier ensemble and local fallback",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["sentiment"])

if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sentiment_layer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Only for development
    )
