"""
FastAPI API routes and endpoints.

- routes.py: analysis, keyword, configuration and health endpoints
- dependencies.py: composition root (settings -> config -> service)
- models.py: API-specific request/response models
- middleware.py: request tracing
- error_handlers.py: exception handlers for structured error responses
"""

from sentiment_layer.api import dependencies, error_handlers, models
from sentiment_layer.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
