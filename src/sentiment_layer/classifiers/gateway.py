"""
HTTP gateway to hosted text-classification endpoints.

Communicates with Hugging Face style inference endpoints using httpx
AsyncClient:
- POST {"inputs": <text>} with a bearer token
- Fixed per-request timeout (no retries; a hung call is bounded by it)
- Response validated as [[{"label": str, "score": float}, ...], ...]

All failures are raised as ClassifierError subclasses; turning them into
outcomes is the classifier adapter's job.
"""

import json
from typing import Optional

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from sentiment_layer.classifiers.exceptions import (
    ClassifierConnectionError,
    ClassifierHTTPError,
    ClassifierResponseError,
    ClassifierTimeoutError,
)
from sentiment_layer.models.scores import RawLabelScore

logger = structlog.get_logger(__name__)

_LABEL_SCORES = TypeAdapter(list[RawLabelScore])


def parse_classification_payload(data: object) -> list[RawLabelScore]:
    """
    Extract the ranked label list from a classifier response body.

    Raises:
        ClassifierResponseError: Body is not a list whose first element is a
            list of {label, score} objects
    """
    if not isinstance(data, list) or not data:
        raise ClassifierResponseError(
            "Expected a non-empty JSON array",
            details={"type": type(data).__name__},
        )
    try:
        return _LABEL_SCORES.validate_python(data[0])
    except ValidationError as e:
        raise ClassifierResponseError(
            "Malformed label/score list",
            details={"errors": e.error_count()},
        ) from e


class ClassifierGateway:
    """
    Shared HTTP client for every remote classifier.

    One persistent AsyncClient is reused for connection pooling; call
    `close()` (or use `async with`) on shutdown.
    """

    def __init__(
        self,
        timeout: float = 15.0,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize gateway.

        Args:
            timeout: Per-request timeout in seconds
            connection_limits: httpx pool limits (default: 10 max connections)
            transport: Optional httpx transport (tests inject httpx.MockTransport)
        """
        self.timeout = timeout
        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0,
            )
        self._connection_limits = connection_limits
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info("Classifier gateway initialized", timeout=timeout)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def fetch(self, endpoint: str, text: str, token: str) -> list[RawLabelScore]:
        """
        Classify `text` at `endpoint`.

        Args:
            endpoint: Full model URL
            text: Normalized text sent as {"inputs": text}
            token: Bearer token

        Returns:
            Ranked label/score list as returned by the model

        Raises:
            ClassifierTimeoutError: Request exceeded the timeout
            ClassifierConnectionError: Network failure
            ClassifierHTTPError: Non-2xx status
            ClassifierResponseError: Body is not valid JSON or has the wrong shape
        """
        client = await self._get_client()
        try:
            response = await client.post(
                endpoint,
                json={"inputs": text},
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                },
            )
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise ClassifierTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"endpoint": endpoint, "timeout": self.timeout},
            ) from e
        except httpx.HTTPStatusError as e:
            raise ClassifierHTTPError(
                f"Classifier returned status {e.response.status_code}",
                status_code=e.response.status_code,
                details={"endpoint": endpoint, "body": e.response.text[:200]},
            ) from e
        except httpx.TransportError as e:
            raise ClassifierConnectionError(
                f"Network error: {e}",
                details={"endpoint": endpoint, "error_type": type(e).__name__},
            ) from e
        except json.JSONDecodeError as e:
            raise ClassifierResponseError(
                "Invalid JSON response",
                details={"endpoint": endpoint, "parse_error": str(e)},
            ) from e

        return parse_classification_payload(data)

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed classifier gateway connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
