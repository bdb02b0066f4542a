"""
Custom exceptions for the remote classifier layer.

These are raised by the HTTP gateway and caught at the classifier boundary,
where they become failed ClassifierOutcome values. They never reach callers
of SentimentService.
"""


class ClassifierError(Exception):
    """
    Base exception for all remote classifier errors.

    Carries a message plus structured details for logging.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ClassifierConnectionError(ClassifierError):
    """
    Raised when the classifier endpoint cannot be reached.

    Covers DNS failures, refused connections and dropped sockets.
    """
    pass


class ClassifierTimeoutError(ClassifierConnectionError):
    """Raised when a classification request exceeds the configured timeout."""
    pass


class ClassifierHTTPError(ClassifierError):
    """
    Raised when the endpoint answers with a non-2xx status.

    Hosted inference endpoints return 503 while a model is loading and
    401/403 for a bad token; all of them degrade the same way.
    """
    def __init__(self, message: str, status_code: int, details: dict | None = None):
        super().__init__(message, details)
        self.status_code = status_code


class ClassifierResponseError(ClassifierError):
    """
    Raised when the response body is not the expected shape.

    Expected: a JSON array whose first element is an array of
    {"label": str, "score": float} objects.
    """
    pass
