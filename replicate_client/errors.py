"""Exception hierarchy for the Replicate client.

Every failure surfaced by the library derives from ``ReplicateError`` so
callers can catch broadly or narrowly:

- ``ConfigurationError``: missing or malformed API token
- ``NetworkError``: the request never produced an HTTP response
- ``HttpStatusError``: the service answered with a 4xx/5xx status
- ``DeserializationError``: the body did not match the expected schema
"""

import json
from typing import Any, Dict, Optional

import httpx

BODY_EXCERPT_LIMIT = 500


def _excerpt(body: Optional[str]) -> Optional[str]:
    if body is None or len(body) <= BODY_EXCERPT_LIMIT:
        return body
    return body[:BODY_EXCERPT_LIMIT] + "..."


class ReplicateError(Exception):
    """Base exception for Replicate client operations."""
    pass


class ConfigurationError(ReplicateError):
    """Client configuration is missing or invalid."""
    pass


class NetworkError(ReplicateError):
    """Connection failed or was interrupted before a response arrived."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class HttpStatusError(ReplicateError):
    """The service responded with a non-2xx status code.

    Parameters
    - status_code: HTTP status returned by the service
    - message: Server-supplied ``detail``/``error`` text, when present
    - method, url: The request that failed
    - body: Excerpt of the raw response body
    """

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.method = method
        self.url = url
        self.body = _excerpt(body)

        text = f"HTTP {status_code}"
        if method and url:
            text = f"{method} {url} returned HTTP {status_code}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "HttpStatusError":
        """Build the matching error subclass for a failed response."""
        body = response.text
        error_class = _STATUS_ERRORS.get(response.status_code, cls)
        return error_class(
            status_code=response.status_code,
            message=_extract_message(body),
            method=response.request.method,
            url=str(response.request.url),
            body=body,
        )


class AuthenticationError(HttpStatusError):
    """The API token was rejected (HTTP 401)."""
    pass


class PaymentRequiredError(HttpStatusError):
    """The account needs billing set up before running this (HTTP 402)."""
    pass


class DeserializationError(ReplicateError):
    """Response body could not be parsed into the expected type."""

    def __init__(self, expected: str, body: str, reason: str):
        self.expected = expected
        self.body = _excerpt(body)
        self.reason = reason
        super().__init__(f"Could not parse response as {expected}: {reason}")


class ModelVersionNotFoundError(ReplicateError):
    """A model has no published versions."""
    pass


class StreamUnavailableError(ReplicateError):
    """A prediction has no server-sent events URL to follow."""
    pass


_STATUS_ERRORS = {
    401: AuthenticationError,
    402: PaymentRequiredError,
}


def _extract_message(body: str) -> Optional[str]:
    """Pull a human-readable message out of an error body.

    The service answers with ``{"title": ..., "detail": ...}``; some
    endpoints use ``{"error": ...}`` instead.
    """
    try:
        data: Any = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    payload: Dict[str, Any] = data
    detail = payload.get("detail") or payload.get("error")
    if not detail:
        return None
    detail = str(detail)
    title = payload.get("title")
    if title:
        return f"{title}: {detail}"
    return detail
