"""HTTP transport for the Replicate API.

One ``httpx.AsyncClient`` is shared across every call. ``Transport`` adds the
bearer token and JSON headers, resolves paths against the configured base
URL, and turns httpx failures into the client's typed errors:

- connection/read/timeout problems become ``NetworkError``
- any non-2xx answer becomes ``HttpStatusError`` (or a subclass)

Nothing is retried and nothing is cached; each call is independent.
"""

import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import httpx
import structlog

from .common.config import ReplicateConfig
from .common.metrics import RequestMetrics
from .errors import HttpStatusError, NetworkError

logger = structlog.get_logger("replicate_client.transport")


class Transport:
    """Executes authenticated requests against the Replicate API.

    Parameters
    - config: Frozen ``ReplicateConfig`` holding token and base URL
    - http_client: Optional pre-built ``httpx.AsyncClient``; the caller keeps
      ownership and must close it
    - metrics: Optional ``RequestMetrics`` recording each request
    """

    def __init__(
        self,
        config: ReplicateConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[RequestMetrics] = None,
    ):
        self.config = config
        self.metrics = metrics
        self._owns_client = http_client is None

        if http_client is None:
            client_options: Dict[str, Any] = {}
            if config.timeout is not None:
                client_options["timeout"] = config.timeout
            http_client = httpx.AsyncClient(**client_options)
        self.http_client = http_client

    def build_url(self, path: str) -> str:
        """Resolve ``path`` against the base URL.

        Absolute URLs (pagination cursors, stream URLs) are returned as-is.
        """
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return self.config.base_url + path

    def _headers(self, accept: str = "application/json") -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_token}",
            "Content-Type": "application/json",
            "Accept": accept,
        }

    async def send(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        operation: str = "request",
    ) -> httpx.Response:
        """Send one request and return the successful response.

        Parameters
        - method: HTTP verb
        - path: Path below the base URL, or an absolute URL
        - body: JSON-serializable payload, omitted when ``None``
        - operation: Stable name used for logs and metrics

        Raises
        - ``NetworkError`` when no response was received
        - ``HttpStatusError`` for any non-2xx response, redirects included
        """
        url = self.build_url(path)
        start_time = time.perf_counter()

        try:
            response = await self.http_client.request(
                method,
                url,
                headers=self._headers(),
                json=body,
            )
        except httpx.TransportError as exc:
            self._record(method, operation, "error", start_time)
            raise NetworkError(method, url, str(exc) or type(exc).__name__) from exc

        self._record(method, operation, str(response.status_code), start_time)
        logger.debug(
            "Request completed",
            method=method,
            operation=operation,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        if not response.is_success:
            raise HttpStatusError.from_response(response)
        return response

    @asynccontextmanager
    async def stream(self, path: str, operation: str = "stream") -> AsyncIterator[httpx.Response]:
        """Open a server-sent events stream.

        Yields the live ``httpx.Response`` for reading inside the ``async with``
        block. Errors map as in ``send``, including failures while the body is
        being read. The request is recorded once, with the status it opened with
        or ``error`` when no response arrived.
        """
        url = self.build_url(path)
        start_time = time.perf_counter()
        headers = self._headers(accept="text/event-stream")
        headers["Cache-Control"] = "no-store"
        status = "error"

        try:
            async with self.http_client.stream("GET", url, headers=headers) as response:
                status = str(response.status_code)
                if not response.is_success:
                    await response.aread()
                    raise HttpStatusError.from_response(response)
                logger.debug("Stream opened", operation=operation, url=url)
                yield response
        except httpx.TransportError as exc:
            raise NetworkError("GET", url, str(exc) or type(exc).__name__) from exc
        finally:
            self._record("GET", operation, status, start_time)

    def _record(self, method: str, operation: str, status: str, start_time: float) -> None:
        if self.metrics is not None:
            self.metrics.record_request(method, operation, status, time.perf_counter() - start_time)

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self.http_client.aclose()
