"""Entry point for talking to the Replicate API.

``ReplicateClient`` wires one frozen config and one shared transport into the
resource objects. Reuse a single client for the whole process; it is safe to
call from many concurrent tasks.

Example
    async with ReplicateClient() as client:
        prediction = await client.predictions.create(version_id, {"prompt": "hi"})
        prediction = await client.predictions.get(prediction.id)
"""

from typing import Optional

import httpx
import structlog

from .common.config import ReplicateConfig
from .common.metrics import RequestMetrics
from .resources import Models, ModelVersions, Predictions
from .transport import Transport

logger = structlog.get_logger("replicate_client.client")


class ReplicateClient:
    """Typed async client for predictions, models and model versions.

    Parameters
    - config: ``ReplicateConfig``; read from the environment when omitted
    - http_client: Optional ``httpx.AsyncClient`` to share with the caller
    - metrics: Optional ``RequestMetrics`` for Prometheus instrumentation

    Raises ``ConfigurationError`` at construction when no usable token is
    available, before any request is made.
    """

    def __init__(
        self,
        config: Optional[ReplicateConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[RequestMetrics] = None,
    ):
        self.config = config if config is not None else ReplicateConfig()
        self.transport = Transport(self.config, http_client=http_client, metrics=metrics)

        self.predictions = Predictions(self.transport)
        self.models = Models(self.transport)
        self.model_versions = ModelVersions(self.transport)

        logger.debug("Replicate client created", base_url=self.config.base_url)

    async def aclose(self) -> None:
        """Release the underlying HTTP connections."""
        await self.transport.aclose()

    async def __aenter__(self) -> "ReplicateClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
