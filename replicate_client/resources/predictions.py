"""Prediction endpoints.

Covers creating, fetching, listing and canceling predictions, plus reading a
prediction's server-sent events when it was created with ``stream=True``.

Prediction status is owned by the service: ``starting`` moves to
``processing`` and ends in ``succeeded``, ``failed`` or ``canceled``. The
client only reports what the service returns; polling ``get`` until a
terminal state is left to the caller.
"""

from typing import Any, AsyncIterator, Dict, Optional

import structlog
from httpx_sse import EventSource

from ..errors import StreamUnavailableError
from ..types import Page, Prediction, ServerSentEvent
from .base import Resource, path_segment
from .models import ModelVersions

logger = structlog.get_logger("replicate_client.predictions")


class Predictions(Resource):
    """Create and inspect predictions."""

    async def create(
        self,
        version_id: str,
        input: Dict[str, Any],
        stream: bool = False,
    ) -> Prediction:
        """Start a prediction for a model version.

        Parameters
        - version_id: Id of the model version to run
        - input: Model-specific input object
        - stream: Ask the service for a server-sent events URL

        Returns the new prediction, usually in ``starting`` state.
        """
        body: Dict[str, Any] = {"version": version_id, "input": input}
        if stream:
            body["stream"] = True
        return await self._request(
            Prediction, "POST", "/predictions", body=body, operation="predictions.create"
        )

    async def create_for_model(
        self,
        owner: str,
        name: str,
        input: Dict[str, Any],
        stream: bool = False,
    ) -> Prediction:
        """Start a prediction against the latest version of ``owner/name``."""
        version = await ModelVersions(self._transport).latest(owner, name)
        logger.debug("Resolved latest version", model=f"{owner}/{name}", version=version.id)
        return await self.create(version.id, input, stream=stream)

    async def get(self, prediction_id: str) -> Prediction:
        """Fetch the current state of a prediction."""
        return await self._request(
            Prediction,
            "GET",
            f"/predictions/{path_segment(prediction_id)}",
            operation="predictions.get",
        )

    async def list(self, cursor: Optional[str] = None) -> Page[Prediction]:
        """List predictions created with this token.

        Parameters
        - cursor: ``next``/``previous`` URL from an earlier page, used verbatim
        """
        return await self._request(
            Page[Prediction], "GET", cursor or "/predictions", operation="predictions.list"
        )

    async def cancel(self, prediction_id: str) -> Prediction:
        """Cancel a running prediction.

        The service rejects cancellation of a prediction that already
        finished; that surfaces as ``HttpStatusError``.
        """
        return await self._request(
            Prediction,
            "POST",
            f"/predictions/{path_segment(prediction_id)}/cancel",
            operation="predictions.cancel",
        )

    async def stream(self, prediction: Prediction) -> AsyncIterator[ServerSentEvent]:
        """Yield server-sent events for a streaming prediction.

        Stops after the ``done`` event or when the service closes the stream.
        A caller that stops early should close the generator so the response
        is released at once::

            async with contextlib.aclosing(client.predictions.stream(p)) as events:
                async for event in events:
                    ...
        """
        stream_url = prediction.urls.get("stream")
        if not stream_url:
            raise StreamUnavailableError(
                f"Prediction {prediction.id} has no stream URL; create it with stream=True"
            )

        async with self._transport.stream(stream_url, operation="predictions.stream") as response:
            async for sse in EventSource(response).aiter_sse():
                event = ServerSentEvent(event=sse.event, data=sse.data, id=sse.id or None)
                yield event
                if event.event == "done":
                    logger.debug("Stream finished", prediction_id=prediction.id)
                    return
