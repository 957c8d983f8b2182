"""Model and model version endpoints.

Covers:
- ``GET /models``: public model listing
- ``GET /models/{owner}/{name}``
- ``GET /models/{owner}/{name}/versions``
- ``GET /models/{owner}/{name}/versions/{id}``
- ``DELETE /models/{owner}/{name}/versions/{id}``

All reads are idempotent and side-effect free on the service.
"""

from typing import Optional

from ..errors import ModelVersionNotFoundError
from ..types import Model, ModelVersion, Page
from .base import Resource, path_segment


def _model_path(owner: str, name: str) -> str:
    return f"/models/{path_segment(owner)}/{path_segment(name)}"


class Models(Resource):
    """Read access to published models."""

    async def get(self, owner: str, name: str) -> Model:
        """Fetch one model, including its latest version when it has one."""
        return await self._request(
            Model, "GET", _model_path(owner, name), operation="models.get"
        )

    async def list(self, cursor: Optional[str] = None) -> Page[Model]:
        """List public models.

        Parameters
        - cursor: ``next``/``previous`` URL from an earlier page, used verbatim
        """
        return await self._request(
            Page[Model], "GET", cursor or "/models", operation="models.list"
        )


class ModelVersions(Resource):
    """Versions of a single model."""

    async def get(self, owner: str, name: str, version_id: str) -> ModelVersion:
        path = f"{_model_path(owner, name)}/versions/{path_segment(version_id)}"
        return await self._request(
            ModelVersion, "GET", path, operation="model_versions.get"
        )

    async def list(
        self,
        owner: str,
        name: str,
        cursor: Optional[str] = None,
    ) -> Page[ModelVersion]:
        """List a model's versions, newest first as ordered by the service."""
        path = cursor or f"{_model_path(owner, name)}/versions"
        return await self._request(
            Page[ModelVersion], "GET", path, operation="model_versions.list"
        )

    async def latest(self, owner: str, name: str) -> ModelVersion:
        """Return the most recent version of a model.

        Raises ``ModelVersionNotFoundError`` if the model has no versions.
        """
        page = await self.list(owner, name)
        if not page.results:
            raise ModelVersionNotFoundError(f"No versions found for {owner}/{name}")
        return page.results[0]

    async def delete(self, owner: str, name: str, version_id: str) -> None:
        """Delete one version of a model you own."""
        path = f"{_model_path(owner, name)}/versions/{path_segment(version_id)}"
        await self._transport.send("DELETE", path, operation="model_versions.delete")
