"""Contract tests for the requests sent to the Replicate REST API."""

import json

import httpx
import pytest
import respx

from replicate_client import ReplicateClient

from ..conftest import API_TOKEN, VERSION_ID

PREDICTION = {
    "id": "p1",
    "version": VERSION_ID,
    "status": "processing",
    "input": {},
    "urls": {},
}
MODEL = {"owner": "replicate", "name": "hello-world", "visibility": "public"}
VERSION = {"id": VERSION_ID, "created_at": "2022-04-26T19:29:04Z", "cog_version": "0.3.0", "openapi_schema": {}}
EMPTY_PAGE = {"next": None, "previous": None, "results": []}

CONTRACTS = [
    (
        "predictions.create",
        lambda c: c.predictions.create(VERSION_ID, {"prompt": "hello"}),
        "POST", "/v1/predictions", {"version": VERSION_ID, "input": {"prompt": "hello"}}, PREDICTION,
    ),
    (
        "predictions.get",
        lambda c: c.predictions.get("p1"),
        "GET", "/v1/predictions/p1", None, PREDICTION,
    ),
    (
        "predictions.list",
        lambda c: c.predictions.list(),
        "GET", "/v1/predictions", None, EMPTY_PAGE,
    ),
    (
        "predictions.cancel",
        lambda c: c.predictions.cancel("p1"),
        "POST", "/v1/predictions/p1/cancel", None, PREDICTION,
    ),
    (
        "models.get",
        lambda c: c.models.get("replicate", "hello-world"),
        "GET", "/v1/models/replicate/hello-world", None, MODEL,
    ),
    (
        "models.list",
        lambda c: c.models.list(),
        "GET", "/v1/models", None, EMPTY_PAGE,
    ),
    (
        "model_versions.get",
        lambda c: c.model_versions.get("replicate", "hello-world", VERSION_ID),
        "GET", f"/v1/models/replicate/hello-world/versions/{VERSION_ID}", None, VERSION,
    ),
    (
        "model_versions.list",
        lambda c: c.model_versions.list("replicate", "hello-world"),
        "GET", "/v1/models/replicate/hello-world/versions", None, EMPTY_PAGE,
    ),
    (
        "model_versions.delete",
        lambda c: c.model_versions.delete("replicate", "hello-world", VERSION_ID),
        "DELETE", f"/v1/models/replicate/hello-world/versions/{VERSION_ID}", None, None,
    ),
]


@pytest.mark.contract
class TestAPIContracts:
    """Each operation maps to one request with the documented shape."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation,call,method,path,body,response",
        CONTRACTS,
        ids=[contract[0] for contract in CONTRACTS],
    )
    async def test_request_shape(self, config, operation, call, method, path, body, response):
        with respx.mock(assert_all_called=False) as api:
            route = api.route(method=method, host="api.replicate.com", path=path).mock(
                return_value=httpx.Response(200, json=response) if response is not None else httpx.Response(204)
            )

            async with ReplicateClient(config) as client:
                await call(client)

        request = route.calls.last.request
        assert request.method == method
        assert request.url.host == "api.replicate.com"
        assert request.url.path == path
        assert request.headers["Authorization"] == f"Bearer {API_TOKEN}"
        assert request.headers["Content-Type"] == "application/json"

        if body is None:
            assert request.content == b""
        else:
            assert json.loads(request.content) == body
