"""Shared fixtures: a test config and canned API payloads."""

from typing import Any, Dict

import pytest

from replicate_client import ReplicateConfig

BASE_URL = "https://api.replicate.com/v1"
API_TOKEN = "r8_test_token"
VERSION_ID = "5c7d5dc6dd8bf75c1acaa8565735e7986bc5b66206b55cca93cb72c9bf15ccaa"


@pytest.fixture
def config() -> ReplicateConfig:
    return ReplicateConfig(api_token=API_TOKEN, base_url=BASE_URL)


@pytest.fixture
def prediction_payload():
    """Factory for prediction JSON as returned by the service."""

    def build(prediction_id: str = "gm3qorzdhgbfurvjtvhg6dckhu", **overrides: Any) -> Dict[str, Any]:
        payload = {
            "id": prediction_id,
            "model": "replicate/hello-world",
            "version": VERSION_ID,
            "input": {"text": "Alice"},
            "logs": "",
            "output": None,
            "error": None,
            "status": "starting",
            "created_at": "2023-09-08T16:19:34.765994657Z",
            "started_at": None,
            "completed_at": None,
            "urls": {
                "cancel": f"{BASE_URL}/predictions/{prediction_id}/cancel",
                "get": f"{BASE_URL}/predictions/{prediction_id}",
            },
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def version_payload():
    """Factory for model version JSON."""

    def build(version_id: str = VERSION_ID, **overrides: Any) -> Dict[str, Any]:
        payload = {
            "id": version_id,
            "created_at": "2022-04-26T19:29:04.418669Z",
            "cog_version": "0.3.0",
            "openapi_schema": {
                "openapi": "3.0.2",
                "components": {"schemas": {"Input": {"type": "object"}}},
            },
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def model_payload(version_payload):
    """Factory for model JSON."""

    def build(owner: str = "replicate", name: str = "hello-world", **overrides: Any) -> Dict[str, Any]:
        payload = {
            "url": f"https://replicate.com/{owner}/{name}",
            "owner": owner,
            "name": name,
            "description": "A tiny model that says hello",
            "visibility": "public",
            "github_url": "https://github.com/replicate/cog-examples",
            "paper_url": None,
            "license_url": None,
            "run_count": 5681081,
            "cover_image_url": "https://tjzk.replicate.delivery/models_models_cover_image/hello.png",
            "default_example": None,
            "latest_version": version_payload(),
        }
        payload.update(overrides)
        return payload

    return build
