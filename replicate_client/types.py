"""Typed records for Replicate API payloads.

Field names and enum values mirror the service's JSON exactly. Per-model
payloads (prediction ``input``/``output``, ``openapi_schema``) have no fixed
shape, so they are typed as ``pydantic.JsonValue``.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, JsonValue

T = TypeVar("T")

_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


def _truncate_fraction(value: Any) -> Any:
    # The service emits nanosecond timestamps; datetime holds microseconds.
    if isinstance(value, str):
        return _EXTRA_FRACTION.sub(r"\1", value, count=1)
    return value


Timestamp = Annotated[datetime, BeforeValidator(_truncate_fraction)]


class PredictionStatus(str, Enum):
    """Prediction lifecycle states, owned by the service."""
    STARTING = "starting"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({
    PredictionStatus.SUCCEEDED,
    PredictionStatus.FAILED,
    PredictionStatus.CANCELED,
})


class Visibility(str, Enum):
    """Model visibility."""
    PUBLIC = "public"
    PRIVATE = "private"


class ApiRecord(BaseModel):
    """Base for response records; unknown fields are ignored."""
    model_config = ConfigDict(extra="ignore")


class Prediction(ApiRecord):
    """One inference run of a model version."""
    id: str = Field(..., description="Prediction id")
    version: str = Field(..., description="Model version id the prediction runs")
    status: PredictionStatus = Field(..., description="Current lifecycle state")
    input: Dict[str, JsonValue] = Field(default_factory=dict, description="Input sent at creation")
    output: JsonValue = Field(None, description="Model output once available")
    error: Optional[str] = Field(None, description="Failure message for failed predictions")
    logs: Optional[str] = Field(None, description="Model log output so far")
    model: Optional[str] = Field(None, description="Model as owner/name")
    metrics: Optional[Dict[str, JsonValue]] = Field(None, description="Timing metrics")
    created_at: Optional[Timestamp] = None
    started_at: Optional[Timestamp] = None
    completed_at: Optional[Timestamp] = None
    urls: Dict[str, str] = Field(default_factory=dict, description="Named callback URLs (get, cancel, stream)")

    @property
    def is_terminal(self) -> bool:
        """True once the service reports succeeded, failed or canceled."""
        return self.status.is_terminal


class ModelVersion(ApiRecord):
    """An immutable published snapshot of a model."""
    id: str
    created_at: Timestamp
    cog_version: str
    openapi_schema: JsonValue = None


class Model(ApiRecord):
    """A published model as seen at fetch time."""
    owner: str
    name: str
    visibility: Visibility
    description: Optional[str] = None
    latest_version: Optional[ModelVersion] = None
    url: Optional[str] = None
    github_url: Optional[str] = None
    paper_url: Optional[str] = None
    license_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    run_count: Optional[int] = None
    default_example: Optional[Dict[str, JsonValue]] = None


class Page(ApiRecord, Generic[T]):
    """One page of a list endpoint.

    ``next`` and ``previous`` are opaque absolute URLs; pass them back to the
    same list call as ``cursor`` to move through the listing.
    """
    previous: Optional[str] = None
    next: Optional[str] = None
    results: List[T] = Field(default_factory=list)


@dataclass
class ServerSentEvent:
    """A single event read from a prediction's stream URL."""
    event: str = "message"
    data: str = ""
    id: Optional[str] = None
