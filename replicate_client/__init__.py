"""Typed async client for the Replicate inference API.

Subpackages:
- ``replicate_client.common``: configuration, logging, and metrics.
- ``replicate_client.resources``: prediction, model and model version calls.

Usage:
- ``from replicate_client import ReplicateClient, ReplicateConfig``
"""

from .client import ReplicateClient
from .common.config import ReplicateConfig
from .common.metrics import RequestMetrics
from .errors import (
    AuthenticationError,
    ConfigurationError,
    DeserializationError,
    HttpStatusError,
    ModelVersionNotFoundError,
    NetworkError,
    PaymentRequiredError,
    ReplicateError,
    StreamUnavailableError,
)
from .types import (
    Model,
    ModelVersion,
    Page,
    Prediction,
    PredictionStatus,
    ServerSentEvent,
    Visibility,
)

__version__ = "0.3.0"

__all__ = [
    "ReplicateClient",
    "ReplicateConfig",
    "RequestMetrics",
    "ReplicateError",
    "ConfigurationError",
    "NetworkError",
    "HttpStatusError",
    "AuthenticationError",
    "PaymentRequiredError",
    "DeserializationError",
    "ModelVersionNotFoundError",
    "StreamUnavailableError",
    "Model",
    "ModelVersion",
    "Page",
    "Prediction",
    "PredictionStatus",
    "ServerSentEvent",
    "Visibility",
]
