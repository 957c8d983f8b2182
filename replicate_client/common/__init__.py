"""Ambient utilities shared by the client.

Includes:
- ``config``: pydantic-settings based ``ReplicateConfig``.
- ``logging``: structured logging setup with structlog.
- ``metrics``: Prometheus request counters and latency histograms.
"""
