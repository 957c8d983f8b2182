"""Structured logging setup for applications embedding the client.

The library itself only acquires loggers with ``structlog.get_logger``; it
never configures output on import. Applications that want the client's
request and stream logs call ``configure_logging`` (or
``configure_logging_from_config``) once at startup. Output goes to a single
stdout handler on the ``replicate_client`` logger, so the root logger and the
application's own handlers are left alone.
"""

import logging
import sys
from typing import Optional

import structlog

from ..errors import ConfigurationError
from .config import ReplicateConfig

LIBRARY_LOGGER = "replicate_client"
_HANDLER_NAME = "replicate-client-stdout"


def _renderer(log_format: str):
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def _install_handler(level: int) -> None:
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            library_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    library_logger.propagate = False


def configure_logging(
    service_name: str = "replicate-client",
    log_level: str = "INFO",
    log_format: str = "json",
) -> None:
    """Route the client's structlog output to stdout.

    Parameters
    - service_name: Bound to each log line as ``service``
    - log_level: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR`` (case-insensitive)
    - log_format: ``json`` for production; anything else renders for consoles

    Calling it again replaces the previous handler instead of adding a second.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {log_level}")

    _install_handler(level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _renderer(log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service_name)


def configure_logging_from_config(
    config: ReplicateConfig,
    service_name: Optional[str] = None,
) -> None:
    """Configure logging using the level and format held by ``config``."""
    configure_logging(
        service_name or "replicate-client",
        log_level=config.log_level,
        log_format=config.log_format,
    )
