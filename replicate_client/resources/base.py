"""Shared plumbing for resource modules.

A resource composes a path, method and optional body for each operation,
hands the request to ``Transport`` and parses the JSON response into the
record type the operation promises.
"""

from typing import Any, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from ..errors import DeserializationError
from ..transport import Transport

R = TypeVar("R")


def path_segment(value: str) -> str:
    """Percent-encode a single path segment (owner, name, id)."""
    return quote(value, safe="")


class Resource:
    """Base class for API resources bound to a transport."""

    def __init__(self, transport: Transport):
        self._transport = transport

    async def _request(
        self,
        response_type: Type[R],
        method: str,
        path: str,
        body: Optional[Any] = None,
        operation: str = "request",
    ) -> R:
        response = await self._transport.send(method, path, body=body, operation=operation)
        return parse_response(response_type, response.text)


def parse_response(response_type: Type[R], body: str) -> R:
    """Validate a JSON body against ``response_type``.

    Raises ``DeserializationError`` carrying a body excerpt when the JSON is
    invalid or does not fit the schema.
    """
    try:
        return TypeAdapter(response_type).validate_json(body)
    except ValidationError as exc:
        expected = getattr(response_type, "__name__", str(response_type))
        raise DeserializationError(expected, body, str(exc)) from exc
