# src/soft_result/core/response.py
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from loguru import logger
from pydantic_core import to_json

from soft_result.core.constants import (
    JSON_MEDIA_TYPE,
    SERIALIZATION_ERROR_PREFIX,
    StatusCodes,
)
from soft_result.core.exceptions import SerializationError


class ResponseWriter(Protocol):
    """Whatever the host framework offers to put a response on the wire."""

    async def write(self, status_code: int, media_type: str, body: bytes) -> None:
        ...


@dataclass(frozen=True)
class RenderedResponse:
    status_code: int
    body: bytes
    media_type: str = JSON_MEDIA_TYPE

    async def write_to(self, writer: ResponseWriter) -> None:
        await writer.write(self.status_code, self.media_type, self.body)


def encode_body(body: Mapping[str, Any]) -> bytes:
    try:
        return to_json(body)
    except (ValueError, TypeError) as e:
        raise SerializationError(str(e)) from e


def serialization_failure(detail: str) -> RenderedResponse:
    return RenderedResponse(
        status_code=StatusCodes.INTERNAL_SERVER_ERROR,
        body=to_json({"error": f"{SERIALIZATION_ERROR_PREFIX}: {detail}"}),
    )


def render_body(status_code: int, body: Mapping[str, Any]) -> RenderedResponse:
    """
    Encode a response body, falling back to a bare 500 response.

    This is the last point before the bytes reach the client, so an encoding
    failure is logged and turned into a 500 instead of being raised.
    """
    try:
        return RenderedResponse(status_code=status_code, body=encode_body(body))
    except SerializationError as e:
        logger.error(f"Failed to serialize response with status {status_code}: {e.message}")
        return serialization_failure(e.message)
