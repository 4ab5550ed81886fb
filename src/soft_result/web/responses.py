"""FastAPI adapter: turns envelopes into HTTP responses."""

import functools
import inspect
import typing
from typing import Any, Callable, Mapping, Optional

from fastapi.responses import Response
from loguru import logger
from starlette.background import BackgroundTask
from starlette.types import Send

from soft_result.core.constants import JSON_MEDIA_TYPE, StatusCodes
from soft_result.core.result import Result


def forbids_body(status_code: int) -> bool:
    return status_code < 200 or status_code in (
        StatusCodes.NO_CONTENT,
        StatusCodes.NOT_MODIFIED,
    )


class ResultResponse(Response):
    """JSON response whose status and body come from a rendered envelope."""

    media_type = JSON_MEDIA_TYPE

    def __init__(
        self,
        result: Result,
        locale_format: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        background: Optional[BackgroundTask] = None,
    ) -> None:
        rendered = result.render(locale_format)
        body = rendered.body
        if forbids_body(rendered.status_code):
            logger.debug(f"Dropping envelope body for status {rendered.status_code}")
            body = b""
        super().__init__(
            content=body,
            status_code=rendered.status_code,
            headers=headers,
            media_type=rendered.media_type,
            background=background,
        )


class AsgiResponseWriter:
    """ResponseWriter that sends the response through an ASGI ``send`` callable."""

    def __init__(self, send: Send):
        self.send = send

    async def write(self, status_code: int, media_type: str, body: bytes) -> None:
        if forbids_body(status_code):
            body = b""

        headers = [(b"content-type", media_type.encode("latin-1"))]
        if body:
            headers.append((b"content-length", str(len(body)).encode("latin-1")))

        await self.send(
            {"type": "http.response.start", "status": status_code, "headers": headers}
        )
        await self.send({"type": "http.response.body", "body": body})


def as_response(result: Result, locale_format: Optional[str] = None) -> ResultResponse:
    return ResultResponse(result, locale_format=locale_format)


def _to_response(returned: Any) -> Any:
    if isinstance(returned, Result):
        return as_response(returned)
    return returned


def result_endpoint(func: Callable) -> Callable:
    """
    Let a FastAPI endpoint return a Result directly.

    The wrapped endpoint keeps its parameters, so FastAPI still resolves
    path, query and body arguments, but its declared return type becomes
    ``ResultResponse`` and no response model is derived from it.
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            return _to_response(await func(*args, **kwargs))

    else:

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return _to_response(func(*args, **kwargs))

    # FastAPI must inspect the wrapper, not the original, and it resolves
    # annotations against the wrapper's globals, so hand it the already
    # evaluated hints of the original function.
    del wrapper.__wrapped__
    hints = typing.get_type_hints(func, include_extras=True)
    signature = inspect.signature(func)
    parameters = [
        parameter.replace(annotation=hints.get(name, parameter.annotation))
        for name, parameter in signature.parameters.items()
    ]
    wrapper.__signature__ = signature.replace(
        parameters=parameters, return_annotation=ResultResponse
    )
    return wrapper
