# Module-level shortcuts for the Result constructors, so call sites can write
# ``return ok(user)`` instead of ``return Result[User].ok(user)``.
from collections.abc import AsyncIterable, Iterable
from typing import Any, Optional, TypeVar, Union

from soft_result.core.constants import DEFAULT_OK_MESSAGE
from soft_result.core.error import Error
from soft_result.core.result import Result


T = TypeVar("T")

Reason = Union[str, Error, Iterable[Error]]


def ok(value: T, message: str = DEFAULT_OK_MESSAGE) -> Result[T]:
    return Result.ok(value, message)


def no_content(message: str) -> Result[Any]:
    return Result.no_content(message)


def bad_request(reason: Reason, key: Optional[str] = None, value: Any = None) -> Result[Any]:
    return Result.bad_request(reason, key, value)


def not_found(reason: Reason, key: Optional[str] = None, value: Any = None) -> Result[Any]:
    return Result.not_found(reason, key, value)


async def ok_async(
    value: Union[T, AsyncIterable], message: str = DEFAULT_OK_MESSAGE
) -> Result[T]:
    return await Result.ok_async(value, message)


async def no_content_async(message: str) -> Result[Any]:
    return await Result.no_content_async(message)


async def bad_request_async(
    reason: Reason, key: Optional[str] = None, value: Any = None
) -> Result[Any]:
    return await Result.bad_request_async(reason, key, value)


async def not_found_async(
    reason: Reason, key: Optional[str] = None, value: Any = None
) -> Result[Any]:
    return await Result.not_found_async(reason, key, value)
