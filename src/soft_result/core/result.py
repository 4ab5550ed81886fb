# src/soft_result/core/result.py
from collections.abc import AsyncIterable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar, Union

from loguru import logger
from pydantic import ValidationError

from soft_result.core.constants import DEFAULT_OK_MESSAGE, StatusCodes, WireFields
from soft_result.core.error import Error
from soft_result.core.exceptions import InvalidArgumentError
from soft_result.core.locale import Locale
from soft_result.core.models import EnvelopeDto
from soft_result.core.response import (
    RenderedResponse,
    ResponseWriter,
    encode_body,
    render_body,
)
from soft_result.core.settings import get_settings
from soft_result.utils.messages import join_messages


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: Optional[T] = None


@dataclass(frozen=True)
class Failure:
    errors: Tuple[Error, ...]

    def __post_init__(self):
        if self.errors is None or isinstance(self.errors, (str, Mapping)):
            raise InvalidArgumentError("Failure errors must be a sequence of Error")
        errors = tuple(self.errors)
        if not errors:
            raise InvalidArgumentError("A failure must carry at least one error")
        for error in errors:
            if not isinstance(error, Error):
                raise InvalidArgumentError(
                    f"Expected Error, got {type(error).__name__}"
                )
        object.__setattr__(self, "errors", errors)


Outcome = Union[Success[T], Failure]

_MUTABLE_FIELDS = frozenset({"locale"})


def _default_locale() -> Locale:
    return get_settings().default_locale


@dataclass
class Result(Generic[T]):
    """
    A response envelope that represents the outcome of a request handler.

    Bad request and not found outcomes are plain values (``is_success`` is
    False), so handlers never raise to report an ordinary client-facing
    failure. Only ``locale`` may be changed once the envelope is built.
    """

    outcome: Outcome
    messages: Tuple[str, ...]
    _status_code: int = field(repr=False)
    locale: Locale = field(default_factory=_default_locale)

    def __post_init__(self):
        if not isinstance(self.outcome, (Success, Failure)):
            raise InvalidArgumentError(
                f"Outcome must be Success or Failure, got {type(self.outcome).__name__}"
            )
        if self.messages is None or isinstance(self.messages, str):
            raise InvalidArgumentError("Messages must be a sequence of strings")
        messages = tuple(self.messages)
        if not messages:
            raise InvalidArgumentError("An envelope must carry at least one message")
        if not all(isinstance(message, str) for message in messages):
            raise InvalidArgumentError("Every message must be a string")
        object.__setattr__(self, "messages", messages)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__ and name not in _MUTABLE_FIELDS:
            raise AttributeError(f"Result.{name} cannot be changed after construction")
        if name == "locale":
            value = Locale.parse(value)
        object.__setattr__(self, name, value)

    def __bool__(self) -> bool:
        return self.is_success

    @property
    def is_success(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def value(self) -> Optional[T]:
        if isinstance(self.outcome, Success):
            return self.outcome.value
        return None

    @property
    def errors(self) -> Optional[Tuple[Error, ...]]:
        if isinstance(self.outcome, Failure):
            return self.outcome.errors
        return None

    @property
    def message(self) -> str:
        """All messages joined into one string, one per line."""
        return join_messages(self.messages)

    # Success envelopes

    @classmethod
    def ok(cls, value: T, message: str = DEFAULT_OK_MESSAGE) -> "Result[T]":
        """Build a 200 envelope; a one-shot iterator value is collected into a list."""
        if isinstance(value, Iterator):
            value = list(value)
        return cls(Success(value), (message,), StatusCodes.OK)

    @classmethod
    def no_content(cls, message: str) -> "Result[T]":
        return cls(Success(), (message,), StatusCodes.NO_CONTENT)

    # Failure envelopes

    @classmethod
    def bad_request(
        cls,
        reason: Union[str, Error, Iterable[Error]],
        key: Optional[str] = None,
        value: Any = None,
    ) -> "Result[T]":
        """
        Build a 400 envelope.

        ``reason`` is a message, a single Error or a list of Errors. When
        ``key`` is given, ``reason`` must be a message and the error carries
        ``{key: value}`` as its metadata.
        """
        return cls._failure(StatusCodes.BAD_REQUEST, reason, key, value)

    @classmethod
    def not_found(
        cls,
        reason: Union[str, Error, Iterable[Error]],
        key: Optional[str] = None,
        value: Any = None,
    ) -> "Result[T]":
        """Build a 404 envelope, with the same inputs as ``bad_request``."""
        return cls._failure(StatusCodes.NOT_FOUND, reason, key, value)

    @classmethod
    def _failure(
        cls,
        status_code: int,
        reason: Union[str, Error, Iterable[Error]],
        key: Optional[str],
        value: Any,
    ) -> "Result[T]":
        if key is not None:
            if not isinstance(reason, str):
                raise InvalidArgumentError("A metadata key can only accompany a message")
            if not isinstance(key, str) or not key.strip():
                raise InvalidArgumentError("Error key cannot be empty")
            if value is None:
                raise InvalidArgumentError(f"Error value for {key!r} cannot be None")
            errors = [Error.create(reason, {key: value})]
        elif isinstance(reason, str):
            errors = [Error.create(reason)]
        elif isinstance(reason, Error):
            errors = [reason]
        elif isinstance(reason, Iterable) and not isinstance(reason, Mapping):
            errors = list(reason)
        else:
            raise InvalidArgumentError(
                f"Cannot build a failure from {type(reason).__name__}"
            )

        failure = Failure(tuple(errors))
        logger.debug(f"Built {status_code} envelope with {len(failure.errors)} error(s)")
        return cls(failure, tuple(error.message for error in failure.errors), status_code)

    # Asynchronous variants, they resolve with the envelope right away

    @classmethod
    async def ok_async(
        cls, value: Union[T, AsyncIterable], message: str = DEFAULT_OK_MESSAGE
    ) -> "Result[T]":
        """Like ``ok``; an async iterable value is collected into a list first."""
        if isinstance(value, AsyncIterable):
            value = [item async for item in value]
        return cls.ok(value, message)

    @classmethod
    async def no_content_async(cls, message: str) -> "Result[T]":
        return cls.no_content(message)

    @classmethod
    async def bad_request_async(
        cls,
        reason: Union[str, Error, Iterable[Error]],
        key: Optional[str] = None,
        value: Any = None,
    ) -> "Result[T]":
        return cls.bad_request(reason, key, value)

    @classmethod
    async def not_found_async(
        cls,
        reason: Union[str, Error, Iterable[Error]],
        key: Optional[str] = None,
        value: Any = None,
    ) -> "Result[T]":
        return cls.not_found(reason, key, value)

    # Wire format

    def to_dict(self, locale_format: Optional[str] = None) -> Dict[str, Any]:
        """Build the wire object; ``value`` and ``errors`` are left out when absent."""
        locale_format = locale_format or get_settings().locale_format
        body = {
            WireFields.IS_SUCCESS: self.is_success,
            WireFields.LOCALE: self.locale.to_wire(locale_format),
            WireFields.MESSAGES: list(self.messages),
        }
        if self.value is not None:
            body[WireFields.VALUE] = self.value
        if self.errors:
            body[WireFields.ERRORS] = [error.to_dict() for error in self.errors]
        return body

    def to_json(self, locale_format: Optional[str] = None) -> bytes:
        """Encode the envelope, raising ``SerializationError`` on failure."""
        return encode_body(self.to_dict(locale_format))

    def render(self, locale_format: Optional[str] = None) -> RenderedResponse:
        """Encode the envelope as a response; an unencodable payload becomes a 500."""
        logger.debug(f"Rendering {self._status_code} envelope")
        return render_body(self._status_code, self.to_dict(locale_format))

    async def write_response(
        self, writer: ResponseWriter, locale_format: Optional[str] = None
    ) -> None:
        await self.render(locale_format).write_to(writer)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], status_code: Optional[int] = None
    ) -> "Result[Any]":
        """
        Rebuild an envelope from its wire object.

        The status code is not part of the body, so it defaults to 200 for
        successes and 400 for failures unless given.
        """
        try:
            dto = EnvelopeDto.model_validate(data)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid envelope: {e}") from e
        return cls._from_dto(dto, status_code)

    @classmethod
    def from_json(
        cls, raw: Union[str, bytes], status_code: Optional[int] = None
    ) -> "Result[Any]":
        try:
            dto = EnvelopeDto.model_validate_json(raw)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid envelope: {e}") from e
        return cls._from_dto(dto, status_code)

    @classmethod
    def _from_dto(cls, dto: EnvelopeDto, status_code: Optional[int]) -> "Result[Any]":
        if dto.errors is not None:
            outcome = Failure(tuple(Error.create(e.message, e.metadata) for e in dto.errors))
        else:
            outcome = Success(dto.value)

        if dto.is_success != isinstance(outcome, Success):
            raise InvalidArgumentError("isSuccess does not match the presence of errors")

        if status_code is None:
            status_code = StatusCodes.OK if dto.is_success else StatusCodes.BAD_REQUEST
        return cls(outcome, tuple(dto.messages), status_code, Locale.parse(dto.locale))
