# src/soft_result/core/error.py
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from soft_result.core.constants import DEFAULT_ERROR_MESSAGE, WireFields
from soft_result.core.exceptions import InvalidArgumentError
from soft_result.utils.messages import metadata_to_message


_MISSING = object()


@dataclass(frozen=True)
class Error:
    """
    One failure carried by an envelope.

    ``metadata`` maps the offending field or item to its value or to the reason
    it was rejected. Instances are immutable; the metadata is stored as a
    read-only copy of whatever mapping was passed in.
    """

    message: str = DEFAULT_ERROR_MESSAGE
    metadata: Mapping[str, Any] = field(default_factory=dict)

    # Metadata values may be unhashable
    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.message, str) or not self.message.strip():
            raise InvalidArgumentError("Error message cannot be empty")
        if not isinstance(self.metadata, Mapping):
            raise InvalidArgumentError(
                f"Error metadata must be a mapping, got {type(self.metadata).__name__}"
            )
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def create(
        cls,
        message: str = DEFAULT_ERROR_MESSAGE,
        metadata: Mapping[str, Any] = _MISSING,
    ) -> "Error":
        """Build an error from a message and, optionally, metadata (may be empty, not None)."""
        return cls(message=message, metadata={} if metadata is _MISSING else metadata)

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any]) -> "Error":
        """Build an error whose message is derived from the metadata entries."""
        if metadata is not None and not isinstance(metadata, Mapping):
            raise InvalidArgumentError(
                f"Error metadata must be a mapping, got {type(metadata).__name__}"
            )
        return cls(message=metadata_to_message(metadata), metadata=metadata)

    @classmethod
    def from_key_value(cls, key: str, value: Any) -> "Error":
        if not isinstance(key, str) or not key.strip():
            raise InvalidArgumentError("Error key cannot be empty")
        if value is None:
            raise InvalidArgumentError(f"Error value for {key!r} cannot be None")
        return cls(message=f"{key}: {value}", metadata={key: value})

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Error":
        message = str(exc).strip() or type(exc).__name__
        return cls(message=message, metadata={"exception": type(exc).__name__})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Error":
        return cls.create(
            data.get(WireFields.ERROR_MESSAGE),
            data.get(WireFields.ERROR_METADATA) or {},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            WireFields.ERROR_MESSAGE: self.message,
            WireFields.ERROR_METADATA: dict(self.metadata),
        }
