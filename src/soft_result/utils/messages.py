# src/soft_result/utils/messages.py
from typing import Any, Iterable, Mapping

from soft_result.core.exceptions import InvalidArgumentError


def join_messages(messages: Iterable[str]) -> str:
    """Join messages into one string, one message per line."""
    if messages is None:
        raise InvalidArgumentError("Messages cannot be None")

    items = list(messages)
    if not items:
        raise InvalidArgumentError("Messages cannot be empty when joining them into a string")

    return "\n".join(items)


def metadata_to_message(metadata: Mapping[str, Any]) -> str:
    """Render metadata as ``key: value`` lines in the mapping's order."""
    if metadata is None:
        raise InvalidArgumentError("Metadata cannot be None")

    if not metadata:
        raise InvalidArgumentError("Metadata cannot be empty when building a message from it")

    return "\n".join(f"{key}: {value}" for key, value in metadata.items())
