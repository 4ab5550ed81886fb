from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorDto(BaseModel):
    message: str
    metadata: Dict[str, Any] = Field(default_factory=dict)


class EnvelopeDto(BaseModel):
    """Wire shape of an envelope, used when decoding a response body."""

    model_config = ConfigDict(populate_by_name=True)

    is_success: bool = Field(alias="isSuccess")
    locale: Union[int, str]
    messages: List[str]
    value: Optional[Any] = None
    errors: Optional[List[ErrorDto]] = None
