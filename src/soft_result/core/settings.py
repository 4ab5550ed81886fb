from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from soft_result.core.constants import LocaleFormats
from soft_result.core.locale import Locale


class ResultSettings(BaseSettings):
    # LOCALE
    default_locale: Locale = Field(
        default=Locale.RUS,
        description="Locale stamped on envelopes that do not set one",
    )
    locale_format: Literal["number", "name"] = LocaleFormats.DEFAULT

    # LOGGING
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SOFT_RESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("default_locale", mode="before")
    @classmethod
    def _parse_locale(cls, value):
        return Locale.parse(value)


@lru_cache()
def get_settings() -> ResultSettings:
    return ResultSettings()
