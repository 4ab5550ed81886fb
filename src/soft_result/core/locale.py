from enum import IntEnum
from typing import Union

from soft_result.core.constants import LocaleFormats
from soft_result.core.exceptions import InvalidArgumentError


class Locale(IntEnum):
    """Language the messages of an envelope are written in.

    The tag is informational only: clients use it to localize, nothing here
    translates anything.
    """

    UNDEFINED = 0
    RUS = 1
    KYR = 2
    ENG = 3

    @property
    def label(self) -> str:
        """Name form used on the wire, e.g. ``"Rus"``."""
        return self.name.capitalize()

    def to_wire(self, locale_format: str = LocaleFormats.DEFAULT) -> Union[int, str]:
        if locale_format == LocaleFormats.NAME:
            return self.label
        if locale_format == LocaleFormats.NUMBER:
            return int(self)
        raise InvalidArgumentError(f"Unknown locale format: {locale_format!r}")

    @classmethod
    def parse(cls, value: Union["Locale", int, str]) -> "Locale":
        """Accept a member, its number (int or digit string) or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidArgumentError(f"Invalid locale: {value!r}")
        try:
            if isinstance(value, int):
                return cls(value)
            if isinstance(value, str):
                text = value.strip()
                if text.lstrip("-").isdigit():
                    return cls(int(text))
                return cls[text.upper()]
        except (KeyError, ValueError):
            pass
        raise InvalidArgumentError(f"Invalid locale: {value!r}")
