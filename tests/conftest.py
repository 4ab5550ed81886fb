import pytest
from loguru import logger

from soft_result.core.error import Error
from soft_result.core.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Make every test start from the default settings."""
    for name in ("SOFT_RESULT_DEFAULT_LOCALE", "SOFT_RESULT_LOCALE_FORMAT", "SOFT_RESULT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def field_errors():
    """Two validation errors for a sign-up form."""
    return [
        Error.from_key_value("email", "is not a valid address"),
        Error.create("Password is too short", {"password": "min length is 8"}),
    ]


@pytest.fixture
def log_messages():
    """Collect loguru output for the duration of a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")

    yield messages

    logger.remove(handler_id)


class RecordingWriter:
    """ResponseWriter that keeps what it was asked to write."""

    def __init__(self):
        self.calls = []

    async def write(self, status_code, media_type, body):
        self.calls.append((status_code, media_type, body))


@pytest.fixture
def recording_writer():
    return RecordingWriter()
