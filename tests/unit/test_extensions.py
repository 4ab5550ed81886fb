import pytest

from soft_result.core import extensions
from soft_result.core.error import Error
from soft_result.core.exceptions import InvalidArgumentError
from soft_result.core.result import Result


def test_sync_shortcuts_forward_to_result(field_errors):
    assert extensions.ok(5) == Result.ok(5)
    assert extensions.ok(5, "Found") == Result.ok(5, "Found")
    assert extensions.no_content("done") == Result.no_content("done")
    assert extensions.bad_request(field_errors) == Result.bad_request(field_errors)
    assert extensions.not_found("missing", "id", 9) == Result.not_found("missing", "id", 9)


def test_shortcuts_validate():
    with pytest.raises(InvalidArgumentError):
        extensions.not_found([])


@pytest.mark.asyncio
async def test_async_shortcuts_forward_to_result():
    error = Error.create("Conflict")

    assert await extensions.ok_async({"a": 1}) == Result.ok({"a": 1})
    assert await extensions.no_content_async("done") == Result.no_content("done")
    assert await extensions.bad_request_async(error) == Result.bad_request(error)
    assert await extensions.not_found_async("missing") == Result.not_found("missing")


@pytest.mark.asyncio
async def test_ok_async_with_stream():
    async def letters():
        yield "a"
        yield "b"

    result = await extensions.ok_async(letters(), "Streamed")
    assert result.value == ["a", "b"]
    assert result.messages == ("Streamed",)
