from collections import OrderedDict

import pytest

from soft_result.core.error import Error
from soft_result.core.exceptions import InvalidArgumentError


class TestError:

    def test_create_default(self):
        error = Error.create()
        assert error.message == "Error"
        assert dict(error.metadata) == {}

    def test_create_with_message(self):
        error = Error.create("Something broke")
        assert error.message == "Something broke"
        assert dict(error.metadata) == {}

    @pytest.mark.parametrize("message", ["", "   ", None])
    def test_create_rejects_empty_message(self, message):
        with pytest.raises(InvalidArgumentError):
            Error.create(message)

    def test_create_with_metadata(self):
        error = Error.create("Invalid input", {"name": "too long", "age": -1})
        assert error.message == "Invalid input"
        assert dict(error.metadata) == {"name": "too long", "age": -1}

    def test_create_with_empty_metadata(self):
        """Unlike from_metadata, an explicit message allows empty metadata."""
        error = Error.create("Invalid input", {})
        assert dict(error.metadata) == {}

    def test_create_rejects_none_metadata(self):
        with pytest.raises(InvalidArgumentError):
            Error.create("Invalid input", None)

    def test_create_rejects_non_mapping_metadata(self):
        with pytest.raises(InvalidArgumentError):
            Error.create("Invalid input", [("name", "too long")])

    def test_from_metadata_derives_message(self):
        metadata = OrderedDict([("name", "is required"), ("age", 17)])
        error = Error.from_metadata(metadata)
        assert error.message == "name: is required\nage: 17"
        assert dict(error.metadata) == dict(metadata)

    def test_from_metadata_keeps_mapping_order(self):
        error = Error.from_metadata({"b": 2, "a": 1})
        assert error.message == "b: 2\na: 1"

    @pytest.mark.parametrize("metadata", [{}, None])
    def test_from_metadata_rejects_empty(self, metadata):
        with pytest.raises(InvalidArgumentError):
            Error.from_metadata(metadata)

    def test_from_key_value(self):
        error = Error.from_key_value("email", "already taken")
        assert error.message == "email: already taken"
        assert dict(error.metadata) == {"email": "already taken"}

    def test_from_key_value_rejects_empty_key(self):
        with pytest.raises(InvalidArgumentError):
            Error.from_key_value("", "value")

    def test_from_key_value_rejects_none_value(self):
        with pytest.raises(InvalidArgumentError):
            Error.from_key_value("email", None)

    def test_from_exception(self):
        error = Error.from_exception(KeyError("user"))
        assert error.message == "'user'"
        assert dict(error.metadata) == {"exception": "KeyError"}

    def test_from_exception_without_message(self):
        error = Error.from_exception(TimeoutError())
        assert error.message == "TimeoutError"

    def test_error_is_immutable(self):
        source = {"field": "bad"}
        error = Error.create("Invalid", source)

        source["other"] = "changed"
        assert dict(error.metadata) == {"field": "bad"}

        with pytest.raises(TypeError):
            error.metadata["field"] = "changed"
        with pytest.raises(AttributeError):
            error.message = "changed"

    def test_error_is_unhashable(self):
        assert Error.__hash__ is None
        with pytest.raises(TypeError, match="Error"):
            hash(Error.create("x"))

    def test_to_dict_and_back(self):
        error = Error.create("Invalid", {"field": "bad"})
        data = error.to_dict()
        assert data == {"message": "Invalid", "metadata": {"field": "bad"}}
        assert Error.from_dict(data) == error
