"""Tests for wren.errors — exception hierarchy and error messages."""

from wren.errors import ConfigurationError, RequestFormatError, WrenError


class TestHierarchy:
    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_request_format_error_is_wren_error(self) -> None:
        assert issubclass(RequestFormatError, WrenError)

    def test_request_format_error_is_value_error(self) -> None:
        assert issubclass(RequestFormatError, ValueError)


class TestRequestFormatError:
    def test_default_message(self) -> None:
        err = RequestFormatError("/todos")
        assert err.url == "/todos"
        assert str(err) == "Request url must be an absolute URL, got '/todos'"

    def test_custom_detail(self) -> None:
        err = RequestFormatError("x", "bad url")
        assert str(err) == "bad url"
