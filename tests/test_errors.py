import pytest

from dlsite.errors import (
    DlsiteError,
    JsonError,
    ParseError,
    RequestError,
    ServerError,
    require,
)


def test_require_returns_value():
    assert require("RG24350", "missing") == "RG24350"


def test_require_keeps_falsy_values():
    assert require(0, "missing") == 0
    assert require("", "missing") == ""
    assert require([], "missing") == []


def test_require_raises_parse_error_with_message():
    with pytest.raises(ParseError) as info:
        require(None, "No circle found")
    assert str(info.value) == "No circle found"


def test_parse_error_is_caught_as_dlsite_error():
    with pytest.raises(DlsiteError) as info:
        require(None, "No total item count found")
    assert isinstance(info.value, ParseError)


def test_all_errors_share_base_and_keep_message():
    errors = [
        (RequestError("connection refused"), "connection refused"),
        (JsonError("expected value at line 1"), "expected value at line 1"),
        (ParseError("Failed to parse ajax json"), "Failed to parse ajax json"),
        (ServerError("Failed to get review: boom"), "Failed to get review: boom"),
    ]
    for error, message in errors:
        assert str(error) == message
        assert isinstance(error, DlsiteError)
        with pytest.raises(DlsiteError) as info:
            raise error
        assert info.value is error