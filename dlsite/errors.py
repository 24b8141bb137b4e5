"""Exceptions raised by the DLsite client."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class DlsiteError(Exception):
    """Base class for every error raised while talking to DLsite."""


class RequestError(DlsiteError):
    """The HTTP request failed."""


class JsonError(DlsiteError):
    """A JSON document could not be decoded into the expected shape."""


class ParseError(DlsiteError):
    """A response could not be interpreted."""


class ServerError(DlsiteError):
    """The server reported a failure."""


def require(value: T | None, message: str) -> T:
    """Return ``value``, raising :class:`ParseError` with ``message`` if it is None."""
    if value is None:
        raise ParseError(message)
    return value