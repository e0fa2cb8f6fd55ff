"""Exception hierarchy for OC Transpo API failures.

Every failure aborts the whole request; no partial domain value is ever
returned alongside one of these errors.
"""

from __future__ import annotations

from enum import Enum


class OCTranspoError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(OCTranspoError, ValueError):
    """Raised for invalid caller-supplied options, before any network call."""


class TransportError(OCTranspoError):
    """Raised when the API answers with a non-200 HTTP status."""

    def __init__(self, status: int, reason: str | None, url: str) -> None:
        self.status = status
        self.reason = reason or ""
        self.url = url
        super().__init__(f"Non 200 HTTP response from API. {status} {self.reason} {url}".strip())


class DecodeError(OCTranspoError):
    """Raised when a response body cannot be decoded into its wire shape."""


class ApiErrorCode(str, Enum):
    """Numeric codes the upstream feed reports through its ``Error`` field."""

    INVALID_API_KEY = "1"
    UNABLE_TO_QUERY_DATA_SOURCE = "2"
    INVALID_STOP_NUMBER = "10"
    INVALID_ROUTE_NUMBER = "11"
    STOP_DOES_NOT_SERVICE_ROUTE = "12"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ApiErrorCode.INVALID_API_KEY: "Invalid API key",
    ApiErrorCode.UNABLE_TO_QUERY_DATA_SOURCE: "Unable to query data source",
    ApiErrorCode.INVALID_STOP_NUMBER: "Invalid stop number",
    ApiErrorCode.INVALID_ROUTE_NUMBER: "Invalid route number",
    ApiErrorCode.STOP_DOES_NOT_SERVICE_ROUTE: "Stop does not service route",
}


class ApiError(OCTranspoError):
    """Raised when the feed reports one of the known failure codes."""

    def __init__(self, code: ApiErrorCode) -> None:
        self.code = code
        self.description = code.description
        super().__init__(f"error returned from API - {self.description}")


class FieldParseError(OCTranspoError, ValueError):
    """Raised when a field's wire text does not parse as its expected type."""

    def __init__(self, field: str, text: str, expected: str) -> None:
        self.field = field
        self.text = text
        self.expected = expected
        super().__init__(f"cannot parse {field} {text!r} as {expected}")


__all__ = [
    "ApiError",
    "ApiErrorCode",
    "ConfigurationError",
    "DecodeError",
    "FieldParseError",
    "OCTranspoError",
    "TransportError",
]
