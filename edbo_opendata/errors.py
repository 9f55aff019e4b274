"""Error types raised by the EDBO Opendata clients.

Purpose:
- Provide typed exceptions for every way a registry call can fail.
- Expose HTTP-oriented context (status code, response body) for diagnosis.

Usage:
- Catch `EdboError` for any failure raised by this library.
- Catch `EdboApiError` and inspect `status_code` for non-2xx responses.
- Catch `EdboRequestError` for parameters rejected before any request is sent.
"""

from __future__ import annotations

from typing import Any, Optional


class EdboError(Exception):
    """Base error for EDBO Opendata failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional payload from the registry (e.g., response body).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class EdboApiError(EdboError):
    """Raised when the registry answers with a non-success HTTP status."""

    def __init__(self, status_code: int, *, details: Optional[Any] = None) -> None:
        super().__init__(f"API error: {status_code}", status_code=status_code, details=details)


class EdboNetworkError(EdboError):
    """Raised when the request failed before a usable response (connect, timeout, redirect loop)."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class EdboParsingError(EdboError):
    """Raised when a response body is not JSON or does not match the expected model."""

    def __init__(self, cause: BaseException, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(f"Parsing error: {cause}", status_code=status_code, details=details)
        self.cause = cause


class EdboRequestError(EdboError, ValueError):
    """Raised for search parameters that are missing or out of range."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Error: {message}")
        self.reason = message
