"""
Exception hierarchy for the Instatus provider.

This module provides the errors raised while driving a component through its
lifecycle, plus utilities for normalizing transport failures raised by the
injected API client into a consistent set of exception types.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional, Union

import aiohttp


class InstatusError(Exception):
    """
    Base exception for all provider operations.

    Attributes:
        message: Human-readable error message
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = kwargs


class NetworkError(InstatusError):
    """Raised for network-related errors talking to the Instatus API."""

    pass


class TimeoutError(InstatusError):
    """
    Raised when an API call times out.

    Attributes:
        timeout_value: The timeout value that was exceeded (in seconds)
    """

    def __init__(self, message: str, timeout_value: Optional[float] = None) -> None:
        super().__init__(message)
        self.timeout_value = timeout_value


class ConnectionError(InstatusError):
    """Raised when the client cannot establish a connection to the API."""

    pass


class ContentError(InstatusError):
    """Raised when an API response body cannot be read or decoded."""

    pass


class HTTPError(InstatusError):
    """Raised for HTTP-level errors returned by the API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        headers: Optional[Dict[str, str]] = None,
        response_text: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers or {}
        self.response_text = response_text


class RateLimitError(HTTPError):
    """Raised when the API rate limit is hit."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[Union[int, float]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message, 429, headers)
        self.retry_after = retry_after


class AuthenticationError(HTTPError):
    """Raised for authentication-related errors (401, 403)."""

    pass


class NotFoundError(HTTPError):
    """Raised when a page or component does not exist (404)."""

    pass


class ServerError(HTTPError):
    """Raised for server errors (5xx)."""

    pass


# Lifecycle errors


class ResourceError(InstatusError):
    """
    Base exception for a failed lifecycle operation.

    Each subclass carries a fixed ``summary`` shown to the operator and builds
    a ``detail`` line that names the operation and the underlying cause.

    Attributes:
        summary: Short, fixed title of the failure
        detail: Full message including the cause text
        cause: The client exception normalized by ErrorHandler, if any
        original_error: The exception exactly as the API client raised it
    """

    summary = "Error managing component"
    prefix = "Could not manage component, unexpected error: "

    def __init__(self, cause: Optional[BaseException] = None, **kwargs: Any) -> None:
        self.original_error = cause
        self.cause = ErrorHandler.normalize(cause) if cause is not None else None
        detail = self.build_detail(self.cause, **kwargs)
        super().__init__(detail, **kwargs)
        self.detail = detail

    def build_detail(self, cause: Optional[BaseException], **kwargs: Any) -> str:
        return f"{self.prefix}{cause}"


class CreateError(ResourceError):
    """Raised when creating a component fails."""

    summary = "Error creating component"
    prefix = "Could not create component, unexpected error: "


class ReadError(ResourceError):
    """Raised when refreshing a component fails, including when it is gone."""

    summary = "Error Reading Instatus Component"

    def build_detail(self, cause: Optional[BaseException], **kwargs: Any) -> str:
        component_id = kwargs.get("component_id") or ""
        return f"Could not read Instatus component ID {component_id}: {cause}"

    @property
    def not_found(self) -> bool:
        """True when the API reported the component as missing."""
        return isinstance(self.cause, NotFoundError)


class UpdateError(ResourceError):
    """Raised when updating a component fails."""

    summary = "Error Updating Instatus Component"
    prefix = "Could not update component, unexpected error: "


class DeleteError(ResourceError):
    """Raised when deleting a component fails."""

    summary = "Error Deleting Instatus Component"
    prefix = "Could not delete component, unexpected error: "


class ImportIdError(ResourceError):
    """
    Raised for a malformed import identifier.

    Attributes:
        raw_id: The identifier exactly as the operator supplied it
    """

    summary = "Invalid import identifier"

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(None, raw_id=raw_id)

    def build_detail(self, cause: Optional[BaseException], **kwargs: Any) -> str:
        return (
            "Import identifier must be in the format 'PageId/id'. Got: "
            + kwargs["raw_id"]
        )


class ErrorHandler:
    """
    Utility class for categorizing errors raised by the API client.

    Converts aiohttp exceptions and HTTP status codes to the provider's own
    exception types so lifecycle errors expose a predictable ``cause``.
    """

    @staticmethod
    def normalize(error: BaseException) -> BaseException:
        """
        Normalize an exception raised by the API client.

        Provider errors pass through untouched and anything that is not a
        transport error is returned as-is. Converted errors keep the
        original exception as ``__cause__``.
        """
        if isinstance(error, InstatusError):
            return error
        if isinstance(error, (aiohttp.ClientError, asyncio.TimeoutError)):
            converted = ErrorHandler.handle_aiohttp_error(error)
            converted.__cause__ = error
            return converted
        return error

    @staticmethod
    def handle_aiohttp_error(error: BaseException) -> InstatusError:
        """
        Convert aiohttp exceptions to InstatusError subclasses.

        Args:
            error: The original aiohttp exception

        Returns:
            Appropriate InstatusError subclass
        """
        if isinstance(error, aiohttp.ClientSSLError):
            return ConnectionError(f"SSL error: {error}")

        elif isinstance(error, aiohttp.ClientConnectorError):
            return ConnectionError(f"Connector error: {error}")

        elif isinstance(error, aiohttp.ServerTimeoutError):
            return TimeoutError(f"Request timed out: {error}")

        elif isinstance(error, aiohttp.ClientConnectionError):
            return ConnectionError(f"Connection error: {error}")

        elif isinstance(error, asyncio.TimeoutError):
            return TimeoutError(f"Request timed out: {error}")

        elif isinstance(error, aiohttp.ClientPayloadError):
            return ContentError(f"Payload error: {error}")

        elif isinstance(error, aiohttp.ClientResponseError):
            return ErrorHandler.handle_http_status_error(
                error.status, error.message, getattr(error, "headers", None)
            )

        else:
            return NetworkError(f"Unexpected network error: {error}")

    @staticmethod
    def handle_http_status_error(
        status_code: int,
        message: str,
        headers: Optional[Dict[str, str]] = None,
        response_text: Optional[str] = None,
    ) -> HTTPError:
        """
        Create appropriate HTTPError subclass based on status code.

        Args:
            status_code: HTTP status code
            message: Error message
            headers: Response headers
            response_text: Response body text

        Returns:
            Appropriate HTTPError subclass
        """
        if status_code == 401:
            return AuthenticationError(
                f"Authentication required: {message}",
                status_code,
                headers,
                response_text,
            )

        elif status_code == 403:
            return AuthenticationError(
                f"Access forbidden: {message}", status_code, headers, response_text
            )

        elif status_code == 404:
            return NotFoundError(
                f"Resource not found: {message}", status_code, headers, response_text
            )

        elif status_code == 429:
            retry_after = None
            if headers:
                retry_after_header = headers.get("Retry-After") or headers.get(
                    "retry-after"
                )
                if retry_after_header:
                    try:
                        retry_after = float(retry_after_header)
                    except ValueError:
                        pass

            return RateLimitError(
                f"Rate limit exceeded: {message}", retry_after, headers
            )

        elif 500 <= status_code < 600:
            return ServerError(
                f"Server error: {message}", status_code, headers, response_text
            )

        else:
            return HTTPError(message, status_code, headers, response_text)


__all__ = [
    "InstatusError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "ContentError",
    "HTTPError",
    "RateLimitError",
    "AuthenticationError",
    "NotFoundError",
    "ServerError",
    "ResourceError",
    "CreateError",
    "ReadError",
    "UpdateError",
    "DeleteError",
    "ImportIdError",
    "ErrorHandler",
]
