"""
Tests for the exception hierarchy and ErrorHandler.
"""

import asyncio
from unittest.mock import MagicMock

import aiohttp
import pytest

from instatus_provider.exceptions import (
    AuthenticationError,
    ConnectionError,
    ContentError,
    CreateError,
    DeleteError,
    ErrorHandler,
    HTTPError,
    ImportIdError,
    InstatusError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ReadError,
    ResourceError,
    ServerError,
    TimeoutError,
    UpdateError,
)


class TestLifecycleErrors:
    """Test lifecycle error messages."""

    @pytest.mark.parametrize(
        "error_cls, summary, detail",
        [
            (
                CreateError,
                "Error creating component",
                "Could not create component, unexpected error: boom",
            ),
            (
                UpdateError,
                "Error Updating Instatus Component",
                "Could not update component, unexpected error: boom",
            ),
            (
                DeleteError,
                "Error Deleting Instatus Component",
                "Could not delete component, unexpected error: boom",
            ),
        ],
    )
    def test_summary_and_detail(self, error_cls, summary, detail):
        """Each error has a fixed summary and includes the cause text."""
        cause = RuntimeError("boom")
        error = error_cls(cause)

        assert isinstance(error, ResourceError)
        assert isinstance(error, InstatusError)
        assert error.summary == summary
        assert error.detail == detail
        assert str(error) == detail
        assert error.cause is cause
        assert error.original_error is cause

    def test_read_error_names_component(self):
        """ReadError includes the component id."""
        error = ReadError(RuntimeError("gone"), component_id="cmp_42")

        assert error.detail == "Could not read Instatus component ID cmp_42: gone"
        assert error.details == {"component_id": "cmp_42"}
        assert not error.not_found

    def test_read_error_not_found(self):
        """not_found reflects a NotFoundError cause."""
        error = ReadError(NotFoundError("Resource not found", 404), component_id="c")

        assert error.not_found

    def test_client_error_is_normalized_and_kept(self):
        """aiohttp causes are normalized while the raw exception stays reachable."""
        raw = aiohttp.ClientResponseError(
            request_info=MagicMock(), history=(), status=404, message="Not Found"
        )
        error = ReadError(raw, component_id="c")

        assert isinstance(error.cause, NotFoundError)
        assert error.not_found
        assert error.original_error is raw
        assert error.detail == (
            "Could not read Instatus component ID c: Resource not found: Not Found"
        )

    def test_import_error(self):
        """ImportIdError keeps and echoes the raw identifier."""
        error = ImportIdError("a/b/c")

        assert error.raw_id == "a/b/c"
        assert error.cause is None
        assert error.detail.endswith("Got: a/b/c")


class TestHandleHTTPStatusError:
    """Test status code classification."""

    @pytest.mark.parametrize(
        "status, expected",
        [
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (429, RateLimitError),
            (500, ServerError),
            (503, ServerError),
            (400, HTTPError),
        ],
    )
    def test_status_mapping(self, status, expected):
        """Status codes map onto HTTPError subclasses."""
        error = ErrorHandler.handle_http_status_error(status, "msg")

        assert type(error) is expected
        assert error.status_code == status

    def test_retry_after(self):
        """Retry-After is parsed for rate limits."""
        error = ErrorHandler.handle_http_status_error(
            429, "slow down", headers={"Retry-After": "3"}
        )

        assert error.retry_after == 3.0

    def test_invalid_retry_after(self):
        """A non-numeric Retry-After is ignored."""
        error = ErrorHandler.handle_http_status_error(
            429, "slow down", headers={"Retry-After": "soon"}
        )

        assert error.retry_after is None


class TestNormalize:
    """Test normalizing client exceptions."""

    def test_provider_errors_pass_through(self):
        """InstatusError instances are returned unchanged."""
        error = NotFoundError("gone", 404)

        assert ErrorHandler.normalize(error) is error

    def test_other_errors_pass_through(self):
        """Non-transport errors are returned unchanged."""
        error = ValueError("bad")

        assert ErrorHandler.normalize(error) is error

    def test_response_error(self):
        """ClientResponseError is classified by status."""
        error = aiohttp.ClientResponseError(
            request_info=MagicMock(),
            history=(),
            status=404,
            message="Not Found",
        )

        normalized = ErrorHandler.normalize(error)

        assert isinstance(normalized, NotFoundError)
        assert str(normalized) == "Resource not found: Not Found"
        assert normalized.__cause__ is error

    def test_connection_error(self):
        """Dropped connections become ConnectionError."""
        normalized = ErrorHandler.normalize(aiohttp.ServerDisconnectedError())

        assert isinstance(normalized, ConnectionError)

    def test_timeout(self):
        """Timeouts become TimeoutError."""
        assert isinstance(ErrorHandler.normalize(asyncio.TimeoutError()), TimeoutError)
        assert isinstance(
            ErrorHandler.normalize(aiohttp.ServerTimeoutError("slow")), TimeoutError
        )

    def test_payload_error(self):
        """Broken bodies become ContentError."""
        normalized = ErrorHandler.normalize(aiohttp.ClientPayloadError("truncated"))

        assert isinstance(normalized, ContentError)

    def test_unexpected_client_error(self):
        """Other aiohttp errors become NetworkError."""
        normalized = ErrorHandler.normalize(aiohttp.ClientError("odd"))

        assert type(normalized) is NetworkError
