"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID reuse from X-Trace-Id header
- Contextvars propagation (get_trace_id and structlog contextvars)
- Cleanup after the request

Architecture:
- Unit tests with mocked Starlette Request/Response
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def _request(headers: dict[str, str] | None = None) -> MagicMock:
    mock_request = MagicMock()
    mock_request.headers = headers or {}
    return mock_request


def _response() -> MagicMock:
    mock_response = MagicMock()
    mock_response.headers = {}
    return mock_response


@pytest.mark.unit
class TestTraceMiddlewareTraceIdGeneration:
    """Test TraceMiddleware trace ID generation."""

    @pytest.mark.asyncio
    async def test_generates_new_trace_id_when_missing(self):
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(
            _request(), AsyncMock(return_value=_response())
        )

        UUID(response.headers["X-Trace-Id"])  # Raises ValueError if invalid

    @pytest.mark.asyncio
    async def test_uses_existing_trace_id_from_header(self):
        existing_trace_id = "12345678-1234-5678-1234-567812345678"
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(
            _request({"X-Trace-Id": existing_trace_id}),
            AsyncMock(return_value=_response()),
        )

        assert response.headers["X-Trace-Id"] == existing_trace_id


@pytest.mark.unit
class TestTraceMiddlewareContextPropagation:
    """Test TraceMiddleware contextvars propagation."""

    @pytest.mark.asyncio
    async def test_trace_id_available_during_request(self):
        captured: dict[str, object] = {}

        async def call_next(request):
            captured["trace_id"] = get_trace_id()
            captured["log_context"] = structlog.contextvars.get_contextvars()
            return _response()

        middleware = TraceMiddleware(app=MagicMock())
        response = await middleware.dispatch(_request(), call_next)

        assert captured["trace_id"] == response.headers["X-Trace-Id"]
        assert captured["log_context"] == {"trace_id": captured["trace_id"]}

    @pytest.mark.asyncio
    async def test_trace_id_cleared_after_request(self):
        middleware = TraceMiddleware(app=MagicMock())

        await middleware.dispatch(_request(), AsyncMock(return_value=_response()))

        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    @pytest.mark.asyncio
    async def test_trace_id_cleared_when_handler_raises(self):
        async def failing_call_next(request):
            raise RuntimeError("handler failed")

        middleware = TraceMiddleware(app=MagicMock())

        with pytest.raises(RuntimeError):
            await middleware.dispatch(_request(), failing_call_next)

        assert get_trace_id() is None

    def test_get_trace_id_outside_request_is_none(self):
        assert get_trace_id() is None
