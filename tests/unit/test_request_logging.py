from unittest.mock import MagicMock, patch

import pytest
from fastapi import Request

from tasktracker.middleware.request_logging import RequestLoggingMiddleware


def _request(method: str, path: str) -> Request:
    return Request({"type": "http", "method": method, "path": path, "headers": []})


@pytest.mark.asyncio
async def test_logs_method_path_and_status():
    middleware = RequestLoggingMiddleware(MagicMock())

    async def call_next(request):
        return MagicMock(status_code=201)

    with patch("tasktracker.middleware.request_logging.logger") as mock_logger:
        response = await middleware.dispatch(_request("POST", "/tasks"), call_next)

    assert response.status_code == 201
    args, _ = mock_logger.info.call_args
    assert args[1:4] == ("POST", "/tasks", 201)


@pytest.mark.asyncio
async def test_logs_and_reraises_failures():
    middleware = RequestLoggingMiddleware(MagicMock())

    async def call_next(request):
        raise RuntimeError("handler failed")

    with patch("tasktracker.middleware.request_logging.logger") as mock_logger:
        with pytest.raises(RuntimeError):
            await middleware.dispatch(_request("GET", "/tasks"), call_next)

    args, _ = mock_logger.error.call_args
    assert args[1:3] == ("GET", "/tasks")
    mock_logger.info.assert_not_called()


def test_requests_through_app_are_logged(client):
    with patch("tasktracker.middleware.request_logging.logger") as mock_logger:
        client.get("/tasks/missing")

    args, _ = mock_logger.info.call_args
    assert args[1:4] == ("GET", "/tasks/missing", 404)
