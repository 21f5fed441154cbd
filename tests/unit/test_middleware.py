"""Unit tests for middleware components"""
import uuid
import pytest
from unittest.mock import Mock, patch

from app.core.config import config
from app.core.errors import AuthenticationError
from app.middleware.api_key import ApiKeyMiddleware, is_api_path, is_valid_api_key
from app.middleware.correlation_id import CorrelationIdMiddleware
from app.utils.correlation_id import get_correlation_id, set_correlation_id


class MockRequest:
    def __init__(self, headers=None, path="/"):
        self.headers = headers or {}
        self.state = Mock()
        self.method = "GET"
        self.url = Mock()
        self.url.path = path


def make_call_next(captured):
    async def call_next(req):
        captured["correlation_id"] = get_correlation_id()
        captured["called"] = True
        response = Mock()
        response.headers = {}
        return response
    return call_next


class TestCorrelationIdMiddleware:
    """Test CorrelationIdMiddleware functionality"""

    @pytest.mark.asyncio
    @patch('app.middleware.correlation_id.config')
    async def test_correlation_id_from_header(self, mock_config):
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        captured = {}

        response = await middleware.dispatch(
            MockRequest({"X-Correlation-ID": "test-correlation-123"}), make_call_next(captured)
        )

        assert captured["correlation_id"] == "test-correlation-123"
        assert response.headers["X-Correlation-ID"] == "test-correlation-123"

    @pytest.mark.asyncio
    @patch('app.middleware.correlation_id.config')
    async def test_correlation_id_generated(self, mock_config):
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        captured = {}

        response = await middleware.dispatch(MockRequest(), make_call_next(captured))

        generated_id = captured["correlation_id"]
        assert response.headers["X-Correlation-ID"] == generated_id
        assert uuid.UUID(generated_id)

    def test_set_and_get_correlation_id(self):
        set_correlation_id("test-correlation-456")
        assert get_correlation_id() == "test-correlation-456"

        set_correlation_id(None)
        assert get_correlation_id() is None

    def test_correlation_id_echoed_by_app(self, client):
        response = client.get("/", headers={config.correlation_id_header: "abc-123"})
        assert response.headers[config.correlation_id_header] == "abc-123"


class TestApiKeyHelpers:

    @pytest.mark.parametrize("path, expected", [
        ("/api", True),
        ("/api/products", True),
        ("/api/products/123", True),
        ("/apiary", False),
        ("/", False),
        ("/health", False),
    ])
    def test_is_api_path(self, path, expected):
        assert is_api_path(path, "/api") is expected

    def test_prefix_trailing_slash_is_ignored(self):
        assert is_api_path("/api/products", "/api/") is True

    def test_is_valid_api_key(self):
        assert is_valid_api_key("secret", "secret") is True
        assert is_valid_api_key("Secret", "secret") is False
        assert is_valid_api_key("", "secret") is False
        assert is_valid_api_key(None, "secret") is False


class TestApiKeyMiddleware:

    @pytest.mark.asyncio
    async def test_rejects_api_path_without_key(self):
        middleware = ApiKeyMiddleware(Mock())
        captured = {}

        with patch('app.middleware.api_key.logger'):
            with pytest.raises(AuthenticationError) as exc_info:
                await middleware.dispatch(MockRequest(path="/api/products"), make_call_next(captured))

        assert exc_info.value.message == "Invalid API key"
        assert "called" not in captured

    @pytest.mark.asyncio
    async def test_passes_api_path_with_key(self):
        middleware = ApiKeyMiddleware(Mock())
        captured = {}

        await middleware.dispatch(
            MockRequest({config.api_key_header: config.api_key}, path="/api/products"),
            make_call_next(captured),
        )

        assert captured["called"] is True

    @pytest.mark.asyncio
    async def test_ignores_paths_outside_prefix(self):
        middleware = ApiKeyMiddleware(Mock())
        captured = {}

        await middleware.dispatch(MockRequest(path="/health"), make_call_next(captured))

        assert captured["called"] is True


class TestPipelineOrdering:
    """Checks that the stages run in order across the whole stack"""

    def test_auth_runs_before_body_validation(self, client):
        # Invalid body and no key: authentication must win
        response = client.post("/api/products", json={"price": -5})
        assert response.status_code == 401

    def test_auth_runs_before_routing(self, client):
        response = client.get("/api/does-not-exist")
        assert response.status_code == 401

    def test_unknown_api_path_with_key_is_not_found(self, client, api_headers):
        response = client.get("/api/does-not-exist", headers=api_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Can't find /api/does-not-exist on this server!"
