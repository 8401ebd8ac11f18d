"""
Tests for transport-level behavior: request ids, body size and rate limits.
"""

import uuid

from fastapi.testclient import TestClient

from conftest import TEST_API_KEY, make_config
from services.api.app import create_app
from shared.ai.mock_provider import MockAIProvider


def build_client(**overrides):
    return TestClient(create_app(make_config(**overrides)))


class TestRequestId:

    def test_generated_when_absent(self, client):
        response = client.get("/health")
        request_id = response.headers["X-Request-ID"]
        assert uuid.UUID(request_id)

    def test_echoed_when_supplied(self, client):
        response = client.get("/health", headers={"X-Request-ID": "trace-abc-123"})
        assert response.headers["X-Request-ID"] == "trace-abc-123"

    def test_present_on_errors(self, client):
        response = client.post("/v1/chat/summarize", json={"messages": []}, headers={"X-Request-ID": "req-1"})
        assert response.status_code == 401
        assert response.headers["X-Request-ID"] == "req-1"

    def test_present_on_unhandled_errors(self):
        class CrashingProvider(MockAIProvider):
            async def generate_content(self, prompt, tone=None, length="medium"):
                raise RuntimeError("boom")

        app = create_app(make_config(cors_origins="https://app.example.com"), provider=CrashingProvider())
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.post(
                "/v1/content/generate",
                json={"prompt": "Hi"},
                headers={"X-API-KEY": TEST_API_KEY, "X-Request-ID": "rid-9", "Origin": "https://app.example.com"},
            )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"
        assert response.headers["X-Request-ID"] == "rid-9"
        assert response.headers["access-control-allow-origin"] == "https://app.example.com"


class TestBodySizeLimit:

    def test_oversized_body_rejected(self):
        with build_client(max_body_size_bytes=200) as client:
            payload = {"prompt": "x" * 500}
            response = client.post("/v1/content/generate", json=payload, headers={"X-API-KEY": TEST_API_KEY})

        assert response.status_code == 413
        body = response.json()
        assert body["data"] is None
        assert body["error"]["code"] == "PAYLOAD_TOO_LARGE"
        assert "X-Request-ID" in response.headers

    def test_streamed_body_over_limit_rejected(self):
        """A chunked body has no Content-Length and is counted while it is read."""

        def chunks():
            yield b'{"prompt": "'
            yield b"x" * 500
            yield b'"}'

        with build_client(max_body_size_bytes=100) as client:
            response = client.post(
                "/v1/content/generate",
                content=chunks(),
                headers={"X-API-KEY": TEST_API_KEY, "Content-Type": "application/json", "X-Request-ID": "big-1"},
            )

        assert "content-length" not in response.request.headers
        assert response.status_code == 413
        body = response.json()
        assert body["data"] is None
        assert body["error"]["code"] == "PAYLOAD_TOO_LARGE"
        assert response.headers["X-Request-ID"] == "big-1"

    def test_streamed_body_within_limit_accepted(self):
        def chunks():
            yield b'{"prompt": '
            yield b'"hi"}'

        with build_client(max_body_size_bytes=100) as client:
            response = client.post(
                "/v1/content/generate",
                content=chunks(),
                headers={"X-API-KEY": TEST_API_KEY, "Content-Type": "application/json"},
            )
        assert response.status_code == 200

    def test_body_within_limit_accepted(self):
        with build_client(max_body_size_bytes=200) as client:
            response = client.post("/v1/content/generate", json={"prompt": "hi"}, headers={"X-API-KEY": TEST_API_KEY})
        assert response.status_code == 200


class TestRateLimit:

    def test_limit_exceeded(self):
        with build_client(rate_limit_per_minute=2) as client:
            first = client.get("/health")
            second = client.get("/health")
            third = client.get("/health")

        assert first.status_code == 200
        assert second.status_code == 200
        assert third.status_code == 429
        body = third.json()
        assert body["data"] is None
        assert body["error"]["code"] == "RATE_LIMIT_EXCEEDED"
        assert "Max 2 requests per 1 minute" in body["error"]["message"]
        assert "Retry-After" in third.headers
        assert third.headers["X-RateLimit-Limit"] == "2"

    def test_headers_on_success(self):
        with build_client(rate_limit_per_minute=5) as client:
            response = client.get("/health")
        assert response.headers["X-RateLimit-Limit"] == "5"
        assert response.headers["X-RateLimit-Remaining"] == "4"

    def test_budget_is_shared_across_routes(self):
        with build_client(rate_limit_per_minute=2) as client:
            client.get("/health")
            client.post("/v1/chat/summarize", json={"messages": [{"role": "user", "content": "Hi"}]},
                        headers={"X-API-KEY": TEST_API_KEY})
            response = client.post("/v1/content/generate", json={"prompt": "Hi"}, headers={"X-API-KEY": TEST_API_KEY})
        assert response.status_code == 429
