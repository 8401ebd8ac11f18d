"""
Tests for the X-API-KEY guard.
"""

import pytest

from conftest import TEST_API_KEY

SUMMARIZE_PAYLOAD = {"messages": [{"role": "user", "content": "Hello"}]}

PROTECTED_ROUTES = [
    ("/v1/chat/summarize", SUMMARIZE_PAYLOAD),
    ("/v1/chat/insights", SUMMARIZE_PAYLOAD),
    ("/v1/resume/score", {"resumeText": "Experienced engineer with many skills"}),
    ("/v1/resume/improve", {"resumeText": "Experienced engineer with many skills"}),
    ("/v1/content/generate", {"prompt": "Write a haiku"}),
]


class TestAuthGuard:

    @pytest.mark.parametrize("url, payload", PROTECTED_ROUTES)
    def test_missing_key_rejected(self, client, url, payload):
        response = client.post(url, json=payload)
        assert response.status_code == 401
        body = response.json()
        assert body["data"] is None
        assert body["error"]["code"] == "UNAUTHORIZED"
        assert "Missing" in body["error"]["message"]

    @pytest.mark.parametrize("url, payload", PROTECTED_ROUTES)
    def test_wrong_key_rejected(self, client, url, payload):
        response = client.post(url, json=payload, headers={"X-API-KEY": "wrong-key"})
        assert response.status_code == 401
        body = response.json()
        assert body["error"]["code"] == "UNAUTHORIZED"
        assert "Invalid" in body["error"]["message"]

    def test_key_comparison_is_exact(self, client):
        response = client.post("/v1/chat/summarize", json=SUMMARIZE_PAYLOAD, headers={"X-API-KEY": TEST_API_KEY + " "})
        assert response.status_code == 401

    def test_header_name_is_case_insensitive(self, client):
        response = client.post("/v1/chat/summarize", json=SUMMARIZE_PAYLOAD, headers={"x-api-key": TEST_API_KEY})
        assert response.status_code == 200

    def test_valid_key_allowed(self, client, auth_headers):
        response = client.post("/v1/chat/summarize", json=SUMMARIZE_PAYLOAD, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"] is not None

    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "ok"

    def test_health_ignores_wrong_key(self, client):
        response = client.get("/health", headers={"X-API-KEY": "wrong-key"})
        assert response.status_code == 200

    def test_openapi_is_public(self, client):
        assert client.get("/openapi.json").status_code == 200
