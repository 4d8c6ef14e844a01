"""Unit tests for the /status endpoint."""

import os
from unittest.mock import patch

from fastapi.testclient import TestClient

from resilientme.main import app

client = TestClient(app)


class TestStatusEndpoint:
    """Test cases for the /status endpoint."""

    def test_status_endpoint_basic(self):
        """Test that /status endpoint returns correct structure."""
        response = client.get("/status")

        assert response.status_code == 200
        data = response.json()

        assert set(data) == {"status", "build", "sha", "env"}
        assert data["status"] == "ok"

    def test_status_endpoint_with_environment_variables(self):
        """Test /status endpoint with CI-injected environment variables."""
        test_env_vars = {
            "BUILD_NUMBER": "123",
            "GIT_SHA": "abc123def456",
            "ENVIRONMENT": "production"
        }

        with patch.dict(os.environ, test_env_vars):
            data = client.get("/status").json()

        assert data["build"] == "123"
        assert data["sha"] == "abc123def456"
        assert data["env"] == "production"

    def test_status_endpoint_with_github_sha(self):
        """Test /status endpoint falls back to GITHUB_SHA and ENV."""
        test_env_vars = {
            "BUILD_NUMBER": "456",
            "GITHUB_SHA": "github123sha456",
            "ENV": "staging"
        }

        with patch.dict(os.environ, test_env_vars):
            os.environ.pop("GIT_SHA", None)
            os.environ.pop("ENVIRONMENT", None)
            data = client.get("/status").json()

        assert data["build"] == "456"
        assert data["sha"] == "github123sha456"
        assert data["env"] == "staging"

    def test_status_endpoint_local_development(self):
        """Test /status endpoint with no CI env vars."""
        with patch.dict(os.environ, {}, clear=True):
            data = client.get("/status").json()

        assert data["build"] == "local-dev"
        assert data["env"] == "development"
        # Either a short git hash or the local-dev marker
        assert data["sha"] == "local-dev" or len(data["sha"]) == 8

    def test_status_endpoint_priority_order(self):
        """GIT_SHA beats GITHUB_SHA and ENVIRONMENT beats ENV."""
        test_env_vars = {
            "GIT_SHA": "priority_sha",
            "GITHUB_SHA": "fallback_sha",
            "ENVIRONMENT": "priority_env",
            "ENV": "fallback_env"
        }

        with patch.dict(os.environ, test_env_vars):
            data = client.get("/status").json()

        assert data["sha"] == "priority_sha"
        assert data["env"] == "priority_env"
