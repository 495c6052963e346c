"""Fixtures for end-to-end API tests against in-memory persistence."""

import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from juicebox.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client on a fresh app and store."""
    app = create_app(build_test_container(None, FastapiProvider()))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user and return their bearer auth headers."""

    def _register(username: str = "ada", password: str = "secret", **extra):
        response = client.post(
            "/users/register",
            json={"username": username, "password": password, **extra},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register
