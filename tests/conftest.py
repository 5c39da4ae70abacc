"""Pytest configuration and fixtures."""

import json
import os

import httpx
import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["BREWIT_BASE_URL"] = "https://api.brewit.money"
os.environ["STRICT_PARAMS"] = "true"

from brewtools.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings for tests."""
    return Settings()


@pytest.fixture
def identity_headers() -> dict:
    """Valid caller identity headers."""
    return {"x-validator-salt": "s1", "x-account-address": "0xB"}


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records outbound requests and returns a canned reply."""

    def __init__(self, status_code: int = 200, payload=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.payload = payload if payload is not None else {"id": "job-1", "status": "scheduled"}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def brewit_transport() -> RecordingTransport:
    """Transport standing in for the Brewit API."""
    return RecordingTransport()


@pytest.fixture
def make_transport():
    """Factory for transports with a specific status code or payload."""
    return RecordingTransport
