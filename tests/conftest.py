import json
import logging
from typing import Dict, List
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

from relay.config.settings import Settings, get_settings
from relay.main import app
from relay.services.clover_client import CloverClient, get_clover_client


class StubPlatform:
    """Stand-in for the Clover token endpoint and REST API.

    Records every request. ``failures`` maps a path suffix to an HTTP status to
    return instead of success; ``network_errors`` holds path suffixes that raise
    a connection error.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.failures: Dict[str, int] = {}
        self.network_errors: List[str] = []
        self.token_body = {"access_token": "tok_abcdefghijkl"}
        self.order_body = {"id": "O1"}
        self.checkout_body = {"href": "https://pay.example/O1"}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        for suffix in self.network_errors:
            if path.endswith(suffix):
                raise httpx.ConnectError("connection refused", request=request)
        for suffix, status in self.failures.items():
            if path.endswith(suffix):
                return httpx.Response(status, json={"message": "upstream failure"})
        if path.endswith("/token"):
            return httpx.Response(200, json=self.token_body)
        if path.endswith("/orders"):
            return httpx.Response(200, json=self.order_body)
        if path.endswith("/line_items"):
            return httpx.Response(200, json={"id": f"L{len(self.requests)}"})
        if path.endswith("/checkouts"):
            return httpx.Response(200, json=self.checkout_body)
        return httpx.Response(404, json={"message": "not found"})

    @property
    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]

    def json_bodies(self, suffix: str) -> List[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.path.endswith(suffix)]

    def form_bodies(self, suffix: str) -> List[dict]:
        return [
            {k: v[0] for k, v in parse_qs(r.content.decode()).items()}
            for r in self.requests
            if r.url.path.endswith(suffix)
        ]


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture
def settings():
    return Settings(
        clover_client_id="client-id",
        clover_client_secret="client-secret",
        clover_token_url="https://clover.test/oauth/token",
        clover_api_base="https://api.clover.test",
        clover_redirect_url="https://relay.test/clover/oauth/callback",
        clover_redirect_after_pay="https://shop.test/thanks",
    )


@pytest.fixture
def platform():
    return StubPlatform()


@pytest.fixture
def clover_client(settings, platform):
    return CloverClient(settings, transport=httpx.MockTransport(platform))


@pytest.fixture
def client(settings, clover_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_clover_client] = lambda: clover_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
