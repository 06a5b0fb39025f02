"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from workout_gateway.logging_config import configure_logging

configure_logging()

from workout_gateway.config import Settings
from workout_gateway.dependencies import get_recommender_client
from workout_gateway.main import create_app
from workout_gateway.services.recommender_client import RecommenderClient, build_http_client

UPSTREAM_URL = "http://recommender.test"


class FakeUpstream:
    """Stand-in for the remote recommendation service that records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = self._default

    @staticmethod
    def _default(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/health":
            return httpx.Response(200, json={"status": "healthy"})
        return httpx.Response(200, json={"success": True, "recommendations": []})

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """Minimal built front-end bundle."""

    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<!doctype html><div id=\"root\"></div>", encoding="utf-8")
    (dist / "assets" / "app.js").write_text("console.log('app');", encoding="utf-8")
    return dist


@pytest.fixture
def settings(dist_dir: Path, tmp_path: Path) -> Settings:
    return Settings(
        recommender_base_url=UPSTREAM_URL,
        frontend_dist_dir=dist_dir,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def gateway_app(settings: Settings, upstream: FakeUpstream) -> FastAPI:
    """Gateway app whose recommendation client talks to the fake upstream."""

    app = create_app(settings)
    http_client = build_http_client(transport=httpx.MockTransport(upstream.handle))
    client = RecommenderClient(
        http_client,
        settings.recommender_base_url,
        health_timeout=settings.health_timeout_seconds,
    )
    app.dependency_overrides[get_recommender_client] = lambda: client
    return app


@pytest.fixture
def test_client(gateway_app: FastAPI) -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(gateway_app)
