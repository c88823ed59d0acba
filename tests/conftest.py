"""Fixtures: sample search results, test client."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from helpers import make_results
from src.api.routes import _get_engine
from src.lookup.models import SearchResult
from src.main import app


@pytest.fixture
def search_results() -> list[SearchResult]:
    return make_results(5)


@pytest.fixture
def client():
    """TestClient without lifespan; tests install an engine via ``use_engine``."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_engine():
    def _install(engine) -> None:
        app.dependency_overrides[_get_engine] = lambda: engine

    return _install
