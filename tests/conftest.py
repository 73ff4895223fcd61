# ABOUTME: Shared test fixtures for the weather notifier test suite.
# ABOUTME: Provides test Settings and a WeatherDeps factory around mock HTTP clients.

import pytest

from src.config import Settings
from src.deps import WeatherDeps


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", refresh_interval=3600)


@pytest.fixture
def make_deps(settings):
    def _make(client) -> WeatherDeps:
        return WeatherDeps(http_client=client, settings=settings)

    return _make
