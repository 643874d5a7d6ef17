"""Shared fixtures for the DevOps demo service tests."""

from datetime import datetime, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from devops_demo.clock import Clock
from devops_demo.config import Settings, get_settings
from devops_demo.main import create_app


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Run every test without PORT/APP_VERSION and with a fresh settings cache."""
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("APP_VERSION", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class FrozenClock(Clock):
    """Clock whose readings are set by the test."""

    def __init__(self, now, uptime: float = 0.0) -> None:
        super().__init__()
        self.current = now
        self.elapsed = uptime

    def now(self):
        return self.current

    def uptime(self) -> float:
        return self.elapsed


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc), uptime=12.5)
