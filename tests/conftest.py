"""Shared fixtures for service tests."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from pipeline_poc.config import Settings
from pipeline_poc.core.assembler import ResponseAssembler
from pipeline_poc.core.clock import SystemClock
from pipeline_poc.main import create_app

FIXED_INSTANT = datetime(2025, 10, 15, 10, 30, 45, 123456, tzinfo=timezone.utc)
FIXED_EPOCH_NS = int(FIXED_INSTANT.timestamp()) * 1_000_000_000 + FIXED_INSTANT.microsecond * 1000
FIXED_EPOCH_MS = FIXED_EPOCH_NS // 1_000_000


def build_settings(**overrides) -> Settings:
    """Settings isolated from the process environment's .env file."""
    values = {"timezone": "UTC", "environment": "test"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fixed_clock() -> SystemClock:
    return SystemClock(time_source=lambda: FIXED_EPOCH_NS)


@pytest.fixture
def pipeline_settings() -> Settings:
    return build_settings(service_variant="pipeline-poc")


@pytest.fixture
def e2e_settings() -> Settings:
    return build_settings(service_variant="e2e-test")


@pytest.fixture
def pipeline_client(pipeline_settings, fixed_clock) -> TestClient:
    """Pipeline PoC service frozen at FIXED_INSTANT."""
    assembler = ResponseAssembler(pipeline_settings, clock=fixed_clock, hostname_source=lambda: "poc-host")
    return TestClient(create_app(pipeline_settings, assembler))


@pytest.fixture
def live_pipeline_client(pipeline_settings) -> TestClient:
    """Pipeline PoC service on a real clock."""
    assembler = ResponseAssembler(pipeline_settings, clock=SystemClock())
    return TestClient(create_app(pipeline_settings, assembler))


@pytest.fixture
def e2e_client(e2e_settings, fixed_clock) -> TestClient:
    """End-to-end test application frozen at FIXED_INSTANT."""
    assembler = ResponseAssembler(e2e_settings, clock=fixed_clock)
    return TestClient(create_app(e2e_settings, assembler))
