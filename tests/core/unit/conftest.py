"""Pytest configuration and fixtures for fleetwarden core unit tests."""

from __future__ import annotations

import pytest

from fleetwarden.adapters.fakes import (
    FakeEnsembleAdmin,
    FakeEnsembleProcessRunner,
    FakeEventEmitter,
    FakeLoggingAdapter,
    FakeMetricsAdapter,
)
from fleetwarden.usecases.reconfiguration_orchestrator import ReconfigurationOrchestrator


@pytest.fixture
def fake_admin() -> FakeEnsembleAdmin:
    return FakeEnsembleAdmin(applied_config=b"server.0=cfg1:2182:2183;2181")


@pytest.fixture
def fake_runner() -> FakeEnsembleProcessRunner:
    return FakeEnsembleProcessRunner()


@pytest.fixture
def fake_metrics() -> FakeMetricsAdapter:
    return FakeMetricsAdapter()


@pytest.fixture
def fake_logger() -> FakeLoggingAdapter:
    return FakeLoggingAdapter()


@pytest.fixture
def fake_events() -> FakeEventEmitter:
    return FakeEventEmitter()


@pytest.fixture
def orchestrator(
    fake_runner: FakeEnsembleProcessRunner,
    fake_admin: FakeEnsembleAdmin,
    fake_metrics: FakeMetricsAdapter,
    fake_logger: FakeLoggingAdapter,
    fake_events: FakeEventEmitter,
) -> ReconfigurationOrchestrator:
    """Orchestrator wired to fakes."""
    return ReconfigurationOrchestrator(
        process_runner=fake_runner,
        admin=fake_admin,
        metrics=fake_metrics,
        logger=fake_logger,
        event_emitter=fake_events,
    )
