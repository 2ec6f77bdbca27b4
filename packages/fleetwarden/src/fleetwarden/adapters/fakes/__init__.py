"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from fleetwarden.adapters.fakes.fake_ensemble_admin import (
    FakeEnsembleAdmin,
    FakeEnsembleAdminSession,
    ReconfigureCall,
)
from fleetwarden.adapters.fakes.fake_logging_adapter import (
    FakeEventEmitter,
    FakeLoggingAdapter,
)
from fleetwarden.adapters.fakes.fake_metrics import FakeMetricsAdapter, MetricCall
from fleetwarden.adapters.fakes.fake_process_runner import (
    FakeEnsembleProcessRunner,
    FakeProcessHandle,
)

__all__ = [
    "FakeEnsembleAdmin",
    "FakeEnsembleAdminSession",
    "ReconfigureCall",
    "FakeEventEmitter",
    "FakeLoggingAdapter",
    "FakeMetricsAdapter",
    "MetricCall",
    "FakeEnsembleProcessRunner",
    "FakeProcessHandle",
]
