"""Fake metrics adapter for testing.

Provides a test double for MetricsPort that records all metric updates
for assertion in tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        value: Value that was set.
    """

    metric_name: str
    value: float | int | bool | str


class FakeMetricsAdapter:
    """Fake implementation of MetricsPort for testing.

    Records all metric updates for later assertion. Provides methods
    to inspect current state and call history.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.set_ensemble_size(3)
        >>> fake.current_ensemble_size
        3
        >>> fake.calls
        [MetricCall(metric_name='ensemble_size', value=3)]
    """

    def __init__(self) -> None:
        """Initialize with no recorded state."""
        self._ensemble_size: int | None = None
        self._server_started: bool | None = None
        self._last_reconfiguration_succeeded: bool | None = None
        self._calls: list[MetricCall] = []

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all metric update calls, in order of invocation."""
        return list(self._calls)

    @property
    def current_ensemble_size(self) -> int | None:
        """Return last set ensemble size, or None if never set."""
        return self._ensemble_size

    @property
    def current_server_started(self) -> bool | None:
        """Return last set server started state, or None if never set."""
        return self._server_started

    @property
    def current_last_reconfiguration_succeeded(self) -> bool | None:
        """Return last set reconfiguration outcome, or None if never set."""
        return self._last_reconfiguration_succeeded

    def set_ensemble_size(self, size: int) -> None:
        """Record ensemble size update."""
        self._ensemble_size = size
        self._calls.append(MetricCall("ensemble_size", size))

    def set_server_started(self, started: bool) -> None:
        """Record server started update."""
        self._server_started = started
        self._calls.append(MetricCall("server_started", started))

    def set_last_reconfiguration_succeeded(self, succeeded: bool) -> None:
        """Record reconfiguration outcome update."""
        self._last_reconfiguration_succeeded = succeeded
        self._calls.append(MetricCall("last_reconfiguration_succeeded", succeeded))

    def reset(self) -> None:
        """Reset all state and calls."""
        self._ensemble_size = None
        self._server_started = None
        self._last_reconfiguration_succeeded = None
        self._calls.clear()
