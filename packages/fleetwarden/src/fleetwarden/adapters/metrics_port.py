"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsPort(Protocol):
    """Port interface for metrics collection.

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - set_* methods update gauges to specific values
        - Implementations may no-op if metrics are disabled
    """

    def set_ensemble_size(self, size: int) -> None:
        """Set the gauge holding the number of servers in the applied configuration."""
        ...

    def set_server_started(self, started: bool) -> None:
        """Set the server started gauge (1 once bootstrapped, 0 before)."""
        ...

    def set_last_reconfiguration_succeeded(self, succeeded: bool) -> None:
        """Set the gauge reflecting the outcome of the latest reconfiguration."""
        ...


class NoOpMetricsAdapter:
    """No-operation metrics adapter for when metrics are disabled.

    All methods are no-ops. This allows use cases to unconditionally
    call metrics methods without checking if metrics are enabled.
    """

    def set_ensemble_size(self, size: int) -> None:
        """No-op."""
        pass

    def set_server_started(self, started: bool) -> None:
        """No-op."""
        pass

    def set_last_reconfiguration_succeeded(self, succeeded: bool) -> None:
        """No-op."""
        pass
