"""Prometheus metrics adapter for fleetwarden.

Implements MetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import Gauge


class PrometheusMetricsAdapter:
    """Prometheus implementation of MetricsPort.

    All gauges use a configurable prefix (default 'fleetwarden_').

    This adapter requires prometheus-client to be installed:
        pip install fleetwarden[metrics]

    Example:
        >>> adapter = PrometheusMetricsAdapter(prefix="cfg_zk")
        >>> adapter.set_ensemble_size(3)  # Sets cfg_zk_ensemble_size to 3

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(self, prefix: str = "fleetwarden") -> None:
        """Initialize Prometheus gauges.

        Args:
            prefix: Metric name prefix. All gauge names will be {prefix}_<metric_name>.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import Gauge

        self._ensemble_size: Gauge = Gauge(
            f"{prefix}_ensemble_size",
            "Number of servers in the applied ensemble configuration",
        )
        self._server_started: Gauge = Gauge(
            f"{prefix}_server_started",
            "Local ensemble server started: 1=yes, 0=no",
        )
        self._last_reconfiguration_succeeded: Gauge = Gauge(
            f"{prefix}_last_reconfiguration_succeeded",
            "Outcome of the latest reconfiguration: 1=succeeded, 0=failed",
        )

    def set_ensemble_size(self, size: int) -> None:
        """Set ensemble size gauge."""
        self._ensemble_size.set(size)

    def set_server_started(self, started: bool) -> None:
        """Set server started gauge."""
        self._server_started.set(1 if started else 0)

    def set_last_reconfiguration_succeeded(self, succeeded: bool) -> None:
        """Set last reconfiguration outcome gauge."""
        self._last_reconfiguration_succeeded.set(1 if succeeded else 0)
