"""Factory functions for wiring optional adapters.

Provides factory methods to instantiate adapters backed by optional
dependencies. Handles optional dependency imports gracefully.
"""

from __future__ import annotations

from fleetwarden.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from fleetwarden.adapters.ports import EnsembleAdminPort, EnsembleProcessPort
from fleetwarden.usecases.reconfiguration_orchestrator import (
    DEFAULT_SESSION_TIMEOUT_SECONDS,
    ReconfigurationOrchestrator,
)


class KazooNotInstalledError(ImportError):
    """Raised when kazoo is required but not installed.

    Install with: pip install fleetwarden[zookeeper]
    """

    def __init__(self) -> None:
        super().__init__(
            "kazoo is not installed. Install with: pip install fleetwarden[zookeeper]"
        )


class PrometheusNotInstalledError(ImportError):
    """Raised when prometheus-client is required but not installed.

    Install with: pip install fleetwarden[metrics]
    """

    def __init__(self) -> None:
        super().__init__(
            "prometheus-client is not installed. "
            "Install with: pip install fleetwarden[metrics]"
        )


def create_zookeeper_admin() -> EnsembleAdminPort:
    """Create a kazoo-backed EnsembleAdminPort.

    Raises:
        KazooNotInstalledError: If kazoo is not installed.
    """
    from fleetwarden.adapters.kazoo_admin import KazooEnsembleAdmin

    try:
        return KazooEnsembleAdmin()
    except ImportError as exc:
        raise KazooNotInstalledError() from exc


def create_metrics(enabled: bool, prefix: str = "fleetwarden") -> MetricsPort:
    """Create the metrics adapter for the given setting.

    Args:
        enabled: Whether to export Prometheus gauges.
        prefix: Gauge name prefix.

    Returns:
        PrometheusMetricsAdapter when enabled, NoOpMetricsAdapter otherwise.

    Raises:
        PrometheusNotInstalledError: If enabled and prometheus-client is missing.
    """
    if not enabled:
        return NoOpMetricsAdapter()

    from fleetwarden.adapters.prometheus_metrics import PrometheusMetricsAdapter

    try:
        return PrometheusMetricsAdapter(prefix=prefix)
    except ImportError as exc:
        raise PrometheusNotInstalledError() from exc


def create_reconfiguration_orchestrator(
    process_runner: EnsembleProcessPort,
    admin: EnsembleAdminPort | None = None,
    metrics_enabled: bool = False,
    session_timeout: float = DEFAULT_SESSION_TIMEOUT_SECONDS,
) -> ReconfigurationOrchestrator:
    """Create a ReconfigurationOrchestrator with default adapters.

    Args:
        process_runner: Port starting the local ensemble server.
        admin: Admin port. Defaults to the kazoo-backed adapter.
        metrics_enabled: Whether to export Prometheus gauges.
        session_timeout: Admin session timeout in seconds.

    Raises:
        KazooNotInstalledError: If admin is omitted and kazoo is not installed.
        PrometheusNotInstalledError: If metrics are enabled and prometheus-client is missing.
    """
    return ReconfigurationOrchestrator(
        process_runner=process_runner,
        admin=admin if admin is not None else create_zookeeper_admin(),
        metrics=create_metrics(metrics_enabled),
        session_timeout=session_timeout,
    )
