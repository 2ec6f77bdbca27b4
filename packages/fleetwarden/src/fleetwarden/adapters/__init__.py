"""Interface adapters: Ports and the adapters implementing them."""

from fleetwarden.adapters.ports import (
    AclSourcePort,
    EnsembleAdminPort,
    EnsembleAdminSession,
    EnsembleProcessPort,
    EventEmitterPort,
    LoggingPort,
)
from fleetwarden.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from fleetwarden.adapters.logging_adapter import StdlibLoggingAdapter
from fleetwarden.adapters.httpx_acl_source import HTTPXAclSource
from fleetwarden.adapters.kazoo_admin import KazooAdminSession, KazooEnsembleAdmin

__all__ = [
    "AclSourcePort",
    "EnsembleAdminPort",
    "EnsembleAdminSession",
    "EnsembleProcessPort",
    "EventEmitterPort",
    "LoggingPort",
    "MetricsPort",
    "NoOpMetricsAdapter",
    "StdlibLoggingAdapter",
    "HTTPXAclSource",
    "KazooAdminSession",
    "KazooEnsembleAdmin",
]
