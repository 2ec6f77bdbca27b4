"""Domain layer: Entities with zero external dependencies."""

from fleetwarden.domain.acl import Acl
from fleetwarden.domain.ensemble import EnsembleConfig, EnsembleMember, ReconfigurationPlan
from fleetwarden.domain.events import ReconfigurationEvent, ReconfigurationEventType
from fleetwarden.domain.exceptions import (
    FleetConfigError,
    InvalidAddressError,
    ReconfigurationError,
)
from fleetwarden.domain.node import IPVersion, Node, NodeType

__all__ = [
    "Acl",
    "EnsembleConfig",
    "EnsembleMember",
    "ReconfigurationPlan",
    "ReconfigurationEvent",
    "ReconfigurationEventType",
    "FleetConfigError",
    "InvalidAddressError",
    "ReconfigurationError",
    "IPVersion",
    "Node",
    "NodeType",
]
