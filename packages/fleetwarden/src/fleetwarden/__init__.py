"""fleetwarden: Packet filter rules and live ensemble reconfiguration for fleet nodes."""

__version__ = "0.1.0"

from fleetwarden.domain.acl import Acl
from fleetwarden.domain.ensemble import EnsembleConfig, EnsembleMember
from fleetwarden.domain.exceptions import (
    FleetConfigError,
    InvalidAddressError,
    ReconfigurationError,
)
from fleetwarden.domain.node import IPVersion, Node, NodeType
from fleetwarden.usecases.acl_rule_engine import AclRuleEngine
from fleetwarden.usecases.membership_differ import MembershipDiffer
from fleetwarden.usecases.reconfiguration_orchestrator import ReconfigurationOrchestrator

__all__ = [
    "Acl",
    "EnsembleConfig",
    "EnsembleMember",
    "FleetConfigError",
    "InvalidAddressError",
    "ReconfigurationError",
    "IPVersion",
    "Node",
    "NodeType",
    "AclRuleEngine",
    "MembershipDiffer",
    "ReconfigurationOrchestrator",
]
