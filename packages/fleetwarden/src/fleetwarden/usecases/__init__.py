"""Use cases: Application logic layer."""

from fleetwarden.usecases.acl_rule_engine import ENSEMBLE_PORTS, AclRuleEngine
from fleetwarden.usecases.config_generator import EnsembleConfigGenerator
from fleetwarden.usecases.config_parser import AclParser, EnsembleConfigParser
from fleetwarden.usecases.membership_differ import MembershipDiffer
from fleetwarden.usecases.reconfiguration_orchestrator import (
    OrchestratorPhase,
    OrchestratorState,
    ReconfigurationOrchestrator,
)

__all__ = [
    "ENSEMBLE_PORTS",
    "AclRuleEngine",
    "EnsembleConfigGenerator",
    "AclParser",
    "EnsembleConfigParser",
    "MembershipDiffer",
    "OrchestratorPhase",
    "OrchestratorState",
    "ReconfigurationOrchestrator",
]
