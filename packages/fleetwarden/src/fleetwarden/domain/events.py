"""Domain events for ensemble lifecycle transitions.

Events are immutable value objects representing state changes of the locally
managed ensemble server. They follow the frozen dataclass pattern used
throughout the domain layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReconfigurationEventType(Enum):
    """Types of events emitted by the reconfiguration orchestrator.

    Attributes:
        SERVER_STARTED: The local ensemble server was bootstrapped.
        RECONFIGURED: A membership change was committed by the ensemble.
        RECONFIGURATION_SKIPPED: An update arrived that needed no membership change.
        RECONFIGURATION_FAILED: The admin interface rejected or failed the change.
    """

    SERVER_STARTED = "server_started"
    RECONFIGURED = "reconfigured"
    RECONFIGURATION_SKIPPED = "reconfiguration_skipped"
    RECONFIGURATION_FAILED = "reconfiguration_failed"


@dataclass(frozen=True)
class ReconfigurationEvent:
    """Immutable event representing an ensemble lifecycle transition.

    Attributes:
        event_type: The type of event that occurred.
        reason: Optional human-readable reason for the event.
    """

    event_type: ReconfigurationEventType
    reason: str | None = None
