"""Port interfaces for the fleetwarden core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fleetwarden.domain.acl import Acl
    from fleetwarden.domain.ensemble import EnsembleConfig
    from fleetwarden.domain.events import ReconfigurationEvent


@runtime_checkable
class EnsembleAdminSession(Protocol):
    """Port interface for one administrative session against an ensemble.

    A session is opened per reconfiguration attempt and closed afterwards;
    it is never pooled or reused.

    Contract:
        - reconfigure() blocks until the ensemble commits or rejects the change
        - reconfigure() returns the newly committed configuration bytes
        - close() is safe to call after a failed reconfigure()
    """

    def reconfigure(self, joining: str, leaving: str, from_config: int = -1) -> bytes:
        """Change ensemble membership incrementally.

        Args:
            joining: Comma-joined 'id=hostname:quorumPort:electionPort'
                     descriptors of servers to add. Empty string for none.
            leaving: Comma-joined descriptors of servers to remove.
                     Empty string for none.
            from_config: Configuration version the change applies to,
                         -1 to apply regardless of the current version.

        Returns:
            The configuration committed by the ensemble.

        Raises:
            May raise I/O, protocol or interruption errors from the client library.
        """
        ...

    def close(self) -> None:
        """Close the session and release its connection."""
        ...


@runtime_checkable
class EnsembleAdminPort(Protocol):
    """Port interface for opening administrative sessions.

    Implementations wrap a consensus admin client library (e.g. kazoo).

    Contract:
        - connect() returns an open session or raises
        - the connection spec lists the servers of the *currently running* ensemble
    """

    def connect(self, connection_spec: str, timeout: float) -> EnsembleAdminSession:
        """Open an administrative session.

        Args:
            connection_spec: Comma-joined 'hostname:clientPort' of the servers.
            timeout: Session timeout in seconds.

        Returns:
            An open EnsembleAdminSession.

        Raises:
            May raise connection or timeout errors from the client library.
        """
        ...


@runtime_checkable
class EnsembleProcessPort(Protocol):
    """Port interface for starting the locally supervised ensemble server.

    Contract:
        - start() bootstraps the server with the given membership
        - the returned handle is opaque to the core
        - restarts are not part of this contract
    """

    def start(self, config: EnsembleConfig) -> object:
        """Start the local ensemble server.

        Args:
            config: Bootstrap membership for the server.

        Returns:
            An opaque handle for the started server.
        """
        ...


@runtime_checkable
class AclSourcePort(Protocol):
    """Port interface for fetching a node's trust declaration.

    Contract:
        - get_acl() returns a freshly constructed Acl for the given host
        - may raise if the topology source is unavailable
    """

    def get_acl(self, hostname: str) -> Acl:
        """Fetch the trust declaration for a host.

        Args:
            hostname: Hostname of the node whose rules are being generated.

        Returns:
            The Acl declared for that node.
        """
        ...


@runtime_checkable
class EventEmitterPort(Protocol):
    """Port interface for emitting reconfiguration events.

    Contract:
        - emit(event) delivers the event to all registered observers
        - emit() is fire-and-forget (no return value, no exceptions propagated)
    """

    def emit(self, event: ReconfigurationEvent) -> None:
        """Emit an event to observers.

        Args:
            event: The ReconfigurationEvent to emit.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for logging.

    Implementations handle log message delivery to configured logging backends.
    Abstracts the logging mechanism from use cases.

    Contract:
        - info() and warning() are fire-and-forget
        - Implementations may format, filter, or route messages as needed
    """

    def info(self, message: str) -> None:
        """Log an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Log a warning message."""
        ...
