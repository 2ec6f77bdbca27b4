"""Consensus ensemble domain value objects."""

from __future__ import annotations

from dataclasses import dataclass

from fleetwarden.domain.exceptions import FleetConfigError

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class EnsembleMember:
    """One server of the consensus ensemble.

    Attributes:
        id: Server id, unique within an ensemble configuration.
        hostname: Hostname the server is reachable on.
        quorum_port: Port used by followers to talk to the leader.
        election_port: Port used for leader election.
        client_port: Port clients (including the admin interface) connect to.

    Invariants:
        - id >= 0
        - hostname is non-empty and contains no whitespace
        - all ports are within 1-65535
    """

    id: int
    hostname: str
    quorum_port: int = 2182
    election_port: int = 2183
    client_port: int = 2181

    def __post_init__(self) -> None:
        """Validate member fields."""
        self._validate_id()
        self._validate_hostname()
        self._validate_ports()

    def _validate_id(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise FleetConfigError(f"server id must be an integer, got: {self.id!r}")
        if self.id < 0:
            raise FleetConfigError(f"server id cannot be negative, got: {self.id}")

    def _validate_hostname(self) -> None:
        if not self.hostname or not self.hostname.strip():
            raise FleetConfigError("hostname cannot be empty")
        if any(c.isspace() for c in self.hostname):
            raise FleetConfigError(
                f"hostname cannot contain whitespace, got: {self.hostname!r}"
            )

    def _validate_ports(self) -> None:
        for name in ("quorum_port", "election_port", "client_port"):
            port = getattr(self, name)
            if isinstance(port, bool) or not isinstance(port, int):
                raise FleetConfigError(f"{name} must be an integer, got: {port!r}")
            if not MIN_PORT <= port <= MAX_PORT:
                raise FleetConfigError(
                    f"{name} must be within {MIN_PORT}-{MAX_PORT}, got: {port}"
                )

    @property
    def descriptor(self) -> str:
        """Membership descriptor, 'id=hostname:quorumPort:electionPort'."""
        return f"{self.id}={self.hostname}:{self.quorum_port}:{self.election_port}"

    @property
    def client_address(self) -> str:
        """Address clients use to reach this server, 'hostname:clientPort'."""
        return f"{self.hostname}:{self.client_port}"


@dataclass(frozen=True)
class EnsembleConfig:
    """Membership of a consensus ensemble, pushed on every topology change.

    Compared structurally (members and flag) to detect no-op updates.

    Attributes:
        members: Servers of the ensemble, in declaration order. A list is
                 accepted and converted to a tuple.
        dynamic_reconfiguration: Whether membership changes should be applied
                                 to the running ensemble without a restart.

    Invariants:
        - member ids are unique
    """

    members: tuple[EnsembleMember, ...] | list[EnsembleMember]
    dynamic_reconfiguration: bool = False

    def __post_init__(self) -> None:
        """Normalize members and validate id uniqueness."""
        if not isinstance(self.members, tuple):
            object.__setattr__(self, "members", tuple(self.members))
        self._validate_unique_ids()

    def _validate_unique_ids(self) -> None:
        ids = [member.id for member in self.members]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise FleetConfigError(f"server ids must be unique, duplicates: {duplicates}")

    def descriptors(self) -> list[str]:
        """Membership descriptors of all members, in member order."""
        return [member.descriptor for member in self.members]

    def connection_spec(self) -> str:
        """Comma-joined 'hostname:clientPort' of all members, in member order."""
        return ",".join(member.client_address for member in self.members)


@dataclass(frozen=True)
class ReconfigurationPlan:
    """Joining and leaving servers for one membership change.

    Attributes:
        joining: Descriptors of servers the ensemble should contain.
        leaving: Descriptors of servers to remove from the ensemble.
    """

    joining: tuple[str, ...]
    leaving: tuple[str, ...]

    @property
    def joining_spec(self) -> str:
        """Joining descriptors joined by commas, empty string if none."""
        return ",".join(self.joining)

    @property
    def leaving_spec(self) -> str:
        """Leaving descriptors joined by commas, empty string if none."""
        return ",".join(self.leaving)
