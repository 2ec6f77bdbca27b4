"""Fleet node domain value objects."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum

from fleetwarden.domain.exceptions import FleetConfigError, InvalidAddressError


class NodeType(Enum):
    """Closed set of roles a fleet member can have.

    Attributes:
        TENANT: Node running customer workloads.
        HOST: Docker host for tenant nodes.
        PROXY: Routing node in front of tenants.
        PROXYHOST: Docker host for proxy nodes.
        CONFIG: Config server, hosts the metadata ensemble.
        CONFIGHOST: Docker host for config servers.
        CONTROLLER: Controller node, also hosts an ensemble.
    """

    TENANT = "tenant"
    HOST = "host"
    PROXY = "proxy"
    PROXYHOST = "proxyhost"
    CONFIG = "config"
    CONFIGHOST = "confighost"
    CONTROLLER = "controller"

    @classmethod
    def from_name(cls, name: str) -> NodeType:
        """Look up a node type by its wire name (case-insensitive).

        Raises:
            FleetConfigError: If the name is not a known node type.
        """
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            raise FleetConfigError(f"unknown node type: {name!r}") from e


class IPVersion(Enum):
    """IP address family, carrying the per-family packet filter vocabulary."""

    IPV4 = 4
    IPV6 = 6

    @property
    def icmp_protocol(self) -> str:
        """Protocol name used to match ICMP for this family."""
        return "icmp" if self is IPVersion.IPV4 else "ipv6-icmp"

    @property
    def reject_with(self) -> str:
        """ICMP unreachable code used by REJECT rules for this family."""
        return (
            "icmp-port-unreachable"
            if self is IPVersion.IPV4
            else "icmp6-port-unreachable"
        )

    @property
    def single_host_prefix(self) -> int:
        """Prefix length that scopes a rule to exactly one address."""
        return 32 if self is IPVersion.IPV4 else 128

    def matches(self, address: str) -> bool:
        """Check whether an address or CIDR literal belongs to this family.

        Args:
            address: IP address or network literal, e.g. '10.0.0.0/24'.

        Returns:
            True if the literal parses and is of this family, False otherwise.
        """
        try:
            network = ipaddress.ip_network(address, strict=False)
        except ValueError:
            return False
        return network.version == self.value


def parse_ip_version(address: str) -> IPVersion:
    """Return the family of an IP address literal.

    Raises:
        InvalidAddressError: If the text is not exactly one IPv4 or IPv6 literal.
    """
    try:
        parsed = ipaddress.ip_address(address)
    except ValueError as e:
        raise InvalidAddressError(address) from e
    return IPVersion(parsed.version)


@dataclass(frozen=True)
class Node:
    """A fleet member trusted by some other node.

    Value object identifying a peer by hostname, role and address.
    The address is validated at construction and never normalized, so the
    rendered rules show it exactly as the topology source supplied it.

    Attributes:
        hostname: Fully qualified hostname of the node.
        node_type: Role of the node in the fleet.
        address: IPv4 or IPv6 literal.

    Invariants:
        - address parses as exactly one IPv4 or IPv6 literal
    """

    hostname: str
    node_type: NodeType
    address: str

    def __post_init__(self) -> None:
        """Validate the address literal."""
        parse_ip_version(self.address)

    @property
    def ip_version(self) -> IPVersion:
        """Family of this node's address."""
        return parse_ip_version(self.address)
