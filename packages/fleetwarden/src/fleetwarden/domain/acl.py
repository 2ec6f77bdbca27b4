"""Trust declaration domain value object."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable
from dataclasses import dataclass, field

from fleetwarden.domain.exceptions import FleetConfigError
from fleetwarden.domain.node import Node

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class Acl:
    """The set of ports, peers and networks a node accepts inbound traffic from.

    Value object built fresh whenever the upstream trust declaration changes.
    All three collections are frozen sets, so two declarations with the same
    content compare equal regardless of the order they were assembled in.

    Attributes:
        trusted_ports: TCP ports open to everyone. Any iterable of int is
                       accepted and frozen.
        trusted_nodes: Peers whose addresses are accepted on every port.
        trusted_networks: CIDR literals accepted on every port. Kept exactly
                          as supplied (no mask normalization).

    Invariants:
        - every port is within 1-65535
        - trusted nodes are unique by address, compared as parsed IP addresses
          (fe80::2 and FE80:0::2 are the same node)
        - every network parses as an IPv4 or IPv6 CIDR literal
    """

    trusted_ports: frozenset[int] = field(default_factory=frozenset)
    trusted_nodes: frozenset[Node] = field(default_factory=frozenset)
    trusted_networks: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Freeze collections and validate the declaration."""
        self._freeze("trusted_ports", self.trusted_ports)
        self._freeze("trusted_nodes", self.trusted_nodes)
        self._freeze("trusted_networks", self.trusted_networks)
        self._validate_ports()
        self._validate_nodes()
        self._validate_networks()

    def _freeze(self, name: str, values: Iterable[object]) -> None:
        if not isinstance(values, frozenset):
            object.__setattr__(self, name, frozenset(values))

    def _validate_ports(self) -> None:
        for port in self.trusted_ports:
            if isinstance(port, bool) or not isinstance(port, int):
                raise FleetConfigError(f"trusted port must be an integer, got: {port!r}")
            if not MIN_PORT <= port <= MAX_PORT:
                raise FleetConfigError(
                    f"trusted port must be within {MIN_PORT}-{MAX_PORT}, got: {port}"
                )

    def _validate_nodes(self) -> None:
        seen: set[ipaddress.IPv4Address | ipaddress.IPv6Address] = set()
        for node in self.trusted_nodes:
            address = ipaddress.ip_address(node.address)
            if address in seen:
                raise FleetConfigError(
                    f"trusted nodes must be unique by address, duplicate: {node.address}"
                )
            seen.add(address)

    def _validate_networks(self) -> None:
        for network in self.trusted_networks:
            try:
                ipaddress.ip_network(network, strict=False)
            except ValueError as e:
                raise FleetConfigError(f"invalid trusted network: {network!r}") from e

    @classmethod
    def empty(cls) -> Acl:
        """Return an Acl that trusts nothing beyond the baseline rules."""
        return cls()
