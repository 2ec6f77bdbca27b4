"""AclRuleEngine use case for rendering packet filter rules from a trust declaration.

Rules are rendered in iptables-restore syntax for a single address family.
Output depends only on the content of the Acl, never on the order its
collections were assembled in: nodes and networks are sorted by their
address text, ports numerically.
"""

from __future__ import annotations

from fleetwarden.domain.acl import Acl
from fleetwarden.domain.node import IPVersion, Node, NodeType

# Client, quorum and election ports of the config server ensemble
ENSEMBLE_PORTS: tuple[int, ...] = (2181, 2182, 2183)


class AclRuleEngine:
    """Generates the ordered INPUT rule set of one node.

    Stateless and referentially transparent: safe to share between threads
    and to call concurrently for many nodes.
    """

    def generate_rules(
        self, acl: Acl, ip_version: IPVersion, self_type: NodeType
    ) -> list[str]:
        """Generate the rule lines for a node.

        Args:
            acl: Trust declaration of the node.
            ip_version: Address family the rules are rendered for. Nodes and
                        networks of the other family are left out.
            self_type: Role of the node the rules are for. Config servers
                       additionally fence off the ensemble ports.

        Returns:
            Rule lines in the order they must be applied.
        """
        nodes = self._nodes_of_family(acl, ip_version)
        rules = [
            "-P INPUT ACCEPT",
            "-P FORWARD ACCEPT",
            "-P OUTPUT ACCEPT",
            "-A INPUT -m state --state RELATED,ESTABLISHED -j ACCEPT",
            "-A INPUT -i lo -j ACCEPT",
            f"-A INPUT -p {ip_version.icmp_protocol} -j ACCEPT",
        ]

        if acl.trusted_ports:
            ports = _join_ports(sorted(acl.trusted_ports))
            rules.append(f"-A INPUT -p tcp -m multiport --dports {ports} -j ACCEPT")

        rules.extend(self._role_rules(nodes, ip_version, self_type))

        rules.extend(
            f"-A INPUT -s {_host_source(node, ip_version)} -j ACCEPT" for node in nodes
        )
        rules.extend(
            f"-A INPUT -s {network} -j ACCEPT"
            for network in sorted(acl.trusted_networks)
            if ip_version.matches(network)
        )

        rules.append(f"-A INPUT -j REJECT --reject-with {ip_version.reject_with}")
        return rules

    def render(self, acl: Acl, ip_version: IPVersion, self_type: NodeType) -> str:
        """Render the rule lines as a single newline-separated document."""
        return "\n".join(self.generate_rules(acl, ip_version, self_type))

    def _role_rules(
        self, nodes: list[Node], ip_version: IPVersion, self_type: NodeType
    ) -> list[str]:
        if self_type is NodeType.CONFIG:
            return _ensemble_fence(nodes, ip_version)
        return []

    @staticmethod
    def _nodes_of_family(acl: Acl, ip_version: IPVersion) -> list[Node]:
        return sorted(
            (node for node in acl.trusted_nodes if node.ip_version is ip_version),
            key=lambda node: node.address,
        )


def _ensemble_fence(nodes: list[Node], ip_version: IPVersion) -> list[str]:
    """Allow the ensemble ports from trusted nodes only, reject everyone else.

    Peers are not filtered by their own role.
    """
    ports = _join_ports(ENSEMBLE_PORTS)
    rules = [
        f"-A INPUT -p tcp -m multiport --dports {ports} "
        f"-s {_host_source(node, ip_version)} -j ACCEPT"
        for node in nodes
    ]
    rules.append(
        f"-A INPUT -p tcp -m multiport --dports {ports} "
        f"-j REJECT --reject-with {ip_version.reject_with}"
    )
    return rules


def _join_ports(ports: list[int] | tuple[int, ...]) -> str:
    return ",".join(str(port) for port in ports)


def _host_source(node: Node, ip_version: IPVersion) -> str:
    return f"{node.address}/{ip_version.single_host_prefix}"
