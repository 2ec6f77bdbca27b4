"""Config parser use cases for ensemble membership and trust declarations."""

from __future__ import annotations

from typing import Any

import yaml

from fleetwarden.domain.acl import Acl
from fleetwarden.domain.ensemble import EnsembleConfig, EnsembleMember
from fleetwarden.domain.exceptions import FleetConfigError
from fleetwarden.domain.node import Node, NodeType


def _load_mapping(yaml_str: str) -> dict[str, Any]:
    try:
        config = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise FleetConfigError(f"Invalid YAML: {e}") from e

    if not isinstance(config, dict):
        raise FleetConfigError("Config must be a dictionary")
    return config


class EnsembleConfigParser:
    """Parses YAML ensemble membership into an EnsembleConfig.

    Example document::

        dynamic_reconfiguration: true
        members:
          - id: 0
            hostname: cfg1.example.com
            quorum_port: 2182
            election_port: 2183
            client_port: 2181
    """

    def parse(self, yaml_str: str) -> EnsembleConfig:
        """Parse YAML to EnsembleConfig.

        Args:
            yaml_str: YAML string describing the ensemble.

        Returns:
            EnsembleConfig domain object

        Raises:
            FleetConfigError: If YAML is invalid or required fields are missing
        """
        config = _load_mapping(yaml_str)

        members_raw = config.get("members")
        if not isinstance(members_raw, list):
            raise FleetConfigError("members must be a list")

        dynamic = config.get("dynamic_reconfiguration", False)
        if not isinstance(dynamic, bool):
            raise FleetConfigError(
                f"dynamic_reconfiguration must be a boolean, got: {dynamic!r}"
            )

        try:
            members = [
                EnsembleMember(
                    id=entry["id"],
                    hostname=entry["hostname"],
                    quorum_port=entry.get("quorum_port", 2182),
                    election_port=entry.get("election_port", 2183),
                    client_port=entry.get("client_port", 2181),
                )
                for entry in members_raw
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise FleetConfigError(f"Missing required field in member: {e}") from e

        return EnsembleConfig(members=members, dynamic_reconfiguration=dynamic)


class AclParser:
    """Parses a YAML trust declaration into an Acl.

    Example document::

        trusted_ports: [22, 4443]
        trusted_nodes:
          - hostname: cfg1.example.com
            type: config
            address: 172.17.0.41
        trusted_networks: [10.0.0.0/24]
    """

    def parse(self, yaml_str: str) -> Acl:
        """Parse YAML to Acl.

        Raises:
            FleetConfigError: If YAML is invalid, fields are missing, or an
                address is not an IP literal (InvalidAddressError).
        """
        config = _load_mapping(yaml_str)

        try:
            ports = config.get("trusted_ports") or []
            nodes = [
                Node(
                    hostname=entry["hostname"],
                    node_type=NodeType.from_name(entry.get("type", "tenant")),
                    address=str(entry["address"]),
                )
                for entry in config.get("trusted_nodes") or []
            ]
            networks = [str(n) for n in config.get("trusted_networks") or []]
            return Acl(
                trusted_ports=ports, trusted_nodes=nodes, trusted_networks=networks
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise FleetConfigError(f"Malformed trust declaration: {e}") from e
