"""HTTPX-based implementation of the AclSourcePort.

Fetches a node's trust declaration from the node repository ACL endpoint:

    GET {base_url}/nodes/v2/acl/{hostname}

    {
      "trustedPorts":    [{"port": 22}, ...],
      "trustedNodes":    [{"hostname": "...", "type": "config", "ipAddress": "..."}, ...],
      "trustedNetworks": [{"network": "10.0.0.0/24"}, ...]
    }
"""

from __future__ import annotations

from typing import Any

import httpx

from fleetwarden.domain.acl import Acl
from fleetwarden.domain.exceptions import FleetConfigError
from fleetwarden.domain.node import Node, NodeType


class HTTPXAclSource:
    """HTTPX-based adapter for fetching trust declarations.

    Attributes:
        base_url: Base URL of the node repository, e.g. 'https://cfg:4443'.
        timeout_seconds: Request timeout.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the ACL source.

        Args:
            base_url: Base URL of the node repository.
            timeout_seconds: Timeout for each request in seconds.
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._client = client

    def get_acl(self, hostname: str) -> Acl:
        """Fetch and parse the Acl of a host.

        Raises:
            httpx.RequestError: For network failures.
            httpx.HTTPStatusError: For HTTP errors (4xx, 5xx).
            FleetConfigError: If the response body is not a valid ACL document.
        """
        url = f"{self._base_url}/nodes/v2/acl/{hostname}"
        if self._client is not None:
            response = self._client.get(url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        else:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(url)
                response.raise_for_status()
                payload = response.json()

        return parse_acl_response(payload)


def parse_acl_response(payload: Any) -> Acl:
    """Convert a node repository ACL document into an Acl.

    A node listed more than once (it may be trusted for several reasons)
    is kept once.

    Raises:
        FleetConfigError: If required fields are missing or malformed.
    """
    if not isinstance(payload, dict):
        raise FleetConfigError("ACL response must be a JSON object")

    try:
        ports = {int(entry["port"]) for entry in payload.get("trustedPorts", [])}
        nodes = {
            Node(
                hostname=entry["hostname"],
                node_type=NodeType.from_name(entry["type"]),
                address=entry["ipAddress"],
            )
            for entry in payload.get("trustedNodes", [])
        }
        networks = {entry["network"] for entry in payload.get("trustedNetworks", [])}
    except (KeyError, TypeError, ValueError) as e:
        raise FleetConfigError(f"Malformed ACL response: {e}") from e

    return Acl(trusted_ports=ports, trusted_nodes=nodes, trusted_networks=networks)
