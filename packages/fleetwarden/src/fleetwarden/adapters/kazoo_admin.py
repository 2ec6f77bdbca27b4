"""Kazoo-based implementation of the EnsembleAdminPort.

This adapter uses kazoo to issue incremental reconfiguration requests to a
running ZooKeeper ensemble. kazoo is an optional dependency:
    pip install fleetwarden[zookeeper]
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class KazooAdminSession:
    """EnsembleAdminSession wrapping a started KazooClient."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def reconfigure(self, joining: str, leaving: str, from_config: int = -1) -> bytes:
        """Issue an incremental reconfiguration and return the committed config.

        kazoo expects None rather than an empty string for an empty side.
        """
        data, _stat = self._client.reconfig(
            joining=joining or None,
            leaving=leaving or None,
            new_members=None,
            from_config=from_config,
        )
        return bytes(data or b"")

    def close(self) -> None:
        """Stop the client and release its connection."""
        try:
            self._client.stop()
        finally:
            self._client.close()


class KazooEnsembleAdmin:
    """Opens one KazooClient per administrative session.

    Attributes:
        client_factory: Callable building a KazooClient from hosts and timeout.
                        Defaults to kazoo.client.KazooClient; injectable for testing.

    Raises:
        ImportError: If kazoo is not installed and no client_factory is given.
    """

    def __init__(self, client_factory: Callable[..., Any] | None = None) -> None:
        if client_factory is None:
            # Import here to make kazoo optional
            from kazoo.client import KazooClient

            client_factory = KazooClient
        self._client_factory = client_factory

    def connect(self, connection_spec: str, timeout: float) -> KazooAdminSession:
        """Connect to the ensemble listed in connection_spec.

        Args:
            connection_spec: Comma-joined 'hostname:clientPort' of the servers.
            timeout: Session timeout in seconds, also used as connect timeout.

        Returns:
            A session holding a started client.

        Raises:
            May raise kazoo timeout or connection errors.
        """
        client = self._client_factory(hosts=connection_spec, timeout=timeout)
        try:
            client.start(timeout=timeout)
        except Exception:
            client.close()
            raise
        return KazooAdminSession(client)
