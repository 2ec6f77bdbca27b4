"""Fake ensemble admin client for testing.

Provides test doubles for EnsembleAdminPort and EnsembleAdminSession that
record every call without network operations.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReconfigureCall:
    """Record of a single reconfigure() call.

    Attributes:
        connection_spec: Connection spec of the session the call was made on.
        joining: Joining descriptors argument.
        leaving: Leaving descriptors argument.
        from_config: Configuration version argument.
    """

    connection_spec: str
    joining: str
    leaving: str
    from_config: int


class FakeEnsembleAdminSession:
    """Fake EnsembleAdminSession handed out by FakeEnsembleAdmin."""

    def __init__(self, admin: FakeEnsembleAdmin, connection_spec: str) -> None:
        self._admin = admin
        self.connection_spec = connection_spec
        self.closed = False

    def reconfigure(self, joining: str, leaving: str, from_config: int = -1) -> bytes:
        """Record the call, then raise the configured exception or return config bytes."""
        return self._admin._record_reconfigure(
            ReconfigureCall(self.connection_spec, joining, leaving, from_config)
        )

    def close(self) -> None:
        """Mark the session closed, then raise the configured close exception."""
        self.closed = True
        if self._admin._close_exception is not None:
            raise self._admin._close_exception


class FakeEnsembleAdmin:
    """Fake implementation of EnsembleAdminPort for testing.

    Records connect() and reconfigure() calls and the sessions it opened.
    Supports configuring exceptions for connect, reconfigure and close
    for error path testing.

    Example:
        >>> fake = FakeEnsembleAdmin(applied_config=b"server.1=a:2182:2183")
        >>> session = fake.connect("a:2181", timeout=30.0)
        >>> session.reconfigure("1=a:2182:2183", "")
        b'server.1=a:2182:2183'
        >>> fake.reconfigure_calls[0].joining
        '1=a:2182:2183'
    """

    def __init__(self, applied_config: bytes = b"") -> None:
        """Initialize with the config bytes every reconfigure() returns."""
        self._applied_config = applied_config
        self._connect_exception: BaseException | None = None
        self._reconfigure_exception: BaseException | None = None
        self._close_exception: BaseException | None = None
        self.connect_calls: list[tuple[str, float]] = []
        self.reconfigure_calls: list[ReconfigureCall] = []
        self.sessions: list[FakeEnsembleAdminSession] = []

    def set_applied_config(self, applied_config: bytes) -> None:
        """Configure the bytes returned from reconfigure()."""
        self._applied_config = applied_config

    def set_connect_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from connect(), or None to clear."""
        self._connect_exception = exception

    def set_reconfigure_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from reconfigure(), or None to clear."""
        self._reconfigure_exception = exception

    def set_close_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from session close(), or None to clear."""
        self._close_exception = exception

    def connect(self, connection_spec: str, timeout: float) -> FakeEnsembleAdminSession:
        """Record the call and open a fake session."""
        self.connect_calls.append((connection_spec, timeout))
        if self._connect_exception is not None:
            raise self._connect_exception
        session = FakeEnsembleAdminSession(self, connection_spec)
        self.sessions.append(session)
        return session

    def _record_reconfigure(self, call: ReconfigureCall) -> bytes:
        self.reconfigure_calls.append(call)
        if self._reconfigure_exception is not None:
            raise self._reconfigure_exception
        return self._applied_config
