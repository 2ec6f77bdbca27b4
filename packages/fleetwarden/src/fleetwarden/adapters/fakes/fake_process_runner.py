"""Fake ensemble process runner for testing."""

from __future__ import annotations

from dataclasses import dataclass

from fleetwarden.domain.ensemble import EnsembleConfig


@dataclass(frozen=True)
class FakeProcessHandle:
    """Handle returned by FakeEnsembleProcessRunner.start().

    Attributes:
        config: Bootstrap configuration the fake server was started with.
    """

    config: EnsembleConfig


class FakeEnsembleProcessRunner:
    """Fake implementation of EnsembleProcessPort for testing.

    Records every start() call instead of launching a server.
    """

    def __init__(self) -> None:
        self._exception: BaseException | None = None
        self.started: list[EnsembleConfig] = []

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from start(), or None to clear."""
        self._exception = exception

    def start(self, config: EnsembleConfig) -> FakeProcessHandle:
        """Record the bootstrap config and return a handle for it."""
        self.started.append(config)
        if self._exception is not None:
            raise self._exception
        return FakeProcessHandle(config)
