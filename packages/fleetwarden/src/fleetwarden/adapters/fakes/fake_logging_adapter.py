"""Fake logging adapter and event emitter for testing."""

from __future__ import annotations

from fleetwarden.domain.events import ReconfigurationEvent


class FakeLoggingAdapter:
    """Fake logging adapter that captures log messages for assertion.

    Implements LoggingPort protocol by storing messages in lists
    for later retrieval and assertion in tests.

    Example:
        logger = FakeLoggingAdapter()
        orchestrator = ReconfigurationOrchestrator(..., logger=logger)
        assert any("Applied" in m for m in logger.infos)
    """

    def __init__(self) -> None:
        """Initialize with empty message lists."""
        self._infos: list[str] = []
        self._warnings: list[str] = []

    def info(self, message: str) -> None:
        """Store an info message."""
        self._infos.append(message)

    def warning(self, message: str) -> None:
        """Store a warning message."""
        self._warnings.append(message)

    @property
    def infos(self) -> list[str]:
        """Get a copy of captured info messages."""
        return list(self._infos)

    @property
    def warnings(self) -> list[str]:
        """Get a copy of captured warning messages."""
        return list(self._warnings)

    def clear(self) -> None:
        """Clear all captured messages."""
        self._infos.clear()
        self._warnings.clear()


class FakeEventEmitter:
    """Fake EventEmitterPort that keeps every emitted event."""

    def __init__(self) -> None:
        self.events: list[ReconfigurationEvent] = []

    def emit(self, event: ReconfigurationEvent) -> None:
        self.events.append(event)
