"""ReconfigurationOrchestrator use case for keeping a live ensemble in step with topology."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from enum import Enum

from fleetwarden.adapters.logging_adapter import StdlibLoggingAdapter
from fleetwarden.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from fleetwarden.adapters.ports import (
    EnsembleAdminPort,
    EnsembleAdminSession,
    EnsembleProcessPort,
    EventEmitterPort,
    LoggingPort,
)
from fleetwarden.domain.ensemble import EnsembleConfig
from fleetwarden.domain.events import ReconfigurationEvent, ReconfigurationEventType
from fleetwarden.domain.exceptions import ReconfigurationError
from fleetwarden.usecases.membership_differ import MembershipDiffer

DEFAULT_SESSION_TIMEOUT_SECONDS = 30.0

# Apply the change whatever configuration version the ensemble is at
ANY_CONFIG_VERSION = -1


class OrchestratorPhase(Enum):
    """Lifecycle phase of the locally managed ensemble server.

    Attributes:
        UNSTARTED: No server has been started yet.
        RUNNING: The server was started and has a recorded configuration.
    """

    UNSTARTED = "unstarted"
    RUNNING = "running"


@dataclass(frozen=True)
class OrchestratorState:
    """Snapshot of what the orchestrator believes the ensemble is running.

    Attributes:
        current_config: Last applied or bootstrap configuration, None before start.
        process_handle: Opaque handle returned by the process runner. May be
                        None even after start, so it never decides the phase.
        phase: UNSTARTED until the server was started, RUNNING afterwards.
    """

    current_config: EnsembleConfig | None = None
    process_handle: object | None = None
    phase: OrchestratorPhase = OrchestratorPhase.UNSTARTED


class ReconfigurationOrchestrator:
    """Starts the local ensemble server and reconfigures it on topology changes.

    Every topology change event calls start_or_reconfigure() with the new
    ensemble configuration. The first call bootstraps the server with it;
    later calls reconfigure the running ensemble when dynamic reconfiguration
    is enabled and the configuration changed.

    Dependencies:
        - EnsembleProcessPort: Starts the local server (restarts are not handled here)
        - EnsembleAdminPort: Opens admin sessions against the running ensemble
        - MetricsPort (optional): Ensemble size and outcome gauges
        - LoggingPort (optional): Defaults to the standard library logger
        - EventEmitterPort (optional): Lifecycle events

    Thread safety:
        Transitions are serialized by an internal lock, so overlapping
        calls from several config subscribers run one after another.
    """

    def __init__(
        self,
        process_runner: EnsembleProcessPort,
        admin: EnsembleAdminPort,
        metrics: MetricsPort | None = None,
        logger: LoggingPort | None = None,
        event_emitter: EventEmitterPort | None = None,
        session_timeout: float = DEFAULT_SESSION_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the orchestrator in the UNSTARTED phase.

        Args:
            process_runner: Port starting the local ensemble server.
            admin: Port opening admin sessions against the ensemble.
            metrics: Optional metrics port. Defaults to no-op.
            logger: Optional logging port. Defaults to StdlibLoggingAdapter.
            event_emitter: Optional event emitter. No events when omitted.
            session_timeout: Admin session timeout in seconds.
        """
        self._process_runner = process_runner
        self._admin = admin
        self._metrics: MetricsPort = metrics or NoOpMetricsAdapter()
        self._logger: LoggingPort = logger or StdlibLoggingAdapter()
        self._event_emitter = event_emitter
        self._session_timeout = session_timeout
        self._differ = MembershipDiffer()
        self._state = OrchestratorState()
        self._lock = threading.Lock()

    @property
    def state(self) -> OrchestratorState:
        """Current state snapshot."""
        return self._state

    @property
    def current_config(self) -> EnsembleConfig | None:
        """Configuration the orchestrator last recorded, None before start."""
        return self._state.current_config

    @property
    def is_started(self) -> bool:
        """Whether the local server has been started."""
        return self._state.phase is OrchestratorPhase.RUNNING

    def start_or_reconfigure(self, new_config: EnsembleConfig) -> None:
        """Apply a topology change event.

        Transition rules:
            - UNSTARTED -> start the server with new_config, record it.
              No reconfiguration is attempted, whatever the flag says.
            - RUNNING and should_reconfigure() -> reconfigure the ensemble,
              then record new_config.
            - RUNNING otherwise -> record new_config.

        Args:
            new_config: Ensemble configuration delivered by the config source.

        Raises:
            ReconfigurationError: If reconfiguring the running ensemble failed.
                The recorded configuration is left unchanged.
        """
        with self._lock:
            if self._state.phase is OrchestratorPhase.UNSTARTED:
                self._start(new_config)
                return

            current = self._state.current_config
            if current is not None and self.should_reconfigure(new_config):
                self.reconfigure(current, new_config)
            else:
                self._emit(
                    ReconfigurationEventType.RECONFIGURATION_SKIPPED,
                    "dynamic reconfiguration disabled or configuration unchanged",
                )

            self._state = replace(self._state, current_config=new_config)
            self._metrics.set_ensemble_size(len(new_config.members))

    def should_reconfigure(self, new_config: EnsembleConfig) -> bool:
        """Decide whether new_config must be applied to the running ensemble.

        Returns:
            False if dynamic reconfiguration is disabled in new_config, if no
            configuration has been recorded yet, or if new_config equals the
            recorded one. True otherwise.
        """
        current = self._state.current_config
        if not new_config.dynamic_reconfiguration or current is None:
            return False
        return new_config != current

    def reconfigure(self, current: EnsembleConfig, target: EnsembleConfig) -> bytes:
        """Move the running ensemble from current to target membership.

        Connects to the servers of current (the ensemble has not adopted
        target yet), issues one incremental reconfiguration and closes the
        session on every exit path. No retries.

        Args:
            current: Membership the ensemble is running with.
            target: Membership to move to.

        Returns:
            The configuration committed by the ensemble.

        Raises:
            ReconfigurationError: On any connection, protocol or interruption error.
        """
        plan = self._differ.diff(current, target)
        self._logger.info(
            f"Will reconfigure ensemble. Joining servers: {list(plan.joining)}, "
            f"leaving servers: {list(plan.leaving)}"
        )

        try:
            session = self._admin.connect(
                current.connection_spec(), timeout=self._session_timeout
            )
            try:
                applied = session.reconfigure(
                    plan.joining_spec, plan.leaving_spec, from_config=ANY_CONFIG_VERSION
                )
            except Exception:
                self._close_session(session)
                raise
        except Exception as e:
            self._metrics.set_last_reconfiguration_succeeded(False)
            self._logger.warning(f"Reconfiguration of ensemble failed: {e!r}")
            self._emit(ReconfigurationEventType.RECONFIGURATION_FAILED, repr(e))
            if isinstance(e, ReconfigurationError):
                raise
            raise ReconfigurationError(
                f"Reconfiguration of ensemble failed: {e}",
                joining=plan.joining_spec,
                leaving=plan.leaving_spec,
                original_error=e,
            ) from e

        self._close_session(session)
        self._logger.info(
            f"Applied ensemble config: {applied.decode('utf-8', errors='replace')}"
        )
        self._metrics.set_last_reconfiguration_succeeded(True)
        self._emit(ReconfigurationEventType.RECONFIGURED, plan.joining_spec)
        return applied

    def _close_session(self, session: EnsembleAdminSession) -> None:
        """Close an admin session, logging rather than raising on failure.

        A failing close does not change the outcome of the reconfiguration.
        """
        try:
            session.close()
        except Exception as e:
            self._logger.warning(f"Closing ensemble admin session failed: {e!r}")

    def _start(self, config: EnsembleConfig) -> None:
        handle = self._process_runner.start(config)
        self._state = OrchestratorState(
            current_config=config,
            process_handle=handle,
            phase=OrchestratorPhase.RUNNING,
        )
        self._logger.info(
            f"Started ensemble server with {len(config.members)} server(s): "
            f"{config.connection_spec()}"
        )
        self._metrics.set_server_started(True)
        self._metrics.set_ensemble_size(len(config.members))
        self._emit(ReconfigurationEventType.SERVER_STARTED)

    def _emit(self, event_type: ReconfigurationEventType, reason: str | None = None) -> None:
        if self._event_emitter is not None:
            self._event_emitter.emit(ReconfigurationEvent(event_type, reason))
