"""Config generator use case for the ensemble server configuration files."""

from __future__ import annotations

from fleetwarden.domain.ensemble import EnsembleConfig


class EnsembleConfigGenerator:
    """Generates ZooKeeper static and dynamic configuration files.

    The dynamic file holds the membership and is what incremental
    reconfiguration rewrites on the servers; the static file points to it.
    """

    def generate(self, config: EnsembleConfig) -> str:
        """Generate the dynamic configuration file content.

        One 'server.<id>=<hostname>:<quorum>:<election>;<client port>' line
        per member, in member order.

        Args:
            config: Ensemble membership.

        Returns:
            Dynamic configuration file content, newline terminated.
        """
        lines = [
            f"server.{m.id}={m.hostname}:{m.quorum_port}:{m.election_port};{m.client_port}"
            for m in config.members
        ]
        return "".join(f"{line}\n" for line in lines)

    def generate_static(
        self,
        config: EnsembleConfig,
        data_dir: str,
        dynamic_config_file: str,
        tick_time_ms: int = 2000,
        init_limit: int = 20,
        sync_limit: int = 15,
    ) -> str:
        """Generate the static configuration file content.

        Args:
            config: Ensemble membership; only its reconfiguration flag is used.
            data_dir: Directory holding snapshots and the myid file.
            dynamic_config_file: Path of the dynamic configuration file.
            tick_time_ms: Basic time unit in milliseconds.
            init_limit: Ticks followers may take to connect and sync.
            sync_limit: Ticks followers may lag behind the leader.

        Returns:
            Static configuration file content, newline terminated.
        """
        settings = {
            "tickTime": tick_time_ms,
            "initLimit": init_limit,
            "syncLimit": sync_limit,
            "dataDir": data_dir,
            "reconfigEnabled": "true" if config.dynamic_reconfiguration else "false",
            "standaloneEnabled": "false",
            "skipACL": "yes",
            "dynamicConfigFile": dynamic_config_file,
        }
        return "".join(f"{key}={value}\n" for key, value in settings.items())
