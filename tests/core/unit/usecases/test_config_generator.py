"""Unit tests for EnsembleConfigGenerator use case."""

import pytest

from fleetwarden.domain.ensemble import EnsembleConfig, EnsembleMember
from fleetwarden.usecases.config_generator import EnsembleConfigGenerator
from tests.core.unit.builders import make_config


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.EnsembleConfigGenerator")
class TestEnsembleConfigGenerator:
    """Test EnsembleConfigGenerator use case."""

    def test_dynamic_config_lists_servers_in_order(self) -> None:
        config = EnsembleConfig(
            members=[
                EnsembleMember(id=2, hostname="cfg3", client_port=2191),
                EnsembleMember(id=0, hostname="cfg1"),
            ]
        )

        assert EnsembleConfigGenerator().generate(config) == (
            "server.2=cfg3:2182:2183;2191\n"
            "server.0=cfg1:2182:2183;2181\n"
        )

    def test_dynamic_config_of_empty_ensemble_is_empty(self) -> None:
        assert EnsembleConfigGenerator().generate(EnsembleConfig(members=[])) == ""

    def test_static_config(self) -> None:
        generated = EnsembleConfigGenerator().generate_static(
            make_config("cfg1", dynamic=True),
            data_dir="/var/zookeeper",
            dynamic_config_file="/var/zookeeper/conf/zookeeper.cfg.dynamic",
        )

        settings = dict(line.split("=", 1) for line in generated.splitlines())
        assert settings == {
            "tickTime": "2000",
            "initLimit": "20",
            "syncLimit": "15",
            "dataDir": "/var/zookeeper",
            "reconfigEnabled": "true",
            "standaloneEnabled": "false",
            "skipACL": "yes",
            "dynamicConfigFile": "/var/zookeeper/conf/zookeeper.cfg.dynamic",
        }

    def test_static_config_reflects_disabled_reconfiguration(self) -> None:
        generated = EnsembleConfigGenerator().generate_static(
            make_config("cfg1", dynamic=False),
            data_dir="/data",
            dynamic_config_file="/data/dynamic",
            tick_time_ms=500,
        )

        assert "reconfigEnabled=false\n" in generated
        assert generated.startswith("tickTime=500\n")
