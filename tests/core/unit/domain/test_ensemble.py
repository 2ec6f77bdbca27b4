"""Unit tests for ensemble membership value objects."""

import pytest

from fleetwarden.domain.ensemble import EnsembleConfig, EnsembleMember, ReconfigurationPlan
from fleetwarden.domain.exceptions import FleetConfigError


@pytest.mark.tier(0)
@pytest.mark.tra("Domain.Invariant.EnsembleMember")
class TestEnsembleMember:
    """Test EnsembleMember validation and rendering."""

    def test_default_ports(self) -> None:
        member = EnsembleMember(id=0, hostname="cfg1")

        assert (member.quorum_port, member.election_port, member.client_port) == (
            2182,
            2183,
            2181,
        )

    def test_descriptor(self) -> None:
        member = EnsembleMember(id=3, hostname="cfg4.example.com", quorum_port=3888)

        assert member.descriptor == "3=cfg4.example.com:3888:2183"

    def test_client_address(self) -> None:
        member = EnsembleMember(id=0, hostname="cfg1", client_port=12181)

        assert member.client_address == "cfg1:12181"

    def test_negative_id_raises(self) -> None:
        with pytest.raises(FleetConfigError, match="negative"):
            EnsembleMember(id=-1, hostname="cfg1")

    @pytest.mark.parametrize("server_id", ["1", 1.0, False])
    def test_non_integer_id_raises(self, server_id: object) -> None:
        with pytest.raises(FleetConfigError, match="integer"):
            EnsembleMember(id=server_id, hostname="cfg1")  # type: ignore[arg-type]

    @pytest.mark.parametrize("hostname", ["", "   "])
    def test_empty_hostname_raises(self, hostname: str) -> None:
        with pytest.raises(FleetConfigError, match="empty"):
            EnsembleMember(id=0, hostname=hostname)

    def test_hostname_with_whitespace_raises(self) -> None:
        with pytest.raises(FleetConfigError, match="whitespace"):
            EnsembleMember(id=0, hostname="cfg 1")

    @pytest.mark.parametrize("field_name", ["quorum_port", "election_port", "client_port"])
    def test_out_of_range_port_raises(self, field_name: str) -> None:
        with pytest.raises(FleetConfigError, match=field_name):
            EnsembleMember(id=0, hostname="cfg1", **{field_name: 70000})


@pytest.mark.tier(0)
@pytest.mark.tra("Domain.Invariant.EnsembleConfig")
class TestEnsembleConfig:
    """Test EnsembleConfig normalization and derived values."""

    def test_members_list_becomes_tuple(self) -> None:
        config = EnsembleConfig(members=[EnsembleMember(id=0, hostname="cfg1")])

        assert isinstance(config.members, tuple)

    def test_structural_equality(self) -> None:
        members = [EnsembleMember(id=0, hostname="cfg1"), EnsembleMember(id=1, hostname="cfg2")]

        assert EnsembleConfig(members=members, dynamic_reconfiguration=True) == EnsembleConfig(
            members=tuple(members), dynamic_reconfiguration=True
        )
        assert EnsembleConfig(members=members) != EnsembleConfig(
            members=members, dynamic_reconfiguration=True
        )

    def test_member_order_matters(self) -> None:
        first = EnsembleMember(id=0, hostname="cfg1")
        second = EnsembleMember(id=1, hostname="cfg2")

        assert EnsembleConfig(members=[first, second]) != EnsembleConfig(
            members=[second, first]
        )

    def test_duplicate_ids_raise(self) -> None:
        with pytest.raises(FleetConfigError, match=r"duplicates: \[1\]"):
            EnsembleConfig(
                members=[
                    EnsembleMember(id=1, hostname="cfg1"),
                    EnsembleMember(id=1, hostname="cfg2"),
                ]
            )

    def test_descriptors_and_connection_spec(self) -> None:
        config = EnsembleConfig(
            members=[
                EnsembleMember(id=0, hostname="cfg1"),
                EnsembleMember(id=1, hostname="cfg2", client_port=2191),
            ]
        )

        assert config.descriptors() == ["0=cfg1:2182:2183", "1=cfg2:2182:2183"]
        assert config.connection_spec() == "cfg1:2181,cfg2:2191"

    def test_empty_ensemble(self) -> None:
        config = EnsembleConfig(members=[])

        assert config.descriptors() == []
        assert config.connection_spec() == ""


@pytest.mark.tier(0)
@pytest.mark.tra("Domain.Invariant.ReconfigurationPlan")
class TestReconfigurationPlan:
    """Test ReconfigurationPlan rendering."""

    def test_specs_are_comma_joined(self) -> None:
        plan = ReconfigurationPlan(
            joining=("0=a:2182:2183", "1=b:2182:2183"), leaving=("2=c:2182:2183",)
        )

        assert plan.joining_spec == "0=a:2182:2183,1=b:2182:2183"
        assert plan.leaving_spec == "2=c:2182:2183"

    def test_empty_leaving_is_empty_string(self) -> None:
        assert ReconfigurationPlan(joining=(), leaving=()).leaving_spec == ""
