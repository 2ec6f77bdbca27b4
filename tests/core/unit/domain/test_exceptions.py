"""Tests for domain exceptions."""

import pytest

from fleetwarden.domain.exceptions import (
    FleetConfigError,
    InvalidAddressError,
    ReconfigurationError,
)


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.Exception")
class TestInvalidAddressError:
    """Tests for InvalidAddressError exception."""

    def test_inherits_from_fleet_config_error(self) -> None:
        """InvalidAddressError should inherit from FleetConfigError."""
        error = InvalidAddressError("nope")
        assert isinstance(error, FleetConfigError)

    def test_stores_address(self) -> None:
        error = InvalidAddressError("10.0.0.300")
        assert error.address == "10.0.0.300"
        assert str(error) == "invalid IP address: '10.0.0.300'"


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.Exception")
class TestReconfigurationError:
    """Tests for ReconfigurationError exception."""

    def test_is_not_a_config_error(self) -> None:
        """Failing to talk to the ensemble is not a declaration problem."""
        error = ReconfigurationError("failed")
        assert not isinstance(error, FleetConfigError)
        assert isinstance(error, Exception)

    def test_stores_message(self) -> None:
        error = ReconfigurationError("failed")
        assert error.message == "failed"
        assert str(error) == "failed"

    def test_stores_plan_and_original_error(self) -> None:
        original = ConnectionError("ensemble down")
        error = ReconfigurationError(
            "failed",
            joining="0=cfg1:2182:2183",
            leaving="1=cfg2:2182:2183",
            original_error=original,
        )
        assert error.joining == "0=cfg1:2182:2183"
        assert error.leaving == "1=cfg2:2182:2183"
        assert error.original_error is original

    def test_optional_fields_default(self) -> None:
        error = ReconfigurationError("simple error")
        assert error.joining == ""
        assert error.leaving == ""
        assert error.original_error is None
