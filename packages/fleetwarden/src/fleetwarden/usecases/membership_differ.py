"""MembershipDiffer use case for computing ensemble membership changes."""

from __future__ import annotations

from fleetwarden.domain.ensemble import EnsembleConfig, ReconfigurationPlan


class MembershipDiffer:
    """Computes joining and leaving servers between two ensemble configurations.

    Joining servers are always the complete new membership, not only the
    servers that are new. Re-announcing an unchanged server is accepted by
    the ensemble admin interface as a no-op for that server.

    Leaving servers are the descriptors of the old membership that do not
    occur verbatim in the new one. Since a descriptor encodes id, hostname,
    quorum port and election port, a port change for the same id shows up as
    one leaving and one joining entry.
    """

    def diff(self, old: EnsembleConfig, new: EnsembleConfig) -> ReconfigurationPlan:
        """Compute the membership change from old to new.

        Args:
            old: Membership the ensemble is currently running with.
            new: Membership the ensemble should move to.

        Returns:
            ReconfigurationPlan with joining in new member order and leaving in
            old member order.
        """
        new_descriptors = new.descriptors()
        remaining = set(new_descriptors)
        leaving = [d for d in old.descriptors() if d not in remaining]
        return ReconfigurationPlan(joining=tuple(new_descriptors), leaving=tuple(leaving))
