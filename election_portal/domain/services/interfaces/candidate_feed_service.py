"""Candidate feed service interface."""

from typing import Protocol

from election_portal.domain.value_objects.candidate import CandidateRecord


class ICandidateFeedService(Protocol):
    """Source of the raw candidate list.

    Implementations fetch the public candidates dataset (network or local
    snapshot) and normalize every row into a CandidateRecord.
    """

    async def fetch_candidates(self) -> list[CandidateRecord]:
        """Fetch and normalize the candidate list.

        Returns:
            Candidate records (possibly empty)

        Raises:
            CandidateFeedError: If the dataset could not be acquired
        """
        ...
