"""Candidate dashboard factory

Builds CandidateDashboardUseCase with either the live feed client or a
local snapshot, depending on the caller.
"""

import logging

from pathlib import Path

from election_portal.application.usecases.candidate_dashboard_usecase import (
    CandidateDashboardUseCase,
)
from election_portal.domain.services.interfaces.candidate_feed_service import (
    ICandidateFeedService,
)
from election_portal.infrastructure.config.settings import Settings, get_settings
from election_portal.infrastructure.external.election_commission.client import (
    CandidateFeedClient,
    LocalSnapshotFeed,
)


logger = logging.getLogger(__name__)


class CandidateDashboardFactory:
    """Candidate dashboard factory"""

    @staticmethod
    def create_feed(
        settings: Settings | None = None, snapshot_path: Path | None = None
    ) -> ICandidateFeedService:
        """Create the candidate feed.

        Args:
            settings: Settings (defaults to get_settings())
            snapshot_path: Read this JSON snapshot instead of the network

        Returns:
            ICandidateFeedService implementation
        """
        if snapshot_path is not None:
            logger.info("Using candidate snapshot %s", snapshot_path)
            return LocalSnapshotFeed(snapshot_path)

        settings = settings or get_settings()
        logger.info(
            "Using candidate feed sources: %s", settings.candidate_feed_url_list
        )
        return CandidateFeedClient(
            source_urls=settings.candidate_feed_url_list,
            timeout=settings.CANDIDATE_FEED_TIMEOUT,
        )

    @staticmethod
    def create(
        settings: Settings | None = None, snapshot_path: Path | None = None
    ) -> CandidateDashboardUseCase:
        """Create a CandidateDashboardUseCase wired to its feed."""
        feed = CandidateDashboardFactory.create_feed(settings, snapshot_path)
        return CandidateDashboardUseCase(feed=feed)
