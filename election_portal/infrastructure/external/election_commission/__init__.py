"""Election Commission of Nepal candidate feed."""

from .client import (
    DEFAULT_FEED_URLS,
    ELECTION_COMMISSION_FEED_URL,
    PORTAL_PROXY_FEED_URL,
    CandidateFeedClient,
    CandidateFeedError,
    LocalSnapshotFeed,
)


__all__ = [
    "CandidateFeedClient",
    "CandidateFeedError",
    "DEFAULT_FEED_URLS",
    "ELECTION_COMMISSION_FEED_URL",
    "LocalSnapshotFeed",
    "PORTAL_PROXY_FEED_URL",
]
