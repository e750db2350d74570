"""Election Commission candidate feed client.

httpx async based. Source URLs are tried in order; the first source that
returns a JSON candidate list wins.
"""

from __future__ import annotations

import json
import logging

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx

from election_portal.domain.exceptions import CandidateFeedError
from election_portal.domain.value_objects.candidate import CandidateRecord
from election_portal.infrastructure.importers.candidate_feed_parser import (
    CandidateFeedParser,
)


logger = logging.getLogger(__name__)

ELECTION_COMMISSION_FEED_URL = (
    "https://result.election.gov.np/JSONFiles/ElectionResultCentral2082.txt"
)
PORTAL_PROXY_FEED_URL = "http://localhost:5000/api/candidates"

DEFAULT_FEED_URLS: tuple[str, ...] = (
    ELECTION_COMMISSION_FEED_URL,
    PORTAL_PROXY_FEED_URL,
)


class CandidateFeedClient:
    """Fetches the candidates dataset, falling back across sources."""

    DEFAULT_TIMEOUT = 60.0

    def __init__(
        self,
        source_urls: Sequence[str] = DEFAULT_FEED_URLS,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        parser: CandidateFeedParser | None = None,
    ) -> None:
        self._source_urls = list(source_urls)
        self._external_client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._parser = parser or CandidateFeedParser()

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def fetch_candidates(self) -> list[CandidateRecord]:
        """Fetch the feed and normalize it into candidate records."""
        rows = await self.fetch_rows()
        return self._parser.parse_rows(rows)

    async def fetch_rows(self) -> list[Any]:
        """Fetch the raw row list from the first source that succeeds.

        Raises:
            CandidateFeedError: If every source failed
        """
        if not self._source_urls:
            raise CandidateFeedError("No candidate feed sources configured")

        failures: list[str] = []
        last_status: int | None = None
        client = self._get_client()
        try:
            for url in self._source_urls:
                try:
                    rows = await self._request(client, url)
                except CandidateFeedError as e:
                    failures.append(f"{url}: {e}")
                    if e.status_code is not None:
                        last_status = e.status_code
                    logger.warning("Candidate feed source failed: %s (%s)", url, e)
                    continue

                logger.info("Fetched %d candidate rows from %s", len(rows), url)
                return rows
        finally:
            if self._owns_client:
                await client.aclose()

        raise CandidateFeedError(
            f"All {len(self._source_urls)} candidate feed sources failed",
            status_code=last_status,
            failures=failures,
        )

    async def _request(self, client: httpx.AsyncClient, url: str) -> list[Any]:
        """Fetch one source and return its row list."""
        try:
            response = await client.get(url)
            response.raise_for_status()
            payload = json.loads(response.content.decode("utf-8-sig"))
        except httpx.HTTPStatusError as e:
            raise CandidateFeedError(
                f"HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise CandidateFeedError("request timed out") from e
        except httpx.HTTPError as e:
            raise CandidateFeedError(f"HTTP error: {e}") from e
        except ValueError as e:
            raise CandidateFeedError(f"invalid JSON payload: {e}") from e

        rows = CandidateFeedParser.extract_rows(payload)
        if rows is None:
            raise CandidateFeedError(
                f"unexpected payload type: {type(payload).__name__}"
            )
        return rows


class LocalSnapshotFeed:
    """Reads the candidates dataset from a saved JSON snapshot."""

    def __init__(
        self, file_path: Path, parser: CandidateFeedParser | None = None
    ) -> None:
        self._file_path = Path(file_path)
        self._parser = parser or CandidateFeedParser()

    async def fetch_candidates(self) -> list[CandidateRecord]:
        """Load the snapshot and normalize it into candidate records.

        Raises:
            CandidateFeedError: If the file is missing or not a candidate list
        """
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8-sig"))
        except OSError as e:
            raise CandidateFeedError(f"cannot read {self._file_path}: {e}") from e
        except ValueError as e:
            raise CandidateFeedError(f"invalid JSON in {self._file_path}: {e}") from e

        rows = CandidateFeedParser.extract_rows(payload)
        if rows is None:
            raise CandidateFeedError(
                f"{self._file_path} does not contain a candidate list"
            )
        logger.info("Loaded %d candidate rows from %s", len(rows), self._file_path)
        return self._parser.parse_rows(rows)
