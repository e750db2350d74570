"""Candidate feed snapshot script.

Fetches the Election Commission candidate feed and saves the raw rows as a
JSON file that ``election-portal candidates ... --file`` and the dashboard
can read without network access.

Usage:
    python scripts/snapshot_candidates.py --output data/candidates.json

    # Try a specific source first
    python scripts/snapshot_candidates.py --url http://localhost:5000/api/candidates
"""

import argparse
import asyncio
import json
import logging
import sys

from pathlib import Path


sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from election_portal.domain.exceptions import CandidateFeedError
from election_portal.infrastructure.config.settings import get_settings
from election_portal.infrastructure.external.election_commission.client import (
    CandidateFeedClient,
)
from election_portal.infrastructure.importers.candidate_feed_parser import (
    CandidateFeedParser,
)


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def run_snapshot(output: Path, urls: list[str], timeout: float) -> int:
    """Fetch the feed and write it to ``output``.

    Returns:
        Process exit code
    """
    client = CandidateFeedClient(source_urls=urls, timeout=timeout)
    try:
        rows = await client.fetch_rows()
    except CandidateFeedError as e:
        logger.error("Snapshot failed: %s", e)
        for failure in e.failures:
            logger.error("  %s", failure)
        return 1

    records = CandidateFeedParser().parse_rows(rows)
    logger.info("Rows: %d, usable candidates: %d", len(rows), len(records))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(
        json.dumps(rows, ensure_ascii=False, indent=1), encoding="utf-8"
    )
    logger.info("Snapshot written to %s", output)
    return 0


def main() -> None:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Save the candidate feed to a local JSON snapshot"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/candidates.json"),
        help="Output file (default: data/candidates.json)",
    )
    parser.add_argument(
        "--url",
        action="append",
        default=None,
        help="Source URL to try (repeatable; default: CANDIDATE_FEED_URLS)",
    )
    args = parser.parse_args()

    settings = get_settings()
    urls = args.url or settings.candidate_feed_url_list
    exit_code = asyncio.run(
        run_snapshot(args.output, urls, settings.CANDIDATE_FEED_TIMEOUT)
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
