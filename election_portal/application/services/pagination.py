"""Paging of candidate lists."""

import math

from collections.abc import Sequence

from election_portal.application.dtos.candidate_dashboard_dto import CandidatePage
from election_portal.domain.value_objects.candidate import CandidateRecord


def paginate(
    records: Sequence[CandidateRecord], page: int, per_page: int
) -> CandidatePage:
    """Slice one page out of a candidate list.

    The page number is clamped into ``[1, total_pages]``.

    Args:
        records: Candidate list
        page: 1-based page number
        per_page: Page size (at least 1)

    Returns:
        CandidatePage
    """
    per_page = max(per_page, 1)
    total_items = len(records)
    total_pages = math.ceil(total_items / per_page)
    page = min(max(page, 1), max(total_pages, 1))

    start = (page - 1) * per_page
    return CandidatePage(
        items=list(records[start : start + per_page]),
        page=page,
        per_page=per_page,
        total_items=total_items,
        total_pages=total_pages,
    )
