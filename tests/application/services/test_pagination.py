"""paginate tests."""

import pytest

from election_portal.application.services.pagination import paginate
from tests.fixtures.candidate_factories import make_candidate


def _make_records(n: int):
    return [make_candidate(id=i) for i in range(1, n + 1)]


class TestPaginate:
    def test_first_page(self) -> None:
        page = paginate(_make_records(30), page=1, per_page=12)

        assert [r.id for r in page.items] == list(range(1, 13))
        assert page.total_items == 30
        assert page.total_pages == 3

    def test_last_partial_page(self) -> None:
        page = paginate(_make_records(30), page=3, per_page=12)
        assert [r.id for r in page.items] == list(range(25, 31))

    @pytest.mark.parametrize("requested,expected", [(0, 1), (-5, 1), (99, 3)])
    def test_page_is_clamped(self, requested: int, expected: int) -> None:
        assert paginate(_make_records(30), requested, 12).page == expected

    def test_empty(self) -> None:
        page = paginate([], page=3, per_page=12)

        assert page.items == []
        assert page.page == 1
        assert page.total_pages == 0

    def test_per_page_at_least_one(self) -> None:
        page = paginate(_make_records(3), page=2, per_page=0)
        assert page.per_page == 1
        assert [r.id for r in page.items] == [2]
