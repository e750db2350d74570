"""Candidate filter predicate tests."""

import pytest

from election_portal.domain.services.candidate_filter import (
    count_active_filters,
    filter_candidates,
    matches,
    normalize_search_text,
)
from election_portal.domain.value_objects.candidate import FilterState
from tests.fixtures.candidate_factories import (
    make_candidate,
    make_scenario_candidates,
)


class TestMatches:
    def test_empty_filter_matches_everything(self) -> None:
        assert matches(make_candidate(), FilterState())

    @pytest.mark.parametrize(
        "field,value,expected",
        [
            ("province", "Bagmati", True),
            ("province", "Koshi", False),
            ("district", "Kathmandu", True),
            ("district", "kathmandu", False),
            ("party", "A", True),
            ("party", "B", False),
            ("gender", "Male", True),
            ("gender", "Female", False),
            ("constituency", 1, True),
            ("constituency", 2, False),
        ],
    )
    def test_exact_fields(self, field: str, value, expected: bool) -> None:
        assert matches(make_candidate(), FilterState(**{field: value})) is expected

    def test_qualification_compares_classified_tier(self) -> None:
        record = make_candidate(qualification="B.Sc. Agriculture")
        assert matches(record, FilterState(qualification="Bachelors"))
        assert not matches(record, FilterState(qualification="B.Sc. Agriculture"))

    def test_missing_qualification_is_other(self) -> None:
        record = make_candidate(qualification=None)
        assert matches(record, FilterState(qualification="Other"))

    def test_age_bounds_are_inclusive(self) -> None:
        record = make_candidate(age=40)
        assert matches(record, FilterState(age_min=40, age_max=40))
        assert not matches(record, FilterState(age_min=41))
        assert not matches(record, FilterState(age_max=39))

    def test_zero_age_min_is_a_constraint(self) -> None:
        assert not matches(make_candidate(age=None), FilterState(age_min=0))

    def test_missing_age_fails_age_bounds(self) -> None:
        record = make_candidate(age=None)
        assert not matches(record, FilterState(age_max=100))
        assert matches(record, FilterState())

    @pytest.mark.parametrize("text", ["ram", "RAM BAHADUR", "kathm", " a "])
    def test_search_matches_name_party_or_district(self, text: str) -> None:
        assert matches(make_candidate(), FilterState(search_text=text))

    def test_search_ignores_other_fields(self) -> None:
        record = make_candidate(symbol_name="Sun", province_name="Bagmati")
        assert not matches(record, FilterState(search_text="sun"))
        assert not matches(record, FilterState(search_text="bagmati"))

    def test_blank_search_is_no_constraint(self) -> None:
        assert matches(make_candidate(), FilterState(search_text="   "))

    def test_search_is_anded_with_other_fields(self) -> None:
        record = make_candidate(name="Ram", party_name="A")
        assert not matches(record, FilterState(search_text="ram", party="B"))
        assert matches(record, FilterState(search_text="ram", party="A"))

    def test_search_tolerates_missing_fields(self) -> None:
        record = make_candidate(party_name=None, district_name=None)
        assert not matches(record, FilterState(search_text="kathmandu"))


class TestFilterCandidates:
    def test_province_filter_keeps_order(self) -> None:
        records = make_scenario_candidates()
        result = filter_candidates(records, FilterState(province="Bagmati"))
        assert [r.id for r in result] == [1, 2]

    def test_empty_input(self) -> None:
        assert filter_candidates([], FilterState(province="Bagmati")) == []

    def test_no_match(self) -> None:
        records = make_scenario_candidates()
        assert filter_candidates(records, FilterState(party="Z")) == []


class TestCountActiveFilters:
    def test_empty(self) -> None:
        assert count_active_filters(FilterState()) == 0

    def test_search_text_not_counted(self) -> None:
        filters = FilterState(province="Bagmati", age_min=0, search_text="ram")
        assert count_active_filters(filters) == 2


class TestNormalizeSearchText:
    @pytest.mark.parametrize(
        "text,expected",
        [(None, None), ("", None), ("  ", None), (" Ram ", "ram")],
    )
    def test_normalize(self, text, expected) -> None:
        assert normalize_search_text(text) == expected
