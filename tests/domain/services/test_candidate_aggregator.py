"""Candidate aggregation tests."""

import random

from election_portal.domain.services.candidate_aggregator import (
    aggregate,
    summarize,
    top_counts,
)
from election_portal.domain.services.candidate_filter import filter_candidates
from election_portal.domain.services.classification_tables import (
    AGE_BRACKETS,
    QUALIFICATION_HIERARCHY,
)
from election_portal.domain.value_objects.candidate import FilterState
from tests.fixtures.candidate_factories import (
    make_candidate,
    make_scenario_candidates,
)


class TestAggregate:
    def test_scenario_without_filters(self) -> None:
        stats = aggregate(make_scenario_candidates())

        assert stats.total == 3
        assert stats.by_party == {"A": 2, "B": 1}
        assert stats.by_gender == {"Male": 2, "Female": 1}
        assert stats.by_province == {"Bagmati": 2, "Koshi": 1}
        assert stats.by_district == {"Kathmandu": 2, "Morang": 1}
        assert stats.by_qualification["Bachelors"] == 1
        assert stats.by_qualification["SLC/SEE"] == 1
        assert stats.by_qualification["Other"] == 1
        assert sum(stats.by_qualification.values()) == 3
        assert stats.by_age_group["25-35"] == 1
        assert stats.by_age_group["66+"] == 1
        assert stats.by_age_group["18-24"] == 1

    def test_scenario_filtered_by_province(self) -> None:
        records = filter_candidates(
            make_scenario_candidates(), FilterState(province="Bagmati")
        )
        stats = aggregate(records)

        assert stats.total == 2
        assert stats.by_party == {"A": 2}

    def test_empty_input(self) -> None:
        stats = aggregate([])

        assert stats.total == 0
        assert stats.by_party == {}
        assert stats.by_province == {}
        assert stats.by_district == {}
        assert stats.by_gender == {}
        assert stats.by_qualification == dict.fromkeys(QUALIFICATION_HIERARCHY, 0)
        assert stats.by_age_group == {b.label: 0 for b in AGE_BRACKETS}

    def test_tier_and_bracket_keys_in_display_order(self) -> None:
        stats = aggregate([make_candidate()])
        assert tuple(stats.by_qualification) == QUALIFICATION_HIERARCHY
        assert tuple(stats.by_age_group) == tuple(b.label for b in AGE_BRACKETS)

    def test_missing_fields_are_not_grouped(self) -> None:
        record = make_candidate(
            party_name=None,
            province_name=None,
            district_name=None,
            gender=None,
            age=None,
        )
        stats = aggregate([record, make_candidate(id=2)])

        assert stats.total == 2
        assert sum(stats.by_party.values()) == 1
        assert sum(stats.by_province.values()) == 1
        assert sum(stats.by_district.values()) == 1
        assert sum(stats.by_gender.values()) == 1
        assert sum(stats.by_age_group.values()) == 1
        assert sum(stats.by_qualification.values()) == 2

    def test_out_of_range_age_dropped(self) -> None:
        stats = aggregate([make_candidate(age=150), make_candidate(age=-3)])
        assert stats.total == 2
        assert sum(stats.by_age_group.values()) == 0

    def test_idempotent(self) -> None:
        records = make_scenario_candidates()
        filters = FilterState(gender="Male")
        first = aggregate(filter_candidates(records, filters))
        second = aggregate(filter_candidates(records, filters))
        assert first == second

    def test_order_independent(self) -> None:
        records = make_scenario_candidates() * 5
        shuffled = list(records)
        random.Random(42).shuffle(shuffled)
        assert aggregate(records) == aggregate(shuffled)

    def test_accepts_generator(self) -> None:
        stats = aggregate(r for r in make_scenario_candidates())
        assert stats.total == 3


class TestTopCounts:
    def test_sorted_by_count_then_key(self) -> None:
        counts = {"B": 2, "A": 2, "C": 5, "D": 1}
        assert top_counts(counts) == [("C", 5), ("A", 2), ("B", 2), ("D", 1)]

    def test_limit(self) -> None:
        counts = {"B": 2, "A": 2, "C": 5}
        assert top_counts(counts, 2) == [("C", 5), ("A", 2)]

    def test_negative_limit_is_empty(self) -> None:
        assert top_counts({"A": 1}, -1) == []


class TestSummarize:
    def test_distinct_counts(self) -> None:
        summary = summarize(aggregate(make_scenario_candidates()))
        assert summary.total == 3
        assert summary.parties == 2
        assert summary.districts == 2
        assert summary.provinces == 2
