"""Candidate value object tests."""

import pytest

from election_portal.domain.value_objects.candidate import (
    FilterOptions,
    FilterState,
)


class TestFilterStateWithValue:
    def test_returns_new_instance(self) -> None:
        filters = FilterState()
        updated = filters.with_value("party", "A")

        assert updated.party == "A"
        assert filters.party is None

    @pytest.mark.parametrize("value", ["all", "", None])
    def test_all_means_no_constraint(self, value) -> None:
        filters = FilterState(party="A").with_value("party", value)
        assert filters.party is None

    def test_province_change_clears_district_and_constituency(self) -> None:
        filters = FilterState(province="Bagmati", district="Kathmandu", constituency=1)
        updated = filters.with_value("province", "Koshi")

        assert updated.province == "Koshi"
        assert updated.district is None
        assert updated.constituency is None

    def test_district_change_clears_constituency(self) -> None:
        filters = FilterState(province="Bagmati", district="Kathmandu", constituency=1)
        updated = filters.with_value("district", "Lalitpur")

        assert updated.province == "Bagmati"
        assert updated.constituency is None

    def test_same_value_keeps_dependents(self) -> None:
        filters = FilterState(province="Bagmati", district="Kathmandu")
        assert filters.with_value("province", "Bagmati") == filters

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError, match="Unknown filter field"):
            FilterState().with_value("symbol", "Tree")

    def test_hashable(self) -> None:
        assert hash(FilterState(party="A")) == hash(FilterState(party="A"))


class TestFilterStateRevalidate:
    def test_invalid_district_cleared(self) -> None:
        filters = FilterState(province="Koshi", district="Kathmandu", constituency=1)
        options = FilterOptions(districts=["Morang"], constituencies=[1])

        revalidated = filters.revalidate(options)

        assert revalidated.district is None
        assert revalidated.constituency is None
        assert revalidated.province == "Koshi"

    def test_invalid_constituency_cleared(self) -> None:
        filters = FilterState(district="Kathmandu", constituency=9)
        options = FilterOptions(districts=["Kathmandu"], constituencies=[1, 2])

        assert filters.revalidate(options).constituency is None

    def test_valid_state_unchanged(self) -> None:
        filters = FilterState(district="Kathmandu", constituency=1)
        options = FilterOptions(districts=["Kathmandu"], constituencies=[1])

        assert filters.revalidate(options) is filters
