from typing import Any

from election_portal.domain.value_objects.candidate import CandidateRecord


def make_candidate(**overrides: Any) -> CandidateRecord:
    defaults: dict[str, Any] = {
        "id": 1,
        "name": "Ram Bahadur",
        "party_name": "A",
        "province_name": "Bagmati",
        "district_name": "Kathmandu",
        "constituency_id": 1,
        "gender": "Male",
        "age": 40,
        "qualification": "Bachelor",
        "symbol_name": "Tree",
    }
    defaults.update(overrides)
    return CandidateRecord(**defaults)


def make_scenario_candidates() -> list[CandidateRecord]:
    """Three candidates across two provinces and parties."""
    return [
        make_candidate(
            id=1,
            name="Sita Sharma",
            party_name="A",
            province_name="Bagmati",
            district_name="Kathmandu",
            gender="Male",
            age=35,
            qualification="Bachelor's degree",
        ),
        make_candidate(
            id=2,
            name="Gita Thapa",
            party_name="A",
            province_name="Bagmati",
            district_name="Kathmandu",
            gender="Female",
            age=70,
            qualification="SLC",
        ),
        make_candidate(
            id=3,
            name="Hari Rai",
            party_name="B",
            province_name="Koshi",
            district_name="Morang",
            constituency_id=2,
            gender="Male",
            age=22,
            qualification="",
        ),
    ]


def make_feed_row(**overrides: Any) -> dict[str, Any]:
    """One row as served by the Election Commission feed."""
    defaults: dict[str, Any] = {
        "CandidateID": 339610,
        "CandidateName": "राम बहादुर",
        "AGE_YR": 52,
        "Gender": "पुरुष",
        "PoliticalPartyName": "नेपाली काँग्रेस",
        "SymbolName": "रुख",
        "DistrictName": "काठमाडौं",
        "StateName": "बागमती प्रदेश",
        "ConstName": 1,
        "QUALIFICATION": "स्नातकोत्तर",
        "SCConstID": 1,
    }
    defaults.update(overrides)
    return defaults
