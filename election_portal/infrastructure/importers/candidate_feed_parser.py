"""Election Commission candidate feed parser.

Converts the loosely typed rows of the public candidates JSON
(ElectionResultCentral2082.txt) into CandidateRecord value objects.

Feed row example::

    {
        "CandidateID": 339610,
        "CandidateName": "...",
        "AGE_YR": 52,
        "Gender": "पुरुष",
        "PoliticalPartyName": "नेपाली काँग्रेस",
        "SymbolName": "रुख",
        "DistrictName": "काठमाडौं",
        "StateName": "बागमती प्रदेश",
        "ConstName": 1,
        "QUALIFICATION": "स्नातकोत्तर"
    }
"""

import logging
import math

from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import Field

from election_portal.domain.value_objects.candidate import CandidateRecord


logger = logging.getLogger(__name__)

# Devanagari digits appear in hand-entered numeric fields
_DEVANAGARI_DIGITS = str.maketrans("०१२३४५६७८९", "0123456789")

# Display name for rows whose CandidateName is blank
UNNAMED_CANDIDATE = "Unnamed candidate"


class CandidateFeedRow(PydanticBaseModel):
    """One raw row of the candidates feed.

    Every field is optional and untyped; conversion and validation happen in
    CandidateFeedParser so that a malformed field never rejects the row.
    """

    model_config = {"populate_by_name": True, "extra": "ignore"}

    candidate_id: Any = Field(default=None, alias="CandidateID")
    candidate_name: Any = Field(default=None, alias="CandidateName")
    party_name: Any = Field(default=None, alias="PoliticalPartyName")
    state_name: Any = Field(default=None, alias="StateName")
    district_name: Any = Field(default=None, alias="DistrictName")
    const_name: Any = Field(default=None, alias="ConstName")
    gender: Any = Field(default=None, alias="Gender")
    age: Any = Field(default=None, alias="AGE_YR")
    qualification: Any = Field(default=None, alias="QUALIFICATION")
    symbol_name: Any = Field(default=None, alias="SymbolName")


class CandidateFeedParser:
    """Normalizes raw feed payloads into CandidateRecord lists."""

    @staticmethod
    def extract_rows(payload: Any) -> list[Any] | None:
        """Return the row list of a payload.

        Accepts a bare JSON list or the portal backend envelope
        ``{"success": true, "data": [...]}``.

        Returns:
            Row list, or None if the payload has neither shape
        """
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            return payload["data"]
        return None

    def parse_payload(self, payload: Any) -> list[CandidateRecord]:
        """Parse a decoded JSON payload into candidate records."""
        rows = self.extract_rows(payload)
        if rows is None:
            logger.warning("Unexpected candidate payload type: %s", type(payload))
            return []
        return self.parse_rows(rows)

    def parse_rows(self, rows: list[Any]) -> list[CandidateRecord]:
        """Parse feed rows, skipping only rows that are not objects.

        Args:
            rows: Raw rows from the feed

        Returns:
            Candidate records in feed order
        """
        records: list[CandidateRecord] = []
        skipped = 0
        for i, row in enumerate(rows):
            try:
                records.append(self.parse_row(row, index=i))
            except ValueError as e:
                skipped += 1
                logger.warning("Skipping candidate row %d: %s", i, e)

        logger.info(
            "Parsed %d candidate records (%d rows skipped)", len(records), skipped
        )
        return records

    def parse_row(self, row: Any, index: int = 0) -> CandidateRecord:
        """Convert one feed row into a CandidateRecord.

        A row without a usable CandidateID gets the negative id
        ``-(index + 1)``, which cannot collide with feed ids; a row without a
        name gets UNNAMED_CANDIDATE. Both are still counted.

        Args:
            row: Raw feed row
            index: Position of the row in the feed

        Raises:
            ValueError: If the row is not an object
        """
        if not isinstance(row, dict):
            raise ValueError(f"row is not an object: {type(row).__name__}")

        feed_row = CandidateFeedRow.model_validate(row)

        candidate_id = _to_int(feed_row.candidate_id)
        if candidate_id is None:
            candidate_id = -(index + 1)
            logger.warning(
                "Candidate row %d has no usable CandidateID (%r), using %d",
                index,
                feed_row.candidate_id,
                candidate_id,
            )
        name = _to_text(feed_row.candidate_name)
        if name is None:
            name = UNNAMED_CANDIDATE
            logger.warning("Candidate %d has no CandidateName", candidate_id)

        constituency_id = _to_int(feed_row.const_name)
        if constituency_id is not None and constituency_id <= 0:
            constituency_id = None

        return CandidateRecord(
            id=candidate_id,
            name=name,
            party_name=_to_text(feed_row.party_name),
            province_name=_to_text(feed_row.state_name),
            district_name=_to_text(feed_row.district_name),
            constituency_id=constituency_id,
            gender=_to_text(feed_row.gender),
            age=_to_int(feed_row.age),
            qualification=_to_text(feed_row.qualification),
            symbol_name=_to_text(feed_row.symbol_name),
        )


def _to_text(value: Any) -> str | None:
    """Stripped string, None for missing or blank values."""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _to_int(value: Any) -> int | None:
    """Integer value of a number or numeric string, None otherwise."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip().translate(_DEVANAGARI_DIGITS)
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if math.isfinite(number) else None
    return None
