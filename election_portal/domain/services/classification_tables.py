"""Static classification tables for the candidate dataset.

Education tiers, age brackets and the party display priority are
process-wide constants. They are bundled in ``ClassificationTables`` and
passed to the classification functions so that tests can inject their own.
"""

from __future__ import annotations

from dataclasses import dataclass


# === Education tier labels (highest credential first) ===

TIER_PHD = "Ph.D/M.Phil"
TIER_MASTERS = "Masters"
TIER_BACHELORS = "Bachelors"
TIER_PLUS_TWO = "+2/Diploma"
TIER_SLC = "SLC/SEE"
TIER_BELOW_SLC = "Below SLC"
TIER_LITERATE = "Literate"
TIER_OTHER = "Other"

QUALIFICATION_HIERARCHY: tuple[str, ...] = (
    TIER_PHD,
    TIER_MASTERS,
    TIER_BACHELORS,
    TIER_PLUS_TWO,
    TIER_SLC,
    TIER_BELOW_SLC,
    TIER_LITERATE,
    TIER_OTHER,
)


@dataclass(frozen=True)
class EducationTier:
    """An education tier and the lowercase substrings that identify it."""

    label: str
    keywords: frozenset[str]


@dataclass(frozen=True)
class AgeBracket:
    """Inclusive ``[min_age, max_age]`` age range with a display label."""

    label: str
    min_age: int
    max_age: int

    def contains(self, age: float) -> bool:
        return self.min_age <= age <= self.max_age


# === Education keywords ===
# Matching order differs from the hierarchy: a tier whose keywords are
# substrings of another tier's keywords must be tested after it
# ("स्नातक" ⊂ "स्नातकोत्तर", "slc" ⊂ "below slc", "माध्यमिक" ⊂ "उच्च माध्यमिक").
# Text is matched with a space on each side, so a keyword padded with
# spaces only matches a whole word (" see " but not "overseer").

_PHD_KEYWORDS = frozenset(
    {
        "ph.d",
        "ph. d",
        "phd",
        "doctorate",
        "m.phil",
        "mphil",
        "विद्यावारिधि",
        "पीएचडी",
        "पिएचडी",
        "एमफिल",
        "एम.फिल",
    }
)

_MASTERS_KEYWORDS = frozenset(
    {
        "master",
        "post graduate",
        "postgraduate",
        "m.a",
        "m.sc",
        "msc",
        "m.b.a",
        "mba",
        "m.com",
        "mcom",
        "m.ed",
        "llm",
        "l.l.m",
        "स्नातकोत्तर",
        "एम.ए",
        "एमए",
        "एम.एस्सी",
        "एमबिए",
        "एम.बि.ए",
    }
)

_BACHELORS_KEYWORDS = frozenset(
    {
        "bachelor",
        "graduate",
        "b.a",
        "b.sc",
        "bsc",
        "b.b.a",
        "bba",
        "b.com",
        "bcom",
        "b.ed",
        "llb",
        "l.l.b",
        "mbbs",
        "b.e.",
        "स्नातक",
        "बि.ए",
        "बी.ए",
        "बिए",
        "बीए",
        "बि.एड",
        "एमबिबिएस",
    }
)

_PLUS_TWO_KEYWORDS = frozenset(
    {
        "+2",
        "plus two",
        "plus 2",
        "intermediate",
        "i.a",
        "i.sc",
        "i.com",
        "diploma",
        "overseer",
        "pcl",
        "proficiency certificate",
        "higher secondary",
        "hseb",
        "+२",
        "उच्च माध्यमिक",
        "प्रवीणता प्रमाणपत्र",
        "प्रमाणपत्र तह",
        "डिप्लोमा",
        "कक्षा १२",
        "१२ कक्षा",
    }
)

_BELOW_SLC_KEYWORDS = frozenset(
    {
        "below slc",
        "under slc",
        "non slc",
        "non-slc",
        "pre slc",
        "class 8",
        "grade 8",
        "8 pass",
        "lower secondary",
        "primary",
        "एसएलसी भन्दा कम",
        "निम्न माध्यमिक",
        "प्राथमिक",
        "कक्षा ८",
        "८ कक्षा",
    }
)

_SLC_KEYWORDS = frozenset(
    {
        "slc",
        "s.l.c",
        " see ",
        "(see)",
        "s.e.e",
        "class 10",
        "grade 10",
        "10 pass",
        "matric",
        "school leaving",
        "एसएलसी",
        "एस.एल.सी",
        "एसईई",
        "एस.ई.ई",
        "माध्यमिक शिक्षा",
        "कक्षा १०",
        "१० कक्षा",
    }
)

# Negations of the literate keywords, resolved to Other before Literate
_ILLITERATE_KEYWORDS = frozenset(
    {
        "illiterate",
        "non-literate",
        "non literate",
        "not literate",
        "निरक्षर",
    }
)

_LITERATE_KEYWORDS = frozenset(
    {
        "literate",
        "literacy",
        "read and write",
        "read & write",
        "informal",
        "साक्षर",
        "अनौपचारिक",
    }
)

# Matching order, first match wins.
EDUCATION_TIERS: tuple[EducationTier, ...] = (
    EducationTier(TIER_PHD, _PHD_KEYWORDS),
    EducationTier(TIER_MASTERS, _MASTERS_KEYWORDS),
    EducationTier(TIER_BACHELORS, _BACHELORS_KEYWORDS),
    EducationTier(TIER_PLUS_TWO, _PLUS_TWO_KEYWORDS),
    EducationTier(TIER_BELOW_SLC, _BELOW_SLC_KEYWORDS),
    EducationTier(TIER_SLC, _SLC_KEYWORDS),
    EducationTier(TIER_OTHER, _ILLITERATE_KEYWORDS),
    EducationTier(TIER_LITERATE, _LITERATE_KEYWORDS),
)

# === Age brackets ===
# House of Representatives candidates must be at least 25; the 18-24 bracket
# catches data entry errors instead of dropping them.
AGE_BRACKETS: tuple[AgeBracket, ...] = (
    AgeBracket("18-24", 18, 24),
    AgeBracket("25-35", 25, 35),
    AgeBracket("36-45", 36, 45),
    AgeBracket("46-55", 46, 55),
    AgeBracket("56-65", 56, 65),
    AgeBracket("66+", 66, 120),
)

# === Party display priority ===
# Only affects the order of the party filter options.
PARTY_PRIORITY: tuple[str, ...] = (
    "नेपाली काँग्रेस",
    "Nepali Congress",
    "नेपाल कम्युनिष्ट पार्टी (एकीकृत मार्क्सवादी लेनिनवादी)",
    "CPN (UML)",
    "नेपाल कम्युनिष्ट पार्टी (माओवादी केन्द्र)",
    "CPN (Maoist Center)",
    "राष्ट्रिय स्वतन्त्र पार्टी",
    "Rastriya Swatantra Party",
    "राष्ट्रिय प्रजातन्त्र पार्टी",
    "Rastriya Prajatantra Party",
    "जनता समाजवादी पार्टी, नेपाल",
    "जनमत पार्टी",
    "लोकतान्त्रिक समाजवादी पार्टी, नेपाल",
    "नागरिक उन्मुक्ति पार्टी",
    "स्वतन्त्र",
)

# Abbreviations used on chart axes
PARTY_SHORT_NAMES: dict[str, str] = {
    "नेपाली काँग्रेस": "कांग्रेस",
    "नेपाल कम्युनिष्ट पार्टी (एकीकृत मार्क्सवादी लेनिनवादी)": "एमाले",
    "नेपाल कम्युनिष्ट पार्टी (माओवादी केन्द्र)": "माओवादी",
    "राष्ट्रिय स्वतन्त्र पार्टी": "रा.स्व.पा",
    "राष्ट्रिय प्रजातन्त्र पार्टी": "राप्रपा",
    "जनता समाजवादी पार्टी, नेपाल": "जसपा",
    "जनमत पार्टी": "जनमत",
    "स्वतन्त्र": "स्वतन्त्र",
    "लोकतान्त्रिक समाजवादी पार्टी, नेपाल": "लोसपा",
    "नागरिक उन्मुक्ति पार्टी": "नागरिक",
    "राष्ट्रिय प्रजातन्त्र पार्टी (एकीकृत)": "राप्रपा एकीकृत",
}

_SHORT_NAME_MAX_LENGTH = 15


@dataclass(frozen=True)
class ClassificationTables:
    """All static lookup tables used by the classification functions."""

    education_tiers: tuple[EducationTier, ...]
    """Tiers in matching order (first match wins)."""
    qualification_hierarchy: tuple[str, ...]
    """Tier labels in display order, highest credential first."""
    fallback_tier: str
    age_brackets: tuple[AgeBracket, ...]
    party_priority: tuple[str, ...]

    @property
    def age_bracket_labels(self) -> tuple[str, ...]:
        return tuple(bracket.label for bracket in self.age_brackets)


DEFAULT_TABLES = ClassificationTables(
    education_tiers=EDUCATION_TIERS,
    qualification_hierarchy=QUALIFICATION_HIERARCHY,
    fallback_tier=TIER_OTHER,
    age_brackets=AGE_BRACKETS,
    party_priority=PARTY_PRIORITY,
)


def short_party_name(full_name: str) -> str:
    """Return the chart label for a party: a known abbreviation or a prefix."""
    return PARTY_SHORT_NAMES.get(full_name, full_name[:_SHORT_NAME_MAX_LENGTH])
