"""
Keyword-based classification of author affiliations.

An affiliation string is tagged academic, commercial or unclassified by
case-insensitive substring matching against two keyword lists. Academic
matches always take precedence: a string such as "Oncology Institute" is
academic even though it contains a commercial cue word.

For authors deemed non-academic, a best-effort company name is pulled out of
their affiliation text with one capitalised-phrase pattern per commercial
keyword, falling back to the text before the first comma.
"""

import re
from enum import Enum
from functools import lru_cache
from typing import List, NamedTuple, Optional, Sequence, Tuple

from pydantic import BaseModel, field_validator

from config.keywords import ACADEMIC_KEYWORDS, COMMERCIAL_KEYWORDS

UNKNOWN_COMPANY = "Unknown Company"

# Capitalised word: an uppercase letter followed by at least one name character
_CAP_WORD = r"[A-Z][A-Za-z0-9.-]+"


class Classification(Enum):
    """Classification of a single affiliation string."""
    ACADEMIC = "academic"
    COMMERCIAL = "commercial"
    UNCLASSIFIED = "unclassified"


class KeywordConfig(BaseModel):
    """Academic and commercial keyword lists, matched case-insensitively."""

    academic_keywords: Tuple[str, ...] = ACADEMIC_KEYWORDS
    commercial_keywords: Tuple[str, ...] = COMMERCIAL_KEYWORDS

    @field_validator("academic_keywords", "commercial_keywords", mode="before")
    @classmethod
    def _normalize_keywords(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        elif isinstance(value, (set, frozenset)):
            # Pattern order must not depend on hash order
            value = sorted(value)
        return tuple(k.strip().lower() for k in value if k and k.strip())

    @classmethod
    def from_settings(cls, app_settings=None) -> "KeywordConfig":
        """Build the keyword configuration from application settings."""
        if app_settings is None:
            from config.settings import settings as app_settings

        return cls(
            academic_keywords=app_settings.academic_keywords,
            commercial_keywords=app_settings.commercial_keywords,
        )


DEFAULT_KEYWORDS = KeywordConfig()


class NormalizedAffiliation(NamedTuple):
    """Raw and matching forms of one affiliation string."""
    raw: str
    text: str
    lowered: str

    def contains_any(self, keywords: Sequence[str]) -> bool:
        return any(keyword in self.lowered for keyword in keywords)


def normalize_affiliation(affiliation: Optional[str]) -> NormalizedAffiliation:
    """Expose the stripped and lower-cased forms of an affiliation string."""
    raw = affiliation or ""
    text = raw.strip()
    return NormalizedAffiliation(raw=raw, text=text, lowered=text.lower())


def classify_affiliation(
    affiliation: str,
    keywords: Optional[KeywordConfig] = None
) -> Classification:
    """
    Classify one affiliation string.

    Args:
        affiliation: Raw affiliation text
        keywords: Keyword configuration (defaults to the built-in lists)

    Returns:
        ACADEMIC if any academic keyword matches, otherwise COMMERCIAL if any
        commercial keyword matches, otherwise UNCLASSIFIED.
    """
    keywords = keywords or DEFAULT_KEYWORDS
    normalized = normalize_affiliation(affiliation)

    if normalized.contains_any(keywords.academic_keywords):
        return Classification.ACADEMIC
    if normalized.contains_any(keywords.commercial_keywords):
        return Classification.COMMERCIAL
    return Classification.UNCLASSIFIED


def is_non_academic(
    affiliations: Sequence[str],
    keywords: Optional[KeywordConfig] = None
) -> bool:
    """Check whether at least one affiliation is classified commercial."""
    return any(
        classify_affiliation(affiliation, keywords) is Classification.COMMERCIAL
        for affiliation in affiliations
    )


@lru_cache(maxsize=32)
def company_patterns(commercial_keywords: Tuple[str, ...]) -> List[re.Pattern]:
    """
    Compile one company-name pattern per commercial keyword, in list order.

    Each pattern looks for an optional capitalised word, an optional keyword,
    a required capitalised word and an optional trailing keyword. Keywords
    match case-insensitively; the capitalised words do not.
    """
    patterns = []
    for keyword in commercial_keywords:
        kw = f"(?i:{re.escape(keyword)})"
        patterns.append(re.compile(
            rf"(?:{_CAP_WORD}\s+)?(?:{kw}\s+)?{_CAP_WORD}(?:\s+{kw})?"
        ))
    return patterns


def _extract_from_affiliation(affiliation: str, patterns: List[re.Pattern]) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(affiliation)
        if match:
            return match.group(0).strip()

    if "," in affiliation:
        before_comma = affiliation.split(",", 1)[0].strip()
        if before_comma:
            return before_comma

    return None


def extract_company_name(
    affiliations: Sequence[str],
    keywords: Optional[KeywordConfig] = None
) -> str:
    """
    Extract a best-effort company name from an author's affiliations.

    Academic affiliations are skipped. The first non-academic affiliation
    that yields a pattern match or a non-empty text before its first comma
    decides the result.

    Args:
        affiliations: The author's affiliation strings, in document order
        keywords: Keyword configuration (defaults to the built-in lists)

    Returns:
        The extracted name, "" for an empty affiliation list, or
        "Unknown Company" when nothing could be extracted.
    """
    if not affiliations:
        return ""

    keywords = keywords or DEFAULT_KEYWORDS
    patterns = company_patterns(keywords.commercial_keywords)

    for affiliation in affiliations:
        if classify_affiliation(affiliation, keywords) is Classification.ACADEMIC:
            continue

        company = _extract_from_affiliation(affiliation, patterns)
        if company:
            return company

    return UNKNOWN_COMPANY
