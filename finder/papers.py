"""
Turn parsed PubMed records into paper-level results.

Each record is reduced to the authors whose affiliations are classified
commercial, the company name inferred for each of them, the first e-mail
address found in any affiliation, and the "pubmed" publication date.
Records without authors, or without any non-academic author, are dropped.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from .affiliations import KeywordConfig, extract_company_name, is_non_academic
from .authors import build_author_record
from .sources.data.models import UNKNOWN_DATE, PaperResult

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+")
PUBMED_STATUS = "pubmed"


class InvalidBatchError(TypeError):
    """Raised when the input is not a sequence of record mappings."""


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def resolve_publication_date(publication_history: Any) -> str:
    """
    Build a Year[-Month][-Day] date from the "pubmed" history entry.

    Returns "Unknown" when there is no such entry or it has no date parts.
    """
    for entry in _as_list(publication_history):
        if not isinstance(entry, Mapping) or entry.get("status") != PUBMED_STATUS:
            continue

        parts = [
            str(entry[key]).strip()
            for key in ("year", "month", "day")
            if entry.get(key) not in (None, "")
        ]
        return "-".join(parts) if parts else UNKNOWN_DATE

    return UNKNOWN_DATE


def find_email(affiliations) -> Optional[str]:
    """Return the first e-mail address found in the affiliation strings."""
    for affiliation in affiliations:
        match = EMAIL_PATTERN.search(affiliation)
        if match:
            return match.group(0)
    return None


def process_record(
    record: Mapping,
    keywords: Optional[KeywordConfig] = None
) -> Optional[PaperResult]:
    """
    Process one parsed PubMed record.

    Args:
        record: Mapping with pubmed_id, title, authors and publication_history
        keywords: Optional keyword configuration override

    Returns:
        PaperResult, or None when the record has no authors or no
        non-academic authors.
    """
    pubmed_id = str(record.get("pubmed_id") or "")
    authors = _as_list(record.get("authors"))

    if not authors:
        logger.debug(f"Skipping {pubmed_id or 'record'}: no authors")
        return None

    non_academic_authors = []
    company_affiliations = []
    corresponding_email = None

    for raw_author in authors:
        if not isinstance(raw_author, Mapping):
            continue

        author = build_author_record(raw_author)

        # First address in document order wins
        if corresponding_email is None:
            corresponding_email = find_email(author.affiliations)

        if is_non_academic(author.affiliations, keywords):
            non_academic_authors.append(author.display_name)
            company_affiliations.append(extract_company_name(author.affiliations, keywords))

    if not non_academic_authors:
        logger.debug(f"Skipping {pubmed_id or 'record'}: no non-academic authors")
        return None

    return PaperResult(
        pubmed_id=pubmed_id,
        title=str(record.get("title") or ""),
        publication_date=resolve_publication_date(record.get("publication_history")),
        non_academic_authors=non_academic_authors,
        company_affiliations=company_affiliations,
        corresponding_email=corresponding_email,
    )


def process_records(
    records: Sequence,
    keywords: Optional[KeywordConfig] = None
) -> List[PaperResult]:
    """
    Process a batch of parsed records, keeping only papers with company authors.

    Raises:
        InvalidBatchError: If records is not a sequence of mappings.
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
        raise InvalidBatchError(
            f"Expected a sequence of records, got {type(records).__name__}"
        )

    results = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidBatchError(
                f"Record {index} is a {type(record).__name__}, expected a mapping"
            )

        paper = process_record(record, keywords)
        if paper is not None:
            results.append(paper)

    logger.info(f"Kept {len(results)} of {len(records)} papers with company-affiliated authors")
    return results
